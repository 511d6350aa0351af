# -*- coding: utf-8 -*-
from typing import Callable, Dict, List, Optional, Tuple

# Record shape modules implement this interface:
# TYPE_CODE: str  -> "PI", "PF", "DB" ... (section + subsection, "DV" for VHF navaids)
# SELECTED_TYPE: Tuple[str,str] -> ("P","I") (Section/Subsection), the dispatch key
# COLS: List[(name, (start,end))] -> 1-based inclusive column ranges; a shape
#       always starts with the shared header columns and ends with the
#       file record number / cycle date trailer
# postprocess_row(row: Dict[str,str]) -> None -> shape specific cleanup (strip identifiers)

Column = Tuple[str, Tuple[int, int]]
Cols = List[Column]
Row = Dict[str, str]
PostProcess = Optional[Callable[[Row], None]]


def strip_fields(row: Row, *keys: str) -> None:
    """Strip padding from left-justified identifier fields.

    Only identifiers are stripped; coordinates and numeric fields keep their
    raw width so the row encodes back to the same bytes.
    """
    for key in keys:
        if row.get(key):
            row[key] = row[key].strip()
