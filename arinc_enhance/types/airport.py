# -*- coding: utf-8 -*-
# PA: Airport header; its leading columns are shared by every airport (P) record
from arinc_enhance.types import record
from arinc_enhance.types.base_type import Cols, Row, strip_fields

TYPE_CODE = "PA"

PREFIX_COLS: Cols = record.HEADER_COLS + [
    ("blank_6", (6, 6)),
    ("airport_identifier", (7, 10)),
    ("icao_code", (11, 12)),
    ("subsection_code", (13, 13)),
]

COLS: Cols = PREFIX_COLS + record.TRAILER_COLS


def postprocess_row(row: Row) -> None:
    strip_fields(row, "airport_identifier", "icao_code")
