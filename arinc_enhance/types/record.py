# -*- coding: utf-8 -*-
# Generic record: columns shared by every ARINC 424 line (not a dispatched shape)
from arinc_enhance.types.base_type import Cols


HEADER_COLS: Cols = [
    ("record_type", (1, 1)),
    ("customer_area_code", (2, 4)),
    ("section_code", (5, 5)),
]

TRAILER_COLS: Cols = [
    ("file_record_number", (124, 128)),
    ("cycle_date", (129, 132)),
]

COLS: Cols = HEADER_COLS + [
    ("subsection_code", (6, 6)),
    ("data", (7, 123)),
] + TRAILER_COLS
