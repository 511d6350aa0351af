# -*- coding: utf-8 -*-
# DB: NDB NAVAID
from arinc_enhance.types import record
from arinc_enhance.types.base_type import Cols, Row, strip_fields

TYPE_CODE = "DB"
SELECTED_TYPE = ("D", "B")

COLS: Cols = record.HEADER_COLS + [
    ("subsection_code", (6, 6)),
    ("airport_icao", (7, 10)),
    ("icao_code", (11, 12)),
    ("ndb_identifier", (14, 17)),
    ("ndb_icao_code", (20, 21)),
    ("continuation_record_number", (22, 22)),
    ("ndb_frequency", (23, 27)),
    ("ndb_class", (28, 32)),
    ("ndb_latitude", (33, 41)),
    ("ndb_longitude", (42, 51)),
    ("magnetic_variation", (75, 79)),
    ("datum_code", (91, 93)),
    ("ndb_name", (94, 123)),
] + record.TRAILER_COLS


def postprocess_row(row: Row) -> None:
    strip_fields(row, "ndb_identifier", "airport_icao")


def has_position(row: Row) -> bool:
    return bool(row.get("ndb_latitude", "").strip()) and bool(row.get("ndb_longitude", "").strip())
