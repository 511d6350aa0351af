# -*- coding: utf-8 -*-
# DV: VHF NAVAID
from arinc_enhance.types import record
from arinc_enhance.types.base_type import Cols, Row, strip_fields

TYPE_CODE = "DV"
SELECTED_TYPE = ("D", " ")

COLS: Cols = record.HEADER_COLS + [
    ("subsection_code", (6, 6)),
    ("airport_icao", (7, 10)),
    ("icao_code", (11, 12)),
    ("vor_identifier", (14, 17)),
    ("navaid_icao_code", (20, 21)),
    ("continuation_record_number", (22, 22)),
    ("vor_frequency", (23, 27)),
    ("navaid_class", (28, 32)),
    ("vor_latitude", (33, 41)),
    ("vor_longitude", (42, 51)),
    ("dme_ident", (52, 55)),
    ("dme_latitude", (56, 64)),
    ("dme_longitude", (65, 74)),
    ("station_declination", (75, 79)),
    ("dme_elevation", (80, 84)),
    ("figure_of_merit", (85, 85)),
    ("ils_dme_bias", (86, 87)),
    ("frequency_protection", (88, 90)),
    ("datum_code", (91, 93)),
    ("vor_name", (94, 123)),
] + record.TRAILER_COLS


def postprocess_row(row: Row) -> None:
    # Strip padding from common textual fields for readability.
    strip_fields(row, "vor_identifier", "airport_icao")


def has_vor_position(row: Row) -> bool:
    # DME-only and NDB/DME facilities leave the VOR position blank.
    return bool(row.get("vor_latitude", "").strip()) and bool(row.get("vor_longitude", "").strip())
