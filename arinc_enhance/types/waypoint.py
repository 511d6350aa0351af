# -*- coding: utf-8 -*-
# PC / EA: Terminal and enroute waypoint primary records (same layout)
from arinc_enhance.types import record
from arinc_enhance.types.base_type import Cols, Row, strip_fields

TYPE_CODE = "PC"
SELECTED_TYPE = ("P", "C")
ENROUTE_TYPE_CODE = "EA"
ENROUTE_SELECTED_TYPE = ("E", "A")

COLS: Cols = record.HEADER_COLS + [
    ("enroute_subsection_code", (6, 6)),
    ("region_code", (7, 10)),
    ("icao_code", (11, 12)),
    ("subsection_code", (13, 13)),
    ("waypoint_identifier", (14, 18)),
    ("waypoint_icao_code", (20, 21)),
    ("continuation_record_number", (22, 22)),
    ("waypoint_type", (27, 29)),
    ("waypoint_usage", (30, 31)),
    ("waypoint_latitude", (33, 41)),
    ("waypoint_longitude", (42, 51)),
    ("magnetic_variation", (75, 79)),
    ("datum_code", (85, 87)),
    ("name_format_indicator", (96, 98)),
    ("waypoint_name", (99, 123)),
] + record.TRAILER_COLS


def postprocess_row(row: Row) -> None:
    strip_fields(row, "region_code", "icao_code", "waypoint_identifier")
