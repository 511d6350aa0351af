# -*- coding: utf-8 -*-
# PF: Airport approach procedure leg (SID/STAR/Approach primary layout)
from arinc_enhance.types import airport, record
from arinc_enhance.types.base_type import Cols, Row, strip_fields

TYPE_CODE = "PF"
SELECTED_TYPE = ("P", "F")

# First character of the procedure identifier
APPROACH_TYPE_LABELS = {
    "I": "ILS",
    "L": "LOC",
    "U": "SDF",
    "X": "LDA",
}

FINAL_APPROACH_FIX = "F"

COLS: Cols = airport.PREFIX_COLS + [
    ("procedure_identifier", (14, 19)),
    ("route_type", (20, 20)),
    ("transition_identifier", (21, 25)),
    ("sequence_number", (27, 29)),
    ("fix_identifier", (30, 34)),
    ("fix_icao_code", (35, 36)),
    ("fix_section_code", (37, 37)),
    ("fix_subsection_code", (38, 38)),
    ("continuation_record_number", (39, 39)),
    ("waypoint_description_code", (40, 43)),
    ("turn_direction", (44, 44)),
    ("rnp", (45, 47)),
    ("path_and_termination", (48, 49)),
    ("turn_direction_valid", (50, 50)),
    ("recommended_navaid", (51, 54)),
    ("recommended_navaid_icao_code", (55, 56)),
    ("arc_radius", (57, 62)),
    ("theta", (63, 66)),
    ("rho", (67, 70)),
    ("magnetic_course", (71, 74)),
    ("route_holding_distance_time", (75, 78)),
    ("recommended_navaid_section", (79, 79)),
    ("recommended_navaid_subsection", (80, 80)),
    ("altitude_description", (83, 83)),
    ("atc_indicator", (84, 84)),
    ("altitude_1", (85, 89)),
    ("altitude_2", (90, 94)),
    ("transition_altitude", (95, 99)),
    ("speed_limit", (100, 102)),
    ("vertical_angle", (103, 106)),
    ("center_fix_or_taa_sector", (107, 111)),
    ("multiple_code_or_taa_sector", (112, 112)),
    ("center_fix_icao_code", (113, 114)),
    ("center_fix_section_code", (115, 115)),
    ("center_fix_subsection_code", (116, 116)),
    ("gps_fms_indication", (117, 117)),
    ("speed_limit_description", (118, 118)),
    ("approach_route_qualifier_1", (119, 119)),
    ("approach_route_qualifier_2", (120, 120)),
] + record.TRAILER_COLS


def postprocess_row(row: Row) -> None:
    strip_fields(row, "airport_identifier", "icao_code", "procedure_identifier",
                 "transition_identifier", "fix_identifier", "recommended_navaid")


def is_localizer_front_course_approach(row: Row) -> bool:
    """True for ILS, LOC, SDF and LDA procedures."""
    ident = row.get("procedure_identifier", "")
    return bool(ident) and ident[0] in APPROACH_TYPE_LABELS


def is_final_approach_fix(row: Row) -> bool:
    desc = row.get("waypoint_description_code", "")
    return len(desc) >= 4 and desc[3] == FINAL_APPROACH_FIX
