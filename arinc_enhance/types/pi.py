# -*- coding: utf-8 -*-
# PI: Localizer / Glide Slope primary and simulation continuation records
from arinc_enhance.types import airport, record
from arinc_enhance.types.base_type import Cols, Row, strip_fields

TYPE_CODE = "PI"
SELECTED_TYPE = ("P", "I")

CONTINUATION_PRIMARY = "1"
CONTINUATION_SIMULATION_NUMBER = "2"
APPLICATION_TYPE_SIMULATION = "S"
BEARING_SOURCE_NOT_GOVT = "N"

# ILS category codes for LDA facilities, with and without glide slope.
LDA_ILS_CATEGORIES = ("A", "L")

COLS: Cols = airport.PREFIX_COLS + [
    ("localizer_identifier", (14, 17)),
    ("ils_category", (18, 18)),
    ("continuation_record_number", (22, 22)),
    ("localizer_frequency", (23, 27)),
    ("runway_identifier", (28, 32)),
    ("localizer_latitude", (33, 41)),
    ("localizer_longitude", (42, 51)),
    ("localizer_bearing", (52, 55)),
    ("glide_slope_latitude", (56, 64)),
    ("glide_slope_longitude", (65, 74)),
    ("localizer_position", (75, 78)),
    ("localizer_position_reference", (79, 79)),
    ("glide_slope_position", (80, 83)),
    ("localizer_width", (84, 87)),
    ("glide_slope_angle", (88, 90)),
    ("station_declination", (91, 95)),
    ("glide_slope_height_lthr", (96, 97)),
    ("glide_slope_elevation", (98, 102)),
    ("supporting_facility_id", (103, 106)),
    ("supporting_facility_icao", (107, 108)),
    ("supporting_facility_section", (109, 109)),
    ("supporting_facility_subsection", (110, 110)),
] + record.TRAILER_COLS

# Simulation continuation (application type "S"). Columns 124-132 are
# carried over from the primary as a single field.
CONTINUATION_COLS: Cols = airport.PREFIX_COLS + [
    ("localizer_identifier", (14, 17)),
    ("ils_category", (18, 18)),
    ("continuation_record_number", (22, 22)),
    ("application_type", (23, 23)),
    ("facility_characteristics", (24, 27)),
    ("localizer_true_bearing", (52, 56)),
    ("localizer_bearing_source", (57, 57)),
    ("glide_slope_beam_width", (88, 90)),
    ("approach_route_ident_1", (91, 96)),
    ("approach_route_ident_2", (97, 102)),
    ("approach_route_ident_3", (103, 108)),
    ("approach_route_ident_4", (109, 114)),
    ("approach_route_ident_5", (115, 120)),
    ("carry_over", (124, 132)),
]


def postprocess_row(row: Row) -> None:
    # ident 4 characters max, ILS category single character
    strip_fields(row, "airport_identifier", "icao_code", "localizer_identifier")


def is_lda(row: Row) -> bool:
    return row.get("ils_category", "") in LDA_ILS_CATEGORIES


def build_continuation(loc: Row, true_bearing: str) -> Row:
    """Simulation continuation for a decoded localizer primary row."""
    cont: Row = {name: loc[name] for name, _ in airport.PREFIX_COLS}
    cont.update({
        "localizer_identifier": loc["localizer_identifier"],
        "ils_category": loc["ils_category"],
        "continuation_record_number": CONTINUATION_SIMULATION_NUMBER,
        "application_type": APPLICATION_TYPE_SIMULATION,
        "localizer_true_bearing": true_bearing,
        "localizer_bearing_source": BEARING_SOURCE_NOT_GOVT,
        "carry_over": loc["file_record_number"] + loc["cycle_date"],
    })
    return cont
