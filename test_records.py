"""Tests for fixed-width record shapes"""

import pytest

from arinc_enhance.core.common import (
    cont_no, decode_record, encode_record, is_primary, slice_, tcode, type_tuple,
)
from arinc_enhance.core.errors import DecodeFailure
from arinc_enhance.types import airport, ndb, pf, pi, record, vhf, waypoint

AIRPORT = "SUSAP KHWDK2AHWD     0     056YHN37393214W122071825E015000052         1800018000C    MNAR    HAYWARD EXECUTIVE             107981608"
ENROUTE_WAYPOINT = "SUSAEAENRT   SUNOL K20    C  RL N37000000W121000000                       E0132     NAR           SUNOL                    459212002"
TERMINAL_WAYPOINT = "SUSAP KHWDK2CSUDGE K20    W     N37000000W121000000                       E0132     NAR           SUDGE                    108112002"
NDB = "SCANDB       ILI   PA004110H  W N59000000W155000000                       E0140           NARILIAMNA                       004122002"
VOR = "SUSAD        PYE   K2011370VDHW N38000000W122000000    N38044712W122520418E0170013402     NARPOINT REYES                   236192002"
DME = "SCAND        ADK   PA011400 DUW                    ADK N51521587W176402739E0070003291     NARMOUNT MOFFETT                 002361703"
APPROACH_FAF = "SUSAP KHWDK2FL28L  L      020FERNEK2PC0E  F    CF IHWDK2      1079007428800053PI  + 02500                 OAK   K2D 0 DS   108521310"
APPROACH_IF = "SUSAP KHWDK2FL28L  ASJC   010SJC  K2D 0V  A    IF                                             18000                 0 DS   108481212"
LOCALIZER = "SUSAP KHWDK2IIHWD0   111150RW28LN37394620W1220746752879                   0109     0500   E0150                            108901212"


@pytest.mark.parametrize("line,want_type,want_tcode", [
    (AIRPORT, ("P", "A"), "PA"),
    (ENROUTE_WAYPOINT, ("E", "A"), "EA"),
    (TERMINAL_WAYPOINT, ("P", "C"), "PC"),
    (NDB, ("D", "B"), "DB"),
    (VOR, ("D", " "), "DV"),
    (APPROACH_FAF, ("P", "F"), "PF"),
    (LOCALIZER, ("P", "I"), "PI"),
])
def test_type_codes(line, want_type, want_tcode):
    assert type_tuple(line) == want_type
    assert tcode(line) == want_tcode


@pytest.mark.parametrize("line,selected_type", [
    (ENROUTE_WAYPOINT, waypoint.ENROUTE_SELECTED_TYPE),
    (TERMINAL_WAYPOINT, waypoint.SELECTED_TYPE),
    (NDB, ndb.SELECTED_TYPE),
    (VOR, vhf.SELECTED_TYPE),
    (APPROACH_FAF, pf.SELECTED_TYPE),
    (LOCALIZER, pi.SELECTED_TYPE),
])
def test_selected_type_matches_record(line, selected_type):
    assert type_tuple(line) == selected_type


@pytest.mark.parametrize("line,cols,post", [
    (AIRPORT, airport.COLS, airport.postprocess_row),
    (ENROUTE_WAYPOINT, waypoint.COLS, waypoint.postprocess_row),
    (TERMINAL_WAYPOINT, waypoint.COLS, waypoint.postprocess_row),
    (NDB, ndb.COLS, ndb.postprocess_row),
    (VOR, vhf.COLS, vhf.postprocess_row),
    (APPROACH_FAF, pf.COLS, pf.postprocess_row),
    (LOCALIZER, pi.COLS, pi.postprocess_row),
    (AIRPORT, record.COLS, None),
])
def test_pass_through_round_trip(line, cols, post):
    assert encode_record(decode_record(line, cols, post), cols, base=line) == line


def test_generic_record_covers_every_column():
    for line in (AIRPORT, NDB, LOCALIZER):
        assert encode_record(decode_record(line, record.COLS), record.COLS) == line


def test_waypoint_shape_without_base():
    row = decode_record(ENROUTE_WAYPOINT, waypoint.COLS, waypoint.postprocess_row)
    assert encode_record(row, waypoint.COLS) == ENROUTE_WAYPOINT


def test_decode_fields():
    loc = decode_record(LOCALIZER, pi.COLS, pi.postprocess_row)
    assert loc["airport_identifier"] == "KHWD"
    assert loc["localizer_identifier"] == "IHWD"
    assert loc["ils_category"] == "0"
    assert loc["continuation_record_number"] == "1"
    assert loc["runway_identifier"] == "RW28L"
    assert loc["localizer_latitude"] == "N37394620"
    assert loc["localizer_longitude"] == "W122074675"
    assert loc["station_declination"] == "E0150"
    assert loc["file_record_number"] + loc["cycle_date"] == "108901212"

    apch = decode_record(APPROACH_FAF, pf.COLS, pf.postprocess_row)
    assert apch["procedure_identifier"] == "L28L"
    assert apch["fix_identifier"] == "FERNE"
    assert apch["waypoint_description_code"] == "E  F"
    assert apch["recommended_navaid"] == "IHWD"

    n = decode_record(NDB, ndb.COLS, ndb.postprocess_row)
    assert (n["ndb_identifier"], n["ndb_latitude"], n["ndb_longitude"]) == ("ILI", "N59000000", "W155000000")


def test_decode_tolerates_odd_payload():
    odd = LOCALIZER[:60] + "#?!" + LOCALIZER[63:]
    row = decode_record(odd, pi.COLS, pi.postprocess_row)
    assert encode_record(row, pi.COLS, base=odd) == odd


def test_decode_short_record():
    with pytest.raises(DecodeFailure):
        decode_record(LOCALIZER[:100], pi.COLS, shape=pi.TYPE_CODE)
    with pytest.raises(DecodeFailure):
        decode_record("SUSAP KHWD", record.COLS)


def test_encode_sets_only_named_columns():
    loc = decode_record(LOCALIZER, pi.COLS, pi.postprocess_row)
    loc["continuation_record_number"] = "2"
    out = encode_record(loc, pi.COLS, base=LOCALIZER)
    assert slice_(out, 22, 22) == "2"
    assert out[:21] == LOCALIZER[:21]
    assert out[22:] == LOCALIZER[22:]


def test_build_continuation():
    loc = decode_record(LOCALIZER, pi.COLS, pi.postprocess_row)
    cont = encode_record(pi.build_continuation(loc, "30341"), pi.CONTINUATION_COLS)
    assert cont == "SUSAP KHWDK2IIHWD0   2S                            30341N                                                                  108901212"


def test_vor_position():
    assert vhf.has_vor_position(decode_record(VOR, vhf.COLS, vhf.postprocess_row))
    assert not vhf.has_vor_position(decode_record(DME, vhf.COLS, vhf.postprocess_row))


@pytest.mark.parametrize("procedure,want", [
    ("I28R", True),
    ("L28L", True),
    ("X19R", True),
    ("U05", True),
    ("B28L", False),
    ("R28L", False),
    ("", False),
])
def test_is_localizer_front_course_approach(procedure, want):
    assert pf.is_localizer_front_course_approach({"procedure_identifier": procedure}) == want


@pytest.mark.parametrize("desc,want", [
    ("   F", True),
    ("E  F", True),
    ("   M", False),
    ("", False),
])
def test_is_final_approach_fix(desc, want):
    assert pf.is_final_approach_fix({"waypoint_description_code": desc}) == want


def test_is_lda():
    assert pi.is_lda({"ils_category": "A"})
    assert pi.is_lda({"ils_category": "L"})
    assert not pi.is_lda({"ils_category": "1"})


def test_continuation_numbers():
    assert cont_no(LOCALIZER) == ""
    assert is_primary(LOCALIZER)
    assert is_primary(APPROACH_FAF)
    assert not is_primary(LOCALIZER[:21] + "2" + LOCALIZER[22:])
    assert not is_primary(APPROACH_FAF[:38] + "2" + APPROACH_FAF[39:])
    # records without a known continuation column are always primary
    assert is_primary(AIRPORT)
