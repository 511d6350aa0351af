# -*- coding: utf-8 -*-
"""
Localizer bearing enhancement for ARINC 424 (FAA CIFP) data.

Every localizer primary record is followed in the output by a simulation
continuation record carrying a true bearing, computed as the initial
great-circle course from the approach's final approach fix to the localizer
antenna. All other records are copied through unchanged and in order.
"""
import logging
from dataclasses import dataclass
from typing import BinaryIO, Callable, Dict, List, Tuple

from arinc_enhance.core.common import (
    SECTION_AIRPORT, decode_record, encode_record, is_primary, read_lines,
    rewind, rewindable, type_tuple, write_lines,
)
from arinc_enhance.core.errors import (
    EnhanceError, InternalConsistency, LocalizerPositionError, LocalizerSkipped,
    MalformedCoordinate, MissingApproachCorrelation, MissingFixPosition,
)
from arinc_enhance.core.geo import (
    angular_difference, calculate_bearing, decode_degrees, encode_bearing,
    published_true_bearing,
)
from arinc_enhance.core.index import CorrelationIndex, DuplicateLocalizerSet
from arinc_enhance.types import airport, ndb, pf, pi, record, vhf, waypoint
from arinc_enhance.types.base_type import Row

logger = logging.getLogger(__name__)

# Published and computed true bearings further apart than this get a warning.
BEARING_DIVERGENCE_WARN_DEG = 5.0


@dataclass
class ProcessStats:
    records_read: int = 0
    lines_written: int = 0
    localizers_enhanced: int = 0
    localizers_skipped: int = 0
    duplicates_removed: int = 0


class Processor:
    """Holds the correlation state for one pass over one file."""

    def __init__(self, remove_duplicate_localizers: bool = True):
        self.remove_duplicate_localizers = remove_duplicate_localizers
        self.index = CorrelationIndex()
        self.duplicates = DuplicateLocalizerSet()
        self.stats = ProcessStats()
        self._handlers: Dict[Tuple[str, str], Callable[[str], List[str]]] = {
            ndb.SELECTED_TYPE: self._index_ndb,
            vhf.SELECTED_TYPE: self._index_vor,
            waypoint.ENROUTE_SELECTED_TYPE: self._index_enroute_waypoint,
            waypoint.SELECTED_TYPE: self._index_terminal_waypoint,
            pf.SELECTED_TYPE: self._index_approach,
            pi.SELECTED_TYPE: self._process_localizer,
        }

    # ---------- duplicate pre-pass ----------
    def pre_process(self, line: str) -> None:
        if not line:
            return
        decode_record(line, record.COLS)
        if type_tuple(line) != pi.SELECTED_TYPE or not is_primary(line):
            return
        loc = decode_record(line, pi.COLS, pi.postprocess_row, shape=pi.TYPE_CODE)
        self.duplicates.add(loc["localizer_identifier"])

    # ---------- main pass ----------
    def process_record(self, line: str) -> List[str]:
        """Lines to write for one input record: none, the record, or record + continuation."""
        if not line:
            return [line]
        decode_record(line, record.COLS)
        selected = type_tuple(line)
        if selected[0] == SECTION_AIRPORT:
            hdr = decode_record(line, airport.COLS, airport.postprocess_row, shape=airport.TYPE_CODE)
            self.index.ensure_airport(hdr["airport_identifier"])

        handler = self._handlers.get(selected)
        if handler is None or not is_primary(line):
            return [line]
        return handler(line)

    def _index_ndb(self, line: str) -> List[str]:
        n = decode_record(line, ndb.COLS, ndb.postprocess_row, shape=ndb.TYPE_CODE)
        if ndb.has_position(n):
            position = self._position(n["ndb_latitude"], n["ndb_longitude"], "NDB", n["ndb_identifier"])
            self.index.add_other_waypoint(n["ndb_identifier"], position)
        return [line]

    def _index_vor(self, line: str) -> List[str]:
        n = decode_record(line, vhf.COLS, vhf.postprocess_row, shape=vhf.TYPE_CODE)
        # Skip NDB/DME or DME with no corresponding VOR.
        if vhf.has_vor_position(n):
            position = self._position(n["vor_latitude"], n["vor_longitude"], "VOR", n["vor_identifier"])
            self.index.add_other_waypoint(n["vor_identifier"], position)
        return [line]

    def _index_enroute_waypoint(self, line: str) -> List[str]:
        wpt = decode_record(line, waypoint.COLS, waypoint.postprocess_row, shape=waypoint.ENROUTE_TYPE_CODE)
        position = self._position(wpt["waypoint_latitude"], wpt["waypoint_longitude"],
                                  "waypoint", wpt["waypoint_identifier"])
        self.index.add_other_waypoint(wpt["waypoint_identifier"], position)
        return [line]

    def _index_terminal_waypoint(self, line: str) -> List[str]:
        wpt = decode_record(line, waypoint.COLS, waypoint.postprocess_row, shape=waypoint.TYPE_CODE)
        position = self._position(wpt["waypoint_latitude"], wpt["waypoint_longitude"],
                                  "waypoint", wpt["waypoint_identifier"])
        # region_code holds the airport identifier for terminal waypoints
        self.index.add_terminal_waypoint(wpt["region_code"], wpt["waypoint_identifier"], position)
        return [line]

    def _index_approach(self, line: str) -> List[str]:
        apch = decode_record(line, pf.COLS, pf.postprocess_row, shape=pf.TYPE_CODE)
        if pf.is_localizer_front_course_approach(apch) and pf.is_final_approach_fix(apch):
            self.index.link_approach(apch["airport_identifier"], apch["procedure_identifier"],
                                     apch["fix_identifier"], apch["recommended_navaid"])
        return [line]

    def _position(self, raw_lat: str, raw_lon: str, kind: str, ident: str):
        try:
            return decode_degrees(raw_lat, raw_lon)
        except MalformedCoordinate as exc:
            raise MalformedCoordinate(f"problem converting {kind} {ident!r} latitude/longitude: {exc}") from exc

    def _process_localizer(self, line: str) -> List[str]:
        loc = decode_record(line, pi.COLS, pi.postprocess_row, shape=pi.TYPE_CODE)
        ident, airport_id = loc["localizer_identifier"], loc["airport_identifier"]

        if self.remove_duplicate_localizers and self.duplicates.is_duplicated(ident) and pi.is_lda(loc):
            logger.warning(f"Skipping duplicate localizer LDA facility: {ident!r} at {airport_id!r}")
            self.stats.duplicates_removed += 1
            return []

        try:
            cont = self.synthesize(loc)
        except LocalizerSkipped as exc:
            logger.warning(f"Skipping localizer {ident!r} at {airport_id!r}: {exc}")
            self.stats.localizers_skipped += 1
            return [line]

        self.stats.localizers_enhanced += 1
        return [encode_record(loc, pi.COLS, base=line),
                encode_record(cont, pi.CONTINUATION_COLS)]

    def synthesize(self, loc: Row) -> Row:
        """
        Build the simulation continuation for a decoded localizer primary row.

        Marks loc as continued. Raises a LocalizerSkipped subclass when the
        bearing cannot be computed, leaving loc untouched.
        """
        ident, airport_id = loc["localizer_identifier"], loc["airport_identifier"]
        entry = self.index.airports.get(airport_id)
        if entry is None:
            # Every airport record registers its airport, so this means a logic error.
            raise InternalConsistency(
                f"found localizer {ident!r} without corresponding airport {airport_id!r}")

        apch = entry.approach_for_localizer(ident)
        if apch is None:
            raise MissingApproachCorrelation(f"could not find corresponding approach for localizer {ident!r}")

        fix = self.index.fix_position(entry, apch.final_approach_fix)
        if fix is None:
            raise MissingFixPosition(
                f"could not find corresponding waypoint for final approach fix {apch.final_approach_fix!r}")

        try:
            lat, lon = decode_degrees(loc["localizer_latitude"], loc["localizer_longitude"])
        except MalformedCoordinate as exc:
            raise LocalizerPositionError(
                f"could not calculate latitude/longitude for localizer {ident!r}: {exc}") from exc

        bearing = calculate_bearing(fix[0], fix[1], lat, lon)
        published = published_true_bearing(loc["localizer_bearing"], loc["station_declination"])
        if published is not None and angular_difference(bearing, published) > BEARING_DIVERGENCE_WARN_DEG:
            logger.warning(f"Localizer {ident!r} at {airport_id!r}: computed bearing {bearing:.2f} "
                           f"differs from published {published:.2f}")

        loc["continuation_record_number"] = pi.CONTINUATION_PRIMARY
        return pi.build_continuation(loc, encode_bearing(bearing))


def process(in_stream: BinaryIO, out_stream: BinaryIO,
            remove_duplicate_localizers: bool = True) -> ProcessStats:
    """
    Read ARINC records from in_stream and write the enhanced data to out_stream.

    Both streams are binary. With remove_duplicate_localizers the input is
    read twice: a pre-pass collects localizer identifiers, then duplicated
    LDA localizers are left out of the output. Non-seekable input is buffered
    in memory for the second pass.

    Raises:
        EnhanceError: on malformed records, bad navaid/waypoint coordinates
            or I/O problems; line_number is set when known
    """
    p = Processor(remove_duplicate_localizers=remove_duplicate_localizers)

    if remove_duplicate_localizers:
        in_stream = rewindable(in_stream)
        for lineno, line in read_lines(in_stream):
            try:
                p.pre_process(line)
            except EnhanceError as exc:
                exc.line_number = lineno
                raise
        rewind(in_stream)
        dups = sorted(k for k, v in p.duplicates.seen.items() if v)
        if dups:
            logger.info(f"Duplicate localizers: {', '.join(dups)}")

    for lineno, line in read_lines(in_stream):
        p.stats.records_read += 1
        try:
            processed = p.process_record(line)
            p.stats.lines_written += write_lines(out_stream, processed)
        except EnhanceError as exc:
            exc.line_number = lineno
            raise
    return p.stats
