# -*- coding: utf-8 -*-
"""
Correlation index built while scanning one CIFP file.

Airports, their terminal waypoints and localizer approaches, plus every
enroute waypoint and navaid with a position, keyed the way procedure legs
reference them. Dicts keep insertion order, so "first approach for a
localizer" means the first procedure identifier seen in the file.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from arinc_enhance.core.geo import Position

logger = logging.getLogger(__name__)


@dataclass
class ApproachLink:
    """Final approach fix and localizer of one localizer-based approach"""
    final_approach_fix: str
    localizer_id: str


@dataclass
class AirportEntry:
    waypoints: Dict[str, Position] = field(default_factory=dict)
    approaches: Dict[str, ApproachLink] = field(default_factory=dict)

    def approach_for_localizer(self, localizer_id: str) -> Optional[ApproachLink]:
        """First approach naming localizer_id as its recommended navaid, or None."""
        for apch in self.approaches.values():
            if apch.localizer_id == localizer_id:
                return apch
        return None


class CorrelationIndex:
    """Per-run store; create one for each file processed."""

    def __init__(self):
        self.airports: Dict[str, AirportEntry] = {}
        self.other_waypoints: Dict[str, Position] = {}

    def ensure_airport(self, airport_id: str) -> AirportEntry:
        entry = self.airports.get(airport_id)
        if entry is None:
            entry = self.airports[airport_id] = AirportEntry()
            logger.debug(f"New airport {airport_id}")
        return entry

    def add_other_waypoint(self, ident: str, position: Position) -> None:
        self.other_waypoints[ident] = position

    def add_terminal_waypoint(self, airport_id: str, ident: str, position: Position) -> None:
        self.ensure_airport(airport_id).waypoints[ident] = position

    def link_approach(self, airport_id: str, procedure_id: str,
                      final_approach_fix: str, localizer_id: str) -> ApproachLink:
        approaches = self.ensure_airport(airport_id).approaches
        link = approaches.get(procedure_id)
        if link is None:
            link = approaches[procedure_id] = ApproachLink(final_approach_fix, localizer_id)
        else:
            link.final_approach_fix = final_approach_fix
            link.localizer_id = localizer_id
        logger.debug(f"{airport_id} {procedure_id}: FAF {final_approach_fix}, localizer {localizer_id}")
        return link

    def fix_position(self, entry: AirportEntry, fix_id: str) -> Optional[Position]:
        """Terminal waypoint of the airport first, then enroute waypoints and navaids."""
        position = entry.waypoints.get(fix_id)
        if position is None:
            position = self.other_waypoints.get(fix_id)
        return position


class DuplicateLocalizerSet:
    """Localizer identifier -> seen more than once."""

    def __init__(self):
        self.seen: Dict[str, bool] = {}

    def add(self, localizer_id: str) -> None:
        self.seen[localizer_id] = localizer_id in self.seen

    def is_duplicated(self, localizer_id: str) -> bool:
        return self.seen.get(localizer_id, False)
