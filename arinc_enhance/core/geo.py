# -*- coding: utf-8 -*-
"""
Geographic helpers for ARINC 424 coordinate and bearing fields
"""
import math
from typing import Optional, Tuple

from arinc_enhance.core.errors import MalformedCoordinate

Position = Tuple[float, float]

LATITUDE_HEMISPHERES = ("N", "S")
LONGITUDE_HEMISPHERES = ("E", "W")
HUNDREDTHS_PER_DEGREE = 60 * 60 * 100
BEARING_WIDTH = 5


def _is_digits(s: str) -> bool:
    # str.isdigit() also accepts Latin-1 superscripts, which int() rejects
    return s.isascii() and s.isdigit()


def _parse_dms(raw: str, hemispheres: Tuple[str, str], max_degrees: int) -> float:
    """Parse <hemisphere><deg><min><sec.hundredths> into signed decimal degrees."""
    if not 9 <= len(raw) <= 10:
        raise MalformedCoordinate(f"coordinate {raw!r} must be 9 or 10 characters")
    hemisphere = raw[0]
    if hemisphere not in hemispheres:
        raise MalformedCoordinate(f"coordinate {raw!r} has no {'/'.join(hemispheres)} hemisphere")
    degrees, minutes, seconds = raw[1:-6], raw[-6:-4], raw[-4:]
    for part in (degrees, minutes, seconds):
        if not _is_digits(part):
            raise MalformedCoordinate(f"coordinate {raw!r} is not numeric")
    value = int(degrees) + int(minutes) / 60.0 + int(seconds) / 360000.0
    if int(minutes) >= 60 or int(seconds) >= 6000 or value > max_degrees:
        raise MalformedCoordinate(f"coordinate {raw!r} is out of range")
    if hemisphere in ("S", "W"):
        value = -value
    return value


def decode_degrees(raw_lat: str, raw_lon: str) -> Position:
    """
    Convert ARINC 424 latitude/longitude fields to decimal degrees

    Args:
        raw_lat: Latitude, e.g. "N39513881" (9 characters)
        raw_lon: Longitude, e.g. "E104450794" (10 characters)

    Returns:
        (latitude, longitude) tuple; south and west are negative

    Raises:
        MalformedCoordinate: if either field does not parse
    """
    return (_parse_dms(raw_lat, LATITUDE_HEMISPHERES, 90),
            _parse_dms(raw_lon, LONGITUDE_HEMISPHERES, 180))


def _format_dms(value: float, hemispheres: Tuple[str, str], degree_digits: int) -> str:
    hemisphere = hemispheres[0] if value >= 0 else hemispheres[1]
    total = int(round(abs(value) * HUNDREDTHS_PER_DEGREE))
    degrees, rest = divmod(total, HUNDREDTHS_PER_DEGREE)
    minutes, seconds = divmod(rest, 6000)
    return f"{hemisphere}{degrees:0{degree_digits}d}{minutes:02d}{seconds:04d}"


def encode_degrees(lat: float, lon: float) -> Tuple[str, str]:
    """Inverse of decode_degrees, rounded to hundredths of a second."""
    return (_format_dms(lat, LATITUDE_HEMISPHERES, 2),
            _format_dms(lon, LONGITUDE_HEMISPHERES, 3))


def encode_bearing(bearing: float) -> str:
    """
    Encode a bearing in [0, 360) as five digits with two implied decimals

    303.407 -> "30341"; a value that rounds up to 360.00 wraps to "00000".
    """
    hundredths = int(round(bearing * 100)) % 36000
    return f"{hundredths:0{BEARING_WIDTH}d}"


def decode_bearing(raw: str) -> float:
    if len(raw) != BEARING_WIDTH or not _is_digits(raw):
        raise MalformedCoordinate(f"bearing {raw!r} is not {BEARING_WIDTH} digits")
    return int(raw) / 100.0


def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the initial great-circle bearing between two points

    Args:
        lat1: Starting latitude in degrees
        lon1: Starting longitude in degrees
        lat2: Ending latitude in degrees
        lon2: Ending longitude in degrees

    Returns:
        True bearing in degrees, normalized to [0, 360)
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    lon_diff = math.radians(lon2 - lon1)

    y = math.sin(lon_diff) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - \
        math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(lon_diff)

    bearing = math.degrees(math.atan2(y, x))
    if bearing < 0:
        bearing += 360
    return bearing


def angular_difference(a: float, b: float) -> float:
    """Smallest absolute difference between two bearings."""
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


def published_true_bearing(bearing_raw: str, declination_raw: str) -> Optional[float]:
    """
    Published localizer bearing converted to true, or None if unusable

    bearing_raw is magnetic in tenths of a degree ("2879"), or whole degrees
    true when it ends in "T" ("288T"). declination_raw is E/W plus tenths
    ("E0150").
    """
    bearing_raw = bearing_raw.strip()
    if not bearing_raw:
        return None
    if bearing_raw.endswith("T"):
        digits = bearing_raw[:-1]
        return float(digits) % 360 if _is_digits(digits) else None
    if not _is_digits(bearing_raw):
        return None
    magnetic = int(bearing_raw) / 10.0

    declination_raw = declination_raw.strip()
    if len(declination_raw) != 5 or declination_raw[0] not in ("E", "W") or not _is_digits(declination_raw[1:]):
        return None
    declination = int(declination_raw[1:]) / 10.0
    if declination_raw[0] == "W":
        declination = -declination
    return (magnetic + declination) % 360
