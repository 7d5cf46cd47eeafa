"""Geographic helpers: distances, sector locations and lenient number parsing."""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0

# Approximate centre of the city, used for sectors that are not listed.
BASE_LATITUDE = 33.684
BASE_LONGITUDE = 73.047

_SECTORS: dict[str, tuple[float, float]] = {
    "G-10": (33.684, 73.025),
    "F-8": (33.700, 73.037),
    "F-6": (33.715, 73.045),
    "G-9": (33.690, 73.030),
    "F-7": (33.707, 73.040),
    "G-8": (33.694, 73.032),
    "H-8": (33.710, 73.042),
    "I-8": (33.720, 73.048),
    "G-6": (33.709, 73.044),
    "F-10": (33.705, 73.038),
}

_SECTOR_ALIASES: dict[str, tuple[float, float]] = {
    **_SECTORS,
    **{name.replace("-", ""): coords for name, coords in _SECTORS.items()},
    "Blue Area": (33.697, 73.039),
}

_BLANKS = " \t"


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two points given in degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2.0) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2.0) ** 2
    )
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


def distance_squared(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Squared planar distance between two coordinate pairs, for comparisons."""
    d_lat = lat2 - lat1
    d_lon = lon2 - lon1
    return d_lat * d_lat + d_lon * d_lon


def sector_coordinates(sector: str) -> tuple[float, float]:
    """Approximate (latitude, longitude) of a named city sector.

    Unknown sectors map to the city centre.
    """
    return _SECTOR_ALIASES.get(sector, (BASE_LATITUDE, BASE_LONGITUDE))


def _accumulate(text: str, stop_at_other: bool) -> float:
    """Build a value from digits and at most one decimal point.

    Characters that are neither digits nor the first '.' either end the number
    (``stop_at_other``) or are skipped.
    """
    value = 0.0
    fraction = 0.1
    has_decimal = False
    for char in text:
        if "0" <= char <= "9":
            digit = ord(char) - ord("0")
            if has_decimal:
                value += digit * fraction
                fraction *= 0.1
            else:
                value = value * 10.0 + digit
        elif char == "." and not has_decimal:
            has_decimal = True
        elif stop_at_other:
            break
    return value


def _parse_coordinate_part(part: str) -> float:
    part = part.strip(_BLANKS)
    negative = part.startswith("-")
    value = _accumulate(part[1:] if negative else part, stop_at_other=False)
    return -value if negative else value


def parse_coordinates(text: str) -> tuple[float, float]:
    """Parse a ``"lat, lon"`` string, optionally wrapped in double quotes.

    Stray characters inside each number are ignored. Raises ValueError when
    the text is empty or has no comma.
    """
    if not text:
        raise ValueError("empty coordinate string")
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        text = text[1:-1]
    lat_text, comma, lon_text = text.partition(",")
    if not comma:
        raise ValueError(f"coordinates must be 'lat, lon': {text!r}")
    return _parse_coordinate_part(lat_text), _parse_coordinate_part(lon_text)


def parse_number(text: str) -> float:
    """Read a leading decimal number, stopping at the first unexpected character.

    Returns 0.0 when nothing numeric leads the text.
    """
    body = text.lstrip(_BLANKS)
    negative = body.startswith("-")
    value = _accumulate(body[1:] if negative else body, stop_at_other=True)
    return -value if negative else value


def parse_int(text: str) -> int:
    """Read a leading integer, stopping at the first non-digit. Returns 0 if none."""
    body = text.lstrip(_BLANKS)
    negative = body.startswith("-")
    if negative:
        body = body[1:]
    digits = []
    for char in body:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value