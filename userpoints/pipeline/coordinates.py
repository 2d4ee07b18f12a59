"""Hemisphere-prefixed degrees/minutes/seconds parsing and conversion.

A coordinate token is a hemisphere letter followed by fixed-width fields::

    N523000      N/S: 2-digit degrees, 2-digit minutes, seconds
    E0174530.5   E/W: 3-digit degrees, 2-digit minutes, seconds

Seconds run to the end of the token and may carry a fractional part.
A position is a latitude token and a longitude token separated by a space.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from userpoints.common.errors import CoordinateFormatError, PositionFormatError
from userpoints.common.models import Angle, Position

MINUTES_WIDTH = 2
MINUTES_PER_DEGREE = 60
SECONDS_PER_DEGREE = 3600
POSITION_SEPARATOR = " "

_DIGITS_RE = re.compile(r"[0-9]+")
_SECONDS_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?")


@dataclass(frozen=True)
class Hemisphere:
    letter: str
    axis: str
    sign: int
    degrees_width: int


HEMISPHERES = {
    "N": Hemisphere("N", "latitude", 1, 2),
    "S": Hemisphere("S", "latitude", -1, 2),
    "E": Hemisphere("E", "longitude", 1, 3),
    "W": Hemisphere("W", "longitude", -1, 3),
}


def _malformed(token: str, field: str, reason: str) -> CoordinateFormatError:
    return CoordinateFormatError(
        f"malformed coordinate {token!r}: {field} {reason}",
        token=token,
        field=field,
    )


def _fixed_width_int(token: str, start: int, width: int, field: str) -> int:
    raw = token[start : start + width]
    if len(raw) != width or not _DIGITS_RE.fullmatch(raw):
        raise _malformed(token, field, f"must be {width} digits, got {raw!r}")
    return int(raw)


def parse_coordinate(token: str) -> Angle:
    if not token:
        raise _malformed(token, "hemisphere", "is missing")

    hemisphere = HEMISPHERES.get(token[0])
    if hemisphere is None:
        raise _malformed(token, "hemisphere", f"letter {token[0]!r} is not one of N, E, W, S")

    degrees_start = 1
    minutes_start = degrees_start + hemisphere.degrees_width
    seconds_start = minutes_start + MINUTES_WIDTH

    degrees = _fixed_width_int(token, degrees_start, hemisphere.degrees_width, "degrees")
    minutes = _fixed_width_int(token, minutes_start, MINUTES_WIDTH, "minutes")
    if minutes >= MINUTES_PER_DEGREE:
        raise _malformed(token, "minutes", f"must be below {MINUTES_PER_DEGREE}, got {minutes}")

    raw_seconds = token[seconds_start:]
    if not _SECONDS_RE.fullmatch(raw_seconds):
        raise _malformed(token, "seconds", f"must be a decimal number, got {raw_seconds!r}")
    seconds = float(raw_seconds)
    if seconds >= MINUTES_PER_DEGREE:
        raise _malformed(token, "seconds", f"must be below {MINUTES_PER_DEGREE}, got {raw_seconds}")

    return Angle(
        hemisphere=hemisphere.letter,
        sign=hemisphere.sign,
        degrees=degrees,
        minutes=minutes,
        seconds=seconds,
    )


def _parse_axis(token: str, raw_position: str, axis: str, enforce_axis: bool) -> Angle:
    try:
        angle = parse_coordinate(token)
    except CoordinateFormatError as exc:
        raise PositionFormatError(
            f"malformed position {raw_position!r}: {axis} {exc}",
            token=raw_position,
            field=f"{axis}.{exc.field}",
        ) from exc
    if enforce_axis and HEMISPHERES[angle.hemisphere].axis != axis:
        raise PositionFormatError(
            f"malformed position {raw_position!r}: {axis} cannot use hemisphere {angle.hemisphere!r}",
            token=raw_position,
            field=f"{axis}.hemisphere",
        )
    return angle


def parse_position(token: str, *, enforce_axis: bool = False) -> Position:
    """Parse ``"<lat> <lon>"`` into a :class:`Position`.

    With ``enforce_axis`` the latitude must use N/S and the longitude E/W;
    otherwise any hemisphere letter is accepted in either slot.
    """
    lat_token, separator, lon_token = token.partition(POSITION_SEPARATOR)
    if not separator:
        raise PositionFormatError(
            f"malformed position {token!r}: no space between latitude and longitude",
            token=token,
            field="separator",
        )
    lat = _parse_axis(lat_token, token, "latitude", enforce_axis)
    lon = _parse_axis(lon_token, token, "longitude", enforce_axis)
    return Position(lat=lat, lon=lon)


def to_decimal_degrees(angle: Angle) -> float:
    magnitude = angle.degrees + angle.minutes / MINUTES_PER_DEGREE + angle.seconds / SECONDS_PER_DEGREE
    return angle.sign * magnitude


def _format_seconds(seconds: float) -> str:
    if seconds == int(seconds):
        return f"{int(seconds):02d}"
    # Shortest round-tripping digits, without exponent notation.
    whole, _, fraction = format(Decimal(repr(seconds)), "f").partition(".")
    return f"{int(whole):02d}.{fraction}"


def format_coordinate(angle: Angle) -> str:
    """Render an :class:`Angle` back into its fixed-width token."""
    width = HEMISPHERES[angle.hemisphere].degrees_width
    return (
        f"{angle.hemisphere}"
        f"{angle.degrees:0{width}d}"
        f"{angle.minutes:0{MINUTES_WIDTH}d}"
        f"{_format_seconds(angle.seconds)}"
    )
