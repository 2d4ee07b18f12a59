"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Angle:
    """One parsed coordinate axis.

    ``degrees`` is the unsigned magnitude; the hemisphere sign is kept in
    ``sign`` so that a zero-degree southern or western value stays negative.
    """

    hemisphere: str
    sign: int
    degrees: int
    minutes: int
    seconds: float

    @property
    def signed_degrees(self) -> int:
        return self.sign * self.degrees


@dataclass(frozen=True)
class Position:
    lat: Angle
    lon: Angle


@dataclass(frozen=True)
class AirfieldRecord:
    index: int
    name: str | None
    position: str | None
    elevation: str | None


@dataclass(frozen=True)
class Waypoint:
    waypoint_type: str
    name: str
    ident: str
    latitude: float
    longitude: float
    elevation: float | None = None
    magnetic_declination: float | None = None
    tags: str | None = None
    description: str | None = None
    region: str | None = None
    visible_from: int | None = None
    last_edit: str | None = None
    import_filename: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
