"""Userpoints CSV export."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from userpoints.common.fs import write_csv
from userpoints.common.models import Waypoint

USERPOINT_COLUMNS = (
    ("Type", "waypoint_type"),
    ("Name", "name"),
    ("Ident", "ident"),
    ("Latitude", "latitude"),
    ("Longitude", "longitude"),
    ("Elevation", "elevation"),
    ("Magnetic Declination", "magnetic_declination"),
    ("Tags", "tags"),
    ("Description", "description"),
    ("Region", "region"),
    ("Visible From", "visible_from"),
    ("Last Edit", "last_edit"),
    ("Import Filename", "import_filename"),
)
USERPOINT_HEADERS = [header for header, _ in USERPOINT_COLUMNS]


def serialize_waypoint(waypoint: Waypoint) -> dict:
    values = waypoint.to_dict()
    out = {}
    for header, attr in USERPOINT_COLUMNS:
        value = values[attr]
        out[header] = "" if value is None else value
    return out


def write_userpoints_csv(out_path: Path, waypoints: Iterable[Waypoint]) -> int:
    """Write rows in the given order and return how many were written."""
    return write_csv(out_path, USERPOINT_HEADERS, (serialize_waypoint(wp) for wp in waypoints))
