"""Map a parsed position onto the userpoints row shape."""

from __future__ import annotations

from userpoints.common.config_loader import WaypointDefaults
from userpoints.common.models import Position, Waypoint
from userpoints.pipeline.coordinates import to_decimal_degrees

DEFAULT_WAYPOINT_DEFAULTS = WaypointDefaults()


def build_record(
    position: Position,
    name: str,
    elevation: float | None,
    defaults: WaypointDefaults = DEFAULT_WAYPOINT_DEFAULTS,
) -> Waypoint:
    return Waypoint(
        waypoint_type=defaults.waypoint_type,
        name=name,
        ident=name,
        latitude=to_decimal_degrees(position.lat),
        longitude=to_decimal_degrees(position.lon),
        elevation=elevation,
        region=defaults.region,
        import_filename=defaults.import_filename,
    )
