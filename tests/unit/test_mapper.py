import pytest

from userpoints.common.config_loader import WaypointDefaults
from userpoints.pipeline.coordinates import parse_position
from userpoints.pipeline.mapper import build_record


def test_build_record_fills_identity_and_defaults():
    waypoint = build_record(parse_position("N523000 E0174530"), "Lisie Katy", 81.0)

    assert waypoint.name == "Lisie Katy"
    assert waypoint.ident == "Lisie Katy"
    assert waypoint.waypoint_type == "Airstrip"
    assert waypoint.region == "EP"
    assert waypoint.import_filename == "skydemon_PL_missing.airfields.xml"
    assert waypoint.latitude == pytest.approx(52.5)
    assert waypoint.longitude == pytest.approx(17.758333, abs=1e-6)
    assert waypoint.elevation == 81.0


def test_build_record_leaves_descriptive_fields_absent():
    waypoint = build_record(parse_position("S000030 W0000030"), "Zero", None)

    assert waypoint.elevation is None
    assert waypoint.magnetic_declination is None
    assert waypoint.tags is None
    assert waypoint.description is None
    assert waypoint.visible_from is None
    assert waypoint.last_edit is None
    assert waypoint.latitude < 0
    assert waypoint.longitude < 0


def test_build_record_uses_configured_defaults():
    defaults = WaypointDefaults(waypoint_type="Glider Site", region=None, import_filename="other.xml")

    waypoint = build_record(parse_position("N523000 E0174530"), "Field", 100.5, defaults)

    assert waypoint.waypoint_type == "Glider Site"
    assert waypoint.region is None
    assert waypoint.import_filename == "other.xml"
    assert waypoint.elevation == 100.5
