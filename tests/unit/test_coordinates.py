import pytest

from userpoints.common.errors import CoordinateFormatError, PositionFormatError
from userpoints.common.models import Angle
from userpoints.pipeline.coordinates import (
    format_coordinate,
    parse_coordinate,
    parse_position,
    to_decimal_degrees,
)


def test_parse_northern_latitude():
    angle = parse_coordinate("N523000")

    assert angle == Angle(hemisphere="N", sign=1, degrees=52, minutes=30, seconds=0.0)
    assert to_decimal_degrees(angle) == pytest.approx(52.5)


def test_parse_western_longitude_uses_three_digit_degrees():
    angle = parse_coordinate("W0174530")

    assert angle.degrees == 17
    assert angle.minutes == 45
    assert angle.seconds == 30.0
    assert angle.signed_degrees == -17
    assert to_decimal_degrees(angle) == pytest.approx(-(17 + 45 / 60 + 30 / 3600))


def test_parse_accepts_fractional_seconds():
    angle = parse_coordinate("E0174530.5")

    assert angle.seconds == 30.5
    assert to_decimal_degrees(angle) == pytest.approx(17 + 45 / 60 + 30.5 / 3600)


@pytest.mark.parametrize(
    ("token", "sign", "degrees", "minutes", "seconds"),
    [
        ("N000000", 1, 0, 0, 0.0),
        ("S451234", -1, 45, 12, 34.0),
        ("E1795959.99", 1, 179, 59, 59.99),
        ("W0010001", -1, 1, 0, 1.0),
        ("N891530.25", 1, 89, 15, 30.25),
    ],
)
def test_decimal_matches_signed_sum(token, sign, degrees, minutes, seconds):
    expected = sign * (degrees + minutes / 60 + seconds / 3600)

    assert to_decimal_degrees(parse_coordinate(token)) == pytest.approx(expected)


@pytest.mark.parametrize("token", ["S000030", "W0000001", "S000000.5"])
def test_zero_degree_southern_and_western_values_stay_negative(token):
    assert to_decimal_degrees(parse_coordinate(token)) < 0


def test_degree_fields_are_not_truncated_at_their_maximum():
    assert to_decimal_degrees(parse_coordinate("W1800000")) == -180.0
    assert to_decimal_degrees(parse_coordinate("E1800000")) == 180.0
    assert to_decimal_degrees(parse_coordinate("N900000")) == 90.0
    assert to_decimal_degrees(parse_coordinate("S900000")) == -90.0


@pytest.mark.parametrize("token", ["X523000", "n523000", "1523000", " N523000"])
def test_unknown_hemisphere_letter_is_rejected(token):
    with pytest.raises(CoordinateFormatError) as excinfo:
        parse_coordinate(token)

    assert excinfo.value.field == "hemisphere"
    assert excinfo.value.token == token


@pytest.mark.parametrize(
    ("token", "field"),
    [
        ("", "hemisphere"),
        ("N", "degrees"),
        ("N5", "degrees"),
        ("NA23000", "degrees"),
        ("N+23000", "degrees"),
        ("E1745", "minutes"),
        ("N52", "minutes"),
        ("N52x000", "minutes"),
        ("N526000", "minutes"),
        ("N5230", "seconds"),
        ("N5230ab", "seconds"),
        ("N5230-1", "seconds"),
        ("N5230nan", "seconds"),
        ("N52301e1", "seconds"),
        ("N523060", "seconds"),
        ("N5\n3000", "degrees"),
        ("N5 23000", "degrees"),
        ("N52 3000", "minutes"),
        ("N523000\n", "seconds"),
        ("N5230 1", "seconds"),
        ("N5230inf", "seconds"),
    ],
)
def test_malformed_fields_report_the_failing_field(token, field):
    with pytest.raises(CoordinateFormatError) as excinfo:
        parse_coordinate(token)

    assert excinfo.value.field == field
    assert "malformed coordinate" in str(excinfo.value)


@pytest.mark.parametrize(
    "token",
    ["N523000", "S000030", "E0174530", "W1800000", "E0174530.5", "N000000.125", "S451234.00001", "N523005."],
)
def test_format_coordinate_reparses_to_same_angle(token):
    angle = parse_coordinate(token)

    assert parse_coordinate(format_coordinate(angle)) == angle


def test_format_coordinate_pads_fixed_width_fields():
    assert format_coordinate(parse_coordinate("W0174530")) == "W0174530"
    assert format_coordinate(parse_coordinate("N050102.5")) == "N050102.5"


def test_parse_position_combined_token():
    position = parse_position("N523000 E0174530")

    assert to_decimal_degrees(position.lat) == pytest.approx(52.5)
    assert to_decimal_degrees(position.lon) == pytest.approx(17.758333, abs=1e-6)


def test_parse_position_rejects_bad_hemisphere_on_first_token():
    with pytest.raises(PositionFormatError) as excinfo:
        parse_position("X523000 E0174530")

    assert excinfo.value.field == "latitude.hemisphere"
    assert isinstance(excinfo.value.__cause__, CoordinateFormatError)


def test_parse_position_rejects_bad_second_token():
    with pytest.raises(PositionFormatError) as excinfo:
        parse_position("N523000 E01745")

    assert excinfo.value.field == "longitude.seconds"
    assert excinfo.value.token == "N523000 E01745"


@pytest.mark.parametrize("token", ["N523000E0174530", "N523000\tE0174530", ""])
def test_parse_position_requires_a_space(token):
    with pytest.raises(PositionFormatError) as excinfo:
        parse_position(token)

    assert excinfo.value.field == "separator"


def test_parse_position_splits_on_first_space_only():
    with pytest.raises(PositionFormatError) as excinfo:
        parse_position("N523000  E0174530")

    assert excinfo.value.field == "longitude.hemisphere"


def test_parse_position_is_permissive_about_axis_letters_by_default():
    position = parse_position("E0174530 N523000")

    assert position.lat.hemisphere == "E"
    assert position.lon.hemisphere == "N"


def test_parse_position_enforces_axis_letters_when_asked():
    assert parse_position("S523000 W0174530", enforce_axis=True).lon.sign == -1

    with pytest.raises(PositionFormatError) as excinfo:
        parse_position("E0174530 N523000", enforce_axis=True)

    assert excinfo.value.field == "latitude.hemisphere"
