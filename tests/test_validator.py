import math

import pytest

from factories import make_vehicle
from vehicle_catalog.services.validator import validate_max_speed, validate_vehicle
from vehicle_catalog.utils.exceptions import ErrorKind, FieldRequiredError, InvalidFieldValueError


def test_valid_vehicle_passes():
    assert validate_vehicle(make_vehicle(), current_year=2026) is None


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"brand": ""}, "brand"),
        ({"model": ""}, "model"),
        ({"registration": ""}, "registration"),
        ({"color": ""}, "color"),
        ({"fabrication_year": 0}, "year"),
        ({"capacity": 0}, "passengers"),
        ({"max_speed": 0.0}, "max_speed"),
        ({"fuel_type": ""}, "fuel_type"),
        ({"transmission": ""}, "transmission"),
        ({"weight": 0.0}, "weight"),
        ({"height": 0.0}, "height"),
        ({"length": 0.0}, "length"),
        ({"width": 0.0}, "width"),
    ],
)
def test_empty_field_is_required(overrides, field):
    with pytest.raises(FieldRequiredError) as exc_info:
        validate_vehicle(make_vehicle(**overrides), current_year=2026)
    assert exc_info.value.field == field
    assert exc_info.value.kind is ErrorKind.FIELD_REQUIRED


def test_first_empty_field_is_reported():
    vehicle = make_vehicle(color="", fuel_type="", width=0.0)
    with pytest.raises(FieldRequiredError) as exc_info:
        validate_vehicle(vehicle, current_year=2026)
    assert exc_info.value.field == "color"


def test_required_checks_run_before_range_checks():
    vehicle = make_vehicle(fabrication_year=1800, transmission="")
    with pytest.raises(FieldRequiredError) as exc_info:
        validate_vehicle(vehicle, current_year=2026)
    assert exc_info.value.field == "transmission"


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"fabrication_year": 1899}, "year"),
        ({"fabrication_year": 2027}, "year"),
        ({"capacity": -1}, "passengers"),
        ({"capacity": 7}, "passengers"),
        ({"max_speed": -10.0}, "max_speed"),
        ({"max_speed": 300.5}, "max_speed"),
        ({"weight": 500.1}, "weight"),
        ({"weight": -1.0}, "weight"),
        ({"height": 501.0}, "height"),
        ({"length": 600.0}, "length"),
        ({"width": -2.0}, "width"),
        ({"width": 500.5}, "width"),
    ],
)
def test_out_of_range_value_is_invalid(overrides, field):
    with pytest.raises(InvalidFieldValueError) as exc_info:
        validate_vehicle(make_vehicle(**overrides), current_year=2026)
    assert exc_info.value.field == field
    assert exc_info.value.kind is ErrorKind.INVALID_FIELD_VALUE


@pytest.mark.parametrize(
    "overrides",
    [
        {"fabrication_year": 1900},
        {"fabrication_year": 2026},
        {"capacity": 1},
        {"capacity": 6},
        {"max_speed": 300.0},
        {"weight": 500.0},
        {"width": 500.0},
    ],
)
def test_bounds_are_inclusive(overrides):
    validate_vehicle(make_vehicle(**overrides), current_year=2026)


def test_year_bound_defaults_to_current_year():
    from datetime import datetime

    validate_vehicle(make_vehicle(fabrication_year=datetime.now().year))
    with pytest.raises(InvalidFieldValueError):
        validate_vehicle(make_vehicle(fabrication_year=datetime.now().year + 1))


def test_validate_max_speed():
    validate_max_speed(0)
    validate_max_speed(300)
    with pytest.raises(InvalidFieldValueError) as exc_info:
        validate_max_speed(301)
    assert exc_info.value.field == "max_speed"


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"max_speed": math.nan}, "max_speed"),
        ({"weight": math.nan}, "weight"),
        ({"height": math.nan}, "height"),
        ({"length": math.nan}, "length"),
        ({"width": math.nan}, "width"),
        ({"width": math.inf}, "width"),
    ],
)
def test_non_finite_value_is_invalid(overrides, field):
    with pytest.raises(InvalidFieldValueError) as exc_info:
        validate_vehicle(make_vehicle(**overrides), current_year=2026)
    assert exc_info.value.field == field


def test_validate_max_speed_rejects_nan():
    with pytest.raises(InvalidFieldValueError):
        validate_max_speed(math.nan)
