"""Validate vehicle records before they enter the store."""
from datetime import datetime

from vehicle_catalog.models.vehicle import Vehicle
from vehicle_catalog.utils.exceptions import FieldRequiredError, InvalidFieldValueError

MIN_FABRICATION_YEAR = 1900
MIN_CAPACITY = 1
MAX_CAPACITY = 6
MAX_SPEED = 300.0
MAX_WEIGHT = 500.0
MAX_DIMENSION = 500.0


def _required_fields(vehicle: Vehicle) -> list[tuple[str, object]]:
    # Order matters: the first empty field is the one reported
    return [
        ("brand", vehicle.brand),
        ("model", vehicle.model),
        ("registration", vehicle.registration),
        ("color", vehicle.color),
        ("year", vehicle.fabrication_year),
        ("passengers", vehicle.capacity),
        ("max_speed", vehicle.max_speed),
        ("fuel_type", vehicle.fuel_type),
        ("transmission", vehicle.transmission),
        ("weight", vehicle.weight),
        ("height", vehicle.dimensions.height),
        ("length", vehicle.dimensions.length),
        ("width", vehicle.dimensions.width),
    ]


def _bounded_fields(vehicle: Vehicle, current_year: int) -> list[tuple[str, float, float, float]]:
    return [
        ("year", vehicle.fabrication_year, MIN_FABRICATION_YEAR, current_year),
        ("passengers", vehicle.capacity, MIN_CAPACITY, MAX_CAPACITY),
        ("max_speed", vehicle.max_speed, 0, MAX_SPEED),
        ("weight", vehicle.weight, 0, MAX_WEIGHT),
        ("height", vehicle.dimensions.height, 0, MAX_DIMENSION),
        ("length", vehicle.dimensions.length, 0, MAX_DIMENSION),
        ("width", vehicle.dimensions.width, 0, MAX_DIMENSION),
    ]


def validate_vehicle(vehicle: Vehicle, current_year: int | None = None) -> None:
    """Check a vehicle against the required-field and range rules.

    Raises FieldRequiredError for the first field holding its zero value,
    then InvalidFieldValueError for the first value out of bounds. Fields
    are reported by their wire names.
    """
    for field, value in _required_fields(vehicle):
        if not value:
            raise FieldRequiredError(field)

    if current_year is None:
        current_year = datetime.now().year

    for field, value, lower, upper in _bounded_fields(vehicle, current_year):
        if not lower <= value <= upper:
            raise InvalidFieldValueError(field)


def validate_max_speed(speed: float) -> None:
    if not 0 <= speed <= MAX_SPEED:
        raise InvalidFieldValueError("max_speed")
