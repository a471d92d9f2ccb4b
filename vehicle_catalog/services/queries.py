"""Filters and aggregates over a snapshot of the vehicle store.

Every filter takes a mapping of id to vehicle and returns the matching
subset with the same keys. An empty result raises VehiclesNotFoundError,
whether nothing matched or the snapshot itself was empty.
"""
from typing import Callable

from vehicle_catalog.models.vehicle import Vehicle
from vehicle_catalog.utils.exceptions import InvalidRangeError, VehiclesNotFoundError


def _select(
    vehicles: dict[int, Vehicle],
    predicate: Callable[[Vehicle], bool],
    not_found_message: str,
) -> dict[int, Vehicle]:
    matched = {vehicle_id: v for vehicle_id, v in vehicles.items() if predicate(v)}
    if not matched:
        raise VehiclesNotFoundError(not_found_message)
    return matched


def by_color_and_year(vehicles: dict[int, Vehicle], color: str, year: int) -> dict[int, Vehicle]:
    return _select(
        vehicles,
        lambda v: v.color == color and v.fabrication_year == year,
        "No vehicles found with that color and year",
    )


def by_brand_and_year_range(
    vehicles: dict[int, Vehicle], brand: str, start_year: int, end_year: int
) -> dict[int, Vehicle]:
    # start_year > end_year is an empty range, not an error
    return _select(
        vehicles,
        lambda v: v.brand == brand and start_year <= v.fabrication_year <= end_year,
        "No vehicles found with that brand and between those years",
    )


def by_brand(vehicles: dict[int, Vehicle], brand: str) -> dict[int, Vehicle]:
    return _select(vehicles, lambda v: v.brand == brand, "No vehicles found with that brand")


def by_fuel_type(vehicles: dict[int, Vehicle], fuel_type: str) -> dict[int, Vehicle]:
    return _select(vehicles, lambda v: v.fuel_type == fuel_type, "No vehicles found with that fuel type")


def by_dimension_range(
    vehicles: dict[int, Vehicle],
    min_length: float,
    max_length: float,
    min_width: float,
    max_width: float,
) -> dict[int, Vehicle]:
    if min_length > max_length:
        raise InvalidRangeError("length")
    if min_width > max_width:
        raise InvalidRangeError("width")

    return _select(
        vehicles,
        lambda v: (
            min_length <= v.dimensions.length <= max_length
            and min_width <= v.dimensions.width <= max_width
        ),
        "No vehicles found with those dimensions",
    )


def by_weight_range(vehicles: dict[int, Vehicle], min_weight: float, max_weight: float) -> dict[int, Vehicle]:
    if min_weight > max_weight:
        raise InvalidRangeError("weight")

    return _select(
        vehicles,
        lambda v: min_weight <= v.weight <= max_weight,
        "No vehicles found within that weight range",
    )


def average_speed_by_brand(vehicles: dict[int, Vehicle], brand: str) -> float:
    matched = by_brand(vehicles, brand)
    return sum(v.max_speed for v in matched.values()) / len(matched)


def average_capacity_by_brand(vehicles: dict[int, Vehicle], brand: str) -> float:
    matched = by_brand(vehicles, brand)
    return sum(v.capacity for v in matched.values()) / len(matched)
