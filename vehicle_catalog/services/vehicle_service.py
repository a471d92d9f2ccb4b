import logging

from vehicle_catalog.models.vehicle import Vehicle
from vehicle_catalog.services import queries
from vehicle_catalog.services.validator import validate_max_speed, validate_vehicle
from vehicle_catalog.store import VehicleStore
from vehicle_catalog.utils.exceptions import (
    AlreadyExistsError,
    IdAlreadyExistsError,
    RegistrationAlreadyExistsError,
)

logger = logging.getLogger(__name__)


class VehicleService:
    def __init__(self, store: VehicleStore):
        self.store = store

    def find_all(self) -> dict[int, Vehicle]:
        return self.store.find_all()

    def add(self, vehicle: Vehicle) -> None:
        validate_vehicle(vehicle)
        try:
            self.store.insert(vehicle)
        except IdAlreadyExistsError as exc:
            logger.warning("Rejected vehicle id=%d: id already exists", vehicle.id)
            raise AlreadyExistsError("id") from exc
        except RegistrationAlreadyExistsError as exc:
            logger.warning("Rejected vehicle id=%d: registration already exists", vehicle.id)
            raise AlreadyExistsError("registration") from exc

    def add_batch(self, vehicles: list[Vehicle]) -> None:
        """Validate every vehicle, then insert them all or none."""
        for vehicle in vehicles:
            validate_vehicle(vehicle)
        try:
            self.store.insert_batch(vehicles)
        except IdAlreadyExistsError as exc:
            logger.warning("Rejected batch: vehicle id %d already exists", exc.vehicle_id)
            raise AlreadyExistsError("id") from exc
        except RegistrationAlreadyExistsError as exc:
            logger.warning("Rejected batch: registration %s already exists", exc.registration)
            raise AlreadyExistsError("registration") from exc

    def update_max_speed(self, vehicle_id: int, speed: float) -> None:
        validate_max_speed(speed)
        self.store.update_max_speed(vehicle_id, speed)

    def delete(self, vehicle_id: int) -> None:
        self.store.delete_by_id(vehicle_id)

    def get_by_color_and_year(self, color: str, year: int) -> dict[int, Vehicle]:
        return queries.by_color_and_year(self.store.find_all(), color, year)

    def get_by_brand_and_year_range(self, brand: str, start_year: int, end_year: int) -> dict[int, Vehicle]:
        return queries.by_brand_and_year_range(self.store.find_all(), brand, start_year, end_year)

    def get_by_fuel_type(self, fuel_type: str) -> dict[int, Vehicle]:
        return queries.by_fuel_type(self.store.find_all(), fuel_type)

    def get_by_dimensions(
        self, min_length: float, max_length: float, min_width: float, max_width: float
    ) -> dict[int, Vehicle]:
        return queries.by_dimension_range(self.store.find_all(), min_length, max_length, min_width, max_width)

    def get_by_weight(self, min_weight: float, max_weight: float) -> dict[int, Vehicle]:
        return queries.by_weight_range(self.store.find_all(), min_weight, max_weight)

    def get_average_speed_by_brand(self, brand: str) -> float:
        return queries.average_speed_by_brand(self.store.find_all(), brand)

    def get_average_capacity_by_brand(self, brand: str) -> float:
        return queries.average_capacity_by_brand(self.store.find_all(), brand)
