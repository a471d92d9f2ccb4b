import logging
import threading
from dataclasses import replace
from typing import Iterable, Protocol

from vehicle_catalog.models.vehicle import Vehicle
from vehicle_catalog.utils.exceptions import (
    IdAlreadyExistsError,
    RegistrationAlreadyExistsError,
    VehicleNotFoundError,
)

logger = logging.getLogger(__name__)


class VehicleStore(Protocol):
    def find_all(self) -> dict[int, Vehicle]: ...

    def insert(self, vehicle: Vehicle) -> None: ...

    def insert_batch(self, vehicles: list[Vehicle]) -> None: ...

    def update_max_speed(self, vehicle_id: int, speed: float) -> None: ...

    def delete_by_id(self, vehicle_id: int) -> None: ...


def _check_conflicts(vehicle: Vehicle, existing: Iterable[Vehicle]) -> None:
    for current in existing:
        if current.id == vehicle.id:
            raise IdAlreadyExistsError(vehicle.id)
        if current.registration == vehicle.registration:
            raise RegistrationAlreadyExistsError(vehicle.registration)


class InMemoryVehicleStore:
    """Vehicles keyed by id, held in a dict guarded by a lock.

    Reads hand out a shallow copy of the mapping; records are frozen so the
    copy is isolated from later mutations.
    """

    def __init__(self, vehicles: dict[int, Vehicle] | None = None):
        self._db: dict[int, Vehicle] = dict(vehicles) if vehicles else {}
        self._lock = threading.Lock()

    def find_all(self) -> dict[int, Vehicle]:
        with self._lock:
            return dict(self._db)

    def insert(self, vehicle: Vehicle) -> None:
        with self._lock:
            _check_conflicts(vehicle, self._db.values())
            self._db[vehicle.id] = vehicle
        logger.info("Inserted vehicle id=%d", vehicle.id)

    def insert_batch(self, vehicles: list[Vehicle]) -> None:
        with self._lock:
            # Batch members must not collide with the store nor with each other
            accepted: list[Vehicle] = []
            for vehicle in vehicles:
                _check_conflicts(vehicle, self._db.values())
                _check_conflicts(vehicle, accepted)
                accepted.append(vehicle)

            for vehicle in accepted:
                self._db[vehicle.id] = vehicle
        logger.info("Inserted batch of %d vehicles", len(vehicles))

    def update_max_speed(self, vehicle_id: int, speed: float) -> None:
        with self._lock:
            current = self._db.get(vehicle_id)
            if current is None:
                raise VehicleNotFoundError(vehicle_id)
            self._db[vehicle_id] = replace(current, max_speed=speed)
        logger.info("Updated max speed of vehicle id=%d to %s", vehicle_id, speed)

    def delete_by_id(self, vehicle_id: int) -> None:
        with self._lock:
            if vehicle_id not in self._db:
                raise VehicleNotFoundError(vehicle_id)
            del self._db[vehicle_id]
        logger.info("Deleted vehicle id=%d", vehicle_id)
