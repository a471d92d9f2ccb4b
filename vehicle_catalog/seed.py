import json
import logging

from vehicle_catalog.models.vehicle import Vehicle
from vehicle_catalog.schemas.vehicle import VehiclePayload
from vehicle_catalog.services.vehicle_service import VehicleService

logger = logging.getLogger(__name__)


def load_vehicles(path: str) -> list[Vehicle]:
    """Read a JSON array of vehicles in wire shape."""
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return [VehiclePayload.model_validate(item).to_vehicle() for item in raw]


def seed_data(service: VehicleService, path: str) -> None:
    if not path:
        return
    if service.find_all():
        return

    vehicles = load_vehicles(path)
    service.add_batch(vehicles)
    logger.info("Seeded %d vehicles from %s", len(vehicles), path)
