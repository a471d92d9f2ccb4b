import pytest

from vehicle_catalog.main import app
from vehicle_catalog.services.vehicle_service import VehicleService
from vehicle_catalog.store import InMemoryVehicleStore


@pytest.fixture(autouse=True)
def fresh_store():
    """Give every test an empty catalog behind the shared app."""
    store = InMemoryVehicleStore()
    app.state.vehicle_service = VehicleService(store)
    yield store
