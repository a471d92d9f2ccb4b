import json

import pytest

from factories import make_vehicle, vehicle_json
from vehicle_catalog.seed import load_vehicles, seed_data
from vehicle_catalog.services.vehicle_service import VehicleService
from vehicle_catalog.store import InMemoryVehicleStore
from vehicle_catalog.utils.exceptions import AlreadyExistsError


@pytest.fixture
def vehicles_file(tmp_path):
    path = tmp_path / "vehicles.json"
    path.write_text(json.dumps([
        vehicle_json(id=1, registration="AAA111"),
        vehicle_json(id=2, registration="BBB222", brand="Toyota"),
    ]))
    return str(path)


def test_load_vehicles(vehicles_file):
    vehicles = load_vehicles(vehicles_file)
    assert [v.id for v in vehicles] == [1, 2]
    assert vehicles[0] == make_vehicle(id=1, registration="AAA111")


def test_seed_data_fills_empty_store(vehicles_file):
    service = VehicleService(InMemoryVehicleStore())
    seed_data(service, vehicles_file)
    assert sorted(service.find_all()) == [1, 2]


def test_seed_data_without_file_is_noop():
    service = VehicleService(InMemoryVehicleStore())
    seed_data(service, "")
    assert service.find_all() == {}


def test_seed_data_skips_populated_store(vehicles_file):
    service = VehicleService(InMemoryVehicleStore())
    service.add(make_vehicle(id=9, registration="ZZZ999"))
    seed_data(service, vehicles_file)
    assert list(service.find_all()) == [9]


def test_seed_data_rejects_duplicates_atomically(tmp_path):
    path = tmp_path / "dupes.json"
    path.write_text(json.dumps([vehicle_json(id=1), vehicle_json(id=2)]))
    service = VehicleService(InMemoryVehicleStore())

    with pytest.raises(AlreadyExistsError):
        seed_data(service, str(path))
    assert service.find_all() == {}
