from fastapi import Request

from vehicle_catalog.services.vehicle_service import VehicleService


def get_vehicle_service(request: Request) -> VehicleService:
    return request.app.state.vehicle_service
