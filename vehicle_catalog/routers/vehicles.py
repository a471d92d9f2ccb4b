import math

from fastapi import APIRouter, Depends, Path, Query, Response

from vehicle_catalog.dependencies import get_vehicle_service
from vehicle_catalog.schemas.vehicle import SpeedUpdateRequest, VehiclePayload, vehicles_by_id
from vehicle_catalog.services.vehicle_service import VehicleService
from vehicle_catalog.utils.exceptions import InvalidFieldValueError
from vehicle_catalog.utils.response import success_response

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


def _parse_bounds(raw: str, name: str) -> tuple[float, float]:
    """Split a "min-max" query value into two non-negative floats.

    Every "-" after the first character is tried as the separator, so
    exponents such as "1e-3-2" parse as (0.001, 2.0).
    """
    for index, char in enumerate(raw):
        if char != "-" or index == 0:
            continue
        try:
            lower, upper = float(raw[:index]), float(raw[index + 1:])
        except ValueError:
            continue
        if not (math.isfinite(lower) and math.isfinite(upper)) or lower < 0 or upper < 0:
            break
        return lower, upper
    raise InvalidFieldValueError(name)


@router.get("")
async def get_vehicles(service: VehicleService = Depends(get_vehicle_service)):
    return success_response(data=vehicles_by_id(service.find_all()))


@router.post("", status_code=201)
async def add_vehicle(payload: VehiclePayload, service: VehicleService = Depends(get_vehicle_service)):
    vehicle = payload.to_vehicle()
    service.add(vehicle)
    return success_response(data=VehiclePayload.from_vehicle(vehicle).model_dump(), message="vehicle created")


@router.post("/batch", status_code=201)
async def add_vehicles_batch(
    payload: list[VehiclePayload], service: VehicleService = Depends(get_vehicle_service)
):
    vehicles = [item.to_vehicle() for item in payload]
    service.add_batch(vehicles)
    return success_response(data={"created": len(vehicles)}, message="vehicles successfully created")


@router.get("/color/{color}/year/{year}")
async def get_by_color_and_year(color: str, year: int, service: VehicleService = Depends(get_vehicle_service)):
    return success_response(data=vehicles_by_id(service.get_by_color_and_year(color, year)))


@router.get("/brand/{brand}/between/{start_year}/{end_year}")
async def get_by_brand_and_years(
    brand: str, start_year: int, end_year: int, service: VehicleService = Depends(get_vehicle_service)
):
    vehicles = service.get_by_brand_and_year_range(brand, start_year, end_year)
    return success_response(data=vehicles_by_id(vehicles))


@router.get("/average_speed/brand/{brand}")
async def get_average_speed_by_brand(brand: str, service: VehicleService = Depends(get_vehicle_service)):
    return success_response(data={"brand": brand, "average_speed": service.get_average_speed_by_brand(brand)})


@router.get("/average_capacity/brand/{brand}")
async def get_average_capacity_by_brand(brand: str, service: VehicleService = Depends(get_vehicle_service)):
    average = service.get_average_capacity_by_brand(brand)
    return success_response(data={"brand": brand, "average_capacity": average})


@router.get("/fuel_type/{fuel_type}")
async def get_by_fuel_type(fuel_type: str, service: VehicleService = Depends(get_vehicle_service)):
    return success_response(data=vehicles_by_id(service.get_by_fuel_type(fuel_type)))


@router.get("/dimensions")
async def get_by_dimensions(
    length: str = Query(..., description="min-max length"),
    width: str = Query(..., description="min-max width"),
    service: VehicleService = Depends(get_vehicle_service),
):
    min_length, max_length = _parse_bounds(length, "length")
    min_width, max_width = _parse_bounds(width, "width")
    vehicles = service.get_by_dimensions(min_length, max_length, min_width, max_width)
    return success_response(data=vehicles_by_id(vehicles))


@router.get("/weight")
async def get_by_weight(
    weight_min: float = Query(..., ge=0, allow_inf_nan=False),
    weight_max: float = Query(..., ge=0, allow_inf_nan=False),
    service: VehicleService = Depends(get_vehicle_service),
):
    return success_response(data=vehicles_by_id(service.get_by_weight(weight_min, weight_max)))


@router.put("/{vehicle_id}/update_speed")
async def update_speed(
    payload: SpeedUpdateRequest,
    vehicle_id: int = Path(..., gt=0),
    service: VehicleService = Depends(get_vehicle_service),
):
    service.update_max_speed(vehicle_id, payload.max_speed)
    return success_response(data={"id": vehicle_id, "max_speed": payload.max_speed}, message="max speed updated")


@router.delete("/{vehicle_id}", status_code=204)
async def delete_vehicle(vehicle_id: int = Path(..., gt=0), service: VehicleService = Depends(get_vehicle_service)):
    service.delete(vehicle_id)
    return Response(status_code=204)
