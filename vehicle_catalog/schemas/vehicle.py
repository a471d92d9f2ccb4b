from pydantic import BaseModel, Field

from vehicle_catalog.models.vehicle import Dimensions, Vehicle


class VehiclePayload(BaseModel):
    # Omitted fields other than id decode to zero values so the validator reports them as required
    id: int = Field(..., gt=0, strict=True)
    brand: str = ""
    model: str = ""
    registration: str = ""
    color: str = ""
    year: int = Field(default=0, strict=True)
    passengers: int = Field(default=0, strict=True)
    max_speed: float = 0
    fuel_type: str = ""
    transmission: str = ""
    weight: float = 0
    height: float = 0
    length: float = 0
    width: float = 0

    model_config = {"allow_inf_nan": False}

    def to_vehicle(self) -> Vehicle:
        return Vehicle(
            id=self.id,
            brand=self.brand,
            model=self.model,
            registration=self.registration,
            color=self.color,
            fabrication_year=self.year,
            capacity=self.passengers,
            max_speed=self.max_speed,
            fuel_type=self.fuel_type,
            transmission=self.transmission,
            weight=self.weight,
            dimensions=Dimensions(height=self.height, length=self.length, width=self.width),
        )

    @classmethod
    def from_vehicle(cls, vehicle: Vehicle) -> "VehiclePayload":
        # Stored records are already validated
        return cls.model_construct(
            id=vehicle.id,
            brand=vehicle.brand,
            model=vehicle.model,
            registration=vehicle.registration,
            color=vehicle.color,
            year=vehicle.fabrication_year,
            passengers=vehicle.capacity,
            max_speed=vehicle.max_speed,
            fuel_type=vehicle.fuel_type,
            transmission=vehicle.transmission,
            weight=vehicle.weight,
            height=vehicle.dimensions.height,
            length=vehicle.dimensions.length,
            width=vehicle.dimensions.width,
        )


class SpeedUpdateRequest(BaseModel):
    max_speed: float

    model_config = {"allow_inf_nan": False}


def vehicles_by_id(vehicles: dict[int, Vehicle]) -> dict[int, dict]:
    return {vehicle_id: VehiclePayload.from_vehicle(v).model_dump() for vehicle_id, v in vehicles.items()}
