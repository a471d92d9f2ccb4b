from dataclasses import dataclass


@dataclass(frozen=True)
class Dimensions:
    height: float
    length: float
    width: float


@dataclass(frozen=True)
class Vehicle:
    id: int
    brand: str
    model: str
    registration: str
    color: str
    fabrication_year: int
    capacity: int
    max_speed: float
    fuel_type: str
    transmission: str
    weight: float
    dimensions: Dimensions
