from vehicle_catalog.models.vehicle import Dimensions, Vehicle

__all__ = ["Dimensions", "Vehicle"]
