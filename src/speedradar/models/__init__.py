"""speedradar data models."""

from speedradar.models.reading import SpeedReading
from speedradar.models.vehicle import Car, Motorcycle, Vehicle, VehicleBuilder

__all__ = [
    "Car",
    "Motorcycle",
    "SpeedReading",
    "Vehicle",
    "VehicleBuilder",
]
