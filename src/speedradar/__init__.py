"""speedradar — vehicle builder and two-sensor speed radar simulation."""

from speedradar.exceptions import (
    BuilderError,
    RadarAPIError,
    RadarConfigError,
    RadarConnectionError,
    RadarError,
    RadarTimeoutError,
    SessionCompletedError,
    SessionError,
    VehicleValidationError,
)
from speedradar.models import Car, Motorcycle, SpeedReading, Vehicle, VehicleBuilder
from speedradar.notifier import HttpNotifier, LoggingNotifier, NotificationTarget
from speedradar.sensor import MeasurementHandle, SpeedSensor
from speedradar.units import kmh_to_ms, ms_to_kmh

__all__ = [
    "BuilderError",
    "Car",
    "HttpNotifier",
    "LoggingNotifier",
    "MeasurementHandle",
    "Motorcycle",
    "NotificationTarget",
    "RadarAPIError",
    "RadarConfigError",
    "RadarConnectionError",
    "RadarError",
    "RadarTimeoutError",
    "SessionCompletedError",
    "SessionError",
    "SpeedReading",
    "SpeedSensor",
    "Vehicle",
    "VehicleBuilder",
    "VehicleValidationError",
    "kmh_to_ms",
    "ms_to_kmh",
]

__version__ = "0.1.0"
