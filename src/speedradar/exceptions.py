"""Custom exceptions for the speed radar."""

from __future__ import annotations


class RadarError(Exception):
    """Base exception for all speedradar errors."""


class RadarConfigError(RadarError):
    """Raised when a sensor is constructed with an invalid configuration."""


class VehicleValidationError(RadarError):
    """Raised when builder values fail vehicle model validation."""


class BuilderError(RadarError):
    """Raised when a vehicle builder is used after build()."""


class SessionError(RadarError):
    """Base exception for measurement session misuse."""


class SessionCompletedError(SessionError):
    """Raised when a measurement handle is reused after completion."""


class RadarConnectionError(RadarError):
    """Raised when the notifier cannot connect to the server."""


class RadarTimeoutError(RadarError):
    """Raised when a notification request times out."""


class RadarAPIError(RadarError):
    """Raised when the server returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")
