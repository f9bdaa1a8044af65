"""Notification targets that receive overspeed violations."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from speedradar._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SyncTransport
from speedradar._logging import log_call
from speedradar.exceptions import RadarError
from speedradar.models.vehicle import Vehicle

logger = logging.getLogger(__name__)

VIOLATIONS_ENDPOINT = "/violations"


class NotificationTarget(ABC):
    """Receives overspeed reports. Implementations must hold no mutable state."""

    @abstractmethod
    def notify_overspeed(self, vehicle: Vehicle, measured_speed_kmh: float) -> None: ...


class LoggingNotifier(NotificationTarget):
    """Reports violations as warnings on the package logger."""

    @log_call
    def notify_overspeed(self, vehicle: Vehicle, measured_speed_kmh: float) -> None:
        logger.warning(
            "Vehicle %s exceeded the speed limit: %s km/h",
            vehicle.model, measured_speed_kmh,
        )


def _violation_payload(vehicle: Vehicle, measured_speed_kmh: float) -> dict[str, Any]:
    return {
        "vehicle": {"type": type(vehicle).__name__, **vehicle.model_dump()},
        "speed_kmh": measured_speed_kmh,
    }


class HttpNotifier(NotificationTarget):
    """Posts violations to a remote server.

    Delivery failures are logged and do not propagate to the sensor.

    Usage:
        with HttpNotifier("http://radar.local/api") as server:
            sensor = SpeedSensor(70, server)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> HttpNotifier:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_call
    def _send(self, payload: dict[str, Any]) -> None:
        self._transport.post(VIOLATIONS_ENDPOINT, payload)

    def notify_overspeed(self, vehicle: Vehicle, measured_speed_kmh: float) -> None:
        try:
            self._send(_violation_payload(vehicle, measured_speed_kmh))
        except RadarError as exc:
            logger.warning(
                "Failed to deliver violation for vehicle %s (%s km/h): %s",
                vehicle.label, measured_speed_kmh, exc,
            )
