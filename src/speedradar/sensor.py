"""Two-sensor speed radar.

A measurement is armed when a vehicle crosses the first sensor and completed
when it crosses the second. Speed is the fixed sensor separation divided by
the elapsed wall-clock time.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Callable

from speedradar.exceptions import RadarConfigError, SessionCompletedError
from speedradar.models.reading import SpeedReading
from speedradar.models.vehicle import Vehicle
from speedradar.notifier import NotificationTarget
from speedradar.units import METER, MILLISECONDS_PER_SECOND, kmh_to_ms, ms_to_kmh

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_KMH = 7.0
DEFAULT_SENSOR_DISTANCE_M = 2 * METER


def _wall_clock_ms() -> float:
    return time.time() * MILLISECONDS_PER_SECOND


def _iso_utc(epoch_ms: float) -> str:
    moment = datetime.fromtimestamp(epoch_ms / MILLISECONDS_PER_SECOND, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds")


class SessionState(str, Enum):
    """Lifecycle of a measurement handle."""

    ARMED = "armed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class SpeedSensor:
    """Speed radar with a fixed tolerance and sensor separation.

    Usage:
        radar = SpeedSensor(70, LoggingNotifier())
        finish = radar.arm(car)
        ...  # vehicle reaches the second sensor
        reading = finish()
    """

    def __init__(
        self,
        speed_limit_kmh: float,
        target: NotificationTarget,
        *,
        clock: Callable[[], float] | None = None,
    ) -> None:
        if not math.isfinite(speed_limit_kmh) or speed_limit_kmh < 0:
            raise RadarConfigError(
                f"speed limit must be finite and non-negative, got {speed_limit_kmh} km/h"
            )
        self.speed_limit = kmh_to_ms(speed_limit_kmh)  # m/s
        self.tolerance = kmh_to_ms(DEFAULT_TOLERANCE_KMH)  # m/s
        self.sensor_distance = float(DEFAULT_SENSOR_DISTANCE_M)  # m
        self.target = target
        self._clock = clock if clock is not None else _wall_clock_ms

    def effective_limit(self) -> float:
        """Violation threshold in m/s: limit plus tolerance."""
        return self.speed_limit + self.tolerance

    def display_limit(self) -> float:
        """Configured limit in km/h, without tolerance."""
        return ms_to_kmh(self.speed_limit)

    def arm(self, vehicle: Vehicle) -> MeasurementHandle:
        """Record the start time for ``vehicle`` and return its completion handle."""
        started_at_ms = self._clock()
        logger.info(
            "Sensor started for vehicle %s at %s",
            vehicle.model, _iso_utc(started_at_ms),
        )
        return MeasurementHandle(self, vehicle, started_at_ms)

    def _complete(self, vehicle: Vehicle, started_at_ms: float) -> SpeedReading | None:
        elapsed_ms = self._clock() - started_at_ms
        if elapsed_ms <= 0:
            return None

        logger.info(
            "Sensor finished for vehicle %s with elapsed time of %s ms",
            vehicle.model, elapsed_ms,
        )
        speed_ms = self.sensor_distance / (elapsed_ms / MILLISECONDS_PER_SECOND)
        speed_kmh = ms_to_kmh(speed_ms)
        logger.info("Measured speed: %s km/h", speed_kmh)

        exceeded = speed_ms > self.effective_limit()
        if exceeded:
            self.target.notify_overspeed(vehicle, speed_kmh)

        return SpeedReading(
            vehicle=vehicle,
            elapsed_ms=elapsed_ms,
            speed_ms=speed_ms,
            limit_kmh=self.display_limit(),
            exceeded=exceeded,
        )


class MeasurementHandle:
    """Armed measurement for one vehicle passage. Call it once to complete.

    State transitions are guarded, so a handle fired from several threads
    completes at most once.
    """

    def __init__(self, sensor: SpeedSensor, vehicle: Vehicle, started_at_ms: float) -> None:
        self._sensor = sensor
        self.vehicle = vehicle
        self.started_at_ms = started_at_ms
        self.state = SessionState.ARMED
        self._lock = threading.Lock()

    @property
    def done(self) -> bool:
        return self.state is not SessionState.ARMED

    def __call__(self) -> SpeedReading | None:
        with self._lock:
            if self.state is SessionState.COMPLETED:
                raise SessionCompletedError(
                    f"measurement for vehicle {self.vehicle.label} already completed"
                )
            if self.state is SessionState.CANCELLED:
                return None
            self.state = SessionState.COMPLETED
        return self._sensor._complete(self.vehicle, self.started_at_ms)

    def cancel(self) -> None:
        """Drop the measurement so that completing it has no effect."""
        with self._lock:
            if self.state is SessionState.COMPLETED:
                raise SessionCompletedError(
                    f"measurement for vehicle {self.vehicle.label} already completed"
                )
            self.state = SessionState.CANCELLED
