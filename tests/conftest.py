"""Shared test fixtures: a manual clock, a recording notifier, sample vehicles."""

from __future__ import annotations

import pytest

from speedradar import Car, Motorcycle, NotificationTarget, SpeedSensor, Vehicle

BASE_URL = "http://radar.test/api"

START_MS = 1_767_225_600_000.0  # 2026-01-01T00:00:00Z


class ManualClock:
    """Wall clock in epoch milliseconds that only moves when told to."""

    def __init__(self, now_ms: float = START_MS) -> None:
        self.now_ms = now_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


class RecordingNotifier(NotificationTarget):
    def __init__(self) -> None:
        self.calls: list[tuple[Vehicle, float]] = []

    def notify_overspeed(self, vehicle: Vehicle, measured_speed_kmh: float) -> None:
        self.calls.append((vehicle, measured_speed_kmh))


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def radar(clock: ManualClock, notifier: RecordingNotifier) -> SpeedSensor:
    """70 km/h radar driven by the manual clock."""
    return SpeedSensor(70, notifier, clock=clock)


@pytest.fixture
def uno() -> Car:
    return Car.builder().model("Uno").color("Branco").door_count(4).year(2020).build()


@pytest.fixture
def motorcycle() -> Motorcycle:
    return Motorcycle.builder().model("CG 160").color("Vermelha").year(2022).build()
