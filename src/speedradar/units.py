"""Unit constants and speed conversions."""

from __future__ import annotations

METER = 1
KILOMETER = 1000 * METER
HOUR = 3600  # seconds
MILLISECONDS_PER_SECOND = 1000


def kmh_to_ms(kmh: float) -> float:
    """Convert km/h to m/s."""
    return kmh * KILOMETER / HOUR


def ms_to_kmh(ms: float) -> float:
    """Convert m/s to km/h."""
    return ms * HOUR / KILOMETER
