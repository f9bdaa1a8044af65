"""Speed reading produced by a completed measurement."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from speedradar.models.vehicle import Vehicle
from speedradar.units import ms_to_kmh


class SpeedReading(BaseModel):
    """Result of one arm-then-complete measurement."""

    model_config = ConfigDict(frozen=True)

    vehicle: Vehicle
    elapsed_ms: float
    speed_ms: float
    limit_kmh: float
    exceeded: bool

    @property
    def speed_kmh(self) -> float:
        """Measured speed converted to km/h."""
        return ms_to_kmh(self.speed_ms)
