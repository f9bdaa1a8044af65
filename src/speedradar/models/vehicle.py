"""Vehicle models and the fluent builder shared by every variant."""

from __future__ import annotations

from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from speedradar.exceptions import BuilderError, VehicleValidationError


class Vehicle(BaseModel):
    """Base vehicle. Fields left unset stay None."""

    model_config = ConfigDict(frozen=True)

    model: str | None = None
    color: str | None = None
    door_count: int | None = None
    year: int | None = None

    @property
    def label(self) -> str:
        """Model name for display, or 'unknown' if missing."""
        return self.model if self.model is not None else "unknown"

    @classmethod
    def builder(cls) -> VehicleBuilder[Self]:
        """Start a builder that produces an instance of this exact class.

        Usage:
            car = Car.builder().model("Uno").door_count(4).build()
        """
        return VehicleBuilder(cls)


class Car(Vehicle):
    """Passenger car."""


class Motorcycle(Vehicle):
    """Two-wheeled vehicle."""


V = TypeVar("V", bound=Vehicle)


class VehicleBuilder(Generic[V]):
    """Fluent builder bound to a concrete vehicle class.

    Setters return the builder itself. ``build()`` may be called once;
    afterwards the builder rejects further use.
    """

    def __init__(self, vehicle_type: type[V]) -> None:
        self._vehicle_type = vehicle_type
        self._fields: dict[str, Any] = {}
        self._built = False

    def _set(self, name: str, value: Any) -> VehicleBuilder[V]:
        if self._built:
            raise BuilderError(
                f"{self._vehicle_type.__name__} builder already built; start a new one"
            )
        self._fields[name] = value
        return self

    def model(self, model: str) -> VehicleBuilder[V]:
        return self._set("model", model)

    def color(self, color: str) -> VehicleBuilder[V]:
        return self._set("color", color)

    def door_count(self, door_count: int) -> VehicleBuilder[V]:
        return self._set("door_count", door_count)

    def year(self, year: int) -> VehicleBuilder[V]:
        return self._set("year", year)

    def build(self) -> V:
        """Validate the collected fields and return the finished vehicle."""
        if self._built:
            raise BuilderError(
                f"{self._vehicle_type.__name__} builder already built; start a new one"
            )
        try:
            vehicle = self._vehicle_type.model_validate(self._fields)
        except ValidationError as exc:
            raise VehicleValidationError(
                f"Failed to build {self._vehicle_type.__name__}: {exc}"
            ) from exc
        self._built = True
        return vehicle
