"""Truth sensor model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class RawSensorBus:
    """Raw sensor measurements handed to flight software."""


@dataclass
class TruthSensorBus:
    """True sensor readings derived from the plant state."""

    @staticmethod
    def process(
        actuator_cmd: Any,
        actuator_dynamics: Any,
        ephemeris_bus: Any,
        attitude_bus: Any,
        multibody_bus: Any,
        prev_sensor: "TruthSensorBus",
    ) -> "TruthSensorBus":
        """Return sensor truth for the current plant state (no sensors modelled yet)."""
        return TruthSensorBus()

    def to_raw_bus(self) -> RawSensorBus:
        """Convert truth readings to the raw sensor bus."""
        return RawSensorBus()