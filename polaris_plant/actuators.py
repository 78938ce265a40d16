"""Truth actuator model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np


def _zeros3() -> np.ndarray:
    return np.zeros((3, 1))


@dataclass(eq=False)
class TruthActuatorBus:
    """Net forces and torques applied to the spacecraft body."""

    net_forces: np.ndarray = field(default_factory=_zeros3)
    net_torques: np.ndarray = field(default_factory=_zeros3)

    @staticmethod
    def process(actuator_cmd: Any, prev_actuator: "TruthActuatorBus") -> "TruthActuatorBus":
        """Return the actuator output for the given commands (currently none applied)."""
        return TruthActuatorBus()