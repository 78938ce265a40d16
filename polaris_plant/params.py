"""Spacecraft architecture parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from polaris_plant.constants import MU, RE


def _column(values, size: int) -> np.ndarray:
    """Return ``values`` as a float column vector of ``size`` rows."""
    return np.asarray(values, dtype=float).reshape(size, 1)


def _zeros3() -> np.ndarray:
    return np.zeros((3, 1))


def _default_position() -> np.ndarray:
    return _column([RE + 500e3, 0.0, 0.0], 3)


def _default_velocity() -> np.ndarray:
    return _column([0.0, math.sqrt(MU / (RE + 500e3)), 0.0], 3)


def _identity_quaternion() -> np.ndarray:
    return _column([0.0, 0.0, 0.0, 1.0], 4)


@dataclass
class SpacecraftActuatorArchitecture:
    """Actuator configuration (no parameters yet)."""


@dataclass(eq=False)
class SpacecraftEphemerisArchitecture:
    """Initial orbital state in ECI; defaults to a 500 km circular equatorial orbit."""

    r_sc_eci: np.ndarray = field(default_factory=_default_position)
    v_sc_eci: np.ndarray = field(default_factory=_default_velocity)

    def __post_init__(self) -> None:
        self.r_sc_eci = _column(self.r_sc_eci, 3)
        self.v_sc_eci = _column(self.v_sc_eci, 3)


@dataclass(eq=False)
class SpacecraftAttitudeArchitecture:
    """Initial attitude quaternion (scalar last), body rate and body acceleration."""

    q_sc_eci: np.ndarray = field(default_factory=_identity_quaternion)
    omega_sc: np.ndarray = field(default_factory=_zeros3)
    alpha_sc: np.ndarray = field(default_factory=_zeros3)

    def __post_init__(self) -> None:
        self.q_sc_eci = _column(self.q_sc_eci, 4)
        self.omega_sc = _column(self.omega_sc, 3)
        self.alpha_sc = _column(self.alpha_sc, 3)


@dataclass(eq=False)
class SpacecraftMultibodyArchitecture:
    """Multibody configuration."""

    j_multibody: np.ndarray = field(default_factory=_zeros3)

    def __post_init__(self) -> None:
        self.j_multibody = _column(self.j_multibody, 3)


@dataclass
class SpacecraftSensorArchitecture:
    """Sensor configuration (no parameters yet)."""


@dataclass(eq=False)
class SpacecraftParamBus:
    """All spacecraft architecture parameters."""

    sc_actuators: SpacecraftActuatorArchitecture = field(
        default_factory=SpacecraftActuatorArchitecture
    )
    sc_ephemeris: SpacecraftEphemerisArchitecture = field(
        default_factory=SpacecraftEphemerisArchitecture
    )
    sc_attitude: SpacecraftAttitudeArchitecture = field(
        default_factory=SpacecraftAttitudeArchitecture
    )
    sc_multibody: SpacecraftMultibodyArchitecture = field(
        default_factory=SpacecraftMultibodyArchitecture
    )
    sc_sensors: SpacecraftSensorArchitecture = field(
        default_factory=SpacecraftSensorArchitecture
    )