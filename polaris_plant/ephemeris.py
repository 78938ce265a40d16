"""Truth orbital ephemeris model."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from polaris_plant.actuators import TruthActuatorBus
from polaris_plant.constants import MU, RE
from polaris_plant.ode import RK5
from polaris_plant.orbit_dynamics import orbital_twobody

_STATE_SIZE = 6
_DEFAULT_ALTITUDE = 900e3


def _default_position() -> np.ndarray:
    return np.array([[RE + _DEFAULT_ALTITUDE], [0.0], [0.0]])


def _default_velocity() -> np.ndarray:
    return np.array([[0.0], [math.sqrt(MU / (RE + _DEFAULT_ALTITUDE))], [0.0]])


def _default_integrator() -> RK5:
    return RK5(0.1)


@dataclass(eq=False)
class TruthEphemerisSignal:
    """True ECI position [m] and velocity [m/s]; defaults to a circular equatorial orbit."""

    r_sc_eci: np.ndarray = field(default_factory=_default_position)
    v_sc_eci: np.ndarray = field(default_factory=_default_velocity)

    def __post_init__(self) -> None:
        self.r_sc_eci = np.array(self.r_sc_eci, dtype=float).reshape(3, 1)
        self.v_sc_eci = np.array(self.v_sc_eci, dtype=float).reshape(3, 1)

    def to_state_vector(self) -> np.ndarray:
        """Return ``[r (3), v (3)]`` as a flat vector."""
        return np.concatenate([self.r_sc_eci.ravel(), self.v_sc_eci.ravel()])

    def from_state_vector(self, state_vec: np.ndarray) -> None:
        """Set the signal from a flat ``[r (3), v (3)]`` vector."""
        state_vec = np.asarray(state_vec, dtype=float).ravel()
        if state_vec.size < _STATE_SIZE:
            raise ValueError(
                f"ephemeris state vector needs {_STATE_SIZE} elements, got {state_vec.size}"
            )
        self.r_sc_eci = state_vec[0:3].reshape(3, 1).copy()
        self.v_sc_eci = state_vec[3:6].reshape(3, 1).copy()


@dataclass(eq=False)
class TruthEphemerisBus:
    """Propagated true orbital state of the spacecraft."""

    signal: TruthEphemerisSignal = field(default_factory=TruthEphemerisSignal)
    integrator: RK5 = field(default_factory=_default_integrator)

    @classmethod
    def with_step(cls, sc_ts: float) -> "TruthEphemerisBus":
        """Build a bus at the default orbit that integrates with step ``sc_ts``."""
        return cls(integrator=RK5(sc_ts))

    def process(
        self, actuator_dynamics: TruthActuatorBus, prev_ephem: "TruthEphemerisBus"
    ) -> None:
        """Propagate the previous orbital state one step."""
        state0 = prev_ephem.signal.to_state_vector()
        new_state = self.integrator.integrate(
            orbital_twobody,
            0.0,
            state0,
            np.asarray(actuator_dynamics.net_forces, dtype=float).copy(),
        )
        self.signal.from_state_vector(new_state)