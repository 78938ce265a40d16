"""Truth attitude and multibody models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from polaris_plant.actuators import TruthActuatorBus
from polaris_plant.attitude_dynamics import rigid_body_dynamics
from polaris_plant.ode import RK5
from polaris_plant.params import SpacecraftAttitudeArchitecture

_STATE_SIZE = 7
_SPACECRAFT_INERTIA = np.diag([10.0, 20.0, 30.0])


def _identity_quaternion() -> np.ndarray:
    return np.array([[0.0], [0.0], [0.0], [1.0]])


def _zeros3() -> np.ndarray:
    return np.zeros((3, 1))


def _default_integrator() -> RK5:
    return RK5(0.1)


@dataclass(eq=False)
class TruthAttitudeSignal:
    """True attitude quaternion (scalar last, ECI to body) and body rate."""

    q_sc_eci: np.ndarray = field(default_factory=_identity_quaternion)
    omega_sc: np.ndarray = field(default_factory=_zeros3)

    def __post_init__(self) -> None:
        self.q_sc_eci = np.array(self.q_sc_eci, dtype=float).reshape(4, 1)
        self.omega_sc = np.array(self.omega_sc, dtype=float).reshape(3, 1)

    def to_state_vector(self) -> np.ndarray:
        """Return ``[q (4), omega (3)]`` as a flat vector."""
        return np.concatenate([self.q_sc_eci.ravel(), self.omega_sc.ravel()])

    def from_state_vector(self, state_vec: np.ndarray) -> None:
        """Set the signal from a flat ``[q (4), omega (3)]`` vector."""
        state_vec = np.asarray(state_vec, dtype=float).ravel()
        if state_vec.size < _STATE_SIZE:
            raise ValueError(
                f"attitude state vector needs {_STATE_SIZE} elements, got {state_vec.size}"
            )
        self.q_sc_eci = state_vec[0:4].reshape(4, 1).copy()
        self.omega_sc = state_vec[4:7].reshape(3, 1).copy()


@dataclass(eq=False)
class TruthAttitudeBus:
    """Propagated true attitude of the spacecraft."""

    signal: TruthAttitudeSignal = field(default_factory=TruthAttitudeSignal)
    integrator: RK5 = field(default_factory=_default_integrator)

    @classmethod
    def from_params(
        cls, sc_ts: float, attitude_params: SpacecraftAttitudeArchitecture
    ) -> "TruthAttitudeBus":
        """Build the bus from the attitude architecture with step ``sc_ts``."""
        return cls(
            signal=TruthAttitudeSignal(
                q_sc_eci=attitude_params.q_sc_eci.copy(),
                omega_sc=attitude_params.omega_sc.copy(),
            ),
            integrator=RK5(sc_ts),
        )

    def process(
        self, actuator_dynamics: TruthActuatorBus, prev_attitude: "TruthAttitudeBus"
    ) -> None:
        """Propagate the previous attitude one step under the actuator torques."""
        state0 = prev_attitude.signal.to_state_vector()
        torques = np.asarray(actuator_dynamics.net_torques, dtype=float).reshape(3, 1)
        inputs = np.hstack([torques, _SPACECRAFT_INERTIA])
        new_state = self.integrator.integrate(rigid_body_dynamics, 0.0, state0, inputs)
        self.signal.from_state_vector(new_state)


@dataclass
class TruthMultibodyBus:
    """True multibody state (no appendages modelled yet)."""

    @staticmethod
    def process(
        actuator_dynamics: Any, prev_multibody: "TruthMultibodyBus"
    ) -> "TruthMultibodyBus":
        """Return the multibody state for the current step."""
        return TruthMultibodyBus()