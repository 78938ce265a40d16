"""Fixed-step explicit Runge-Kutta integrators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

Derivative = Callable[[float, np.ndarray, np.ndarray], np.ndarray]


@dataclass(frozen=True)
class RK2:
    """Second-order (midpoint) Runge-Kutta integrator with a fixed step."""

    step: float

    def integrate(
        self,
        d_func: Derivative,
        time: float,
        state0: np.ndarray,
        inputs: np.ndarray,
    ) -> np.ndarray:
        """Advance ``state0`` by one step of the derivative ``d_func``."""
        h = self.step
        state0 = np.asarray(state0, dtype=float)
        k1 = np.asarray(d_func(time, state0, inputs), dtype=float) * h
        k2 = np.asarray(d_func(time + h / 2.0, state0 + k1 / 2.0, inputs), dtype=float) * h
        return state0 + k2


@dataclass(frozen=True)
class RK5:
    """Fifth-order (Nystrom) Runge-Kutta integrator with a fixed step."""

    step: float

    def integrate(
        self,
        d_func: Derivative,
        time: float,
        state0: np.ndarray,
        inputs: np.ndarray,
    ) -> np.ndarray:
        """Advance ``state0`` by one step of the derivative ``d_func``."""
        h = self.step
        state0 = np.asarray(state0, dtype=float)

        def stage(dt: float, kn: np.ndarray) -> np.ndarray:
            return np.asarray(d_func(time + dt, state0 + h * kn, inputs), dtype=float)

        k1 = stage(0.0, np.zeros_like(state0))
        k2 = stage(h / 3.0, k1 / 3.0)
        k3 = stage(2.0 * h / 25.0, 4.0 / 25.0 * k1 + 6.0 / 25.0 * k2)
        k4 = stage(h, 1.0 / 4.0 * k1 - 3.0 * k2 + 15.0 / 4.0 * k3)
        k5 = stage(
            2.0 / 3.0 * h,
            2.0 / 27.0 * k1 + 10.0 / 9.0 * k2 - 50.0 / 81.0 * k3 + 8.0 / 81.0 * k4,
        )
        k6 = stage(
            4.0 / 5.0 * h,
            2.0 / 25.0 * k1 + 12.0 / 25.0 * k2 + 2.0 / 15.0 * k3 + 8.0 / 75.0 * k4,
        )

        return state0 + h * (
            23.0 / 192.0 * k1 + 125.0 / 192.0 * k3 - 27.0 / 64.0 * k5 + 125.0 / 192.0 * k6
        )