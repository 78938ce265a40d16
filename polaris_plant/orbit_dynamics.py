"""Two-body orbital dynamics."""

from __future__ import annotations

import numpy as np

from polaris_plant.constants import MU


def orbital_twobody(t: float, state0: np.ndarray, inpt: np.ndarray) -> np.ndarray:
    """Time derivative of ``[r (3, ECI m), v (3, ECI m/s)]`` under point-mass gravity."""
    state0 = np.asarray(state0, dtype=float)
    rsc = state0[0:3]
    vsc = state0[3:6]
    mrsc = float(np.linalg.norm(rsc))
    asc = -MU * rsc / mrsc**3
    return np.concatenate([vsc, asc])