"""Rigid-body attitude kinematics and dynamics."""

from __future__ import annotations

import numpy as np


def inv_3x3(j: np.ndarray) -> np.ndarray:
    """Invert a 3x3 matrix via the cross products of its columns."""
    j = np.asarray(j, dtype=float)
    jx, jy, jz = j[0:3, 0], j[0:3, 1], j[0:3, 2]
    ijx = np.cross(jy, jz)
    ijy = np.cross(jz, jx)
    ijz = np.cross(jx, jy)
    det = float(jx @ ijx)
    return np.stack([ijx, ijy, ijz]) / det


def _cross_matrix(v: np.ndarray) -> np.ndarray:
    x, y, z = v
    return np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])


def _psi(q: np.ndarray) -> np.ndarray:
    """The 4x3 matrix Psi(q) of a scalar-last quaternion."""
    vec, scalar = q[0:3], q[3]
    return np.vstack([scalar * np.eye(3) - _cross_matrix(vec), -vec.reshape(1, 3)])


def rigid_body_dynamics(t: float, state0: np.ndarray, inpt: np.ndarray) -> np.ndarray:
    """Time derivative of ``[q (4, scalar last), omega (3)]``.

    ``inpt`` is a 3x4 matrix: column 0 is the body torque, columns 1-3 the
    inertia matrix.
    """
    state0 = np.asarray(state0, dtype=float)
    inpt = np.asarray(inpt, dtype=float)
    q = state0[0:4]
    w = state0[4:7]
    torque = inpt[0:3, 0]
    j_mat = inpt[0:3, 1:4]
    inv_j = inv_3x3(j_mat)

    # qdot = 0.5 * [w; 0] (x) q
    wquat = np.append(w, 0.0)
    wcross = np.hstack([_psi(wquat), wquat.reshape(4, 1)])
    qdot = 0.5 * (wcross @ q)

    # wdot = inv(J) (T - w x Jw)
    wdot = inv_j @ (torque - np.cross(w, j_mat @ w))

    return np.concatenate([qdot, wdot])