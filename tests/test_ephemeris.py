import math

import numpy as np
import pytest

from polaris_plant.actuators import TruthActuatorBus
from polaris_plant.constants import MU, RE
from polaris_plant.ephemeris import TruthEphemerisBus, TruthEphemerisSignal


def _energy(signal):
    r = np.linalg.norm(signal.r_sc_eci)
    v = np.linalg.norm(signal.v_sc_eci)
    return 0.5 * v * v - MU / r


def test_default_signal_is_circular_orbit_at_900km():
    signal = TruthEphemerisSignal()
    a = RE + 900e3
    np.testing.assert_array_equal(signal.r_sc_eci, [[a], [0.0], [0.0]])
    np.testing.assert_allclose(signal.v_sc_eci, [[0.0], [math.sqrt(MU / a)], [0.0]])


def test_state_vector_round_trip():
    signal = TruthEphemerisSignal(r_sc_eci=[7e6, 1e5, -2e5], v_sc_eci=[10.0, 7500.0, 3.0])
    vec = signal.to_state_vector()
    assert vec.shape == (6,)
    other = TruthEphemerisSignal()
    other.from_state_vector(vec)
    np.testing.assert_array_equal(other.r_sc_eci, signal.r_sc_eci)
    np.testing.assert_array_equal(other.v_sc_eci, signal.v_sc_eci)


def test_from_state_vector_rejects_short_vector():
    with pytest.raises(ValueError):
        TruthEphemerisSignal().from_state_vector(np.zeros(4))


def test_with_step_sets_integrator_step():
    bus = TruthEphemerisBus.with_step(2.5)
    assert bus.integrator.step == 2.5
    np.testing.assert_array_equal(
        bus.signal.to_state_vector(), TruthEphemerisSignal().to_state_vector()
    )


def test_default_bus_step():
    assert TruthEphemerisBus().integrator.step == 0.1


def test_process_moves_along_orbit_preserving_radius_and_energy():
    prev = TruthEphemerisBus.with_step(1.0)
    curr = TruthEphemerisBus.with_step(1.0)
    curr.process(TruthActuatorBus(), prev)
    r_prev = np.linalg.norm(prev.signal.r_sc_eci)
    r_curr = np.linalg.norm(curr.signal.r_sc_eci)
    assert r_curr == pytest.approx(r_prev, rel=1e-9)
    assert _energy(curr.signal) == pytest.approx(_energy(prev.signal), rel=1e-9)
    assert curr.signal.r_sc_eci[1, 0] > 0.0
    assert curr.signal.r_sc_eci[2, 0] == pytest.approx(0.0, abs=1e-9)


def test_repeated_steps_conserve_angular_momentum():
    prev = TruthEphemerisBus.with_step(10.0)
    curr = TruthEphemerisBus.with_step(10.0)
    h0 = np.cross(prev.signal.r_sc_eci.ravel(), prev.signal.v_sc_eci.ravel())
    for _ in range(20):
        curr.process(TruthActuatorBus(), prev)
        prev, curr = curr, prev
    h = np.cross(prev.signal.r_sc_eci.ravel(), prev.signal.v_sc_eci.ravel())
    np.testing.assert_allclose(h, h0, rtol=1e-8)


def test_process_leaves_previous_untouched():
    prev = TruthEphemerisBus()
    before = prev.signal.to_state_vector().copy()
    curr = TruthEphemerisBus()
    curr.process(TruthActuatorBus(), prev)
    np.testing.assert_array_equal(prev.signal.to_state_vector(), before)