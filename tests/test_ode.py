import math

import numpy as np
import pytest

from polaris_plant.ode import RK2, RK5


def zero(t, state, inputs):
    return np.zeros_like(state)


def decay(t, state, inputs):
    return -state


@pytest.mark.parametrize("integrator", [RK2(0.1), RK5(0.1)])
def test_zero_derivative_keeps_state(integrator):
    state = np.array([1.0, -2.0, 3.5])
    result = integrator.integrate(zero, 0.0, state, np.zeros((1, 1)))
    np.testing.assert_allclose(result, state)


@pytest.mark.parametrize("integrator", [RK2(0.25), RK5(0.25)])
def test_constant_derivative_is_linear(integrator):
    rate = np.array([2.0, -1.0])
    state = np.array([0.5, 0.5])
    result = integrator.integrate(lambda t, s, i: rate, 0.0, state, np.zeros((1, 1)))
    np.testing.assert_allclose(result, state + 0.25 * rate)


@pytest.mark.parametrize("integrator", [RK2(0.2), RK5(0.2)])
def test_inputs_are_forwarded(integrator):
    inputs = np.array([[3.0], [4.0]])
    state = np.zeros(2)
    result = integrator.integrate(lambda t, s, i: i[:, 0], 0.0, state, inputs)
    np.testing.assert_allclose(result, 0.2 * inputs[:, 0])


def test_rk2_integrates_time_exactly():
    h = 0.3
    t0 = 1.0
    result = RK2(h).integrate(lambda t, s, i: np.array([t]), t0, np.zeros(1), np.zeros((1, 1)))
    expected = ((t0 + h) ** 2 - t0**2) / 2.0
    assert result[0] == pytest.approx(expected)


def test_rk5_exponential_decay_accuracy():
    result = RK5(0.1).integrate(decay, 0.0, np.array([1.0]), np.zeros((1, 1)))
    assert result[0] == pytest.approx(math.exp(-0.1), abs=1e-7)


def test_rk5_more_accurate_than_rk2():
    state = np.array([1.0])
    exact = math.exp(-0.5)
    err2 = abs(RK2(0.5).integrate(decay, 0.0, state, np.zeros((1, 1)))[0] - exact)
    err5 = abs(RK5(0.5).integrate(decay, 0.0, state, np.zeros((1, 1)))[0] - exact)
    assert err5 < err2


def test_integrate_does_not_mutate_state():
    state = np.array([1.0, 2.0])
    RK5(0.1).integrate(decay, 0.0, state, np.zeros((1, 1)))
    np.testing.assert_array_equal(state, np.array([1.0, 2.0]))