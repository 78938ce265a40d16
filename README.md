# polaris_plant

A truth-model "plant" for spacecraft guidance, navigation and control
simulation. Each step propagates the spacecraft's orbit under two-body point-mass
gravity and its rigid-body attitude. Both use a fixed-step fifth-order
Runge-Kutta integrator. Each step returns a raw sensor bus for flight software
to consume.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Usage

```python
from polaris_plant.params import SpacecraftParamBus
from polaris_plant.spacecraft import Spacecraft

plant = Spacecraft(0.1, SpacecraftParamBus())
sensors = plant.initial_state()

for _ in range(100):
    sensors = plant.simulate_plant(actuator_commands=None)

print(plant.sim_time)
print(plant.curr_sc_state.truth_ephemeris.signal.r_sc_eci)
print(plant.curr_sc_state.truth_attitude.signal.q_sc_eci)
```

`Spacecraft(ts, sc_param_bus=None)` takes the step size `ts`. If no parameter
bus is given, it uses a default `SpacecraftParamBus()`. The current attitude
starts from `sc_param_bus.sc_attitude`.

`simulate_plant(actuator_commands)` does the following in order:

1. It swaps the previous and current `SpacecraftState`.
2. It updates the actuator, ephemeris, attitude, multibody and sensor buses.
3. It advances `sim_time` by `ts`.
4. It returns a `RawSensorBus`.

## Modules

- `polaris_plant.constants`
  - `RE` is the Earth equatorial radius in metres.
  - `MU` is the Earth gravitational parameter in m^3/s^2.
- `polaris_plant.ode`
  - `RK2` and `RK5` are frozen dataclasses built with a `step`.
  - Their `integrate(d_func, time, state0, inputs)` method takes one step of a derivative `d_func(t, state, inputs)`.
- `polaris_plant.orbit_dynamics`
  - `orbital_twobody(t, state0, inpt)` is the point-mass gravity derivative of `[r, v]`. `inpt` is ignored.
- `polaris_plant.attitude_dynamics`
  - `rigid_body_dynamics(t, state0, inpt)` gives the derivative of `[q, omega]` from quaternion kinematics and Euler's equations.
  - Its `inpt` is a 3×4 matrix: column 0 is the body torque and columns 1–3 are the inertia matrix.
  - `inv_3x3(j)` inverts a 3×3 matrix.
- `polaris_plant.ephemeris`
  - `TruthEphemerisSignal` holds ECI position and velocity. It defaults to a circular equatorial orbit at 900 km altitude. It has `to_state_vector()` and `from_state_vector(...)`.
  - `TruthEphemerisBus` propagates that signal. `TruthEphemerisBus.with_step(sc_ts)` builds one with a chosen step.
- `polaris_plant.attitude`
  - `TruthAttitudeSignal` holds the quaternion and body rate.
  - `TruthAttitudeBus` propagates that signal with a fixed inertia of `diag(10, 20, 30)`. `TruthAttitudeBus.from_params(sc_ts, attitude_params)` builds one from an attitude architecture.
  - `TruthMultibodyBus` is also here.
- `polaris_plant.actuators`
  - `TruthActuatorBus` holds the net forces and net torques.
- `polaris_plant.sensors`
  - `TruthSensorBus` and `RawSensorBus`.
- `polaris_plant.params`
  - The spacecraft architecture dataclasses, which are the ephemeris, attitude, multibody, actuator and sensor architectures.
  - `SpacecraftParamBus`, which groups them.
- `polaris_plant.state`
  - `SpacecraftState`, which groups all the truth buses.
- `polaris_plant.spacecraft`
  - `Spacecraft`, the plant loop.

Quaternions are scalar-last `[x, y, z, w]`. Vectors are 3×1 column arrays. Units are SI.

## What it does not do

- Actuator commands have no effect. `TruthActuatorBus.process` always returns zero forces and torques.
- Orbit propagation does not use the actuator forces.
- No sensors are modelled. `TruthSensorBus` and `RawSensorBus` carry no data.
- No multibody dynamics are modelled.
- Most of the parameter bus is not used by the plant loop. Only the attitude architecture's quaternion and body rate reach the dynamics. The ephemeris architecture's initial orbit does not: the ephemeris buses start at their own 900 km default.
- Step size:
  - Buses built with their defaults integrate with a 0.1 s step whatever `ts` is.
  - The ephemeris buses inside `Spacecraft` are built this way.
  - Only the attitude bus built from the parameters uses `ts`.
- There is no command-line tool. The package is used as a library.