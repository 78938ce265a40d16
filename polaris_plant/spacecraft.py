"""Spacecraft plant: propagates truth dynamics and produces sensor data."""

from __future__ import annotations

import logging
from typing import Any

from polaris_plant.actuators import TruthActuatorBus
from polaris_plant.attitude import TruthAttitudeBus, TruthMultibodyBus
from polaris_plant.params import SpacecraftParamBus
from polaris_plant.sensors import RawSensorBus, TruthSensorBus
from polaris_plant.state import SpacecraftState

logger = logging.getLogger(__name__)


class Spacecraft:
    """The simulated spacecraft, stepped once per call to :meth:`simulate_plant`."""

    def __init__(self, ts: float, sc_param_bus: SpacecraftParamBus | None = None) -> None:
        logger.debug("Initializing plant")
        self.sim_time = 0.0
        self.ts = ts
        self.sc_param_bus = sc_param_bus if sc_param_bus is not None else SpacecraftParamBus()
        logger.debug("Initializing attitude bus")
        attitude = TruthAttitudeBus.from_params(ts, self.sc_param_bus.sc_attitude)
        self.prev_sc_state = SpacecraftState()
        self.curr_sc_state = SpacecraftState(truth_attitude=attitude)

    def __repr__(self) -> str:
        return f"Spacecraft(ts={self.ts!r}, sim_time={self.sim_time!r})"

    def initial_state(self) -> RawSensorBus:
        """Return the sensor bus before any step has run."""
        return RawSensorBus()

    def simulate_plant(self, actuator_commands: Any) -> RawSensorBus:
        """Advance the plant one step under ``actuator_commands`` and return sensor data."""
        logger.debug("Running plant loop")
        self.prev_sc_state, self.curr_sc_state = self.curr_sc_state, self.prev_sc_state
        prev, curr = self.prev_sc_state, self.curr_sc_state

        curr.truth_actuator_bus = TruthActuatorBus.process(
            actuator_commands, prev.truth_actuator_bus
        )
        curr.truth_ephemeris.process(curr.truth_actuator_bus, prev.truth_ephemeris)
        curr.truth_attitude.process(curr.truth_actuator_bus, prev.truth_attitude)
        curr.truth_multibody = TruthMultibodyBus.process(
            curr.truth_actuator_bus, prev.truth_multibody
        )
        curr.truth_sensor_bus = TruthSensorBus.process(
            actuator_commands,
            curr.truth_actuator_bus,
            curr.truth_ephemeris,
            curr.truth_attitude,
            curr.truth_multibody,
            prev.truth_sensor_bus,
        )

        self.sim_time += self.ts
        return curr.truth_sensor_bus.to_raw_bus()