"""Complete truth state of the spacecraft plant."""

from __future__ import annotations

from dataclasses import dataclass, field

from polaris_plant.actuators import TruthActuatorBus
from polaris_plant.attitude import TruthAttitudeBus, TruthMultibodyBus
from polaris_plant.ephemeris import TruthEphemerisBus
from polaris_plant.sensors import TruthSensorBus


@dataclass(eq=False)
class SpacecraftState:
    """Truth buses for actuators, orbit, attitude, multibody and sensors."""

    truth_actuator_bus: TruthActuatorBus = field(default_factory=TruthActuatorBus)
    truth_ephemeris: TruthEphemerisBus = field(default_factory=TruthEphemerisBus)
    truth_attitude: TruthAttitudeBus = field(default_factory=TruthAttitudeBus)
    truth_multibody: TruthMultibodyBus = field(default_factory=TruthMultibodyBus)
    truth_sensor_bus: TruthSensorBus = field(default_factory=TruthSensorBus)