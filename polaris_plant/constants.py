"""Physical constants for Earth-orbit dynamics."""

RE: float = 6378.1370e3
"""Earth equatorial radius [m]."""

MU: float = 3.986004e14
"""Earth gravitational parameter [m^3/s^2]."""