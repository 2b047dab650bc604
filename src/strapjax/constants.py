"""
The `constants` module defines the mathematical and unit-conversion constants
shared by the attitude kinematics and the simulation driver.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

# Unit Conversions
"""
Constant to convert knots to feet per second. Units: *(ft/s)/kt*
"""
KNOTS2FPS = 1.68781

# Simulation Defaults
"""
Length of a simulation run. Units: *s*
"""
DEFAULT_TOTAL_TIME = 60.0

"""
Initial airspeed along the body x-axis. Units: *kt*
"""
DEFAULT_AIRSPEED_KNOTS = 60.0

"""
Step sizes swept by the reference driver, coarsest first. Units: *s*
"""
DEFAULT_STEP_SIZES = (0.2, 0.1, 0.025, 0.0125)
