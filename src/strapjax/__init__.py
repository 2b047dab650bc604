"""
strapjax is a small strapdown attitude kinematics simulator implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    KNOTS2FPS,
    DEFAULT_TOTAL_TIME,
    DEFAULT_AIRSPEED_KNOTS,
    DEFAULT_STEP_SIZES,
)

from .config import set_dtype, get_dtype

from .kinematics import (
    AngularRates,
    EulerRates,
    angular_rates,
    euler_rates,
    propagate_euler_rates,
    skew_matrix,
    normalize_rows,
    dcm_step,
)

from .integrators import (
    StepResult,
    rk4_slope,
    rk4_step,
)

from .simulation import (
    InitialConditions,
    SimulationConfig,
    SimulationState,
    StateRecord,
    simulate,
    run_sweep,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "KNOTS2FPS",
    "DEFAULT_TOTAL_TIME",
    "DEFAULT_AIRSPEED_KNOTS",
    "DEFAULT_STEP_SIZES",
    # Config
    "set_dtype",
    "get_dtype",
    # Kinematics
    "AngularRates",
    "EulerRates",
    "angular_rates",
    "euler_rates",
    "propagate_euler_rates",
    "skew_matrix",
    "normalize_rows",
    "dcm_step",
    # Integrators
    "StepResult",
    "rk4_slope",
    "rk4_step",
    # Simulation
    "InitialConditions",
    "SimulationConfig",
    "SimulationState",
    "StateRecord",
    "simulate",
    "run_sweep",
]
