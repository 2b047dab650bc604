"""Fixed-horizon attitude simulation.

- **Configuration**: :class:`InitialConditions`, :class:`SimulationConfig`
- **State**: :class:`SimulationState` and per-step :class:`StateRecord`
- **Driver**: :func:`simulate` / :func:`propagate` for one run
- **Sweep**: :func:`run_sweep` for one independent run per step size
"""

from .config import InitialConditions, SimulationConfig
from .driver import num_steps, propagate, simulate, simulation_step
from .state import SimulationState, StateRecord, initial_state
from .sweep import SweepResult, final_position_differences, run_sweep

__all__ = [
    # Config
    "InitialConditions",
    "SimulationConfig",
    # State
    "SimulationState",
    "StateRecord",
    "initial_state",
    # Driver
    "num_steps",
    "simulation_step",
    "propagate",
    "simulate",
    # Sweep
    "SweepResult",
    "run_sweep",
    "final_position_differences",
]
