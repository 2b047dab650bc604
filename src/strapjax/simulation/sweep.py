"""Run one independent simulation per step size.

Each run gets its own :class:`~strapjax.simulation.config.SimulationConfig`
and therefore its own freshly built state; runs share nothing and could be
executed in any order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array

from strapjax.constants import DEFAULT_STEP_SIZES, DEFAULT_TOTAL_TIME
from strapjax.kinematics import RateModel, angular_rates
from strapjax.simulation.config import InitialConditions, SimulationConfig
from strapjax.simulation.driver import propagate
from strapjax.simulation.state import StateRecord

logger = logging.getLogger(__name__)


class SweepResult(NamedTuple):
    """Outcome of one run in a step-size sweep.

    Attributes:
        dt: Timestep of the run [s].
        records: Stacked per-step records.
        final_position: NED position at the end of the run [ft].
    """

    dt: float
    records: StateRecord
    final_position: Array


def run_sweep(
    step_sizes: Iterable[float] = DEFAULT_STEP_SIZES,
    total_time: float = DEFAULT_TOTAL_TIME,
    initial: InitialConditions | None = None,
    rate_model: RateModel = angular_rates,
) -> list[SweepResult]:
    """Simulate the same scenario once for every step size.

    Args:
        step_sizes: Timesteps to run [s].
        total_time: Horizon shared by every run [s].
        initial: Initial conditions shared by every run.  Default:
            :class:`InitialConditions` defaults.
        rate_model: Body-rate profile.

    Returns:
        list[SweepResult]: One result per step size, in input order.

    Raises:
        ValueError: If a step size is not valid for *total_time*.
    """
    if initial is None:
        initial = InitialConditions()

    results = []
    for dt in step_sizes:
        config = SimulationConfig(dt=dt, total_time=total_time, initial=initial)
        logger.info("Running dt=%g s over %g s", dt, total_time)
        final_state, records = propagate(config, rate_model)
        results.append(SweepResult(dt=dt, records=records, final_position=final_state.position))
    return results


def final_position_differences(results: Iterable[SweepResult]) -> dict[float, float]:
    """Distance between each run's final position and the finest run's.

    The run with the smallest step size is the reference.  For a convergent
    scheme the distances shrink as the step size shrinks.

    Args:
        results: Sweep results over a common horizon.

    Returns:
        dict[float, float]: Step size -> ``|r_final(dt) - r_final(dt_min)|``
            [ft].  The reference maps to ``0.0``.

    Raises:
        ValueError: If *results* is empty.
    """
    results = list(results)
    if not results:
        raise ValueError("At least one sweep result is required")

    reference = min(results, key=lambda res: res.dt)
    return {
        res.dt: float(jnp.linalg.norm(res.final_position - reference.final_position))
        for res in results
    }
