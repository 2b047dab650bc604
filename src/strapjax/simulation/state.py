"""Simulation state and per-step output records.

Both types are :class:`~typing.NamedTuple` instances and therefore JAX
pytrees: :class:`SimulationState` is the ``jax.lax.scan`` carry and
:class:`StateRecord` is its per-step output.  Once a run completes, every
field of the returned :class:`StateRecord` has a leading step axis.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array

from strapjax.config import get_dtype
from strapjax.simulation.config import SimulationConfig


class SimulationState(NamedTuple):
    """Evolving vehicle state.

    Attributes:
        euler: Euler angles ``[phi, theta, psi]`` [rad].
        dcm: Body-to-NED direction cosine matrix, shape ``(3, 3)``.
        body_velocity: Body-frame velocity [ft/s].  Never updated.
        position: NED position [ft].
    """

    euler: Array
    dcm: Array
    body_velocity: Array
    position: Array


class StateRecord(NamedTuple):
    """One output row, or a stack of rows after a run.

    Attributes:
        time: Simulation time [s].
        euler: Euler angles at ``time`` [deg].
        rates: Body rates ``[p, q, r]`` [deg/s].
        euler_rates: RK4-averaged Euler-angle rates [deg/s].
        velocity_ned: NED velocity after the DCM update [ft/s].
        position_ned: NED position after the position update [ft].
    """

    time: Array
    euler: Array
    rates: Array
    euler_rates: Array
    velocity_ned: Array
    position_ned: Array


def initial_state(config: SimulationConfig) -> SimulationState:
    """Build a fresh :class:`SimulationState` from a run configuration.

    Every call returns new arrays, so independent runs never share state.

    Args:
        config: Run configuration.

    Returns:
        SimulationState: State at ``t = 0`` in the configured dtype.
    """
    _float = get_dtype()
    ic = config.initial
    return SimulationState(
        euler=jnp.array(ic.euler, dtype=_float),
        dcm=jnp.array(ic.dcm, dtype=_float),
        body_velocity=jnp.array(ic.body_velocity, dtype=_float),
        position=jnp.array(ic.position, dtype=_float),
    )
