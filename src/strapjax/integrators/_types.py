"""Type definitions for the fixed-step integrator.

:class:`StepResult` is a :class:`~typing.NamedTuple`, which JAX treats as a
pytree automatically, so it can be carried through ``jax.lax.scan``.
"""

from __future__ import annotations

from typing import NamedTuple

from jax import Array


class StepResult(NamedTuple):
    """Result of a single RK4 step.

    Attributes:
        state: State vector at time ``t + dt``.
        slope: Weighted average of the four stage derivatives,
            ``(k1 + 2*k2 + 2*k3 + k4) / 6``.  ``state`` equals
            ``state_0 + dt * slope``.
    """

    state: Array
    slope: Array
