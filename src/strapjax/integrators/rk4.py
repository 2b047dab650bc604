"""Classic 4th-order Runge-Kutta integrator (RK4).

Implements the standard four-stage explicit Runge-Kutta method for a
fixed step.  The Butcher tableau is:

.. math::

    \\begin{array}{c|cccc}
    0   &     &     &     &   \\\\
    1/2 & 1/2 &     &     &   \\\\
    1/2 &  0  & 1/2 &     &   \\\\
    1   &  0  &  0  &  1  &   \\\\
    \\hline
        & 1/6 & 1/3 & 1/3 & 1/6
    \\end{array}

:func:`rk4_slope` exposes the weighted stage average on its own so callers
that only want a refined rate estimate (and apply the step themselves) can
use it directly.
"""

from __future__ import annotations

from collections.abc import Callable

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from strapjax.config import get_dtype
from strapjax.integrators._types import StepResult


def rk4_slope(
    dynamics: Callable[[ArrayLike, ArrayLike], Array],
    t: ArrayLike,
    state: ArrayLike,
    dt: ArrayLike,
) -> Array:
    """Return the RK4 weighted-average derivative over one step.

    Args:
        dynamics: ODE right-hand side function ``f(t, x) -> dx/dt``.
        t: Current time.
        state: Current state vector.
        dt: Timestep.

    Returns:
        ``(k1 + 2*k2 + 2*k3 + k4) / 6``, same shape as ``state``.

    Examples:
        ```python
        import jax.numpy as jnp
        from strapjax.integrators import rk4_slope
        rk4_slope(lambda t, x: jnp.ones(3), 0.0, jnp.zeros(3), 0.1)  # [1, 1, 1]
        ```
    """
    dtype = get_dtype()
    t = jnp.asarray(t, dtype=dtype)
    state = jnp.asarray(state, dtype=dtype)
    dt = jnp.asarray(dt, dtype=dtype)

    k1 = dynamics(t, state)
    k2 = dynamics(t + 0.5 * dt, state + 0.5 * dt * k1)
    k3 = dynamics(t + 0.5 * dt, state + 0.5 * dt * k2)
    k4 = dynamics(t + dt, state + dt * k3)

    return (k1 + 2.0 * k2 + 2.0 * k3 + k4) / 6.0


def rk4_step(
    dynamics: Callable[[ArrayLike, ArrayLike], Array],
    t: ArrayLike,
    state: ArrayLike,
    dt: ArrayLike,
) -> StepResult:
    """Perform a single RK4 integration step.

    Advances the state from time ``t`` to ``t + dt``.  Compatible with
    ``jax.jit`` and ``jax.vmap``.

    Args:
        dynamics: ODE right-hand side function ``f(t, x) -> dx/dt``.
        t: Current time.
        state: Current state vector.
        dt: Timestep to take. May be negative for backward integration.

    Returns:
        StepResult: Named tuple with the new ``state`` and the ``slope``
            used to reach it.

    Examples:
        ```python
        import jax.numpy as jnp
        from strapjax.integrators import rk4_step
        def harmonic(t, x):
            return jnp.array([x[1], -x[0]])
        result = rk4_step(harmonic, 0.0, jnp.array([1.0, 0.0]), 0.01)
        result.state  # ~[cos(0.01), -sin(0.01)]
        ```
    """
    dtype = get_dtype()
    state = jnp.asarray(state, dtype=dtype)
    dt = jnp.asarray(dt, dtype=dtype)

    slope = rk4_slope(dynamics, t, state, dt)

    return StepResult(state=state + dt * slope, slope=slope)
