"""Fixed-step numerical ODE integration.

Provides the classic 4th-order Runge-Kutta method implemented in JAX for
compatibility with ``jax.jit``, ``jax.vmap`` and ``jax.lax.scan``:

- :func:`rk4_slope` -- weighted average of the four stage derivatives
- :func:`rk4_step` -- full step, returning a :class:`StepResult`

Both share the interface ``fn(dynamics, t, state, dt)`` where
``dynamics(t, x) -> dx`` defines the ODE right-hand side.
"""

from strapjax.integrators._types import StepResult
from strapjax.integrators.rk4 import rk4_slope, rk4_step

__all__ = [
    "StepResult",
    "rk4_slope",
    "rk4_step",
]
