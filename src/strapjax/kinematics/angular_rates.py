"""Analytic body-frame angular rate profile.

Stands in for a rate-gyro input.  The profile is a fixed function of time
only, so rates are recomputed from scratch at every step and carry no state
between steps.

.. math::

    p = \\frac{30\\pi}{6}, \\quad
    q = \\cos\\left(\\frac{6}{\\pi} t\\right), \\quad
    r = 3 \\sin\\left(\\frac{30}{\\pi} t\\right)

All rates are in rad/s.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from strapjax.config import get_dtype
from strapjax.constants import PI


class AngularRates(NamedTuple):
    """Body-frame angular rates [rad/s].

    Attributes:
        p: Roll rate about the body x-axis.
        q: Pitch rate about the body y-axis.
        r: Yaw rate about the body z-axis.
    """

    p: Array
    q: Array
    r: Array

    def to_vector(self) -> Array:
        """Stack the rates into a ``(3,)`` array ``[p, q, r]``."""
        return jnp.stack([self.p, self.q, self.r])


RateModel = Callable[[ArrayLike], AngularRates]
"""Signature of a rate profile: simulation time [s] -> :class:`AngularRates`."""


def angular_rates(t: ArrayLike) -> AngularRates:
    """Evaluate the analytic angular rate profile at time *t*.

    Args:
        t: Simulation time [s].  Scalars and arrays are both accepted.

    Returns:
        AngularRates: ``(p, q, r)`` in rad/s, each with the shape of *t*.

    Examples:
        ```python
        from strapjax.kinematics import angular_rates
        rates = angular_rates(0.0)
        float(rates.q)  # 1.0
        ```
    """
    _float = get_dtype()
    t = jnp.asarray(t, dtype=_float)

    p = jnp.full_like(t, 30.0 * PI / 6.0)
    q = jnp.cos((6.0 / PI) * t)
    r = 3.0 * jnp.sin((30.0 / PI) * t)

    return AngularRates(p=p, q=q, r=r)


def zero_angular_rates(t: ArrayLike) -> AngularRates:
    """Rate profile of a non-rotating body.

    Args:
        t: Simulation time [s].

    Returns:
        AngularRates: Zeros with the shape of *t*.
    """
    _float = get_dtype()
    zero = jnp.zeros_like(jnp.asarray(t, dtype=_float))
    return AngularRates(p=zero, q=zero, r=zero)
