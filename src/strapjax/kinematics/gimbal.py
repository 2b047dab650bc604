"""Euler-angle kinematics: the gimbal equation and its RK4 rate estimate.

The gimbal equation maps body rates to roll/pitch/yaw rates.  It divides by
``cos(theta)`` and is singular at ``theta = +-pi/2`` (gimbal lock).  No
guard is applied: near the singularity the rates become non-finite and the
non-finite values propagate through the rest of a run.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from strapjax.config import get_dtype
from strapjax.integrators import rk4_slope
from strapjax.kinematics.angular_rates import AngularRates


class EulerRates(NamedTuple):
    """Time-derivatives of the roll, pitch and yaw angles [rad/s]."""

    phi_dot: Array
    theta_dot: Array
    psi_dot: Array

    def to_vector(self) -> Array:
        """Stack the rates into a ``(3,)`` array."""
        return jnp.stack([self.phi_dot, self.theta_dot, self.psi_dot])


def euler_rates(phi: ArrayLike, theta: ArrayLike, rates: AngularRates) -> EulerRates:
    """Convert body rates to Euler-angle rates.

    .. math::

        \\dot\\phi &= \\tan\\theta \\sin\\phi \\, p + \\tan\\theta \\cos\\phi \\, r \\\\
        \\dot\\theta &= \\cos\\phi \\, q - \\sin\\phi \\, r \\\\
        \\dot\\psi &= \\frac{\\sin\\phi}{\\cos\\theta} q + \\frac{\\cos\\phi}{\\cos\\theta} r

    Yaw does not enter the transform, so only roll and pitch are taken.

    Args:
        phi: Roll angle [rad].
        theta: Pitch angle [rad].
        rates: Body rates [rad/s].

    Returns:
        EulerRates: ``(phi_dot, theta_dot, psi_dot)`` [rad/s].

    Examples:
        ```python
        from strapjax.kinematics import angular_rates, euler_rates
        euler_rates(0.0, 0.0, angular_rates(0.0))  # (0, 1, 0)
        ```
    """
    _float = get_dtype()
    phi = jnp.asarray(phi, dtype=_float)
    theta = jnp.asarray(theta, dtype=_float)
    p, q, r = rates

    sphi, cphi = jnp.sin(phi), jnp.cos(phi)
    tthe, cthe = jnp.tan(theta), jnp.cos(theta)

    phi_dot = tthe * sphi * p + tthe * cphi * r
    theta_dot = cphi * q - sphi * r
    psi_dot = (sphi / cthe) * q + (cphi / cthe) * r

    return EulerRates(phi_dot=phi_dot, theta_dot=theta_dot, psi_dot=psi_dot)


def propagate_euler_rates(euler: ArrayLike, rates: AngularRates, dt: ArrayLike) -> EulerRates:
    """RK4-averaged Euler-angle rates over one step.

    Treats :func:`euler_rates` as the ODE right-hand side for the state
    ``[phi, theta, psi]`` and returns ``(k1 + 2*k2 + 2*k3 + k4) / 6``.  The
    body rates are held at their start-of-step value across all four stages
    rather than resampled at ``t + dt/2`` and ``t + dt``.

    The caller applies the step itself: ``euler + dt * result``.

    Args:
        euler: Euler angles ``[phi, theta, psi]`` of shape ``(3,)`` [rad].
        rates: Body rates at the start of the step [rad/s].
        dt: Timestep [s].

    Returns:
        EulerRates: Averaged ``(phi_dot, theta_dot, psi_dot)`` [rad/s].
    """

    def gimbal_dynamics(t, x):
        return euler_rates(x[0], x[1], rates).to_vector()

    slope = rk4_slope(gimbal_dynamics, 0.0, euler, dt)

    return EulerRates(phi_dot=slope[0], theta_dot=slope[1], psi_dot=slope[2])
