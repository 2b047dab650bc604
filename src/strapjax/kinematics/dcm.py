"""Strapdown direction cosine matrix (DCM) kinematics.

The DCM ``C`` rotates body-frame vectors into the NED navigation frame.  It
is advanced with an explicit first-order step of

.. math::

    \\dot C = C \\, \\Omega, \\qquad
    \\Omega = \\begin{bmatrix} 0 & -r & q \\\\ r & 0 & -p \\\\ -q & p & 0 \\end{bmatrix}

followed by a row-wise renormalization.  Rescaling each row to unit length
keeps the row magnitudes at one but does not restore orthogonality between
rows, so ``C`` is only approximately orthonormal after many steps.
:func:`orthonormality_error` measures that drift.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from strapjax.config import get_dtype
from strapjax.kinematics.angular_rates import AngularRates


def skew_matrix(p: ArrayLike, q: ArrayLike, r: ArrayLike) -> Array:
    """Skew-symmetric cross-product matrix of the angular velocity ``[p, q, r]``.

    Args:
        p: Roll rate [rad/s].
        q: Pitch rate [rad/s].
        r: Yaw rate [rad/s].

    Returns:
        Array of shape ``(3, 3)``.

    Examples:
        ```python
        import jax.numpy as jnp
        S = skew_matrix(1.0, 2.0, 3.0)
        S @ jnp.array([1.0, 0.0, 0.0])  # cross([1, 2, 3], [1, 0, 0])
        ```
    """
    _float = get_dtype()
    p = jnp.asarray(p, dtype=_float)
    q = jnp.asarray(q, dtype=_float)
    r = jnp.asarray(r, dtype=_float)
    zero = jnp.zeros_like(p)

    return jnp.array([[zero,   -r,    q],
                      [   r, zero,   -p],
                      [  -q,    p, zero]], dtype=_float)


def mat_mul(A: ArrayLike, B: ArrayLike) -> Array:
    """Matrix product ``A @ B`` of two ``(3, 3)`` matrices."""
    _float = get_dtype()
    return jnp.asarray(A, dtype=_float) @ jnp.asarray(B, dtype=_float)


def dcm_derivative(C: ArrayLike, rates: AngularRates) -> Array:
    """Time-derivative of the DCM, ``C @ skew(p, q, r)``.

    Args:
        C: Body-to-NED DCM of shape ``(3, 3)``.
        rates: Body rates [rad/s].

    Returns:
        ``dC/dt`` of shape ``(3, 3)``.
    """
    return mat_mul(C, skew_matrix(*rates))


def normalize_rows(C: ArrayLike) -> Array:
    """Rescale each row of *C* to unit Euclidean norm.

    Rows are normalized independently; no Gram-Schmidt step is applied.
    A zero row has no direction to preserve and yields non-finite values.

    Args:
        C: Matrix of shape ``(3, 3)``.

    Returns:
        Matrix of shape ``(3, 3)`` with unit-norm rows.
    """
    _float = get_dtype()
    C = jnp.asarray(C, dtype=_float)
    return C / jnp.linalg.norm(C, axis=1, keepdims=True)


def dcm_step(C: ArrayLike, rates: AngularRates, dt: ArrayLike) -> Array:
    """Advance the DCM one step and renormalize its rows.

    Uses a forward-Euler update ``C + dt * C @ skew(p, q, r)``.

    Args:
        C: Body-to-NED DCM of shape ``(3, 3)``.
        rates: Body rates, held constant over the step [rad/s].
        dt: Timestep [s].

    Returns:
        Updated DCM of shape ``(3, 3)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from strapjax.kinematics import angular_rates, dcm_step
        C = dcm_step(jnp.eye(3), angular_rates(0.0), 0.1)
        ```
    """
    _float = get_dtype()
    C = jnp.asarray(C, dtype=_float)
    dt = jnp.asarray(dt, dtype=_float)

    return normalize_rows(C + dcm_derivative(C, rates) * dt)


def orthonormality_error(C: ArrayLike) -> Array:
    """Largest absolute entry of ``C @ C.T - I``.

    Zero for an exact rotation matrix.  Row normalization keeps the diagonal
    at zero error; the off-diagonal terms grow with inter-row skew.

    Args:
        C: Matrix of shape ``(3, 3)``.

    Returns:
        Scalar error.
    """
    _float = get_dtype()
    C = jnp.asarray(C, dtype=_float)
    return jnp.max(jnp.abs(C @ C.T - jnp.eye(3, dtype=_float)))
