"""Rigid-body attitude kinematics.

- **Angular rates**: analytic body-rate profile (:func:`angular_rates`)
- **Gimbal equation**: body rates to Euler-angle rates, with an RK4 rate
  estimate over a step (:func:`euler_rates`, :func:`propagate_euler_rates`)
- **DCM**: strapdown direction cosine matrix update with row
  renormalization (:func:`dcm_step`)
"""

from .angular_rates import AngularRates, RateModel, angular_rates, zero_angular_rates
from .dcm import (
    dcm_derivative,
    dcm_step,
    mat_mul,
    normalize_rows,
    orthonormality_error,
    skew_matrix,
)
from .gimbal import EulerRates, euler_rates, propagate_euler_rates

__all__ = [
    # Angular rates
    "AngularRates",
    "RateModel",
    "angular_rates",
    "zero_angular_rates",
    # Gimbal equation
    "EulerRates",
    "euler_rates",
    "propagate_euler_rates",
    # DCM
    "skew_matrix",
    "mat_mul",
    "dcm_derivative",
    "normalize_rows",
    "dcm_step",
    "orthonormality_error",
]
