"""Tests for the strapjax.config module."""

import jax.numpy as jnp
import pytest

from strapjax.config import get_dtype, get_norm_tolerance, set_dtype
from strapjax.kinematics import angular_rates, dcm_step


@pytest.fixture(autouse=True)
def reset_dtype():
    """Reset dtype to float32 before and after each test."""
    set_dtype(jnp.float32)
    yield
    set_dtype(jnp.float32)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float32

    def test_set_float64(self):
        set_dtype(jnp.float64)
        assert get_dtype() == jnp.float64

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float32")


class TestNormTolerance:
    def test_float64(self):
        set_dtype(jnp.float64)
        assert get_norm_tolerance() == 1e-9

    def test_float32(self):
        assert get_norm_tolerance() == 1e-5

    def test_half_precision(self):
        for dtype in (jnp.float16, jnp.bfloat16):
            set_dtype(dtype)
            assert get_norm_tolerance() == 1e-2


class TestDtypePropagation:
    def test_rates_follow_dtype(self):
        assert angular_rates(0.0).p.dtype == jnp.float32
        set_dtype(jnp.float64)
        assert angular_rates(0.0).p.dtype == jnp.float64

    def test_dcm_follows_dtype(self):
        C = dcm_step(jnp.eye(3), angular_rates(0.0), 0.1)
        assert C.dtype == jnp.float32
