"""Tests for sdfmath.vector and sdfmath.errors."""

import logging

import numpy as np
import numpy.testing as npt
import pytest

from sdfmath import (
    TAU,
    ConstructionError,
    as_points,
    clamp,
    cross,
    dot,
    frozen,
    length,
    length2,
    mix,
    normalize,
    optional_builder,
    polar_to_xy,
    sawtooth,
    vec2,
    vec3,
)


# ===========================================================================
# Vector constructors
# ===========================================================================

class TestConstructors:
    def test_vec2_shape(self):
        v = vec2(np.array([1.0, 2.0]), np.array([3.0, 4.0]))
        assert v.shape == (2, 2)
        assert v.dtype == np.float64

    def test_vec3_broadcasts_scalars(self):
        v = vec3(np.ones(5), 0.0, 2.0)
        assert v.shape == (5, 3)
        npt.assert_allclose(v[:, 2], 2.0)

    def test_as_points_accepts_lists(self):
        p = as_points([[1, 2], [3, 4]], 2)
        assert p.dtype == np.float64
        assert p.shape == (2, 2)

    def test_as_points_rejects_wrong_dimension(self):
        with pytest.raises(ValueError):
            as_points([1.0, 2.0, 3.0], 2)

    def test_as_points_rejects_scalar(self):
        with pytest.raises(ValueError):
            as_points(1.0, 2)

    def test_frozen_is_read_only(self):
        a = frozen([1.0, 2.0])
        with pytest.raises(ValueError):
            a[0] = 5.0

    def test_frozen_copies_input(self):
        src = np.array([1.0, 2.0])
        a = frozen(src)
        src[0] = 9.0
        assert a[0] == 1.0

    def test_frozen_dimension_check(self):
        with pytest.raises(ConstructionError):
            frozen([1.0, 2.0, 3.0], 2)


# ===========================================================================
# Math helpers
# ===========================================================================

class TestMath:
    def test_length(self):
        npt.assert_allclose(length(np.array([[3.0, 4.0]])), [5.0])

    def test_length2(self):
        npt.assert_allclose(length2(np.array([[3.0, 4.0]])), [25.0])

    def test_dot(self):
        npt.assert_allclose(dot(np.array([1.0, 2.0, 3.0]), np.array([4.0, 5.0, 6.0])), 32.0)

    def test_cross(self):
        npt.assert_allclose(cross(np.array([1.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0])), [0, 0, 1])

    def test_normalize_unit_length(self):
        v = normalize(np.array([[3.0, 4.0], [0.0, -2.0]]))
        npt.assert_allclose(length(v), [1.0, 1.0])
        npt.assert_allclose(v[0], [0.6, 0.8])

    def test_normalize_zero_is_zero(self):
        v = normalize(np.zeros(3))
        npt.assert_array_equal(v, [0.0, 0.0, 0.0])
        assert np.isfinite(v).all()

    def test_normalize_mixed_batch(self):
        v = normalize(np.array([[0.0, 0.0], [0.0, 5.0]]))
        npt.assert_array_equal(v, [[0.0, 0.0], [0.0, 1.0]])

    def test_clamp(self):
        npt.assert_allclose(clamp(np.array([-2.0, 0.5, 3.0]), 0.0, 1.0), [0.0, 0.5, 1.0])

    def test_mix(self):
        npt.assert_allclose(mix(np.array(2.0), np.array(4.0), 0.25), 2.5)


class TestAngular:
    def test_sawtooth_range(self):
        x = np.linspace(-10.0, 10.0, 101)
        y = sawtooth(x, 1.5)
        assert (y >= 0.0).all() and (y < 1.5).all()

    def test_sawtooth_periodic(self):
        npt.assert_allclose(sawtooth(np.array(0.3 + 3 * TAU), TAU), 0.3, atol=1e-12)

    def test_polar_to_xy(self):
        npt.assert_allclose(polar_to_xy(np.array(2.0), np.array(np.pi / 2)), [0.0, 2.0], atol=1e-12)


# ===========================================================================
# Errors
# ===========================================================================

class _Thing:
    def __init__(self, n, child=0):
        if n <= 0:
            raise ConstructionError("bad n")
        self.n = n
        self.child = child


class TestOptionalBuilder:
    def test_success_returns_instance(self):
        build = optional_builder(_Thing)
        t = build(3)
        assert isinstance(t, _Thing)
        assert t.n == 3

    def test_failure_returns_none(self, caplog):
        build = optional_builder(_Thing)
        with caplog.at_level(logging.WARNING, logger="sdfmath.errors"):
            assert build(0) is None
        assert "construction failed" in caplog.text

    def test_none_argument_propagates(self):
        build = optional_builder(_Thing)
        assert build(None) is None
        assert build(2, child=None) is None

    def test_other_errors_propagate(self):
        build = optional_builder(_Thing)
        with pytest.raises(TypeError):
            build("x")

    def test_construction_error_is_value_error(self):
        assert issubclass(ConstructionError, ValueError)
