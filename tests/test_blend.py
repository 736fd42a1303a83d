"""Tests for sdfmath.blend."""

import numpy as np
import numpy.testing as npt
import pytest

from sdfmath import (
    chamfer_min,
    exp_min,
    normal_max,
    normal_min,
    poly_max,
    poly_min,
    round_min,
)

_A = np.linspace(-3.0, 3.0, 41)
_B = _A[::-1].copy()


class TestExact:
    def test_normal_min(self):
        npt.assert_array_equal(normal_min(_A, _B, 0.5), np.minimum(_A, _B))

    def test_normal_max(self):
        npt.assert_array_equal(normal_max(_A, _B, 0.5), np.maximum(_A, _B))


class TestSmooth:
    @pytest.mark.parametrize("func", [round_min, chamfer_min, exp_min, poly_min])
    def test_min_never_exceeds_min(self, func):
        assert (func(_A, _B, 0.5) <= np.minimum(_A, _B) + 1e-12).all()

    @pytest.mark.parametrize("func", [round_min, chamfer_min, poly_min, exp_min])
    def test_zero_k_is_exact(self, func):
        npt.assert_allclose(func(_A, _B, 0.0), np.minimum(_A, _B))

    def test_poly_min_far_apart_is_exact(self):
        a = np.array([-5.0])
        b = np.array([5.0])
        npt.assert_allclose(poly_min(a, b, 0.5), [-5.0])

    def test_poly_min_blends_when_close(self):
        npt.assert_allclose(poly_min(np.array([0.0]), np.array([0.0]), 0.4), [-0.1])

    def test_poly_max_mirrors_poly_min(self):
        npt.assert_allclose(poly_max(_A, _B, 0.3), -poly_min(-_A, -_B, 0.3))

    def test_poly_max_zero_k_is_exact(self):
        npt.assert_allclose(poly_max(_A, _B, 0.0), np.maximum(_A, _B))

    def test_exp_min_is_finite_for_large_inputs(self):
        a = np.array([-1e6, 1e6])
        b = np.array([-1e6, 1e6])
        assert np.isfinite(exp_min(a, b, 10.0)).all()

    def test_round_min_far_from_joint_is_exact(self):
        npt.assert_allclose(round_min(np.array([2.0]), np.array([5.0]), 0.5), [2.0])

    def test_chamfer_min_zero_k_inside_both(self):
        a = np.array([-1.0, 0.0, 1.0])
        npt.assert_allclose(chamfer_min(a, a, 0.0), [-1.0, 0.0, 1.0])

    def test_chamfer_min_cuts_the_corner(self):
        npt.assert_allclose(chamfer_min(np.array([0.0]), np.array([0.0]), 0.2), [-0.2 * np.sqrt(0.5)])
