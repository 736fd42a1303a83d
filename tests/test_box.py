"""Tests for sdfmath.box."""

import numpy as np
import numpy.testing as npt
import pytest

from sdfmath import Box2, Box3, ConstructionError


class TestBox2:
    def test_center_and_size(self):
        b = Box2((-1.0, 0.0), (3.0, 2.0))
        npt.assert_allclose(b.center(), [1.0, 1.0])
        npt.assert_allclose(b.size(), [4.0, 2.0])

    def test_inverted_box_rejected(self):
        with pytest.raises(ConstructionError):
            Box2((1.0, 0.0), (0.0, 1.0))

    def test_wrong_shape_rejected(self):
        with pytest.raises(ConstructionError):
            Box2((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))

    def test_degenerate_box_allowed(self):
        b = Box2((1.0, 1.0), (1.0, 1.0))
        npt.assert_allclose(b.size(), [0.0, 0.0])

    def test_extend(self):
        a = Box2((0.0, 0.0), (1.0, 1.0))
        b = Box2((-2.0, 0.5), (0.5, 3.0))
        assert a.extend(b) == Box2((-2.0, 0.0), (1.0, 3.0))
        assert a.extend(b) == b.extend(a)

    def test_translate(self):
        b = Box2((0.0, 0.0), (1.0, 1.0)).translate((2.0, -1.0))
        assert b == Box2((2.0, -1.0), (3.0, 0.0))

    def test_vertices(self):
        v = Box2((0.0, 0.0), (1.0, 2.0)).vertices()
        assert v.shape == (4, 2)
        assert {tuple(x) for x in v} == {(0, 0), (0, 2), (1, 0), (1, 2)}

    def test_from_center_size(self):
        b = Box2.from_center_size((1.0, 1.0), (2.0, 4.0))
        assert b == Box2((0.0, -1.0), (2.0, 3.0))

    def test_from_points(self):
        b = Box2.from_points([[0.0, 5.0], [-1.0, 2.0], [3.0, 3.0]])
        assert b == Box2((-1.0, 2.0), (3.0, 5.0))

    def test_from_no_points_rejected(self):
        with pytest.raises(ConstructionError):
            Box2.from_points(np.zeros((0, 2)))

    def test_contains(self):
        b = Box2((0.0, 0.0), (1.0, 1.0))
        inside = b.contains([[0.5, 0.5], [1.0, 1.0], [1.1, 0.5]])
        npt.assert_array_equal(inside, [True, True, False])
        assert b.contains([1.1, 0.5], tol=0.2)

    def test_immutable(self):
        b = Box2((0.0, 0.0), (1.0, 1.0))
        with pytest.raises(AttributeError):
            b.min = np.zeros(2)
        with pytest.raises(ValueError):
            b.min[0] = -1.0

    def test_box2_not_equal_box3(self):
        assert Box2((0, 0), (1, 1)) != Box3((0, 0, 0), (1, 1, 1))

    def test_hashable(self):
        assert len({Box2((0, 0), (1, 1)), Box2((0, 0), (1, 1))}) == 1


class TestBox3:
    def test_vertices(self):
        v = Box3((-1.0, -1.0, -1.0), (1.0, 1.0, 1.0)).vertices()
        assert v.shape == (8, 3)
        npt.assert_allclose(np.abs(v), 1.0)
        assert len({tuple(x) for x in v}) == 8

    def test_extend(self):
        a = Box3((0, 0, 0), (1, 1, 1))
        b = Box3((2, 2, 2), (3, 3, 3))
        assert a.extend(b) == Box3((0, 0, 0), (3, 3, 3))

    def test_repr(self):
        assert repr(Box3((0, 0, 0), (1, 1, 1))) == "Box3([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])"
