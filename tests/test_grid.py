"""Tests for sample_levelset_2d and sample_levelset_3d."""

import numpy as np
import numpy.testing as npt

from sdf2 import Box2D, Circle2D, sample_levelset_2d
from sdf3 import Box3D, Sphere3D, sample_levelset_3d


class TestSampleLevelset2D:
    def test_shape_is_y_first(self):
        phi = sample_levelset_2d(Circle2D(1.0), (3, 5), ((-1, 1), (-1, 1)))
        assert phi.shape == (5, 3)

    def test_cell_centres(self):
        phi = sample_levelset_2d(Circle2D(1.0), (4, 4), ((-1, 1), (-1, 1)))
        npt.assert_allclose(phi[1, 1], np.hypot(0.25, 0.25) - 1.0)
        npt.assert_allclose(phi[0, 3], np.hypot(0.75, 0.75) - 1.0)

    def test_axis_order(self):
        # wide box: x runs along columns
        phi = sample_levelset_2d(Box2D((4.0, 1.0)), (8, 2), ((-4, 4), (-0.5, 0.5)))
        assert phi[0, 4] < 0.0
        assert phi[0, 0] > 0.0

    def test_default_bounds_from_bounding_box(self):
        g = Circle2D(1.0)
        npt.assert_array_equal(
            sample_levelset_2d(g, (6, 6)), sample_levelset_2d(g, (6, 6), ((-1, 1), (-1, 1)))
        )


class TestSampleLevelset3D:
    def test_shape_is_z_first(self):
        phi = sample_levelset_3d(Sphere3D(1.0), (2, 3, 4))
        assert phi.shape == (4, 3, 2)

    def test_values(self):
        phi = sample_levelset_3d(Sphere3D(1.0), (2, 2, 2), ((-1, 1), (-1, 1), (-1, 1)))
        npt.assert_allclose(phi, np.sqrt(3 * 0.25) - 1.0)

    def test_axis_order(self):
        phi = sample_levelset_3d(Box3D((1.0, 1.0, 4.0)), (2, 2, 8), ((-0.5, 0.5), (-0.5, 0.5), (-4, 4)))
        assert (phi[4] < 0.0).all()
        assert (phi[0] > 0.0).all()
