"""3D geometry primitives and combinators for signed distance functions."""

from __future__ import annotations

import functools
import logging
from typing import Callable, Sequence

import numpy as np
import numpy.typing as npt

from sdf2.geometry import Geometry2D
from sdfmath import (
    TAU,
    Box3,
    ConstructionError,
    Matrix44,
    MaxFunc,
    MinFunc,
    normal_max,
    normal_min,
    rotate_x,
    rotate_y,
    rotate_z,
    scale3d,
    translate3d,
)
from sdfmath.vector import as_points, frozen

from . import sdf_lib as sdf

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_SDFFunc = Callable[[_Array], _Array]


# ===========================================================================
# Base class
# ===========================================================================

class Geometry3D:
    """Base class for 3D signed-distance-function geometries.

    A ``Geometry3D`` wraps a callable ``func(p) -> distances`` where *p* is
    a ``(..., 3)`` array of 3D points and the return value is a ``(...)``
    array of signed distances, together with a :class:`~sdfmath.Box3`
    containing every point where the distance is ``<= 0``.

    Implements:
    - Evaluation:         :meth:`evaluate`, :meth:`bounding_box`
    - Boolean operations: :meth:`union`, :meth:`difference`, :meth:`intersect`
    - Transforms:         :meth:`transform`, :meth:`translate`, :meth:`scale`
    - Rotations:          :meth:`rotate_x`, :meth:`rotate_y`, :meth:`rotate_z`
    """

    def __init__(self, func: _SDFFunc, bb: Box3) -> None:
        self._func = func
        self._bb = bb

    def evaluate(self, p: npt.ArrayLike) -> _Array:
        """Evaluate signed distance at *p* (shape ``(..., 3)``)."""
        return self._func(as_points(p, 3))

    def __call__(self, p: npt.ArrayLike) -> _Array:
        return self.evaluate(p)

    def bounding_box(self) -> Box3:
        return self._bb

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._bb!r}>"

    # ------------------------------------------------------------------
    # Boolean operations
    # ------------------------------------------------------------------

    def union(self, *others: Geometry3D) -> Union3D:
        """Return the union (min) of this shape and *others*."""
        return Union3D(self, *others)

    def difference(self, other: Geometry3D) -> Difference3D:
        """Subtract *other* from this shape."""
        return Difference3D(self, other)

    def intersect(self, *others: Geometry3D) -> Intersection3D:
        """Return the intersection (max) of this shape and *others*."""
        return Intersection3D(self, *others)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def transform(self, matrix: Matrix44) -> Transform3D:
        return Transform3D(self, matrix)

    def translate(self, tx: float, ty: float, tz: float) -> Transform3D:
        """Translate by ``(tx, ty, tz)``."""
        return Transform3D(self, translate3d((tx, ty, tz)))

    def scale(self, s: float) -> Transform3D:
        """Uniformly scale by factor *s* (distances are not rescaled)."""
        return Transform3D(self, scale3d((s, s, s)))

    def rotate_x(self, angle_rad: float) -> Transform3D:
        """Rotate around the X axis by *angle_rad* radians."""
        return Transform3D(self, rotate_x(angle_rad))

    def rotate_y(self, angle_rad: float) -> Transform3D:
        """Rotate around the Y axis by *angle_rad* radians."""
        return Transform3D(self, rotate_y(angle_rad))

    def rotate_z(self, angle_rad: float) -> Transform3D:
        """Rotate around the Z axis by *angle_rad* radians."""
        return Transform3D(self, rotate_z(angle_rad))


def _fold(func: Callable[[_Array, _Array, float], _Array], k: float, ds) -> _Array:
    return functools.reduce(lambda a, b: func(a, b, k), ds)


# ===========================================================================
# Primitive shapes
# ===========================================================================

class Sphere3D(Geometry3D):
    """Sphere centred at origin with given *radius*."""

    def __init__(self, radius: float) -> None:
        self.radius = float(radius)
        d = np.full(3, self.radius)
        super().__init__(lambda p: sdf.sdSphere(p, self.radius), Box3(-d, d))


class Box3D(Geometry3D):
    """Axis-aligned box of full *size* ``(sx, sy, sz)`` centred at origin.

    Edges are rounded by *round* without changing the outer extent.
    """

    def __init__(self, size: Sequence[float], round: float = 0.0) -> None:
        half = 0.5 * np.asarray(size, dtype=float)
        self.half_size = frozen(half, 3)
        self.round = float(round)
        super().__init__(
            lambda p: sdf.sdRoundBox3D(p, self.half_size, self.round), Box3(-half, half)
        )


class Cylinder3D(Geometry3D):
    """Cylinder along Z, centred at origin.

    Parameters
    ----------
    height:
        Full height along Z.
    radius:
        Cylinder radius.
    round:
        Radius of the rounding applied to the two circular edges.
    """

    def __init__(self, height: float, radius: float, round: float = 0.0) -> None:
        self.height = float(height)
        self.radius = float(radius)
        self.round = float(round)
        d = np.array([self.radius, self.radius, 0.5 * self.height])
        super().__init__(
            lambda p: sdf.sdCappedCylinder(p, self.radius, 0.5 * self.height, self.round),
            Box3(-d, d),
        )


class Capsule3D(Cylinder3D):
    """Cylinder of total *height* whose ends are hemispheres of *radius*."""

    def __init__(self, height: float, radius: float) -> None:
        super().__init__(height, radius, round=radius)


class MultiCylinder3D(Geometry3D):
    """Cylinders of the same *height* and *radius* at each ``(x, y)`` of *positions*.

    Useful for drilling patterns.
    """

    def __init__(self, height: float, radius: float, positions: Sequence[Sequence[float]]) -> None:
        self.height = float(height)
        self.radius = float(radius)
        self.positions = frozen(np.reshape(positions, (-1, 2)), 2)
        if len(self.positions) == 0:
            raise ConstructionError("MultiCylinder3D needs at least one position")
        lo = self.positions.min(axis=0) - self.radius
        hi = self.positions.max(axis=0) + self.radius
        h = 0.5 * self.height
        super().__init__(
            lambda p: sdf.sdMultiCylinder(p, self.radius, h, self.positions),
            Box3((lo[0], lo[1], -h), (hi[0], hi[1], h)),
        )


# ===========================================================================
# 2-D -> 3-D
# ===========================================================================

class Revolve3D(Geometry3D):
    """Solid of revolution of the 2-D *profile* around the Z axis.

    The profile's x coordinate is the distance from the axis and its y
    coordinate becomes z.  With ``theta`` equal to zero (or a whole turn)
    the profile is swept all the way round; otherwise only the wedge from
    the +X axis counter-clockwise through ``theta`` radians is kept.
    """

    def __init__(self, profile: Geometry2D, theta: float = 0.0) -> None:
        self.profile = profile
        self.theta = float(np.mod(abs(theta), TAU))
        s = np.sin(self.theta)
        c = np.cos(self.theta)
        self.norm = frozen([-s, c], 2)

        # extreme directions swept by the wedge
        if self.theta == 0.0:
            vset = [(1.0, 1.0), (-1.0, -1.0)]
        else:
            vset = [(0.0, 0.0), (1.0, 0.0), (c, s)]
            if self.theta > 0.5 * np.pi:
                vset.append((0.0, 1.0))
            if self.theta > np.pi:
                vset.append((-1.0, 0.0))
            if self.theta > 1.5 * np.pi:
                vset.append((0.0, -1.0))
        bb = profile.bounding_box()
        r = max(abs(bb.min[0]), abs(bb.max[0]))
        vset = np.array(vset) * r
        vmin = vset.min(axis=0)
        vmax = vset.max(axis=0)
        box = Box3((vmin[0], vmin[1], bb.min[1]), (vmax[0], vmax[1], bb.max[1]))
        logger.debug("Revolve3D: theta=%g bb=%r", self.theta, box)
        super().__init__(self._evaluate, box)

    def _evaluate(self, p: _Array) -> _Array:
        a = sdf.opRevolution(p, self.profile.evaluate)
        if self.theta == 0.0:
            return a
        return np.maximum(a, sdf.sdWedge(p, self.theta, self.norm))


class Extrude3D(Geometry3D):
    """Extrude the 2-D *profile* along Z from ``z = 0`` to ``z = height``."""

    def __init__(self, profile: Geometry2D, height: float) -> None:
        self.profile = profile
        self.height = float(height)
        bb = profile.bounding_box()
        super().__init__(
            lambda p: sdf.opExtrusion(p, self.profile.evaluate, self.height),
            Box3((bb.min[0], bb.min[1], 0.0), (bb.max[0], bb.max[1], self.height)),
        )


# ===========================================================================
# Transforms and instancing
# ===========================================================================

class Transform3D(Geometry3D):
    """Apply the affine *matrix* to *geom*.

    Query points are pulled back into the child's frame with the inverse
    matrix, computed once here.
    """

    def __init__(self, geom: Geometry3D, matrix: Matrix44) -> None:
        self.geom = geom
        self.matrix = matrix
        self.inverse = matrix.inverse()
        bb = matrix.mul_box(geom.bounding_box())
        logger.debug("Transform3D: %r -> %r", geom.bounding_box(), bb)
        super().__init__(lambda p: self.geom.evaluate(self.inverse.mul_position(p)), bb)


class Array3D(Geometry3D):
    """An ``nx`` by ``ny`` by ``nz`` grid of copies of *geom*.

    See :class:`sdf2.geometry.Array2D` for the meaning of *min_func* and *k*.
    """

    def __init__(
        self,
        geom: Geometry3D,
        num: Sequence[int],
        step: Sequence[float],
        min_func: MinFunc = normal_min,
        k: float = 0.0,
    ) -> None:
        nx, ny, nz = (int(n) for n in num)
        if nx <= 0 or ny <= 0 or nz <= 0:
            raise ConstructionError(f"Array3D counts must be positive, got {tuple(num)}")
        self.geom = geom
        self.num = (nx, ny, nz)
        self.step = frozen(step, 3)
        self.set_min(min_func, k)
        self._offsets = frozen(
            [
                (i * self.step[0], j * self.step[1], l * self.step[2])
                for i in range(nx)
                for j in range(ny)
                for l in range(nz)
            ],
            3,
        )
        bb0 = geom.bounding_box()
        bb1 = bb0.translate(self.step * (np.array(self.num) - 1))
        super().__init__(self._evaluate, bb0.extend(bb1))

    def set_min(self, min_func: MinFunc, k: float) -> None:
        """Set the blend function used to combine the copies."""
        self._min = min_func
        self._k = float(k)

    def _evaluate(self, p: _Array) -> _Array:
        return _fold(self._min, self._k, (self.geom.evaluate(p - o) for o in self._offsets))


class Rotate3D(Geometry3D):
    """*num* copies of *geom*, copy ``i`` transformed by *step* ``i`` times."""

    def __init__(
        self,
        geom: Geometry3D,
        num: int,
        step: Matrix44,
        min_func: MinFunc = normal_min,
        k: float = 0.0,
    ) -> None:
        if int(num) <= 0:
            raise ConstructionError(f"Rotate3D count must be positive, got {num}")
        self.geom = geom
        self.num = int(num)
        self.step = step
        self.set_min(min_func, k)

        inv = step.inverse()
        rots = [Matrix44.identity()]
        for _ in range(self.num - 1):
            rots.append(rots[-1] @ inv)
        self._rotations = tuple(rots)

        v = geom.bounding_box().vertices()
        bb_min = v.min(axis=0)
        bb_max = v.max(axis=0)
        for _ in range(self.num):
            bb_min = np.minimum(bb_min, v.min(axis=0))
            bb_max = np.maximum(bb_max, v.max(axis=0))
            v = step.mul_vertices(v)
        super().__init__(self._evaluate, Box3(bb_min, bb_max))

    def set_min(self, min_func: MinFunc, k: float) -> None:
        """Set the blend function used to combine the copies."""
        self._min = min_func
        self._k = float(k)

    def _evaluate(self, p: _Array) -> _Array:
        return _fold(
            self._min, self._k, (self.geom.evaluate(r.mul_position(p)) for r in self._rotations)
        )


# ===========================================================================
# Boolean operation classes
# ===========================================================================

class Union3D(Geometry3D):
    """Union of one or more 3-D geometries (minimum SDF by default).

    The blend may be swapped later with :meth:`set_min`; the bounding box
    is not recomputed, and the change is seen by every parent sharing this
    node.  Configure before evaluating from several threads.
    """

    def __init__(self, *geoms: Geometry3D, min_func: MinFunc = normal_min, k: float = 0.0) -> None:
        if not geoms:
            raise ConstructionError("Union3D needs at least one geometry")
        self.geoms = geoms
        self.set_min(min_func, k)
        bb = functools.reduce(lambda a, b: a.extend(b), (g.bounding_box() for g in geoms))
        super().__init__(self._evaluate, bb)

    def set_min(self, min_func: MinFunc, k: float) -> None:
        self._min = min_func
        self._k = float(k)

    def _evaluate(self, p: _Array) -> _Array:
        return _fold(self._min, self._k, (g.evaluate(p) for g in self.geoms))


class Difference3D(Geometry3D):
    """Subtract *cutter* from *base*: ``max(base, -cutter)`` by default."""

    def __init__(
        self,
        base: Geometry3D,
        cutter: Geometry3D,
        max_func: MaxFunc = normal_max,
        k: float = 0.0,
    ) -> None:
        self.base = base
        self.cutter = cutter
        self.set_max(max_func, k)
        super().__init__(self._evaluate, base.bounding_box())

    def set_max(self, max_func: MaxFunc, k: float) -> None:
        self._max = max_func
        self._k = float(k)

    def _evaluate(self, p: _Array) -> _Array:
        return self._max(self.base.evaluate(p), -self.cutter.evaluate(p), self._k)


class Intersection3D(Geometry3D):
    """Intersection of one or more 3-D geometries (maximum SDF by default)."""

    def __init__(self, *geoms: Geometry3D, max_func: MaxFunc = normal_max, k: float = 0.0) -> None:
        if not geoms:
            raise ConstructionError("Intersection3D needs at least one geometry")
        self.geoms = geoms
        self.set_max(max_func, k)
        lo = np.max([g.bounding_box().min for g in geoms], axis=0)
        hi = np.min([g.bounding_box().max for g in geoms], axis=0)
        super().__init__(self._evaluate, Box3(lo, np.maximum(lo, hi)))

    def set_max(self, max_func: MaxFunc, k: float) -> None:
        self._max = max_func
        self._k = float(k)

    def _evaluate(self, p: _Array) -> _Array:
        return _fold(self._max, self._k, (g.evaluate(p) for g in self.geoms))
