"""2D geometry primitives and combinators for signed distance functions."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Callable, Sequence

import numpy as np
import numpy.typing as npt

from sdfmath import (
    TAU,
    Box2,
    ConstructionError,
    Matrix33,
    MaxFunc,
    MinFunc,
    normal_max,
    normal_min,
    rotate2d,
    scale2d,
    translate2d,
)
from sdfmath.vector import (
    as_points,
    cross,
    frozen,
    length,
    normalize,
    polar_to_xy,
    sawtooth,
)

from . import sdf_lib as sdf

if TYPE_CHECKING:
    from sdf3.geometry import Geometry3D

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_SDFFunc = Callable[[_Array], _Array]


# ===========================================================================
# Base class
# ===========================================================================

class Geometry2D:
    """Base class for 2D signed-distance-function geometries.

    A ``Geometry2D`` wraps a callable ``func(p) -> distances`` where *p* is
    a ``(..., 2)`` array of 2D points and the return value is a ``(...)``
    array of signed distances, together with a :class:`~sdfmath.Box2`
    that contains every point where the distance is ``<= 0``.

    Subclasses compute their bounding box once and pass it, with the
    primitive SDF, to ``super().__init__(func, bb)``.  Nodes are never
    modified by evaluation, so a tree can be shared between parents and
    evaluated from several threads at once.

    Implements:
    - Evaluation:         :meth:`evaluate`, :meth:`bounding_box`
    - Boolean operations: :meth:`union`, :meth:`difference`, :meth:`intersect`
    - Modifiers:          :meth:`offset`, :meth:`cut`
    - Transforms:         :meth:`transform`, :meth:`translate`, :meth:`rotate`, :meth:`scale`
    """

    def __init__(self, func: _SDFFunc, bb: Box2) -> None:
        self._func = func
        self._bb = bb

    def evaluate(self, p: npt.ArrayLike) -> _Array:
        """Evaluate signed distance at *p* (shape ``(..., 2)``)."""
        return self._func(as_points(p, 2))

    def __call__(self, p: npt.ArrayLike) -> _Array:
        return self.evaluate(p)

    def bounding_box(self) -> Box2:
        return self._bb

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._bb!r}>"

    # ------------------------------------------------------------------
    # Boolean operations
    # ------------------------------------------------------------------

    def union(self, *others: Geometry2D) -> Union2D:
        """Return the union (min) of this shape and *others*."""
        return Union2D(self, *others)

    def difference(self, other: Geometry2D) -> Difference2D:
        """Subtract *other* from this shape."""
        return Difference2D(self, other)

    def intersect(self, *others: Geometry2D) -> Intersection2D:
        """Return the intersection (max) of this shape and *others*."""
        return Intersection2D(self, *others)

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def offset(self, offset: float) -> Offset2D:
        """Grow the surface outward by *offset* (shrink if negative)."""
        return Offset2D(self, offset)

    def cut(self, a: Sequence[float], v: Sequence[float]) -> Cut2D:
        """Keep the part to the right of the line through *a* along *v*."""
        return Cut2D(self, a, v)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def transform(self, matrix: Matrix33) -> Transform2D:
        return Transform2D(self, matrix)

    def translate(self, tx: float, ty: float) -> Transform2D:
        """Translate by ``(tx, ty)``."""
        return Transform2D(self, translate2d((tx, ty)))

    def rotate(self, angle_rad: float) -> Transform2D:
        """Rotate by *angle_rad* radians (counter-clockwise)."""
        return Transform2D(self, rotate2d(angle_rad))

    def scale(self, s: float) -> Transform2D:
        """Uniformly scale by factor *s* (distances are not rescaled)."""
        return Transform2D(self, scale2d((s, s)))


def _fold(func: Callable[[_Array, _Array, float], _Array], k: float, ds) -> _Array:
    return functools.reduce(lambda a, b: func(a, b, k), ds)


# ===========================================================================
# Primitive shapes
# ===========================================================================

class Circle2D(Geometry2D):
    """Circle centred at origin with given *radius*."""

    def __init__(self, radius: float) -> None:
        self.radius = float(radius)
        d = np.array([self.radius, self.radius])
        super().__init__(lambda p: sdf.sdCircle(p, self.radius), Box2(-d, d))


class MultiCircle2D(Geometry2D):
    """Circles of the same *radius* centred on each of *positions*."""

    def __init__(self, radius: float, positions: Sequence[Sequence[float]]) -> None:
        self.radius = float(radius)
        self.positions = frozen(np.reshape(positions, (-1, 2)), 2)
        if len(self.positions) == 0:
            raise ConstructionError("MultiCircle2D needs at least one position")
        d = np.array([self.radius, self.radius])
        bb = Box2(self.positions.min(axis=0) - d, self.positions.max(axis=0) + d)
        super().__init__(lambda p: sdf.sdMultiCircle(p, self.radius, self.positions), bb)


class Box2D(Geometry2D):
    """Axis-aligned rectangle of full *size* ``(sx, sy)`` centred at origin.

    Corners are rounded by *round* without changing the outer extent.
    """

    def __init__(self, size: Sequence[float], round: float = 0.0) -> None:
        half = 0.5 * np.asarray(size, dtype=float)
        self.half_size = frozen(half, 2)
        self.round = float(round)
        super().__init__(
            lambda p: sdf.sdRoundBox2D(p, self.half_size, self.round), Box2(-half, half)
        )


class Line2D(Geometry2D):
    """Line from ``(-length/2, 0)`` to ``(length/2, 0)``, thickened by *round*."""

    def __init__(self, length: float, round: float = 0.0) -> None:
        self.half_length = 0.5 * float(length)
        self.round = float(round)
        d = np.array([self.half_length + self.round, self.round])
        super().__init__(lambda p: sdf.sdLine2D(p, self.half_length, self.round), Box2(-d, d))


class Polygon2D(Geometry2D):
    """Closed polygon through *vertices* (convex or concave).

    The loop is closed automatically when the first and last vertices
    differ.  Inside/outside is decided by the winding number, so the
    vertex order may be clockwise or counter-clockwise.
    """

    def __init__(self, vertices: Sequence[Sequence[float]]) -> None:
        v = np.array(vertices, dtype=float).reshape(-1, 2)
        if len(v) < 3:
            raise ConstructionError(f"Polygon2D needs at least 3 vertices, got {len(v)}")
        if not np.array_equal(v[0], v[-1]):
            v = np.vstack([v, v[:1]])
        edges = np.diff(v, axis=0)
        self._vertex = frozen(v, 2)
        self._vector = frozen(normalize(edges), 2)
        self._length = frozen(length(edges))
        super().__init__(
            lambda p: sdf.sdPolygon2D(p, self._vertex, self._vector, self._length),
            Box2.from_points(v),
        )

    def vertices(self) -> _Array:
        """The closed vertex loop, first vertex repeated at the end."""
        return self._vertex


# ===========================================================================
# Modifiers
# ===========================================================================

class Offset2D(Geometry2D):
    """Add a constant *offset* to the distance of *geom*: ``d(p) - offset``."""

    def __init__(self, geom: Geometry2D, offset: float) -> None:
        self.geom = geom
        self.offset = float(offset)
        bb = geom.bounding_box()
        size = np.maximum(bb.size() + 2.0 * self.offset, 0.0)
        super().__init__(
            lambda p: self.geom.evaluate(p) - self.offset,
            Box2.from_center_size(bb.center(), size),
        )


class Cut2D(Geometry2D):
    """Cut *geom* along the line through *a* with direction *v*.

    The part to the right of the line (looking along *v*) remains.
    """

    def __init__(self, geom: Geometry2D, a: Sequence[float], v: Sequence[float]) -> None:
        self.geom = geom
        self.a = frozen(a, 2)
        v = np.asarray(v, dtype=float)
        if length(v) == 0.0:
            raise ConstructionError("Cut2D line direction has zero length")
        v = normalize(v)
        self.n = frozen([-v[1], v[0]], 2)
        # TODO: clip the child box against the cut line
        super().__init__(
            lambda p: np.maximum(sdf.sdHalfPlane2D(p, self.a, self.n), self.geom.evaluate(p)),
            geom.bounding_box(),
        )


# ===========================================================================
# Transforms and instancing
# ===========================================================================

class Transform2D(Geometry2D):
    """Apply the affine *matrix* to *geom*.

    Query points are pulled back into the child's frame with the inverse
    matrix, computed once here.
    """

    def __init__(self, geom: Geometry2D, matrix: Matrix33) -> None:
        self.geom = geom
        self.matrix = matrix
        self.inverse = matrix.inverse()
        bb = matrix.mul_box(geom.bounding_box())
        logger.debug("Transform2D: %r -> %r", geom.bounding_box(), bb)
        super().__init__(lambda p: self.geom.evaluate(self.inverse.mul_position(p)), bb)


class Array2D(Geometry2D):
    """An ``nx`` by ``ny`` grid of copies of *geom*.

    Parameters
    ----------
    geom:
        The shape at grid cell ``(0, 0)``.
    num:
        ``(nx, ny)`` copies along each axis; both must be positive.
    step:
        ``(sx, sy)`` offset between neighbouring copies.
    min_func, k:
        Blend used to combine the copies.  Only the default
        :func:`~sdfmath.normal_min` gives the exact distance to the union;
        a smoothing blend mixes the distances of nearby copies.

    :meth:`set_min` is meant for configuration before the node is shared
    with evaluating threads.
    """

    def __init__(
        self,
        geom: Geometry2D,
        num: Sequence[int],
        step: Sequence[float],
        min_func: MinFunc = normal_min,
        k: float = 0.0,
    ) -> None:
        nx, ny = (int(n) for n in num)
        if nx <= 0 or ny <= 0:
            raise ConstructionError(f"Array2D counts must be positive, got {tuple(num)}")
        self.geom = geom
        self.num = (nx, ny)
        self.step = frozen(step, 2)
        self.set_min(min_func, k)
        self._offsets = frozen(
            [(j * self.step[0], i * self.step[1]) for j in range(nx) for i in range(ny)], 2
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


class Rotate2D(Geometry2D):
    """*num* copies of *geom*, each one *step* further than the previous.

    Copy ``i`` is *geom* transformed by ``step`` applied ``i`` times;
    copy 0 is *geom* itself.  Copies are combined with the blend
    set by *min_func* / *k* (see :class:`Array2D`).
    """

    def __init__(
        self,
        geom: Geometry2D,
        num: int,
        step: Matrix33,
        min_func: MinFunc = normal_min,
        k: float = 0.0,
    ) -> None:
        if int(num) <= 0:
            raise ConstructionError(f"Rotate2D count must be positive, got {num}")
        self.geom = geom
        self.num = int(num)
        self.step = step
        self.set_min(min_func, k)

        inv = step.inverse()
        rots = [Matrix33.identity()]
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
        super().__init__(self._evaluate, Box2(bb_min, bb_max))

    def set_min(self, min_func: MinFunc, k: float) -> None:
        """Set the blend function used to combine the copies."""
        self._min = min_func
        self._k = float(k)

    def _evaluate(self, p: _Array) -> _Array:
        return _fold(
            self._min, self._k, (self.geom.evaluate(r.mul_position(p)) for r in self._rotations)
        )


class RotateCopy2D(Geometry2D):
    """*num* copies of *geom* spaced evenly around the origin.

    The query point is rotated into the first sector ``[0, 2*pi/num)`` and
    *geom* is evaluated once, so *geom* should lie inside that sector.
    """

    def __init__(self, geom: Geometry2D, num: int) -> None:
        if int(num) <= 0:
            raise ConstructionError(f"RotateCopy2D count must be positive, got {num}")
        self.geom = geom
        self.num = int(num)
        self.theta = TAU / self.num
        r = float(length(geom.bounding_box().vertices()).max())
        super().__init__(self._evaluate, Box2((-r, -r), (r, r)))

    def _evaluate(self, p: _Array) -> _Array:
        angle = sawtooth(np.arctan2(p[..., 1], p[..., 0]), self.theta)
        return self.geom.evaluate(polar_to_xy(length(p), angle))


# ===========================================================================
# Slicing (3-D -> 2-D)
# ===========================================================================

class Slice2D(Geometry2D):
    """The cross-section of *geom* by the plane through *a* with normal *n*.

    2-D point ``(x, y)`` maps to ``a + x*u + y*v`` where ``u``, ``v`` are an
    orthonormal basis of the plane.
    """

    def __init__(self, geom: Geometry3D, a: Sequence[float], n: Sequence[float]) -> None:
        n = np.asarray(n, dtype=float)
        if length(n) == 0.0:
            raise ConstructionError("Slice2D plane normal has zero length")
        self.geom = geom
        self.a = frozen(a, 3)

        # pick an in-plane x axis that cannot be parallel to n
        if n[0] == 0.0:
            u = np.array([1.0, 0.0, 0.0])
        elif n[1] == 0.0:
            u = np.array([0.0, 1.0, 0.0])
        elif n[2] == 0.0:
            u = np.array([0.0, 0.0, 1.0])
        else:
            u = np.array([n[1], -n[0], 0.0])
        v = cross(n, u)
        self.u = frozen(normalize(u), 3)
        self.v = frozen(normalize(v), 3)

        # project the 3-D box corners onto the plane
        n = normalize(n)
        va = geom.bounding_box().vertices() - self.a
        pa = va - np.outer(va @ n, n)
        bb = Box2.from_points(np.stack([pa @ self.u, pa @ self.v], axis=-1))
        logger.debug("Slice2D: a=%s n=%s u=%s v=%s bb=%r", self.a, n, self.u, self.v, bb)
        super().__init__(self._evaluate, bb)

    def _evaluate(self, p: _Array) -> _Array:
        q = self.a + p[..., 0:1] * self.u + p[..., 1:2] * self.v
        return self.geom.evaluate(q)


# ===========================================================================
# Boolean operation classes
# ===========================================================================

class Union2D(Geometry2D):
    """Union of one or more 2-D geometries (minimum SDF by default).

    The blend may be swapped later with :meth:`set_min`; the bounding box
    is not recomputed, and the change is seen by every parent sharing this
    node.  Configure before evaluating from several threads.
    """

    def __init__(self, *geoms: Geometry2D, min_func: MinFunc = normal_min, k: float = 0.0) -> None:
        if not geoms:
            raise ConstructionError("Union2D needs at least one geometry")
        self.geoms = geoms
        self.set_min(min_func, k)
        bb = functools.reduce(lambda a, b: a.extend(b), (g.bounding_box() for g in geoms))
        super().__init__(self._evaluate, bb)

    def set_min(self, min_func: MinFunc, k: float) -> None:
        """Set the blend function used to combine the children."""
        self._min = min_func
        self._k = float(k)

    def _evaluate(self, p: _Array) -> _Array:
        return _fold(self._min, self._k, (g.evaluate(p) for g in self.geoms))


class Difference2D(Geometry2D):
    """Subtract *cutter* from *base*: ``max(base, -cutter)`` by default."""

    def __init__(
        self,
        base: Geometry2D,
        cutter: Geometry2D,
        max_func: MaxFunc = normal_max,
        k: float = 0.0,
    ) -> None:
        self.base = base
        self.cutter = cutter
        self.set_max(max_func, k)
        super().__init__(self._evaluate, base.bounding_box())

    def set_max(self, max_func: MaxFunc, k: float) -> None:
        """Set the blend function; see :meth:`Union2D.set_min`."""
        self._max = max_func
        self._k = float(k)

    def _evaluate(self, p: _Array) -> _Array:
        return self._max(self.base.evaluate(p), -self.cutter.evaluate(p), self._k)


class Intersection2D(Geometry2D):
    """Intersection of one or more 2-D geometries (maximum SDF by default)."""

    def __init__(self, *geoms: Geometry2D, max_func: MaxFunc = normal_max, k: float = 0.0) -> None:
        if not geoms:
            raise ConstructionError("Intersection2D needs at least one geometry")
        self.geoms = geoms
        self.set_max(max_func, k)
        lo = np.max([g.bounding_box().min for g in geoms], axis=0)
        hi = np.min([g.bounding_box().max for g in geoms], axis=0)
        # disjoint boxes: the shape is empty, keep a degenerate box
        super().__init__(self._evaluate, Box2(lo, np.maximum(lo, hi)))

    def set_max(self, max_func: MaxFunc, k: float) -> None:
        """Set the blend function; see :meth:`Union2D.set_min`."""
        self._max = max_func
        self._k = float(k)

    def _evaluate(self, p: _Array) -> _Array:
        return _fold(self._max, self._k, (g.evaluate(p) for g in self.geoms))
