"""Homogeneous affine transforms: 3x3 for 2-D, 4x4 for 3-D.

A matrix acts on points (with translation) through :meth:`mul_position`
and on directions (without translation) through :meth:`mul_direction`.
Both broadcast over ``(..., dim)`` point arrays.  Composition uses ``@``:
``(A @ B).mul_position(p) == A.mul_position(B.mul_position(p))``.
"""

from __future__ import annotations

from typing import ClassVar, Sequence, TypeVar

import numpy as np
import numpy.typing as npt

from .box import Box2, Box3, _Box
from .errors import ConstructionError
from .vector import _F, frozen, length, normalize

_M = TypeVar("_M", bound="_Matrix")

__all__ = [
    "Matrix33", "Matrix44",
    "translate2d", "scale2d", "rotate2d", "mirror_x2d", "mirror_y2d",
    "translate3d", "scale3d", "rotate_x", "rotate_y", "rotate_z", "rotate3d",
]


class _Matrix:
    dim: ClassVar[int]
    box_type: ClassVar[type[_Box]]

    __slots__ = ("values",)

    def __init__(self, values: npt.ArrayLike) -> None:
        n = self.dim + 1
        m = frozen(values)
        if m.shape != (n, n):
            raise ConstructionError(f"{type(self).__name__} needs a {n}x{n} array, got {m.shape}")
        object.__setattr__(self, "values", m)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def identity(cls: type[_M]) -> _M:
        return cls(np.eye(cls.dim + 1))

    def mul(self: _M, other: _M) -> _M:
        """Compose: apply *other* first, then this matrix."""
        return type(self)(self.values @ other.values)

    def __matmul__(self: _M, other: _M) -> _M:
        return self.mul(other)

    def inverse(self: _M) -> _M:
        try:
            inv = np.linalg.inv(self.values)
        except np.linalg.LinAlgError as exc:
            raise ConstructionError(f"{type(self).__name__} is singular") from exc
        return type(self)(inv)

    def mul_position(self, p: npt.ArrayLike) -> _F:
        """Transform points (rotation, scale and translation)."""
        p = np.asarray(p, dtype=np.float64)
        a = self.values[: self.dim, : self.dim]
        t = self.values[: self.dim, self.dim]
        return p @ a.T + t

    def mul_direction(self, v: npt.ArrayLike) -> _F:
        """Transform direction vectors (no translation)."""
        v = np.asarray(v, dtype=np.float64)
        return v @ self.values[: self.dim, : self.dim].T

    def mul_vertices(self, v: npt.ArrayLike) -> _F:
        """Transform a vertex set; alias of :meth:`mul_position`."""
        return self.mul_position(v)

    def mul_box(self, box: _Box) -> _Box:
        """Bounding box of all transformed corners of *box*."""
        return self.box_type.from_points(self.mul_position(box.vertices()))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.values.tobytes()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.values.tolist()})"


class Matrix33(_Matrix):
    """Affine transform of the plane."""

    dim = 2
    box_type = Box2
    __slots__ = ()


class Matrix44(_Matrix):
    """Affine transform of space."""

    dim = 3
    box_type = Box3
    __slots__ = ()


# ===========================================================================
# 2-D builders
# ===========================================================================

def translate2d(v: Sequence[float]) -> Matrix33:
    m = np.eye(3)
    m[:2, 2] = v
    return Matrix33(m)


def scale2d(v: Sequence[float]) -> Matrix33:
    return Matrix33(np.diag([v[0], v[1], 1.0]))


def rotate2d(angle: float) -> Matrix33:
    """Counter-clockwise rotation by *angle* radians about the origin."""
    c = np.cos(angle)
    s = np.sin(angle)
    return Matrix33([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def mirror_x2d() -> Matrix33:
    """Reflect across the X axis (y -> -y)."""
    return Matrix33(np.diag([1.0, -1.0, 1.0]))


def mirror_y2d() -> Matrix33:
    """Reflect across the Y axis (x -> -x)."""
    return Matrix33(np.diag([-1.0, 1.0, 1.0]))


# ===========================================================================
# 3-D builders
# ===========================================================================

def translate3d(v: Sequence[float]) -> Matrix44:
    m = np.eye(4)
    m[:3, 3] = v
    return Matrix44(m)


def scale3d(v: Sequence[float]) -> Matrix44:
    return Matrix44(np.diag([v[0], v[1], v[2], 1.0]))


def rotate_x(angle: float) -> Matrix44:
    c = np.cos(angle)
    s = np.sin(angle)
    return Matrix44([[1.0, 0.0, 0.0, 0.0], [0.0, c, -s, 0.0], [0.0, s, c, 0.0], [0.0, 0.0, 0.0, 1.0]])


def rotate_y(angle: float) -> Matrix44:
    c = np.cos(angle)
    s = np.sin(angle)
    return Matrix44([[c, 0.0, s, 0.0], [0.0, 1.0, 0.0, 0.0], [-s, 0.0, c, 0.0], [0.0, 0.0, 0.0, 1.0]])


def rotate_z(angle: float) -> Matrix44:
    c = np.cos(angle)
    s = np.sin(angle)
    return Matrix44([[c, -s, 0.0, 0.0], [s, c, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0], [0.0, 0.0, 0.0, 1.0]])


def rotate3d(axis: Sequence[float], angle: float) -> Matrix44:
    """Right-handed rotation by *angle* radians about *axis* (Rodrigues)."""
    a = np.asarray(axis, dtype=np.float64)
    if length(a) == 0.0:
        raise ConstructionError("rotation axis has zero length")
    x, y, z = normalize(a)
    c = np.cos(angle)
    s = np.sin(angle)
    t = 1.0 - c
    return Matrix44([
        [t * x * x + c,     t * x * y - s * z, t * x * z + s * y, 0.0],
        [t * x * y + s * z, t * y * y + c,     t * y * z - s * x, 0.0],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c,     0.0],
        [0.0,               0.0,               0.0,               1.0],
    ])
