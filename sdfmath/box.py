"""Axis-aligned bounding boxes in 2-D and 3-D."""

from __future__ import annotations

import itertools
from typing import ClassVar, TypeVar

import numpy as np
import numpy.typing as npt

from .errors import ConstructionError
from .vector import _F, frozen

_B = TypeVar("_B", bound="_Box")

__all__ = ["Box2", "Box3"]


class _Box:
    """Shared implementation of :class:`Box2` and :class:`Box3`.

    A box is the pair ``(min, max)`` of read-only corner vectors with
    ``min <= max`` in every component.
    """

    dim: ClassVar[int]

    __slots__ = ("min", "max")

    def __init__(self, bmin: npt.ArrayLike, bmax: npt.ArrayLike) -> None:
        lo = frozen(bmin, self.dim)
        hi = frozen(bmax, self.dim)
        if lo.shape != (self.dim,) or hi.shape != (self.dim,):
            raise ConstructionError(f"box corners must have shape ({self.dim},)")
        if np.any(lo > hi):
            raise ConstructionError(f"box min {lo} exceeds max {hi}")
        object.__setattr__(self, "min", lo)
        object.__setattr__(self, "max", hi)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_center_size(cls: type[_B], center: npt.ArrayLike, size: npt.ArrayLike) -> _B:
        """Box centred on *center* with extents *size*."""
        half = 0.5 * np.asarray(size, dtype=np.float64)
        c = np.asarray(center, dtype=np.float64)
        return cls(c - half, c + half)

    @classmethod
    def from_points(cls: type[_B], points: npt.ArrayLike) -> _B:
        """Smallest box containing every row of *points*."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, cls.dim)
        if len(pts) == 0:
            raise ConstructionError("cannot bound an empty point set")
        return cls(pts.min(axis=0), pts.max(axis=0))

    def center(self) -> _F:
        return 0.5 * (self.min + self.max)

    def size(self) -> _F:
        return self.max - self.min

    def extend(self: _B, other: _B) -> _B:
        """Smallest box containing both this box and *other*."""
        return type(self)(np.minimum(self.min, other.min), np.maximum(self.max, other.max))

    def translate(self: _B, v: npt.ArrayLike) -> _B:
        v = np.asarray(v, dtype=np.float64)
        return type(self)(self.min + v, self.max + v)

    def vertices(self) -> _F:
        """Corner vertices as an ``(2**dim, dim)`` array."""
        corners = zip(self.min, self.max)
        return np.array(list(itertools.product(*corners)), dtype=np.float64)

    def contains(self, p: npt.ArrayLike, tol: float = 0.0) -> npt.NDArray[np.bool_]:
        """Element-wise test of whether points *p* lie inside the box."""
        p = np.asarray(p, dtype=np.float64)
        inside = (p >= self.min - tol) & (p <= self.max + tol)
        return np.all(inside, axis=-1)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.min, other.min) and np.array_equal(self.max, other.max))

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.min.tobytes(), self.max.tobytes()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.min.tolist()}, {self.max.tolist()})"


class Box2(_Box):
    """2-D axis-aligned box."""

    dim = 2
    __slots__ = ()


class Box3(_Box):
    """3-D axis-aligned box."""

    dim = 3
    __slots__ = ()
