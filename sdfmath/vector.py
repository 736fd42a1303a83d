"""Vector helpers shared by sdf2 and sdf3.

Vectors are plain ``float64`` numpy arrays whose last axis holds the
components (2 for 2-D, 3 for 3-D).  Every helper broadcasts over arbitrary
leading batch dimensions, so the same function works for one point or a
million.

This module provides:

* **Type alias**: :data:`_F`
* **Constructors**: :func:`vec2`, :func:`vec3`, :func:`as_points`, :func:`frozen`
* **Math helpers**: :func:`length`, :func:`length2`, :func:`dot`,
  :func:`cross`, :func:`normalize`, :func:`clamp`, :func:`mix`
* **Angular helpers**: :func:`sawtooth`, :func:`polar_to_xy`
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from .errors import ConstructionError

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

TAU = 2.0 * np.pi

__all__ = [
    "_F", "TAU",
    "vec2", "vec3", "as_points", "frozen",
    "length", "length2", "dot", "cross", "normalize", "clamp", "mix",
    "sawtooth", "polar_to_xy",
]


# ===========================================================================
# Constructors
# ===========================================================================

def vec2(x: _F, y: _F) -> _F:
    """Stack *x* and *y* into a ``(..., 2)`` array."""
    x, y = np.broadcast_arrays(x, y)
    return np.stack([x, y], axis=-1).astype(np.float64)


def vec3(x: _F, y: _F, z: _F) -> _F:
    """Stack *x*, *y*, *z* into a ``(..., 3)`` array."""
    x, y, z = np.broadcast_arrays(x, y, z)
    return np.stack([x, y, z], axis=-1).astype(np.float64)


def as_points(p: npt.ArrayLike, dim: int) -> _F:
    """Coerce *p* to a float64 array whose last axis has length *dim*."""
    arr = np.asarray(p, dtype=np.float64)
    if arr.ndim == 0 or arr.shape[-1] != dim:
        raise ValueError(f"expected points of shape (..., {dim}), got {arr.shape}")
    return arr


def frozen(p: npt.ArrayLike, dim: int | None = None) -> _F:
    """Return a read-only float64 copy of *p*.

    Arrays held by SDF nodes are frozen so that a constructed node cannot
    be changed behind the back of the trees that share it.
    """
    arr = np.array(p, dtype=np.float64)
    if dim is not None and (arr.ndim == 0 or arr.shape[-1] != dim):
        raise ConstructionError(f"expected shape (..., {dim}), got {arr.shape}")
    arr.flags.writeable = False
    return arr


# ===========================================================================
# Math helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


def length2(v: _F) -> _F:
    """Squared length along the last axis."""
    return np.sum(v * v, axis=-1)


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


def cross(a: _F, b: _F) -> _F:
    """Cross product of 3-D vectors."""
    return np.cross(a, b)


def normalize(v: _F) -> _F:
    """Scale *v* to unit length.

    A zero-length vector normalizes to the zero vector; no NaN is
    produced.  Callers that need a real direction check the length first.
    """
    v = np.asarray(v, dtype=np.float64)
    n = length(v)[..., None]
    return np.divide(v, n, out=np.zeros_like(v), where=n > 0.0)


def clamp(x: _F, lo: float | _F, hi: float | _F) -> _F:
    """Clamp *x* element-wise to ``[lo, hi]``."""
    return np.minimum(np.maximum(x, lo), hi)


def mix(x: _F, y: _F, a: _F) -> _F:
    """Linear interpolation ``x*(1-a) + y*a``."""
    return x + (y - x) * a


# ===========================================================================
# Angular helpers
# ===========================================================================

def sawtooth(x: _F, period: float) -> _F:
    """Reduce *x* into ``[0, period)``."""
    return np.mod(x, period)


def polar_to_xy(r: _F, theta: _F) -> _F:
    """Convert polar coordinates to a ``(..., 2)`` cartesian array."""
    return vec2(r * np.cos(theta), r * np.sin(theta))
