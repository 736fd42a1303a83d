"""3-D SDF math primitives for the sdf3 package.

Re-exports the shared vector helpers from :mod:`sdfmath.vector`, then adds
the 3-D primitive SDFs and the 2-D -> 3-D lifting operators.

A "point array" *p* has shape ``(..., 3)``; scalar SDF results have shape
``(...,)``.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from sdf2.sdf_lib import sdBox2D
from sdfmath.vector import *  # noqa: F401, F403  re-export shared helpers
from sdfmath.vector import _F, length, vec2

_SDFFunc = Callable[[_F], _F]


# ===========================================================================
# 3-D primitive SDFs
# ===========================================================================

def sdSphere(p: _F, s: float) -> _F:
    """Sphere of radius *s* centred at origin."""
    return length(p) - s


def sdBox3D(p: _F, b: _F) -> _F:
    """Axis-aligned box with half-extents *b*."""
    q = np.abs(p) - b
    return length(np.maximum(q, 0.0)) + np.minimum(np.max(q, axis=-1), 0.0)


def sdRoundBox3D(p: _F, b: _F, r: float) -> _F:
    """Box with half-extents *b* whose edges are rounded by *r*."""
    return sdBox3D(p, b - r) - r


def sdCappedCylinder(p: _F, r: float, h: float, rnd: float) -> _F:
    """Z-axis cylinder of radius *r*, half-height *h*, edges rounded by *rnd*."""
    q = vec2(length(p[..., :2]), p[..., 2])
    return sdBox2D(q, np.array([r - rnd, h - rnd])) - rnd


def sdMultiCylinder(p: _F, r: float, h: float, positions: _F) -> _F:
    """Union of Z-axis cylinders centred on each ``(x, y)`` of *positions*."""
    b = np.array([r, h])
    d = None
    for c in positions:
        q = vec2(length(p[..., :2] - c), p[..., 2])
        dc = sdBox2D(q, b)
        d = dc if d is None else np.minimum(d, dc)
    return d


# ===========================================================================
# 2-D -> 3-D operators
# ===========================================================================

def opRevolution(p: _F, primitive2d: _SDFFunc) -> _F:
    """Revolve a 2-D profile ``(x, y)`` around the Z axis.

    The profile's x is the distance from the axis, its y is the height.
    """
    return primitive2d(vec2(length(p[..., :2]), p[..., 2]))


def sdWedge(p: _F, theta: float, norm: _F) -> _F:
    """Region swept from the +X half-plane counter-clockwise through *theta*.

    *norm* is the normal ``(-sin(theta), cos(theta))`` of the end plane.  A
    wedge narrower than a half-turn is the intersection of two half-planes,
    a wider one is their union.
    """
    a = -p[..., 1]
    b = norm[0] * p[..., 0] + norm[1] * p[..., 1]
    if theta < np.pi:
        return np.maximum(a, b)
    return np.minimum(a, b)


def opExtrusion(p: _F, primitive2d: _SDFFunc, h: float) -> _F:
    """Extrude a 2-D profile along Z over ``0 <= z <= h``."""
    d = primitive2d(p[..., :2])
    z = p[..., 2]
    return np.maximum(d, np.maximum(-z, z - h))
