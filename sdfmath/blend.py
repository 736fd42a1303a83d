"""Blend functions for CSG combinators.

A blend function has the signature ``f(a, b, k) -> distance`` where *a* and
*b* are distance arrays and *k* is the smoothing parameter.  Min-type
functions implement (smooth) unions, max-type functions implement (smooth)
differences and intersections.

The exact :func:`normal_min` / :func:`normal_max` ignore *k* and give
sharp CSG.  The smoothing functions fall back to them for ``k <= 0`` so
they never divide by zero.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .vector import _F, clamp, mix

MinFunc = Callable[[_F, _F, float], _F]
MaxFunc = Callable[[_F, _F, float], _F]

__all__ = [
    "MinFunc", "MaxFunc",
    "normal_min", "normal_max",
    "round_min", "chamfer_min", "exp_min", "poly_min", "poly_max",
]


def normal_min(a: _F, b: _F, k: float = 0.0) -> _F:
    """Exact minimum (sharp union)."""
    return np.minimum(a, b)


def normal_max(a: _F, b: _F, k: float = 0.0) -> _F:
    """Exact maximum (sharp difference / intersection)."""
    return np.maximum(a, b)


def round_min(a: _F, b: _F, k: float) -> _F:
    """Union with a circular fillet of radius *k*."""
    if k <= 0.0:
        return np.minimum(a, b)
    ua = np.maximum(k - a, 0.0)
    ub = np.maximum(k - b, 0.0)
    return np.maximum(k, np.minimum(a, b)) - np.hypot(ua, ub)


def chamfer_min(a: _F, b: _F, k: float) -> _F:
    """Union with a 45 degree chamfer of size *k*."""
    if k <= 0.0:
        return np.minimum(a, b)
    return np.minimum(np.minimum(a, b), (a - k + b) * np.sqrt(0.5))


def exp_min(a: _F, b: _F, k: float) -> _F:
    """Exponential smooth minimum; larger *k* is sharper."""
    if k <= 0.0:
        return np.minimum(a, b)
    return -np.logaddexp(-k * a, -k * b) / k


def poly_min(a: _F, b: _F, k: float) -> _F:
    """Polynomial smooth minimum with blend radius *k*."""
    if k <= 0.0:
        return np.minimum(a, b)
    h = clamp(0.5 + 0.5 * (b - a) / k, 0.0, 1.0)
    return mix(b, a, h) - k * h * (1.0 - h)


def poly_max(a: _F, b: _F, k: float) -> _F:
    """Polynomial smooth maximum with blend radius *k*."""
    if k <= 0.0:
        return np.maximum(a, b)
    h = clamp(0.5 - 0.5 * (b - a) / k, 0.0, 1.0)
    return mix(b, a, h) + k * h * (1.0 - h)
