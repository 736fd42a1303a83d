"""2-D SDF math primitives for the sdf2 package.

Re-exports the shared vector helpers from :mod:`sdfmath.vector`, then adds
the 2-D primitive SDFs used by :mod:`sdf2.geometry`.

All functions accept and return ``numpy.ndarray`` objects and support
broadcasting over arbitrary leading batch dimensions.  A "point array" *p*
has shape ``(..., 2)``; scalar SDF results have shape ``(...,)``.
"""

from __future__ import annotations

import numpy as np

from sdfmath.vector import *  # noqa: F401, F403  re-export shared helpers
from sdfmath.vector import _F, dot, length, length2


# ===========================================================================
# 2-D primitive SDFs
# ===========================================================================

def sdCircle(p: _F, r: float) -> _F:
    """2-D circle of radius *r* centred at origin."""
    return length(p) - r


def sdMultiCircle(p: _F, r: float, positions: _F) -> _F:
    """Union of circles of radius *r* centred on each row of *positions*."""
    d = length(p - positions[0]) - r
    for c in positions[1:]:
        d = np.minimum(d, length(p - c) - r)
    return d


def sdBox2D(p: _F, b: _F) -> _F:
    """2-D axis-aligned box with half-extents *b* ``(bx, by)``."""
    d = np.abs(p) - b
    return length(np.maximum(d, 0.0)) + np.minimum(np.maximum(d[..., 0], d[..., 1]), 0.0)


def sdRoundBox2D(p: _F, b: _F, r: float) -> _F:
    """2-D box with half-extents *b* whose corners are rounded by *r*.

    *b* is the full half-size; the straight edges stay where they are.
    """
    return sdBox2D(p, b - r) - r


def sdLine2D(p: _F, h: float, r: float) -> _F:
    """Segment from ``(-h, 0)`` to ``(h, 0)`` thickened by *r*."""
    q = np.abs(p)
    qx = np.maximum(q[..., 0] - h, 0.0)
    return np.hypot(qx, q[..., 1]) - r


def sdPolygon2D(p: _F, v: _F, u: _F, seg_len: _F) -> _F:
    """Closed polygon.

    Parameters
    ----------
    p:
        ``(..., 2)`` query points.
    v:
        ``(N+1, 2)`` closed vertex loop (``v[0] == v[N]``).
    u:
        ``(N, 2)`` unit edge directions.
    seg_len:
        ``(N,)`` edge lengths.

    The nearest-edge distance and the winding number are gathered in the
    same pass over the edges.  A nonzero winding number marks the interior.
    """
    py = p[..., 1]
    dd = np.full(p.shape[:-1], np.inf)
    wn = np.zeros(p.shape[:-1], dtype=np.int64)

    pb = p - v[0]
    for i in range(len(u)):
        a = v[i]
        b = v[i + 1]
        pa = pb
        pb = p - b

        t = dot(pa, u[i])                                 # projection onto the edge
        dn = pa[..., 0] * u[i][1] - pa[..., 1] * u[i][0]  # > 0: p right of the edge

        # clamp the projection to the segment
        dd = np.minimum(dd, np.where(t <= 0.0, length2(pa),
                            np.where(t > seg_len[i], length2(pb), dn * dn)))

        # http://geomalgorithms.com/a03-_inclusion.html
        up = (a[1] <= py) & (b[1] > py) & (dn < 0.0)
        down = (a[1] > py) & (b[1] <= py) & (dn > 0.0)
        wn += up.astype(np.int64) - down.astype(np.int64)

    d = np.sqrt(dd)
    return d * np.where(wn != 0, -1.0, 1.0)


def sdHalfPlane2D(p: _F, a: _F, n: _F) -> _F:
    """Signed distance to the line through *a* with unit normal *n*."""
    return dot(p - a, n)
