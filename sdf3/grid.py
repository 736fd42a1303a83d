"""Grid sampling utilities for 3D signed distance functions."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt

from .geometry import Geometry3D

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]
_Bounds3D = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]
_Resolution3D = Tuple[int, int, int]


def sample_levelset_3d(
    geom: Geometry3D,
    resolution: _Resolution3D,
    bounds: Optional[_Bounds3D] = None,
) -> _Array:
    """Sample *geom* on a uniform 3-D cell-centred grid.

    Parameters
    ----------
    geom:
        A 3-D geometry.
    resolution:
        ``(nx, ny, nz)`` number of cells along each axis.
    bounds:
        ``((x0, x1), (y0, y1), (z0, z1))`` physical extents of the domain.
        Defaults to the geometry's bounding box.

    Returns
    -------
    numpy.ndarray
        Shape ``(nz, ny, nx)`` array of signed distances, z-first indexing.
    """
    if bounds is None:
        bb = geom.bounding_box()
        bounds = tuple((lo, hi) for lo, hi in zip(bb.min, bb.max))
    (x0, x1), (y0, y1), (z0, z1) = bounds
    nx, ny, nz = resolution
    logger.debug("sampling %r on %dx%dx%d cells over %s", geom, nx, ny, nz, bounds)

    xs = np.linspace(x0, x1, nx, endpoint=False) + (x1 - x0) / (2.0 * nx)
    ys = np.linspace(y0, y1, ny, endpoint=False) + (y1 - y0) / (2.0 * ny)
    zs = np.linspace(z0, z1, nz, endpoint=False) + (z1 - z0) / (2.0 * nz)

    Z, Y, X = np.meshgrid(zs, ys, xs, indexing="ij")
    p = np.stack([X, Y, Z], axis=-1)
    return geom.evaluate(p)
