"""Grid sampling utilities for 2D signed distance functions."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt

from .geometry import Geometry2D

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]
_Bounds2D = Tuple[Tuple[float, float], Tuple[float, float]]
_Resolution2D = Tuple[int, int]


def sample_levelset_2d(
    geom: Geometry2D,
    resolution: _Resolution2D,
    bounds: Optional[_Bounds2D] = None,
) -> _Array:
    """Sample *geom* on a uniform 2-D cell-centred grid.

    Parameters
    ----------
    geom:
        A 2-D geometry.
    resolution:
        ``(nx, ny)`` number of cells along each axis.
    bounds:
        ``((x0, x1), (y0, y1))`` physical extents of the domain.  Defaults
        to the geometry's bounding box.

    Returns
    -------
    numpy.ndarray
        Shape ``(ny, nx)`` array of signed distances, row-major (y first).
    """
    if bounds is None:
        bb = geom.bounding_box()
        bounds = ((bb.min[0], bb.max[0]), (bb.min[1], bb.max[1]))
    (x0, x1), (y0, y1) = bounds
    nx, ny = resolution
    logger.debug("sampling %r on %dx%d cells over %s", geom, nx, ny, bounds)

    xs = np.linspace(x0, x1, nx, endpoint=False) + (x1 - x0) / (2.0 * nx)
    ys = np.linspace(y0, y1, ny, endpoint=False) + (y1 - y0) / (2.0 * ny)

    Y, X = np.meshgrid(ys, xs, indexing="ij")
    p = np.stack([X, Y], axis=-1)
    return geom.evaluate(p)
