"""
sdf3 — 3D Signed Distance Function nodes
========================================

Build 3-D solids as trees of signed distance functions.  Every node has
:meth:`~Geometry3D.evaluate` (vectorised over ``(..., 3)`` point arrays)
and :meth:`~Geometry3D.bounding_box`, computed once at construction.
Mesh extraction and file export consume only these two methods.

Implemented features
--------------------
- Primitive shapes: Sphere, Box (optionally rounded), Cylinder, Capsule, MultiCylinder
- 2-D to 3-D: solid of revolution (:class:`Revolve3D`), :class:`Extrude3D`
- Transforms and instancing: Transform, Array, Rotate
- Boolean operations with pluggable blending: Union, Difference, Intersection
- ``None``-returning factories: :mod:`sdf3.factory`
- Grid sampling: :func:`sample_levelset_3d`

Quick start
-----------

::

    from sdf2 import Box2D
    from sdf3 import Cylinder3D, Difference3D, Revolve3D, sample_levelset_3d

    ring  = Revolve3D(Box2D((0.2, 0.4)).translate(0.8, 0.0))
    hole  = Cylinder3D(height=1.0, radius=0.1).translate(0.8, 0.0, 0.0)
    shape = Difference3D(ring, hole)

    phi = sample_levelset_3d(shape, (64, 64, 64))
"""

from .geometry import (
    Geometry3D,
    Sphere3D,
    Box3D,
    Cylinder3D,
    Capsule3D,
    MultiCylinder3D,
    Revolve3D,
    Extrude3D,
    Transform3D,
    Array3D,
    Rotate3D,
    Union3D,
    Difference3D,
    Intersection3D,
)
from .grid import sample_levelset_3d

__version__ = "0.1.0"

__all__ = [
    # Base
    "Geometry3D",

    # Primitives
    "Sphere3D",
    "Box3D",
    "Cylinder3D",
    "Capsule3D",
    "MultiCylinder3D",

    # 2-D to 3-D
    "Revolve3D",
    "Extrude3D",

    # Transforms and instancing
    "Transform3D",
    "Array3D",
    "Rotate3D",

    # Boolean operations
    "Union3D",
    "Difference3D",
    "Intersection3D",

    # Grid utilities
    "sample_levelset_3d",
]
