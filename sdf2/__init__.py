"""
sdf2 — 2D Signed Distance Function nodes
========================================

Build 2-D shapes as trees of signed distance functions.  Every node has
:meth:`~Geometry2D.evaluate` (vectorised over ``(..., 2)`` point arrays)
and :meth:`~Geometry2D.bounding_box`, computed once at construction.

Implemented features
--------------------
- Primitive shapes: Circle, MultiCircle, Box (optionally rounded), Line, Polygon
- Modifiers: Offset, Cut
- Transforms and instancing: Transform, Array, Rotate, RotateCopy
- Boolean operations with pluggable blending: Union, Difference, Intersection
- Slicing a 3-D shape with a plane: :class:`Slice2D`
- ``None``-returning factories: :mod:`sdf2.factory`
- Grid sampling: :func:`sample_levelset_2d`

Quick start
-----------

::

    from sdf2 import Circle2D, Box2D, Union2D, sample_levelset_2d
    from sdfmath import poly_min

    circle = Circle2D(radius=0.3)
    box    = Box2D(size=(0.4, 0.4)).translate(0.4, 0.0)
    shape  = Union2D(circle, box, min_func=poly_min, k=0.05)

    phi = shape.evaluate([[0.0, 0.0], [1.0, 1.0]])
    grid = sample_levelset_2d(shape, (256, 256))
"""

from .geometry import (
    # Base class
    Geometry2D,

    # Primitive shapes
    Circle2D,
    MultiCircle2D,
    Box2D,
    Line2D,
    Polygon2D,

    # Modifiers
    Offset2D,
    Cut2D,

    # Transforms and instancing
    Transform2D,
    Array2D,
    Rotate2D,
    RotateCopy2D,

    # Slicing
    Slice2D,

    # Boolean operations
    Union2D,
    Difference2D,
    Intersection2D,
)

from .grid import sample_levelset_2d

__version__ = "0.1.0"

__all__ = [
    # Base
    "Geometry2D",

    # Primitive shapes
    "Circle2D",
    "MultiCircle2D",
    "Box2D",
    "Line2D",
    "Polygon2D",

    # Modifiers
    "Offset2D",
    "Cut2D",

    # Transforms and instancing
    "Transform2D",
    "Array2D",
    "Rotate2D",
    "RotateCopy2D",

    # Slicing
    "Slice2D",

    # Boolean operations
    "Union2D",
    "Difference2D",
    "Intersection2D",

    # Grid utilities
    "sample_levelset_2d",
]
