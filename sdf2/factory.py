"""Factories for 2-D shapes that return ``None`` instead of raising.

Each factory takes the same arguments as the matching class in
:mod:`sdf2.geometry`.  Construction failures (for example a polygon with
two vertices or an array with a zero count) are logged and produce
``None``.  Any ``None`` argument also produces ``None``, so a failure deep
in a tree propagates to the root instead of silently changing the shape::

    from sdf2 import factory as f

    shape = f.union(f.circle(1.0), f.polygon([(0, 0), (1, 0)]))
    assert shape is None
"""

from __future__ import annotations

from sdfmath import optional_builder

from . import geometry as g

__all__ = [
    "circle", "multi_circle", "box", "line", "polygon",
    "offset", "cut", "transform", "array", "rotate", "rotate_copy", "slice3d",
    "union", "difference", "intersection",
]

circle = optional_builder(g.Circle2D)
multi_circle = optional_builder(g.MultiCircle2D)
box = optional_builder(g.Box2D)
line = optional_builder(g.Line2D)
polygon = optional_builder(g.Polygon2D)

offset = optional_builder(g.Offset2D)
cut = optional_builder(g.Cut2D)
transform = optional_builder(g.Transform2D)
array = optional_builder(g.Array2D)
rotate = optional_builder(g.Rotate2D)
rotate_copy = optional_builder(g.RotateCopy2D)
slice3d = optional_builder(g.Slice2D)

union = optional_builder(g.Union2D)
difference = optional_builder(g.Difference2D)
intersection = optional_builder(g.Intersection2D)
