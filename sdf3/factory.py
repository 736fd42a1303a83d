"""Factories for 3-D shapes that return ``None`` instead of raising.

Same contract as :mod:`sdf2.factory`: construction failures and ``None``
arguments yield ``None`` (logged at WARNING level).
"""

from __future__ import annotations

from sdfmath import optional_builder

from . import geometry as g

__all__ = [
    "sphere", "box", "cylinder", "capsule", "multi_cylinder",
    "revolve", "extrude", "transform", "array", "rotate",
    "union", "difference", "intersection",
]

sphere = optional_builder(g.Sphere3D)
box = optional_builder(g.Box3D)
cylinder = optional_builder(g.Cylinder3D)
capsule = optional_builder(g.Capsule3D)
multi_cylinder = optional_builder(g.MultiCylinder3D)

revolve = optional_builder(g.Revolve3D)
extrude = optional_builder(g.Extrude3D)

transform = optional_builder(g.Transform3D)
array = optional_builder(g.Array3D)
rotate = optional_builder(g.Rotate3D)

union = optional_builder(g.Union3D)
difference = optional_builder(g.Difference3D)
intersection = optional_builder(g.Intersection3D)
