"""
sdfmath — geometric value types shared by sdf2 and sdf3
=======================================================

- Vector helpers over numpy arrays: :func:`vec2`, :func:`vec3`,
  :func:`length`, :func:`normalize`, ...
- Axis-aligned boxes: :class:`Box2`, :class:`Box3`
- Affine transforms: :class:`Matrix33`, :class:`Matrix44` and builders
- Blend functions for smooth CSG: :func:`normal_min`, :func:`poly_min`, ...
- :class:`ConstructionError` and :func:`optional_builder`
"""

from .blend import (
    MaxFunc,
    MinFunc,
    chamfer_min,
    exp_min,
    normal_max,
    normal_min,
    poly_max,
    poly_min,
    round_min,
)
from .box import Box2, Box3
from .errors import ConstructionError, optional_builder
from .matrix import (
    Matrix33,
    Matrix44,
    mirror_x2d,
    mirror_y2d,
    rotate2d,
    rotate3d,
    rotate_x,
    rotate_y,
    rotate_z,
    scale2d,
    scale3d,
    translate2d,
    translate3d,
)
from .vector import (
    TAU,
    as_points,
    clamp,
    cross,
    dot,
    frozen,
    length,
    length2,
    mix,
    normalize,
    polar_to_xy,
    sawtooth,
    vec2,
    vec3,
)

__version__ = "0.1.0"

__all__ = [
    # Vectors
    "TAU", "vec2", "vec3", "as_points", "frozen",
    "length", "length2", "dot", "cross", "normalize", "clamp", "mix",
    "sawtooth", "polar_to_xy",

    # Boxes
    "Box2", "Box3",

    # Matrices
    "Matrix33", "Matrix44",
    "translate2d", "scale2d", "rotate2d", "mirror_x2d", "mirror_y2d",
    "translate3d", "scale3d", "rotate_x", "rotate_y", "rotate_z", "rotate3d",

    # Blending
    "MinFunc", "MaxFunc",
    "normal_min", "normal_max", "round_min", "chamfer_min", "exp_min",
    "poly_min", "poly_max",

    # Errors
    "ConstructionError", "optional_builder",
]
