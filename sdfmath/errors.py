"""Construction errors and optional-result builders."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

__all__ = ["ConstructionError", "optional_builder"]


class ConstructionError(ValueError):
    """Raised when a shape or math object is built from malformed input.

    Examples are polygons with fewer than three vertices, non-positive
    instancing counts, zero-length direction vectors and singular
    transform matrices.  Evaluation itself never raises.
    """


def optional_builder(cls: Callable[..., _T]) -> Callable[..., Optional[_T]]:
    """Wrap the constructor *cls* so that failures yield ``None``.

    The returned factory also yields ``None`` when any positional or
    keyword argument is ``None``: a subtree that failed to build must not
    silently turn its parent into a different shape.
    """

    @functools.wraps(cls, updated=())
    def build(*args: Any, **kwargs: Any) -> Optional[_T]:
        name = getattr(cls, "__name__", repr(cls))
        if any(a is None for a in args) or any(v is None for v in kwargs.values()):
            logger.warning("%s: a child shape failed to build, result is None", name)
            return None
        try:
            return cls(*args, **kwargs)
        except ConstructionError as exc:
            logger.warning("%s: construction failed: %s", name, exc)
            return None

    return build
