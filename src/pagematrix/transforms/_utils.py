"""Shared helpers for property handlers."""

import math
from numbers import Real
from typing import Any

from pagematrix.exceptions import InvalidArgumentError
from pagematrix.matrix import Matrix2D
from pagematrix.transforms.base import TransformContext
from pagematrix.units import from_points


def is_number(value: Any) -> bool:
    """True for real numbers other than bools and NaN."""
    return isinstance(value, Real) and not isinstance(value, bool) and not math.isnan(value)


def is_pair(value: Any) -> bool:
    """True for a list or tuple of exactly two numbers."""
    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(is_number(v) for v in value)
    )


def require_positive(kind: str, *values: float) -> None:
    for value in values:
        if value <= 0:
            raise InvalidArgumentError(
                f"transform(), {kind} must be positive",
                context={"kind": kind, "value": value},
            )


def measure(context: TransformContext) -> tuple[float, float]:
    """Width and height of the item's bounding box, in points."""
    bounds = context.item.geometric_bounds
    return abs(bounds[3] - bounds[1]), abs(bounds[2] - bounds[0])


def measure_in_units(context: TransformContext) -> tuple[float, float]:
    width, height = measure(context)
    return from_points(width, context.units), from_points(height, context.units)


def apply_to_item(context: TransformContext, matrix: Matrix2D) -> None:
    """Apply ``matrix`` to the context item about the context anchor."""
    context.item.transform(context.anchor, matrix, context.preferences)
