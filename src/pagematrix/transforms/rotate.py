"""Rotate and shear properties.

Both are absolute: writing 30 leaves the item at 30 degrees whatever its
angle was before. The host reports angles counter-clockwise positive, so
reads flip the sign to give clockwise-positive values.
"""

import math
from typing import Any

from pagematrix.exceptions import InvalidArgumentError
from pagematrix.matrix import Matrix2D
from pagematrix.transforms._utils import apply_to_item, is_number
from pagematrix.transforms.base import PropertyHandler, TransformContext, TransformKind
from pagematrix.transforms.registry import register_property
from pagematrix.units import precision


def rotate_item(context: TransformContext, angle: float) -> None:
    """
    Rotate an item to an absolute angle about the anchor.

    The host only composes rotations, so the item is rotated by
    ``-(current) - angle`` in host terms, which lands it at ``-angle``.

    Args:
        context: Transform context
        angle: Target rotation in degrees, clockwise positive
    """
    delta = -context.item.rotation_angle - angle
    apply_to_item(context, Matrix2D.rotation(math.radians(delta)))


def shear_item(context: TransformContext, angle: float) -> None:
    """
    Shear an item to an absolute angle about the anchor.

    Shears add up by their tangents, not their angles, and act along the
    item's own (rotated) x axis: the shear is conjugated by the item's
    rotation before being applied.

    Args:
        context: Transform context
        angle: Target shear in degrees, clockwise positive, within (-90, 90)

    Raises:
        InvalidArgumentError: If the angle is 90 degrees or more either way
    """
    if abs(angle) >= 90:
        raise InvalidArgumentError(
            "transform(), shear angle must be between -90 and 90 degrees",
            context={"kind": "shear", "value": angle},
        )
    item = context.item
    rotation = math.radians(item.rotation_angle)
    skew = math.tan(math.radians(-angle)) - math.tan(math.radians(item.shear_angle))

    matrix = (
        Matrix2D.rotation(rotation)
        .compose(Matrix2D(1, skew, 0, 0, 1, 0))
        .compose(Matrix2D.rotation(-rotation))
    )
    apply_to_item(context, matrix)


@register_property(TransformKind.ROTATE)
class RotateHandler(PropertyHandler):
    """Absolute rotation in degrees."""

    def accepts(self, value: Any) -> bool:
        return is_number(value)

    def read(self, context: TransformContext) -> float:
        return precision(-context.item.rotation_angle)

    def write(self, context: TransformContext, value: float) -> float:
        rotate_item(context, value)
        return self.read(context)


@register_property(TransformKind.SHEAR)
class ShearHandler(PropertyHandler):
    """Absolute shear in degrees."""

    def accepts(self, value: Any) -> bool:
        return is_number(value)

    def read(self, context: TransformContext) -> float:
        return precision(-context.item.shear_angle)

    def write(self, context: TransformContext, value: float) -> float:
        shear_item(context, value)
        return self.read(context)
