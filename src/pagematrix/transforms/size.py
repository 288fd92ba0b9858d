"""Width, height and size properties."""

from typing import Any

from pagematrix.exceptions import InvalidArgumentError
from pagematrix.matrix import Matrix2D
from pagematrix.transforms._utils import (
    apply_to_item,
    is_number,
    is_pair,
    measure,
    measure_in_units,
    require_positive,
)
from pagematrix.transforms.base import PropertyHandler, TransformContext, TransformKind
from pagematrix.transforms.registry import register_property
from pagematrix.units import precision, to_points


def resize_item(context: TransformContext, width: float | None, height: float | None) -> None:
    """
    Scale an item about the anchor so its bounding box gets the target size.

    Args:
        context: Transform context (item, anchor, units)
        width: Target width in context units, or None to keep it
        height: Target height in context units, or None to keep it

    Raises:
        InvalidArgumentError: If the item has no extent along a resized axis
    """
    current_width, current_height = measure(context)
    if (width is not None and current_width == 0) or (height is not None and current_height == 0):
        raise InvalidArgumentError(
            "transform(), cannot resize an item with zero width or height",
            context={"width": current_width, "height": current_height},
        )
    scale_x = to_points(width, context.units) / current_width if width is not None else 1.0
    scale_y = to_points(height, context.units) / current_height if height is not None else 1.0
    apply_to_item(context, Matrix2D.scaling(scale_x, scale_y))


@register_property(TransformKind.WIDTH)
class WidthHandler(PropertyHandler):
    """Bounding box width."""

    def accepts(self, value: Any) -> bool:
        return is_number(value)

    def read(self, context: TransformContext) -> float:
        return precision(measure_in_units(context)[0])

    def write(self, context: TransformContext, value: float) -> float:
        require_positive("width", value)
        resize_item(context, value, None)
        return self.read(context)


@register_property(TransformKind.HEIGHT)
class HeightHandler(PropertyHandler):
    """Bounding box height."""

    def accepts(self, value: Any) -> bool:
        return is_number(value)

    def read(self, context: TransformContext) -> float:
        return precision(measure_in_units(context)[1])

    def write(self, context: TransformContext, value: float) -> float:
        require_positive("height", value)
        resize_item(context, None, value)
        return self.read(context)


@register_property(TransformKind.SIZE)
class SizeHandler(PropertyHandler):
    """Bounding box width and height as ``[w, h]``."""

    def accepts(self, value: Any) -> bool:
        return is_pair(value)

    def read(self, context: TransformContext) -> list[float]:
        width, height = measure_in_units(context)
        return [precision(width), precision(height)]

    def write(self, context: TransformContext, value: list[float]) -> list[float]:
        require_positive("size", *value)
        resize_item(context, value[0], value[1])
        return self.read(context)
