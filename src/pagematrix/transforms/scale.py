"""Scale property."""

from typing import Any

from pagematrix.exceptions import InvalidArgumentError
from pagematrix.matrix import Matrix2D
from pagematrix.transforms._utils import apply_to_item, is_number, is_pair
from pagematrix.transforms.base import PropertyHandler, TransformContext, TransformKind
from pagematrix.transforms.registry import register_property
from pagematrix.units import precision


@register_property(TransformKind.SCALE)
class ScaleHandler(PropertyHandler):
    """Scale factors relative to the item's original size.

    Writes are relative: a factor of 2 doubles the item's current size.
    A single number scales both axes. Zero factors are rejected since they
    collapse the item.
    """

    def accepts(self, value: Any) -> bool:
        return is_number(value) or is_pair(value)

    def read(self, context: TransformContext) -> list[float]:
        item = context.item
        return [precision(item.horizontal_scale / 100), precision(item.vertical_scale / 100)]

    def write(self, context: TransformContext, value: float | list[float]) -> list[float]:
        if is_number(value):
            scale_x = scale_y = value
        else:
            scale_x, scale_y = value
        if scale_x == 0 or scale_y == 0:
            raise InvalidArgumentError(
                "transform(), scale factors must not be zero",
                context={"kind": "scale", "value": value},
            )
        apply_to_item(context, Matrix2D.scaling(scale_x, scale_y))
        return self.read(context)
