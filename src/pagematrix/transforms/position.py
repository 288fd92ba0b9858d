"""Translate, position, x and y properties.

Positions are the anchor point's coordinates relative to the reference
page's top-left corner (plus the session origin), in the active units.
``x`` and ``y`` are partial position writes, a position write is a
translate by the offset to the target, and a translate reports the
resulting position.
"""

from typing import Any

from pagematrix.logging_config import get_logger
from pagematrix.matrix import Matrix2D
from pagematrix.transforms._utils import apply_to_item, is_number, is_pair
from pagematrix.transforms.base import PropertyHandler, TransformContext, TransformKind
from pagematrix.transforms.registry import register_property
from pagematrix.units import from_points, precision, to_points

logger = get_logger(__name__)


def anchor_position(context: TransformContext) -> tuple[float, float]:
    """Unrounded anchor position in context units."""
    units = context.units
    page_x, page_y = context.page.top_left if context.page is not None else (0.0, 0.0)
    origin_x = to_points(context.origin[0], units)
    origin_y = to_points(context.origin[1], units)

    anchor_x, anchor_y = context.item.resolve(context.anchor)
    return (
        from_points(anchor_x - page_x - origin_x, units),
        from_points(anchor_y - page_y - origin_y, units),
    )


def read_position(context: TransformContext) -> list[float]:
    x, y = anchor_position(context)
    return [precision(x), precision(y)]


def translate_item(context: TransformContext, dx: float, dy: float) -> list[float]:
    """Move an item by ``(dx, dy)`` context units and report its new position."""
    offset_x = to_points(dx, context.units)
    offset_y = to_points(dy, context.units)
    apply_to_item(context, Matrix2D.translation(offset_x, offset_y))
    return read_position(context)


def move_item(context: TransformContext, x: float, y: float) -> None:
    """Move the item's anchor point to ``(x, y)`` context units."""
    current_x, current_y = anchor_position(context)
    logger.debug("Moving anchor from (%g, %g) to (%g, %g)", current_x, current_y, x, y)
    translate_item(context, x - current_x, y - current_y)


@register_property(TransformKind.TRANSLATE)
class TranslateHandler(PropertyHandler):
    """Relative move by ``[dx, dy]``; reports the anchor position."""

    def accepts(self, value: Any) -> bool:
        return is_pair(value)

    def read(self, context: TransformContext) -> list[float]:
        return read_position(context)

    def write(self, context: TransformContext, value: list[float]) -> list[float]:
        return translate_item(context, value[0], value[1])


@register_property(TransformKind.POSITION)
class PositionHandler(PropertyHandler):
    """Anchor position as ``[x, y]``; writes echo the requested position."""

    def accepts(self, value: Any) -> bool:
        return is_pair(value)

    def read(self, context: TransformContext) -> list[float]:
        return read_position(context)

    def write(self, context: TransformContext, value: list[float]) -> list[float]:
        move_item(context, value[0], value[1])
        return value


@register_property(TransformKind.X)
class XHandler(PropertyHandler):
    """Horizontal anchor position."""

    def accepts(self, value: Any) -> bool:
        return is_number(value)

    def read(self, context: TransformContext) -> float:
        return read_position(context)[0]

    def write(self, context: TransformContext, value: float) -> float:
        move_item(context, value, anchor_position(context)[1])
        return value


@register_property(TransformKind.Y)
class YHandler(PropertyHandler):
    """Vertical anchor position."""

    def accepts(self, value: Any) -> bool:
        return is_number(value)

    def read(self, context: TransformContext) -> float:
        return read_position(context)[1]

    def write(self, context: TransformContext, value: float) -> float:
        move_item(context, anchor_position(context)[0], value)
        return value
