"""Entry point that routes a property read or write to its handler."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pagematrix.exceptions import InvalidArgumentError
from pagematrix.geometry.base import PageItem, TransformPreferences, WhenScaling
from pagematrix.logging_config import get_logger
from pagematrix.transforms.base import TransformContext, TransformKind
from pagematrix.transforms.registry import get_handler

logger = get_logger(__name__)


@contextmanager
def scaling_preferences(preferences: TransformPreferences | None) -> Iterator[None]:
    """Scale items by their scaling percentage, keeping stroke weights.

    The previous preference values are restored on exit, including when
    the transform raises.
    """
    if preferences is None:
        yield
        return

    saved = (preferences.adjust_stroke_weight_when_scaling, preferences.when_scaling)
    preferences.adjust_stroke_weight_when_scaling = False
    preferences.when_scaling = WhenScaling.ADJUST_SCALING_PERCENTAGE
    try:
        yield
    finally:
        preferences.adjust_stroke_weight_when_scaling, preferences.when_scaling = saved


def transform(context: TransformContext, kind: TransformKind | str, value: Any = None) -> Any:
    """
    Read or write one transform property of a page item.

    The value is written when the property accepts it (a number or an
    ``[x, y]`` pair depending on the kind); anything else, including no
    value at all, makes this a plain read.

    Args:
        context: Item, anchor, units, page and origin to work with
        kind: One of translate, rotate, scale, shear, size, width, height,
            position, x, y
        value: Optional value to write

    Returns:
        The property value after the call

    Raises:
        InvalidArgumentError: If the item is not a page item or the kind is unknown
    """
    if not isinstance(context.item, PageItem):
        raise InvalidArgumentError(
            "transform(), invalid first parameter. Use page item.",
            context={"item": type(context.item).__name__},
        )

    handler = get_handler(kind)
    if value is not None and handler.accepts(value):
        result = handler.write(context, value)
        logger.debug("transform %s <- %r: %r", handler.kind.value, value, result)
        return result

    if value is not None:
        logger.debug("transform %s ignored value %r, reading instead", handler.kind.value, value)
    return handler.read(context)
