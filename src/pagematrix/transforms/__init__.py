"""Transform property package for pagematrix.

Each property kind has a handler registered with ``@register_property``.

Usage:
    from pagematrix.transforms import TransformContext, transform

    context = TransformContext(item=rect, anchor=ReferencePoint.CENTER)
    transform(context, "width", 50)
"""

# Import all property modules to trigger registration
from pagematrix.transforms import (
    position,
    rotate,
    scale,
    size,
)

from pagematrix.transforms.base import (
    PropertyHandler,
    TransformContext,
    TransformKind,
)
from pagematrix.transforms.dispatch import scaling_preferences, transform
from pagematrix.transforms.registry import (
    PropertyRegistry,
    get_handler,
    list_properties,
    register_property,
)

__all__ = [
    "PropertyHandler",
    "PropertyRegistry",
    "TransformContext",
    "TransformKind",
    "get_handler",
    "list_properties",
    "register_property",
    "scaling_preferences",
    "transform",
]
