"""Property registry for transform() dispatch."""

from typing import TYPE_CHECKING, Callable

from pagematrix.exceptions import InvalidArgumentError
from pagematrix.transforms.base import TransformKind

if TYPE_CHECKING:
    from pagematrix.transforms.base import PropertyHandler


class PropertyRegistry:
    """Registry of property handlers, one per ``TransformKind``.

    Usage:
        @register_property(TransformKind.WIDTH)
        class WidthHandler(PropertyHandler):
            ...

        handler = PropertyRegistry.get("width")
    """

    _handlers: dict[TransformKind, type["PropertyHandler"]] = {}

    @classmethod
    def register(cls, kind: TransformKind, handler_class: type["PropertyHandler"]) -> None:
        handler_class.kind = kind
        cls._handlers[kind] = handler_class

    @classmethod
    def get(cls, kind: TransformKind | str) -> "PropertyHandler":
        """Get an instantiated handler for a property kind.

        Raises:
            InvalidArgumentError: If the kind is unknown or has no handler
        """
        resolved = TransformKind.parse(kind)
        if resolved not in cls._handlers:
            available = ", ".join(k.value for k in cls.all_kinds())
            raise InvalidArgumentError(
                f"No handler registered for '{resolved.value}'. Available: {available}",
                context={"kind": resolved.value},
            )
        return cls._handlers[resolved]()

    @classmethod
    def all_kinds(cls) -> list[TransformKind]:
        """Registered kinds in documentation order."""
        return [k for k in TransformKind if k in cls._handlers]

    @classmethod
    def is_registered(cls, kind: TransformKind | str) -> bool:
        try:
            return TransformKind.parse(kind) in cls._handlers
        except InvalidArgumentError:
            return False


def register_property(kind: TransformKind) -> Callable[[type["PropertyHandler"]], type["PropertyHandler"]]:
    """Class decorator registering a handler for ``kind``."""

    def decorator(handler_class: type["PropertyHandler"]) -> type["PropertyHandler"]:
        PropertyRegistry.register(kind, handler_class)
        return handler_class

    return decorator


def get_handler(kind: TransformKind | str) -> "PropertyHandler":
    return PropertyRegistry.get(kind)


def list_properties() -> list[str]:
    return [k.value for k in PropertyRegistry.all_kinds()]
