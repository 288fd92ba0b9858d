"""Base classes for the property handler registry."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pagematrix.constants import TRANSFORM_KIND_ALIASES, TRANSFORM_KINDS
from pagematrix.exceptions import InvalidArgumentError
from pagematrix.geometry.base import Page, PageItem, TransformPreferences
from pagematrix.reference import ReferencePoint
from pagematrix.units import Units


class TransformKind(str, Enum):
    """The properties ``transform()`` can read or write."""

    TRANSLATE = "translate"
    ROTATE = "rotate"
    SCALE = "scale"
    SHEAR = "shear"
    SIZE = "size"
    WIDTH = "width"
    HEIGHT = "height"
    POSITION = "position"
    X = "x"
    Y = "y"

    @classmethod
    def parse(cls, value: "TransformKind | str") -> "TransformKind":
        """Resolve a property kind, accepting the older -ion/-ing spellings.

        Raises:
            InvalidArgumentError: If the kind is not recognized
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = TRANSFORM_KIND_ALIASES.get(value, value)
            if name in TRANSFORM_KINDS:
                return cls(name)
        valid = ", ".join(f'"{k}"' for k in TRANSFORM_KINDS)
        raise InvalidArgumentError(
            f"Invalid transform type. Use {valid}",
            context={"kind": value},
        )


@dataclass
class TransformContext:
    """Everything a property handler needs besides the value.

    Attributes:
        item: The page item being measured or transformed
        anchor: Reference point held fixed / reported
        units: Units for linear values
        page: Page whose top-left corner positions are measured from
        origin: Additional origin offset, in ``units``
        preferences: Host preferences the item scales with, or None for
            the item's own
    """

    item: PageItem
    anchor: ReferencePoint = ReferencePoint.TOP_LEFT
    units: Units = Units.PT
    page: Page | None = None
    origin: tuple[float, float] = (0.0, 0.0)
    preferences: TransformPreferences | None = None


class PropertyHandler(ABC):
    """Reads and writes one transform property of a page item."""

    # Set by @register_property
    kind: TransformKind

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """Whether ``value`` is a valid write value for this property."""

    @abstractmethod
    def read(self, context: TransformContext) -> Any:
        """Measure the property."""

    @abstractmethod
    def write(self, context: TransformContext, value: Any) -> Any:
        """Change the property and return the value to report."""
