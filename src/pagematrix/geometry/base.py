"""Interfaces the host application provides to the transform core.

All coordinates are in points in the host's spread (pasteboard) space with
the Y axis pointing down. Angles reported by the host are in degrees,
counter-clockwise positive.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from pagematrix.matrix import Matrix2D
from pagematrix.reference import ReferencePoint


class Box(NamedTuple):
    """An axis-aligned box given as (top, left, bottom, right)."""

    top: float
    left: float
    bottom: float
    right: float

    @property
    def width(self) -> float:
        return abs(self.right - self.left)

    @property
    def height(self) -> float:
        return abs(self.bottom - self.top)


class Insets(NamedTuple):
    """Distances from the edges of a page (margins, bleeds)."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0


class PageSide(str, Enum):
    """Which side of a spread a page sits on."""

    SINGLE = "single"
    LEFT_HAND = "left"
    RIGHT_HAND = "right"


class WhenScaling(str, Enum):
    """What the host does with a scale applied to an item."""

    APPLY_TO_CONTENT = "apply_to_content"
    ADJUST_SCALING_PERCENTAGE = "adjust_scaling_percentage"


@dataclass
class TransformPreferences:
    """Host-wide preferences that affect how scaling is applied."""

    adjust_stroke_weight_when_scaling: bool = True
    when_scaling: WhenScaling = WhenScaling.APPLY_TO_CONTENT


class PageItem(ABC):
    """A placeable item with a rectangular geometric bounding box."""

    @property
    @abstractmethod
    def geometric_bounds(self) -> Box:
        """Bounding box of the item's path in spread coordinates."""

    @property
    @abstractmethod
    def rotation_angle(self) -> float:
        """Absolute rotation in degrees (host convention)."""

    @property
    @abstractmethod
    def shear_angle(self) -> float:
        """Absolute shear in degrees (host convention)."""

    @property
    @abstractmethod
    def horizontal_scale(self) -> float:
        """Horizontal scale in percent."""

    @property
    @abstractmethod
    def vertical_scale(self) -> float:
        """Vertical scale in percent."""

    @abstractmethod
    def transform(
        self,
        anchor: ReferencePoint,
        matrix: Matrix2D,
        preferences: TransformPreferences | None = None,
    ) -> None:
        """Apply ``matrix`` about ``anchor`` of the bounding box.

        The matrix works in spread coordinates in points. ``preferences``
        are the host preferences in effect for this call; None leaves the
        item to its own.
        """

    @abstractmethod
    def resolve(self, anchor: ReferencePoint) -> tuple[float, float]:
        """Position of ``anchor`` on the item's own (unrotated) box, in spread coordinates."""


class Page(ABC):
    """A page inside a spread."""

    @property
    @abstractmethod
    def bounds(self) -> Box:
        """Page box in spread coordinates."""

    @property
    def margins(self) -> Insets:
        return Insets()

    @property
    def bleeds(self) -> Insets:
        return Insets()

    @property
    def side(self) -> PageSide:
        return PageSide.SINGLE

    @property
    def spread_first_page(self) -> "Page":
        """The first page of the spread this page belongs to."""
        return self

    @property
    def top_left(self) -> tuple[float, float]:
        return self.bounds.left, self.bounds.top

    @property
    def width(self) -> float:
        return self.bounds.width

    @property
    def height(self) -> float:
        return self.bounds.height
