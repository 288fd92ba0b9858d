"""Reference (anchor) points for transformations."""

from enum import Enum

from pagematrix.constants import NUMPAD_REFERENCE_POINTS
from pagematrix.exceptions import InvalidArgumentError


class AnchorPoint(Enum):
    """The host application's native anchor point enumerator."""

    TOP_LEFT_ANCHOR = "TOP_LEFT_ANCHOR"
    TOP_CENTER_ANCHOR = "TOP_CENTER_ANCHOR"
    TOP_RIGHT_ANCHOR = "TOP_RIGHT_ANCHOR"
    LEFT_CENTER_ANCHOR = "LEFT_CENTER_ANCHOR"
    CENTER_ANCHOR = "CENTER_ANCHOR"
    RIGHT_CENTER_ANCHOR = "RIGHT_CENTER_ANCHOR"
    BOTTOM_LEFT_ANCHOR = "BOTTOM_LEFT_ANCHOR"
    BOTTOM_CENTER_ANCHOR = "BOTTOM_CENTER_ANCHOR"
    BOTTOM_RIGHT_ANCHOR = "BOTTOM_RIGHT_ANCHOR"


class ReferencePoint(str, Enum):
    """The point of a bounding box held fixed by transformations."""

    TOP_LEFT = "topLeft"
    TOP_CENTER = "topCenter"
    TOP_RIGHT = "topRight"
    CENTER_LEFT = "centerLeft"
    CENTER = "center"
    CENTER_RIGHT = "centerRight"
    BOTTOM_LEFT = "bottomLeft"
    BOTTOM_CENTER = "bottomCenter"
    BOTTOM_RIGHT = "bottomRight"

    @property
    def fractions(self) -> tuple[float, float]:
        """Horizontal and vertical position inside a box, from 0 (left/top) to 1."""
        return _FRACTIONS[self]

    @property
    def anchor(self) -> AnchorPoint:
        """The matching native anchor point."""
        return _TO_ANCHOR[self]

    def locate(self, top: float, left: float, bottom: float, right: float) -> tuple[float, float]:
        """Coordinates of this reference point on a (top, left, bottom, right) box."""
        fx, fy = self.fractions
        return left + (right - left) * fx, top + (bottom - top) * fy

    @classmethod
    def parse(cls, value: "ReferencePoint | AnchorPoint | str | int") -> "ReferencePoint":
        """Resolve a reference point from any of its accepted spellings.

        Accepts the enum itself, its value ("topLeft") or name ("TOP_LEFT",
        case-insensitive, "CENTER_CENTER" for the center), a numpad digit
        1-9 or a native ``AnchorPoint``.

        Raises:
            InvalidArgumentError: If the value names no reference point
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, AnchorPoint):
            return _FROM_ANCHOR[value]
        if isinstance(value, int) and not isinstance(value, bool):
            if value in NUMPAD_REFERENCE_POINTS:
                return cls(NUMPAD_REFERENCE_POINTS[value])
        elif isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key == member.value:
                    return member
            name = key.upper()
            if name == "CENTER_CENTER":
                return cls.CENTER
            if name in cls.__members__:
                return cls.__members__[name]
        raise InvalidArgumentError(
            "Wrong reference point. Use a reference point constant (TOP_LEFT, "
            "TOP_CENTER, ...), a digit between 1 and 9 or an anchor point enumerator.",
            context={"reference_point": value},
        )


_FRACTIONS = {
    ReferencePoint.TOP_LEFT: (0.0, 0.0),
    ReferencePoint.TOP_CENTER: (0.5, 0.0),
    ReferencePoint.TOP_RIGHT: (1.0, 0.0),
    ReferencePoint.CENTER_LEFT: (0.0, 0.5),
    ReferencePoint.CENTER: (0.5, 0.5),
    ReferencePoint.CENTER_RIGHT: (1.0, 0.5),
    ReferencePoint.BOTTOM_LEFT: (0.0, 1.0),
    ReferencePoint.BOTTOM_CENTER: (0.5, 1.0),
    ReferencePoint.BOTTOM_RIGHT: (1.0, 1.0),
}

_TO_ANCHOR = {
    ReferencePoint.TOP_LEFT: AnchorPoint.TOP_LEFT_ANCHOR,
    ReferencePoint.TOP_CENTER: AnchorPoint.TOP_CENTER_ANCHOR,
    ReferencePoint.TOP_RIGHT: AnchorPoint.TOP_RIGHT_ANCHOR,
    ReferencePoint.CENTER_LEFT: AnchorPoint.LEFT_CENTER_ANCHOR,
    ReferencePoint.CENTER: AnchorPoint.CENTER_ANCHOR,
    ReferencePoint.CENTER_RIGHT: AnchorPoint.RIGHT_CENTER_ANCHOR,
    ReferencePoint.BOTTOM_LEFT: AnchorPoint.BOTTOM_LEFT_ANCHOR,
    ReferencePoint.BOTTOM_CENTER: AnchorPoint.BOTTOM_CENTER_ANCHOR,
    ReferencePoint.BOTTOM_RIGHT: AnchorPoint.BOTTOM_RIGHT_ANCHOR,
}

_FROM_ANCHOR = {anchor: point for point, anchor in _TO_ANCHOR.items()}
