"""Measurement units and number formatting."""

import re
from enum import Enum

from pagematrix.constants import PRECISION_DIGITS, UNIT_TO_POINTS
from pagematrix.exceptions import InvalidArgumentError


class Units(str, Enum):
    """Linear units for interpreting and reporting lengths."""

    PT = "pt"
    MM = "mm"
    CM = "cm"
    IN = "in"
    PX = "px"

    @property
    def points(self) -> float:
        """Size of one unit in points."""
        return UNIT_TO_POINTS[self.value]

    @classmethod
    def parse(cls, value: "Units | str") -> "Units":
        """Parse a unit name such as "mm" or "IN"."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = ", ".join(u.value for u in cls)
        raise InvalidArgumentError(
            f"Invalid unit: {value!r}. Use one of: {valid}",
            context={"units": value},
        )


def to_points(value: float, units: Units) -> float:
    """Convert a length in ``units`` to points."""
    return value * units.points


def from_points(value: float, units: Units) -> float:
    """Convert a length in points to ``units``."""
    return value / units.points


def precision(value: float, digits: int = PRECISION_DIGITS) -> float:
    """Round a measured value to ``digits`` fractional digits.

    Negative zero is normalized so that reads compare equal to ``0``.
    """
    return round(value, digits) + 0.0


def parse_dimension(value: str) -> float:
    """
    Parse a dimension string to points.

    Supports: "100mm", "4in", "288pt", "10cm", "12px"; a leading minus
    sign is allowed because origins may lie left of or above the page.

    Args:
        value: Dimension string with unit

    Returns:
        Value in points
    """
    if not value:
        raise InvalidArgumentError("Empty dimension value")

    value = value.strip().lower()
    match = re.match(r"^(-?[\d.]+)\s*(mm|in|pt|cm|px)$", value)
    if not match:
        raise InvalidArgumentError(
            f"Invalid dimension format: {value}. Use format like '100mm', '4in', '288pt'"
        )

    try:
        number = float(match.group(1))
    except ValueError:
        raise InvalidArgumentError(f"Invalid dimension number: {value}")
    return number * UNIT_TO_POINTS[match.group(2)]


def parse_coordinate(value: float | str, units: Units = Units.PT) -> float:
    """
    Parse a coordinate to ``units``.

    Plain numbers are already in ``units``; strings carry their own unit.

    Args:
        value: Number, or string with units such as "10mm"

    Returns:
        Value in ``units``
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid coordinate: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return from_points(parse_dimension(value), units)
    raise InvalidArgumentError(f"Invalid coordinate: {value!r}")
