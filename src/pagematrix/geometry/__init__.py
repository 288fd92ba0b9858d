"""Host geometry: the interfaces the transform core consumes and two hosts."""

from pagematrix.geometry.base import (
    Box,
    Insets,
    Page,
    PageItem,
    PageSide,
    TransformPreferences,
    WhenScaling,
)
from pagematrix.geometry.memory import MemoryPage, RectItem, memory_spread

__all__ = [
    "Box",
    "Insets",
    "MemoryPage",
    "Page",
    "PageItem",
    "PageSide",
    "RectItem",
    "TransformPreferences",
    "WhenScaling",
    "memory_spread",
]
