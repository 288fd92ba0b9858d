"""Canvas modes: which rectangle of the spread the coordinate system starts at."""

from enum import Enum

from pagematrix.exceptions import InvalidArgumentError
from pagematrix.geometry.base import Page, PageSide


class CanvasMode(str, Enum):
    """Canvas modes for single pages and facing-page spreads."""

    PAGE = "page"
    MARGIN = "margin"
    BLEED = "bleed"
    FACING_PAGES = "facing_pages"
    FACING_MARGINS = "facing_margins"
    FACING_BLEEDS = "facing_bleeds"

    @property
    def facing(self) -> bool:
        return self in (CanvasMode.FACING_PAGES, CanvasMode.FACING_MARGINS, CanvasMode.FACING_BLEEDS)

    @classmethod
    def parse(cls, value: "CanvasMode | str") -> "CanvasMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = ", ".join(m.value for m in cls)
        raise InvalidArgumentError(
            f"There is a problem setting the canvas mode {value!r}. Use one of: {valid}",
            context={"canvas_mode": value},
        )


def reference_page(mode: CanvasMode, page: Page) -> Page:
    """The page whose top-left corner positions are measured from."""
    if mode.facing:
        return page.spread_first_page
    return page


def canvas_offset(mode: CanvasMode, page: Page) -> tuple[float, float]:
    """Translation, in points, from the page corner to the canvas origin.

    Margin modes move the origin inside the margins, bleed modes out to the
    bleed edge. In facing modes a right-hand page is shifted back by one
    page width so both pages of the spread share the left page's origin.
    """
    margins, bleeds = page.margins, page.bleeds

    if mode in (CanvasMode.MARGIN, CanvasMode.FACING_MARGINS):
        x, y = margins.left, margins.top
    elif mode in (CanvasMode.BLEED, CanvasMode.FACING_BLEEDS):
        x, y = -bleeds.left, -bleeds.top
    else:
        x, y = 0.0, 0.0

    right_hand = page.side is PageSide.RIGHT_HAND
    if mode is CanvasMode.BLEED and right_hand:
        # the inside edge of a right-hand page has no bleed
        x = 0.0
    elif mode.facing and right_hand and page.spread_first_page is not page:
        x -= page.width

    return x, y
