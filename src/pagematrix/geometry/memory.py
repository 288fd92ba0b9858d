"""In-memory host: pages, spreads and rectangular page items.

Useful for scripting layouts outside a running host application and as the
reference collaborator in tests.
"""

import math

from pagematrix.geometry.base import (
    Box,
    Insets,
    Page,
    PageItem,
    PageSide,
    TransformPreferences,
)
from pagematrix.logging_config import get_logger
from pagematrix.matrix import Matrix2D
from pagematrix.reference import ReferencePoint

logger = get_logger(__name__)


class MemoryPage(Page):
    """A page with fixed bounds in spread coordinates."""

    def __init__(
        self,
        width: float = 612.0,
        height: float = 792.0,
        left: float = 0.0,
        top: float = 0.0,
        margins: Insets | None = None,
        bleeds: Insets | None = None,
        side: PageSide = PageSide.SINGLE,
        spread_first_page: Page | None = None,
    ):
        self._bounds = Box(top, left, top + height, left + width)
        self._margins = margins or Insets()
        self._bleeds = bleeds or Insets()
        self._side = side
        self._spread_first_page = spread_first_page

    @property
    def bounds(self) -> Box:
        return self._bounds

    @property
    def margins(self) -> Insets:
        return self._margins

    @property
    def bleeds(self) -> Insets:
        return self._bleeds

    @property
    def side(self) -> PageSide:
        return self._side

    @property
    def spread_first_page(self) -> Page:
        return self._spread_first_page or self

    def __repr__(self) -> str:
        return f"MemoryPage(bounds={tuple(self._bounds)}, side={self._side.value})"


def memory_spread(
    width: float = 612.0,
    height: float = 792.0,
    count: int = 2,
    margins: Insets | None = None,
    bleeds: Insets | None = None,
) -> list[MemoryPage]:
    """Create ``count`` pages laid side by side in one spread.

    Pages alternate left-hand / right-hand; a single page is a plain page.
    """
    if count < 1:
        raise ValueError("A spread needs at least one page")

    pages: list[MemoryPage] = []
    for i in range(count):
        if count == 1:
            side = PageSide.SINGLE
        else:
            side = PageSide.LEFT_HAND if i % 2 == 0 else PageSide.RIGHT_HAND
        pages.append(MemoryPage(
            width=width,
            height=height,
            left=i * width,
            margins=margins,
            bleeds=bleeds,
            side=side,
            spread_first_page=pages[0] if pages else None,
        ))
    return pages


class RectItem(PageItem):
    """A rectangle whose placement is held as an affine matrix.

    The item's own box spans ``(0, 0)`` to ``(width, height)``; ``matrix``
    maps it into spread coordinates. Rotation, shear and scale are read back
    by decomposing the matrix as rotation x shear x scale.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        stroke_weight: float = 1.0,
        preferences: TransformPreferences | None = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Rectangle size must be positive, got {width} x {height}")
        self.width = float(width)
        self.height = float(height)
        self.stroke_weight = stroke_weight
        self.preferences = preferences
        self.matrix = Matrix2D.translation(x, y)

    def corners(self) -> list[tuple[float, float]]:
        w, h = self.width, self.height
        return self.matrix.apply_to_points([(0, 0), (w, 0), (w, h), (0, h)])

    @property
    def geometric_bounds(self) -> Box:
        xs, ys = zip(*self.corners())
        return Box(min(ys), min(xs), max(ys), max(xs))

    def _decompose(self) -> tuple[float, float, float, float]:
        """Split the linear part into (rotation, shear, scale x, scale y).

        Rotation and shear come back in degrees.
        """
        a, b, _, d, e, _ = self.matrix.elements
        scale_x = math.hypot(a, d)
        if scale_x == 0:
            return 0.0, 0.0, 0.0, e
        rotation = math.atan2(-d, a)
        cos, sin = a / scale_x, -d / scale_x
        skew = cos * b - sin * e
        scale_y = sin * b + cos * e
        shear = math.atan(skew / scale_y) if scale_y else 0.0
        return math.degrees(rotation), math.degrees(shear), scale_x, scale_y

    @property
    def rotation_angle(self) -> float:
        return self._decompose()[0]

    @property
    def shear_angle(self) -> float:
        return self._decompose()[1]

    @property
    def horizontal_scale(self) -> float:
        return self._decompose()[2] * 100

    @property
    def vertical_scale(self) -> float:
        return self._decompose()[3] * 100

    def transform(
        self,
        anchor: ReferencePoint,
        matrix: Matrix2D,
        preferences: TransformPreferences | None = None,
    ) -> None:
        anchor_x, anchor_y = anchor.locate(*self.geometric_bounds)
        applied = Matrix2D(matrix.to_anchored_form(anchor_x, anchor_y))
        self.matrix = applied.compose(self.matrix)

        if preferences is None:
            preferences = self.preferences
        if preferences is None or preferences.adjust_stroke_weight_when_scaling:
            self.stroke_weight *= math.sqrt(abs(matrix.determinant()))

        logger.debug("Transformed %r about %s by %r", self, anchor.value, matrix)

    def resolve(self, anchor: ReferencePoint) -> tuple[float, float]:
        fx, fy = anchor.fractions
        return self.matrix.apply_to_point(fx * self.width, fy * self.height)

    def __repr__(self) -> str:
        return f"RectItem({self.width:g} x {self.height:g}, matrix={self.matrix!r})"
