"""Scripting session: the state shared by the matrix API and transform().

A ``Session`` owns what a layout script configures once and then relies
on: the current page, units, reference point, canvas mode, origin and the
matrix stack. Keeping it on an object lets several documents (or tests)
work side by side.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pagematrix.canvas import CanvasMode, canvas_offset, reference_page
from pagematrix.exceptions import InvalidArgumentError
from pagematrix.geometry.base import Page, PageItem, TransformPreferences
from pagematrix.logging_config import get_logger
from pagematrix.matrix import Matrix2D
from pagematrix.reference import AnchorPoint, ReferencePoint
from pagematrix.stack import MatrixStack
from pagematrix.transforms import TransformContext, TransformKind, scaling_preferences
from pagematrix.transforms import transform as transform_property
from pagematrix.transforms._utils import is_number
from pagematrix.units import Units, from_points, parse_coordinate

if TYPE_CHECKING:
    from pagematrix.config import SessionConfig

logger = get_logger(__name__)


class Session:
    """Transformation state for one document.

    Args:
        page: Current page, used for canvas offsets and positions
        preferences: Host transform preferences, overridden during transform()
        config: Optional initial settings
    """

    def __init__(
        self,
        page: Page | None = None,
        preferences: TransformPreferences | None = None,
        config: SessionConfig | None = None,
    ):
        self._page = page
        self.preferences = preferences if preferences is not None else TransformPreferences()
        self._units = Units.PT
        self._reference_point = ReferencePoint.TOP_LEFT
        self._canvas_mode = CanvasMode.PAGE
        self._origin = (0.0, 0.0)
        self._units_changes = 0
        self._stack = MatrixStack()

        if config is not None:
            self._units = config.units
            self._reference_point = config.reference_point
            self._canvas_mode = config.canvas_mode
            self._origin = parse_coordinate(config.origin[0], self._units), parse_coordinate(
                config.origin[1], self._units
            )
        self.reset_matrix()

    # -- environment ---------------------------------------------------------

    @property
    def page(self) -> Page | None:
        return self._page

    @page.setter
    def page(self, page: Page | None) -> None:
        self._page = page
        self.reset_matrix()

    def units(self, units: Units | str | None = None) -> Units:
        """Get or set the units for lengths. Setting resets the matrix."""
        if units is None:
            return self._units
        self._units = Units.parse(units)
        self.reset_matrix()
        if self._units_changes == 1:
            logger.warning("Please note that units() will reset the current transformation matrix.")
        self._units_changes += 1
        return self._units

    def reference_point(
        self, point: ReferencePoint | AnchorPoint | str | int | None = None
    ) -> ReferencePoint:
        """Get or set the reference point used by transform().

        Accepts a ``ReferencePoint``, its name or value, a numpad digit 1-9
        (7 is top left, 3 bottom right) or a native ``AnchorPoint``.
        """
        if point is None:
            return self._reference_point
        self._reference_point = ReferencePoint.parse(point)
        logger.debug("Reference point set to %s", self._reference_point.value)
        return self._reference_point

    def canvas_mode(self, mode: CanvasMode | str | None = None) -> CanvasMode:
        """Get or set the canvas mode. Setting resets the matrix."""
        if mode is None:
            return self._canvas_mode
        self._canvas_mode = CanvasMode.parse(mode)
        self.reset_matrix()
        return self._canvas_mode

    def origin(self, x: float | str | None = None, y: float | str | None = None) -> tuple[float, float]:
        """Get or set the origin offset in current units. Setting resets the matrix."""
        if x is None and y is None:
            return self._origin
        if x is None or y is None:
            raise InvalidArgumentError("origin(), provide both x and y")
        self._origin = parse_coordinate(x, self._units), parse_coordinate(y, self._units)
        self.reset_matrix()
        return self._origin

    # -- matrix API (angles in radians) ---------------------------------------

    def matrix(self, matrix: Matrix2D | None = None) -> Matrix2D:
        """Get the current matrix, replacing it first if one is given."""
        return self._stack.matrix(matrix)

    def apply_matrix(self, matrix: Matrix2D) -> Matrix2D:
        """Multiply the current matrix by ``matrix``."""
        if not isinstance(matrix, Matrix2D):
            raise InvalidArgumentError(
                f"applyMatrix(), expected a Matrix2D, got {type(matrix).__name__}"
            )
        return self._stack.apply(matrix)

    def push_matrix(self) -> None:
        self._stack.push()

    def pop_matrix(self) -> Matrix2D:
        """Restore the matrix saved by the matching push_matrix().

        Raises:
            EmptyStackError: If there was no matching push_matrix()
        """
        return self._stack.pop()

    def reset_matrix(self) -> Matrix2D:
        """Start over from the identity moved to the canvas origin."""
        offset_x, offset_y = 0.0, 0.0
        if self._page is not None:
            offset_x, offset_y = canvas_offset(self._canvas_mode, self._page)
        return self._stack.reset((
            self._origin[0] + from_points(offset_x, self._units),
            self._origin[1] + from_points(offset_y, self._units),
        ))

    def print_matrix(self) -> str:
        text = self._stack.current.format()
        logger.info("%s", text)
        return text

    def rotate(self, angle: float | None = None) -> Matrix2D:
        """Rotate the coordinate system by ``angle`` radians."""
        if not is_number(angle):
            raise InvalidArgumentError("Please provide an angle for rotation.")
        return self._stack.rotate(angle)

    def scale(self, scale_x: float, scale_y: float | None = None) -> Matrix2D:
        """Scale the coordinate system; one factor scales both axes."""
        if not is_number(scale_x) or (scale_y is not None and not is_number(scale_y)):
            raise InvalidArgumentError(
                "Please provide valid x and/or y factors for scaling.",
                context={"scale_x": scale_x, "scale_y": scale_y},
            )
        return self._stack.scale(scale_x, scale_y)

    def translate(self, tx: float | None = None, ty: float | None = None) -> Matrix2D:
        """Move the coordinate system origin by ``(tx, ty)``."""
        if not is_number(tx) or not is_number(ty):
            raise InvalidArgumentError("Please provide x and y coordinates for translation.")
        return self._stack.translate(tx, ty)

    # -- page item transforms (angles in degrees) -----------------------------

    def transform_context(self, item: PageItem) -> TransformContext:
        page = None
        if self._page is not None:
            page = reference_page(self._canvas_mode, self._page)
        return TransformContext(
            item=item,
            anchor=self._reference_point,
            units=self._units,
            page=page,
            origin=self._origin,
            preferences=self.preferences,
        )

    def transform(self, item: PageItem, kind: TransformKind | str, value: Any = None) -> Any:
        """Read or write a transform property of ``item``.

        See ``pagematrix.transforms.transform`` for the kinds and values.
        Scaling preferences are overridden for the duration of the call and
        handed to the item, so strokes keep their weight.
        """
        with scaling_preferences(self.preferences):
            return transform_property(self.transform_context(item), kind, value)
