"""pypdf host: PDF pages as layout pages.

PDF user space has its Y axis pointing up from the bottom of the media
box; the layout core works with Y pointing down from the top. Pages are
flipped about the media box top edge on the way in and out.
"""

from pypdf import PageObject, Transformation

from pagematrix.geometry.base import Box, Insets, Page
from pagematrix.logging_config import get_logger
from pagematrix.matrix import Matrix2D
from pagematrix.units import Units

logger = get_logger(__name__)


def get_page_dimensions(page: PageObject) -> tuple[float, float]:
    """Get page width and height in points."""
    mediabox = page.mediabox
    return float(mediabox.width), float(mediabox.height)


class PdfPage(Page):
    """A pypdf page seen as a single page in its own spread.

    Args:
        page: The wrapped pypdf page
        left: Horizontal position of the page in the spread, in points
    """

    def __init__(self, page: PageObject, left: float = 0.0):
        self.page = page
        self.left = left

    @property
    def bounds(self) -> Box:
        width, height = get_page_dimensions(self.page)
        return Box(0.0, self.left, height, self.left + width)

    @property
    def bleeds(self) -> Insets:
        trim = self.page.trimbox
        bleed = self.page.bleedbox
        return Insets(
            top=max(float(bleed.top) - float(trim.top), 0.0),
            left=max(float(trim.left) - float(bleed.left), 0.0),
            bottom=max(float(trim.bottom) - float(bleed.bottom), 0.0),
            right=max(float(bleed.right) - float(trim.right), 0.0),
        )


def to_transformation(matrix: Matrix2D, page_top: float) -> Transformation:
    """Convert a Y-down matrix (in points) to a pypdf Transformation.

    Args:
        matrix: Transform in layout coordinates
        page_top: Top edge of the media box in PDF user space

    Returns:
        Transformation acting on PDF user space
    """
    flip = Matrix2D(1, 0, 0, 0, -1, page_top)
    pdf = flip.copy().compose(matrix).compose(flip)
    a, b, c, d, e, f = pdf.elements
    # PDF orders the coefficients column by column
    return Transformation(ctm=(a, d, b, e, c, f))


def apply_matrix_to_page(
    page: PageObject,
    matrix: Matrix2D,
    units: Units = Units.PT,
) -> PageObject:
    """
    Transform a page's content by ``matrix``.

    Args:
        page: The page to transform
        matrix: Transform in layout coordinates, translations in ``units``
        units: Unit of the matrix translation part

    Returns:
        The transformed page (mutates in place and returns)
    """
    in_points = matrix.copy()
    in_points.elements[2] *= units.points
    in_points.elements[5] *= units.points

    transformation = to_transformation(in_points, float(page.mediabox.top))
    logger.debug("Applying %s to page content", transformation.ctm)
    page.add_transformation(transformation)
    return page
