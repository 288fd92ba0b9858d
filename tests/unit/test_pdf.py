"""Tests for pagematrix.geometry.pdf module."""

import pytest
from pypdf import PdfWriter

from pagematrix.geometry import Box, Insets
from pagematrix.geometry.pdf import (
    PdfPage,
    apply_matrix_to_page,
    get_page_dimensions,
    to_transformation,
)
from pagematrix.matrix import Matrix2D
from pagematrix.units import Units


@pytest.fixture
def blank_page():
    writer = PdfWriter()
    return writer.add_blank_page(width=612, height=792)


class TestPdfPage:
    """Test PDF pages seen as layout pages."""

    def test_dimensions(self, mock_pdf_page):
        assert get_page_dimensions(mock_pdf_page) == (612.0, 792.0)

    def test_bounds(self, blank_page):
        assert PdfPage(blank_page).bounds == Box(0.0, 0.0, 792.0, 612.0)

    def test_bounds_with_spread_offset(self, blank_page):
        page = PdfPage(blank_page, left=612)
        assert page.top_left == (612, 0.0)
        assert page.width == 612

    def test_no_bleed_by_default(self, blank_page):
        assert PdfPage(blank_page).bleeds == Insets(0.0, 0.0, 0.0, 0.0)


class TestToTransformation:
    """Test converting Y-down matrices to PDF space."""

    def test_identity(self):
        assert to_transformation(Matrix2D(), 792).ctm == pytest.approx((1, 0, 0, 1, 0, 0))

    def test_translation_flips_y(self):
        ctm = to_transformation(Matrix2D.translation(10, 20), 792).ctm
        assert ctm == pytest.approx((1, 0, 0, 1, 10, -20))

    def test_uniform_scale_about_top_left(self):
        ctm = to_transformation(Matrix2D.scaling(2), 100).ctm
        # the top-left corner (0, 100) in PDF space stays put
        a, b, c, d, e, f = ctm
        assert (a * 0 + c * 100 + e, b * 0 + d * 100 + f) == pytest.approx((0, 100))


class TestApplyMatrixToPage:
    """Test applying the session matrix to page content."""

    def test_translation_converted_to_points(self, mock_pdf_page):
        apply_matrix_to_page(mock_pdf_page, Matrix2D.translation(10, 0), Units.MM)
        mock_pdf_page.add_transformation.assert_called_once()
        transformation = mock_pdf_page.add_transformation.call_args[0][0]
        assert transformation.ctm[4] == pytest.approx(10 * 72 / 25.4)
        assert transformation.ctm[5] == pytest.approx(0)

    def test_input_matrix_unchanged(self, mock_pdf_page):
        matrix = Matrix2D.translation(10, 0)
        apply_matrix_to_page(mock_pdf_page, matrix, Units.MM)
        assert matrix == Matrix2D.translation(10, 0)

    def test_real_page(self, blank_page):
        assert apply_matrix_to_page(blank_page, Matrix2D.translation(5, 5)) is blank_page
