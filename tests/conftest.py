"""Shared fixtures for pagematrix tests."""

import tempfile
import shutil
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from pagematrix.geometry import Insets, MemoryPage, RectItem, TransformPreferences, memory_spread
from pagematrix.session import Session
from pagematrix.transforms import TransformContext


# === Path/Directory Fixtures ===

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


# === Layout Fixtures ===

@pytest.fixture
def page():
    """A single letter-size page at the spread origin."""
    return MemoryPage(width=612, height=792)


@pytest.fixture
def spread():
    """Two facing 500 x 700 pages with margins and bleeds."""
    return memory_spread(
        width=500,
        height=700,
        count=2,
        margins=Insets(top=10, left=20, bottom=30, right=40),
        bleeds=Insets(top=3, left=3, bottom=3, right=3),
    )


@pytest.fixture
def preferences():
    """Host transform preferences at their defaults."""
    return TransformPreferences()


@pytest.fixture
def item(preferences):
    """A 100 x 100 rectangle at the page origin."""
    return RectItem(0, 0, 100, 100, preferences=preferences)


@pytest.fixture
def context(item, page):
    """Transform context for ``item`` on ``page`` with default settings."""
    return TransformContext(item=item, page=page)


@pytest.fixture
def session(page, preferences):
    """A session on ``page`` sharing the ``preferences`` object."""
    return Session(page, preferences=preferences)


# === PDF Fixtures ===

@pytest.fixture
def temp_pdf(temp_dir):
    """Create a temporary single-page PDF for testing."""
    from pypdf import PdfWriter

    pdf_path = temp_dir / "test.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)  # Letter size
    with open(pdf_path, "wb") as f:
        writer.write(f)
    return pdf_path


@pytest.fixture
def temp_multi_page_pdf(temp_dir):
    """Create a temporary 3-page PDF for testing."""
    from pypdf import PdfWriter

    pdf_path = temp_dir / "multi_page.pdf"
    writer = PdfWriter()
    for _ in range(3):
        writer.add_blank_page(width=612, height=792)
    with open(pdf_path, "wb") as f:
        writer.write(f)
    return pdf_path


@pytest.fixture
def mock_pdf_page():
    """Create a mock pypdf PageObject (portrait letter size)."""
    page = MagicMock()
    mediabox = MagicMock()
    mediabox.width = 612.0
    mediabox.height = 792.0
    mediabox.top = 792.0
    page.mediabox = mediabox
    return page


# === Config Fixtures ===

@pytest.fixture
def minimal_config_dict():
    """Minimal valid session configuration."""
    return {"version": 1}


@pytest.fixture
def full_config_dict():
    """Session configuration using every option."""
    return {
        "version": 1,
        "units": "mm",
        "reference_point": 5,
        "canvas_mode": "facing_pages",
        "origin": ["10mm", 0],
        "matrix": [
            {"translate": [10, 20]},
            "push",
            {"rotate": 0.5},
            {"scale": 2},
            "pop",
        ],
    }


@pytest.fixture
def translate_config_dict():
    """Configuration whose program moves content 10pt right, 20pt down."""
    return {
        "version": 1,
        "units": "pt",
        "matrix": [{"translate": [10, 20]}],
    }


@pytest.fixture
def temp_config_file(temp_dir, minimal_config_dict):
    """Create a temporary config file."""
    config_path = temp_dir / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump(minimal_config_dict, f)
    return config_path


@pytest.fixture
def translate_config_file(temp_dir, translate_config_dict):
    """Create a temporary config file with a translate program."""
    config_path = temp_dir / "translate.yaml"
    with open(config_path, "w") as f:
        yaml.dump(translate_config_dict, f)
    return config_path


@pytest.fixture
def full_config_file(temp_dir, full_config_dict):
    """Create a temporary full config file."""
    config_path = temp_dir / "full_config.yaml"
    with open(config_path, "w") as f:
        yaml.dump(full_config_dict, f)
    return config_path
