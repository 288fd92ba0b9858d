"""Apply a session's matrix program to every page of a PDF."""

from pathlib import Path

from pypdf import PdfReader, PdfWriter

from pagematrix.config import SessionConfig, run_matrix_program
from pagematrix.geometry.pdf import PdfPage, apply_matrix_to_page
from pagematrix.logging_config import get_logger
from pagematrix.session import Session

logger = get_logger(__name__)


def process(config: SessionConfig, input_path: Path, output_path: Path) -> int:
    """
    Transform each page of ``input_path`` and write the result.

    Every page gets a fresh session built from ``config``; the matrix
    program runs from the page's canvas origin and the resulting matrix is
    applied to the page content.

    Args:
        config: Session settings and matrix program
        input_path: Source PDF
        output_path: Destination PDF, parent directories are created

    Returns:
        Number of pages written
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    reader = PdfReader(str(input_path))
    writer = PdfWriter()

    for index, page in enumerate(reader.pages):
        session = Session(PdfPage(page), config=config)
        run_matrix_program(session, config.matrix)
        logger.debug("Page %d matrix:\n%s", index + 1, session.matrix().format())
        apply_matrix_to_page(page, session.matrix(), session.units())
        writer.add_page(page)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wb") as f:
        writer.write(f)

    logger.info("Wrote %d page(s) to %s", len(reader.pages), output_path)
    return len(reader.pages)
