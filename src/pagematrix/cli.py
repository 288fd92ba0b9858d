"""Command-line interface for pagematrix."""

import argparse
import sys
from pathlib import Path

from pagematrix import __version__
from pagematrix.exceptions import PageMatrixError
from pagematrix.logging_config import get_logger

logger = get_logger(__name__)


def show_version() -> None:
    """Show version information."""
    import pypdf

    logger.info("pagematrix %s", __version__)
    logger.info("pypdf %s", pypdf.__version__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pagematrix",
        description="Affine transformations for page layouts, applied to PDF pages.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pagematrix -c session.yaml --validate                 Validate config only
  pagematrix -c session.yaml --print-matrix             Show the resulting matrix
  pagematrix -c session.yaml -i in.pdf -o out.pdf       Transform every page
""",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version information and exit",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to YAML session configuration file",
    )

    parser.add_argument(
        "-i",
        "--input",
        type=Path,
        help="Input PDF file",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output PDF file",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate configuration file and exit",
    )

    parser.add_argument(
        "--print-matrix",
        action="store_true",
        help="Run the matrix program and print the resulting matrix",
    )

    # Logging options
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v for verbose, -vv for debug)",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress all output except errors",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file (includes all levels)",
    )

    return parser


def cmd_print_matrix(config_path: Path, input_path: Path | None = None) -> int:
    """Print the matrix the config's program produces.

    With an input PDF the first page is used for canvas offsets.
    """
    from pagematrix.config import load_config, run_matrix_program
    from pagematrix.session import Session

    config = load_config(config_path)
    page = None
    if input_path is not None:
        from pypdf import PdfReader

        from pagematrix.geometry.pdf import PdfPage

        reader = PdfReader(str(input_path))
        page = PdfPage(reader.pages[0])

    session = Session(page, config=config)
    run_matrix_program(session, config.matrix)
    session.print_matrix()
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    from pagematrix.logging_config import setup_logging

    setup_logging(
        verbosity=parsed.verbose,
        quiet=parsed.quiet,
        log_file=parsed.log_file,
    )

    if parsed.version:
        show_version()
        return 0

    if not parsed.config:
        parser.print_help()
        return 1

    from pagematrix.config import ConfigError, load_config

    if parsed.validate:
        try:
            config = load_config(parsed.config)
            logger.info("Configuration syntax is valid: %s", parsed.config)
            logger.info(
                "  units=%s reference_point=%s canvas_mode=%s steps=%d",
                config.units.value,
                config.reference_point.value,
                config.canvas_mode.value,
                len(config.matrix),
            )
            return 0
        except ConfigError as e:
            logger.error("Configuration error: %s", e)
            return 1
        except FileNotFoundError:
            logger.error("Configuration file not found: %s", parsed.config)
            return 1

    try:
        if parsed.print_matrix:
            return cmd_print_matrix(parsed.config, parsed.input)

        if not parsed.input or not parsed.output:
            logger.error("--input and --output are required for processing")
            return 1

        from pagematrix.processor import process

        config = load_config(parsed.config)
        process(config=config, input_path=parsed.input, output_path=parsed.output)
        return 0
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except FileNotFoundError as e:
        logger.error("File not found: %s", e)
        return 1
    except PageMatrixError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
