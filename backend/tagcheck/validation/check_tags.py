"""
check_tags.py — Command-line harness for HTML tag balance checking.

Loads one or more HTML files, prints the indented tag diagnostic and a status
line for each, and optionally writes a JSON report.

Usage Examples:

    python -m tagcheck.validation.check_tags pages/index.html

    # Several files, JSON report, 2-space indentation:
    python -m tagcheck.validation.check_tags pages/index.html pages/about.html \
        --output outputs/tag_report.json \
        --indent 2

Exit status:
    0  every document is balanced
    1  at least one document is not balanced
    2  at least one document could not be loaded
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from tagcheck.core.config import settings
from tagcheck.core.exceptions import TagCheckError
from tagcheck.core.logging import configure_logging, get_logger
from tagcheck.validation.checker import check_text
from tagcheck.validation.loader import load_document
from tagcheck.validation.models import ValidationReport
from tagcheck.validation.reporter import format_console_report, generate_json_report

logger = get_logger(__name__)

EXIT_BALANCED = 0
EXIT_NOT_BALANCED = 1
EXIT_LOAD_ERROR = 2


def check_files(
    paths: Sequence[str | Path],
    output_path: Optional[str | Path] = None,
    indent_width: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Check tag balance for each file.

    Args:
        paths: HTML files to check
        output_path: Optional path to save a JSON report
        indent_width: Spaces per nesting level in console output

    Returns:
        Dictionary with "reports" (path -> ValidationReport), "errors"
        (path -> message) and "exit_code". Keys are the paths as given, so
        same-named files in different directories are kept apart.
    """
    reports: Dict[str, ValidationReport] = {}
    errors: Dict[str, str] = {}

    for file_path in paths:
        key = str(file_path)
        name = Path(file_path).name
        print(f"\n[Checking] {file_path}")
        try:
            text = load_document(file_path)
        except (FileNotFoundError, TagCheckError) as e:
            logger.error("Could not load %s: %s", file_path, e)
            print(f"[ERROR] {e}")
            errors[key] = str(e)
            continue

        report = check_text(text)
        reports[key] = report
        print(format_console_report(report, document_name=name, indent_width=indent_width))

    if output_path:
        metadata = {
            "files_processed": [str(p) for p in paths],
            "errors": errors,
        }
        generate_json_report(reports, output_path, metadata)
        print(f"\n[Report] JSON report saved to: {output_path}")

    if errors:
        exit_code = EXIT_LOAD_ERROR
    elif all(r.is_balanced for r in reports.values()):
        exit_code = EXIT_BALANCED
    else:
        exit_code = EXIT_NOT_BALANCED

    return {
        "reports": reports,
        "errors": errors,
        "exit_code": exit_code,
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command-line usage."""
    parser = argparse.ArgumentParser(
        description="Check that HTML tags are properly nested and closed"
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="HTML file(s) to check",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save a JSON report",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=settings.INDENT_WIDTH,
        help="Spaces of indentation per nesting level",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    args = parser.parse_args(argv)
    if args.indent < 0:
        parser.error("--indent must be >= 0")

    configure_logging(args.log_level)

    result = check_files(
        args.paths,
        output_path=args.output,
        indent_width=args.indent,
    )
    return result["exit_code"]


if __name__ == "__main__":
    sys.exit(main())
