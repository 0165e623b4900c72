"""
loader.py — Read HTML documents from disk for the checker.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from tagcheck.core.config import settings
from tagcheck.core.exceptions import DocumentLoadError, InvalidInputError
from tagcheck.core.logging import get_logger

logger = get_logger(__name__)


def load_document(
    file_path: str | Path,
    encoding: Optional[str] = None,
) -> str:
    """
    Load an HTML document from path.

    Args:
        file_path: Path to an .html/.htm file (see settings.HTML_EXTENSIONS)
        encoding: Text encoding, defaults to settings.DOCUMENT_ENCODING

    Returns:
        Document text

    Raises:
        FileNotFoundError: If the path does not exist
        InvalidInputError: If the file type is not an accepted HTML suffix
        DocumentLoadError: If the file cannot be read or decoded
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {file_path}")

    if path.suffix.lower() not in settings.HTML_EXTENSIONS:
        raise InvalidInputError(
            f"Unsupported file type '{path.suffix}' for {path.name}; "
            f"expected one of {', '.join(settings.HTML_EXTENSIONS)}"
        )

    try:
        with path.open('r', encoding=encoding or settings.DOCUMENT_ENCODING) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(path, e) from e

    logger.info("%s loaded successfully (%d characters)", path.name, len(text))
    return text
