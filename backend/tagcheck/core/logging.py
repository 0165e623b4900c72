"""
logging.py — Logging setup for the tag checker

Loggers used across the package:
- tagcheck.validation.extractor: tag counts per document (DEBUG)
- tagcheck.validation.checker: first mismatch / unclosed tags (INFO)
- tagcheck.validation.loader: documents read from disk (INFO)
- tagcheck.validation.check_tags: files that could not be loaded (ERROR)
- tagcheck.api.v1.tags: one line per API check (INFO)

The console diagnostic itself is printed by the CLI, not logged, so the
default INFO level keeps log lines short next to it.

Format: timestamp | level | module | message
"""

import logging
from typing import Optional

from tagcheck.core.config import settings

# -----------------------------------------------------------------------------
# Log Format
# -----------------------------------------------------------------------------

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)

# -----------------------------------------------------------------------------
# Root Logger Initialization
# -----------------------------------------------------------------------------

def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging settings.

    Parameters:
        level (str): "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL".
            Defaults to settings.LOG_LEVEL; unknown names fall back to INFO.

    Called once from `main.py` (API) or `check_tags.main` (CLI).
    """
    level = level or settings.LOG_LEVEL

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT
    )

    logging.getLogger(__name__).debug("Logging initialized with level %s", level)

# -----------------------------------------------------------------------------
# Logger Access Helper
# -----------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
    """
    Return a logger instance to be used in any module.

        from tagcheck.core.logging import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
