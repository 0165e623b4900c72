"""
config.py — Centralized Application Configuration Loader

Purpose:
- Define a single source of truth for checker settings.
- Load and validate environment variables from `.env` or OS environment.

Settings:
- LOG_LEVEL: root logging level for CLI and API
- INDENT_WIDTH: spaces per nesting level in the console diagnostic
- HTML_EXTENSIONS: file suffixes the document loader accepts
- DOCUMENT_ENCODING: encoding used to read documents from disk

This module does NOT:
- Read documents.
- Configure logging (see core/logging.py).
"""

from pathlib import Path
from typing import Any, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# config.py is at: backend/tagcheck/core/config.py
# .env should be at: backend/.env
_CONFIG_DIR = Path(__file__).parent
_BACKEND_DIR = _CONFIG_DIR.parent.parent
_ENV_FILE = _BACKEND_DIR / ".env"

if _ENV_FILE.exists():
    _ENV_FILE_PATH = str(_ENV_FILE.resolve())
else:
    # pydantic looks in CWD
    _ENV_FILE_PATH = ".env"


class Settings(BaseSettings):
    """
    Settings container for the tag checker.
    """
    LOG_LEVEL: str = Field(
        "INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    INDENT_WIDTH: int = Field(
        4,
        ge=0,
        description="Spaces of indentation per nesting level in console reports",
    )
    HTML_EXTENSIONS: List[str] = Field(
        default_factory=lambda: [".html", ".htm"],
        description="File suffixes accepted by the document loader",
    )
    DOCUMENT_ENCODING: str = Field(
        "utf-8",
        description="Encoding used when reading documents from disk",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Strip whitespace and upper-case the level name."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("HTML_EXTENSIONS", mode="after")
    @classmethod
    def normalize_extensions(cls, v: List[str]) -> List[str]:
        """Lower-case suffixes and make sure each has a leading dot."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            if not ext.startswith("."):
                ext = "." + ext
            normalized.append(ext)
        return normalized

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Module-level instance shared by every importer
settings = Settings()
