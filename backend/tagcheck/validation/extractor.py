"""
extractor.py — Tag extraction pass.

Scans raw document text line by line and turns every `<name ...>` or
`</name ...>` construct into a TagToken, in document order. Extraction is
lenient: anything that does not look like a tag (stray angle brackets,
unterminated tags, tags broken across lines) is skipped, and the checker
reports whatever imbalance that leaves behind.
"""

from __future__ import annotations

import re
from typing import List

from tagcheck.core.exceptions import InvalidInputError
from tagcheck.core.logging import get_logger
from tagcheck.validation.models import TagToken

logger = get_logger(__name__)

# "<", optional whitespace, optional "/", alphanumeric name, attributes, ">"
TAG_PATTERN = re.compile(r"<\s*(/?[a-zA-Z0-9]+)\s*[^>]*>")

# Only CR, LF and CRLF end a line; other Unicode separators stay inside it
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def parse_tag(raw_name: str) -> TagToken:
    """
    Build a TagToken from a matched name group such as "DIV" or "/div".

    Args:
        raw_name: Name as captured by TAG_PATTERN, with optional leading "/"

    Returns:
        TagToken with lower-cased bare name
    """
    name = raw_name.lower()
    if name.startswith("/"):
        return TagToken(name=name[1:], is_closing=True)
    return TagToken(name=name, is_closing=False)


def extract_tags(text: str) -> List[TagToken]:
    """
    Extract the ordered tag sequence from document text.

    Args:
        text: Raw document text

    Returns:
        TagTokens in top-to-bottom, left-to-right order

    Raises:
        InvalidInputError: If text is None or not a string
    """
    if text is None:
        raise InvalidInputError("No document text supplied")
    if not isinstance(text, str):
        raise InvalidInputError(
            f"Document text must be a string, got {type(text).__name__}"
        )

    tokens: List[TagToken] = []
    for line in LINE_BREAK.split(text):
        for match in TAG_PATTERN.finditer(line):
            tokens.append(parse_tag(match.group(1)))

    logger.debug("Extracted %d tags", len(tokens))
    return tokens
