"""
checker.py — Nesting validation for extracted tags.

Walks the token sequence once with a local stack of open tag names:
- self-closing (void) tags are reported and never touch the stack
- an opening tag is reported at the current depth and pushed
- a closing tag that matches the top of the stack is reported one level up
  and popped
- the first closing tag that does not match ends the pass
Whatever is left on the stack afterwards is reported as unclosed.
"""

from __future__ import annotations

from typing import Iterable, List

from tagcheck.core.logging import get_logger
from tagcheck.validation.extractor import extract_tags
from tagcheck.validation.models import (
    Balanced,
    EventKind,
    ImbalancedAt,
    TagToken,
    UnclosedTags,
    ValidationEvent,
    ValidationReport,
)

logger = get_logger(__name__)

# Common non-container HTML tags
SELF_CLOSING_TAGS = frozenset({
    "br",
    "hr",
    "img",
    "input",
    "meta",
    "link",
    "area",
    "source",
    "track",
    "base",
    "col",
    "embed",
    "wbr",
})

# Depth change applied when a closing tag does not match the innermost open tag
MISMATCH_DEPTH_STEP = 2


def is_self_closing(name: str) -> bool:
    """Check a bare tag name against SELF_CLOSING_TAGS, ignoring case."""
    return name.lower() in SELF_CLOSING_TAGS


def check_balance(tokens: Iterable[TagToken]) -> ValidationReport:
    """
    Validate tag nesting.

    Args:
        tokens: TagTokens in document order

    Returns:
        ValidationReport with the ordered events and exactly one verdict.
        Unpacks as `events, verdict`.
    """
    events: List[ValidationEvent] = []
    stack: List[str] = []
    depth = 0

    for index, token in enumerate(tokens):
        name = token.name.lower()

        if is_self_closing(name):
            events.append(ValidationEvent(name, EventKind.SELF_CLOSING, depth))
            continue

        if token.is_closing:
            if stack and stack[-1] == name:
                depth -= 1
                events.append(ValidationEvent(name, EventKind.CLOSING, depth))
                stack.pop()
                continue

            depth -= MISMATCH_DEPTH_STEP
            events.append(ValidationEvent(name, EventKind.UNMATCHED_CLOSING, depth))
            expected = stack[-1] if stack else None
            logger.info(
                "Unmatched closing tag </%s> at token %d (expected %s)",
                name,
                index,
                f"</{expected}>" if expected else "no closing tag",
            )
            return ValidationReport(events, ImbalancedAt(name, index))

        events.append(ValidationEvent(name, EventKind.OPENING, depth))
        stack.append(name)
        depth += 1

    if stack:
        unclosed: List[str] = []
        while stack:
            name = stack.pop()
            unclosed.append(name)
            events.append(ValidationEvent(name, EventKind.UNCLOSED))
        logger.info("Unclosed tags at end of document: %s", ", ".join(unclosed))
        return ValidationReport(events, UnclosedTags(tuple(unclosed)))

    logger.debug("Tags balanced (%d events)", len(events))
    return ValidationReport(events, Balanced())


def check_text(text: str) -> ValidationReport:
    """Extract tags from text and validate them in one call."""
    return check_balance(extract_tags(text))
