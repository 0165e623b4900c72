"""
Validation module for HTML tag balance.

Provides the tag extractor, the nesting checker and report helpers used by the
command-line harness and the API.
"""

from tagcheck.validation.checker import SELF_CLOSING_TAGS, check_balance, check_text
from tagcheck.validation.extractor import extract_tags
from tagcheck.validation.models import (
    Balanced,
    EventKind,
    ImbalancedAt,
    TagToken,
    UnclosedTags,
    ValidationEvent,
    ValidationReport,
    ValidationVerdict,
)

__all__ = [
    "SELF_CLOSING_TAGS",
    "Balanced",
    "EventKind",
    "ImbalancedAt",
    "TagToken",
    "UnclosedTags",
    "ValidationEvent",
    "ValidationReport",
    "ValidationVerdict",
    "check_balance",
    "check_text",
    "extract_tags",
]
