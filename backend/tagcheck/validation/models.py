"""
models.py — Value types for tag extraction and balance checking.

TagToken values come out of the extractor, ValidationEvent and the verdict
types come out of the checker. All of them are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class TagToken:
    """
    One recognized tag occurrence.

    Attributes:
        name: Bare tag name, lower case (no leading "/")
        is_closing: True if the tag began with a closing marker ("</name>")
    """
    name: str
    is_closing: bool = False


class EventKind(str, Enum):
    OPENING = "opening"
    CLOSING = "closing"
    SELF_CLOSING = "self-closing"
    UNMATCHED_CLOSING = "unmatched-closing"
    UNCLOSED = "unclosed"


@dataclass(frozen=True)
class ValidationEvent:
    """
    One line of the diagnostic report.

    Attributes:
        name: Bare tag name
        kind: What the checker did with the tag
        depth: Nesting depth used for indentation. Signed, may be negative
            after a mismatch. None for unclosed tags, which are reported flat.
    """
    name: str
    kind: EventKind
    depth: Optional[int] = None


@dataclass(frozen=True)
class Balanced:
    status = "balanced"

    @property
    def is_balanced(self) -> bool:
        return True


@dataclass(frozen=True)
class ImbalancedAt:
    """First closing tag that did not match the innermost open tag."""
    tag_name: str
    index: int  # position of the offending token in the token sequence

    status = "imbalanced"

    @property
    def is_balanced(self) -> bool:
        return False


@dataclass(frozen=True)
class UnclosedTags:
    """Tags still open at end of document, innermost first."""
    tag_names: Tuple[str, ...] = field(default_factory=tuple)

    status = "unclosed"

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag_names", tuple(self.tag_names))

    @property
    def is_balanced(self) -> bool:
        return False


ValidationVerdict = Union[Balanced, ImbalancedAt, UnclosedTags]


@dataclass(frozen=True)
class ValidationReport:
    """Ordered events plus the single verdict of one validation pass."""
    events: Tuple[ValidationEvent, ...]
    verdict: ValidationVerdict

    def __post_init__(self) -> None:
        object.__setattr__(self, "events", tuple(self.events))

    def __iter__(self) -> Iterator:
        # allows `events, verdict = check_balance(tokens)`
        yield self.events
        yield self.verdict

    @property
    def is_balanced(self) -> bool:
        return self.verdict.is_balanced
