"""
reporter.py — Report generation for balance check results.

Produces the indented console diagnostic, a one-line status message, and JSON
reports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from tagcheck.core.config import settings
from tagcheck.validation.models import (
    EventKind,
    ImbalancedAt,
    UnclosedTags,
    ValidationEvent,
    ValidationReport,
    ValidationVerdict,
)

_EVENT_TEMPLATES = {
    EventKind.OPENING: "Found opening tag: <{name}>!",
    EventKind.CLOSING: "Found closing tag: </{name}>!",
    EventKind.SELF_CLOSING: "Found non-container tag: <{name}>!",
    EventKind.UNMATCHED_CLOSING: "Found closing tag: </{name}>!",
    EventKind.UNCLOSED: "Unclosed tag: <{name}>!",
}


def format_event(event: ValidationEvent, indent_width: Optional[int] = None) -> str:
    """
    Format a single event as one diagnostic line.

    Args:
        event: Validation event
        indent_width: Spaces per nesting level, defaults to settings.INDENT_WIDTH

    Returns:
        Indented line. Negative depths and unclosed tags are not indented.
    """
    if indent_width is None:
        indent_width = settings.INDENT_WIDTH
    depth = event.depth if event.depth is not None else 0
    indent = " " * max(depth, 0) * indent_width
    return indent + _EVENT_TEMPLATES[event.kind].format(name=event.name)


def format_events(
    events: Sequence[ValidationEvent],
    indent_width: Optional[int] = None,
) -> List[str]:
    return [format_event(event, indent_width) for event in events]


def status_message(
    verdict: ValidationVerdict,
    document_name: Optional[str] = None,
    event_count: Optional[int] = None,
) -> str:
    """
    One-line outcome for a document.

    Args:
        verdict: Verdict of the pass
        document_name: File name shown in the message
        event_count: Number of events; 0 marks a document with no tags

    Returns:
        Status message string
    """
    target = f" in {document_name}" if document_name else ""
    if verdict.is_balanced:
        if event_count == 0:
            return f"No HTML tags found{target}."
        return f"All tags are balanced{target}!"
    return f"Tags are not balanced{target}!"


def format_console_report(
    report: ValidationReport,
    document_name: Optional[str] = None,
    indent_width: Optional[int] = None,
) -> str:
    """
    Format a full report: event lines, a separator and the status line.
    """
    lines = format_events(report.events, indent_width)
    lines.append("-" * 60)
    lines.append(status_message(report.verdict, document_name, len(report.events)))

    verdict = report.verdict
    if isinstance(verdict, ImbalancedAt):
        lines.append(f"  -> First mismatch: </{verdict.tag_name}> (tag #{verdict.index + 1})")
    elif isinstance(verdict, UnclosedTags):
        lines.append(f"  -> Unclosed: {', '.join(verdict.tag_names)}")

    return "\n".join(lines)


def verdict_to_dict(verdict: ValidationVerdict) -> Dict[str, Any]:
    result: Dict[str, Any] = {"status": verdict.status}
    if isinstance(verdict, ImbalancedAt):
        result["tag_name"] = verdict.tag_name
        result["index"] = verdict.index
    elif isinstance(verdict, UnclosedTags):
        result["tag_names"] = list(verdict.tag_names)
    return result


def report_to_dict(report: ValidationReport) -> Dict[str, Any]:
    """
    Convert a report into JSON-serializable form.

    Returns:
        {"balanced": bool, "verdict": {...}, "events": [{name, kind, depth}, ...]}
    """
    return {
        "balanced": report.is_balanced,
        "verdict": verdict_to_dict(report.verdict),
        "events": [
            {
                "name": event.name,
                "kind": event.kind.value,
                "depth": event.depth,
            }
            for event in report.events
        ],
    }


def generate_json_report(
    reports: Dict[str, ValidationReport],
    output_path: str | Path,
    metadata: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Generate JSON report file.

    Args:
        reports: Mapping of document path (or name) to its report
        output_path: Path to save JSON report
        metadata: Optional metadata to include in report
    """
    report = {
        "metadata": metadata or {},
        "summary": {
            "total_documents": len(reports),
            "balanced": sum(1 for r in reports.values() if r.is_balanced),
            "not_balanced": sum(1 for r in reports.values() if not r.is_balanced),
        },
        "documents": {
            name: report_to_dict(r) for name, r in reports.items()
        },
    }

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open('w', encoding='utf-8') as f:
        json.dump(report, f, indent=2, ensure_ascii=False)
