"""
tags.py — Tag Balance API Endpoints

Purpose:
- Expose the extractor + checker over HTTP for editors and other frontends.
- Return events, verdict and pre-rendered diagnostic lines as JSON.

Endpoints:
- POST /tags/check → Checks tag balance of the submitted document text
"""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

from tagcheck.core.logging import get_logger
from tagcheck.validation.checker import check_text
from tagcheck.validation.reporter import format_events, report_to_dict, status_message

logger = get_logger(__name__)

router = APIRouter(
    prefix="/tags",
    tags=["tags"]
)

# -----------------------------------------------------------------------------
# Schemas
# -----------------------------------------------------------------------------

class CheckRequest(BaseModel):
    """Request schema for a tag balance check."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "<ul><li>item</li></ul>",
                "document_name": "index.html",
            }
        }
    )

    text: str
    document_name: Optional[str] = None
    indent_width: Optional[int] = Field(None, ge=0)


class EventResult(BaseModel):
    """One diagnostic event."""
    name: str
    kind: str
    depth: Optional[int] = None


class CheckResponse(BaseModel):
    """Response schema for a tag balance check."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "balanced": False,
                "verdict": {"status": "unclosed", "tag_names": ["li", "ul"]},
                "events": [
                    {"name": "ul", "kind": "opening", "depth": 0},
                    {"name": "li", "kind": "opening", "depth": 1},
                    {"name": "li", "kind": "unclosed", "depth": None},
                    {"name": "ul", "kind": "unclosed", "depth": None},
                ],
                "lines": [
                    "Found opening tag: <ul>!",
                    "    Found opening tag: <li>!",
                    "Unclosed tag: <li>!",
                    "Unclosed tag: <ul>!",
                ],
                "message": "Tags are not balanced in index.html!",
            }
        }
    )

    balanced: bool
    verdict: Dict[str, Any]
    events: List[EventResult]
    lines: List[str]
    message: str


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------

@router.post("/check", response_model=CheckResponse)
def check_tags(request: CheckRequest):
    """
    POST /tags/check

    Check that the tags in `text` are properly nested and closed.

    Returns:
        Events in document order, the verdict and rendered diagnostic lines

    Raises:
        422: If `text` is missing or not a string (request validation)
    """
    report = check_text(request.text)
    result = report_to_dict(report)
    logger.info(
        f"Checked {request.document_name or 'document'}: {result['verdict']['status']}"
    )
    return CheckResponse(
        balanced=result["balanced"],
        verdict=result["verdict"],
        events=[EventResult(**event) for event in result["events"]],
        lines=format_events(report.events, request.indent_width),
        message=status_message(report.verdict, request.document_name, len(report.events)),
    )
