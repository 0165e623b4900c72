"""
main.py — FastAPI Application Entrypoint

Purpose:
- Initialize logging from settings.
- Register API routers.
- Define root-level health/status endpoint.
- Provide `app` object used by ASGI server (uvicorn).

Checking logic lives in tagcheck.validation, not here.
"""

from fastapi import FastAPI

from tagcheck.core.logging import configure_logging
from tagcheck.api.v1 import tags

# -----------------------------------------------------------------------------
# App Initialization
# -----------------------------------------------------------------------------

configure_logging()  # level from settings.LOG_LEVEL

app = FastAPI(
    title="Tag Balance Checker",
    description="Checks that HTML tags are properly nested and closed",
    version="0.1.0",
)

# -----------------------------------------------------------------------------
# Router Registration
# -----------------------------------------------------------------------------

app.include_router(tags.router, prefix="/api/v1")

# -----------------------------------------------------------------------------
# Health Check
# -----------------------------------------------------------------------------

@app.get("/")
def root():
    return {"status": "ok", "message": "Tag checker running"}
