"""
FastAPI adapter around the ID validation pipeline.

This module provides:
- POST /validate: JSON in (`{"id": "..."}`), pretty-printed JSON result out
- GET /form: a minimal HTML form that renders the result of `?id=...`
- GET / and GET /health: service information

All request parsing, encoding and status handling lives here; the engine only
ever sees a str.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Query, status
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

# Internal imports
from .. import __version__
from ..config import RsaIdConfig
from ..engine.pipeline import IdValidator
from ..reporting.html import render_result

logger = logging.getLogger(__name__)

# Pydantic models for API requests
class ValidateRequest(BaseModel):
    """Request body for ID validation. Type checking is left to the engine."""
    id: Any = None


class PrettyJSONResponse(JSONResponse):
    """JSON response rendered with indentation."""
    indent = 2

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=self.indent).encode("utf-8")


def create_app(config: Optional[RsaIdConfig] = None, validator: Optional[IdValidator] = None) -> FastAPI:
    """
    Build the application.

    Args:
        config: Adapter and scheme settings; defaults apply when omitted.
        validator: Injected validator (tests pass one with a pinned clock).
    """
    cfg = config or RsaIdConfig()
    checker = validator or IdValidator(cfg)

    class _Pretty(PrettyJSONResponse):
        indent = cfg.web.json_indent

    app = FastAPI(
        title="rsaid API",
        description="South African ID number validation",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "message": "rsaid API - South African ID number validation",
            "version": __version__,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "rsaid-api"}

    @app.post("/validate", response_class=_Pretty)
    async def validate_id(request: ValidateRequest):
        """
        Validate an ID number.

        Invalid numbers are a normal 200 response with `valid: false`; only a
        missing or non-string `id` is a client error.
        """
        try:
            result = checker.validate(request.id)
        except TypeError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        if not result.valid:
            logger.info("validation failed: %s", result.kind.value)
        return _Pretty(content=result.to_dict())

    @app.get("/form", response_class=HTMLResponse)
    async def validation_form(id: Optional[str] = Query(None)):
        """Manual testing page; renders the result when `id` is supplied."""
        result = checker.validate(id) if id is not None else None
        return HTMLResponse(render_result(result, id_value=id or "", title=cfg.web.title))

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app)
