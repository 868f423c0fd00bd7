"""Liveness route reporting the render configuration in use."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(request: Request) -> dict[str, Any]:
    """Report that the API is up and which template it renders with."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "template": settings.template_name,
        "pdf_timeout": settings.pdf_timeout,
    }
