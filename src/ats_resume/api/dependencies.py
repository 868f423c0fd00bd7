"""Shared dependencies for API routes."""

from __future__ import annotations

from fastapi import Request

from ats_resume.config import RenderAssets
from ats_resume.services.pdf_exporter import PdfExporter


def get_render_assets(request: Request) -> RenderAssets:
    """Return the template and stylesheet loaded during application startup."""
    return request.app.state.render_assets


def get_pdf_exporter(request: Request) -> PdfExporter:
    """Return the application's PDF exporter.

    The exporter shares one browser process across requests but gives each
    export its own browser context.
    """
    return request.app.state.pdf_exporter
