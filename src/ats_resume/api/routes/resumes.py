"""Resume rendering and export routes for the API."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, Response

from ats_resume.api.dependencies import get_pdf_exporter, get_render_assets
from ats_resume.api.schemas.resumes import (
    ErrorResponse,
    ResumeDataSchema,
    TemplateListResponse,
)
from ats_resume.config import RenderAssets
from ats_resume.models import InvalidResumeError, PdfExportError
from ats_resume.services.pdf_exporter import PdfExporter
from ats_resume.services.resume_data import (
    load_example_resume,
    resume_from_json,
    resume_to_dict,
)
from ats_resume.services.resume_generator import render_resume_with_assets
from ats_resume.templates import list_templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["resumes"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    500: {"model": ErrorResponse, "description": "Invalid input or export failure"},
}


def _error(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.get("/templates", response_model=TemplateListResponse)
def get_templates() -> TemplateListResponse:
    """List the built-in HTML templates."""
    return TemplateListResponse(templates=list_templates())


@router.get("/resume/example", response_model=ResumeDataSchema)
def get_example_resume() -> dict[str, Any]:
    """Return the bundled example resume document."""
    return resume_to_dict(load_example_resume())


@router.post(
    "/render-html",
    response_class=HTMLResponse,
    responses=_ERROR_RESPONSES,
)
async def render_html_endpoint(
    request: Request,
    assets: Annotated[RenderAssets, Depends(get_render_assets)],
) -> Response:
    """Render a ResumeData JSON body to the composed HTML document."""
    try:
        data = resume_from_json(await request.body())
    except InvalidResumeError as exc:
        return _error(str(exc))
    return HTMLResponse(render_resume_with_assets(data, assets))


@router.post(
    "/export-pdf",
    responses={200: {"content": {"application/pdf": {}}}, **_ERROR_RESPONSES},
)
async def export_pdf_endpoint(
    request: Request,
    assets: Annotated[RenderAssets, Depends(get_render_assets)],
    exporter: Annotated[PdfExporter, Depends(get_pdf_exporter)],
) -> Response:
    """Render a ResumeData JSON body and return it as a PDF download."""
    try:
        data = resume_from_json(await request.body())
        html = render_resume_with_assets(data, assets)
        pdf = await exporter.export(html)
    except (InvalidResumeError, PdfExportError) as exc:
        logger.error("PDF export error: %s", exc)
        return _error(str(exc))
    except Exception as exc:
        logger.exception("Unexpected PDF export error")
        return _error(str(exc) or type(exc).__name__)

    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=resume.pdf"},
    )
