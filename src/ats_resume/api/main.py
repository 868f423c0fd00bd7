"""FastAPI application entry point for the ATS Resume API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ats_resume.api.routes import health, resumes
from ats_resume.config import RenderAssets, Settings
from ats_resume.services.pdf_exporter import PdfExporter

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load render assets on startup and shut the PDF browser down on exit."""
    settings = Settings.from_env()
    app.state.settings = settings
    app.state.render_assets = RenderAssets.from_settings(settings)
    app.state.pdf_exporter = PdfExporter(timeout=settings.pdf_timeout)
    try:
        yield
    finally:
        await app.state.pdf_exporter.close()


app = FastAPI(
    title="ATS Resume API",
    description="API for rendering resume data to HTML and exporting it as PDF",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(resumes.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    from ats_resume.cli import configure_logging

    configure_logging(Settings.from_env().log_level)
    uvicorn.run(
        "ats_resume.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
