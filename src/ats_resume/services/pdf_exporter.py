"""PDF export through headless Chromium (Playwright).

A :class:`PdfExporter` owns at most one browser process, started on first
use. Every export runs in its own browser context, which is closed when the
export finishes, fails, times out or is cancelled. Concurrent exports
therefore never share pages, cookies or navigation state.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from ats_resume.config import DEFAULT_PDF_TIMEOUT
from ats_resume.models import MissingAssetError, PdfExportError

if TYPE_CHECKING:
    from playwright.async_api import Browser, Playwright

logger = logging.getLogger(__name__)

__all__ = [
    "PdfExporter",
    "PdfOptions",
    "export_html_file",
    "export_pdf",
]


@dataclass(frozen=True)
class PdfOptions:
    """Page parameters passed to ``page.pdf()``."""

    format: str = "A4"
    print_background: bool = True
    margin: str = "0.5in"

    def as_kwargs(self) -> dict[str, Any]:
        return {
            "format": self.format,
            "print_background": self.print_background,
            "margin": {
                "top": self.margin,
                "right": self.margin,
                "bottom": self.margin,
                "left": self.margin,
            },
        }


class PdfExporter:
    """Render finished HTML documents to PDF bytes."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_PDF_TIMEOUT,
        options: PdfOptions | None = None,
    ) -> None:
        self.timeout = timeout
        self.options = options or PdfOptions()
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._lock = asyncio.Lock()

    async def __aenter__(self) -> PdfExporter:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _get_browser(self) -> Browser:
        async with self._lock:
            if self._browser is None or not self._browser.is_connected():
                if self._playwright is None:
                    self._playwright = await async_playwright().start()
                logger.info("Launching Chromium for PDF export")
                self._browser = await self._playwright.chromium.launch()
            return self._browser

    async def close(self) -> None:
        """Shut down the browser and the Playwright driver, if running."""
        async with self._lock:
            if self._browser is not None:
                await self._browser.close()
                self._browser = None
            if self._playwright is not None:
                await self._playwright.stop()
                self._playwright = None

    async def _render(self, *, html: str | None = None, url: str | None = None) -> bytes:
        browser = await self._get_browser()
        context = await browser.new_context()
        try:
            page = await context.new_page()
            if url is not None:
                await page.goto(url, wait_until="load")
            else:
                await page.set_content(html or "", wait_until="load")
            return await page.pdf(**self.options.as_kwargs())
        finally:
            await context.close()

    async def _run(self, label: str, **target: str) -> bytes:
        logger.info("Exporting PDF from %s", label)
        try:
            pdf = await asyncio.wait_for(self._render(**target), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            logger.error("PDF export of %s timed out after %gs", label, self.timeout)
            raise PdfExportError(f"PDF export timed out after {self.timeout:g}s") from exc
        except PlaywrightError as exc:
            logger.error("PDF export of %s failed: %s", label, exc)
            raise PdfExportError(f"PDF export failed: {exc}") from exc
        logger.info("Exported %d bytes of PDF", len(pdf))
        return pdf

    async def export(self, html: str) -> bytes:
        """Render an HTML string to PDF bytes.

        Raises:
            PdfExportError: If the engine fails or the export times out.
        """
        return await self._run("HTML content", html=html)

    async def export_url(self, url: str) -> bytes:
        """Navigate to *url* (e.g. a ``file://`` URI) and print it to PDF."""
        return await self._run(url, url=url)


async def export_pdf(html: str, *, timeout: float = DEFAULT_PDF_TIMEOUT) -> bytes:
    """One-shot export using a private browser that is closed afterwards."""
    async with PdfExporter(timeout=timeout) as exporter:
        return await exporter.export(html)


async def export_html_file(
    html_path: Path,
    pdf_path: Path,
    *,
    timeout: float = DEFAULT_PDF_TIMEOUT,
) -> Path:
    """Export a composed HTML file to a PDF file.

    The page is loaded from the file's URI so relative references resolve
    against its directory.

    Raises:
        MissingAssetError: If *html_path* does not exist.
        PdfExportError: If the export fails.
    """
    html_path = Path(html_path)
    if not html_path.is_file():
        raise MissingAssetError(html_path, kind="HTML file")

    async with PdfExporter(timeout=timeout) as exporter:
        pdf = await exporter.export_url(html_path.resolve().as_uri())

    pdf_path = Path(pdf_path)
    pdf_path.parent.mkdir(parents=True, exist_ok=True)
    pdf_path.write_bytes(pdf)
    logger.info("Wrote %s", pdf_path)
    return pdf_path
