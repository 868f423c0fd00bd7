"""Tests for the Playwright PDF export boundary.

Playwright is mocked throughout; no browser is launched.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from playwright.async_api import Error as PlaywrightError

from ats_resume.models import MissingAssetError, PdfExportError
from ats_resume.services import pdf_exporter
from ats_resume.services.pdf_exporter import (
    PdfExporter,
    PdfOptions,
    export_html_file,
    export_pdf,
)


class FakeChromium:
    """Mocked ``async_playwright()`` that records every browser context."""

    def __init__(self, pdf: bytes = b"%PDF-fake", hang: bool = False) -> None:
        self.pdf = pdf
        self.hang = hang
        self.contexts: list[MagicMock] = []

        self.browser = MagicMock()
        self.browser.is_connected.return_value = True
        self.browser.close = AsyncMock()
        self.browser.new_context = AsyncMock(side_effect=self._new_context)

        playwright = MagicMock()
        playwright.chromium.launch = AsyncMock(return_value=self.browser)
        playwright.stop = AsyncMock()

        self.manager = MagicMock()
        self.manager.start = AsyncMock(return_value=playwright)
        self.factory = MagicMock(return_value=self.manager)

    def _new_context(self, **_kwargs) -> MagicMock:
        page = MagicMock()
        page.set_content = AsyncMock(side_effect=self._hang if self.hang else None)
        page.goto = AsyncMock()
        page.pdf = AsyncMock(return_value=self.pdf)
        context = MagicMock()
        context.new_page = AsyncMock(return_value=page)
        context.close = AsyncMock()
        context.page = page
        self.contexts.append(context)
        return context

    @staticmethod
    async def _hang(*_args, **_kwargs) -> None:
        await asyncio.sleep(10)

    def patch(self):
        return patch.object(pdf_exporter, "async_playwright", self.factory)


async def _export_all(exporter: PdfExporter, *documents: str) -> list[bytes]:
    async with exporter:
        return list(await asyncio.gather(*(exporter.export(d) for d in documents)))


class TestPdfOptions:
    def test_defaults(self):
        kwargs = PdfOptions().as_kwargs()
        assert kwargs["format"] == "A4"
        assert kwargs["print_background"] is True
        assert kwargs["margin"] == {
            "top": "0.5in",
            "right": "0.5in",
            "bottom": "0.5in",
            "left": "0.5in",
        }


class TestPdfExporter:
    def test_export_returns_pdf_bytes(self):
        chromium = FakeChromium(b"%PDF-1")
        with chromium.patch():
            assert asyncio.run(_export_all(PdfExporter(), "<html></html>")) == [b"%PDF-1"]
        chromium.browser.close.assert_awaited_once()

    def test_page_parameters(self):
        chromium = FakeChromium()
        with chromium.patch():
            asyncio.run(_export_all(PdfExporter(), "<p>hi</p>"))

        (context,) = chromium.contexts
        context.page.set_content.assert_awaited_once_with("<p>hi</p>", wait_until="load")
        context.page.pdf.assert_awaited_once_with(**PdfOptions().as_kwargs())
        context.close.assert_awaited_once()

    def test_each_export_gets_its_own_context(self):
        chromium = FakeChromium()
        with chromium.patch():
            asyncio.run(_export_all(PdfExporter(), "a", "b"))

        assert len(chromium.contexts) == 2
        assert chromium.contexts[0] is not chromium.contexts[1]
        for context in chromium.contexts:
            context.close.assert_awaited_once()
        # Both exports share one browser process.
        chromium.manager.start.assert_awaited_once()

    def test_engine_error_wrapped(self):
        chromium = FakeChromium()
        chromium.browser.new_context.side_effect = PlaywrightError("boom")
        with chromium.patch(), pytest.raises(PdfExportError, match="boom"):
            asyncio.run(_export_all(PdfExporter(), "<p></p>"))

    def test_timeout_closes_context(self):
        chromium = FakeChromium(hang=True)
        with chromium.patch(), pytest.raises(PdfExportError, match="timed out"):
            asyncio.run(_export_all(PdfExporter(timeout=0.01), "<p></p>"))

        (context,) = chromium.contexts
        context.close.assert_awaited_once()

    def test_close_without_export_is_noop(self):
        asyncio.run(PdfExporter().close())


class TestOneShotHelpers:
    def test_export_pdf(self):
        chromium = FakeChromium(b"%PDF-2")
        with chromium.patch():
            assert asyncio.run(export_pdf("<html></html>")) == b"%PDF-2"
        chromium.browser.close.assert_awaited_once()

    def test_export_html_file(self, tmp_path):
        html_path = tmp_path / "cv.html"
        html_path.write_text("<html></html>", encoding="utf-8")
        out = tmp_path / "dist" / "cv.pdf"
        chromium = FakeChromium(b"%PDF-3")

        with chromium.patch():
            result = asyncio.run(export_html_file(html_path, out))

        assert result == out
        assert out.read_bytes() == b"%PDF-3"
        (context,) = chromium.contexts
        context.page.goto.assert_awaited_once_with(html_path.resolve().as_uri(), wait_until="load")

    def test_export_html_file_missing(self, tmp_path):
        with pytest.raises(MissingAssetError, match="HTML file not found"):
            asyncio.run(export_html_file(tmp_path / "cv.html", tmp_path / "cv.pdf"))
        assert not (tmp_path / "cv.pdf").exists()
