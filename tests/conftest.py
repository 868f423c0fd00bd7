from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from ats_resume.config import RenderAssets
from ats_resume.models import PdfExportError


class FakePdfExporter:
    """Stand-in for :class:`PdfExporter` that never launches a browser."""

    def __init__(self, pdf: bytes = b"%PDF-1.7 fake", error: str | None = None) -> None:
        self.pdf = pdf
        self.error = error
        self.crash: Exception | None = None
        self.calls: list[str] = []

    async def export(self, html: str) -> bytes:
        self.calls.append(html)
        if self.crash is not None:
            raise self.crash
        if self.error is not None:
            raise PdfExportError(self.error)
        return self.pdf

    async def close(self) -> None:
        pass


@pytest.fixture
def assets() -> RenderAssets:
    """The built-in ATS template and stylesheet."""
    return RenderAssets.builtin()


@pytest.fixture
def resume_dict() -> dict[str, Any]:
    return {
        "name": "Jane Doe",
        "title": "Backend Engineer",
        "email": "jane@example.com",
        "phone_e164": "+15555550123",
        "phone_display": "+1 (555) 555-0123",
        "location": "Lisbon",
        "linkedin_url": "https://linkedin.com/in/jane",
        "github_url": "https://github.com/jane",
        "website_url": "http://jane.dev",
        "summary": "Builds APIs & pipelines.",
        "skills": [{"group": "Core", "items": ["Go", "Rust"]}],
        "projects": [
            {
                "title": "Ledger",
                "stack": "Python",
                "bullets": ["Fast"],
                "links": [{"label": "Repo", "url": "https://github.com/jane/ledger"}],
            }
        ],
        "experience": [
            {"role": "Engineer", "company": "Acme", "date": "2020 - 2024", "bullets": ["Shipped"]}
        ],
        "education": [{"title": "B.Sc.", "subtitle": "Uni", "date": "2016"}],
        "languages": [{"name": "English", "level": "Fluent", "note": "C2"}],
    }


@pytest.fixture
def fake_exporter() -> Iterator[FakePdfExporter]:
    """Route API PDF exports to a :class:`FakePdfExporter`."""
    from ats_resume.api.dependencies import get_pdf_exporter
    from ats_resume.api.main import app

    exporter = FakePdfExporter()
    app.dependency_overrides[get_pdf_exporter] = lambda: exporter
    yield exporter
    app.dependency_overrides.pop(get_pdf_exporter, None)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Automatically add the fake_exporter fixture to tests in API test files."""
    for item in items:
        test_file_path = Path(str(item.fspath))
        if "api" in test_file_path.stem.lower():
            item.add_marker(pytest.mark.usefixtures("fake_exporter"))
