"""Resume document composition.

Inlines the stylesheet into a document skeleton and substitutes the named
``{{PLACEHOLDER}}`` tokens with escaped scalars and rendered section
fragments.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from ats_resume.services.html_renderer import (
    escape_html,
    render_contact_html,
    render_education_html,
    render_experience_html,
    render_languages_html,
    render_projects_html,
    render_skills_html,
)
from ats_resume.services.resume_data import load_resume_file

if TYPE_CHECKING:
    from ats_resume.config import RenderAssets
    from ats_resume.models import ResumeData

logger = logging.getLogger(__name__)

__all__ = [
    "PLACEHOLDERS",
    "STYLESHEET_LINK",
    "build_placeholder_values",
    "render_resume_file",
    "render_resume_html",
    "render_resume_with_assets",
]

STYLESHEET_LINK = '<link rel="stylesheet" href="./style.css" />'

PLACEHOLDERS = (
    "NAME",
    "TITLE",
    "CONTACT_HTML",
    "SUMMARY",
    "SKILLS_HTML",
    "PROJECTS_HTML",
    "EXPERIENCE_HTML",
    "EDUCATION_HTML",
    "LANGUAGES_HTML",
)

_PLACEHOLDER_RE = re.compile(r"\{\{(" + "|".join(PLACEHOLDERS) + r")\}\}")


def build_placeholder_values(data: ResumeData) -> dict[str, str]:
    """Render every placeholder value for *data*.

    Scalars are escaped here; section values are already-escaped fragments.
    """
    return {
        "NAME": escape_html(data.name),
        "TITLE": escape_html(data.title),
        "CONTACT_HTML": render_contact_html(data),
        "SUMMARY": escape_html(data.summary),
        "SKILLS_HTML": render_skills_html(data.skills),
        "PROJECTS_HTML": render_projects_html(data.projects),
        "EXPERIENCE_HTML": render_experience_html(data.experience),
        "EDUCATION_HTML": render_education_html(data.education),
        "LANGUAGES_HTML": render_languages_html(data.languages),
    }


def _substitute(text: str, values: dict[str, str]) -> str:
    # One pass: substituted values are never rescanned for tokens.
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], text)


def render_resume_html(data: ResumeData, template_html: str, stylesheet: str) -> str:
    """Compose the final HTML document.

    The first :data:`STYLESHEET_LINK` is replaced by an inline ``<style>``
    block holding *stylesheet* verbatim. Every occurrence of each placeholder
    is then replaced; tokens absent from the skeleton are simply skipped.

    Args:
        data: The resume to render.
        template_html: Document skeleton containing the placeholders.
        stylesheet: Raw CSS to inline.

    Returns:
        A self-contained HTML document.
    """
    values = build_placeholder_values(data)
    head, link, tail = template_html.partition(STYLESHEET_LINK)
    if not link:
        logger.warning("Stylesheet link not found in template; CSS was not inlined")
        return _substitute(template_html, values)

    logger.debug("Composing resume HTML for %r", data.name)
    return f"{_substitute(head, values)}<style>{stylesheet}</style>{_substitute(tail, values)}"


def render_resume_with_assets(data: ResumeData, assets: RenderAssets) -> str:
    return render_resume_html(data, assets.template_html, assets.stylesheet)


def render_resume_file(data_path: Path, output_path: Path, assets: RenderAssets) -> Path:
    """Render a resume JSON file to an HTML file.

    Args:
        data_path: ResumeData JSON document.
        output_path: Destination HTML file; parent directories are created.
        assets: Loaded template and stylesheet.

    Returns:
        The path written.

    Raises:
        MissingAssetError: If *data_path* does not exist.
        InvalidResumeError: If the data file is not a resume document.
    """
    data = load_resume_file(data_path)
    html = render_resume_with_assets(data, assets)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    logger.info("Wrote %s", output_path)
    return output_path
