"""HTML fragment renderers for each resume section.

Every function here is pure: it takes records and returns a string of HTML.
Each text value is escaped exactly once, at the point where it is
interpolated. Section renderers return ``""`` for an empty sequence.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ats_resume.models import (
        Education,
        Experience,
        Language,
        Project,
        ResumeData,
        SkillGroup,
    )

__all__ = [
    "CONTACT_ROW_SEPARATOR",
    "CONTACT_SEPARATOR",
    "escape_html",
    "render_bullets_html",
    "render_contact_html",
    "render_education_html",
    "render_experience_html",
    "render_languages_html",
    "render_projects_html",
    "render_skills_html",
    "strip_scheme",
]

# Single quotes are deliberately left alone.
_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
    }
)
_SCHEME = re.compile(r"^https?://")
_EXTERNAL_LINK_ATTRS = 'target="_blank" rel="noopener noreferrer"'

CONTACT_SEPARATOR = " | "
CONTACT_ROW_SEPARATOR = "<br />"


def escape_html(text: str) -> str:
    """Escape ``& < > "`` in a single pass.

    Not idempotent: ``escape_html("&amp;")`` yields ``"&amp;amp;"``.
    """
    return str(text).translate(_HTML_ESCAPES)


def strip_scheme(url: str) -> str:
    """Drop a leading ``http://`` or ``https://`` from *url*."""
    return _SCHEME.sub("", url)


# ------------------------------------------------------------------
# Section renderers
# ------------------------------------------------------------------


def render_bullets_html(bullets: Sequence[str]) -> str:
    items = "".join(f"<li>{escape_html(b)}</li>" for b in bullets)
    return f'<ul class="bullets">{items}</ul>' if items else ""


def render_skills_html(skills: Sequence[SkillGroup]) -> str:
    return "\n".join(
        f'<div class="item"><div class="item-title">{escape_html(g.group)}:</div> '
        f"{escape_html(', '.join(g.items))}</div>"
        for g in skills
    )


def _render_project_links(project: Project) -> str:
    links = "".join(
        f"<li>{escape_html(link.label)}: "
        f'<a href="{link.url}" {_EXTERNAL_LINK_ATTRS}>{escape_html(link.url)}</a></li>'
        for link in project.links or ()
    )
    return f'<ul class="bullets">{links}</ul>' if links else ""


def render_projects_html(projects: Sequence[Project]) -> str:
    return "\n".join(
        f"""
<div class="item">
  <div class="item-title">{escape_html(p.title)}</div>
  <div class="tech-line">Stack: {escape_html(p.stack)}</div>
  {render_bullets_html(p.bullets)}
  {_render_project_links(p)}
</div>"""
        for p in projects
    )


def render_experience_html(experience: Sequence[Experience]) -> str:
    return "\n".join(
        f"""
<div class="item">
  <div class="item-header">
    <div>
      <div class="item-title">{escape_html(e.role)}</div>
      <div class="item-subtitle">{escape_html(e.company)}</div>
    </div>
    <div class="item-date">{escape_html(e.date)}</div>
  </div>
  {render_bullets_html(e.bullets)}
</div>"""
        for e in experience
    )


def render_education_html(education: Sequence[Education]) -> str:
    return "\n".join(
        f"""
<div class="item">
  <div class="item-header">
    <div>
      <div class="item-title">{escape_html(e.title)}</div>
      <div class="item-subtitle">{escape_html(e.subtitle)}</div>
    </div>
    <div class="item-date">{escape_html(e.date)}</div>
  </div>
</div>"""
        for e in education
    )


def render_languages_html(languages: Sequence[Language]) -> str:
    return "\n".join(
        f"""
<div class="item">
  <div class="item-header">
    <div class="item-title">{escape_html(lang.name)} — {escape_html(lang.level)}</div>
    <div class="item-date">{escape_html(lang.note)}</div>
  </div>
</div>"""
        for lang in languages
    )


# ------------------------------------------------------------------
# Contact line
# ------------------------------------------------------------------


def _personal_row(data: ResumeData) -> list[str]:
    row: list[str] = []
    if data.email:
        email = escape_html(data.email)
        row.append(f'<a href="mailto:{email}">{email}</a>')
    if data.phone_display and data.phone_e164:
        row.append(
            f'<a href="tel:{escape_html(data.phone_e164)}">{escape_html(data.phone_display)}</a>'
        )
    elif data.phone_display:
        row.append(escape_html(data.phone_display))
    if data.location:
        row.append(escape_html(data.location))
    return row


def _profile_row(data: ResumeData) -> list[str]:
    urls = (data.linkedin_url, data.github_url, data.website_url)
    return [
        f'<a href="{url}" {_EXTERNAL_LINK_ATTRS}>{escape_html(strip_scheme(url))}</a>'
        for url in urls
        if url
    ]


def render_contact_html(data: ResumeData) -> str:
    """Build the two-row contact line.

    Row 1 holds email, phone and location; row 2 holds the LinkedIn, GitHub
    and website links. Items are joined with ``" | "`` and the rows with a
    line break. Absent items never leave a dangling separator.
    """
    rows = [CONTACT_SEPARATOR.join(row) for row in (_personal_row(data), _profile_row(data)) if row]
    return CONTACT_ROW_SEPARATOR.join(rows)
