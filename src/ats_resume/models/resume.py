"""Immutable records describing a resume and the errors raised around them.

Every record is consumed by a single render call and never mutated, so all
sequences are stored as tuples.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "Education",
    "Experience",
    "InvalidResumeError",
    "Language",
    "MissingAssetError",
    "PdfExportError",
    "Project",
    "ProjectLink",
    "ResumeData",
    "SkillGroup",
]


class MissingAssetError(FileNotFoundError):
    """Raised when a template, stylesheet, data or HTML file does not exist."""

    def __init__(self, path: Path | str, kind: str = "file") -> None:
        self.path = Path(path)
        self.kind = kind
        super().__init__(f"{kind[:1].upper()}{kind[1:]} not found: {self.path}")


class InvalidResumeError(ValueError):
    """Raised when resume JSON cannot be parsed or its root is not an object."""


class PdfExportError(RuntimeError):
    """Raised when the PDF engine fails or times out."""


@dataclass(frozen=True)
class SkillGroup:
    """A labelled group of skills, rendered as ``group: a, b, c``."""

    group: str = ""
    items: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectLink:
    label: str = ""
    url: str = ""


@dataclass(frozen=True)
class Project:
    """A project entry.

    Attributes:
        title: Project name.
        stack: Free-text technology stack.
        bullets: Achievement bullets, in display order.
        links: Optional links. ``None`` and ``()`` render the same way.
    """

    title: str = ""
    stack: str = ""
    bullets: tuple[str, ...] = ()
    links: tuple[ProjectLink, ...] | None = None


@dataclass(frozen=True)
class Experience:
    role: str = ""
    company: str = ""
    date: str = ""
    bullets: tuple[str, ...] = ()


@dataclass(frozen=True)
class Education:
    title: str = ""
    subtitle: str = ""
    date: str = ""


@dataclass(frozen=True)
class Language:
    name: str = ""
    level: str = ""
    note: str = ""


@dataclass(frozen=True)
class ResumeData:
    """Root record passed through the whole rendering pipeline.

    Contact fields are optional: an empty string means "not provided".
    """

    name: str = ""
    title: str = ""
    summary: str = ""
    email: str = ""
    phone_e164: str = ""
    phone_display: str = ""
    location: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    website_url: str = ""
    skills: tuple[SkillGroup, ...] = ()
    projects: tuple[Project, ...] = ()
    experience: tuple[Experience, ...] = ()
    education: tuple[Education, ...] = ()
    languages: tuple[Language, ...] = ()
