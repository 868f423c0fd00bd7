"""JSON interchange for :class:`ResumeData`.

The JSON document produced by the editor's "Export JSON" button is the
interchange format. Loading is lenient: any field of the wrong type falls back
to its default so one bad field never blocks a render. Only a root that is not
a JSON object is rejected.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from importlib import resources
from pathlib import Path
from typing import Any

from ats_resume.models import (
    Education,
    Experience,
    InvalidResumeError,
    Language,
    MissingAssetError,
    Project,
    ProjectLink,
    ResumeData,
    SkillGroup,
)

logger = logging.getLogger(__name__)

__all__ = [
    "empty_resume",
    "load_example_resume",
    "load_resume_file",
    "resume_from_dict",
    "resume_from_json",
    "resume_to_dict",
    "resume_to_json",
]

_SCALAR_FIELDS = (
    "name",
    "title",
    "email",
    "phone_e164",
    "phone_display",
    "location",
    "linkedin_url",
    "github_url",
    "website_url",
    "summary",
)

_EXAMPLE_RESOURCE = "resume.example.json"


# -----------------------------------------------------------------------
# Field coercion


def _text(raw: dict, key: str, path: str) -> str:
    value = raw.get(key, "")
    if isinstance(value, str):
        return value
    if value is not None:
        logger.warning("Ignoring non-string value for %s%s", path, key)
    return ""


def _list(raw: dict, key: str, path: str) -> list:
    value = raw.get(key)
    if isinstance(value, list):
        return value
    if value is not None:
        logger.warning("Ignoring non-array value for %s%s", path, key)
    return []


def _text_list(raw: dict, key: str, path: str) -> tuple[str, ...]:
    result: list[str] = []
    for i, item in enumerate(_list(raw, key, path)):
        if isinstance(item, str):
            result.append(item)
        else:
            logger.warning("Dropping non-string entry %s%s[%d]", path, key, i)
    return tuple(result)


def _objects(raw: dict, key: str, path: str) -> list[tuple[str, dict]]:
    """Return ``(path, object)`` pairs for the JSON objects in ``raw[key]``."""
    result: list[tuple[str, dict]] = []
    for i, item in enumerate(_list(raw, key, path)):
        if isinstance(item, dict):
            result.append((f"{path}{key}[{i}].", item))
        else:
            logger.warning("Dropping non-object entry %s%s[%d]", path, key, i)
    return result


# -----------------------------------------------------------------------
# Record builders


def _build_skill_group(raw: dict, path: str) -> SkillGroup:
    return SkillGroup(
        group=_text(raw, "group", path),
        items=_text_list(raw, "items", path),
    )


def _build_project(raw: dict, path: str) -> Project:
    links: tuple[ProjectLink, ...] | None = None
    if "links" in raw and raw["links"] is not None:
        links = tuple(
            ProjectLink(label=_text(link, "label", p), url=_text(link, "url", p))
            for p, link in _objects(raw, "links", path)
        )
    return Project(
        title=_text(raw, "title", path),
        stack=_text(raw, "stack", path),
        bullets=_text_list(raw, "bullets", path),
        links=links,
    )


def _build_experience(raw: dict, path: str) -> Experience:
    return Experience(
        role=_text(raw, "role", path),
        company=_text(raw, "company", path),
        date=_text(raw, "date", path),
        bullets=_text_list(raw, "bullets", path),
    )


def _build_education(raw: dict, path: str) -> Education:
    return Education(
        title=_text(raw, "title", path),
        subtitle=_text(raw, "subtitle", path),
        date=_text(raw, "date", path),
    )


def _build_language(raw: dict, path: str) -> Language:
    return Language(
        name=_text(raw, "name", path),
        level=_text(raw, "level", path),
        note=_text(raw, "note", path),
    )


# -----------------------------------------------------------------------
# Public API


def empty_resume() -> ResumeData:
    """Return a resume with every field at its default."""
    return ResumeData()


def resume_from_dict(raw: Any) -> ResumeData:
    """Build a :class:`ResumeData` from decoded JSON.

    Args:
        raw: The decoded JSON document.

    Returns:
        The coerced record. Fields of the wrong type take their defaults.

    Raises:
        InvalidResumeError: If *raw* is not a JSON object.
    """
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object with resume fields, got {type(raw).__name__}"
        raise InvalidResumeError(msg)

    scalars = {key: _text(raw, key, "") for key in _SCALAR_FIELDS}
    return ResumeData(
        **scalars,
        skills=tuple(_build_skill_group(o, p) for p, o in _objects(raw, "skills", "")),
        projects=tuple(_build_project(o, p) for p, o in _objects(raw, "projects", "")),
        experience=tuple(_build_experience(o, p) for p, o in _objects(raw, "experience", "")),
        education=tuple(_build_education(o, p) for p, o in _objects(raw, "education", "")),
        languages=tuple(_build_language(o, p) for p, o in _objects(raw, "languages", "")),
    )


def resume_from_json(text: str | bytes) -> ResumeData:
    """Parse JSON text into a :class:`ResumeData`.

    Raises:
        InvalidResumeError: If the text is not valid JSON or its root is not
            an object.
    """
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidResumeError(f"Could not parse resume JSON: {exc}") from exc
    return resume_from_dict(raw)


def load_resume_file(path: Path) -> ResumeData:
    """Read a resume JSON file from disk.

    Raises:
        MissingAssetError: If *path* does not exist.
        InvalidResumeError: If the file content is not a valid resume document.
    """
    path = Path(path)
    if not path.is_file():
        raise MissingAssetError(path, kind="data file")
    logger.debug("Loading resume data from %s", path)
    return resume_from_json(path.read_text(encoding="utf-8"))


def load_example_resume() -> ResumeData:
    """Return the example resume bundled with the package."""
    text = resources.files("ats_resume.data").joinpath(_EXAMPLE_RESOURCE).read_text("utf-8")
    return resume_from_json(text)


def resume_to_dict(data: ResumeData) -> dict[str, Any]:
    """Convert a record to plain JSON-compatible structures.

    ``links`` is omitted from a project only when it was never provided, so
    the output loads back into an identical record.
    """
    result = asdict(data)
    for project in result["projects"]:
        if project["links"] is None:
            del project["links"]
    return _lists(result)


def _lists(value: Any) -> Any:
    """Recursively turn tuples into lists for JSON output."""
    if isinstance(value, dict):
        return {k: _lists(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_lists(v) for v in value]
    return value


def resume_to_json(data: ResumeData) -> str:
    """Serialise a record as pretty-printed JSON (two-space indent)."""
    return json.dumps(resume_to_dict(data), indent=2, ensure_ascii=False)
