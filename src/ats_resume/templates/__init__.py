"""Registry of built-in HTML resume templates."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "TEMPLATE_DIR",
    "TemplateFiles",
    "get_template",
    "list_templates",
]

TEMPLATE_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class TemplateFiles:
    """Paths of a document skeleton and the stylesheet it links to."""

    name: str
    skeleton: Path
    stylesheet: Path


_REGISTRY: dict[str, TemplateFiles] = {
    "ats": TemplateFiles(
        name="ats",
        skeleton=TEMPLATE_DIR / "ats.html",
        stylesheet=TEMPLATE_DIR / "style.css",
    ),
}


def get_template(name: str) -> TemplateFiles:
    """Return the template registered under *name*.

    Raises:
        ValueError: If no template with that name exists.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown template {name!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[str]:
    """Return sorted names of all registered templates."""
    return sorted(_REGISTRY)
