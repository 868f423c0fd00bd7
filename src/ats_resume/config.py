"""Runtime configuration and render assets.

Settings are read from environment variables by :meth:`Settings.from_env`.
The template skeleton and stylesheet are loaded once, explicitly, into a
:class:`RenderAssets` owned by the caller (the CLI per invocation, the API
per application lifespan).

Environment variables:
    ATS_RESUME_TEMPLATE: Built-in template name (default ``ats``).
    ATS_RESUME_TEMPLATE_PATH: Path overriding the built-in skeleton.
    ATS_RESUME_STYLESHEET_PATH: Path overriding the built-in stylesheet.
    ATS_RESUME_PDF_TIMEOUT: Seconds allowed per PDF export (default 30).
    ATS_RESUME_LOG_LEVEL: Log level for the CLI and API (default INFO).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ats_resume.models import MissingAssetError
from ats_resume.templates import get_template

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_PDF_TIMEOUT", "RenderAssets", "Settings"]

DEFAULT_TEMPLATE = "ats"
DEFAULT_PDF_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    """Process configuration captured from the environment."""

    template_name: str = DEFAULT_TEMPLATE
    template_path: Path | None = None
    stylesheet_path: Path | None = None
    pdf_timeout: float = DEFAULT_PDF_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Settings:
        template_path = os.getenv("ATS_RESUME_TEMPLATE_PATH")
        stylesheet_path = os.getenv("ATS_RESUME_STYLESHEET_PATH")
        return cls(
            template_name=os.getenv("ATS_RESUME_TEMPLATE") or DEFAULT_TEMPLATE,
            template_path=Path(template_path) if template_path else None,
            stylesheet_path=Path(stylesheet_path) if stylesheet_path else None,
            pdf_timeout=_float_env("ATS_RESUME_PDF_TIMEOUT", DEFAULT_PDF_TIMEOUT),
            log_level=(os.getenv("ATS_RESUME_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )

    def resolve_asset_paths(self) -> tuple[Path, Path]:
        """Return ``(skeleton, stylesheet)`` paths, applying overrides."""
        builtin = get_template(self.template_name)
        return (
            self.template_path or builtin.skeleton,
            self.stylesheet_path or builtin.stylesheet,
        )


@dataclass(frozen=True)
class RenderAssets:
    """A document skeleton and the stylesheet to inline into it."""

    template_html: str
    stylesheet: str

    @classmethod
    def load(cls, template_path: Path, stylesheet_path: Path) -> RenderAssets:
        """Read both asset files.

        Raises:
            MissingAssetError: If either file does not exist.
        """
        template_path = Path(template_path)
        stylesheet_path = Path(stylesheet_path)
        if not template_path.is_file():
            raise MissingAssetError(template_path, kind="template")
        if not stylesheet_path.is_file():
            raise MissingAssetError(stylesheet_path, kind="stylesheet")
        logger.debug("Loaded render assets: %s, %s", template_path, stylesheet_path)
        return cls(
            template_html=template_path.read_text(encoding="utf-8"),
            stylesheet=stylesheet_path.read_text(encoding="utf-8"),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> RenderAssets:
        return cls.load(*settings.resolve_asset_paths())

    @classmethod
    def builtin(cls, name: str = DEFAULT_TEMPLATE) -> RenderAssets:
        """Load a template shipped with the package."""
        files = get_template(name)
        return cls.load(files.skeleton, files.stylesheet)
