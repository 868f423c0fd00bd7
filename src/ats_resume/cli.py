from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ats_resume.config import RenderAssets, Settings
from ats_resume.models import MissingAssetError, PdfExportError
from ats_resume.services.resume_generator import render_resume_file

DEFAULT_HTML_OUT = Path("dist") / "cv.html"
DEFAULT_PDF_OUT = Path("dist") / "cv.pdf"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for command-line and server use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ats-resume",
        description="Render resume JSON to a self-contained HTML page and export it to PDF.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render resume JSON to HTML")
    render.add_argument("data", type=Path, help="ResumeData JSON file")
    render.add_argument("--template", type=Path, help="HTML skeleton (default: built-in)")
    render.add_argument("--stylesheet", type=Path, help="Stylesheet to inline (default: built-in)")
    render.add_argument("--out", type=Path, default=DEFAULT_HTML_OUT, help="Output HTML file")

    export = sub.add_parser("export", help="Export a rendered HTML file to PDF")
    export.add_argument("--html", type=Path, default=DEFAULT_HTML_OUT, help="Rendered HTML file")
    export.add_argument("--out", type=Path, default=DEFAULT_PDF_OUT, help="Output PDF file")

    return parser


def run_render(args: argparse.Namespace, settings: Settings) -> int:
    template_path, stylesheet_path = settings.resolve_asset_paths()
    assets = RenderAssets.load(args.template or template_path, args.stylesheet or stylesheet_path)
    out = render_resume_file(args.data, args.out, assets)
    print(f"Generated: {out}")
    return 0


def run_export(args: argparse.Namespace, settings: Settings) -> int:
    from ats_resume.services.pdf_exporter import export_html_file

    out = asyncio.run(export_html_file(args.html, args.out, timeout=settings.pdf_timeout))
    print(f"Generated: {out}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    try:
        if args.command == "render":
            return run_render(args, settings)
        return run_export(args, settings)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.", file=sys.stderr)
        return 130
    except (MissingAssetError, PdfExportError, ValueError) as exc:
        print(f"❌ Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
