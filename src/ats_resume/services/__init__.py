"""Rendering, interchange and export services."""

from ats_resume.services.html_renderer import escape_html, render_contact_html
from ats_resume.services.resume_data import (
    empty_resume,
    load_resume_file,
    resume_from_dict,
    resume_from_json,
    resume_to_dict,
    resume_to_json,
)
from ats_resume.services.resume_generator import render_resume_html, render_resume_with_assets

__all__ = [
    "empty_resume",
    "escape_html",
    "load_resume_file",
    "render_contact_html",
    "render_resume_html",
    "render_resume_with_assets",
    "resume_from_dict",
    "resume_from_json",
    "resume_to_dict",
    "resume_to_json",
]
