"""Route handlers for the API."""

from ats_resume.api.routes import health, resumes

__all__ = [
    "health",
    "resumes",
]
