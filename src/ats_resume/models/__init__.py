"""Data models and type definitions"""

from ats_resume.models.resume import (
    Education,
    Experience,
    InvalidResumeError,
    Language,
    MissingAssetError,
    PdfExportError,
    Project,
    ProjectLink,
    ResumeData,
    SkillGroup,
)

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
