"""Pydantic schemas for resume API endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned when rendering or exporting fails."""

    error: str = Field(description="Human-readable failure message")


class TemplateListResponse(BaseModel):
    """Names of the built-in HTML templates."""

    templates: list[str] = Field(default_factory=list)


class ProjectLinkSchema(BaseModel):
    label: str = ""
    url: str = ""


class SkillGroupSchema(BaseModel):
    group: str = ""
    items: list[str] = []


class ProjectSchema(BaseModel):
    title: str = ""
    stack: str = ""
    bullets: list[str] = []
    links: list[ProjectLinkSchema] | None = None


class ExperienceSchema(BaseModel):
    role: str = ""
    company: str = ""
    date: str = ""
    bullets: list[str] = []


class EducationSchema(BaseModel):
    title: str = ""
    subtitle: str = ""
    date: str = ""


class LanguageSchema(BaseModel):
    name: str = ""
    level: str = ""
    note: str = ""


class ResumeDataSchema(BaseModel):
    """Documented shape of the ResumeData interchange document.

    Request bodies are decoded leniently rather than validated against this
    model; it describes the format for the OpenAPI schema and responses.
    """

    name: str = ""
    title: str = ""
    email: str = ""
    phone_e164: str = Field("", description="Phone number in E.164 form, used as tel: target")
    phone_display: str = Field("", description="Phone number as shown on the page")
    location: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    website_url: str = ""
    summary: str = ""
    skills: list[SkillGroupSchema] = []
    projects: list[ProjectSchema] = []
    experience: list[ExperienceSchema] = []
    education: list[EducationSchema] = []
    languages: list[LanguageSchema] = []
