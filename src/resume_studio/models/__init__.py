"""Data models for resume-studio."""

from resume_studio.models.document import PDF_CONTENT_TYPE, RenderedDocument
from resume_studio.models.resume import (
    ResumeContent,
    ResumeDraft,
    StoredResume,
    TemplateStyle,
)
from resume_studio.models.stats import OwnerActivity, ResumeStats, TemplateUsage
from resume_studio.models.suggestion import Priority, Suggestion, SuggestionSection

__all__ = [
    "OwnerActivity",
    "PDF_CONTENT_TYPE",
    "Priority",
    "RenderedDocument",
    "ResumeContent",
    "ResumeDraft",
    "ResumeStats",
    "StoredResume",
    "Suggestion",
    "SuggestionSection",
    "TemplateStyle",
    "TemplateUsage",
]
