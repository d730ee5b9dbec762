"""Pydantic models for resume content at each stage: draft, clean, stored."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class TemplateStyle(str, Enum):
    CLASSIC = "classic"
    MINIMAL = "minimal"
    MODERN = "modern"

    @classmethod
    def parse(cls, value: object) -> TemplateStyle:
        """Exact-match a style name, falling back to classic."""
        if isinstance(value, cls):
            return value
        for style in cls:
            if value == style.value:
                return style
        return cls.CLASSIC


TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 160

CONTENT_FIELDS = ("personal_info", "education", "experience", "skills")


class ResumeContent(BaseModel):
    """Resume text fields as consumed by the suggestion engine and renderer."""

    title: str = ""
    personal_info: str = ""
    education: str = ""
    experience: str = ""
    skills: str = ""
    template_style: TemplateStyle = TemplateStyle.CLASSIC

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    @field_validator("title", "personal_info", "education", "experience", "skills", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("template_style", mode="before")
    @classmethod
    def _known_style(cls, value: object) -> TemplateStyle:
        return TemplateStyle.parse(value)

    def text_fields(self) -> dict[str, str]:
        """Title plus the four content fields, in storage order."""
        return {
            "title": self.title,
            "personal_info": self.personal_info,
            "education": self.education,
            "experience": self.experience,
            "skills": self.skills,
        }


class ResumeDraft(BaseModel):
    """User-submitted resume form, validated before sanitizing."""

    title: str = Field(min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    personal_info: str = Field(default="", max_length=8000)
    education: str = Field(default="", max_length=16000)
    experience: str = Field(default="", max_length=20000)
    skills: str = Field(default="", max_length=4000)
    template_style: str = Field(default="classic", max_length=160)

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    @field_validator("personal_info", "education", "experience", "skills", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("template_style", mode="before")
    @classmethod
    def _none_as_classic(cls, value: object) -> object:
        return "classic" if value is None else value


class StoredResume(BaseModel):
    """A persisted resume row."""

    resume_id: int
    owner: str
    title: str
    personal_info: str = ""
    education: str = ""
    experience: str = ""
    skills: str = ""
    template_style: TemplateStyle = TemplateStyle.CLASSIC
    suggestions_json: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    @field_validator("template_style", mode="before")
    @classmethod
    def _known_style(cls, value: object) -> TemplateStyle:
        return TemplateStyle.parse(value)

    @property
    def content(self) -> ResumeContent:
        return ResumeContent(
            title=self.title,
            personal_info=self.personal_info,
            education=self.education,
            experience=self.experience,
            skills=self.skills,
            template_style=self.template_style,
        )
