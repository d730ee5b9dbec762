"""Pydantic models for suggestion engine output."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class SuggestionSection(str, Enum):
    PERSONAL_INFO = "PersonalInfo"
    EXPERIENCE = "Experience"
    SKILLS = "Skills"
    EDUCATION = "Education"
    CONTENT = "Content"
    FORMATTING = "Formatting"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Suggestion(BaseModel):
    section: SuggestionSection
    priority: Priority
    message: str
    apply_template: str  # example text the user can paste in

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "use_enum_values": True,
    }
