"""Pre-persistence cleaning and validation of resume text.

Every field is trimmed, line endings are normalized to ``\\n`` and control
characters other than newline and tab are dropped. The whole submission is
then rejected if any field carries markup or script fragments from a fixed
denylist, or if the combined text is too large to store.

Rejection is all-or-nothing: a failed result carries an error message and no
cleaned fields.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Mapping
from dataclasses import dataclass

from resume_studio.models.resume import ResumeContent, ResumeDraft, TemplateStyle

logger = logging.getLogger(__name__)

MAX_COMBINED_LENGTH = 40_000

PROHIBITED_CONTENT_MESSAGE = "Input contains prohibited content or tags."

_DANGEROUS_PATTERNS = (
    "<script",
    "</script>",
    "<iframe",
    "</iframe>",
    "javascript:",
    "vbscript:",
    "onload=",
    "onerror=",
    "onclick=",
    "onmouseover=",
    "eval(",
    "document.cookie",
)

_ALLOWED_CONTROL = {"\n", "\t"}

# (field name, camelCase alias) in the order fields are cleaned
_FIELDS = (
    ("personal_info", "personalInfo"),
    ("education", "education"),
    ("experience", "experience"),
    ("skills", "skills"),
    ("title", "title"),
)


@dataclass(frozen=True)
class SanitizeResult:
    """Cleaned fields on success, or an error message and no fields."""

    fields: ResumeContent | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def clean_text(value: str | None) -> str:
    """Normalize line endings, drop control characters and trim."""
    if value is None:
        return ""
    text = value.replace("\r\n", "\n").replace("\r", "\n")
    text = "".join(
        ch for ch in text
        if ch in _ALLOWED_CONTROL or unicodedata.category(ch) != "Cc"
    )
    return text.strip()


def contains_dangerous(text: str) -> bool:
    lowered = text.lower()
    return any(pattern in lowered for pattern in _DANGEROUS_PATTERNS)


def sanitize(raw: ResumeDraft | ResumeContent | Mapping[str, object]) -> SanitizeResult:
    """Clean and validate a resume submission."""
    if isinstance(raw, (ResumeDraft, ResumeContent)):
        raw = raw.model_dump()

    cleaned = {name: clean_text(_lookup(raw, name, alias)) for name, alias in _FIELDS}

    for name, text in cleaned.items():
        if contains_dangerous(text):
            logger.warning("Rejected resume input: prohibited content in %s", name)
            return SanitizeResult(error=PROHIBITED_CONTENT_MESSAGE)

    total = sum(len(text) for text in cleaned.values())
    if total > MAX_COMBINED_LENGTH:
        logger.warning("Rejected resume input: combined length %d", total)
        return SanitizeResult(
            error=(
                f"The combined length of text fields ({total:,}) exceeds "
                f"the maximum limit of {MAX_COMBINED_LENGTH:,} characters."
            )
        )

    style = raw.get("template_style", raw.get("templateStyle"))
    return SanitizeResult(
        fields=ResumeContent(template_style=TemplateStyle.parse(style), **cleaned)
    )


def _lookup(raw: Mapping[str, object], name: str, alias: str) -> str | None:
    value = raw.get(name, raw.get(alias))
    if value is None:
        return None
    return str(value)
