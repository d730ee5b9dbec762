"""Section layout decisions shared by the PDF and HTML renderers.

Single-column templates list sections in a fixed order; the two-column
template puts the summary and skills on the left and work history and
education on the right. Sections with blank text never appear.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from resume_studio.export.themes import TemplateTheme, get_theme
from resume_studio.models.resume import ResumeContent, TemplateStyle


@dataclass(frozen=True)
class SectionBlock:
    key: str  # ResumeContent field name
    heading: str
    body: str  # trimmed, line breaks kept


@dataclass(frozen=True)
class DocumentLayout:
    template_style: TemplateStyle
    title: str
    columns: tuple[tuple[SectionBlock, ...], ...]

    @property
    def sections(self) -> tuple[SectionBlock, ...]:
        """All sections in reading order."""
        return tuple(block for column in self.columns for block in column)

    def headings(self) -> list[str]:
        return [block.heading for block in self.sections]


def _blocks(
    resume: ResumeContent,
    theme: TemplateTheme,
    keys: tuple[str, ...],
) -> tuple[SectionBlock, ...]:
    headings = {
        "personal_info": theme.personal_heading,
        "education": "Education",
        "experience": "Experience",
        "skills": "Skills",
    }
    blocks = []
    for key in keys:
        text = getattr(resume, key).strip()
        if text:
            blocks.append(SectionBlock(key=key, heading=headings[key], body=text))
    return tuple(blocks)


def single_column(resume: ResumeContent, theme: TemplateTheme) -> tuple[tuple[SectionBlock, ...], ...]:
    return (_blocks(resume, theme, ("personal_info", "education", "experience", "skills")),)


def two_column(resume: ResumeContent, theme: TemplateTheme) -> tuple[tuple[SectionBlock, ...], ...]:
    return (
        _blocks(resume, theme, ("personal_info", "skills")),
        _blocks(resume, theme, ("experience", "education")),
    )


LAYOUTS: dict[int, Callable[[ResumeContent, TemplateTheme], tuple[tuple[SectionBlock, ...], ...]]] = {
    1: single_column,
    2: two_column,
}


def plan_layout(
    resume: ResumeContent,
    template_style: TemplateStyle | str | None = None,
) -> DocumentLayout:
    """Decide which sections appear, in which order and column.

    ``template_style=None`` uses the resume's own style; unknown names fall
    back to classic.
    """
    theme = get_theme(resume.template_style if template_style is None else template_style)
    return DocumentLayout(
        template_style=theme.style,
        title=resume.title.strip(),
        columns=LAYOUTS[theme.columns](resume, theme),
    )
