"""Visual configuration for each resume template style."""

from __future__ import annotations

from dataclasses import dataclass

from resume_studio.models.resume import TemplateStyle


@dataclass(frozen=True)
class Margins:
    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def uniform(cls, size: float) -> Margins:
        return cls(size, size, size, size)


@dataclass(frozen=True)
class Palette:
    primary: str  # title and section headers
    secondary: str  # body text and rules
    background: str


@dataclass(frozen=True)
class Typography:
    title: str
    header: str
    body: str


@dataclass(frozen=True)
class TemplateTheme:
    style: TemplateStyle
    margins: Margins
    palette: Palette
    fonts: Typography
    title_size: int
    header_size: int
    body_size: int
    columns: int
    personal_heading: str
    title_rule: bool = False
    column_gutter: float = 24


THEMES: dict[TemplateStyle, TemplateTheme] = {
    TemplateStyle.CLASSIC: TemplateTheme(
        style=TemplateStyle.CLASSIC,
        margins=Margins.uniform(50),
        palette=Palette(primary="#0F172A", secondary="#334155", background="#FFFFFF"),
        fonts=Typography(title="Times", header="Times", body="Times"),
        title_size=24,
        header_size=16,
        body_size=11,
        columns=1,
        personal_heading="Personal Information",
    ),
    TemplateStyle.MINIMAL: TemplateTheme(
        style=TemplateStyle.MINIMAL,
        margins=Margins.uniform(50),
        palette=Palette(primary="#1E88E5", secondary="#424242", background="#FFFFFF"),
        fonts=Typography(title="Helvetica", header="Helvetica", body="Helvetica"),
        title_size=22,
        header_size=18,
        body_size=10,
        columns=1,
        personal_heading="About",
    ),
    TemplateStyle.MODERN: TemplateTheme(
        style=TemplateStyle.MODERN,
        margins=Margins(top=36, right=60, bottom=36, left=60),
        palette=Palette(primary="#0D47A1", secondary="#37474F", background="#F5F9FF"),
        fonts=Typography(title="Helvetica", header="Helvetica", body="Times"),
        title_size=28,
        header_size=14,
        body_size=10,
        columns=2,
        personal_heading="About",
        title_rule=True,
    ),
}

AVAILABLE_TEMPLATES = tuple(style.value for style in TemplateStyle)


def get_theme(template_style: TemplateStyle | str | None) -> TemplateTheme:
    """Theme for a style name; unknown names get the classic theme."""
    return THEMES[TemplateStyle.parse(template_style)]


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
