"""Tests for the section layout plan shared by PDF and HTML export."""

from __future__ import annotations

import pytest

from resume_studio.export.layout import plan_layout
from resume_studio.export.themes import THEMES, get_theme, hex_to_rgb
from resume_studio.models.resume import TemplateStyle


class TestPlanLayout:
    def test_classic_single_column_order(self, strong_resume):
        layout = plan_layout(strong_resume, "classic")
        assert len(layout.columns) == 1
        assert layout.headings() == ["Personal Information", "Education", "Experience", "Skills"]

    def test_minimal_uses_about_heading(self, strong_resume):
        layout = plan_layout(strong_resume, "minimal")
        assert len(layout.columns) == 1
        assert layout.headings() == ["About", "Education", "Experience", "Skills"]

    def test_modern_two_columns(self, strong_resume):
        layout = plan_layout(strong_resume, "modern")
        left, right = layout.columns
        assert [b.heading for b in left] == ["About", "Skills"]
        assert [b.heading for b in right] == ["Experience", "Education"]

    @pytest.mark.parametrize("style", ["classic", "minimal", "modern"])
    def test_empty_experience_omitted(self, strong_resume, style):
        resume = strong_resume.model_copy(update={"experience": "   \n "})
        layout = plan_layout(resume, style)
        assert "Experience" not in layout.headings()
        assert all(block.key != "experience" for block in layout.sections)

    def test_modern_empty_left_column(self, strong_resume):
        resume = strong_resume.model_copy(update={"personal_info": "", "skills": ""})
        left, right = plan_layout(resume, "modern").columns
        assert left == ()
        assert [b.heading for b in right] == ["Experience", "Education"]

    def test_unknown_style_falls_back_to_classic(self, strong_resume):
        layout = plan_layout(strong_resume, "bogus")
        assert layout.template_style == TemplateStyle.CLASSIC
        assert layout == plan_layout(strong_resume, "classic")

    def test_none_uses_resume_style(self, strong_resume):
        resume = strong_resume.model_copy(update={"template_style": TemplateStyle.MODERN})
        assert plan_layout(resume).template_style == TemplateStyle.MODERN

    def test_body_trimmed_with_line_breaks_kept(self, strong_resume):
        resume = strong_resume.model_copy(update={"education": "\n  Line one\nLine two  \n"})
        block = next(b for b in plan_layout(resume).sections if b.key == "education")
        assert block.body == "Line one\nLine two"

    def test_title_trimmed(self, strong_resume):
        resume = strong_resume.model_copy(update={"title": "  Spaced  "})
        assert plan_layout(resume).title == "Spaced"

    def test_deterministic(self, strong_resume):
        for style in ("classic", "minimal", "modern"):
            assert plan_layout(strong_resume, style) == plan_layout(strong_resume, style)


class TestThemes:
    def test_every_style_has_a_theme(self):
        assert set(THEMES) == set(TemplateStyle)

    def test_margins(self):
        classic = THEMES[TemplateStyle.CLASSIC].margins
        minimal = THEMES[TemplateStyle.MINIMAL].margins
        modern = THEMES[TemplateStyle.MODERN].margins
        assert len({classic.top, classic.right, classic.bottom, classic.left}) == 1
        assert classic == minimal
        assert modern.top < classic.top and modern.bottom < classic.bottom
        assert modern.left > classic.left and modern.right > classic.right

    def test_header_sizes(self):
        assert THEMES[TemplateStyle.CLASSIC].header_size == 16
        assert THEMES[TemplateStyle.MINIMAL].header_size == 18

    def test_only_modern_has_title_rule(self):
        assert [s for s, t in THEMES.items() if t.title_rule] == [TemplateStyle.MODERN]

    def test_get_theme_fallback(self):
        assert get_theme("nope") is THEMES[TemplateStyle.CLASSIC]
        assert get_theme(None) is THEMES[TemplateStyle.CLASSIC]

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#0D47A1") == (13, 71, 161)
