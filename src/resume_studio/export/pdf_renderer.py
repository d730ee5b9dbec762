"""PDF rendering of resumes using fpdf2 (pure Python, no system deps)."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from resume_studio.export.layout import DocumentLayout, SectionBlock, plan_layout
from resume_studio.export.themes import THEMES, TemplateTheme, Typography, hex_to_rgb
from resume_studio.models.document import RenderedDocument
from resume_studio.models.resume import ResumeContent, TemplateStyle

logger = logging.getLogger(__name__)

# Pinned so identical input yields identical bytes
_CREATION_DATE = datetime(2000, 1, 1, tzinfo=timezone.utc)

_CUSTOM_FONT_FAMILY = "ResumeFont"
_LINE_SPACING = 1.4

# Core PDF fonts only cover latin-1
_LATIN1_FALLBACKS = str.maketrans({
    "•": "-",
    "–": "-",
    "—": "-",
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "…": "...",
})


class ResumePDF(FPDF):
    """FPDF document that paints the theme background on every page."""

    def __init__(self, theme: TemplateTheme):
        super().__init__(orientation="portrait", unit="pt", format="A4")
        self.theme = theme
        self._painted_pages: set[int] = set()

    def header(self) -> None:
        # Column layout revisits earlier pages; paint each page only once
        if self.page in self._painted_pages:
            return
        self._painted_pages.add(self.page)
        if self.theme.palette.background.upper() == "#FFFFFF":
            return
        self.set_fill_color(*hex_to_rgb(self.theme.palette.background))
        self.rect(0, 0, self.w, self.h, style="F")


def render_resume_pdf(
    resume: ResumeContent,
    template_style: TemplateStyle | str | None = None,
    *,
    font_path: str | Path | None = None,
) -> bytes:
    """Lay out a resume as PDF bytes.

    ``template_style=None`` uses the resume's own style; unknown names fall
    back to classic. ``font_path`` points at a TTF used for every text role,
    for content outside latin-1.
    """
    layout = plan_layout(resume, template_style)
    theme = THEMES[layout.template_style]

    pdf = ResumePDF(theme)
    pdf.creation_date = _CREATION_DATE
    pdf.set_title(layout.title)
    pdf.set_creator("resume-studio")
    fonts = _register_fonts(pdf, theme.fonts, font_path)

    margins = theme.margins
    pdf.set_margins(margins.left, margins.top, margins.right)
    pdf.set_auto_page_break(auto=True, margin=margins.bottom)
    pdf.add_page()

    _write_title(pdf, theme, fonts, layout.title)
    if len(layout.columns) == 1:
        for block in layout.columns[0]:
            _write_section(pdf, theme, fonts, block)
    else:
        _write_columns(pdf, theme, fonts, layout)

    logger.debug(
        "Rendered %s resume with sections %s",
        layout.template_style.value,
        layout.headings(),
    )
    return bytes(pdf.output())


def render_document(
    resume: ResumeContent,
    template_style: TemplateStyle | str | None = None,
    *,
    resume_id: int | None = None,
    font_path: str | Path | None = None,
) -> RenderedDocument:
    """Render to PDF and wrap the bytes with content type and filename."""
    content = render_resume_pdf(resume, template_style, font_path=font_path)
    if resume_id is None:
        return RenderedDocument(content=content)
    return RenderedDocument.for_resume(resume_id, content)


def _register_fonts(pdf: FPDF, fonts: Typography, font_path: str | Path | None) -> Typography:
    if font_path is None:
        return fonts
    path = Path(font_path)
    if not path.exists():
        logger.warning("Font file %s not found, using core fonts", path)
        return fonts
    # Same face for regular and bold; headers stay distinguishable by size
    pdf.add_font(_CUSTOM_FONT_FAMILY, "", str(path))
    pdf.add_font(_CUSTOM_FONT_FAMILY, "B", str(path))
    return replace(
        fonts,
        title=_CUSTOM_FONT_FAMILY,
        header=_CUSTOM_FONT_FAMILY,
        body=_CUSTOM_FONT_FAMILY,
    )


def _write_title(pdf: FPDF, theme: TemplateTheme, fonts: Typography, title: str) -> None:
    if not title:
        return
    pdf.set_font(fonts.title, "B", theme.title_size)
    pdf.set_text_color(*hex_to_rgb(theme.palette.primary))
    pdf.multi_cell(
        0,
        theme.title_size * _LINE_SPACING,
        _safe_text(title, pdf),
        align="C",
        new_x=XPos.LMARGIN,
        new_y=YPos.NEXT,
    )
    if theme.title_rule:
        y = pdf.get_y() + 4
        pdf.set_draw_color(*hex_to_rgb(theme.palette.primary))
        pdf.set_line_width(1.5)
        pdf.line(pdf.l_margin, y, pdf.w - pdf.r_margin, y)
        pdf.set_y(y + 4)
    pdf.ln(theme.body_size)


def _write_section(
    pdf: FPDF,
    theme: TemplateTheme,
    fonts: Typography,
    block: SectionBlock,
    width: float = 0,
) -> None:
    """Header line then the body text, ``width`` wide (0 spans the margins)."""
    pdf.set_font(fonts.header, "B", theme.header_size)
    pdf.set_text_color(*hex_to_rgb(theme.palette.primary))
    pdf.multi_cell(
        width,
        theme.header_size * _LINE_SPACING,
        _safe_text(block.heading, pdf),
        new_x=XPos.LMARGIN,
        new_y=YPos.NEXT,
    )

    pdf.set_font(fonts.body, "", theme.body_size)
    pdf.set_text_color(*hex_to_rgb(theme.palette.secondary))
    # multi_cell keeps explicit line breaks
    pdf.multi_cell(
        width,
        theme.body_size * _LINE_SPACING,
        _safe_text(block.body, pdf),
        new_x=XPos.LMARGIN,
        new_y=YPos.NEXT,
    )
    pdf.ln(theme.body_size)


def _write_columns(
    pdf: FPDF,
    theme: TemplateTheme,
    fonts: Typography,
    layout: DocumentLayout,
) -> None:
    """Write each column from the same starting point.

    A column that overflows continues on the following pages in its own
    lane, so sections never move from one column to the other.
    """
    count = len(layout.columns)
    gutter = theme.column_gutter
    width = (pdf.epw - gutter * (count - 1)) / count
    left_margin = pdf.l_margin
    start_page, start_y = pdf.page, pdf.get_y()
    end_page, end_y = start_page, start_y

    for index, column in enumerate(layout.columns):
        x = left_margin + index * (width + gutter)
        pdf.page = start_page
        pdf.set_left_margin(x)
        pdf.set_xy(x, start_y)
        for block in column:
            _write_section(pdf, theme, fonts, block, width=width)
        end_page, end_y = max((end_page, end_y), (pdf.page, pdf.get_y()))

    pdf.page = end_page
    pdf.set_left_margin(left_margin)
    pdf.set_xy(left_margin, end_y)


def _safe_text(text: str, pdf: FPDF) -> str:
    """Ensure text is encodable by the current font. Replace if needed."""
    if pdf.is_ttf_font:
        return text
    text = text.translate(_LATIN1_FALLBACKS)
    try:
        text.encode("latin-1")
        return text
    except UnicodeEncodeError:
        return text.encode("latin-1", errors="replace").decode("latin-1")
