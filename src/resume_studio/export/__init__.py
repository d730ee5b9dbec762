"""PDF and HTML export for resume-studio."""
from resume_studio.export.html_preview import render_html_preview, save_html
from resume_studio.export.layout import DocumentLayout, SectionBlock, plan_layout
from resume_studio.export.pdf_renderer import render_document, render_resume_pdf
from resume_studio.export.themes import AVAILABLE_TEMPLATES, THEMES, get_theme

__all__ = [
    "AVAILABLE_TEMPLATES",
    "DocumentLayout",
    "SectionBlock",
    "THEMES",
    "get_theme",
    "plan_layout",
    "render_document",
    "render_html_preview",
    "render_resume_pdf",
    "save_html",
]
