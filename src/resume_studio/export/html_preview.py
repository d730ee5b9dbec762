from __future__ import annotations

from pathlib import Path

import markdown
from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup, escape

from resume_studio.export.layout import plan_layout
from resume_studio.export.themes import THEMES
from resume_studio.models.resume import ResumeContent, TemplateStyle

HTML_TEMPLATES_DIR = Path(__file__).parent / "templates"


def render_html_preview(
    resume: ResumeContent,
    template_style: TemplateStyle | str | None = None,
) -> str:
    """Render the same section layout as the PDF to a themed HTML page."""
    layout = plan_layout(resume, template_style)
    theme = THEMES[layout.template_style]
    columns = [
        [
            {"heading": block.heading, "body": Markup(_body_to_html(block.body))}
            for block in column
        ]
        for column in layout.columns
    ]
    env = Environment(
        loader=FileSystemLoader(str(HTML_TEMPLATES_DIR)),
        autoescape=True,
    )
    template = env.get_template("resume.html")
    return template.render(title=layout.title, theme=theme, columns=columns)


def save_html(html_content: str, output_path: str | Path) -> Path:
    """Save HTML content to file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html_content, encoding="utf-8")
    return path


def _body_to_html(text: str) -> str:
    # Escape before markdown so user markup stays literal
    return markdown.markdown(str(escape(text)), extensions=["nl2br"])
