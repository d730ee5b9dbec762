"""CLI interface using typer + rich."""

from __future__ import annotations

import json
import logging
import webbrowser
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from resume_studio.analysis.suggestion_engine import generate_suggestions
from resume_studio.config import AppConfig, load_config
from resume_studio.exceptions import ResumeStudioError
from resume_studio.export.html_preview import render_html_preview, save_html
from resume_studio.export.pdf_renderer import render_document
from resume_studio.export.themes import THEMES
from resume_studio.models.suggestion import Suggestion
from resume_studio.services.resume_service import ResumeService, parse_suggestions
from resume_studio.storage.resume_store import ResumeStore
from resume_studio.utils.sanitizer import sanitize

app = typer.Typer(
    name="resume-studio",
    help="Build, review and export resumes.",
    no_args_is_help=True,
)
console = Console()

_PRIORITY_COLORS = {"high": "red", "medium": "yellow", "low": "cyan"}


class _State:
    config: AppConfig | None = None
    db: Path | None = None


state = _State()


@app.callback()
def main(
    config_file: Path = typer.Option(None, "--config", help="config.yaml path"),
    db: Path = typer.Option(None, "--db", help="Resume database path (overrides config)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Build, review and export resumes."""
    try:
        config = load_config(config_file)
    except (TypeError, ValueError) as e:
        console.print(f"[red]Invalid config: {e}[/red]")
        raise typer.Exit(1)
    state.config = config
    state.db = db
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.logging.numeric_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _config() -> AppConfig:
    return state.config or load_config()


def _service() -> ResumeService:
    config = _config()
    store = ResumeStore(db_path=state.db or config.storage.resolved_db_path)
    return ResumeService(store, font_path=config.export.font_path)


def _load_draft(file: Path) -> dict:
    """Read resume fields from a YAML or JSON file."""
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)
    text = file.read_text(encoding="utf-8")
    data = json.loads(text) if file.suffix == ".json" else yaml.safe_load(text)
    if not isinstance(data, dict):
        console.print(f"[red]Expected a mapping of resume fields in {file}[/red]")
        raise typer.Exit(1)
    return data


def _print_suggestions(suggestions: list[Suggestion]) -> None:
    if not suggestions:
        console.print("[green]No suggestions. The resume looks good.[/green]")
        return
    for i, s in enumerate(suggestions, 1):
        color = _PRIORITY_COLORS.get(s.priority, "white")
        console.print(Panel(
            f"{s.message}\n\n[dim]{s.apply_template}[/dim]",
            title=f"{i}. {s.section} [{color}]({s.priority})[/{color}]",
            border_style=color,
        ))


def _fail(error: ResumeStudioError) -> None:
    console.print(f"[red]{error}[/red]")
    raise typer.Exit(1)


@app.command()
def create(
    file: Path = typer.Argument(help="Resume fields as YAML or JSON"),
    owner: str = typer.Option("me", "--owner", help="Owner label"),
    template: str = typer.Option(None, "--template", "-t", help="classic, minimal or modern"),
) -> None:
    """Validate and store a new resume."""
    draft = _load_draft(file)
    if template:
        draft["template_style"] = template
    draft.setdefault("template_style", _config().export.default_template)
    try:
        resume = _service().create(draft, owner=owner)
    except ResumeStudioError as e:
        _fail(e)
    console.print(f"[green]Created resume {resume.resume_id}: {resume.title}[/green]")


@app.command()
def update(
    resume_id: int = typer.Argument(help="Resume id"),
    file: Path = typer.Argument(help="Resume fields as YAML or JSON"),
) -> None:
    """Replace a stored resume's content."""
    draft = _load_draft(file)
    try:
        resume = _service().update(resume_id, draft)
    except ResumeStudioError as e:
        _fail(e)
    console.print(f"[green]Updated resume {resume.resume_id}: {resume.title}[/green]")


@app.command("list")
def list_resumes(
    owner: str = typer.Option(None, "--owner", help="Only this owner's resumes"),
) -> None:
    """List stored resumes."""
    resumes = _service().list(owner=owner)
    if not resumes:
        console.print("[yellow]No resumes stored.[/yellow]")
        return
    table = Table("ID", "Title", "Owner", "Template", "Updated")
    for r in resumes:
        table.add_row(
            str(r.resume_id),
            r.title,
            r.owner,
            r.template_style.value,
            r.updated_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


@app.command()
def show(resume_id: int = typer.Argument(help="Resume id")) -> None:
    """Show a stored resume and its last suggestions."""
    try:
        resume = _service().get(resume_id)
    except ResumeStudioError as e:
        _fail(e)
    body = []
    for label, text in (
        ("Personal Information", resume.personal_info),
        ("Education", resume.education),
        ("Experience", resume.experience),
        ("Skills", resume.skills),
    ):
        body.append(f"[bold]{label}[/bold]\n{text or '[dim]-[/dim]'}")
    console.print(Panel(
        "\n\n".join(body),
        title=f"{resume.title} ({resume.template_style.value})",
    ))
    stored = parse_suggestions(resume.suggestions_json)
    if stored:
        console.print(f"\n[bold]Last suggestions ({len(stored)}):[/bold]")
        _print_suggestions(stored)


@app.command()
def delete(resume_id: int = typer.Argument(help="Resume id")) -> None:
    """Delete a stored resume."""
    try:
        _service().delete(resume_id)
    except ResumeStudioError as e:
        _fail(e)
    console.print(f"[green]Deleted resume {resume_id}[/green]")


@app.command()
def suggest(resume_id: int = typer.Argument(help="Resume id")) -> None:
    """Generate improvement suggestions for a stored resume and save them."""
    try:
        payload = _service().generate_suggestions(resume_id)
    except ResumeStudioError as e:
        _fail(e)
    _print_suggestions([Suggestion.model_validate(s) for s in payload["suggestions"]])


@app.command()
def check(file: Path = typer.Argument(help="Resume fields as YAML or JSON")) -> None:
    """Sanitize and analyze a resume file without storing it."""
    result = sanitize(_load_draft(file))
    if not result.ok:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)
    _print_suggestions(generate_suggestions(result.fields))


@app.command()
def export(
    resume_id: int = typer.Argument(help="Resume id"),
    output: Path = typer.Option(None, "--output", "-o", help="Output PDF path"),
    template: str = typer.Option(None, "--template", "-t", help="Override the stored template"),
) -> None:
    """Render a stored resume to PDF."""
    service = _service()
    try:
        if template:
            resume = service.get(resume_id)
            document = render_document(
                resume.content,
                template,
                resume_id=resume_id,
                font_path=service.font_path,
            )
        else:
            document = service.download(resume_id)
    except ResumeStudioError as e:
        _fail(e)

    if output is None:
        output = _config().export.resolved_output_dir / document.filename
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(document.content)
    console.print(f"[green]PDF saved: {output}[/green]")


@app.command()
def preview(
    resume_id: int = typer.Argument(help="Resume id"),
    template: str = typer.Option(None, "--template", "-t", help="Override the stored template"),
    open_browser: bool = typer.Option(True, "--open/--no-open", help="Open in a browser"),
) -> None:
    """Render a stored resume to HTML and open it in the browser."""
    try:
        resume = _service().get(resume_id)
    except ResumeStudioError as e:
        _fail(e)
    html_path = _config().export.resolved_output_dir / f"resume-{resume_id}.html"
    save_html(render_html_preview(resume.content, template), html_path)
    console.print(f"[green]HTML saved: {html_path}[/green]")
    if open_browser:
        webbrowser.open(html_path.resolve().as_uri())


@app.command()
def stats() -> None:
    """Show aggregate resume statistics."""
    s = _service().stats()
    console.print(Panel(
        f"Total: {s.total_resumes} | 24h: {s.resumes_last_24h} | "
        f"7 days: {s.resumes_last_7_days} | 30 days: {s.resumes_last_30_days}\n"
        f"Average per day (30 days): {s.average_per_day:.2f}",
        title="Resume statistics",
    ))
    if s.template_usage:
        table = Table("Template", "Resumes")
        for usage in s.template_usage:
            table.add_row(usage.template_style, str(usage.count))
        console.print(table)
    if s.top_owners:
        table = Table("Owner", "Resumes")
        for activity in s.top_owners:
            table.add_row(activity.owner, str(activity.resume_count))
        console.print(table)


@app.command()
def templates() -> None:
    """List the available resume templates."""
    for style, theme in THEMES.items():
        layout = "two columns" if theme.columns == 2 else "single column"
        console.print(
            f"  [bold]{style.value}[/bold]: {layout}, {theme.fonts.title} "
            f"{theme.title_size}pt, accent {theme.palette.primary}"
        )


if __name__ == "__main__":
    app()
