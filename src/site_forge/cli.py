"""site-forge CLI — Typer application.

Generates themed booking apps from a prompt and audits existing sites.  All
disk access goes through :mod:`site_forge.infrastructure.filesystem`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from site_forge.domain.entities import AuditStatus
from site_forge.domain.exceptions import EmptyPromptError, SiteForgeError
from site_forge.domain.serialization import to_jsonable
from site_forge.domain.value_objects import BusinessIdentity
from site_forge.infrastructure.config import get_settings
from site_forge.infrastructure.filesystem import scan_directory, write_file_tree
from site_forge.main import configure_logging
from site_forge.services.asset_generator import generate_asset_checklist
from site_forge.services.content_auditor import (
    audit_files,
    export_audit_json,
    format_audit_report,
)
from site_forge.services.file_emitter import generate_file_structure
from site_forge.services.generate_app import generate_app
from site_forge.services.prompt_parser import parse_theme_prompt
from site_forge.services.theme_compiler import generate_theme

app = typer.Typer(
    name="site-forge",
    help="Generate themed booking sites from a prompt and audit site content.",
    no_args_is_help=True,
)
console = Console()

_CHECKLIST_NAME = "asset-checklist.md"
_CONFIG_NAME = "app-config.json"
_STATUS_STYLE = {
    AuditStatus.CRITICAL: "red",
    AuditStatus.WARNING: "yellow",
    AuditStatus.CLEAN: "green",
}


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override SITE_FORGE_LOG_LEVEL"),
) -> None:
    """site-forge CLI."""
    configure_logging(log_level or get_settings().log_level)


def _require_prompt(words: list[str]) -> str:
    prompt = " ".join(words).strip()
    if not prompt:
        raise EmptyPromptError(
            'Please provide a prompt, e.g. site-forge generate "fitness studio with modern blue theme"'
        )
    return prompt


def _fail(exc: SiteForgeError) -> NoReturn:
    console.print(f"[red]Error:[/red] {exc}")
    raise typer.Exit(code=1)


@app.command("generate")
def generate_command(
    prompt: list[str] = typer.Argument(None, help="Natural-language description of the site"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Parent directory for the generated app"
    ),
) -> None:
    """Generate a new app from a natural-language prompt."""
    try:
        text = _require_prompt(prompt or [])
        config = generate_app(text)
        files = generate_file_structure(config)
        checklist = generate_asset_checklist(config.assets)

        identity = BusinessIdentity.from_name(config.name, config.domain)
        target = (output_dir or Path(get_settings().output_dir)) / identity.slug
        write_file_tree(
            target,
            {
                **files,
                _CONFIG_NAME: json.dumps(to_jsonable(config), indent=2),
                _CHECKLIST_NAME: checklist,
            },
        )
    except SiteForgeError as exc:
        _fail(exc)

    theme = config.theme
    console.print(f"\n[bold green]Generated[/bold green] {config.name} ({config.domain})")
    console.print(f"  Theme: {theme.colors.primary} ({theme.typography.heading_font})")
    console.print(f"  Style: {'Maximalist' if theme.animations.particle_system else 'Clean'}")
    console.print(
        f"  Terminology: {theme.terminology.book} → {theme.terminology.service}\n"
    )
    for path in [*files, _CONFIG_NAME, _CHECKLIST_NAME]:
        console.print(f"  [green]✓[/green] {path}")
    console.print(f"\nApp written to [bold]{target}[/bold]")


app.command("create", help="Alias for generate")(generate_command)


@app.command("audit")
def audit_command(
    directory: Path = typer.Argument(Path("."), help="Directory to scan"),
    theme_prompt: Optional[str] = typer.Option(
        None, "--prompt", "-p", help="Also flag generic terms this theme would replace"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Audit site files for template content, placeholders and missing SEO tags."""
    settings = get_settings()
    try:
        files = scan_directory(
            directory,
            settings.audit_extensions,
            settings.audit_skip_dirs,
            settings.max_file_size_kb,
        )
        theme = generate_theme(parse_theme_prompt(theme_prompt)) if theme_prompt else None
        report = audit_files(files, theme)
        formatted = format_audit_report(report)
        report_path = directory / settings.audit_report_name
        write_file_tree(directory, {settings.audit_report_name: formatted})
    except SiteForgeError as exc:
        _fail(exc)

    if as_json:
        console.print_json(export_audit_json(report))
        return

    table = Table(title=f"Content audit: {directory}")
    table.add_column("File")
    table.add_column("Score", justify="right")
    table.add_column("Status")
    table.add_column("Issues", justify="right")
    for result in report.results:
        style = _STATUS_STYLE[result.status]
        table.add_row(
            result.file,
            str(result.score),
            f"[{style}]{result.status.value}[/{style}]",
            str(len(result.issues)),
        )

    summary = report.summary
    console.print(table)
    console.print(
        f"{summary.total_files} file(s) scanned, {summary.files_with_issues} with issues, "
        f"average score {summary.average_score}/100"
    )
    for recommendation in report.recommendations:
        console.print(f"  • {recommendation}")
    console.print(f"\nFull report saved to [bold]{report_path}[/bold]")


@app.command("assets")
def assets_command(
    prompt: list[str] = typer.Argument(None, help="Theme description"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o"),
) -> None:
    """Print and save the asset checklist for a theme."""
    try:
        text = _require_prompt(prompt or [])
        checklist = generate_asset_checklist(generate_app(text).assets)
        target = output_dir or Path(get_settings().output_dir)
        write_file_tree(target, {_CHECKLIST_NAME: checklist})
    except SiteForgeError as exc:
        _fail(exc)

    console.print(checklist, markup=False)
    console.print(f"\nChecklist saved to [bold]{target / _CHECKLIST_NAME}[/bold]")


@app.command("serve")
def serve_command() -> None:
    """Run the HTTP API."""
    from site_forge.main import main as serve

    serve()


if __name__ == "__main__":
    app()
