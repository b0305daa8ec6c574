"""``staticdatagen validate BUILD_JSON``: check every page and artifact kind.

Runs factories and ``validate()`` through the orchestrator and prints a
pass/fail table.  Exits with code 1 if anything failed.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from staticdatagen.cli.loading import configure_logging, console, load_build_description
from staticdatagen.config import settings
from staticdatagen.core.errors import DataError
from staticdatagen.core.orchestrator import BuildOrchestrator


def validate_cmd(
    build_json: Path = typer.Argument(
        ...,
        help="Path to the JSON build description.",
    ),
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Override the configured log level.",
    ),
) -> None:
    """Validate every page of a build description without writing files."""
    configure_logging(log_level)
    description = load_build_description(build_json)

    try:
        orchestrator = BuildOrchestrator(
            description.site, max_workers=settings.max_workers
        )
    except DataError as exc:
        console.print(f"[bold red]Invalid site defaults:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    report = orchestrator.run_description(description)

    table = Table(title="Validation")
    table.add_column("Artifact", style="cyan")
    table.add_column("Page")
    table.add_column("Result", justify="center")
    table.add_column("Detail")
    for result in report.results:
        status = "[green]PASS[/green]" if result.ok else f"[red]{result.error_kind.upper()}[/red]"
        table.add_row(result.kind.value, result.page or "(site)", status, result.error)
    console.print(table)

    if not report.ok:
        console.print(f"[bold red]{len(report.failures)} artifact(s) failed.[/bold red]")
        raise typer.Exit(code=1)
    console.print("[bold green]All artifacts valid.[/bold green]")
