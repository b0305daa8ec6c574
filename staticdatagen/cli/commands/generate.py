"""``staticdatagen generate BUILD_JSON --output DIR``: write artifacts.

Site-level artifacts land in DIR; per-page artifacts under ``DIR/<page stem>/``.
Artifacts that fail validation are reported and skipped.
"""

from __future__ import annotations

from pathlib import Path

import typer

from staticdatagen.cli.loading import configure_logging, console, load_build_description
from staticdatagen.config import settings
from staticdatagen.core.errors import DataError
from staticdatagen.core.orchestrator import BuildError, BuildOrchestrator, write_artifacts


def generate_cmd(
    build_json: Path = typer.Argument(
        ...,
        help="Path to the JSON build description.",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (defaults to the configured site_dir).",
    ),
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Override the configured log level.",
    ),
) -> None:
    """Generate and write every artifact of a build description."""
    configure_logging(log_level)
    description = load_build_description(build_json)
    output_dir = output or settings.site_dir

    try:
        orchestrator = BuildOrchestrator(
            description.site, max_workers=settings.max_workers
        )
    except DataError as exc:
        console.print(f"[bold red]Invalid site defaults:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    report = orchestrator.run_description(description)
    try:
        written = write_artifacts(report, output_dir)
    except BuildError as exc:
        console.print(f"[bold red]Build failed:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    for path in written:
        console.print(f"  [green]wrote[/green] {path}")
    for failure in report.failures:
        console.print(
            f"  [yellow]skipped[/yellow] {failure.kind.value} "
            f"({failure.page or 'site'}): {failure.error}"
        )
    console.print(
        f"[bold]{len(written)}[/bold] file(s) written to {output_dir}, "
        f"[bold]{len(report.failures)}[/bold] skipped."
    )
