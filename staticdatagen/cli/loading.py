"""Shared CLI plumbing: logging setup and build-description loading."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from staticdatagen.config import settings
from staticdatagen.core.orchestrator import ArtifactKind, BuildDescription

console = Console()


def configure_logging(level: str | None = None) -> None:
    """Route ``staticdatagen`` loggers through Rich at *level* (settings default)."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def load_build_description(path: Path) -> BuildDescription:
    """Parse *path*; exits with code 2 on unreadable or malformed input.

    A description that names no artifact kinds gets the configured defaults.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        console.print(f"[bold red]Cannot read build description:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    try:
        description = BuildDescription.model_validate_json(text)
    except ValidationError as exc:
        console.print(f"[bold red]Malformed build description:[/bold red] {path}")
        console.print(str(exc))
        raise typer.Exit(code=2) from exc
    if not description.artifacts:
        description = description.model_copy(
            update={"artifacts": [ArtifactKind(kind) for kind in settings.artifacts]}
        )
    return description
