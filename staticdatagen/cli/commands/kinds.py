"""``staticdatagen kinds``: list the artifact kinds and their file names."""

from __future__ import annotations

from rich.table import Table

from staticdatagen.cli.loading import console
from staticdatagen.core.orchestrator import ArtifactKind


def kinds_cmd() -> None:
    """List every supported artifact kind."""
    table = Table(title="Artifact Kinds")
    table.add_column("Kind", style="cyan")
    table.add_column("File", style="green")
    table.add_column("Scope")
    for kind in ArtifactKind:
        table.add_row(kind.value, kind.filename, "site" if kind.site_level else "page")
    console.print(table)
