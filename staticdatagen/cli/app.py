"""Main Typer application: imports and registers all CLI commands.

Entry point: ``staticdatagen`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import typer

from staticdatagen.cli.commands.generate import generate_cmd
from staticdatagen.cli.commands.kinds import kinds_cmd
from staticdatagen.cli.commands.validate import validate_cmd

app = typer.Typer(
    name="staticdatagen",
    help="Staticdatagen: metadata artifacts for static sites.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="validate", help="Validate a build description.")(validate_cmd)
app.command(name="generate", help="Generate and write artifacts.")(generate_cmd)
app.command(name="kinds", help="List supported artifact kinds.")(kinds_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
