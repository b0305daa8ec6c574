"""Staticdatagen CLI: Typer-based command-line interface.

Provides the ``staticdatagen`` command with subcommands for validating a
build description, generating its artifacts, and listing artifact kinds.

All output uses Rich for formatted terminal display.
"""
