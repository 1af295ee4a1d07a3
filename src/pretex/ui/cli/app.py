"""Typer application exposing the conversion command as ``pretex``."""

from __future__ import annotations

import typer

from .commands.convert import convert


app = typer.Typer(
    help="Convert line-oriented source documents into LaTeX.",
    context_settings={"help_option_names": ["--help", "-h"]},
    add_completion=False,
)
app.command()(convert)


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "main"]
