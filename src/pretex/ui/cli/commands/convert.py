"""Implementation of the `pretex` conversion command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from pretex.adapters.latex import LaTeXRenderer
from pretex.api import transpile
from pretex.core.config import PretexConfig, load_config
from pretex.core.exceptions import ConfigError, UnrecoverableError
from pretex.version import get_version

from .._options import (
    DIAGNOSTICS_PANEL,
    ConfigOption,
    DebugOption,
    InputPathArgument,
    NumberedEquationsOption,
    OutputDirOption,
    OutputPathOption,
    VerboseOption,
)
from ..diagnostics import CliEmitter
from ..state import emit_error, render_message, set_cli_state
from ..utils import output_target_for, read_source, write_output_file


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pretex {get_version()}")
        raise typer.Exit()


def _resolve_config(config_path: Path | None, numbered_equations: bool | None) -> PretexConfig:
    config = load_config(config_path) if config_path is not None else PretexConfig()
    if numbered_equations is not None:
        config = config.model_copy(update={"numbered_equations": numbered_equations})
    return config


def convert(
    inputs: InputPathArgument = None,
    output: OutputPathOption = None,
    output_dir: OutputDirOption = None,
    config_path: ConfigOption = None,
    numbered_equations: NumberedEquationsOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the pretex version and exit.",
            callback=_version_callback,
            is_eager=True,
            rich_help_panel=DIAGNOSTICS_PANEL,
        ),
    ] = False,
) -> None:
    """Convert line-oriented source documents into LaTeX."""

    state = set_cli_state(verbosity=verbose, debug=debug)
    document_paths = list(inputs or [])
    if not document_paths:
        raise typer.BadParameter("Provide at least one source document.")
    if output is not None and output_dir is not None:
        raise typer.BadParameter("Use either --output or --output-dir, not both.")
    if output is not None and len(document_paths) > 1:
        raise typer.BadParameter("--output accepts a single input; use --output-dir instead.")

    try:
        config = _resolve_config(config_path, numbered_equations)
    except ConfigError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    renderer = LaTeXRenderer(config=config)
    emitter = CliEmitter(state)

    for path in document_paths:
        try:
            text = read_source(path)
        except (OSError, UnicodeDecodeError) as exc:
            emit_error(f"error while reading {path}: {exc}", exception=exc)
            raise typer.Exit(code=1) from exc

        try:
            latex = transpile(text, config, renderer=renderer, emitter=emitter, source=str(path))
        except UnrecoverableError as exc:
            if state.show_tracebacks:
                raise
            emit_error(f"{exc} in {path}", exception=exc)
            raise typer.Exit(code=1) from exc

        if output_dir is not None:
            target: Path | None = output_target_for(path, output_dir)
        else:
            target = output

        if target is None:
            typer.echo(latex)
            continue

        try:
            write_output_file(target, latex)
        except OSError as exc:
            emit_error(f"error while writing {target}: {exc}", exception=exc)
            raise typer.Exit(code=1) from exc
        if state.verbosity >= 1:
            render_message("info", f"Wrote {target}")
