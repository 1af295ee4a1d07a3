"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
RENDERING_PANEL = "Rendering"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

InputPathArgument = Annotated[
    list[Path] | None,
    typer.Argument(
        metavar="INPUT...",
        help="Source documents to convert, processed in the given order.",
        dir_okay=False,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML or TOML file overriding markers, sentinels, header and footer.",
        exists=True,
        dir_okay=False,
        readable=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

NumberedEquationsOption = Annotated[
    bool | None,
    typer.Option(
        "--numbered-equations/--unnumbered-equations",
        help="Number alignment rows (align) instead of leaving them unnumbered (align*).",
        show_default=False,
        rich_help_panel=RENDERING_PANEL,
    ),
]

OutputPathOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the LaTeX document to this file (single input only).",
        dir_okay=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

OutputDirOption = Annotated[
    Path | None,
    typer.Option(
        "--output-dir",
        "-d",
        help="Write one '<stem>.tex' file per input into this directory.",
        file_okay=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
