"""Per-invocation CLI settings and stderr reporting."""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass
import sys

from rich.console import Console
from rich.text import Text


@dataclass(slots=True)
class CLIState:
    """Verbosity and traceback settings of the running command."""

    verbosity: int = 0
    show_tracebacks: bool = False

    @property
    def err_console(self) -> Console:
        """Return a console bound to the current ``sys.stderr``."""
        return Console(file=sys.stderr, highlight=False, soft_wrap=True)


_STATE: ContextVar[CLIState] = ContextVar("pretex_cli_state", default=CLIState())


def get_cli_state() -> CLIState:
    return _STATE.get()


def set_cli_state(*, verbosity: int = 0, debug: bool = False) -> CLIState:
    """Install fresh settings for the command about to run."""
    state = CLIState(verbosity=max(0, verbosity), show_tracebacks=debug)
    _STATE.set(state)
    return state


def render_message(level: str, message: str, *, exception: BaseException | None = None) -> None:
    """Print a message to stderr; stdout only ever carries LaTeX.

    ``info`` messages are printed verbatim. Errors are prefixed and, from
    ``-v`` on, followed by the exception type and its direct cause.
    """
    state = get_cli_state()
    if level == "info":
        state.err_console.print(Text(message))
        return

    text = Text.assemble((f"{level}: ", "bold red"), (message, "red"))
    if exception is not None and state.verbosity >= 1:
        text.append(f"\ntype: {type(exception).__name__}", style="red")
        cause = exception.__cause__
        if cause is not None and state.verbosity >= 2:
            text.append(f"\ncaused by: {type(cause).__name__}: {cause}", style="red")
    state.err_console.print(text)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    render_message("error", message, exception=exception)


__all__ = [
    "CLIState",
    "emit_error",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]
