"""Shared CLI app objects and option helpers."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from frizz.config import is_verbose

app = typer.Typer(
    name="frizz",
    help="Concurrent port prober and HTTP transfer tool",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def normalize_verbose(verbose: bool) -> bool:
    """Resolve effective verbose flag from CLI arg and FRIZZ_VERBOSE."""
    effective = verbose if isinstance(verbose, bool) else False
    return effective or is_verbose()


def setup_logging(verbose: bool) -> None:
    """Route package loggers to a rich handler on stderr."""
    handler = RichHandler(console=err_console, show_path=False, rich_tracebacks=False)
    logger = logging.getLogger("frizz")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def coerce_positive_int(value: int | None, default: int) -> int:
    """Return value when positive int-like, otherwise fallback default."""
    return max(1, int(value)) if isinstance(value, int) else default


def coerce_positive_float(value: float | None, default: float) -> float:
    """Return value when positive float-like, otherwise fallback default."""
    if isinstance(value, (int, float)) and value > 0:
        return float(value)
    return default


def fail(message: str) -> typer.Exit:
    """Print an error in red and return the exit to raise."""
    err_console.print(f"[red]Error: {message}[/red]", highlight=False)
    return typer.Exit(1)
