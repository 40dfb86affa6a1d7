"""Raw socket CLI command."""

import typer

from frizz.errors import FrizzError

from .deps import cli_module
from .shared import app, fail, normalize_verbose, setup_logging


@app.command("socket")
def socket_session(
    target: str = typer.Argument(..., help="Target as tcp://host:port or host:port"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose diagnostics"),
) -> None:
    """Open an interactive line-oriented TCP session ('exit' to quit)."""
    cli = cli_module()
    setup_logging(normalize_verbose(verbose))
    try:
        cli.safe_async_run(cli.open_socket_target(target))
    except (FrizzError, OSError) as exc:
        raise fail(str(exc))
