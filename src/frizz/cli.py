"""frizz CLI - concurrent port prober and HTTP transfer tool."""

from frizz.cli_commands import exec_command, scan_command, socket_command  # noqa: F401
from frizz.cli_commands.shared import app, console
from frizz.modules.scanner import run_scan
from frizz.tools.http import execute_request
from frizz.tools.socket import open_socket_target
from frizz.utils.async_utils import safe_async_run

__all__ = [
    "app",
    "execute_request",
    "main",
    "open_socket_target",
    "run_scan",
    "safe_async_run",
]


@app.command()
def version() -> None:
    """Show the installed frizz version."""
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as pkg_version

    try:
        current_version = pkg_version("frizz")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"frizz {current_version}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
