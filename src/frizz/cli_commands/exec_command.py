"""HTTP exec CLI command."""

from typing import Optional

import typer

from frizz.config import get_http_timeout, get_stream_threshold, get_user_agent
from frizz.errors import FrizzError
from frizz.tools.http import ExecRequest, FizzResult

from .deps import cli_module
from .shared import app, coerce_positive_float, console, fail, normalize_verbose, setup_logging


def print_result(result: FizzResult) -> None:
    """Print status, headers and body in the classic red/green/blue layout."""
    console.print(result.status_code, style="red", markup=False, highlight=False)
    console.print(result.headers, style="green", markup=False, highlight=False)
    console.print(result.body, style="blue", markup=False, highlight=False)


@app.command("exec")
def exec_request(
    url: str = typer.Argument(..., help="Request URL"),
    method: str = typer.Option("GET", "--method", "-X", help="HTTP method"),
    data: str = typer.Option(
        "", "--data", "-d", help="Request body, or @file to send a file's contents"
    ),
    user_agent: Optional[str] = typer.Option(
        None, "--user-agent", "-A", help="User-Agent header (FRIZZ_USER_AGENT)"
    ),
    insecure: bool = typer.Option(
        False, "--insecure", "-k", help="Skip TLS certificate validation"
    ),
    no_hostname_check: bool = typer.Option(
        False, "--no-hostname-check", help="Skip TLS hostname validation"
    ),
    progress: bool = typer.Option(
        False, "--progress", help="Stream the response to a file with a progress bar"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", help="Request timeout in seconds (FRIZZ_HTTP_TIMEOUT)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace connection details"),
) -> None:
    """Execute a single HTTP request."""
    cli = cli_module()
    effective_verbose = normalize_verbose(verbose)
    setup_logging(effective_verbose)

    request = ExecRequest(
        url=url,
        user_agent=user_agent or get_user_agent(),
        verbose=effective_verbose,
        disable_cert_validation=insecure,
        disable_hostname_validation=no_hostname_check,
        post_data=data,
        http_method=method.upper(),
        progress_bar=progress,
        timeout=coerce_positive_float(timeout, default=get_http_timeout()),
        stream_threshold=get_stream_threshold(),
    )

    try:
        result = cli.safe_async_run(cli.execute_request(request))
    except FrizzError as exc:
        raise fail(str(exc))
    print_result(result)
