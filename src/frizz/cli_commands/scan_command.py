"""Scan CLI command."""

import sys
from pathlib import Path
from typing import Optional

import typer

from frizz.config import get_probe_timeout, get_scan_concurrency
from frizz.errors import FrizzError
from frizz.modules.ports import PortRange, TransportProtocol
from frizz.modules.scanner import ScanConfig

from .deps import cli_module
from .shared import (
    app,
    coerce_positive_float,
    coerce_positive_int,
    fail,
    normalize_verbose,
    setup_logging,
)


def build_scan_config(
    target: str,
    min_port: int,
    max_port: int,
    protocol: str,
    concurrency: Optional[int],
    timeout: Optional[float],
) -> ScanConfig:
    """Build the immutable scan configuration from CLI values and config defaults."""
    return ScanConfig(
        target=target,
        concurrency=coerce_positive_int(concurrency, default=get_scan_concurrency()),
        timeout=coerce_positive_float(timeout, default=get_probe_timeout()),
        port_range=PortRange(min_port, max_port),
        protocol=TransportProtocol.parse(protocol),
    )


@app.command()
def scan(
    target: str = typer.Argument(..., help="Target IP address or host name"),
    min_port: int = typer.Option(0, "--min-port", help="First port of an explicit range"),
    max_port: int = typer.Option(0, "--max-port", help="Last port of an explicit range"),
    protocol: str = typer.Option(
        "",
        "--protocol",
        "-P",
        help="Transport protocol: tcp, udp, sctp (default: all common ports)",
    ),
    concurrency: Optional[int] = typer.Option(
        None, "--concurrency", "-c", help="Maximum probes in flight (FRIZZ_CONCURRENCY)"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", help="Per-probe timeout in seconds (FRIZZ_TIMEOUT)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the result table to a file instead of stdout"
    ),
    no_progress: bool = typer.Option(False, "--no-progress", help="Hide the progress bar"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose diagnostics"),
) -> None:
    """Probe ports on a target and list the ones that respond."""
    cli = cli_module()
    setup_logging(normalize_verbose(verbose))

    try:
        config = build_scan_config(target, min_port, max_port, protocol, concurrency, timeout)
    except ValueError as exc:
        raise fail(str(exc))

    try:
        if output is None:
            cli.safe_async_run(
                cli.run_scan(config, sys.stdout.buffer, show_progress=not no_progress)
            )
        else:
            with open(output, "wb") as sink:
                cli.safe_async_run(cli.run_scan(config, sink, show_progress=not no_progress))
    except (FrizzError, OSError) as exc:
        raise fail(str(exc))
