"""Scan entry point that writes a result table to a byte sink."""

from __future__ import annotations

from typing import BinaryIO

from rich.console import Console

from frizz.modules.ports import TransportProtocol
from frizz.utils.progress import ProgressReporter

from .models import ScanConfig, ScanResult
from .scheduler import PortScanner

TABLE_HEADER = "Port\tService\t\tProtocol\n"


def format_table(result: ScanResult) -> str:
    """Render open ports as a tab-separated table."""
    protocol = "" if result.protocol is TransportProtocol.NONE else result.protocol.value
    lines = [TABLE_HEADER]
    for port in result.open_ports:
        lines.append(f"{port}\t{result.services.get(port, '')}\t\t{protocol}\n")
    return "".join(lines)


def write_table(result: ScanResult, sink: BinaryIO) -> None:
    sink.write(format_table(result).encode("utf-8"))
    sink.flush()


async def run_scan(
    config: ScanConfig,
    sink: BinaryIO,
    *,
    show_progress: bool = True,
    stderr: Console | None = None,
) -> ScanResult:
    """
    Scan, write the result table to ``sink`` and report elapsed time.

    Args:
        config: Scan configuration
        sink: Binary writer receiving the table
        show_progress: Render a live progress bar on stderr
        stderr: Console for diagnostics (defaults to stderr)

    Returns:
        The finished ScanResult
    """
    diagnostics = stderr or Console(stderr=True)
    scanner = PortScanner(config)
    progress: ProgressReporter = scanner.make_progress(enabled=show_progress)
    scanner.progress = progress

    with progress:
        result = await scanner.scan()

    write_table(result, sink)
    diagnostics.print(f"Elapsed time to scan ports: {result.elapsed:.2f}s")
    return result
