"""Concurrent port scanning."""

from .models import ScanConfig, ScanResult
from .probe import probe_port, probe_tcp, probe_udp
from .reporting import format_table, run_scan, write_table
from .scheduler import PortScanner, resolve_target, scan

__all__ = [
    "PortScanner",
    "ScanConfig",
    "ScanResult",
    "format_table",
    "probe_port",
    "probe_tcp",
    "probe_udp",
    "resolve_target",
    "run_scan",
    "scan",
    "write_table",
]
