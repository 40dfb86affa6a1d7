"""Data models for port scan configuration and results."""

from __future__ import annotations

from dataclasses import dataclass, field

from frizz.modules.ports import PortRange, TransportProtocol


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for one scan invocation."""

    target: str
    concurrency: int = 500
    timeout: float = 3.0
    port_range: PortRange = field(default_factory=PortRange)
    protocol: TransportProtocol = TransportProtocol.NONE

    def __post_init__(self) -> None:
        if not self.target:
            raise ValueError("Scan target is required")
        if self.concurrency < 1:
            raise ValueError(f"Concurrency must be a positive integer, got {self.concurrency}")
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")


@dataclass
class ScanResult:
    """Outcome of a finished scan."""

    target: str
    protocol: TransportProtocol
    open_ports: list[int] = field(default_factory=list)
    services: dict[int, str] = field(default_factory=dict)
    probed: int = 0
    peak_in_flight: int = 0
    elapsed: float = 0.0
