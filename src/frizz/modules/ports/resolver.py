"""Decide which ports a scan probes."""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import TransportProtocol, get_most_common_ports

MAX_PORT = 65535

# Merged catalog order when neither ports nor protocol are given.
_MERGE_ORDER = (TransportProtocol.SCTP, TransportProtocol.TCP, TransportProtocol.UDP)


@dataclass(frozen=True)
class PortRange:
    """Inclusive port bounds; min_port == max_port means no explicit range."""

    min_port: int = 0
    max_port: int = 0

    def __post_init__(self) -> None:
        for value in (self.min_port, self.max_port):
            if not 0 <= value <= MAX_PORT:
                raise ValueError(f"Port out of range 0-{MAX_PORT}: {value}")

    @property
    def is_explicit(self) -> bool:
        return self.min_port != self.max_port


@dataclass(frozen=True)
class ResolvedPorts:
    """Ports to probe plus the count used to scale progress.

    ``kind`` is ``"range"``, ``"catalog"`` or ``"merged"``. For ranges,
    ``count`` is ``max - min``, one less than ``len(ports)``.
    """

    ports: tuple[int, ...]
    count: int
    kind: str

    def __iter__(self):
        return iter(self.ports)

    def __len__(self) -> int:
        return len(self.ports)


def _merged_common_ports() -> list[int]:
    seen: set[int] = set()
    merged: list[int] = []
    for protocol in _MERGE_ORDER:
        for port in get_most_common_ports(protocol):
            if port not in seen:
                seen.add(port)
                merged.append(port)
    return merged


def resolve_ports(
    min_port: int,
    max_port: int,
    protocol: TransportProtocol = TransportProtocol.NONE,
) -> ResolvedPorts:
    """
    Resolve the port sequence for a scan.

    Args:
        min_port: Lower bound of an explicit range
        max_port: Upper bound of an explicit range
        protocol: Transport protocol; selects the catalog when no range is given

    Returns:
        ResolvedPorts with the sequence and its progress count
    """
    if min_port != max_port:
        ports = tuple(range(min_port, max_port + 1))
        return ResolvedPorts(ports=ports, count=max(0, max_port - min_port), kind="range")

    if protocol is not TransportProtocol.NONE:
        ports = tuple(get_most_common_ports(protocol))
        return ResolvedPorts(ports=ports, count=len(ports), kind="catalog")

    ports = tuple(_merged_common_ports())
    return ResolvedPorts(ports=ports, count=len(ports), kind="merged")


def resolve_range(port_range: PortRange, protocol: TransportProtocol) -> ResolvedPorts:
    """Resolve ports from a PortRange value."""
    return resolve_ports(port_range.min_port, port_range.max_port, protocol)
