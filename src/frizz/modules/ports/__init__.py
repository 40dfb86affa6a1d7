"""Port catalog and port range resolution."""

from .catalog import PORT_CATALOG, TransportProtocol, get_most_common_ports, service_name
from .resolver import PortRange, ResolvedPorts, resolve_ports, resolve_range

__all__ = [
    "PORT_CATALOG",
    "PortRange",
    "ResolvedPorts",
    "TransportProtocol",
    "get_most_common_ports",
    "resolve_ports",
    "resolve_range",
    "service_name",
]
