"""Single-port connectivity probes."""

from __future__ import annotations

import asyncio
import logging

from frizz.modules.ports import TransportProtocol

logger = logging.getLogger(__name__)


async def probe_tcp(target: str, port: int, timeout: float) -> int:
    """Return ``port`` when a TCP handshake completes within ``timeout``, else 0."""
    try:
        _, writer = await asyncio.wait_for(asyncio.open_connection(target, port), timeout)
    except (TimeoutError, OSError):
        return 0
    writer.close()
    try:
        await writer.wait_closed()
    except OSError:
        pass
    return port


async def probe_udp(target: str, port: int, timeout: float) -> int:
    """
    Associate an ephemeral UDP socket with (target, port).

    UDP has no handshake: a non-zero result only means the local stack
    accepted the association (address resolved, route found). It does not
    prove that anything is listening on the remote port.
    """
    loop = asyncio.get_running_loop()
    transport = None
    try:
        transport, _ = await asyncio.wait_for(
            loop.create_datagram_endpoint(
                asyncio.DatagramProtocol,
                remote_addr=(target, port),
            ),
            timeout,
        )
    except TimeoutError:
        return 0
    except OSError as exc:
        # Bind/connect failures stay local to this probe.
        logger.debug("UDP socket setup failed for %s:%s: %s", target, port, exc)
        return 0
    finally:
        if transport is not None:
            transport.close()
    return port


async def probe_port(
    target: str,
    port: int,
    timeout: float,
    protocol: TransportProtocol = TransportProtocol.TCP,
) -> int:
    """Probe one port; returns the port when it responded, 0 otherwise.

    SCTP and unspecified protocols use the TCP connect probe.
    """
    if protocol is TransportProtocol.UDP:
        return await probe_udp(target, port, timeout)
    return await probe_tcp(target, port, timeout)
