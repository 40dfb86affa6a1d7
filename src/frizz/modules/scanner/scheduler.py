"""Bounded-concurrency port scan scheduler."""

from __future__ import annotations

import asyncio
import logging
import socket
import time
from collections.abc import Awaitable, Callable, Iterator

from frizz.errors import ScanError
from frizz.modules.ports import ResolvedPorts, TransportProtocol, resolve_range, service_name
from frizz.utils.progress import ProgressReporter

from .models import ScanConfig, ScanResult
from .probe import probe_port

logger = logging.getLogger(__name__)

ProbeFunc = Callable[[str, int, float, TransportProtocol], Awaitable[int]]


async def resolve_target(target: str) -> str:
    """Resolve a host name once so probes do not repeat the lookup."""
    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(target, None, type=socket.SOCK_STREAM)
    except socket.gaierror as exc:
        raise ScanError(f"Could not resolve target {target}: {exc}") from exc
    if not infos:
        raise ScanError(f"Could not resolve target {target}")
    # IPv4 addresses sort first.
    infos = sorted(infos, key=lambda info: info[0] != socket.AF_INET)
    return infos[0][4][0]


class PortScanner:
    """Fans ports out to a fixed-width pool of probe workers."""

    def __init__(
        self,
        config: ScanConfig,
        probe: ProbeFunc = probe_port,
        progress: ProgressReporter | None = None,
    ):
        self.config = config
        self.probe = probe
        self.progress = progress
        self.resolved: ResolvedPorts = resolve_range(config.port_range, config.protocol)
        self._open_ports: set[int] = set()
        self._lock = asyncio.Lock()
        self._in_flight = 0
        self._peak_in_flight = 0
        self._settled = 0

    def make_progress(self, enabled: bool = True) -> ProgressReporter:
        """Build a progress reporter scaled by the resolver's count."""
        cfg = self.config
        description = (
            f"Scanning ports for {cfg.target} min-max ports:"
            f"{cfg.port_range.min_port},{cfg.port_range.max_port}"
        )
        return ProgressReporter(description, self.resolved.count, enabled=enabled)

    async def _probe_one(self, address: str, port: int) -> None:
        self._in_flight += 1
        self._peak_in_flight = max(self._peak_in_flight, self._in_flight)
        try:
            result = await self.probe(address, port, self.config.timeout, self.config.protocol)
        except Exception as exc:
            # A failing probe counts as closed; it never aborts the scan.
            logger.debug("Probe of %s:%s failed: %s", address, port, exc)
            result = 0
        finally:
            self._in_flight -= 1
            self._settled += 1
            if self.progress is not None:
                self.progress.advance(1)
        if result > 0:
            async with self._lock:
                self._open_ports.add(result)

    async def _worker(self, address: str, ports: Iterator[int]) -> None:
        for port in ports:
            await self._probe_one(address, port)

    async def scan(self) -> ScanResult:
        """Probe every resolved port and return the open ones in resolved order."""
        started = time.perf_counter()
        address = await resolve_target(self.config.target)
        ports = iter(self.resolved.ports)
        width = min(self.config.concurrency, len(self.resolved)) or 1
        logger.debug(
            "Scanning %s (%s) with %d workers over %d ports",
            self.config.target,
            address,
            width,
            len(self.resolved),
        )

        workers = [asyncio.create_task(self._worker(address, ports)) for _ in range(width)]
        await asyncio.gather(*workers)

        open_ports = [port for port in self.resolved.ports if port in self._open_ports]
        services = {port: service_name(port, self.config.protocol) for port in open_ports}
        return ScanResult(
            target=self.config.target,
            protocol=self.config.protocol,
            open_ports=open_ports,
            services=services,
            probed=self._settled,
            peak_in_flight=self._peak_in_flight,
            elapsed=time.perf_counter() - started,
        )


async def scan(config: ScanConfig, progress: ProgressReporter | None = None) -> ScanResult:
    """Convenience wrapper around PortScanner.scan()."""
    return await PortScanner(config, progress=progress).scan()
