"""Line-oriented raw TCP session."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urlsplit

from prompt_toolkit import PromptSession
from rich.console import Console

from frizz.errors import RequestBuildError

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


def parse_socket_target(target: str) -> tuple[str, int]:
    """Split ``scheme://host:port`` into (host, port)."""
    parts = urlsplit(target if "://" in target else f"tcp://{target}")
    try:
        port = parts.port
    except ValueError as exc:
        raise RequestBuildError(f"Invalid socket target {target!r}: {exc}") from exc
    if not parts.hostname or port is None:
        raise RequestBuildError(f"Invalid socket target {target!r}: expected host:port")
    return parts.hostname, port


async def read_response(
    reader: asyncio.StreamReader, idle_timeout: float = 1.0, chunk_size: int = 4096
) -> bytes:
    """Read until EOF or until the peer stays silent for ``idle_timeout``."""
    data = bytearray()
    while True:
        try:
            chunk = await asyncio.wait_for(reader.read(chunk_size), idle_timeout)
        except TimeoutError:
            break
        if not chunk:
            break
        data.extend(chunk)
    return bytes(data)


async def open_socket_target(
    target: str,
    session: Any = None,
    console: Console | None = None,
    idle_timeout: float = 1.0,
) -> None:
    """
    Connect to ``target`` and relay prompt lines until ``exit`` or EOF.

    Args:
        target: ``tcp://host:port`` (any scheme) or ``host:port``
        session: Object with an async ``prompt_async(message)``; a
            prompt_toolkit PromptSession by default
        console: Output console
        idle_timeout: Seconds of silence that end one response
    """
    host, port = parse_socket_target(target)
    console = console or Console()
    session = session or PromptSession()
    logger.info("Socket connection to %s:%s", host, port)

    reader, writer = await asyncio.open_connection(host, port)
    peer = writer.get_extra_info("peername")
    try:
        while True:
            try:
                line = await session.prompt_async(f"Connected {peer}>")
            except EOFError:
                return
            if line.strip().lower() == EXIT_COMMAND:
                return
            writer.write(f"{line}\n".encode())
            await writer.drain()
            data = await read_response(reader, idle_timeout)
            console.print(f"Response: {data.decode('utf-8', errors='replace')}", markup=False)
            if reader.at_eof():
                console.print("[yellow]Connection closed by peer[/yellow]")
                return
    finally:
        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass
