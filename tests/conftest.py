"""Test configuration and fixtures for frizz."""

import asyncio
import socket
import tempfile
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest

from frizz.utils.debug import set_debug_enabled


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def work_dir(temp_dir: Path, monkeypatch) -> Path:
    """Run the test with an empty temporary working directory."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def isolated_config(temp_dir: Path, monkeypatch) -> Path:
    """Hide real FRIZZ_* variables, .env files and ~/.frizz/config.yml."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    for key in (
        "FRIZZ_CONCURRENCY",
        "FRIZZ_TIMEOUT",
        "FRIZZ_USER_AGENT",
        "FRIZZ_HTTP_TIMEOUT",
        "FRIZZ_STREAM_THRESHOLD",
        "FRIZZ_VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_debug() -> Generator[None, None, None]:
    yield
    set_debug_enabled(False)


@pytest.fixture
async def tcp_listener() -> AsyncGenerator[int, None]:
    """A local TCP server on an ephemeral port; yields the port."""

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    try:
        yield port
    finally:
        server.close()
        await server.wait_closed()


@pytest.fixture
async def echo_server() -> AsyncGenerator[int, None]:
    """A line echo server that keeps the connection open."""

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        try:
            while line := await reader.readline():
                writer.write(line)
                await writer.drain()
        finally:
            writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    try:
        yield port
    finally:
        server.close()
        await server.wait_closed()


@pytest.fixture
def closed_port() -> int:
    """A local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
