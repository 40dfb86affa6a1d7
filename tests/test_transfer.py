"""Tests for streaming uploads and downloads."""

from pathlib import Path

import httpx
import pytest
import respx
from httpx import Response

from frizz.errors import TransferError, UploadMethodError
from frizz.tools.http import download_body, download_path, upload_file
from frizz.utils.progress import ProgressReporter


class FailingStream(httpx.AsyncByteStream):
    """Yields one chunk, then drops the connection."""

    async def __aiter__(self):
        yield b"partial"
        raise httpx.ReadError("connection dropped")


class TestDownloadPath:
    """Test download file naming."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://example.com/files/s.zip", "s.zip"),
            ("http://httpbin.org/get", "get"),
            ("http://example.com/get?x=1", "get"),
            ("http://example.com/", "frizz.out.file"),
            ("http://example.com", "frizz.out.file"),
            ("http://example.com/a", "frizz.out.file"),
        ],
    )
    def test_names(self, url, expected):
        assert download_path(url) == Path(expected)


class TestUpload:
    """Test upload_file."""

    @pytest.mark.asyncio
    async def test_rejects_methods_without_body(self, temp_dir: Path):
        path = temp_dir / "data.bin"
        path.write_bytes(b"abc")
        async with httpx.AsyncClient() as client:
            for method in ("GET", "DELETE", "HEAD"):
                with pytest.raises(UploadMethodError):
                    await upload_file("http://example.com/", path, client, method)

    @respx.mock
    async def test_progress_tracks_chunks_capped_at_size(self, temp_dir: Path):
        size = 200_000
        path = temp_dir / "data.bin"
        path.write_bytes(b"q" * size)
        route = respx.put("http://example.com/up").mock(return_value=Response(201, text="done"))
        progress = ProgressReporter("upload", size, enabled=False)

        async with httpx.AsyncClient() as client:
            result = await upload_file(
                "http://example.com/up", path, client, "put", progress=progress
            )
        body = await route.calls.last.request.aread()

        assert result.status_code == "201 Created"
        assert result.body == "done"
        assert len(body) == size
        assert progress.position == size

    @pytest.mark.asyncio
    async def test_missing_file(self, temp_dir: Path):
        async with httpx.AsyncClient() as client:
            with pytest.raises(TransferError):
                await upload_file("http://example.com/", temp_dir / "nope", client, "POST")


class TestDownload:
    """Test download_body."""

    @pytest.mark.asyncio
    async def test_writes_chunks_and_progress(self, temp_dir: Path):
        content = b"0123456789" * 1000
        response = Response(
            200,
            stream=httpx.ByteStream(content),
            request=httpx.Request("GET", "http://example.com/data.bin"),
        )
        progress = ProgressReporter("download", len(content), enabled=False)
        destination = temp_dir / "data.bin"

        result = await download_body(response, destination, progress=progress)

        assert destination.read_bytes() == content
        assert progress.position == len(content)
        assert result.body == f"written to {destination}"

    @pytest.mark.asyncio
    async def test_chunk_error_propagates_and_keeps_partial_file(self, temp_dir: Path):
        response = Response(
            200,
            stream=FailingStream(),
            request=httpx.Request("GET", "http://example.com/data.bin"),
        )
        destination = temp_dir / "data.bin"

        with pytest.raises(TransferError, match="connection dropped"):
            await download_body(
                response, destination, progress=ProgressReporter("d", 0, enabled=False)
            )

        assert destination.read_bytes() == b"partial"
