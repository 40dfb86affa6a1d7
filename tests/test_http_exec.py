"""Tests for the HTTP request executor."""

import gzip
from pathlib import Path

import httpx
import pytest
import respx
from httpx import Response

from frizz.errors import (
    RequestBuildError,
    ResponseDecodeError,
    TransferError,
    UploadMethodError,
)
from frizz.tools.http import ExecRequest, execute_request, parse_url
from frizz.utils.debug import is_debug_enabled


class TestParseURL:
    """Test URL validation."""

    def test_valid(self):
        assert parse_url("https://example.com/a").host == "example.com"

    @pytest.mark.parametrize("raw", ["htasxatp://httpbin.org/get", "example.com", "http://"])
    def test_malformed(self, raw):
        with pytest.raises(RequestBuildError):
            parse_url(raw)


class TestExecuteRequest:
    """Test in-memory and streaming request paths."""

    @respx.mock
    async def test_small_body_in_memory(self, work_dir: Path):
        """A small 200 response is returned as text and nothing is written."""
        respx.get("http://example.com/hello").mock(
            return_value=Response(200, text="hello world", headers={"X-Test": "1"})
        )

        result = await execute_request(ExecRequest(url="http://example.com/hello"))

        assert result.status_code == "200 OK"
        assert result.body == "hello world"
        assert result.headers.startswith("Headers:\n")
        assert "x-test: 1" in result.headers.lower()
        assert list(work_dir.iterdir()) == []

    @respx.mock
    async def test_user_agent_header(self, work_dir: Path):
        route = respx.get("http://example.com/").mock(return_value=Response(204))

        await execute_request(ExecRequest(url="http://example.com/", user_agent="rusty"))

        assert route.calls.last.request.headers["user-agent"] == "rusty"

    @respx.mock
    async def test_inline_post_data(self, work_dir: Path):
        route = respx.post("http://example.com/api").mock(
            return_value=Response(201, text="Created")
        )

        result = await execute_request(
            ExecRequest(url="http://example.com/api", http_method="POST", post_data="a=1&b=2")
        )

        assert result.status_code == "201 Created"
        assert route.calls.last.request.content == b"a=1&b=2"

    @respx.mock
    async def test_small_file_sent_as_raw_bytes(self, work_dir: Path):
        payload = b"binary\x00\xff\xfe payload"
        (work_dir / "small.bin").write_bytes(payload)
        route = respx.put("http://example.com/put").mock(return_value=Response(200, text="ok"))

        result = await execute_request(
            ExecRequest(url="http://example.com/put", http_method="PUT", post_data="@small.bin")
        )

        assert result.body == "ok"
        assert route.calls.last.request.content == payload

    @pytest.mark.asyncio
    async def test_missing_post_file(self, work_dir: Path):
        with pytest.raises(RequestBuildError, match="missing.bin"):
            await execute_request(
                ExecRequest(url="http://example.com/", http_method="POST", post_data="@missing.bin")
            )

    @respx.mock
    async def test_unreadable_post_file(self, work_dir: Path):
        """A post data path that cannot be read is a request build error."""
        (work_dir / "payload").mkdir()

        with pytest.raises(RequestBuildError, match="payload"):
            await execute_request(
                ExecRequest(url="http://example.com/", http_method="POST", post_data="@payload")
            )

    @respx.mock
    async def test_big_file_delegates_to_upload(self, work_dir: Path):
        """Files above the threshold are streamed; the body is the remote response."""
        size = 1_200_000
        (work_dir / "bigfile").write_bytes(b"z" * size)
        route = respx.post("http://example.com/upload").mock(
            return_value=Response(200, text="stored")
        )

        result = await execute_request(
            ExecRequest(url="http://example.com/upload", http_method="POST", post_data="@bigfile")
        )

        assert result.status_code == "200 OK"
        assert result.body == "stored"
        assert not result.body.startswith("written to")
        request = route.calls.last.request
        assert request.headers["content-length"] == str(size)
        assert len(await request.aread()) == size

    @pytest.mark.asyncio
    async def test_big_file_upload_with_get_is_fatal(self, work_dir: Path):
        (work_dir / "bigfile").write_bytes(b"z" * 1_000_001)

        with respx.mock(assert_all_called=False) as router:
            route = router.get("http://example.com/upload")
            with pytest.raises(UploadMethodError, match="GET"):
                await execute_request(
                    ExecRequest(url="http://example.com/upload", post_data="@bigfile")
                )
            assert not route.called

    @respx.mock
    async def test_big_response_written_to_file(self, work_dir: Path):
        """A response above the threshold is streamed to ./<last segment>."""
        size = 1_500_000
        respx.get("https://example.com/files/big.bin").mock(
            return_value=Response(200, content=b"x" * size)
        )

        result = await execute_request(ExecRequest(url="https://example.com/files/big.bin"))

        assert result.status_code == "200 OK"
        assert result.body == "written to ./big.bin"
        assert (work_dir / "big.bin").stat().st_size == size

    @respx.mock
    async def test_progress_flag_forces_download(self, work_dir: Path):
        respx.get("http://httpbin.org/get").mock(return_value=Response(200, text="{}"))

        result = await execute_request(
            ExecRequest(url="http://httpbin.org/get", progress_bar=True)
        )

        assert result.body == "written to ./get"
        assert (work_dir / "get").read_text() == "{}"

    @respx.mock
    async def test_short_segment_uses_default_name(self, work_dir: Path):
        respx.get("http://example.com/").mock(return_value=Response(200, text="index"))

        result = await execute_request(ExecRequest(url="http://example.com/", progress_bar=True))

        assert result.body == "written to ./frizz.out.file"
        assert (work_dir / "frizz.out.file").read_text() == "index"

    @respx.mock
    async def test_invalid_text_body_raises_decode_error(self, work_dir: Path):
        respx.get("http://example.com/bin").mock(
            return_value=Response(
                200,
                content=b"\xff\xfe\xfa",
                headers={"Content-Type": "text/plain; charset=utf-8"},
            )
        )

        with pytest.raises(ResponseDecodeError, match="utf-8"):
            await execute_request(ExecRequest(url="http://example.com/bin"))

    @respx.mock
    async def test_connection_error_surfaces(self, work_dir: Path):
        respx.get("http://example.com/down").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(TransferError, match="refused"):
            await execute_request(ExecRequest(url="http://example.com/down"))

    @pytest.mark.asyncio
    async def test_malformed_url(self):
        with pytest.raises(RequestBuildError):
            await execute_request(ExecRequest(url="htasxatp://httpbin.org/get"))

    @respx.mock
    async def test_verbose_tracing(self, work_dir: Path, capsys):
        respx.get("http://example.com/v").mock(return_value=Response(200, text="ok"))

        result = await execute_request(ExecRequest(url="http://example.com/v", verbose=True))

        assert result.body == "ok"
        err = capsys.readouterr().err
        assert "GET http://example.com/v" in err
        assert "200 OK" in err
        assert not is_debug_enabled()

    @respx.mock
    async def test_compressed_download_written_as_received(self, work_dir: Path):
        """Encoded bodies land on disk as sent, matching Content-Length."""
        original = b"x" * 1_500_000
        compressed = gzip.compress(original)
        respx.get("http://example.com/big.bin").mock(
            return_value=Response(200, content=compressed, headers={"Content-Encoding": "gzip"})
        )

        result = await execute_request(
            ExecRequest(url="http://example.com/big.bin", progress_bar=True)
        )

        assert result.body == "written to ./big.bin"
        written = (work_dir / "big.bin").read_bytes()
        assert len(written) == len(compressed)
        assert gzip.decompress(written) == original
