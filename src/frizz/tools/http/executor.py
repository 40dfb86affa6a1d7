"""Single HTTP request execution with optional streaming of large bodies."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from frizz.errors import RequestBuildError, TransferError

from .client import HTTPClient
from .models import ExecRequest, FizzResult, content_length, decode_body, result_from_response
from .transfer import download_body, download_path, upload_file

logger = logging.getLogger(__name__)


def parse_url(raw: str) -> httpx.URL:
    """Validate an http(s) URL, raising RequestBuildError when malformed."""
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError) as exc:
        raise RequestBuildError(f"Invalid URL {raw!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise RequestBuildError(f"Invalid URL {raw!r}: expected http:// or https:// with a host")
    return url


def _read_post_file(file_name: str) -> tuple[Path, int]:
    path = Path(file_name)
    try:
        return path, path.stat().st_size
    except OSError as exc:
        raise RequestBuildError(f"Cannot read post data file {file_name}: {exc}") from exc


async def execute_request(request: ExecRequest) -> FizzResult:
    """
    Send one request and return its status, headers and body.

    ``post_data`` starting with ``@`` names a file: above the stream
    threshold it is uploaded in chunks (POST/PUT only), otherwise its raw
    bytes become the body. Responses above the threshold, or any response
    when ``progress_bar`` is set, are written to disk instead of returned.
    """
    url = parse_url(request.url)
    method = request.http_method.upper()

    async with HTTPClient.from_request(request) as client:
        body: bytes | None = None
        if request.post_data:
            if request.post_data.startswith("@"):
                path, size = _read_post_file(request.post_data[1:])
                logger.info("File opening for read: %s (%d bytes)", path, size)
                if size > request.stream_threshold:
                    return await upload_file(str(url), path, client, method)
                try:
                    body = path.read_bytes()
                except OSError as exc:
                    raise RequestBuildError(
                        f"Cannot read post data file {path}: {exc}"
                    ) from exc
            else:
                body = request.post_data.encode("utf-8")

        http_request = client.build_request(method, url, content=body)
        try:
            response = await client.send(http_request, stream=True)
        except httpx.HTTPError as exc:
            raise TransferError(f"{method} {url} failed: {exc}") from exc

        try:
            declared = content_length(response)
            if declared > request.stream_threshold or request.progress_bar:
                return await download_body(response, download_path(url))
            try:
                await response.aread()
            except httpx.HTTPError as exc:
                raise TransferError(f"Reading response from {url} failed: {exc}") from exc
            return result_from_response(response, decode_body(response))
        finally:
            await response.aclose()
