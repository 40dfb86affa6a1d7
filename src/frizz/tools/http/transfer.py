"""Chunked upload and download of large bodies with progress reporting."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from pathlib import Path

import httpx

from frizz.errors import TransferError, UploadMethodError
from frizz.utils.progress import ProgressReporter

from .models import FizzResult, content_length, decode_body, result_from_response

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
UPLOAD_METHODS = ("POST", "PUT")
DEFAULT_DOWNLOAD_NAME = "frizz.out.file"


def download_path(url: str | httpx.URL) -> Path:
    """File name for a download: the URL's last path segment, or the default.

    Segments of one character or less (``""``, ``"/"``-terminated URLs,
    ``"a"``) fall back to ``frizz.out.file``.
    """
    segment = httpx.URL(str(url)).path.rsplit("/", 1)[-1]
    if len(segment) > 1:
        return Path(segment)
    return Path(DEFAULT_DOWNLOAD_NAME)


async def _read_chunks(path: Path, progress: ProgressReporter) -> AsyncIterator[bytes]:
    with open(path, "rb") as f:
        while True:
            chunk = await asyncio.to_thread(f.read, CHUNK_SIZE)
            if not chunk:
                break
            progress.advance(len(chunk))
            yield chunk


async def upload_file(
    url: str,
    file_path: str | Path,
    client: httpx.AsyncClient,
    method: str,
    progress: ProgressReporter | None = None,
) -> FizzResult:
    """
    Stream a file to ``url`` as the request body.

    Args:
        url: Target URL
        file_path: File to send
        client: Configured async client
        method: POST or PUT; anything else raises UploadMethodError
        progress: Reporter to advance per chunk (a byte bar on stderr by default)

    Returns:
        FizzResult carrying the remote endpoint's response
    """
    method = method.upper()
    if method not in UPLOAD_METHODS:
        raise UploadMethodError(method)

    path = Path(file_path)
    try:
        total = path.stat().st_size
    except OSError as exc:
        raise TransferError(f"Cannot read upload file {path}: {exc}") from exc

    reporter = progress or ProgressReporter(f"Posting {url}", total, bytes_mode=True)
    logger.info("Uploading %s (%d bytes) to %s", path, total, url)

    reporter.start()
    try:
        response = await client.request(
            method,
            url,
            content=_read_chunks(path, reporter),
            headers={"Content-Length": str(total)},
        )
        reporter.finish("Upload finished.")
    except (httpx.HTTPError, OSError) as exc:
        raise TransferError(f"Upload to {url} failed: {exc}") from exc
    finally:
        reporter.stop()

    return result_from_response(response, decode_body(response))


async def download_body(
    response: httpx.Response,
    destination: str | Path,
    progress: ProgressReporter | None = None,
) -> FizzResult:
    """
    Append a streamed response body to ``destination`` chunk by chunk.

    Chunk read and disk write errors propagate at once as TransferError; a
    partially written file is left where it is.
    """
    path = Path(destination)
    url = response.request.url
    total = content_length(response)
    reporter = progress or ProgressReporter(f"Executing {url}", total, bytes_mode=True)
    logger.info("Downloading %s to %s (%d bytes declared)", url, path, total)

    reporter.start()
    try:
        with open(path, "wb") as f:
            async for chunk in response.aiter_raw():
                f.write(chunk)
                reporter.advance(len(chunk))
        reporter.finish(f"Downloaded {url} to {path}")
    except (httpx.HTTPError, OSError) as exc:
        raise TransferError(f"Download of {url} failed: {exc}") from exc
    finally:
        reporter.stop()

    marker = str(path) if path.is_absolute() else f"./{path}"
    return result_from_response(response, f"written to {marker}")
