"""Request and result records for the HTTP executor."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from frizz.config import DEFAULT_STREAM_THRESHOLD
from frizz.errors import ResponseDecodeError


@dataclass(frozen=True)
class ExecRequest:
    """Options for a single HTTP request."""

    url: str
    user_agent: str = "frizz"
    verbose: bool = False
    disable_cert_validation: bool = False
    disable_hostname_validation: bool = False
    post_data: str = ""
    http_method: str = "GET"
    progress_bar: bool = False
    timeout: float = 30.0
    stream_threshold: int = DEFAULT_STREAM_THRESHOLD


@dataclass
class FizzResult:
    """Status, header dump and body (or a written-to marker) of a response."""

    status_code: str
    headers: str
    body: str


def format_status(response: httpx.Response) -> str:
    """Return the status line as ``"<code> <reason>"``, e.g. ``"200 OK"``."""
    return f"{response.status_code} {response.reason_phrase}".strip()


def format_headers(headers: httpx.Headers) -> str:
    lines = [f"{name}: {value}" for name, value in headers.multi_items()]
    return "Headers:\n" + "\n".join(lines)


def decode_body(response: httpx.Response) -> str:
    """Decode an in-memory body strictly using its declared charset (UTF-8 default)."""
    encoding = response.charset_encoding or "utf-8"
    try:
        return response.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise ResponseDecodeError(encoding, str(exc)) from exc


def content_length(response: httpx.Response) -> int:
    """Declared Content-Length of a response, 0 when absent or malformed."""
    try:
        return max(0, int(response.headers.get("content-length", "0")))
    except ValueError:
        return 0


def result_from_response(response: httpx.Response, body: str) -> FizzResult:
    return FizzResult(
        status_code=format_status(response),
        headers=format_headers(response.headers),
        body=body,
    )
