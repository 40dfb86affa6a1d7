"""HTTP request execution and streaming transfers."""

from .client import HTTPClient, build_ssl_context
from .executor import execute_request, parse_url
from .models import ExecRequest, FizzResult, format_headers, format_status
from .transfer import DEFAULT_DOWNLOAD_NAME, download_body, download_path, upload_file

__all__ = [
    "DEFAULT_DOWNLOAD_NAME",
    "ExecRequest",
    "FizzResult",
    "HTTPClient",
    "build_ssl_context",
    "download_body",
    "download_path",
    "execute_request",
    "format_headers",
    "format_status",
    "parse_url",
    "upload_file",
]
