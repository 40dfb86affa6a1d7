"""Debug utilities for verbose connection tracing.

Thread-safe debug logging with rich formatting, enabled per thread by the
``--verbose`` flag.
"""

import threading
from typing import Any

import httpx
from rich.console import Console

# Thread-local storage for debug state
_debug_state = threading.local()


def set_debug_enabled(enabled: bool) -> None:
    """Set debug mode for the current thread."""
    _debug_state.enabled = enabled


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled for the current thread."""
    return getattr(_debug_state, "enabled", False)


def debug_print(category: str, message: str, **data: Any) -> None:
    """Print debug information if debug mode is enabled.

    Args:
        category: Debug category (http, scan, socket)
        message: Main message to display
        **data: Additional key-value pairs to display
    """
    if not is_debug_enabled():
        return
    console = Console(stderr=True)
    console.print(f"[DEBUG:{category}] {message}", style="bold cyan", markup=False)
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            console.print(f"  {key}:", style="dim")
            for item_key, item_value in value.items():
                console.print(f"    {item_key}: {item_value}", style="dim", markup=False)
        elif isinstance(value, list):
            console.print(f"  {key}: {', '.join(str(v) for v in value)}", style="dim")
        elif isinstance(value, str) and len(value) > 100:
            # Truncate long strings
            console.print(f"  {key}: {value[:100]}... ({len(value)} chars)", style="dim")
        else:
            console.print(f"  {key}: {value}", style="dim", markup=False)


async def debug_http_request(request: httpx.Request) -> None:
    """httpx request hook: trace the outgoing request line and headers."""
    debug_print(
        "http",
        f"→ {request.method} {request.url}",
        Headers=dict(request.headers),
    )


async def debug_http_response(response: httpx.Response) -> None:
    """httpx response hook: trace status and headers as soon as they arrive."""
    stream = response.extensions.get("network_stream")
    peer = stream.get_extra_info("server_addr") if stream is not None else None
    debug_print(
        "http",
        f"← {response.status_code} {response.reason_phrase} ({response.http_version})",
        Peer=f"{peer[0]}:{peer[1]}" if peer else None,
        Headers=dict(response.headers),
    )
