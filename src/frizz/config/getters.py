"""Configuration getter functions."""

import os
from pathlib import Path
from typing import Any

from .env_loader import load_global_config, load_local_config

DEFAULT_CONCURRENCY = 500
DEFAULT_PROBE_TIMEOUT = 3.0
DEFAULT_USER_AGENT = "frizz"
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_STREAM_THRESHOLD = 1_000_000

_TRUTHY = {"1", "true", "yes", "on"}


def get_config(key: str, default: Any = None, work_dir: Path | None = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Local .env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        default: Default value if not found
        work_dir: Directory holding the .env file (defaults to cwd)

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    local_config = load_local_config(work_dir)
    if key in local_config:
        return local_config[key]

    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    return default


def _get_int(key: str, default: int) -> int:
    try:
        value = int(get_config(key, default))
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def _get_float(key: str, default: float) -> float:
    try:
        value = float(get_config(key, default))
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def get_scan_concurrency() -> int:
    """Get the probe worker count (default: 500)."""
    return _get_int("FRIZZ_CONCURRENCY", DEFAULT_CONCURRENCY)


def get_probe_timeout() -> float:
    """Get the per-probe timeout in seconds (default: 3)."""
    return _get_float("FRIZZ_TIMEOUT", DEFAULT_PROBE_TIMEOUT)


def get_user_agent() -> str:
    """Get the HTTP user agent (default: frizz)."""
    return str(get_config("FRIZZ_USER_AGENT", DEFAULT_USER_AGENT))


def get_http_timeout() -> float:
    """Get the HTTP request timeout in seconds (default: 30)."""
    return _get_float("FRIZZ_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)


def get_stream_threshold() -> int:
    """Get the body size above which transfers are streamed."""
    return _get_int("FRIZZ_STREAM_THRESHOLD", DEFAULT_STREAM_THRESHOLD)


def is_verbose() -> bool:
    """Return True when FRIZZ_VERBOSE is set to a truthy value."""
    value = get_config("FRIZZ_VERBOSE", "")
    return str(value).strip().lower() in _TRUTHY
