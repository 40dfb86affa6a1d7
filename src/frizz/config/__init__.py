"""
Configuration management for frizz.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Local .env file in the working directory
3. Global config file (~/.frizz/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_global_config_path,
    load_env_file,
    load_global_config,
    load_local_config,
)
from .getters import (
    DEFAULT_STREAM_THRESHOLD,
    get_config,
    get_http_timeout,
    get_probe_timeout,
    get_scan_concurrency,
    get_stream_threshold,
    get_user_agent,
    is_verbose,
)

__all__ = [
    # env_loader
    "get_global_config_path",
    "load_env_file",
    "load_global_config",
    "load_local_config",
    # getters
    "DEFAULT_STREAM_THRESHOLD",
    "get_config",
    "get_http_timeout",
    "get_probe_timeout",
    "get_scan_concurrency",
    "get_stream_threshold",
    "get_user_agent",
    "is_verbose",
]
