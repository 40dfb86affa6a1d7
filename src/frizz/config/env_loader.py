"""Environment file and global configuration loading."""

from pathlib import Path
from typing import Any

import yaml


def get_global_config_path() -> Path:
    """Return the path of the global ~/.frizz/config.yml file."""
    return Path.home() / ".frizz" / "config.yml"


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load KEY=value pairs from a .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.frizz/config.yml."""
    config_path = get_global_config_path()
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}


def load_local_config(work_dir: Path | None = None) -> dict[str, str]:
    """Load the .env file from the working directory."""
    return load_env_file((work_dir or Path.cwd()) / ".env")
