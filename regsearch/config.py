"""Configuration for regsearch.

Settings come from a YAML file, by default ``~/.regsearch/config.yaml``::

    timeout: 15
    insecure_registries:
      - localhost:5000
    auths:
      https://index.docker.io/v1/:
        auth: dXNlcjpwYXNz
      registry.example.com:
        username: ci
        password: s3cret

A missing file means defaults. A few values can also be overridden from
the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from regsearch.errors import ConfigError

# ---------------------------------------------------------------------------
# Environment configuration
# ---------------------------------------------------------------------------

CONFIG_ENV_VAR = "REGSEARCH_CONFIG"
TIMEOUT_ENV_VAR = "REGSEARCH_TIMEOUT"
OFFICIAL_INDEX_HOST_ENV_VAR = "REGSEARCH_OFFICIAL_INDEX_HOST"

DEFAULT_CONFIG_PATH = Path.home() / ".regsearch" / "config.yaml"
DEFAULT_TIMEOUT = 30.0
DEFAULT_OFFICIAL_INDEX_HOST = "index.docker.io"


@dataclass
class Settings:
    """Resolved configuration for one invocation."""

    timeout: float = DEFAULT_TIMEOUT
    official_index_host: str = DEFAULT_OFFICIAL_INDEX_HOST
    insecure_registries: list[str] = field(default_factory=list)
    auths: dict[str, Any] = field(default_factory=dict)


def config_path(explicit: str | Path | None = None) -> Path:
    """Return the config file to read: explicit path, env var, then the default."""
    if explicit:
        return Path(explicit)
    from_env = os.environ.get(CONFIG_ENV_VAR, "")
    if from_env:
        return Path(from_env)
    return DEFAULT_CONFIG_PATH


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from the config file and apply environment overrides."""
    file_path = config_path(path)
    data: dict[str, Any] = {}

    if file_path.exists():
        try:
            with open(file_path) as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read config file {file_path}: {e}") from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file {file_path} must contain a mapping")
        data = loaded

    timeout_raw = os.environ.get(TIMEOUT_ENV_VAR) or data.get("timeout", DEFAULT_TIMEOUT)
    try:
        timeout = float(timeout_raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout value: {timeout_raw!r}") from e

    auths = data.get("auths") or {}
    if not isinstance(auths, dict):
        raise ConfigError("'auths' must be a mapping of index name to credentials")

    return Settings(
        timeout=timeout,
        official_index_host=(
            os.environ.get(OFFICIAL_INDEX_HOST_ENV_VAR)
            or data.get("official_index_host")
            or DEFAULT_OFFICIAL_INDEX_HOST
        ),
        insecure_registries=[str(r) for r in data.get("insecure_registries") or []],
        auths=auths,
    )
