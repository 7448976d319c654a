"""Configuration constants and .env parsing."""

from __future__ import annotations

import os
from pathlib import Path


def read_env_file(keys: list[str], env_file: Path | None = None) -> dict[str, str]:
    """Parse a .env file (default: ./.env) and return values for requested keys.

    Does NOT load into os.environ.
    """
    env_file = env_file or Path.cwd() / ".env"
    try:
        content = env_file.read_text()
    except OSError:
        return {}

    result: dict[str, str] = {}
    wanted = set(keys)

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        eq_idx = trimmed.find("=")
        if eq_idx == -1:
            continue
        key = trimmed[:eq_idx].strip()
        if key not in wanted:
            continue
        value = trimmed[eq_idx + 1 :].strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if value:
            result[key] = value

    return result


def split_list(value: str) -> list[str]:
    """Split a comma separated setting, dropping blanks."""
    return [item.strip() for item in value.split(",") if item.strip()]


# Read config values from .env (falls back to os.environ).
_env_config = read_env_file(["REBASE_SELF_SCHEME", "REBASE_WORKSPACE_EXCLUDE"])

# URIs with this scheme are produced by the engine's host and always exist.
SELF_SCHEME: str = os.environ.get("REBASE_SELF_SCHEME") or _env_config.get("REBASE_SELF_SCHEME", "sarif")

# Stripped from artifact URIs before they are re-rooted under the first workspace folder.
LOCAL_ROOT_MARKER: str = "file:///"

WORKSPACE_EXCLUDE: list[str] = split_list(
    os.environ.get("REBASE_WORKSPACE_EXCLUDE") or _env_config.get("REBASE_WORKSPACE_EXCLUDE", ".git,node_modules")
)
