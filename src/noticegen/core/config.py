"""Configuration loading (env vars, .env, TOML)."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from noticegen.types.config import DEFAULT_MODEL, ClientConfig

logger = logging.getLogger(__name__)

# Load .env from current directory (and parents), won't override existing env vars
load_dotenv()

# field -> environment variables, first non-empty wins
ENV_MAP: dict[str, tuple[str, ...]] = {
    "base_url": ("NOTICEGEN_API_URL", "OPENAI_BASE_URL"),
    "api_key": ("NOTICEGEN_API_KEY", "OPENAI_API_KEY"),
    "model": ("NOTICEGEN_MODEL",),
    "user": ("NOTICEGEN_USER",),
}


def load_env_config() -> dict[str, str]:
    """Load client settings from environment variables."""
    config: dict[str, str] = {}
    for field, names in ENV_MAP.items():
        for name in names:
            if val := os.environ.get(name):
                config[field] = val
                break
    return config


def load_toml_config(cwd: str | None = None) -> dict[str, Any]:
    """Load configuration from .noticegen/config.toml if it exists.

    Searches *cwd*, the current directory, then ``~/.noticegen/config.toml``.
    A file that cannot be parsed is skipped with a warning.
    """
    candidates: list[Path] = []
    if cwd:
        candidates.append(Path(cwd) / ".noticegen" / "config.toml")
    candidates.append(Path.cwd() / ".noticegen" / "config.toml")
    candidates.append(Path.home() / ".noticegen" / "config.toml")

    for toml_path in candidates:
        if not toml_path.exists():
            continue
        try:
            with open(toml_path, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", toml_path, exc)
    return {}


def resolve_client_config(
    *,
    base_url: str | None = None,
    api_key: str | None = None,
    model: str | None = None,
    user: str | None = None,
    cwd: str | None = None,
) -> ClientConfig:
    """Resolve endpoint settings: explicit value > environment > TOML > default."""
    explicit = {"base_url": base_url, "api_key": api_key, "model": model, "user": user}
    env = load_env_config()
    toml = load_toml_config(cwd).get("client", {})
    if not isinstance(toml, dict):
        toml = {}

    resolved: dict[str, str | None] = {}
    for field in explicit:
        value = explicit[field] or env.get(field) or toml.get(field)
        resolved[field] = str(value) if value else None

    return ClientConfig(
        base_url=resolved["base_url"],
        api_key=resolved["api_key"],
        model=resolved["model"] or DEFAULT_MODEL,
        user=resolved["user"],
    )
