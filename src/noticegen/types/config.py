"""Configuration types for noticegen."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MODEL = "deepseek-chat"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Endpoint settings handed to the provider.

    All values are opaque and passed through without validation.
    """

    base_url: str | None = None
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    user: str | None = None  # caller / session identifier
