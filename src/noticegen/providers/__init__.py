"""Provider adapters for noticegen.

Public surface
--------------
- :class:`BaseProvider`   — abstract base
- :class:`OpenAIProvider` — OpenAI / compatible adapter (openai SDK)
- :func:`create_provider` — factory from a :class:`ClientConfig`
"""

from __future__ import annotations

from noticegen.providers.base import BaseProvider
from noticegen.providers.openai import OpenAIProvider
from noticegen.types.config import ClientConfig


def create_provider(config: ClientConfig) -> BaseProvider:
    """Instantiate the provider adapter for *config*."""
    return OpenAIProvider.from_config(config)


__all__ = [
    "BaseProvider",
    "OpenAIProvider",
    "create_provider",
]
