"""Provider adapter protocol and stream event types."""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class StreamEvent:
    """A single event from a streaming provider response."""

    type: str  # "text_delta", "message_end"
    text: str | None = None
    stop_reason: str | None = None
    usage: dict[str, int] | None = None


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """A message in the completion request (provider-agnostic format)."""

    role: str  # "system", "user", "assistant"
    content: str = ""


@runtime_checkable
class ProviderAdapter(Protocol):
    """Protocol that all provider adapters must implement."""

    def chat_completion_stream(
        self,
        messages: list[ChatMessage],
        user: str | None = None,
    ) -> AsyncIterator[StreamEvent]:
        """Stream a chat completion as an async iterator of StreamEvent."""
        ...

    @property
    def model_id(self) -> str:
        """The model identifier being used."""
        ...
