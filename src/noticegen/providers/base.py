"""Base provider shared by all completion adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from noticegen.types.providers import ChatMessage, StreamEvent


class BaseProvider(ABC):
    """Abstract base class for all provider adapters.

    Concrete sub-classes must implement :meth:`chat_completion_stream` and
    raise :class:`~noticegen.errors.TransportError` for any endpoint or
    network failure.

    Parameters
    ----------
    model:
        The model identifier string (e.g. ``"deepseek-chat"``).
    """

    def __init__(self, model: str) -> None:
        self._model = model

    @property
    def model_id(self) -> str:
        """The model identifier being used by this provider instance."""
        return self._model

    @abstractmethod
    def chat_completion_stream(
        self,
        messages: list[ChatMessage],
        user: str | None = None,
    ) -> AsyncIterator[StreamEvent]:
        """Stream a chat completion, yielding :class:`StreamEvent` objects.

        Parameters
        ----------
        messages:
            Ordered list of messages, system prompt first.
        user:
            Opaque caller identifier forwarded to the endpoint.

        Yields
        ------
        StreamEvent
            ``text_delta`` events as fragments arrive, then one
            ``message_end``.
        """
        ...
