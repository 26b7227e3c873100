"""OpenAI-compatible provider adapter.

Works against the OpenAI API and any endpoint speaking the same wire format
(DeepSeek, self-hosted gateways) by passing a custom ``base_url``.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

from openai import NOT_GIVEN, AsyncOpenAI, OpenAIError

from noticegen.errors import TransportError
from noticegen.providers.base import BaseProvider
from noticegen.types.config import DEFAULT_MODEL, ClientConfig
from noticegen.types.providers import ChatMessage, StreamEvent

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseProvider):
    """Provider adapter for OpenAI-compatible chat completion APIs.

    Uses the ``openai`` SDK's async streaming interface and translates each
    chunk into a provider-agnostic :class:`StreamEvent`.  Every SDK error is
    re-raised as :class:`TransportError`; nothing is retried.

    Parameters
    ----------
    api_key:
        Access credential.  When *None* the SDK falls back to
        ``OPENAI_API_KEY``.
    model:
        Model ID to use for completions.
    base_url:
        Optional endpoint base address.
    client:
        Pre-built ``AsyncOpenAI``-like client, mainly for tests.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        base_url: str | None = None,
        client: Any | None = None,
    ) -> None:
        super().__init__(model)
        if client is not None:
            self._client = client
            return

        kwargs: dict[str, Any] = {}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if base_url is not None:
            kwargs["base_url"] = base_url
        try:
            self._client = AsyncOpenAI(**kwargs)
        except OpenAIError as exc:
            # Raised eagerly when no API key can be found.
            raise TransportError(str(exc)) from exc

    @classmethod
    def from_config(cls, config: ClientConfig) -> OpenAIProvider:
        return cls(api_key=config.api_key, model=config.model, base_url=config.base_url)

    async def chat_completion_stream(
        self,
        messages: list[ChatMessage],
        user: str | None = None,
    ) -> AsyncIterator[StreamEvent]:
        """Stream a chat completion from an OpenAI-compatible API.

        Yields one ``text_delta`` event per non-empty content delta and, once
        the stream is exhausted, a ``message_end`` event carrying the finish
        reason and token usage.
        """
        payload = [{"role": m.role, "content": m.content} for m in messages]
        stop_reason: str | None = None
        final_usage: dict[str, int] | None = None
        try:
            stream = await self._client.chat.completions.create(
                model=self._model,
                messages=payload,  # type: ignore[arg-type]
                stream=True,
                stream_options={"include_usage": True},
                user=user if user else NOT_GIVEN,
            )
            async for chunk in stream:
                # Usage arrives on a trailing chunk with choices=[], after the
                # finish reason. Capture it before skipping the chunk.
                raw_usage = getattr(chunk, "usage", None)
                if raw_usage is not None:
                    final_usage = {
                        "input_tokens": getattr(raw_usage, "prompt_tokens", 0) or 0,
                        "output_tokens": getattr(raw_usage, "completion_tokens", 0) or 0,
                    }

                choice = chunk.choices[0] if chunk.choices else None
                if choice is None:
                    continue

                content = getattr(choice.delta, "content", None)
                if content:
                    yield StreamEvent(type="text_delta", text=content)

                if choice.finish_reason:
                    stop_reason = choice.finish_reason
        except OpenAIError as exc:
            logger.debug("Completion stream failed: %s", exc)
            raise TransportError(f"{type(exc).__name__}: {exc}") from exc

        if stop_reason is not None:
            yield StreamEvent(type="message_end", stop_reason=stop_reason, usage=final_usage)
