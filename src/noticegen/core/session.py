"""Session: drives one notice submission through provider, accumulator and renderer."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import aclosing

from noticegen.core.accumulator import StreamAccumulator
from noticegen.core.prompt import build_messages
from noticegen.core.render import render
from noticegen.errors import TransportError
from noticegen.types.providers import ProviderAdapter
from noticegen.types.request import RequestParameters
from noticegen.types.stream import StreamState, StreamUpdate

logger = logging.getLogger(__name__)

TRANSPORT_ERROR_MESSAGE = "❌ 出现错误，请检查 API 地址或网络连接"
WAITING_PLACEHOLDER = "等待生成..."


def select_display(state: StreamState) -> StreamUpdate:
    """Pick the text to show for *state* and render it.

    The final segment wins once it is non-empty.  Before that, if no
    reasoning has been seen, the raw stream is rendered directly so
    formatting shows up live.  Otherwise a placeholder is shown.
    """
    if state.final:
        return StreamUpdate(state=state, markup=render(state.final, is_final=True), source="final")
    if state.raw and not state.reasoning:
        return StreamUpdate(state=state, markup=render(state.raw, is_final=True), source="raw")
    return StreamUpdate(state=state, markup=WAITING_PLACEHOLDER, source="placeholder")


class NoticeSession:
    """Runs submissions against a provider, one generation at a time.

    Each call to :meth:`submit` bumps the generation and resets the
    accumulator.  A superseded submission notices the change at its next
    fragment, drops it, and stops iterating its stream.

    Usage::

        session = NoticeSession(provider)
        async for update in session.submit(params):
            show(update.markup, update.state.reasoning)
    """

    def __init__(self, provider: ProviderAdapter, user: str | None = None) -> None:
        self._provider = provider
        self._user = user
        self._accumulator = StreamAccumulator()

    @property
    def generation(self) -> int:
        return self._accumulator.generation

    @property
    def state(self) -> StreamState:
        return self._accumulator.state

    def cancel(self) -> None:
        """Abandon the in-flight submission, if any."""
        self._accumulator.reset()
        logger.debug("Cancelled; now at generation %d", self._accumulator.generation)

    async def submit(self, params: RequestParameters) -> AsyncIterator[StreamUpdate]:
        """Send *params* and yield a :class:`StreamUpdate` per fragment.

        The last update carries status ``done`` or ``failed``, unless the
        submission was superseded, in which case iteration simply stops.
        """
        acc = self._accumulator
        acc.reset()
        generation = acc.generation
        acc.start()
        logger.info(
            "Submission %d: unit=%s weather=%s model=%s",
            generation, params.unit, params.weather, self._provider.model_id,
        )

        user = self._user or params.user or None
        messages = build_messages(params)
        try:
            stream = self._provider.chat_completion_stream(messages, user=user)
            async with aclosing(stream) as events:  # type: ignore[type-var]
                async for event in events:
                    if generation != acc.generation:
                        logger.debug("Submission %d superseded; closing its stream", generation)
                        return
                    if event.type == "text_delta" and event.text is not None:
                        yield select_display(acc.append(event.text, generation=generation))
                    elif event.type == "message_end":
                        logger.debug(
                            "Submission %d ended: stop_reason=%s usage=%s",
                            generation, event.stop_reason, event.usage,
                        )
        except TransportError as exc:
            if generation != acc.generation:
                return
            logger.error("Submission %d failed: %s", generation, exc)
            yield select_display(acc.fail(TRANSPORT_ERROR_MESSAGE))
            return

        if generation != acc.generation:
            return
        state = acc.finish()
        logger.info(
            "Submission %d done: %d chars, %d reasoning chars",
            generation, len(state.raw), len(state.reasoning),
        )
        yield select_display(state)
