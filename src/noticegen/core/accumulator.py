"""Stream accumulator: buffers fragments and splits reasoning from final text."""

from __future__ import annotations

import logging
import re

from noticegen.types.stream import StreamState, StreamStatus

logger = logging.getLogger(__name__)

THINK_OPEN = "<think>"
THINK_CLOSE = "</think>"

# Non-greedy and non-nested: each opening marker pairs with the first closing
# marker after it. An opening marker with no close yet never matches.
_THINK_RE = re.compile(re.escape(THINK_OPEN) + r"(.*?)" + re.escape(THINK_CLOSE), re.DOTALL)


def split_reasoning(raw: str) -> tuple[str, str]:
    """Split *raw* into ``(reasoning, final)``.

    ``reasoning`` joins the trimmed inner text of every closed
    ``<think>...</think>`` region with a blank line.  ``final`` is *raw*
    with those regions removed, outer-trimmed.  Unclosed regions are left
    in ``final``.
    """
    reasoning = "\n\n".join(m.group(1).strip() for m in _THINK_RE.finditer(raw))
    final = _THINK_RE.sub("", raw).strip()
    return reasoning, final


class StreamAccumulator:
    """Owns the text buffer of one in-flight submission.

    The accumulator is a small state machine (``idle -> streaming ->
    {done, failed}``).  ``raw`` only ever grows within a generation;
    ``reasoning`` and ``final`` are recomputed from it on every append.
    Calling :meth:`reset` starts a new generation and discards everything.
    """

    def __init__(self) -> None:
        self._generation = 0
        self._raw = ""
        self._reasoning = ""
        self._final = ""
        self._status = StreamStatus.IDLE
        self._error: str | None = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def status(self) -> StreamStatus:
        return self._status

    @property
    def state(self) -> StreamState:
        """Frozen snapshot of the current state."""
        return StreamState(
            raw=self._raw,
            reasoning=self._reasoning,
            final=self._final,
            status=self._status,
            generation=self._generation,
            error=self._error,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def reset(self, generation: int | None = None) -> StreamState:
        """Discard all text and return to ``idle`` under a new generation."""
        self._generation = self._generation + 1 if generation is None else generation
        self._raw = ""
        self._reasoning = ""
        self._final = ""
        self._status = StreamStatus.IDLE
        self._error = None
        return self.state

    def start(self) -> StreamState:
        if self._status is StreamStatus.IDLE:
            self._status = StreamStatus.STREAMING
        else:
            logger.debug("start() ignored in status %s", self._status.value)
        return self.state

    def finish(self) -> StreamState:
        """Mark the stream exhausted."""
        if self._status.is_terminal:
            logger.warning("finish() ignored: stream already %s", self._status.value)
        else:
            self._status = StreamStatus.DONE
        return self.state

    def fail(self, message: str) -> StreamState:
        """Mark the stream failed; no further fragments are accepted."""
        if self._status.is_terminal:
            logger.warning("fail() ignored: stream already %s", self._status.value)
        else:
            self._status = StreamStatus.FAILED
            self._error = message
        return self.state

    # ------------------------------------------------------------------
    # Fragments
    # ------------------------------------------------------------------

    def append(self, fragment: str, generation: int | None = None) -> StreamState:
        """Append *fragment* and re-derive the reasoning/final split.

        Fragments tagged with a stale *generation*, or arriving after the
        stream reached a terminal status, are dropped.
        """
        if generation is not None and generation != self._generation:
            logger.debug(
                "Dropping %d chars from stale generation %d (current %d)",
                len(fragment), generation, self._generation,
            )
            return self.state
        if self._status.is_terminal:
            logger.debug("Dropping fragment: stream already %s", self._status.value)
            return self.state
        if self._status is StreamStatus.IDLE:
            self._status = StreamStatus.STREAMING

        self._raw += fragment
        self._reasoning, self._final = split_reasoning(self._raw)
        return self.state
