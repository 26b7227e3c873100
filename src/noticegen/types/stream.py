"""Stream state types shared by the accumulator, session and UI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StreamStatus(Enum):
    """Lifecycle of one submission's stream."""

    IDLE = "idle"
    STREAMING = "streaming"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (StreamStatus.DONE, StreamStatus.FAILED)


@dataclass(frozen=True, slots=True)
class StreamState:
    """Snapshot of the accumulator after an update.

    ``reasoning`` and ``final`` are derived from ``raw`` and never set
    independently of it.
    """

    raw: str = ""
    reasoning: str = ""
    final: str = ""
    status: StreamStatus = StreamStatus.IDLE
    generation: int = 0
    error: str | None = None


@dataclass(frozen=True, slots=True)
class StreamUpdate:
    """What a session yields after each fragment or status change."""

    state: StreamState
    markup: str
    source: str  # "final", "raw" or "placeholder"
