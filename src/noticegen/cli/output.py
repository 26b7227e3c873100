"""Basic text output for non-interactive mode."""

from __future__ import annotations

import sys

from noticegen.types.stream import StreamStatus, StreamUpdate


def print_update(update: StreamUpdate, *, markup: bool = False) -> None:
    """Print the outcome of a submission once it reaches a terminal status.

    Intermediate updates are ignored; plain mode has no live redraw.
    """
    state = update.state
    match state.status:
        case StreamStatus.FAILED:
            print(state.error or "", file=sys.stderr)
        case StreamStatus.DONE:
            if state.reasoning:
                print(f"[Reasoning: {len(state.reasoning):,} chars]", file=sys.stderr)
            if markup or update.source == "placeholder":
                text = update.markup
            elif update.source == "final":
                text = state.final
            else:
                # no reasoning was seen, so raw carries no markers
                text = state.raw
            sys.stdout.write(text + "\n")
            sys.stdout.flush()
        case _:
            pass
