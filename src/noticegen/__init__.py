"""noticegen — streaming railway notice generator.

Usage:
    import noticegen

    session = noticegen.NoticeSession(provider)
    async for update in session.submit(noticegen.DEFAULT_REQUEST):
        print(update.markup)
"""

from noticegen.core.accumulator import StreamAccumulator
from noticegen.core.render import render
from noticegen.core.session import NoticeSession
from noticegen.errors import NoticegenError, TransportError
from noticegen.types.config import ClientConfig
from noticegen.types.request import DEFAULT_REQUEST, RequestParameters
from noticegen.types.stream import StreamState, StreamStatus, StreamUpdate

__version__ = "0.1.0"

__all__ = [
    # Core API
    "NoticeSession",
    "StreamAccumulator",
    "render",
    # Types
    "ClientConfig",
    "DEFAULT_REQUEST",
    "RequestParameters",
    "StreamState",
    "StreamStatus",
    "StreamUpdate",
    # Errors
    "NoticegenError",
    "TransportError",
]
