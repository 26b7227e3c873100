"""Type definitions for noticegen."""

from noticegen.types.config import DEFAULT_MODEL, ClientConfig
from noticegen.types.providers import ChatMessage, ProviderAdapter, StreamEvent
from noticegen.types.request import DEFAULT_REQUEST, FORM_FIELDS, RequestParameters
from noticegen.types.stream import StreamState, StreamStatus, StreamUpdate

__all__ = [
    "ChatMessage",
    "ClientConfig",
    "DEFAULT_MODEL",
    "DEFAULT_REQUEST",
    "FORM_FIELDS",
    "ProviderAdapter",
    "RequestParameters",
    "StreamEvent",
    "StreamState",
    "StreamStatus",
    "StreamUpdate",
]
