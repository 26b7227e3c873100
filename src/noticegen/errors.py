"""Exception hierarchy for noticegen."""

from __future__ import annotations


class NoticegenError(Exception):
    """Base class for all noticegen errors."""


class TransportError(NoticegenError):
    """The completion endpoint could not be reached or failed mid-stream.

    Providers raise this wrapping the underlying SDK exception, so callers
    only ever need to catch one type at the transport boundary.
    """
