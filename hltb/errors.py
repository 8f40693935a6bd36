"""
Exception types raised by the HowLongToBeat lookup pipeline.
"""
from __future__ import annotations


class HLTBError(Exception):
    """Base class for every failure a lookup can surface."""


class NotFoundError(HLTBError):
    """The search page produced no result link for the requested name."""


class MalformedResponseError(HLTBError):
    """An expected element was missing or unparseable on a rendered page."""


class RenderingError(HLTBError):
    """The browser failed to launch, navigate, or find an awaited element."""


__all__ = ["HLTBError", "NotFoundError", "MalformedResponseError", "RenderingError"]
