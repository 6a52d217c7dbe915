"""
Purpose: Error taxonomy for the routed client.
What it does:
- ConfigError: bad endpoint / command values, raised before any network I/O
- TransportError: anything that goes wrong once we talk to the daemon
  (connect, send, read, decode)

Both derive from RoutedError so callers can catch everything in one place.
"""

from __future__ import annotations

from typing import Optional


class RoutedError(Exception):
    """Base class for all routed client errors."""
    pass


class ConfigError(RoutedError, ValueError):
    """Invalid host, port, command or setting. Detected before any I/O."""
    pass


class TransportError(RoutedError):
    """
    Network level failure talking to routed.

    Wraps the underlying exception so the caller only has to handle one type.
    The original exception is also chained via __cause__.
    """

    def __init__(self, message: str, url: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.url = url
        self.cause = cause
