"""
Error types raised by the block readers and the watchlist loader.

- TransportError: connection refused, timeout, non-2xx status
- DecodeError: malformed JSON or an unexpected response shape
- ProtocolError: well-formed response carrying an application-level error
  or a semantically invalid value (e.g. a non-positive block number)
- ConfigError: invalid watchlist configuration
"""


class MonitorError(Exception):
    """Base class for all monitor errors."""


class TransportError(MonitorError):
    """HTTP request failed before a usable response was received."""

    def __init__(self, message: str, status_code: int = None, body: str = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(MonitorError):
    """Response body could not be decoded into the expected shape."""


class ProtocolError(MonitorError):
    """Response was well-formed but reported an error or an invalid value."""


class ConfigError(MonitorError):
    """Watchlist configuration is invalid."""
