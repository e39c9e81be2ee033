"""
domain/exceptions.py
──────────────────────────────────────────────────────────────────────────────
Custom exception hierarchy.

All exceptions are rooted at W3WError so callers can catch broadly
(except W3WError) or narrowly (except TransportError).

Nothing is retried or swallowed inside the library: every error reaches the
caller of the ServiceClient operation that triggered it, with the underlying
cause chained via ``raise ... from``.

  MissingAPIKeyError → construction time, the key was empty / whitespace
  TransportError     → connection, DNS or timeout failure (requests layer)
  DecodeError        → body was not JSON or did not match the result shape
  ServiceError       → non-2xx status (only when raise_for_status is enabled)
"""
from __future__ import annotations


class W3WError(Exception):
    """Base exception for all library errors."""


class ConfigurationError(W3WError):
    """Raised when required configuration is missing or invalid."""


class MissingAPIKeyError(ConfigurationError):
    """Raised when a ServiceClient is built without a usable API key."""

    def __init__(self, message: str = "No API key specified") -> None:
        super().__init__(message)


class TransportError(W3WError):
    """Raised when the HTTP exchange itself fails (no response received)."""

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class DecodeError(W3WError):
    """Raised when a response body cannot be decoded into the expected shape."""

    def __init__(self, message: str, body: str = "") -> None:
        super().__init__(message)
        self.body = body


class ServiceError(W3WError):
    """Raised for a non-2xx response when status checking is switched on."""

    def __init__(self, status_code: int, body: str = "", url: str = "") -> None:
        super().__init__(f"what3words returned HTTP {status_code}: {body[:300]}")
        self.status_code = status_code
        self.body = body
        self.url = url
