"""
ports/transport_port.py
──────────────────────────────────────────────────────────────────────────────
Abstract interface for the HTTP transport ServiceClient delegates to.

Any class that implements these methods (structural subtyping via Protocol)
is a valid TransportPort; no inheritance required.

Current implementation: RequestsTransport (requests.Session)
To swap: write a new adapter implementing this Protocol and pass it to
ServiceClient(transport=...) or change services/container.py.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """What ServiceClient needs back from one HTTP exchange.

    ``content`` is the raw body.  JSON is decoded from these bytes, never from
    a charset guessed off the Content-Type header.
    """

    status_code: int
    content: bytes
    url: str = ""

    @property
    def text(self) -> str:
        """Body as UTF-8 text, for error messages."""
        return self.content.decode("utf-8", errors="replace")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class TransportPort(Protocol):
    """Contract for a blocking HTTP GET transport."""

    def get(
        self,
        url: str,
        params: dict[str, str],
        headers: dict[str, str],
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        """Issue a single GET and return the raw response.

        The status code is reported, not judged: a 4xx/5xx answer is still a
        successful exchange at this layer.

        Args:
            url:     Absolute URL without query string.
            params:  Query parameters; the transport URL-encodes them in order.
            headers: Request headers.
            timeout: Seconds to wait, or None for no timeout.

        Returns:
            TransportResponse with status code and raw body bytes.

        Raises:
            TransportError: When no response was received (connection
                refused, DNS failure, timeout).  Never retried.
        """
        ...

    def close(self) -> None:
        """Release pooled connections."""
        ...
