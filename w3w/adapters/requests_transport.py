"""
adapters/requests_transport.py
──────────────────────────────────────────────────────────────────────────────
Implements TransportPort on top of a requests.Session.

Key behaviour:
  - One Session per transport, so the connection pool is reused across calls
    and shared read-only by every ServiceClient operation
  - Query strings are encoded by requests from an ordered params dict
  - requests.RequestException (connection, DNS, timeout, broken body) is
    wrapped into TransportError; nothing is retried
  - Status codes are passed through untouched for the client to interpret
  - The body is handed on as raw bytes (resp.content); resp.text would decode
    text/* bodies without a charset as ISO-8859-1
"""
from __future__ import annotations

import logging
from typing import Optional

import requests

from w3w.domain.exceptions import TransportError
from w3w.ports.transport_port import TransportResponse

logger = logging.getLogger(__name__)


class RequestsTransport:
    """Blocking HTTP transport backed by ``requests``.

    Args:
        session: Optional pre-configured Session (proxies, adapters, certs).
                 A fresh one is created when omitted.
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session or requests.Session()
        logger.debug("RequestsTransport ready | shared_session=%s", session is not None)

    # ── TransportPort implementation ───────────────────────────────────────

    def get(
        self,
        url: str,
        params: dict[str, str],
        headers: dict[str, str],
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        try:
            resp = self._session.get(
                url,
                params=params,
                headers=headers,
                timeout=timeout,
            )
        except requests.RequestException as exc:
            logger.warning("GET %s failed: %s", url, exc)
            raise TransportError(f"GET {url} failed: {exc}", url=url) from exc

        logger.debug("GET %s -> HTTP %d", url, resp.status_code)
        return TransportResponse(
            status_code=resp.status_code,
            content=resp.content,
            url=resp.url,
        )

    def close(self) -> None:
        self._session.close()
