"""
tests/unit/test_requests_transport.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for RequestsTransport.

The Session is replaced with a MagicMock so these tests run fully offline.
"""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from w3w.adapters.requests_transport import RequestsTransport
from w3w.domain.exceptions import TransportError
from w3w.ports.transport_port import TransportPort, TransportResponse
from w3w.services.client import ServiceClient


# ── Helpers ────────────────────────────────────────────────────────────────

def _make_session(status_code: int = 200, text: str = "{}") -> MagicMock:
    """Build a mock Session whose get() returns a canned response."""
    mock_resp = MagicMock()
    mock_resp.status_code = status_code
    mock_resp.content = text.encode("utf-8")
    mock_resp.url = "https://api.what3words.com/w3w?key=KEY"
    session = MagicMock(spec=requests.Session)
    session.get.return_value = mock_resp
    return session


class TestRequestsTransport:

    def test_satisfies_port(self):
        assert isinstance(RequestsTransport(session=_make_session()), TransportPort)

    def test_forwards_request(self):
        session = _make_session(text='{"ok": true}')
        transport = RequestsTransport(session=session)

        resp = transport.get(
            "https://api.what3words.com/w3w",
            params={"key": "KEY", "string": "a.b.c", "lang": "en"},
            headers={"Accept": "application/json"},
            timeout=3.0,
        )

        session.get.assert_called_once_with(
            "https://api.what3words.com/w3w",
            params={"key": "KEY", "string": "a.b.c", "lang": "en"},
            headers={"Accept": "application/json"},
            timeout=3.0,
        )
        assert resp == TransportResponse(
            status_code=200,
            content=b'{"ok": true}',
            url="https://api.what3words.com/w3w?key=KEY",
        )

    def test_non_2xx_is_not_an_error(self):
        transport = RequestsTransport(session=_make_session(status_code=404, text="nope"))
        resp = transport.get("https://x/w3w", params={}, headers={})
        assert resp.status_code == 404
        assert not resp.ok

    @pytest.mark.parametrize(
        "exc",
        [
            requests.ConnectionError("refused"),
            requests.Timeout("slow"),
            requests.exceptions.InvalidURL("bad"),
        ],
    )
    def test_request_exception_wrapped(self, exc):
        session = _make_session()
        session.get.side_effect = exc
        transport = RequestsTransport(session=session)

        with pytest.raises(TransportError) as info:
            transport.get("https://x/position", params={}, headers={})

        assert info.value.__cause__ is exc
        assert info.value.url == "https://x/position"
        assert session.get.call_count == 1

    def test_close_closes_session(self):
        session = _make_session()
        RequestsTransport(session=session).close()
        session.close.assert_called_once()

    def test_creates_own_session(self):
        transport = RequestsTransport()
        assert isinstance(transport._session, requests.Session)
        transport.close()

    def test_query_encoding_keeps_order(self):
        """requests encodes the params dict in insertion order."""
        prepared = requests.Request(
            "GET",
            "https://api.what3words.com/position",
            params={
                "key": "KEY",
                "position": "51.484462999999998,-0.195405000000000",
                "lang": "de",
                "corners": "true",
            },
        ).prepare()
        assert prepared.url == (
            "https://api.what3words.com/position?key=KEY"
            "&position=51.484462999999998%2C-0.195405000000000"
            "&lang=de&corners=true"
        )


# ── Body decoding ──────────────────────────────────────────────────────────

_UTF8_BODY = (
    '{"type":"3 words","words":["índice","ilha","ímã"],'
    '"position":{"lat":-23.5,"lng":-46.625},"language":"pt"}'
).encode("utf-8")


def _real_response(body: bytes, content_type: str) -> requests.Response:
    """A genuine requests.Response, with the encoding requests itself would pick."""
    resp = requests.Response()
    resp.status_code = 200
    resp._content = body
    resp.headers["Content-Type"] = content_type
    resp.encoding = requests.utils.get_encoding_from_headers(resp.headers)
    resp.url = "https://api.what3words.com/w3w"
    return resp


class TestBodyDecoding:

    @pytest.mark.parametrize(
        "content_type",
        ["application/json", "text/plain", "text/html", "application/octet-stream"],
    )
    def test_utf8_words_survive_any_content_type(self, content_type):
        session = MagicMock(spec=requests.Session)
        session.get.return_value = _real_response(_UTF8_BODY, content_type)
        client = ServiceClient.create("KEY", transport=RequestsTransport(session=session))

        result = client.lookup_by_address("índice.ilha.ímã")

        assert result.words.words == ("índice", "ilha", "ímã")

    def test_raw_bytes_handed_on(self):
        session = MagicMock(spec=requests.Session)
        session.get.return_value = _real_response(_UTF8_BODY, "text/plain")

        resp = RequestsTransport(session=session).get("https://x/w3w", params={}, headers={})

        assert resp.content == _UTF8_BODY
        assert "índice" in resp.text
