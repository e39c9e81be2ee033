"""
tests/conftest.py
──────────────────────────────────────────────────────────────────────────────
Shared pytest fixtures and a fake transport.

FakeTransport implements TransportPort via structural subtyping; it does NOT
inherit from any base class.  It records every request and replays canned
responses, so ServiceClient can be tested without any network access.

Fixture hierarchy:
  fake_transport  → FakeTransport answering with a canned /w3w body
  client          → ServiceClient("KEY") wired with fake_transport
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional, Union

import pytest

from w3w.ports.transport_port import TransportResponse
from w3w.services.client import ServiceClient


# ── Canned bodies ──────────────────────────────────────────────────────────

POSITION_BODY = json.dumps(
    {
        "type": "3 words",
        "words": ["prom", "cape", "pump"],
        "position": {"lat": 51.484463, "lng": -0.195405},
        "language": "en",
    }
)

POSITION_WITH_CORNERS_BODY = json.dumps(
    {
        "type": "3 words",
        "words": ["prom", "cape", "pump"],
        "position": {"lat": 51.484463, "lng": -0.195405},
        "corners": {
            "sw": {"lat": 51.484449, "lng": -0.195426},
            "ne": {"lat": 51.484476, "lng": -0.195383},
        },
        "language": "de",
    }
)

LANGUAGES_BODY = json.dumps(
    {
        "languages": [
            {"code": "de", "name_display": "Deutsch"},
            {"code": "en", "name_display": "English"},
            {"code": "fr", "name_display": "français"},
        ]
    }
)


# ── Fake transport ─────────────────────────────────────────────────────────

@dataclass
class RecordedRequest:
    url: str
    params: dict[str, str]
    headers: dict[str, str]
    timeout: Optional[float]


@dataclass
class FakeTransport:
    """Replays queued responses (or raises queued exceptions) in order.

    When the queue holds a single item it is reused for every call.
    """

    replies: list[Union[TransportResponse, Exception]] = field(default_factory=list)
    requests: list[RecordedRequest] = field(default_factory=list)
    closed: bool = False

    def queue(self, body: str, status_code: int = 200) -> "FakeTransport":
        self.replies.append(
            TransportResponse(status_code=status_code, content=body.encode("utf-8"))
        )
        return self

    def fail_with(self, exc: Exception) -> "FakeTransport":
        self.replies.append(exc)
        return self

    def get(
        self,
        url: str,
        params: dict[str, str],
        headers: dict[str, str],
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        self.requests.append(RecordedRequest(url, dict(params), dict(headers), timeout))
        reply = self.replies[0] if len(self.replies) == 1 else self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


# ── pytest fixtures ────────────────────────────────────────────────────────

@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport().queue(POSITION_BODY)


@pytest.fixture
def client(fake_transport) -> ServiceClient:
    return ServiceClient.create("KEY", transport=fake_transport)
