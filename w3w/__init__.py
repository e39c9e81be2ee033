"""
what3words API client — Production Package
===========================================
Hexagonal (Ports & Adapters) architecture.

Layer map
─────────────────────────────────────────────────────
  config/       Settings loaded from env / .env
  domain/       Pure value objects and exceptions — no I/O
  ports/        Abstract interfaces (Python Protocols)
  adapters/     Concrete implementations of each Port (requests)
  services/     ServiceClient and the DI container
  interfaces/   Delivery layer: CLI
  tests/        Full test suite: unit / integration

Typical use:
    from w3w import ServiceClient
    client = ServiceClient.create("MY-KEY")
    client.lookup_by_address("prom.cape.pump").position
"""
from w3w.domain.exceptions import (
    DecodeError,
    MissingAPIKeyError,
    ServiceError,
    TransportError,
    W3WError,
)
from w3w.domain.models import (
    BoundingBox,
    CallOptions,
    Coordinate,
    LanguageEntry,
    LanguageList,
    PositionResult,
    ThreeWordAddress,
    default_options,
)
from w3w.services.client import ServiceClient

__version__ = "1.0.0"

__all__ = [
    "BoundingBox",
    "CallOptions",
    "Coordinate",
    "DecodeError",
    "LanguageEntry",
    "LanguageList",
    "MissingAPIKeyError",
    "PositionResult",
    "ServiceClient",
    "ServiceError",
    "ThreeWordAddress",
    "TransportError",
    "W3WError",
    "default_options",
]
