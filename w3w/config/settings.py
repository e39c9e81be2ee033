"""
config/settings.py
──────────────────────────────────────────────────────────────────────────────
Single source of truth for all tuneable parameters.

All values can be overridden via environment variables or a .env file placed
at the project root.  The frozen dataclass ensures settings are never mutated
at runtime.

Only the wiring layer (services/container.py, the CLI) reads settings.
ServiceClient itself takes explicit arguments and never looks at the
environment, so the library can be embedded without any env vars set.

  W3W_API_KEY           → api key sent as ``key=`` on every request
  W3W_ENDPOINT          → service base URL
  W3W_LANG / W3W_CORNERS → client-level default CallOptions
  W3W_TIMEOUT           → per-request timeout in seconds (unset = none)
  W3W_RAISE_FOR_STATUS  → treat non-2xx responses as ServiceError
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from w3w.domain.models import DEFAULT_ENDPOINT, CallOptions

# Load .env from project root (two levels up from this file)
load_dotenv(Path(__file__).parent.parent.parent / ".env")

_TRUTHY = {"1", "true", "yes", "on"}


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_float_or_none(key: str) -> Optional[float]:
    raw = os.getenv(key, "").strip()
    return float(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    """Immutable application settings loaded from environment variables."""

    # ── Credentials ────────────────────────────────────────────────────────
    api_key: str = field(
        default_factory=lambda: _env("W3W_API_KEY", "")
    )

    # ── Service ────────────────────────────────────────────────────────────
    endpoint: str = field(
        default_factory=lambda: _env("W3W_ENDPOINT", DEFAULT_ENDPOINT)
    )

    # ── Default call options ───────────────────────────────────────────────
    default_lang: str = field(
        default_factory=lambda: _env("W3W_LANG", "en")
    )
    default_corners: bool = field(
        default_factory=lambda: _env_bool("W3W_CORNERS", False)
    )

    # ── HTTP ───────────────────────────────────────────────────────────────
    # None means no timeout: the request blocks until the transport gives up.
    timeout: Optional[float] = field(
        default_factory=lambda: _env_float_or_none("W3W_TIMEOUT")
    )
    raise_for_status: bool = field(
        default_factory=lambda: _env_bool("W3W_RAISE_FOR_STATUS", False)
    )

    def default_options(self) -> CallOptions:
        """Client-level CallOptions built from W3W_LANG / W3W_CORNERS."""
        return CallOptions(lang=self.default_lang, corners=self.default_corners)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns a cached singleton Settings instance.

    The wiring layer calls this rather than Settings() so one snapshot of
    the environment is used for the whole process.
    """
    return Settings()
