"""
services/container.py
──────────────────────────────────────────────────────────────────────────────
Dependency Injection container.

THIS IS THE ONLY FILE THAT NAMES THE CONCRETE TRANSPORT ADAPTER.

Everything is driven by environment variables (see config/settings.py):

  W3W_API_KEY, W3W_ENDPOINT, W3W_LANG, W3W_CORNERS,
  W3W_TIMEOUT, W3W_RAISE_FOR_STATUS

Library users who already hold a key can skip this module entirely and call
ServiceClient.create(api_key) directly.

Thread safety:
  @lru_cache(maxsize=1) makes get_client() return the same instance across
  calls.  ServiceClient holds no per-call state and requests.Session is safe
  to reuse, so the shared instance may serve concurrent callers.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from w3w.adapters.requests_transport import RequestsTransport
from w3w.config.settings import Settings, get_settings
from w3w.services.client import ServiceClient

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> ServiceClient:
    """Wire a ServiceClient from explicit settings (uncached).

    Raises:
        MissingAPIKeyError: If ``settings.api_key`` is blank.
    """
    client = ServiceClient(
        settings.api_key,
        default_options=settings.default_options(),
        transport=RequestsTransport(),
        endpoint=settings.endpoint,
        timeout=settings.timeout,
        raise_for_status=settings.raise_for_status,
    )
    logger.info(
        "ServiceClient wired | endpoint=%s lang=%s corners=%s timeout=%s",
        client.endpoint,
        client.defaults.lang,
        client.defaults.corners,
        settings.timeout,
    )
    return client


@lru_cache(maxsize=1)
def get_client() -> ServiceClient:
    """Build and return the process-wide ServiceClient singleton.

    Returns:
        ServiceClient configured from the environment.

    Raises:
        MissingAPIKeyError: If ``W3W_API_KEY`` is unset or blank.
    """
    return build_client(get_settings())
