"""
services/client.py
──────────────────────────────────────────────────────────────────────────────
ServiceClient: the typed surface over the what3words HTTP API.

Four query operations share one request executor:

  lookup_by_address       GET /w3w            string=w1.w2.w3  → PositionResult
  lookup_by_position      GET /position       position=lat,lng → PositionResult
  languages_for_address   GET /get-languages  string=w1.w2.w3  → LanguageList
  languages_for_position  GET /get-languages  position=lat,lng → LanguageList

Option resolution is all-or-nothing: per-call CallOptions, when given,
replace the client defaults entirely.  Each call is a single round trip;
there is no retry, caching or batching.  The client keeps no per-call state,
so one instance may be shared between threads as long as its transport can
be (a requests.Session can).
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError

from w3w.domain.exceptions import DecodeError, MissingAPIKeyError, ServiceError
from w3w.domain.models import (
    DEFAULT_ENDPOINT,
    CallOptions,
    Coordinate,
    LanguageList,
    PositionResult,
    ThreeWordAddress,
    default_options as fresh_default_options,
)
from w3w.ports.transport_port import TransportPort

logger = logging.getLogger(__name__)

_ACCEPT_JSON = {"Accept": "application/json"}

ResultT = TypeVar("ResultT", bound=BaseModel)

AddressLike = Union[ThreeWordAddress, str, Sequence[str]]
CoordinateLike = Union[Coordinate, Sequence[float]]


class ServiceClient:
    """Client for the what3words geocoding API.

    Args:
        api_key:          Service key; must be non-empty after stripping.
        default_options:  CallOptions used when a call passes none.
                          Defaults to ``default_options()`` (en, no corners).
        transport:        TransportPort implementation.  A RequestsTransport
                          with its own Session is created when omitted.
        endpoint:         Service base URL.
        timeout:          Seconds per request, or None for no timeout.
        raise_for_status: When True, a non-2xx response raises ServiceError
                          instead of being handed to the decoder.

    Raises:
        MissingAPIKeyError: If ``api_key`` is empty or whitespace only.
    """

    def __init__(
        self,
        api_key: str,
        default_options: Optional[CallOptions] = None,
        transport: Optional[TransportPort] = None,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: Optional[float] = None,
        raise_for_status: bool = False,
    ) -> None:
        if not api_key or not api_key.strip():
            raise MissingAPIKeyError()

        if transport is None:
            from w3w.adapters.requests_transport import RequestsTransport
            transport = RequestsTransport()

        self._api_key = api_key
        self._defaults = default_options if default_options is not None else fresh_default_options()
        self._transport = transport
        self._endpoint = endpoint.rstrip("/")
        self._timeout = timeout
        self._raise_for_status = raise_for_status
        logger.debug(
            "ServiceClient ready | endpoint=%s lang=%s corners=%s",
            self._endpoint,
            self._defaults.lang,
            self._defaults.corners,
        )

    @classmethod
    def create(
        cls,
        api_key: str,
        default_options: Optional[CallOptions] = None,
        **kwargs,
    ) -> "ServiceClient":
        """Build a client; same arguments as the constructor."""
        return cls(api_key, default_options, **kwargs)

    # ── Properties ─────────────────────────────────────────────────────────

    @property
    def defaults(self) -> CallOptions:
        return self._defaults

    @property
    def endpoint(self) -> str:
        return self._endpoint

    # ── Public API ─────────────────────────────────────────────────────────

    def lookup_by_address(
        self,
        address: AddressLike,
        opts: Optional[CallOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> PositionResult:
        """Resolve a three-word address to its position.

        Args:
            address: ThreeWordAddress, dotted string or 3-item sequence.
            opts:    Per-call options; replace the client defaults if given.
            timeout: Overrides the client timeout for this call.

        Returns:
            PositionResult; ``corners`` is set only when requested and
            returned by the service.

        Raises:
            pydantic.ValidationError: ``address`` is not three non-empty
                words; raised before any request is sent.
            TransportError: Network-level failure.
            DecodeError:    Body is not a valid position response.
            ServiceError:   Non-2xx status, if raise_for_status is enabled.
        """
        params = {"key": self._api_key, "string": _address(address).joined()}
        return self._execute("/w3w", params, opts, PositionResult, timeout)

    def lookup_by_position(
        self,
        coord: CoordinateLike,
        opts: Optional[CallOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> PositionResult:
        """Resolve a latitude/longitude pair to its three-word address.

        Same contract as :meth:`lookup_by_address`.

        Raises:
            pydantic.ValidationError: ``coord`` is not a lat/lng pair;
                raised before any request is sent.
            TransportError, DecodeError, ServiceError: As for
                :meth:`lookup_by_address`.
        """
        params = {"key": self._api_key, "position": _coordinate(coord).query_value()}
        return self._execute("/position", params, opts, PositionResult, timeout)

    def languages_for_address(
        self,
        address: AddressLike,
        opts: Optional[CallOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> LanguageList:
        """List the languages a three-word address is available in.

        Raises:
            pydantic.ValidationError: Malformed ``address``, before any request.
            TransportError, DecodeError, ServiceError: As for
                :meth:`lookup_by_address`.
        """
        params = {"key": self._api_key, "string": _address(address).joined()}
        return self._execute("/get-languages", params, opts, LanguageList, timeout)

    def languages_for_position(
        self,
        coord: CoordinateLike,
        opts: Optional[CallOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> LanguageList:
        """List the languages a position can be expressed in.

        Raises:
            pydantic.ValidationError: Malformed ``coord``, before any request.
            TransportError, DecodeError, ServiceError: As for
                :meth:`lookup_by_address`.
        """
        params = {"key": self._api_key, "position": _coordinate(coord).query_value()}
        return self._execute("/get-languages", params, opts, LanguageList, timeout)

    def close(self) -> None:
        """Release the transport's pooled connections."""
        self._transport.close()

    def __enter__(self) -> "ServiceClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ── Private helpers ────────────────────────────────────────────────────

    def _execute(
        self,
        path: str,
        params: dict[str, str],
        opts: Optional[CallOptions],
        result_type: type[ResultT],
        timeout: Optional[float] = None,
    ) -> ResultT:
        """Run one GET against ``path`` and decode the body as ``result_type``."""
        resolved = opts if opts is not None else self._defaults
        query = {**params, **resolved.query_params()}
        url = self._endpoint + path

        logger.debug(
            "GET %s | %s",
            path,
            {k: v for k, v in query.items() if k != "key"},
        )
        response = self._transport.get(
            url,
            params=query,
            headers=dict(_ACCEPT_JSON),
            timeout=timeout if timeout is not None else self._timeout,
        )

        # Status is only judged on request; otherwise the decoder decides.
        if self._raise_for_status and not response.ok:
            raise ServiceError(response.status_code, response.text, url=url)

        try:
            return result_type.model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning(
                "Could not decode %s response from %s (HTTP %d)",
                result_type.__name__,
                path,
                response.status_code,
            )
            raise DecodeError(
                f"Invalid {result_type.__name__} body from {path}: {exc}",
                body=response.text,
            ) from exc


# ── Helpers ────────────────────────────────────────────────────────────────

def _address(value: AddressLike) -> ThreeWordAddress:
    return ThreeWordAddress.model_validate(value)


def _coordinate(value: CoordinateLike) -> Coordinate:
    return Coordinate.model_validate(value)
