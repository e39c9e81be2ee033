"""
domain/models.py
──────────────────────────────────────────────────────────────────────────────
Pure domain objects: Pydantic models with no imports from adapters or ports.

Two families live here:
  • value objects the caller hands to ServiceClient
      ThreeWordAddress, Coordinate, CallOptions
  • response entities decoded from the service's JSON bodies
      PositionResult (+ BoundingBox), LanguageList (+ LanguageEntry)

Every model is frozen: once decoded or constructed it cannot be mutated.
Decoding is done with ``model_validate_json`` so malformed JSON and schema
mismatches surface as a single pydantic ValidationError, which the client
wraps into DecodeError.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_serializer,
    model_validator,
)

DEFAULT_ENDPOINT = "https://api.what3words.com"
DEFAULT_LANG = "en"
WORD_SEPARATOR = "."


# ── Caller-supplied values ─────────────────────────────────────────────────────

class ThreeWordAddress(BaseModel):
    """Exactly three non-empty words, e.g. ``prom.cape.pump``.

    Accepts a dotted string or any 3-item sequence wherever a model is
    validated, so ``ThreeWordAddress.model_validate("prom.cape.pump")`` and
    ``ThreeWordAddress.model_validate(["prom", "cape", "pump"])`` are
    equivalent.  The words themselves are not checked against any
    dictionary; the service rejects unknown words.
    """

    model_config = ConfigDict(frozen=True)

    words: tuple[str, str, str]

    @model_validator(mode="before")
    @classmethod
    def coerce_input(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"words": tuple(data.split(WORD_SEPARATOR))}
        if isinstance(data, (list, tuple)):
            return {"words": tuple(data)}
        return data

    @field_validator("words")
    @classmethod
    def check_tokens(cls, v: tuple[str, str, str]) -> tuple[str, str, str]:
        if any(not w for w in v):
            raise ValueError("three-word address tokens must be non-empty")
        return v

    @model_serializer
    def serialize_words(self) -> list[str]:
        return list(self.words)

    @classmethod
    def of(cls, first: str, second: str, third: str) -> "ThreeWordAddress":
        return cls(words=(first, second, third))

    @classmethod
    def parse(cls, text: str) -> "ThreeWordAddress":
        """Split a dotted ``w1.w2.w3`` string into an address."""
        return cls.model_validate(text)

    def joined(self) -> str:
        """Query form: the three words joined by ``.``."""
        return WORD_SEPARATOR.join(self.words)

    def __str__(self) -> str:
        return self.joined()


class Coordinate(BaseModel):
    """A (latitude, longitude) pair of 64-bit floats."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

    @model_validator(mode="before")
    @classmethod
    def from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("a coordinate needs exactly two values (lat, lng)")
            return {"lat": data[0], "lng": data[1]}
        return data

    @classmethod
    def of(cls, lat: float, lng: float) -> "Coordinate":
        return cls(lat=lat, lng=lng)

    def query_value(self) -> str:
        """``lat,lng`` in fixed-point with 15 fractional digits.

        The service expects this exact textual form: never scientific
        notation, never rounded below 15 places.
        """
        return f"{self.lat:.15f},{self.lng:.15f}"


class CallOptions(BaseModel):
    """Per-request options: response language and corner data.

    Supplied per call they replace the client defaults as a whole; fields
    are never merged with the defaults.
    """

    model_config = ConfigDict(frozen=True)

    lang: str = Field(DEFAULT_LANG, description="Response language code")
    corners: bool = Field(False, description="Ask for the cell's bounding box")

    def query_params(self) -> dict[str, str]:
        """Query parameters contributed by these options.

        ``corners`` is only ever sent as ``true``; when unset it is left out.
        """
        params = {"lang": self.lang or DEFAULT_LANG}
        if self.corners:
            params["corners"] = "true"
        return params


def default_options() -> CallOptions:
    """Fresh client-level defaults: English, no corners."""
    return CallOptions(lang=DEFAULT_LANG, corners=False)


# ── Service responses ──────────────────────────────────────────────────────────

class BoundingBox(BaseModel):
    """South-west / north-east corners of a three-word cell."""

    model_config = ConfigDict(frozen=True)

    sw: Coordinate
    ne: Coordinate

    @model_validator(mode="before")
    @classmethod
    def from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("corners need exactly two points (sw, ne)")
            return {"sw": data[0], "ne": data[1]}
        return data


class PositionResult(BaseModel):
    """Decoded body of ``/w3w`` and ``/position``.

    ``corners`` is only populated when corner data was requested and the
    service returned it.
    """

    model_config = ConfigDict(frozen=True)

    type:     str = ""
    words:    ThreeWordAddress
    position: Coordinate
    corners:  Optional[BoundingBox] = None
    language: str = ""

    def to_dict(self) -> dict:
        """Serialise to a plain JSON-safe dict."""
        return self.model_dump(mode="json")


class LanguageEntry(BaseModel):
    """One supported language: ISO code plus display name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str
    name: str = Field("", alias="name_display")


class LanguageList(BaseModel):
    """Decoded body of ``/get-languages``.  Never ``None``; possibly empty."""

    model_config = ConfigDict(frozen=True)

    languages: list[LanguageEntry] = Field(default_factory=list)

    @field_validator("languages", mode="before")
    @classmethod
    def null_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def codes(self) -> list[str]:
        return [entry.code for entry in self.languages]

    def __len__(self) -> int:
        return len(self.languages)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
