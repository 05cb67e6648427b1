"""
types.py – Pydantic v2 models and enums for the Bittrex API.

Bittrex exposes two incompatible API generations:

    v1.1   https://bittrex.com/api/v1.1/{public|market|account}/{method}
    v2.0   https://bittrex.com/api/v2.0/pub/{section}/{method}

Signed (private) requests are only defined for v1.1, so an authenticated
ClientConfig always pins the version to v1.1.

Results
-------
Every call returns one of two shapes:

    Single(value=...)    the envelope's result held exactly one item
    Many(values=[...])   zero or several items, order preserved
"""

from __future__ import annotations

import logging
from enum import Enum, unique
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, StrictBool, field_validator, model_validator

from .errors import UnsupportedVersionError

logger = logging.getLogger(__name__)

URL_ROOT = "https://bittrex.com/api"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

@unique
class ApiVersion(str, Enum):
    """Bittrex API generation."""
    V1_1 = "v1.1"
    V2_0 = "v2.0"

    @classmethod
    def parse(cls, value: Union["ApiVersion", str]) -> "ApiVersion":
        """Coerce a member or its string value, rejecting anything else."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedVersionError(value) from None


@unique
class BookType(str, Enum):
    BUY  = "buy"
    SELL = "sell"
    BOTH = "both"


@unique
class TickInterval(str, Enum):
    ONE_MIN    = "oneMin"
    FIVE_MIN   = "fiveMin"
    THIRTY_MIN = "thirtyMin"
    HOUR       = "hour"
    DAY        = "day"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class ClientConfig(BaseModel):
    """
    Credentials and API version, fixed for the lifetime of a client.

    api_key    : Bittrex API key (empty for public-only use)
    api_secret : matching secret, used as the HMAC key (never repr'd)
    version    : ApiVersion.V1_1 or ApiVersion.V2_0
    url_root   : API root, without the version segment

    Use the constructors rather than the raw model:

        ClientConfig.public()                        # v1.1, no credentials
        ClientConfig.public(ApiVersion.V2_0)         # v2.0, no credentials
        ClientConfig.authenticated("key", "secret")  # always v1.1
    """

    model_config = {"frozen": True}

    api_key:    str        = ""
    api_secret: str        = Field(default="", repr=False)
    version:    ApiVersion = ApiVersion.V1_1
    url_root:   str        = URL_ROOT

    @model_validator(mode="before")
    @classmethod
    def pin_signed_version(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if not (data.get("api_key") or data.get("api_secret")):
            return data

        requested = ApiVersion.parse(data.get("version", ApiVersion.V1_1))
        if requested is not ApiVersion.V1_1:
            logger.warning(
                "Signed requests are only defined for %s; ignoring requested version %s",
                ApiVersion.V1_1.value, requested.value,
            )
        return {**data, "version": ApiVersion.V1_1}

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, v: Any) -> ApiVersion:
        return ApiVersion.parse(v)

    @field_validator("url_root")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("url_root must be a non-empty URL")
        return v.rstrip("/")

    @classmethod
    def public(cls, version: Union[ApiVersion, str] = ApiVersion.V1_1) -> "ClientConfig":
        return cls(version=version)

    @classmethod
    def authenticated(cls, api_key: str, api_secret: str) -> "ClientConfig":
        if not api_key or not api_secret:
            raise ValueError("api_key and api_secret must both be non-empty")
        return cls(api_key=api_key, api_secret=api_secret)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.api_key and self.api_secret)


# ---------------------------------------------------------------------------
# Request descriptors
# ---------------------------------------------------------------------------

class Operation(BaseModel):
    """
    One logical API call.

    params order is significant: it is the query-string order and
    therefore part of the signed payload.
    """

    model_config = {"frozen": True}

    name:       str
    is_private: bool
    params:     tuple[tuple[str, Any], ...] = ()


class EndpointSpec(BaseModel):
    """Resolved route for an (operation, version) pair."""

    model_config = {"frozen": True}

    category:          str
    base_url:          str
    market_param_name: str


class PreparedRequest(BaseModel):
    """The exact URL (already signed, if private) and headers to send."""

    model_config = {"frozen": True}

    url:     str
    headers: dict[str, str] = {}


# ---------------------------------------------------------------------------
# Response envelope and normalised results
# ---------------------------------------------------------------------------

class ApiResponse(BaseModel):
    """Raw {success, message, result} wrapper used by every Bittrex endpoint."""
    success: StrictBool  # "true"/1 are not a success flag
    message: Optional[str] = None
    result:  Any           = None


class Single(BaseModel):
    """The envelope carried exactly one result object."""
    value: Any


class Many(BaseModel):
    """The envelope carried zero or several results, in exchange order."""
    values: list[Any] = []


NormalizedResult = Union[Single, Many]
