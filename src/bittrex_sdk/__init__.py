"""
Bittrex SDK – Python client for the Bittrex exchange HTTP API (v1.1 and v2.0).

Provides:
  - Sync and async façades            (client.py    → BittrexClient, AsyncBittrexClient)
  - Version-aware routing table       (endpoints.py → resolve)
  - Canonical query strings           (query.py     → build_query)
  - HMAC-SHA512 request signing       (signing.py   → sign, MillisecondNonce)
  - Envelope normalisation            (response.py  → normalize)
  - Typed Pydantic v2 models          (types.py)
  - requests / aiohttp transports     (transport.py)

Quickstart
----------
    from bittrex_sdk import ApiVersion, BittrexClient, ClientConfig

    with BittrexClient(ClientConfig.public(ApiVersion.V2_0)) as client:
        print(client.getticker("BTC-LTC").value)

    with BittrexClient(ClientConfig.authenticated("key", "secret")) as client:
        print(client.getbalance("BTC").value)
"""

from .errors import (
    BittrexError,
    UnsupportedVersionError,
    UnknownOperationError,
    MissingCredentialsError,
    RemoteApiError,
    MalformedResponseError,
    TransportError,
)
from .types import (
    # Enums
    ApiVersion,
    BookType,
    TickInterval,
    # Configuration
    ClientConfig,
    URL_ROOT,
    # Request descriptors
    Operation,
    EndpointSpec,
    PreparedRequest,
    # Responses
    ApiResponse,
    Single,
    Many,
    NormalizedResult,
)
from .query import build_query, stringify
from .endpoints import resolve
from .signing import sign, MillisecondNonce, NonceProvider
from .response import normalize
from .transport import HttpResponse, RequestsTransport, AiohttpTransport
from .client import (
    BittrexClient,
    AsyncBittrexClient,
    build_operation,
    prepare_request,
    PUBLIC_OPERATIONS,
    PRIVATE_OPERATIONS,
)

__all__ = [
    # Errors
    "BittrexError",
    "UnsupportedVersionError",
    "UnknownOperationError",
    "MissingCredentialsError",
    "RemoteApiError",
    "MalformedResponseError",
    "TransportError",
    # Enums
    "ApiVersion",
    "BookType",
    "TickInterval",
    # Configuration
    "ClientConfig",
    "URL_ROOT",
    # Request descriptors
    "Operation",
    "EndpointSpec",
    "PreparedRequest",
    # Responses
    "ApiResponse",
    "Single",
    "Many",
    "NormalizedResult",
    # Core
    "build_query",
    "stringify",
    "resolve",
    "sign",
    "MillisecondNonce",
    "NonceProvider",
    "normalize",
    # Transport
    "HttpResponse",
    "RequestsTransport",
    "AiohttpTransport",
    # Clients
    "BittrexClient",
    "AsyncBittrexClient",
    "build_operation",
    "prepare_request",
    "PUBLIC_OPERATIONS",
    "PRIVATE_OPERATIONS",
]

__version__ = "0.1.0"
