"""
client.py – BittrexClient / AsyncBittrexClient façades.

Every API method follows the same pipeline:

    operation table → resolve endpoint → build query
        → (private only) prepend apikey + nonce, sign URL, set apisign header
        → transport GET → normalise envelope

Which operations are private, and which parameters each takes, is data
(_OPERATIONS below); the per-method wrappers only name the operation and
pass its arguments through.

Usage – sync
------------
    from bittrex_sdk import BittrexClient, ClientConfig, ApiVersion

    with BittrexClient(ClientConfig.public(ApiVersion.V2_0)) as client:
        tick = client.getticker("BTC-LTC")          # Single(value={...})

    with BittrexClient(ClientConfig.authenticated(key, secret)) as client:
        balance = client.getbalance("BTC")

Usage – async
-------------
    async with AsyncBittrexClient(ClientConfig.authenticated(key, secret)) as client:
        orders = await client.getopenorders("BTC-LTC")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from .endpoints import resolve
from .errors import MissingCredentialsError, UnknownOperationError
from .query import build_query, stringify
from .response import normalize
from .signing import MillisecondNonce, NonceProvider, sign
from .transport import (
    DEFAULT_TIMEOUT,
    AiohttpTransport,
    AsyncTransport,
    RequestsTransport,
    Transport,
)
from .types import (
    BookType,
    ClientConfig,
    NormalizedResult,
    Operation,
    PreparedRequest,
    TickInterval,
)

logger = logging.getLogger(__name__)

Amount = Union[Decimal, float, int, str]

# Logical name of the market parameter; renamed per version by the resolver
_MARKET = "market"


# ---------------------------------------------------------------------------
# Operation table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class _OperationDef:
    private: bool
    params:  tuple[str, ...] = ()


_OPERATIONS: dict[str, _OperationDef] = {
    # Public
    "getmarkets":           _OperationDef(False),
    "getcurrencies":        _OperationDef(False),
    "getticker":            _OperationDef(False, (_MARKET,)),
    "getmarketsummaries":   _OperationDef(False),
    "getmarketsummary":     _OperationDef(False, (_MARKET,)),
    "getorderbook":         _OperationDef(False, (_MARKET, "type")),
    "getmarkethistory":     _OperationDef(False, (_MARKET,)),
    "gettickshistory":      _OperationDef(False, (_MARKET, "tickinterval")),
    # Market
    "buylimit":             _OperationDef(True, (_MARKET, "quantity", "rate")),
    "selllimit":            _OperationDef(True, (_MARKET, "quantity", "rate")),
    "cancel":               _OperationDef(True, ("uuid",)),
    "getopenorders":        _OperationDef(True, (_MARKET,)),
    # Account
    "getbalances":          _OperationDef(True),
    "getbalance":           _OperationDef(True, ("currency",)),
    "getdepositaddress":    _OperationDef(True, ("currency",)),
    "withdraw":             _OperationDef(True, ("currency", "quantity", "address")),
    "getorder":             _OperationDef(True, ("uuid",)),
    "getorderhistory":      _OperationDef(True, (_MARKET,)),
    "getwithdrawalhistory": _OperationDef(True, ("currency",)),
    "getdeposithistory":    _OperationDef(True, ("currency",)),
}

PUBLIC_OPERATIONS  = frozenset(name for name, op in _OPERATIONS.items() if not op.private)
PRIVATE_OPERATIONS = frozenset(name for name, op in _OPERATIONS.items() if op.private)


def build_operation(name: str, **args: Any) -> Operation:
    """
    Build an Operation from the table, in the table's parameter order.

    Arguments left as None are optional filters and are omitted from the
    query entirely.
    """
    try:
        op = _OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(name) from None

    unexpected = set(args) - set(op.params)
    if unexpected:
        raise TypeError(f"{name}() got unexpected parameters {sorted(unexpected)}")

    params = tuple((p, args[p]) for p in op.params if args.get(p) is not None)
    return Operation(name=name, is_private=op.private, params=params)


def prepare_request(
    config: ClientConfig,
    operation: Operation,
    nonce_provider: NonceProvider,
) -> PreparedRequest:
    """
    Turn an Operation into the exact URL and headers to send.

    Public operations never draw a nonce and never carry a signature.
    """
    spec   = resolve(operation.name, config.version, config.url_root)
    params = [
        (spec.market_param_name if name == _MARKET else name, value)
        for name, value in operation.params
    ]

    if not operation.is_private:
        return PreparedRequest(url=build_query(spec.base_url, params))

    if not config.is_authenticated:
        raise MissingCredentialsError(operation.name)

    nonce  = str(nonce_provider())
    signed = [("apikey", config.api_key), ("nonce", nonce), *params]
    url    = build_query(spec.base_url, signed)
    return PreparedRequest(url=url, headers={"apisign": sign(config.api_secret, url)})


# ---------------------------------------------------------------------------
# Argument validation
# ---------------------------------------------------------------------------

def _positive_amount(value: Amount, field: str) -> Decimal:
    """
    Parse a quantity/rate into a Decimal, rejecting zero, negative,
    non-finite and non-numeric values.

    Returning the Decimal (not the caller's value) means strings such as
    "1e-8" or " 2 " go on the wire as plain decimals.
    """
    try:
        d = Decimal(stringify(value))
    except (InvalidOperation, ValueError):
        raise ValueError(f"{field} '{value}' is not a valid decimal") from None
    if not d.is_finite() or d <= 0:
        raise ValueError(f"{field} must be positive, got '{value}'")
    return d


# ---------------------------------------------------------------------------
# Per-operation methods (shared by the sync and async clients)
# ---------------------------------------------------------------------------

class _BittrexOperations:
    """
    One method per Bittrex operation.

    Subclasses provide ``_call(name, **args)``.  On BittrexClient each
    method returns a NormalizedResult; on AsyncBittrexClient it returns an
    awaitable of one.
    """

    def _call(self, name: str, **args: Any) -> Any:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def getmarkets(self) -> Any:
        """Open and available trading markets, with metadata."""
        return self._call("getmarkets")

    def getcurrencies(self) -> Any:
        """All supported currencies, with metadata."""
        return self._call("getcurrencies")

    def getticker(self, market: str) -> Any:
        """Current bid / ask / last for a market, e.g. "BTC-LTC"."""
        return self._call("getticker", market=market)

    def getmarketsummaries(self) -> Any:
        """Last 24 h summary of all active markets."""
        return self._call("getmarketsummaries")

    def getmarketsummary(self, market: str) -> Any:
        """Last 24 h summary of one market."""
        return self._call("getmarketsummary", market=market)

    def getorderbook(self, market: str, booktype: Union[BookType, str] = BookType.BOTH) -> Any:
        """Order book for a market; booktype is "buy", "sell" or "both"."""
        return self._call("getorderbook", market=market, type=BookType(booktype))

    def getmarkethistory(self, market: str) -> Any:
        """Latest trades for a market."""
        return self._call("getmarkethistory", market=market)

    def gettickshistory(
        self,
        market: str,
        interval: Union[TickInterval, str] = TickInterval.ONE_MIN,
    ) -> Any:
        """Candles for a market (v2.0 route, whatever the configured version)."""
        return self._call("gettickshistory", market=market, tickinterval=TickInterval(interval))

    # ------------------------------------------------------------------
    # Market API (private)
    # ------------------------------------------------------------------

    def buylimit(self, market: str, quantity: Amount, rate: Amount) -> Any:
        """
        Place a limit buy order.

        quantity and rate may be Decimal, float, int or str. They are parsed
        as decimals and sent in plain notation, so "1e-8" is sent as
        "0.00000001" and surrounding whitespace is dropped.
        """
        return self._call(
            "buylimit",
            market=market,
            quantity=_positive_amount(quantity, "quantity"),
            rate=_positive_amount(rate, "rate"),
        )

    def selllimit(self, market: str, quantity: Amount, rate: Amount) -> Any:
        """Place a limit sell order. Amounts are normalised as in buylimit()."""
        return self._call(
            "selllimit",
            market=market,
            quantity=_positive_amount(quantity, "quantity"),
            rate=_positive_amount(rate, "rate"),
        )

    def cancel(self, uuid: str) -> Any:
        return self._call("cancel", uuid=uuid)

    def getopenorders(self, market: Optional[str] = None) -> Any:
        """Open orders, optionally for a single market."""
        return self._call("getopenorders", market=market)

    # ------------------------------------------------------------------
    # Account API (private)
    # ------------------------------------------------------------------

    def getbalances(self) -> Any:
        return self._call("getbalances")

    def getbalance(self, currency: str) -> Any:
        return self._call("getbalance", currency=currency)

    def getdepositaddress(self, currency: str) -> Any:
        """
        Deposit address for a currency.

        Bittrex answers ADDRESS_GENERATING (as a RemoteApiError) until a
        fresh address is ready.
        """
        return self._call("getdepositaddress", currency=currency)

    def withdraw(self, currency: str, quantity: Amount, address: str) -> Any:
        """
        Withdraw quantity of currency to address.

        A string quantity is normalised to a plain decimal ("1e-8" is sent
        as "0.00000001"). The address is sent as given, percent-encoded.
        """
        return self._call(
            "withdraw",
            currency=currency,
            quantity=_positive_amount(quantity, "quantity"),
            address=address,
        )

    def getorder(self, uuid: str) -> Any:
        return self._call("getorder", uuid=uuid)

    def getorderhistory(self, market: Optional[str] = None) -> Any:
        return self._call("getorderhistory", market=market)

    def getwithdrawalhistory(self, currency: Optional[str] = None) -> Any:
        return self._call("getwithdrawalhistory", currency=currency)

    def getdeposithistory(self, currency: Optional[str] = None) -> Any:
        return self._call("getdeposithistory", currency=currency)


# ---------------------------------------------------------------------------
# Synchronous client
# ---------------------------------------------------------------------------

class BittrexClient(_BittrexOperations):
    """
    Synchronous Bittrex client.

    Parameters
    ----------
    config         : ClientConfig (defaults to public-only v1.1)
    transport      : object with get(url, headers) → HttpResponse
                     (defaults to RequestsTransport)
    nonce_provider : Callable[[], int] for private calls
                     (defaults to MillisecondNonce)
    timeout        : HTTP timeout in seconds for the default transport

    The config is immutable and the nonce provider is locked, so one
    instance may be shared between threads.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[Transport] = None,
        nonce_provider: Optional[NonceProvider] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._config    = config or ClientConfig.public()
        self._transport = transport or RequestsTransport(timeout=timeout)
        self._nonce     = nonce_provider or MillisecondNonce()

    def __enter__(self) -> "BittrexClient":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def prepare(self, name: str, **args: Any) -> PreparedRequest:
        """Build (and sign, if private) the request without sending it."""
        return prepare_request(self._config, build_operation(name, **args), self._nonce)

    def _call(self, name: str, **args: Any) -> NormalizedResult:
        request = self.prepare(name, **args)
        logger.debug("%s → %s", name, request.url.split("?", 1)[0])
        response = self._transport.get(request.url, request.headers)
        return normalize(response.body)


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------

class AsyncBittrexClient(_BittrexOperations):
    """
    Async Bittrex client (aiohttp-based by default).

    Same methods as BittrexClient; each returns an awaitable.

    Usage
    -----
        async with AsyncBittrexClient(ClientConfig.public()) as client:
            markets = await client.getmarkets()
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[AsyncTransport] = None,
        nonce_provider: Optional[NonceProvider] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._config    = config or ClientConfig.public()
        self._transport = transport or AiohttpTransport(timeout=timeout)
        self._nonce     = nonce_provider or MillisecondNonce()

    async def __aenter__(self) -> "AsyncBittrexClient":
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    async def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def prepare(self, name: str, **args: Any) -> PreparedRequest:
        """Build (and sign, if private) the request without sending it."""
        return prepare_request(self._config, build_operation(name, **args), self._nonce)

    async def _call(self, name: str, **args: Any) -> NormalizedResult:
        request = self.prepare(name, **args)
        logger.debug("%s → %s", name, request.url.split("?", 1)[0])
        response = await self._transport.get(request.url, request.headers)
        return normalize(response.body)
