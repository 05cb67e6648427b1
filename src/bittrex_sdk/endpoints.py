"""
endpoints.py – Routing table for both Bittrex API generations.

URL shapes
----------
    v1.1: {root}/v1.1/{public|market|account}/{method}?market=...
    v2.0: {root}/v2.0/pub/{markets|currencies|market|account}/{method}?marketname=...

Besides the path, the only thing that changes between versions is the
name of the market query parameter.  Both live here so that no call site
ever branches on the version.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .errors import UnknownOperationError
from .types import URL_ROOT, ApiVersion, EndpointSpec

_MARKET_PARAM: dict[ApiVersion, str] = {
    ApiVersion.V1_1: "market",
    ApiVersion.V2_0: "marketname",
}


@dataclass(frozen=True)
class _Route:
    v1_category: Optional[str]   # None → v2.0 only
    v2_category: str
    v2_method:   str


_ROUTES: dict[str, _Route] = {
    # Public
    "getmarkets":           _Route("public",  "markets",    "getmarkets"),
    "getcurrencies":        _Route("public",  "currencies", "getcurrencies"),
    "getticker":            _Route("public",  "market",     "getlatesttick"),
    "getmarketsummaries":   _Route("public",  "market",     "getmarketsummaries"),
    "getmarketsummary":     _Route("public",  "market",     "getmarketsummary"),
    "getorderbook":         _Route("public",  "market",     "getmarketorderbook"),
    "getmarkethistory":     _Route("public",  "market",     "getmarkethistory"),
    # Bittrex never exposed tick history under v1.1
    "gettickshistory":      _Route(None,      "market",     "getticks"),
    # Market (private)
    "buylimit":             _Route("market",  "market",     "buylimit"),
    "selllimit":            _Route("market",  "market",     "selllimit"),
    "cancel":               _Route("market",  "market",     "cancel"),
    "getopenorders":        _Route("market",  "market",     "getopenorders"),
    # Account (private)
    "getbalances":          _Route("account", "account",    "getbalances"),
    "getbalance":           _Route("account", "account",    "getbalance"),
    "getdepositaddress":    _Route("account", "account",    "getdepositaddress"),
    "withdraw":             _Route("account", "account",    "withdraw"),
    "getorder":             _Route("account", "account",    "getorder"),
    "getorderhistory":      _Route("account", "account",    "getorderhistory"),
    "getwithdrawalhistory": _Route("account", "account",    "getwithdrawalhistory"),
    "getdeposithistory":    _Route("account", "account",    "getdeposithistory"),
}


def known_operations() -> frozenset[str]:
    return frozenset(_ROUTES)


def resolve(
    operation: str,
    version: Union[ApiVersion, str],
    url_root: str = URL_ROOT,
) -> EndpointSpec:
    """
    Map an operation name and API version to its URL and market-param name.

    Parameters
    ----------
    operation : lowercase Bittrex method name, e.g. "getticker"
    version   : ApiVersion or its string value ("v1.1" / "v2.0")
    url_root  : API root without the version segment

    Raises
    ------
    UnsupportedVersionError : version is not v1.1 or v2.0
    UnknownOperationError   : operation is not in the routing table
    """
    version = ApiVersion.parse(version)
    try:
        route = _ROUTES[operation]
    except KeyError:
        raise UnknownOperationError(operation) from None

    root = url_root.rstrip("/")

    if version is ApiVersion.V1_1 and route.v1_category is not None:
        return EndpointSpec(
            category=route.v1_category,
            base_url=f"{root}/{version.value}/{route.v1_category}/{operation}",
            market_param_name=_MARKET_PARAM[version],
        )

    v2 = ApiVersion.V2_0
    return EndpointSpec(
        category=route.v2_category,
        base_url=f"{root}/{v2.value}/pub/{route.v2_category}/{route.v2_method}",
        market_param_name=_MARKET_PARAM[v2],
    )
