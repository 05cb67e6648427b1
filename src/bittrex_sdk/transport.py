"""
transport.py – HTTP GET capability (sync and async) for the Bittrex clients.

Transports only move bytes: they know nothing about envelopes, signing or
API versions.  Both raise TransportError on network failures and non-2xx
responses and never retry.

Any object with a matching ``get`` can be injected into the clients:

    class Transport(Protocol):
        def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse: ...

    class AsyncTransport(Protocol):
        async def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse: ...
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Protocol
from urllib.parse import urlsplit

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body:        bytes


class Transport(Protocol):
    def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse: ...


class AsyncTransport(Protocol):
    async def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse: ...


def _path(url: str) -> str:
    # Query strings carry the API key, keep them out of errors and logs
    return urlsplit(url).path


def _text(body: bytes) -> str:
    return body.decode("utf-8", errors="replace")


# ---------------------------------------------------------------------------
# Synchronous transport
# ---------------------------------------------------------------------------

class RequestsTransport:
    """
    Blocking transport backed by a shared requests.Session.

    Parameters
    ----------
    timeout : HTTP timeout in seconds
    session : optional pre-configured session (proxies, adapters, ...)
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: Optional[requests.Session] = None) -> None:
        self._timeout = timeout
        self._session = session

    def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse:
        if self._session is None:
            self._session = requests.Session()

        logger.debug("GET %s", _path(url))
        try:
            resp = self._session.get(url, headers=dict(headers), timeout=self._timeout)
        except requests.RequestException as exc:
            raise TransportError(None, str(exc), path=_path(url)) from exc

        if resp.status_code >= 400:
            raise TransportError(resp.status_code, resp.text, path=_path(url))

        return HttpResponse(status_code=resp.status_code, body=resp.content)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None


# ---------------------------------------------------------------------------
# Async transport
# ---------------------------------------------------------------------------

class AiohttpTransport:
    """
    Async transport backed by aiohttp (imported lazily).

    The session is created on first use and must be released with close().
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout
        self._session: Any = None   # aiohttp.ClientSession, created on first use

    async def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse:
        import aiohttp  # lazy import – only needed for async usage
        from yarl import URL

        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()

        logger.debug("GET %s", _path(url))
        try:
            # encoded=True: send the signed URL byte-for-byte, no re-quoting
            async with self._session.get(
                URL(url, encoded=True),
                headers=dict(headers),
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                status = resp.status
                body   = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(None, str(exc) or type(exc).__name__, path=_path(url)) from exc

        if status >= 400:
            raise TransportError(status, _text(body), path=_path(url))

        return HttpResponse(status_code=status, body=body)

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
