"""
signing.py – HMAC-SHA512 request signing for Bittrex private endpoints.

How it works
------------
1. The query string is built with ``apikey`` and ``nonce`` in front of the
   operation's own parameters.
2. The complete URL (scheme, host, path, query) is HMAC-SHA512'd with the
   API secret as key.
3. The lowercase hex digest is sent in the ``apisign`` header.

The URL must not be touched after signing: reordering or re-encoding a
single parameter makes the exchange reject the request.

NonceProvider
-------------
Bittrex treats the nonce as a replay guard and requires it to grow.  The
default provider is a millisecond timestamp that never repeats or goes
backwards, even when two threads ask within the same millisecond or the
wall clock is stepped back.  Tests can plug in any ``Callable[[], int]``::

    client = BittrexClient(config, nonce_provider=lambda: 1000)
"""

from __future__ import annotations

import hashlib
import hmac
import threading
import time
from typing import Callable

# Callable with no args that returns the next nonce
NonceProvider = Callable[[], int]


def sign(secret: str, full_url: str) -> str:
    """Return the lowercase hex HMAC-SHA512 of full_url keyed with secret."""
    return hmac.new(
        secret.encode("utf-8"),
        full_url.encode("utf-8"),
        hashlib.sha512,
    ).hexdigest()


class MillisecondNonce:
    """
    Thread-safe, strictly increasing millisecond nonce.

    Parameters
    ----------
    clock : returns seconds since the epoch (default time.time)
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last  = 0
        self._lock  = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            now = int(self._clock() * 1000)
            self._last = max(now, self._last + 1)
            return self._last
