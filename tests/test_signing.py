"""
tests/test_signing.py – Unit tests for HMAC-SHA512 signing and nonces.

These tests run entirely offline (no network calls).
They verify that:
  1. sign() matches a direct hmac/sha512 computation and is lowercase hex.
  2. sign() is deterministic.
  3. Changing the secret or any single query value changes the signature.
  4. MillisecondNonce is strictly increasing, even across clock regressions
     and concurrent callers.
"""

from __future__ import annotations

import hashlib
import hmac
import threading

import pytest

from bittrex_sdk.query import build_query
from bittrex_sdk.signing import MillisecondNonce, sign

SECRET = "S"
ENDPOINT = "https://bittrex.com/api/v1.1/market/buylimit"
PARAMS = [
    ("apikey", "K"),
    ("nonce", "1000"),
    ("market", "BTC-LTC"),
    ("quantity", "1.5"),
    ("rate", "0.0095"),
]


class TestSign:
    def test_matches_hmac_sha512(self) -> None:
        url = build_query(ENDPOINT, PARAMS)
        expected = hmac.new(SECRET.encode(), url.encode(), hashlib.sha512).hexdigest()
        assert sign(SECRET, url) == expected

    def test_lowercase_hex_of_sha512_length(self) -> None:
        sig = sign(SECRET, ENDPOINT)
        assert len(sig) == 128
        assert sig == sig.lower()
        assert all(c in "0123456789abcdef" for c in sig)

    def test_deterministic(self) -> None:
        url = build_query(ENDPOINT, PARAMS)
        assert sign(SECRET, url) == sign(SECRET, url)

    def test_different_secret_different_sig(self) -> None:
        url = build_query(ENDPOINT, PARAMS)
        assert sign("S1", url) != sign("S2", url)

    @pytest.mark.parametrize("index", range(len(PARAMS)))
    def test_every_param_is_covered(self, index: int) -> None:
        changed = list(PARAMS)
        name, value = changed[index]
        changed[index] = (name, value + "0")
        original = sign(SECRET, build_query(ENDPOINT, PARAMS))
        assert sign(SECRET, build_query(ENDPOINT, changed)) != original

    def test_param_order_is_covered(self) -> None:
        swapped = [PARAMS[1], PARAMS[0], *PARAMS[2:]]
        assert sign(SECRET, build_query(ENDPOINT, swapped)) != sign(SECRET, build_query(ENDPOINT, PARAMS))

    def test_unicode_secret(self) -> None:
        assert sign("sécret", ENDPOINT) == hmac.new(
            "sécret".encode("utf-8"), ENDPOINT.encode("utf-8"), hashlib.sha512
        ).hexdigest()


class TestMillisecondNonce:
    def test_uses_clock_in_milliseconds(self) -> None:
        nonce = MillisecondNonce(clock=lambda: 1_700_000_000.5)
        assert nonce() == 1_700_000_000_500

    def test_strictly_increasing_within_same_millisecond(self) -> None:
        nonce = MillisecondNonce(clock=lambda: 1.0)
        values = [nonce() for _ in range(5)]
        assert values == [1000, 1001, 1002, 1003, 1004]

    def test_clock_regression_does_not_go_backwards(self) -> None:
        times = iter([10.0, 5.0, 20.0])
        nonce = MillisecondNonce(clock=lambda: next(times))
        assert [nonce(), nonce(), nonce()] == [10_000, 10_001, 20_000]

    def test_default_clock(self) -> None:
        nonce = MillisecondNonce()
        first, second = nonce(), nonce()
        assert second > first > 1_500_000_000_000

    def test_thread_safe_unique_and_ordered(self) -> None:
        nonce = MillisecondNonce(clock=lambda: 1.0)
        per_thread: list[list[int]] = [[] for _ in range(8)]

        def worker(out: list[int]) -> None:
            for _ in range(200):
                out.append(nonce())

        threads = [threading.Thread(target=worker, args=(out,)) for out in per_thread]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        everything = [v for out in per_thread for v in out]
        assert len(set(everything)) == len(everything)
        for out in per_thread:
            assert out == sorted(out)
