"""
examples/quickstart.py – End-to-end demo of the Bittrex SDK.

Walks through:
  1. Public market data on v1.1 (ticker, order book)
  2. The same market on v2.0 (renamed endpoints, "marketname" parameter)
  3. Tick history (v2.0-only route, works from any config)
  4. Signed account calls (balances, open orders) when credentials are set
  5. The async client

HOW TO RUN
----------
    export BITTREX_API_KEY="your_api_key"        # optional
    export BITTREX_API_SECRET="your_api_secret"  # optional
    export BITTREX_VERSION="v2.0"                # public demo version, default v1.1
    python examples/quickstart.py

Without credentials only the public part runs.
"""

from __future__ import annotations

import asyncio
import logging
import os

from bittrex_sdk import (
    ApiVersion,
    AsyncBittrexClient,
    BittrexClient,
    BittrexError,
    BookType,
    ClientConfig,
    Many,
    RemoteApiError,
    Single,
    TickInterval,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s – %(message)s",
)
logger = logging.getLogger("quickstart")

# ---------------------------------------------------------------------------
# Config – read from environment variables
# ---------------------------------------------------------------------------

API_KEY    = os.environ.get("BITTREX_API_KEY",    "")
API_SECRET = os.environ.get("BITTREX_API_SECRET", "")
VERSION    = os.environ.get("BITTREX_VERSION",    "v1.1")

MARKET   = "BTC-LTC"
CURRENCY = "BTC"


def _count(result: Single | Many) -> int:
    return 1 if isinstance(result, Single) else len(result.values)


# ---------------------------------------------------------------------------
# Part 1 – public endpoints
# ---------------------------------------------------------------------------

def public_demo() -> None:
    logger.info("=== Public demo (%s) ===", VERSION)

    with BittrexClient(ClientConfig.public(VERSION)) as client:
        tick = client.getticker(MARKET)
        logger.info("Ticker %s: %s", MARKET, tick)

        book = client.getorderbook(MARKET, BookType.BUY)
        logger.info("Order book (buy side): %d entries", _count(book))

        try:
            client.getticker("NOT-A-MARKET")
        except RemoteApiError as exc:
            logger.info("Exchange rejected bad market as expected: %s", exc.message)

    # Tick history only exists on v2.0, the SDK routes it there regardless
    with BittrexClient(ClientConfig.public(ApiVersion.V1_1)) as client:
        ticks = client.gettickshistory(MARKET, TickInterval.HOUR)
        logger.info("Hourly candles: %d", _count(ticks))


# ---------------------------------------------------------------------------
# Part 2 – signed endpoints
# ---------------------------------------------------------------------------

def private_demo() -> None:
    if not (API_KEY and API_SECRET):
        logger.info("BITTREX_API_KEY / BITTREX_API_SECRET not set – skipping private demo")
        return

    logger.info("=== Private demo ===")
    with BittrexClient(ClientConfig.authenticated(API_KEY, API_SECRET)) as client:
        balance = client.getbalance(CURRENCY)
        logger.info("%s balance: %s", CURRENCY, balance)

        orders = client.getopenorders(MARKET)
        logger.info("Open orders on %s: %d", MARKET, _count(orders))


# ---------------------------------------------------------------------------
# Part 3 – async client
# ---------------------------------------------------------------------------

async def async_demo() -> None:
    logger.info("=== Async demo ===")
    async with AsyncBittrexClient(ClientConfig.public(VERSION)) as client:
        summary, markets = await asyncio.gather(
            client.getmarketsummary(MARKET),
            client.getmarkets(),
        )
        logger.info("Summary %s: %s", MARKET, summary)
        logger.info("Markets listed: %d", _count(markets))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    try:
        public_demo()
        private_demo()
        asyncio.run(async_demo())
    except BittrexError as exc:
        logger.error("Bittrex call failed: %s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
