"""
query.py – Canonical query-string construction.

The string built here is both transmitted and signed, so rendering must be
stable: the same (name, value) pairs always produce the same bytes.

Numbers are rendered as plain decimals. Python's default float repr
switches to scientific notation for small values (str(1e-8) == "1e-08"),
which Bittrex rejects for quantities and rates; we go through Decimal to
keep "0.00000001".
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal
from enum import Enum
from typing import Any
from urllib.parse import quote


def stringify(value: Any) -> str:
    """Render a query value the way it will be sent and signed."""
    if isinstance(value, Enum):
        value = value.value

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"cannot send non-finite number {value!r}")
        # repr() is the shortest string that round-trips to the same float
        return _plain(Decimal(repr(value)))
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"cannot send non-finite number {value!r}")
        return _plain(value)
    return str(value)


def _plain(d: Decimal) -> str:
    return format(d, "f")


def _encode(text: str) -> str:
    return quote(text, safe="")


def build_query(endpoint: str, params: Iterable[tuple[str, Any]]) -> str:
    """
    Append params to endpoint as a query string, preserving order.

    Returns endpoint unchanged (no trailing "?") when params is empty.
    """
    pairs = [f"{_encode(name)}={_encode(stringify(value))}" for name, value in params]
    if not pairs:
        return endpoint
    return endpoint + "?" + "&".join(pairs)
