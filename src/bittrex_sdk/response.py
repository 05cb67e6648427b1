"""
response.py – Normalise Bittrex's {success, message, result} envelope.

    {"success": true,  "result": [{...}]}          → Single(value={...})
    {"success": true,  "result": {...}}            → Single(value={...})
    {"success": true,  "result": [{...}, {...}]}   → Many(values=[...])
    {"success": true,  "result": []}               → Many(values=[])
    {"success": true,  "result": null}             → Many(values=[])
    {"success": false, "message": "INVALID_MARKET"} → RemoteApiError
    anything else                                   → MalformedResponseError
"""

from __future__ import annotations

import json
import logging
from typing import Union

from pydantic import ValidationError

from .errors import MalformedResponseError, RemoteApiError
from .types import ApiResponse, Many, NormalizedResult, Single

logger = logging.getLogger(__name__)


def _decode(raw: Union[str, bytes]) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedResponseError(f"body is not UTF-8: {exc}") from exc


def normalize(raw: Union[str, bytes]) -> NormalizedResult:
    """
    Parse a raw response body and unwrap its result.

    Raises
    ------
    RemoteApiError         : the exchange reported success == false
    MalformedResponseError : invalid JSON, or no usable envelope
    """
    text = _decode(raw)

    try:
        body = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"invalid JSON: {exc.msg}", text) from exc

    try:
        envelope = ApiResponse.model_validate(body)
    except ValidationError as exc:
        raise MalformedResponseError(
            f"not a Bittrex envelope ({exc.error_count()} validation errors)", text
        ) from exc

    if not envelope.success:
        message = envelope.message or ""
        logger.debug("Bittrex reported failure: %s", message)
        raise RemoteApiError(message)

    result = envelope.result
    if result is None:
        return Many(values=[])
    if isinstance(result, dict):
        return Single(value=result)
    if isinstance(result, list):
        if len(result) == 1:
            return Single(value=result[0])
        return Many(values=result)

    raise MalformedResponseError(f"unexpected result type {type(result).__name__}", text)
