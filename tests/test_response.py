"""
tests/test_response.py – Envelope normalisation tests.

All tests run offline.  They verify that:
  1. One-element results unwrap to Single, others to Many (order kept).
  2. Bare-object and null results are handled.
  3. success == false raises RemoteApiError with the exchange message verbatim.
  4. Bad JSON, missing keys and non-boolean success flags raise
     MalformedResponseError, never RemoteApiError.
"""

from __future__ import annotations

import pytest

from bittrex_sdk.errors import MalformedResponseError, RemoteApiError
from bittrex_sdk.response import normalize
from bittrex_sdk.types import Many, Single


class TestSuccess:
    def test_single_element_list(self) -> None:
        assert normalize('{"success":true,"result":[{"a":1}]}') == Single(value={"a": 1})

    def test_two_element_list(self) -> None:
        result = normalize('{"success":true,"result":[{"a":1},{"a":2}]}')
        assert isinstance(result, Many)
        assert result.values == [{"a": 1}, {"a": 2}]

    def test_empty_list(self) -> None:
        result = normalize('{"success":true,"result":[]}')
        assert result == Many(values=[])

    def test_null_result(self) -> None:
        assert normalize('{"success":true,"message":"","result":null}') == Many(values=[])

    def test_missing_result(self) -> None:
        assert normalize('{"success":true}') == Many(values=[])

    def test_bare_object(self) -> None:
        body = '{"success":true,"message":"","result":{"Bid":0.00949003,"Ask":0.00950315,"Last":0.00950316}}'
        result = normalize(body)
        assert isinstance(result, Single)
        assert result.value["Last"] == 0.00950316

    def test_bytes_input(self) -> None:
        assert normalize(b'{"success":true,"result":[1]}') == Single(value=1)

    def test_many_preserves_order(self) -> None:
        result = normalize('{"success":true,"result":[3,1,2]}')
        assert result == Many(values=[3, 1, 2])


class TestRemoteFailure:
    def test_message_passed_verbatim(self) -> None:
        with pytest.raises(RemoteApiError) as exc_info:
            normalize('{"success":false,"message":"INVALID_MARKET"}')
        assert exc_info.value.message == "INVALID_MARKET"
        assert str(exc_info.value) == "INVALID_MARKET"

    def test_failure_wins_over_result(self) -> None:
        with pytest.raises(RemoteApiError, match="APIKEY_INVALID"):
            normalize('{"success":false,"message":"APIKEY_INVALID","result":[{"a":1}]}')

    def test_null_message(self) -> None:
        with pytest.raises(RemoteApiError) as exc_info:
            normalize('{"success":false,"message":null,"result":null}')
        assert exc_info.value.message == ""

    def test_not_a_malformed_error(self) -> None:
        with pytest.raises(RemoteApiError) as exc_info:
            normalize('{"success":false,"message":"X"}')
        assert not isinstance(exc_info.value, MalformedResponseError)


class TestMalformed:
    @pytest.mark.parametrize(
        "body",
        [
            "",
            "not json",
            '{"success":true,"result":[',
            "<html>502 Bad Gateway</html>",
        ],
    )
    def test_invalid_json(self, body: str) -> None:
        with pytest.raises(MalformedResponseError, match="invalid JSON"):
            normalize(body)

    def test_missing_success(self) -> None:
        with pytest.raises(MalformedResponseError, match="not a Bittrex envelope"):
            normalize('{"message":"","result":[]}')

    @pytest.mark.parametrize(
        "body",
        [
            '{"success":"yes","result":[]}',
            '{"success":1,"result":[]}',
            '{"success":"false","message":"X"}',
            '{"success":0,"message":"X"}',
        ],
    )
    def test_non_boolean_success(self, body: str) -> None:
        with pytest.raises(MalformedResponseError, match="not a Bittrex envelope"):
            normalize(body)

    @pytest.mark.parametrize("body", ["[]", "42", '"ok"', "null"])
    def test_non_object_body(self, body: str) -> None:
        with pytest.raises(MalformedResponseError):
            normalize(body)

    def test_scalar_result(self) -> None:
        with pytest.raises(MalformedResponseError, match="unexpected result type"):
            normalize('{"success":true,"result":"hello"}')

    def test_non_utf8_bytes(self) -> None:
        with pytest.raises(MalformedResponseError, match="UTF-8"):
            normalize(b"\xff\xfe\x00")

    def test_body_kept_on_error(self) -> None:
        with pytest.raises(MalformedResponseError) as exc_info:
            normalize("oops")
        assert exc_info.value.body == "oops"
