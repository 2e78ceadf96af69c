from __future__ import annotations

import orjson
import pytest
from pydantic import AnyWebsocketUrl, TypeAdapter, ValidationError

from src.common.exceptions.base import EngineConnectionException, InvalidUrlError
from src.common.exceptions.exception_rule import classify_diagnostic, classify_exception
from src.core.connection import url_builder
from src.core.connection.url_builder import canonicalize_url
from src.core.types import ErrorCode, ErrorDomain


@pytest.mark.parametrize(
    ("diagnostic", "expected"),
    [
        ("invalid port number", ErrorCode.INVALID_PORT),
        ("empty host", ErrorCode.INVALID_HOST),
        ("invalid IPv6 address", ErrorCode.INVALID_HOST),
        ("Input should be a valid URL, invalid domain character", ErrorCode.INVALID_HOST),
        ("invalid international domain name", ErrorCode.INVALID_HOST),
        ("relative URL without a base", ErrorCode.INVALID_URL),
    ],
)
def test_classify_diagnostic(diagnostic: str, expected: ErrorCode) -> None:
    assert classify_diagnostic(diagnostic) is expected


def _parser_error(url: str) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        TypeAdapter(AnyWebsocketUrl).validate_python(url)
    return exc_info.value


def test_classify_exception_uses_kind_rules() -> None:
    assert classify_exception(_parser_error("ws://[::1"), "url") == (
        ErrorDomain.URL,
        ErrorCode.INVALID_URL,
        False,
    )
    assert classify_exception(orjson.JSONDecodeError("x", "", 0), "config")[0] is (
        ErrorDomain.DESERIALIZATION
    )
    assert classify_exception(RuntimeError("x"), "url") == (
        ErrorDomain.UNKNOWN,
        ErrorCode.UNKNOWN_ERROR,
        False,
    )


def test_plain_value_error_is_not_a_url_rejection() -> None:
    assert classify_exception(ValueError("x"), "url") == (
        ErrorDomain.UNKNOWN,
        ErrorCode.UNKNOWN_ERROR,
        False,
    )


def test_canonicalize_url_lets_non_parser_errors_propagate(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    class _BrokenAdapter:
        def validate_python(self, url: str) -> None:
            raise ValueError("not a parser rejection")

    monkeypatch.setattr(url_builder, "_URL_ADAPTER", _BrokenAdapter())

    with pytest.raises(ValueError, match="not a parser rejection") as exc_info:
        url_builder.canonicalize_url("ws://localhost/")

    assert not isinstance(exc_info.value, InvalidUrlError)


def test_canonicalize_url_wraps_parser_error() -> None:
    with pytest.raises(InvalidUrlError) as exc_info:
        canonicalize_url("ws://[::1")

    err = exc_info.value
    assert isinstance(err, EngineConnectionException)
    assert err.url == "ws://[::1"
    assert err.error_code is ErrorCode.INVALID_HOST
    assert err.original_exception is exc_info.value.__cause__


def test_canonicalize_url_rejects_non_websocket_scheme() -> None:
    with pytest.raises(InvalidUrlError) as exc_info:
        canonicalize_url("http://localhost/")

    assert exc_info.value.error_code is ErrorCode.INVALID_URL


def test_direct_construction_derives_code_from_diagnostic() -> None:
    err = InvalidUrlError(message="bad", url="ws://x:99999", diagnostic="invalid port number")

    assert err.error_domain is ErrorDomain.URL
    assert err.error_code is ErrorCode.INVALID_PORT
    assert str(err) == "bad"


def test_to_dict_is_json_serializable() -> None:
    err = InvalidUrlError.from_validation_error("ws://[::1", _parser_error("ws://[::1"))

    payload = err.to_dict()

    assert payload["error_type"] == "InvalidUrlError"
    assert payload["error_domain"] == "url"
    assert payload["error_code"] == "invalid_host"
    assert payload["url"] == "ws://[::1"
    assert payload["original_error_type"] == "ValidationError"
    assert orjson.loads(orjson.dumps(payload)) == payload
