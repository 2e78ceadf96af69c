from __future__ import annotations

import pytest

from src.core.connection._utils import (
    encode_path_segment,
    encode_query,
    normalize_params,
    strip_boundary_slashes,
)
from tests.factory_builders import ENCODED_APP_ID, MESSY_APP_ID


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("example.com/////", "example.com"),
        ("/mobile///", "mobile"),
        ("//a/b///", "a/b"),
        ("a//b", "a//b"),
        ("///", ""),
        ("", ""),
    ],
)
def test_strip_boundary_slashes(raw: str, expected: str) -> None:
    assert strip_boundary_slashes(raw) == expected


def test_encode_path_segment_escapes_unsafe_and_keeps_safe_chars() -> None:
    assert encode_path_segment(MESSY_APP_ID) == ENCODED_APP_ID
    assert encode_path_segment("a/b#c") == "a%2Fb%23c"
    assert encode_path_segment("x-y_z.~!:@") == "x-y_z.~!:@"


def test_encode_path_segment_handles_non_ascii() -> None:
    assert encode_path_segment("매출") == "%EB%A7%A4%EC%B6%9C"


def test_encode_query_encodes_keys_and_values() -> None:
    assert encode_query([("a b", "c&d"), ("e", "f=g/h")]) == "a%20b=c%26d&e=f%3Dg%2Fh"


def test_normalize_params_accepts_mapping_and_pairs() -> None:
    assert normalize_params({"a": "1", "b": "2"}) == [("a", "1"), ("b", "2")]
    assert normalize_params([("a", "1"), ("a", "2")]) == [("a", "1"), ("a", "2")]
    assert normalize_params(iter([("n", 5)])) == [("n", "5")]  # type: ignore[list-item]
