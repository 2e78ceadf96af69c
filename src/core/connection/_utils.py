from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Final
from urllib.parse import quote, urlencode

from src.core.types import QueryPair, QueryParams

# 선행/후행 슬래시 구간만 매칭 (내부 슬래시는 유지)
_BOUNDARY_SLASHES: Final[re.Pattern[str]] = re.compile(r"^/+|/+$")

# 경로 세그먼트 안에서 그대로 둘 수 있는 sub-delims + ":" "@"
# (영숫자와 "-._~" 는 quote 가 항상 유지)
_SEGMENT_SAFE: Final[str] = "!$&'()*+,;=:@"


def strip_boundary_slashes(value: str) -> str:
    """앞뒤의 연속된 "/" 만 제거합니다.

    >>> strip_boundary_slashes("//a/b///")
    'a/b'
    """
    return _BOUNDARY_SLASHES.sub("", value)


def encode_path_segment(value: str) -> str:
    """하나의 경로 세그먼트로 퍼센트 인코딩합니다.

    공백, "%", "?", "#", "/" 등은 이스케이프하고 "!" 같은
    세그먼트 안전 문자는 그대로 둡니다.
    """
    return quote(value, safe=_SEGMENT_SAFE)


def normalize_params(params: QueryParams) -> list[QueryPair]:
    """매핑 또는 (key, value) 쌍 이터러블을 순서를 유지한 쌍 리스트로 변환"""
    items = params.items() if isinstance(params, Mapping) else params
    return [(str(key), str(value)) for key, value in items]


def encode_query(pairs: Iterable[QueryPair]) -> str:
    """쿼리 문자열 생성. 키/값 모두 퍼센트 인코딩 (공백 → %20), 순서/중복 유지"""
    return urlencode(list(pairs), quote_via=quote, safe="")
