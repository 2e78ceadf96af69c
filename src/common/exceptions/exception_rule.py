from __future__ import annotations

from typing import Final, TypeAlias

import orjson
from pydantic import ValidationError

from src.core.dto.internal.common import RuleDomain
from src.core.types import ErrorCategory, ErrorCode, ErrorDomain

# 설정/DTO 역직렬화 공통 예외
DESERIALIZATION_ERRORS = (
    orjson.JSONDecodeError,
    ValidationError,
    TypeError,
    KeyError,
)


# 1) URL 검증 규칙 (파서 거부 -> 재시도 불가)
RULES_URL: list[RuleDomain] = [
    RuleDomain(
        kinds=("url",),
        exc=ValidationError,
        result=(ErrorDomain.URL, ErrorCode.INVALID_URL, False),
    ),
]

# 2) 연결 스펙(DTO/설정) 로딩 규칙
RULES_CONFIG: list[RuleDomain] = [
    RuleDomain(
        kinds=("config",),
        exc=orjson.JSONDecodeError,
        result=(ErrorDomain.DESERIALIZATION, ErrorCode.INVALID_SPEC, False),
    ),
    RuleDomain(
        kinds=("config",),
        exc=DESERIALIZATION_ERRORS,
        result=(ErrorDomain.CONFIG, ErrorCode.INVALID_SPEC, False),
    ),
]

RuleDict: TypeAlias = dict[str, list[RuleDomain]]
RULES_BY_KIND: RuleDict = {
    "url": RULES_URL,
    "config": RULES_CONFIG,
}

# URL 파서 진단 메시지 -> 세부 에러 코드 (부분 문자열 매칭, 선언 순서 우선)
DIAGNOSTIC_CODES: Final[tuple[tuple[str, ErrorCode], ...]] = (
    ("invalid port number", ErrorCode.INVALID_PORT),
    ("empty host", ErrorCode.INVALID_HOST),
    ("invalid ipv4 address", ErrorCode.INVALID_HOST),
    ("invalid ipv6 address", ErrorCode.INVALID_HOST),
    ("invalid domain character", ErrorCode.INVALID_HOST),
    ("invalid international domain name", ErrorCode.INVALID_HOST),
)


def classify_exception(err: BaseException, kind: str) -> ErrorCategory:
    """예외 → (ErrorDomain, ErrorCode, retryable) 분류기 (규칙 테이블 기반)

    - 규칙은 "구체 → 포괄" 순서로 선언되어 가장 특수한 규칙이 먼저 매칭됩니다.
    - 알 수 없는 kind 는 빈 규칙으로 처리되어 UNKNOWN 으로 떨어집니다.
    """
    for rule in RULES_BY_KIND.get(kind, []):
        if isinstance(err, rule.exc):
            return rule.result

    return (ErrorDomain.UNKNOWN, ErrorCode.UNKNOWN_ERROR, False)


def classify_diagnostic(diagnostic: str) -> ErrorCode:
    """URL 파서 진단 문자열을 세부 에러 코드로 좁힙니다."""
    lowered = diagnostic.lower()
    for needle, code in DIAGNOSTIC_CODES:
        if needle in lowered:
            return code
    return ErrorCode.INVALID_URL
