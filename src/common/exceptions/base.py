from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from src.common.exceptions.exception_rule import classify_diagnostic, classify_exception
from src.core.types import ErrorCode, ErrorDomain


@dataclass(slots=True, eq=False)
class EngineConnectionException(Exception):
    """엔진 연결 관련 기본 예외 클래스

    운영/관측/정책 판단을 위한 구조화 필드를 포함하며, `to_dict()`는
    이벤트/로그 직렬화 시 일관된 스키마를 제공합니다.
    """

    message: str
    original_exception: Exception | None = None

    # 구조화 필드 (운영/관측/정책 판단용)
    error_domain: ErrorDomain = ErrorDomain.UNKNOWN
    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR
    retryable: bool = False

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 이벤트 데이터로 변환"""
        result: dict[str, Any] = {
            "error": self.message,
            "error_type": self.__class__.__name__,
            "error_domain": self.error_domain.value,
            "error_code": self.error_code.value,
            "retryable": self.retryable,
        }

        if self.original_exception:
            result["original_error"] = str(self.original_exception)
            result["original_error_type"] = self.original_exception.__class__.__name__

        return result


@dataclass(slots=True, eq=False)
class InvalidUrlError(EngineConnectionException):
    """조립된 URL 이 URL 파서 검증을 통과하지 못한 경우

    - url: 파서에 넘긴 조립 문자열 (정규화 전)
    - diagnostic: 파서가 돌려준 진단 메시지
    """

    url: str = ""
    diagnostic: str = ""

    def __post_init__(self) -> None:
        if self.error_domain is ErrorDomain.UNKNOWN:
            self.error_domain = ErrorDomain.URL
        if self.error_code is ErrorCode.UNKNOWN_ERROR:
            self.error_code = classify_diagnostic(self.diagnostic)

    @classmethod
    def from_validation_error(cls, url: str, exc: ValidationError) -> InvalidUrlError:
        """URL 파서의 ValidationError 를 InvalidUrlError 로 감쌉니다.

        첫 번째 에러의 ctx.error (없으면 msg) 를 진단 메시지로 사용합니다.
        """
        diagnostic = str(exc)
        if exc.errors():
            first = exc.errors()[0]
            ctx = first.get("ctx") or {}
            diagnostic = str(ctx.get("error") or first.get("msg", diagnostic))

        domain, _, retryable = classify_exception(exc, "url")
        return cls(
            message=f"invalid connection url {url!r}: {diagnostic}",
            original_exception=exc,
            error_domain=domain,
            error_code=classify_diagnostic(diagnostic),
            retryable=retryable,
            url=url,
            diagnostic=diagnostic,
        )

    def to_dict(self) -> dict[str, Any]:
        result = EngineConnectionException.to_dict(self)
        result["url"] = self.url
        result["diagnostic"] = self.diagnostic
        return result
