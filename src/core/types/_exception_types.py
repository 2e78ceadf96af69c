"""트라이/캐치 블록에서 사용할 예외 타입 정의 모듈.

광범위한 Exception 사용을 지양하고, 의도한 예외만 명시적으로 처리하기 위해 사용합니다.
"""

from enum import StrEnum
from typing import Final, TypeAlias

from pydantic import ValidationError

# ----------------------------------------------------------------------------
# Enums
# ----------------------------------------------------------------------------


class ErrorDomain(StrEnum):
    """에러 도메인 분류"""

    URL = "url"
    CONFIG = "config"
    DESERIALIZATION = "deserialization"
    UNKNOWN = "unknown"


class ErrorCode(StrEnum):
    """에러 코드 분류"""

    INVALID_URL = "invalid_url"
    INVALID_HOST = "invalid_host"
    INVALID_PORT = "invalid_port"
    INVALID_SPEC = "invalid_spec"
    UNKNOWN_ERROR = "unknown_error"


# ----------------------------------------------------------------------------
# Exception Constants
# ----------------------------------------------------------------------------

# URL 검증 단계에서 InvalidUrlError 로 변환할 예외
# - ValidationError: pydantic-core URL 파서 거부
URL_VALIDATION_ERRORS: Final[tuple[type[BaseException], ...]] = (ValidationError,)


ErrorCategory: TypeAlias = tuple[ErrorDomain, ErrorCode, bool]
ExceptionGroup: TypeAlias = type[BaseException] | tuple[type[BaseException], ...]
RuleKind: TypeAlias = tuple[str, ...]
