from src.core.types._common_types import (
    APP_SEGMENT,
    DEFAULT_HOST,
    IDENTITY_SEGMENT,
    SCHEME_PLAIN,
    SCHEME_SECURE,
    TTL_SEGMENT,
    QueryPair,
    QueryParams,
    Scheme,
    SpecSnapshot,
)
from src.core.types._exception_types import (
    URL_VALIDATION_ERRORS,
    ErrorCategory,
    ErrorCode,
    ErrorDomain,
    ExceptionGroup,
    RuleKind,
)

__all__ = [
    # _common_types
    "Scheme",
    "SCHEME_PLAIN",
    "SCHEME_SECURE",
    "DEFAULT_HOST",
    "APP_SEGMENT",
    "IDENTITY_SEGMENT",
    "TTL_SEGMENT",
    "QueryPair",
    "QueryParams",
    "SpecSnapshot",
    # _exception_types
    "ErrorDomain",
    "ErrorCode",
    "ErrorCategory",
    "ExceptionGroup",
    "RuleKind",
    "URL_VALIDATION_ERRORS",
]
