"""I/O 경계 DTO 기반 클래스"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# ========================================
# ConfigDict (전역 설정)
# ========================================

OPTIMIZED_CONFIG = ConfigDict(
    # 런타임 검증
    use_enum_values=True,  # Enum → 값 직렬화
    extra="forbid",  # 알 수 없는 필드 금지
    validate_default=True,  # 기본값도 검증
    # 식별자/앱 이름의 앞뒤 공백도 의미가 있으므로 트림하지 않음
    str_strip_whitespace=False,
    # 불변성
    frozen=True,
    arbitrary_types_allowed=False,
)


class BaseIOModelDTO(BaseModel):
    """I/O 경계용 공통 Pydantic v2 베이스 모델.

    특징:
    - 불변 객체 (frozen=True)
    - 알 수 없는 필드 금지 (extra="forbid")
    - 기본값 검증 (validate_default=True)
    """

    model_config = OPTIMIZED_CONFIG
