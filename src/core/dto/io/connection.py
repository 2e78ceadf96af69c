"""연결 스펙 DTO 모듈

외부(딕셔너리, 배포 프로파일 JSON)에서 들어오는 연결 스펙을 검증합니다.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, NonNegativeInt, field_validator, model_validator

from src.core.dto.io._base import BaseIOModelDTO
from src.core.types import QueryPair


class ConnectionSpecDTO(BaseIOModelDTO):
    """연결 스펙 스키마(IO 모델).

    호출 순서가 없는 입력이므로 route 와 app_id 를 동시에 줄 수 없습니다.
    """

    secure: bool = False
    host: str = ""
    port: int | None = None
    prefix: str | None = None
    subpath: str | None = None
    route: str | None = None
    app_id: str | None = None
    identity: str | None = None
    ttl: NonNegativeInt | None = None
    params: list[QueryPair] = Field(
        default_factory=list, description="추가 쿼리 파라미터 (순서 유지)"
    )

    @field_validator("params", mode="before")
    @classmethod
    def _params_from_mapping(cls, value: Any) -> Any:
        # JSON 객체 형태도 허용 (키 순서 유지)
        if isinstance(value, dict):
            return list(value.items())
        return value

    @model_validator(mode="after")
    def _route_or_app(self) -> ConnectionSpecDTO:
        if self.route is not None and self.app_id is not None:
            raise ValueError("route and app_id are mutually exclusive")
        return self
