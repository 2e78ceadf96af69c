from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from src.core.types import ErrorCategory, ExceptionGroup, QueryPair, RuleKind, SpecSnapshot


@dataclass(slots=True, frozen=True, eq=True, match_args=True, kw_only=True)
class RouteTarget:
    """명시적 라우트 경로 타깃. 경계 슬래시는 이미 제거된 상태로 보관합니다."""

    route: str


@dataclass(slots=True, frozen=True, eq=True, match_args=True, kw_only=True)
class AppTarget:
    """앱 ID 타깃. app_id 는 퍼센트 인코딩이 끝난 값입니다."""

    app_id: str


# 라우트/앱 중 최대 하나만 활성화 (마지막 설정이 우선)
PathTarget: TypeAlias = RouteTarget | AppTarget | None


@dataclass(slots=True, repr=False, eq=True, match_args=False, kw_only=True)
class ConnectionSpecDomain:
    """엔진 세션 연결 스펙(내부 도메인, 가변).

    - 빌더가 단독 소유하며 setter 호출마다 즉시 갱신됩니다.
    - 모든 값은 set 시점에 트림/인코딩이 끝난 상태로 저장됩니다.
    - 검증은 build 시점의 URL 파서에 위임합니다.
    """

    secure: bool = False
    host: str = ""
    port: int | None = None
    prefix: str | None = None
    subpath: str | None = None
    target: PathTarget = None
    identity: str | None = None
    ttl: int | None = None
    params: list[QueryPair] = field(default_factory=list)

    def snapshot(self) -> SpecSnapshot:
        """현재 상태의 해시 가능한 스냅샷 (build 캐시 키)"""
        return (
            self.secure,
            self.host,
            self.port,
            self.prefix,
            self.subpath,
            self.target,
            self.identity,
            self.ttl,
            tuple(self.params),
        )

    def __repr__(self) -> str:
        return (
            f"ConnectionSpecDomain(secure={self.secure!r}, host={self.host!r}, "
            f"port={self.port!r}, target={self.target!r})"
        )


@dataclass(
    slots=True, frozen=True, eq=False, repr=False, match_args=False, kw_only=True
)
class RuleDomain:
    """예외 분류 규칙(도메인)

    kinds: 규칙이 적용될 경계 종류 ("url", "config")
    exc:   매칭할 예외 타입(단일 타입 또는 타입 튜플)
    result: ErrorCategory
    """

    kinds: RuleKind
    exc: ExceptionGroup
    result: ErrorCategory
