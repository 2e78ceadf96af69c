from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final, Literal, TypeAlias

# 공통 타입/별칭을 한곳에 모읍니다.
# - 코어 계층 어디서나 재사용 가능한 최소 단위만 정의합니다.
# - I/O 스키마(DTO) 세부는 각 모듈에 두고, 여기에는 기반 타입만 둡니다.

Scheme: TypeAlias = Literal["ws", "wss"]

SCHEME_PLAIN: Final[Scheme] = "ws"
SCHEME_SECURE: Final[Scheme] = "wss"

# 호스트 미지정(또는 빈 문자열)시 사용
DEFAULT_HOST: Final[str] = "localhost"

# 고정 경로 세그먼트
APP_SEGMENT: Final[str] = "app"
IDENTITY_SEGMENT: Final[str] = "identity"
TTL_SEGMENT: Final[str] = "ttl"

QueryPair: TypeAlias = tuple[str, str]
QueryParams: TypeAlias = Iterable[QueryPair] | Mapping[str, str]
SpecSnapshot: TypeAlias = tuple[object, ...]
