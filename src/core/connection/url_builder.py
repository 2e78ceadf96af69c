"""엔진 세션 WebSocket 접속 URL 빌더

설정값(호스트, 포트, 프록시 prefix, subpath, 라우트/앱, identity, ttl, 추가 파라미터)을
고정된 순서로 조립한 뒤 URL 파서(pydantic-core)로 검증/정규화합니다.

조립 순서:
    ws(s):// → host → :port → /prefix → /subpath → /route | /app/{app_id}
    → /identity/{identity} → /ttl/{ttl} → ?query

인코딩 규칙:
    - host/prefix/subpath/route: 경계 슬래시만 제거 (운영자 입력, 원문 유지)
    - app_id/identity: 경로 세그먼트 퍼센트 인코딩
    - query: 키/값 모두 퍼센트 인코딩

사용 예시:
    >>> ConnectionUrlBuilder().with_secure(True).with_port(4848).build()
    'wss://localhost:4848/'
"""

from __future__ import annotations

from typing import Final, assert_never

from pydantic import AnyWebsocketUrl, TypeAdapter

from src.common.exceptions.base import InvalidUrlError
from src.common.logger import PipelineLogger
from src.config.settings import EngineSettings, engine_settings
from src.core.connection._utils import (
    encode_path_segment,
    encode_query,
    normalize_params,
    strip_boundary_slashes,
)
from src.core.dto.internal.common import (
    AppTarget,
    ConnectionSpecDomain,
    PathTarget,
    RouteTarget,
)
from src.core.types import (
    APP_SEGMENT,
    DEFAULT_HOST,
    IDENTITY_SEGMENT,
    SCHEME_PLAIN,
    SCHEME_SECURE,
    TTL_SEGMENT,
    URL_VALIDATION_ERRORS,
    QueryParams,
    SpecSnapshot,
)

logger: Final = PipelineLogger.get_logger("url_builder", "connection")

# 프로세스 단위로 한 번만 생성 (ws/wss 스킴만 허용)
_URL_ADAPTER: Final[TypeAdapter[AnyWebsocketUrl]] = TypeAdapter(AnyWebsocketUrl)


def _render_target(target: PathTarget) -> str:
    """경로 타깃 세그먼트: 라우트 → "/route", 앱 → "/app/{app_id}", 없음 → 빈 문자열"""
    match target:
        case RouteTarget(route=route):
            return f"/{route}"
        case AppTarget(app_id=app_id):
            return f"/{APP_SEGMENT}/{app_id}"
        case None:
            return ""
        case _:
            assert_never(target)


def compose_url(spec: ConnectionSpecDomain) -> str:
    """스펙을 검증 전 후보 URL 문자열로 조립합니다 (존재하는 부분만 출력)."""
    parts: list[str] = [
        f"{SCHEME_SECURE if spec.secure else SCHEME_PLAIN}://",
        spec.host or DEFAULT_HOST,
    ]

    if spec.port is not None:
        parts.append(f":{spec.port}")
    if spec.prefix is not None:
        parts.append(f"/{spec.prefix}")
    if spec.subpath is not None:
        parts.append(f"/{spec.subpath}")

    parts.append(_render_target(spec.target))

    if spec.identity is not None:
        parts.append(f"/{IDENTITY_SEGMENT}/{spec.identity}")
    if spec.ttl is not None:
        parts.append(f"/{TTL_SEGMENT}/{spec.ttl}")
    if spec.params:
        parts.append(f"?{encode_query(spec.params)}")

    return "".join(parts)


def canonicalize_url(url: str) -> str:
    """URL 파서로 검증 후 정규화된 문자열을 반환합니다.

    Raises:
        InvalidUrlError: 파서가 거부한 경우 (진단 메시지 포함)
    """
    try:
        parsed = _URL_ADAPTER.validate_python(url)
    except URL_VALIDATION_ERRORS as exc:
        raise InvalidUrlError.from_validation_error(url, exc) from exc
    return str(parsed)


class ConnectionUrlBuilder:
    """엔진 세션 접속 URL 빌더 (가변 빌더).

    - setter 는 보관 중인 스펙을 즉시 갱신하고 자기 자신을 반환합니다 (체이닝).
    - 올바른 입력이면 setter 는 실패하지 않으며 URL 검증은 build() 에서 수행됩니다.
    - build() 는 마지막 스냅샷 기준으로 결과를 캐시합니다 (멱등).
    - 스레드 안전하지 않습니다. 하나의 호출 경로에서 구성 후 넘겨주세요.

    Example:
        >>> (
        ...     ConnectionUrlBuilder()
        ...     .with_hostname("engine.example.com")
        ...     .with_prefix("/sense/")
        ...     .with_app_id("My App")
        ...     .build()
        ... )
        'ws://engine.example.com/sense/app/My%20App'
    """

    def __init__(self) -> None:
        self._spec = ConnectionSpecDomain()
        self._built: tuple[SpecSnapshot, str] | None = None

    @classmethod
    def from_settings(cls, settings: EngineSettings | None = None) -> ConnectionUrlBuilder:
        """EngineSettings(QIX_ 환경변수) 기본값으로 채운 빌더를 생성합니다."""
        source = settings if settings is not None else engine_settings
        builder = cls().with_hostname(source.host).with_secure(source.secure)

        if source.port is not None:
            builder.with_port(source.port)
        if source.prefix is not None:
            builder.with_prefix(source.prefix)
        if source.subpath is not None:
            builder.with_subpath(source.subpath)
        if source.ttl is not None:
            builder.with_ttl(source.ttl)
        return builder

    @property
    def spec(self) -> ConnectionSpecDomain:
        """현재 보관 중인 연결 스펙"""
        return self._spec

    def with_hostname(self, hostname: str) -> ConnectionUrlBuilder:
        """호스트 설정. 빈 문자열이면 build 시 localhost 로 대체됩니다."""
        self._spec.host = strip_boundary_slashes(hostname)
        return self

    def with_secure(self, secure: bool) -> ConnectionUrlBuilder:
        """wss 사용 여부 (기본 False)"""
        self._spec.secure = secure
        return self

    def with_port(self, port: int) -> ConnectionUrlBuilder:
        """포트 설정. 범위 검사는 build 시 URL 파서가 수행합니다."""
        self._spec.port = port
        return self

    def with_prefix(self, prefix: str) -> ConnectionUrlBuilder:
        """프록시 prefix (가상 프록시 기준 경로)"""
        self._spec.prefix = strip_boundary_slashes(prefix)
        return self

    def with_subpath(self, subpath: str) -> ConnectionUrlBuilder:
        """서비스 subpath (같은 프록시 뒤의 다른 백엔드 서비스용)"""
        self._spec.subpath = strip_boundary_slashes(subpath)
        return self

    def with_route(self, route: str) -> ConnectionUrlBuilder:
        """초기 라우트 설정. 이전에 설정한 앱 ID 는 버려집니다."""
        self._spec.target = RouteTarget(route=strip_boundary_slashes(route))
        return self

    def with_app_id(self, app_id: str) -> ConnectionUrlBuilder:
        """세션에서 열 앱 ID 설정. 이전에 설정한 라우트는 버려집니다."""
        self._spec.target = AppTarget(app_id=encode_path_segment(app_id))
        return self

    def with_identity(self, identity: str) -> ConnectionUrlBuilder:
        """재접속용 세션 identity 설정"""
        self._spec.identity = encode_path_segment(identity)
        return self

    def with_ttl(self, ttl: int) -> ConnectionUrlBuilder:
        """소켓 종료 후 엔진이 세션을 유지할 시간(초)

        Raises:
            TypeError: 정수가 아닌 경우
            ValueError: 음수인 경우
        """
        if isinstance(ttl, bool) or not isinstance(ttl, int):
            raise TypeError(f"ttl must be an int, got {type(ttl).__name__}")
        if ttl < 0:
            raise ValueError(f"ttl must be non-negative, got {ttl}")
        self._spec.ttl = ttl
        return self

    def with_params(self, params: QueryParams) -> ConnectionUrlBuilder:
        """추가 쿼리 파라미터를 호출 순서대로 덧붙입니다 (중복/정렬 처리 없음)."""
        self._spec.params.extend(normalize_params(params))
        return self

    def build(self) -> str:
        """URL 을 조립하고 검증/정규화된 문자열을 반환합니다.

        Raises:
            InvalidUrlError: 조립된 URL 이 파서 검증에 실패한 경우
        """
        snapshot = self._spec.snapshot()
        if self._built is not None and self._built[0] == snapshot:
            return self._built[1]

        candidate = compose_url(self._spec)
        try:
            url = canonicalize_url(candidate)
        except InvalidUrlError as exc:
            logger.warning(
                "connection url rejected",
                extra={
                    "phase": "build",
                    "url": candidate,
                    "error_code": exc.error_code.value,
                    "diagnostic": exc.diagnostic,
                },
            )
            raise

        self._built = (snapshot, url)
        logger.debug("connection url built", extra={"phase": "build", "url": url})
        return url
