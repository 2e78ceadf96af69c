"""통합 Settings 모듈 - 환경변수 기반

이 모듈의 역할:
    1. 코드에 합리적인 기본값 제공
    2. 환경변수로 오버라이드 (우선순위 높음)
    3. 타입 안전성 보장 (Pydantic 자동 검증)

설정 우선순위:
    1. 환경변수 (최우선) - export QIX_HOST=...
    2. .env 파일 - config/.env
    3. 코드 기본값 (settings.py 내부)

주의:
    ConnectionUrlBuilder() 는 환경변수를 읽지 않습니다.
    엔진 기본값은 ConnectionUrlBuilder.from_settings() 에서만 적용됩니다.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import NonNegativeInt
from pydantic_settings import BaseSettings, SettingsConfigDict

# 설정 파일 경로
config_dir = Path(__file__).parent.parent / "config"


def yaml_settings(prefix: str) -> SettingsConfigDict:
    """환경변수 + .env 통합 설정

    Args:
        prefix: 환경변수 접두사 (예: QIX_, LOG_)

    Returns:
        Pydantic 설정 딕셔너리
    """
    return SettingsConfigDict(
        env_prefix=prefix,
        env_file=config_dir / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class LoggingSettings(BaseSettings):
    """로깅 설정 (환경변수 기반)

    환경변수 오버라이드:
        LOG_LEVEL: 로깅 레벨 (기본: INFO)
        LOG_TO_CONSOLE: 콘솔 출력 여부 (기본: true)
        LOG_TO_FILE: 파일 출력 여부 (기본: false)
        LOG_DIR: 로그 디렉토리 (기본: logs)
        LOG_ROTATION: 파일 로테이션 주기 (기본: midnight)
    """

    level: str = "INFO"
    to_console: bool = True
    to_file: bool = False
    dir: str = "logs"
    rotation: str = "midnight"

    model_config = yaml_settings("LOG_")


class EngineSettings(BaseSettings):
    """엔진 접속 기본값 (환경변수 기반)

    환경변수 오버라이드:
        QIX_HOST: 엔진 호스트 (기본: 빈 값 → localhost)
        QIX_PORT: 포트 (기본: 미지정)
        QIX_SECURE: wss 사용 여부 (기본: false)
        QIX_PREFIX: 프록시 prefix (기본: 미지정)
        QIX_SUBPATH: 서비스 subpath (기본: 미지정)
        QIX_TTL: 세션 유지 시간(초) (기본: 미지정)

    사용 예시:
        export QIX_HOST=engine.example.com
        export QIX_SECURE=true
        # → ConnectionUrlBuilder.from_settings().build() == "wss://engine.example.com/"
    """

    host: str = ""
    port: int | None = None
    secure: bool = False
    prefix: str | None = None
    subpath: str | None = None
    ttl: NonNegativeInt | None = None

    model_config = yaml_settings("QIX_")


# ========================================
# 설정 인스턴스 (싱글톤)
# ========================================
# 환경변수 로드 (환경변수 없으면 기본값 사용)

logging_settings = LoggingSettings()
engine_settings = EngineSettings()
