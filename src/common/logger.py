from __future__ import annotations

import logging
import queue
import sys
from datetime import datetime
from logging.handlers import QueueHandler, QueueListener, TimedRotatingFileHandler
from pathlib import Path
from typing import Any

from src.config.settings import logging_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(component)s] %(message)s"


class PipelineLogger:
    """
    컴포넌트 단위 로깅 래퍼
    큐 기반 출력(QueueHandler/QueueListener)과 컴포넌트 태깅을 제공합니다.
    레벨/콘솔/파일 출력 기본값은 LoggingSettings(LOG_ 환경변수)를 따릅니다.
    """

    @classmethod
    def get_logger(cls, name: str, component: str | None = None, **kwargs) -> PipelineLogger:
        """
        로거 인스턴스 팩토리.
        logging.getLogger 가 이름 단위 싱글톤이므로 별도 레지스트리를 두지 않습니다.
        """
        return cls(name, component, **kwargs)

    def __init__(
        self,
        name: str,
        component: str | None = None,
        level: int | str | None = None,
        log_to_file: bool | None = None,
        log_to_console: bool | None = None,
        log_dir: str | None = None,
    ):
        """
        Args:
            name: 로거 이름
            component: 컴포넌트 이름 (로그 포맷의 [component] 태그)
            level: 로깅 레벨 (None 이면 LOG_LEVEL)
            log_to_file: 파일 출력 여부 (None 이면 LOG_TO_FILE)
            log_to_console: 콘솔 출력 여부 (None 이면 LOG_TO_CONSOLE)
            log_dir: 로그 디렉토리 (None 이면 LOG_DIR)
        """
        self.name = name
        self.component = component
        self.level = level or logging_settings.level.upper()
        self.log_to_file = logging_settings.to_file if log_to_file is None else log_to_file
        self.log_to_console = (
            logging_settings.to_console if log_to_console is None else log_to_console
        )
        self.log_dir = log_dir or logging_settings.dir

        # 무제한 버퍼 (queue.Full 방지)
        self.log_queue: queue.Queue = queue.Queue()
        self._setup_logger()

    def _setup_logger(self) -> None:
        self.logger_name = f"{self.name}.{self.component}" if self.component else self.name
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(self.level)
        if self.logger.hasHandlers():
            self.logger.handlers.clear()

        self.queue_handler = QueueHandler(self.log_queue)
        self.logger.addHandler(self.queue_handler)

        self.listener = QueueListener(
            self.log_queue, *self._output_handlers(), respect_handler_level=True
        )
        self.listener.start()

    def _output_handlers(self) -> list[logging.Handler]:
        """리스너 스레드가 실제로 기록할 콘솔/파일 핸들러"""
        formatter = logging.Formatter(LOG_FORMAT)
        handlers: list[logging.Handler] = []

        if self.log_to_console:
            handlers.append(logging.StreamHandler(sys.stdout))

        if self.log_to_file:
            log_filename = self._get_log_filename()
            # 디렉터리만 생성, 파일은 핸들러가 생성
            Path(log_filename).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                TimedRotatingFileHandler(
                    filename=log_filename,
                    when=logging_settings.rotation,
                    backupCount=7,
                )
            )

        for handler in handlers:
            handler.setFormatter(formatter)
        return handlers

    def _get_log_filename(self) -> str:
        today = datetime.now().strftime("%Y-%m-%d")
        component_dir = f"{self.component}/" if self.component else ""
        return f"{self.log_dir}/{component_dir}{self.name}_{today}.log"

    def _process_message(self, level: int, msg: str, fields: dict[str, Any]) -> None:
        """
        키워드 필드를 LogRecord 속성으로 병합합니다.
        `extra={...}` 로 넘긴 dict 는 풀어서 병합하고, 나머지 키워드가 이를 덮어씁니다.
        """
        log_extra: dict[str, Any] = {"component": self.component or "main"}

        nested = fields.pop("extra", None)
        if isinstance(nested, dict):
            log_extra.update(nested)
        log_extra.update(fields)

        self.logger.log(level, msg, extra=log_extra)

    def debug(self, msg: str, **kwargs) -> None:
        self._process_message(logging.DEBUG, msg, kwargs)

    def warning(self, msg: str, **kwargs) -> None:
        self._process_message(logging.WARNING, msg, kwargs)
