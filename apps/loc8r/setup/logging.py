"""Logging configuration for the Loc8r API."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# DEBUG가 아니면 WARNING 이상만 남기는 라이브러리 로거
NOISY_LOGGERS = (
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "uvicorn.access",
    "httpx",
    "httpcore",
)


def setup_logging(level: str = "INFO") -> None:
    """애플리케이션 로깅을 설정합니다.

    요청 단위 액세스 로그와 HTTP 클라이언트 로그는 DEBUG 레벨에서만 출력합니다.
    """
    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    library_level = logging.DEBUG if root_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
