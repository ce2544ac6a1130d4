# -*- coding: utf-8 -*-
"""
로깅 설정 모듈

루트 로거에 콘솔 핸들러와 (선택) 용량 기반 로테이션 파일 핸들러를 한 번만 등록
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from jpashop.settings.config import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: Settings | None = None) -> None:
    """
    루트 로거 설정

    이미 핸들러가 등록되어 있으면 아무것도 하지 않음 (테스트, 리로드 대비)

    Args:
        config: 애플리케이션 설정 (없으면 전역 설정)
    """
    config = config or default_settings
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    root_logger.setLevel(getattr(logging, config.log_level, logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.log_file:
        log_path = Path(config.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # SQL 로그는 database_echo 설정으로만 제어
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
