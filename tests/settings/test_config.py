# -*- coding: utf-8 -*-
"""
설정 및 로깅 테스트
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from pydantic import ValidationError

from jpashop.settings.config import Settings
from jpashop.settings.logging_config import setup_logging


class TestSettings:
    """환경 설정 테스트"""

    def test_env_override(self, monkeypatch):
        """환경 변수로 설정 덮어쓰기"""
        monkeypatch.setenv("ORDER_SEARCH_LIMIT", "50")
        monkeypatch.setenv("ENV", "production")

        config = Settings(_env_file=None)

        assert config.order_search_limit == 50
        assert config.is_production
        assert not config.is_development

    def test_database_url_requires_driver(self):
        """비동기 드라이버가 없는 URL은 거부"""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, database_url="postgresql://localhost/jpashop")


class TestLogging:
    """로깅 설정 테스트"""

    @pytest.fixture
    def bare_root_logger(self, monkeypatch):
        """핸들러 없는 격리된 루트 로거 (pytest 캡처 핸들러와 분리)"""
        root_logger = logging.RootLogger(logging.WARNING)
        monkeypatch.setattr(logging, "root", root_logger)
        yield root_logger
        for handler in root_logger.handlers:
            handler.close()

    def test_rotating_file_handler(self, bare_root_logger, tmp_path):
        """파일 경로 설정 시 로테이션 핸들러 등록"""
        log_file = tmp_path / "logs" / "shop.log"
        config = Settings(_env_file=None, log_file=str(log_file), log_level="DEBUG")

        setup_logging(config)

        file_handlers = [h for h in bare_root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert log_file.parent.is_dir()
        assert bare_root_logger.level == logging.DEBUG

    def test_console_only(self, bare_root_logger):
        """파일 경로가 없으면 콘솔 핸들러만 등록"""
        setup_logging(Settings(_env_file=None, log_file=None))

        assert len(bare_root_logger.handlers) == 1
        assert not isinstance(bare_root_logger.handlers[0], RotatingFileHandler)

    def test_setup_once(self, bare_root_logger):
        """두 번 호출해도 핸들러 중복 등록 없음"""
        config = Settings(_env_file=None, log_file=None)

        setup_logging(config)
        setup_logging(config)

        assert len(bare_root_logger.handlers) == 1

    def test_keeps_existing_handlers(self, bare_root_logger):
        """이미 핸들러가 있으면 설정을 건너뜀"""
        existing = logging.NullHandler()
        bare_root_logger.addHandler(existing)

        setup_logging(Settings(_env_file=None, log_file=None))

        assert bare_root_logger.handlers == [existing]
