"""Tests for Config paths and LoggingConfig."""

import logging

import pytest

from fading_sketch.config import Config
from fading_sketch.utils.logging_config import LoggingConfig


@pytest.fixture
def fresh_logging():
    """Reset LoggingConfig and drop any handlers it adds to the root logger."""
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    LoggingConfig._initialized = False
    LoggingConfig._log_file_path = None
    yield
    for handler in root.handlers[:]:
        if handler not in handlers_before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level_before)
    LoggingConfig._initialized = False
    LoggingConfig._log_file_path = None


class TestConfig:
    def test_reference_values(self):
        assert Config.DECAY_DELAY_MS == 2000
        assert (Config.CANVAS_WIDTH, Config.CANVAS_HEIGHT) == (1280, 720)
        assert Config.ACCENT_STROKE_COLOR == "red"

    def test_user_data_dir_created(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Config, "APP_ROOT", tmp_path / "pkg")
        (tmp_path / "portable.txt").write_text("")

        user_dir = Config.get_user_data_dir()

        assert user_dir == tmp_path / "data"
        assert user_dir.is_dir()
        assert Config.get_log_dir() == tmp_path / "data" / Config.LOG_FOLDER_NAME


class TestLoggingConfig:
    def test_setup_writes_log_file(self, tmp_path, fresh_logging):
        LoggingConfig.setup_logging(tmp_path / "logs")

        log_file = LoggingConfig.get_log_file_path()
        assert log_file == tmp_path / "logs" / Config.LOG_FILE_NAME
        assert LoggingConfig.is_initialized()

        LoggingConfig.get_logger("fading_sketch.test").debug("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text(encoding="utf-8")

    def test_setup_is_idempotent(self, tmp_path, fresh_logging):
        root = logging.getLogger()
        LoggingConfig.setup_logging(tmp_path / "logs")
        count = len(root.handlers)
        LoggingConfig.setup_logging(tmp_path / "other")
        assert len(root.handlers) == count
