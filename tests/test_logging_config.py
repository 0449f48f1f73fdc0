"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from project_metrics.logging_config import LOGGER_NAME, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_default_level_is_warning(self):
        assert setup_logging().level == logging.WARNING

    def test_verbose_is_debug(self):
        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_quiet_beats_verbose(self):
        assert setup_logging(verbose=True, quiet=True).level == logging.ERROR

    def test_rich_handler_on_stderr_without_markup(self):
        setup_logging()
        handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert handlers[0].console.stderr is True
        assert handlers[0].markup is False

    def test_repeated_calls_replace_handlers(self):
        setup_logging()
        setup_logging(verbose=True)
        handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(log_file=str(log_file))
        logger.warning("matrix for /p/[x].js")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "matrix for /p/[x].js" in log_file.read_text()


class TestGetLogger:
    def test_root_logger(self):
        assert get_logger().name == LOGGER_NAME

    def test_short_name_is_namespaced(self):
        assert get_logger("engine").name == f"{LOGGER_NAME}.engine"

    def test_qualified_name_kept(self):
        assert get_logger("project_metrics.plugin").name == "project_metrics.plugin"
