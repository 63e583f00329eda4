"""
Unit tests for logging manager
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from utils.config_manager import LoggingConfig
from utils.logging_manager import LoggingManager, LogContext
from utils.exceptions import QuoteNotFoundError


@pytest.fixture
def restore_root_logger():
    """Keep pytest's own root handlers intact across configure() calls"""
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
            root_logger.removeHandler(handler)
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.mark.unit
class TestLoggingManager:
    """Test cases for LoggingManager"""

    def test_file_handler_writes_log(self, temp_dir):
        manager = LoggingManager()
        manager._config = LoggingConfig(file_directory=str(temp_dir / "logs"), file_name="test.log")

        handler = manager.build_file_handler()
        test_logger = logging.getLogger("FileHandlerTest")
        test_logger.propagate = False
        test_logger.setLevel(logging.INFO)
        test_logger.addHandler(handler)
        try:
            test_logger.info("hello file")
            assert isinstance(handler, RotatingFileHandler)
            assert handler.maxBytes == 10 * 1024 * 1024
            assert handler.backupCount == 5
        finally:
            test_logger.removeHandler(handler)
            handler.close()

        assert "hello file" in (temp_dir / "logs" / "test.log").read_text(encoding="utf-8")

    def test_configure_installs_handlers_and_module_levels(self, temp_dir, restore_root_logger):
        manager = LoggingManager()
        manager.configure(LoggingConfig(
            level="WARNING",
            console_enabled=False,
            file_enabled=True,
            file_directory=str(temp_dir),
            modules={"ConfigureTestModule": "ERROR"}
        ))
        try:
            assert restore_root_logger.level == logging.WARNING
            assert len(restore_root_logger.handlers) == 1
            assert isinstance(restore_root_logger.handlers[0], RotatingFileHandler)
            assert logging.getLogger("ConfigureTestModule").level == logging.ERROR
        finally:
            logging.getLogger("ConfigureTestModule").setLevel(logging.NOTSET)

    def test_configure_keeps_no_per_call_state(self, restore_root_logger):
        manager = LoggingManager()
        before = dict(vars(manager))
        manager.configure()
        manager.configure()
        assert vars(manager).keys() == before.keys()
        assert len(restore_root_logger.handlers) == 1


@pytest.mark.unit
class TestLogContext:
    """Test cases for LogContext"""

    def test_success_logs_debug_only(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="API"):
            with LogContext("API", "op", {"id": 1}):
                pass

        assert [r.levelno for r in caplog.records] == [logging.DEBUG]
        assert "id=1" in caplog.records[0].getMessage()

    def test_business_error_propagates_without_warning(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="API"):
            with pytest.raises(QuoteNotFoundError):
                with LogContext("API", "op"):
                    raise QuoteNotFoundError(9)

        assert all(r.levelno < logging.WARNING for r in caplog.records)

    def test_unexpected_error_logged_and_propagates(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="API"):
            with pytest.raises(RuntimeError):
                with LogContext("API", "op", {"id": 3}):
                    raise RuntimeError("boom")

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "boom" in errors[0].getMessage()
