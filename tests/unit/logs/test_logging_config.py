"""
Tests for logging configuration and helpers.
"""

import logging
import logging.handlers

import pytest

from fuzzinfer import (
    configure_logging,
    get_logger,
    is_debug_mode,
    log_data_operation,
    log_performance,
    set_debug_mode,
)
from fuzzinfer.logging.config import ColorFormatter


@pytest.fixture
def restore_logging():
    """Restore package logging after a test reconfigures it."""
    debug = is_debug_mode()
    yield
    configure_logging(config={"debug_mode": debug})


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_only(self, restore_logging):
        configure_logging()

        handlers = logging.getLogger("fuzzinfer").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, ColorFormatter)

    def test_file_handler(self, tmp_path, restore_logging):
        log_dir = tmp_path / "logs"
        configure_logging(log_dir=log_dir)

        get_logger("fuzzinfer.test").info("written to file")
        for handler in logging.getLogger("fuzzinfer").handlers:
            handler.flush()

        handlers = logging.getLogger("fuzzinfer").handlers
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in handlers)
        assert "written to file" in (log_dir / "fuzzinfer.log").read_text()

    def test_reconfigure_replaces_handlers(self, restore_logging):
        configure_logging()
        configure_logging()

        assert len(logging.getLogger("fuzzinfer").handlers) == 1

    def test_root_logger_untouched(self, restore_logging):
        before = list(logging.getLogger().handlers)
        configure_logging()

        assert logging.getLogger().handlers == before


class TestDebugMode:
    """Tests for the global debug flag."""

    def test_toggle(self, restore_logging):
        set_debug_mode(True)
        assert is_debug_mode()
        assert logging.getLogger("fuzzinfer").level == logging.DEBUG

        set_debug_mode(False)
        assert not is_debug_mode()
        assert logging.getLogger("fuzzinfer").level == logging.INFO

    def test_configure_from_config(self, restore_logging):
        configure_logging(config={"debug_mode": True})

        assert is_debug_mode()

    def test_debug_records_reach_console(self, restore_logging, capsys):
        configure_logging(config={"debug_mode": True})

        get_logger("fuzzinfer.tests.console").debug("detailed trace")

        assert "detailed trace" in capsys.readouterr().out

    def test_debug_records_hidden_by_default(self, restore_logging, capsys):
        configure_logging(config={"debug_mode": False})

        get_logger("fuzzinfer.tests.console").debug("detailed trace")

        assert "detailed trace" not in capsys.readouterr().out

    def test_disabling_restores_console_level(self, restore_logging):
        configure_logging(console_level=logging.WARNING, config={"debug_mode": True})
        set_debug_mode(False)

        console = logging.getLogger("fuzzinfer").handlers[0]
        assert console.level == logging.WARNING


class TestComponentLevels:
    """Tests for component-specific log levels."""

    def test_get_logger_applies_component_level(self):
        assert get_logger("fuzzinfer.core.sampling").level == logging.INFO

    def test_other_loggers_inherit(self):
        assert get_logger("fuzzinfer.engine.inference").level == logging.NOTSET


class TestColorFormatter:
    """Tests for ColorFormatter."""

    def test_colors_a_copy_of_the_record(self):
        record = logging.makeLogRecord(
            {"levelname": "INFO", "levelno": logging.INFO, "msg": "hello"}
        )

        output = ColorFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[92mINFO\033[0m hello" == output
        assert record.levelname == "INFO"


class TestHelpers:
    """Tests for logging decorators."""

    def test_log_performance(self, caplog):
        logger = logging.getLogger("fuzzinfer.tests.performance")

        @log_performance(logger=logger, log_level=logging.INFO)
        def compute():
            return 42

        with caplog.at_level(logging.INFO, logger="fuzzinfer"):
            assert compute() == 42

        assert "took" in caplog.text
        assert "compute" in caplog.text

    def test_log_performance_threshold(self, caplog):
        logger = logging.getLogger("fuzzinfer.tests.performance")

        @log_performance(logger=logger, threshold_ms=60_000, log_level=logging.INFO)
        def compute():
            return 42

        with caplog.at_level(logging.INFO, logger="fuzzinfer"):
            compute()

        assert "took" not in caplog.text

    def test_log_data_operation_failure(self, caplog):
        logger = logging.getLogger("fuzzinfer.tests.operation")

        @log_data_operation("loading", "fuzzy sets", logger=logger)
        def load():
            raise RuntimeError("disk gone")

        with caplog.at_level(logging.INFO, logger="fuzzinfer"):
            with pytest.raises(RuntimeError):
                load()

        assert "Started loading of fuzzy sets" in caplog.text
        assert "Failed loading of fuzzy sets" in caplog.text
