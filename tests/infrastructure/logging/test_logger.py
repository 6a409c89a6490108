"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture
def fixed_log_root(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20260105"),
    )
    return tmp_path


def _file_handlers(logger: logging.Logger) -> list[logging.FileHandler]:
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def test_builder_writes_dated_file_under_subdir(fixed_log_root):
    """Custom names, levels and paths should be applied once."""
    builder = (
        logger_module.LoggerBuilder()
        .name("finance.test.imports")
        .subdir("imports")
        .prefix("import_logs")
        .console(True)
        .level(logging.WARNING)
    )

    built = builder.build()

    assert built.name == "finance.test.imports"
    assert built.level == logging.WARNING
    assert built.propagate is False
    handlers = _file_handlers(built)
    assert len(handlers) == 1
    expected = fixed_log_root / "logs" / "imports" / "20260105_import_logs.log"
    assert handlers[0].baseFilename == str(expected)
    assert len(built.handlers) == 2
    assert builder.build() is built
    assert len(built.handlers) == 2


def test_builder_without_console_only_logs_to_file(fixed_log_root):
    built = (
        logger_module.LoggerBuilder()
        .name("finance.test.file_only")
        .console(False)
        .build()
    )

    assert len(built.handlers) == 1
    assert isinstance(built.handlers[0], logging.FileHandler)
    assert (fixed_log_root / "logs" / "app").is_dir()


def test_builder_uses_injected_factories(fixed_log_root):
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    captured = {}

    def _file_factory(path, formatter):
        captured["path"] = path
        captured["formatter"] = formatter
        return file_handler

    built = (
        logger_module.LoggerBuilder()
        .name("finance.test.factories")
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .build()
    )

    assert built.handlers == [file_handler]
    assert captured["formatter"] is fmt
    assert captured["path"].name == "20260105_app_logs.log"


def test_default_handlers_log_info_with_formatter(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    for handler in (file_handler, console_handler):
        assert handler.level == logging.INFO
        assert handler.formatter is fmt
    assert isinstance(file_handler, logging.FileHandler)
    file_handler.close()


def test_app_logger_delegates_and_is_singleton(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    app_logger.info("loaded 3 transactions")
    app_logger.warning("budget over limit")
    app_logger.error("storage down")
    app_logger.debug("skipping line 4")
    app_logger.critical("unrecoverable")

    fake_logger.info.assert_called_with("loaded 3 transactions")
    fake_logger.warning.assert_called_with("budget over limit")
    fake_logger.error.assert_called_with("storage down")
    fake_logger.debug.assert_called_with("skipping line 4")
    fake_logger.critical.assert_called_with("unrecoverable")
    assert logger_module.get_app_logger() is app_logger


def test_usage_logger_is_separate_and_file_only(monkeypatch):
    """Usage events go to their own subdir without console output."""
    configs = []

    def _fake_build(self):
        configs.append((self._name, self._subdir, self._console))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    usage_logger = logger_module.get_usage_logger()
    app_logger = logger_module.get_app_logger()

    assert usage_logger is not app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert configs == [
        ("finance.usage", "usage", False),
        ("finance.app", "app", True),
    ]
