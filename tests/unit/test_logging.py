"""Unit tests for helpful_libraries.logging.

The module is imported through the package attribute so that a stdlib
``logging`` binding in ``helpful_libraries/__init__.py`` would be caught.
"""

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

import helpful_libraries
from helpful_libraries import logging as hl_logging

# pylint: disable=redefined-outer-name,magic-value-comparison


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Yield the package logger and restore its handlers and level afterwards."""
    logger = logging.getLogger(hl_logging.PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def make_record(name: str, msg: str = "msg") -> logging.LogRecord:
    """Build a bare INFO record for ``name``."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, msg, None, None)


def console_handlers(logger: logging.Logger) -> list[logging.Handler]:
    """Return the console handlers attached by configure_logging."""
    return [
        h for h in logger.handlers if h.get_name() == hl_logging.CONSOLE_HANDLER_NAME
    ]


def test_package_attribute_is_logging_submodule():
    """helpful_libraries.logging is the package module, not the stdlib one."""
    assert helpful_libraries.logging is hl_logging
    assert hasattr(helpful_libraries.logging, "configure_logging")


def test_package_logger_has_null_handler(package_logger):
    """Importing the package installs a NullHandler."""
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


def test_console_handler_default_mode():
    """Outside debug mode the level is kept and messages are formatted plainly."""
    handler = hl_logging.config_console_handler(level=logging.INFO, color=False)

    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert handler.format(make_record("helpful_libraries.x", "hello")) == "hello"


def test_console_handler_debug_mode():
    """Debug mode forces DEBUG and prefixes the logger name."""
    handler = hl_logging.config_console_handler(level=logging.ERROR, debug_mode=True)

    assert handler.level == logging.DEBUG
    record = make_record("helpful_libraries.x", "hello")
    assert handler.format(record) == "helpful_libraries.x: hello"


def test_configure_logging_attaches_handler(package_logger):
    """configure_logging attaches the handler and applies overrides."""
    handler = hl_logging.configure_logging(
        logging.INFO, color=False, logger_levels={"tests.override": logging.ERROR}
    )

    assert console_handlers(package_logger) == [handler]
    assert package_logger.level == logging.INFO
    assert logging.getLogger("tests.override").level == logging.ERROR


def test_configure_logging_twice_replaces_handler(package_logger):
    """A second call swaps the console handler instead of adding another."""
    hl_logging.configure_logging(logging.INFO, color=False, logger_levels={})
    second = hl_logging.configure_logging(logging.ERROR, color=False, logger_levels={})

    assert console_handlers(package_logger) == [second]
    assert package_logger.level == logging.ERROR


def test_configure_logging_routes_package_records(package_logger, monkeypatch):
    """Records from package modules reach the console handler unprefixed."""
    handler = hl_logging.configure_logging(logging.DEBUG, color=False, logger_levels={})
    seen: list[str] = []
    monkeypatch.setattr(handler, "emit", lambda record: seen.append(handler.format(record)))

    logging.getLogger("helpful_libraries.utils.collections").info("shaped")

    assert seen == ["shaped"]


def test_configure_logging_reads_config(package_logger, monkeypatch):
    """Without arguments the level and overrides come from the environment."""
    monkeypatch.setenv("HELPFUL_LIBRARIES_LOG_LEVEL", "ERROR")
    monkeypatch.delenv("HELPFUL_LIBRARIES_LOGGER_LEVELS", raising=False)

    handler = hl_logging.configure_logging(color=False)

    assert handler.level == logging.ERROR
    assert package_logger.level == logging.ERROR
