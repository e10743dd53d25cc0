"""Opt-in console logging for helpful_libraries.

The package emits DEBUG trace records through module loggers and ships with a
``NullHandler``, so nothing is printed unless an application asks for it.
`configure_logging` attaches a single Rich console handler to the package
logger; calling it again replaces that handler instead of adding another.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from helpful_libraries import config

PACKAGE_LOGGER = "helpful_libraries"
CONSOLE_HANDLER_NAME = "helpful_libraries.console"


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler used for package records.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug_mode).
        debug_mode: Show timestamps, logger names and source locations.
        color: Enable color output when True.

    Returns:
        RichHandler: A handler writing to stderr, named `CONSOLE_HANDLER_NAME`.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system="auto" if color else None, stderr=True),
        show_time=debug_mode,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter("%(name)s: %(message)s" if debug_mode else "%(message)s")
    )
    handler.set_name(CONSOLE_HANDLER_NAME)
    return handler


def configure_logging(
    level: int | None = None,
    *,
    debug_mode: bool = False,
    color: bool = True,
    logger_levels: dict[str, int] | None = None,
) -> RichHandler:
    """Send package log records to the console.

    Args:
        level: Console level. Defaults to `config.get_log_level()`.
        debug_mode: Passed to `config_console_handler`.
        color: Passed to `config_console_handler`.
        logger_levels: Per-logger level overrides. Defaults to
            `config.get_logger_levels()`.

    Returns:
        RichHandler: The attached handler, so callers can remove it.
    """
    if level is None:
        level = config.get_log_level()
    if logger_levels is None:
        logger_levels = config.get_logger_levels()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == CONSOLE_HANDLER_NAME:
            package_logger.removeHandler(existing)

    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    package_logger.addHandler(handler)
    package_logger.setLevel(handler.level)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    package_logger.debug(
        "Console logging enabled: level=%s, per-logger overrides=%s",
        logging.getLevelName(handler.level),
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
    return handler
