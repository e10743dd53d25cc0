"""Configuration utilities for helpful_libraries.

This module centralizes small helpers and constants related to configuration.
Everything is read from the environment on demand; nothing is cached.
"""

import logging
import os
import re

from helpful_libraries.domain.errors import HelpfulLibrariesError

LOG_LEVEL_ENV = "HELPFUL_LIBRARIES_LOG_LEVEL"  # pragma: no mutate
LOGGER_LEVELS_ENV = "HELPFUL_LIBRARIES_LOGGER_LEVELS"  # pragma: no mutate

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_SEPARATOR = ","


class ConfigError(HelpfulLibrariesError):
    """Raised when a configuration value cannot be parsed."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid configuration value {value!r}: {reason}")
        self.value = value


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Normalize an input value into a flat list of items.

    Splits the input on commas and whitespace and removes empty fragments.
    Accepts either a single string or a sequence of strings.
    """
    if isinstance(value, str):
        value = (value,)
    items: list[str] = []
    for v in value:
        items.extend([s for s in re.split(r"[,\s]+", v) if s])
    return items


def parse_level(level_str: str) -> int:
    """Convert a textual level name (case-insensitive) into a numeric level.

    Raises:
        ConfigError: If ``level_str`` is not a standard logging level name.
    """
    lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
    if lvl is None:
        raise ConfigError(level_str, "not a logging level name")
    return lvl


def parse_logger_levels(value: str | list[str] | tuple[str, ...]) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a name->level dict.

    Items may be comma and/or whitespace separated. Later items for the same
    name override earlier ones.

    Args:
        value: A string such as ``"asyncio=INFO, helpful_libraries=DEBUG"`` or
            a sequence of such strings.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        ConfigError: If an item is not NAME=LEVEL or LEVEL is invalid.
    """
    levels: dict[str, int] = {}
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise ConfigError(item, "expected NAME=LEVEL")
        levels[name.strip()] = parse_level(level_str)
    return levels


def get_log_level() -> int:
    """Get the package log level from the environment.

    Returns:
        The level named by `HELPFUL_LIBRARIES_LOG_LEVEL`, or WARNING if unset.

    Raises:
        ConfigError: If the variable holds an unknown level name.
    """
    if not (level_str := os.environ.get(LOG_LEVEL_ENV)):
        return DEFAULT_LOG_LEVEL
    return parse_level(level_str)


def get_logger_levels() -> dict[str, int]:
    """Get per-logger level overrides from `HELPFUL_LIBRARIES_LOGGER_LEVELS`."""
    return parse_logger_levels(os.environ.get(LOGGER_LEVELS_ENV, ""))
