"""Logging setup for scripts that report formula and reference-check results."""

from __future__ import annotations

import logging

from goplex.utils.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PACKAGE_LOGGER_NAME = "goplex"


def _resolve_level(level: int | str) -> int:
    """Translate a numeric level or a level name into a logging level.

    Args:
        level: Numeric level or case-insensitive name such as ``"debug"``.

    Returns:
        Numeric logging level.

    Raises:
        goplex.utils.exceptions.ConfigurationError: If ``level`` is an unknown
            name.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        msg = f"Unknown logging level {level!r}"
        raise ConfigurationError(msg)
    return resolved


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure root logging for examples and return the package logger.

    The root handler only prints; the ``goplex`` logger carries ``level`` so
    reference-check warnings and debug traces from ``goplex.validation``
    surface at the requested verbosity.

    Args:
        level: Numeric level or level name, for example ``"DEBUG"``.

    Returns:
        The ``goplex`` package logger.

    Raises:
        goplex.utils.exceptions.ConfigurationError: If ``level`` is an unknown
            name.
    """
    numeric_level = _resolve_level(level)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(numeric_level)
    return package_logger
