"""
Логирование через стандартный модуль logging.
"""

import logging
import sys
from typing import Any, Optional

from happy_hotel.config import get_settings

LOGGER_NAME = "happy_hotel"

_LOGGER_INITIALIZED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Настраивает логирование процесса (только при первом вызове)."""
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    resolved_level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )
    _LOGGER_INITIALIZED = True


def _format(message: str, context: dict) -> str:
    if not context:
        return message
    pairs = " | ".join(f"{key}={value}" for key, value in context.items())
    return f"{message} | {pairs}"


class ConsoleLogger:
    """Реализация порта ILogger поверх logging."""

    def __init__(self, name: str = LOGGER_NAME):
        self._logger = logging.getLogger(name)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(_format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(_format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(_format(message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(_format(message, kwargs))
