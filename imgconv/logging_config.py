"""Настройка логирования.

Логгер создаётся явно на каждый запуск приложения и передаётся в сервисы.
Глобальные обработчики (`logging.basicConfig`) не устанавливаются.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

from imgconv.errors import InvalidLogLevelError

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_LEVEL_ENV = "IMGCONV_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "warn"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def log_level_names() -> list[str]:
    return ["trace", "debug", "info", "warn", "error"]


def parse_log_level(name: str) -> int:
    """Переводит имя уровня (`trace`..`error`) в числовой уровень `logging`.

    Raises:
        InvalidLogLevelError: если имя не распознано.
    """
    level = _LEVELS.get(name.strip().lower())
    if level is None:
        raise InvalidLogLevelError(name)
    return level


def resolve_log_level(name: Optional[str]) -> int:
    """Уровень из аргумента CLI, иначе из окружения, иначе `warn`."""
    if name is not None:
        return parse_log_level(name)
    env_value = os.environ.get(LOG_LEVEL_ENV)
    if not env_value:
        return parse_log_level(DEFAULT_LOG_LEVEL)
    try:
        return parse_log_level(env_value)
    except InvalidLogLevelError as exc:
        raise InvalidLogLevelError(env_value, source=LOG_LEVEL_ENV) from exc


def build_logger(level: int, stream: Optional[TextIO] = None, name: str = "imgconv") -> logging.Logger:
    """Создаёт отдельный, не зарегистрированный глобально логгер.

    `logging.Logger(...)` в обход `logging.getLogger` не попадает в общий
    реестр, поэтому два приложения в одном процессе не делят обработчики.
    """
    logger = logging.Logger(name, level=level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def trace(logger: logging.Logger, msg: str, *args: object) -> None:
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, msg, *args)
