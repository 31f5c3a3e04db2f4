from __future__ import annotations

import logging
import stat
from pathlib import Path

from imgconv.errors import PathNotFoundError
from imgconv.models.image_model import PathKind


class PathService:
    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def ensure_exists(self, path: str | Path) -> Path:
        """Проверяет существование пути до любых попыток открыть файл.

        Raises:
            PathNotFoundError: если пути нет в файловой системе.
        """
        p = Path(path)
        if not p.exists():
            raise PathNotFoundError(path)
        self._logger.debug("Path exists: %s", p)
        return p

    def classify(self, path: str | Path) -> PathKind:
        """Файл, каталог или `PathKind.NONE` (спецфайл, нет прав на stat)."""
        p = Path(path)
        try:
            mode = p.stat().st_mode
        except OSError as exc:
            self._logger.warning("Cannot access %s: %s", p, exc)
            return PathKind.NONE

        if stat.S_ISREG(mode):
            return PathKind.FILE
        if stat.S_ISDIR(mode):
            return PathKind.DIRECTORY
        self._logger.warning("Path is neither a file nor a directory: %s", p)
        return PathKind.NONE
