"""Проверка и вывод формата файла без декодирования пикселей."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from imgconv.errors import OpenError
from imgconv.models.image_format import format_to_string, string_to_format
from imgconv.services.image_service import ImageService

UNKNOWN_FORMAT = "unknown"


class InspectService:
    def __init__(self, image_service: ImageService, logger: logging.Logger) -> None:
        self._image_service = image_service
        self._logger = logger

    def is_format(self, file_path: str | Path, expected: str) -> bool:
        """Совпадает ли распознанный формат файла с `expected`.

        Имя формата разбирается до открытия файла, поэтому неизвестное имя
        даёт `UnknownFormatError` без обращения к диску.
        """
        expected_format = string_to_format(expected)
        actual, pillow_format = self._image_service.sniff_format(file_path)
        self._logger.debug("Format of %s: %s, expected %s", file_path, pillow_format, expected_format.canonical)
        return actual is expected_format

    def format_name(self, file_path: str | Path) -> str:
        """Каноническое имя формата или `unknown`, если его не распознать."""
        path = Path(file_path)
        # an unreadable file is an error; an unidentifiable one is "unknown"
        with path.open("rb"):
            pass
        try:
            actual, _ = self._image_service.sniff_format(path)
        except OpenError:
            return UNKNOWN_FORMAT
        return format_to_string(actual) if actual is not None else UNKNOWN_FORMAT

    def write_info(self, file_path: str, sink: TextIO) -> None:
        """Пишет в `sink` строку `<путь как передан> <формат>`."""
        try:
            name = self.format_name(file_path)
        except OSError as exc:
            raise OpenError(file_path) from exc
        sink.write(f"{file_path} {name}\n")
