"""Перекодирование изображений в целевой формат: один файл или дерево каталогов.

Принципы:
- SRP: сервис только вычисляет путь результата и сохраняет; чтение делегировано `ImageService`.
- Обход каталога последовательный; первая ошибка конвертации прерывает весь обход.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from imgconv.errors import EncodeError, OpenError
from imgconv.logging_config import trace
from imgconv.models.image_format import ImageFormat, format_to_string
from imgconv.models.image_model import PathKind
from imgconv.services.image_service import ImageService
from imgconv.services.path_service import PathService


def target_path_for(path: str | Path, target: ImageFormat) -> Path:
    """Путь результата: расширение входа заменяется каноническим именем формата."""
    return Path(path).with_suffix("." + format_to_string(target))


class ConvertService:
    def __init__(self, image_service: ImageService, path_service: PathService, logger: logging.Logger) -> None:
        self._image_service = image_service
        self._path_service = path_service
        self._logger = logger

    def convert_file(self, file_path: str | Path, target: ImageFormat) -> Path:
        """Декодирует файл и сохраняет его в формате `target` рядом с исходным.

        Returns:
            Путь записанного файла.

        Raises:
            OpenError, DecodeError: из `ImageService.load_image`.
            EncodeError: если Pillow не умеет кодировать в `target`,
                режим пикселей несовместим с форматом или запись не удалась.
        """
        image_data = self._image_service.load_image(file_path)
        self._logger.debug(
            "Decoded %s: %sx%s %s (%s)", file_path, image_data.width, image_data.height, image_data.mode, image_data.pillow_format
        )
        fmt_name = format_to_string(target)
        self._logger.debug("Target format: %s", fmt_name)
        if image_data.format is target:
            self._logger.debug("Source is already %s, re-encoding", fmt_name)

        target_path = target_path_for(file_path, target)
        if target.pillow_name is None:
            raise EncodeError(target_path, fmt_name)

        self._logger.debug("Saving file: %s", target_path)
        try:
            image_data.pil_image.save(target_path, format=target.pillow_name)
        except (OSError, KeyError, ValueError) as exc:
            # KeyError: no encoder registered for this format in the installed Pillow
            raise EncodeError(target_path, fmt_name) from exc
        trace(self._logger, "Saved file: %s", target_path)
        return target_path

    def convert_directory(self, dir_path: str | Path, target: ImageFormat) -> List[Path]:
        """Рекурсивно конвертирует все распознанные изображения в каталоге.

        Спецфайлы и файлы, формат которых не распознан, пропускаются. Ошибка конвертации
        распознанного изображения прерывает обход целиком.
        """
        root = Path(dir_path)
        written: List[Path] = []

        def on_walk_error(exc: OSError) -> None:
            self._logger.warning("Skipping unreadable entry %s: %s", exc.filename, exc)

        for current, _dirs, files in os.walk(root, onerror=on_walk_error):
            for name in files:
                entry = Path(current) / name
                # FIFOs and device nodes would block Image.open
                if self._path_service.classify(entry) is not PathKind.FILE:
                    continue
                try:
                    self._image_service.sniff_format(entry)
                except OpenError:
                    self._logger.debug("Not an image, skipping: %s", entry)
                    continue
                written.append(self.convert_file(entry, target))

        self._logger.info("Converted %d file(s) under %s", len(written), root)
        return written

