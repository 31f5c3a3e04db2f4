"""Открытие, распознавание формата и декодирование изображений с диска.

Принципы:
- SRP: класс отвечает только за чтение: распознавание формата и загрузку пикселей.
- Кодеки целиком принадлежат Pillow; здесь только перевод его ошибок в ошибки приложения.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from imgconv.errors import DecodeError, OpenError
from imgconv.logging_config import trace
from imgconv.models.image_format import ImageFormat, format_from_pillow
from imgconv.models.image_model import ImageData


class ImageService:
    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def sniff_format(self, file_path: str | Path) -> Tuple[Optional[ImageFormat], str]:
        """Распознаёт формат по заголовку файла, не декодируя пиксели.

        Returns:
            Пара (формат из поддерживаемого набора или `None`, имя формата Pillow).

        Raises:
            OpenError: если файл не читается или формат не распознан.
        """
        path = Path(file_path)
        try:
            with Image.open(path) as pil_image:
                pillow_format = pil_image.format
        except (OSError, Image.DecompressionBombError) as exc:
            # UnidentifiedImageError is an OSError
            raise OpenError(file_path) from exc

        if not pillow_format:
            raise OpenError(file_path)
        trace(self._logger, "Opened file: %s", path)
        return format_from_pillow(pillow_format), pillow_format

    def load_image(self, file_path: str | Path) -> ImageData:
        """Открывает изображение и полностью декодирует пиксели.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c загруженным `PIL.Image.Image`, размерами, режимом и форматом.

        Raises:
            OpenError: если файл не читается или формат не распознан.
            DecodeError: если содержимое повреждено или не поддерживается.
        """
        path = Path(file_path)
        try:
            pil_image = Image.open(path)
        except (OSError, Image.DecompressionBombError) as exc:
            raise OpenError(file_path) from exc

        with pil_image:
            pillow_format = pil_image.format
            if not pillow_format:
                raise OpenError(file_path)
            trace(self._logger, "Opened file: %s", path)
            self._logger.debug("Format of the input file: %s", pillow_format)

            try:
                pil_image.load()
            except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
                raise DecodeError(file_path) from exc
            trace(self._logger, "Decoded file: %s", path)

        width, height = pil_image.size
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
            format=format_from_pillow(pillow_format),
            pillow_format=pillow_format,
        )
