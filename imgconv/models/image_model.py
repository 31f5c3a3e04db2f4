"""Модели данных для изображений и путей.

Принципы:
- SRP: только структуры данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from PIL import Image

from imgconv.models.image_format import ImageFormat


class PathKind(Enum):
    """Результат классификации пути: файл, каталог или ни то ни другое."""
    FILE = "file"
    DIRECTORY = "directory"
    NONE = "none"


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель декодированного изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Декодированное изображение PIL (пиксели уже загружены).
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGB".
        format: Распознанный формат или `None`, если он вне поддерживаемого набора.
        pillow_format: Имя формата, как его сообщил Pillow.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    format: Optional[ImageFormat]
    pillow_format: Optional[str]
