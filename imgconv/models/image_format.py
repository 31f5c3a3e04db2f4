"""Таблица форматов изображений.

Принципы:
- Закрытое множество форматов, неизменяемые значения (`Enum`).
- Одно каноническое имя на формат: используется и при разборе, и как расширение файла.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from imgconv.errors import UnknownFormatError


class ImageFormat(Enum):
    """Поддерживаемый формат.

    Fields:
        canonical: Каноническое имя в нижнем регистре (оно же расширение).
        pillow_name: Идентификатор формата в Pillow или `None`, если кодека нет.
    """
    PNG = ("png", "PNG")
    JPEG = ("jpeg", "JPEG")
    GIF = ("gif", "GIF")
    WEBP = ("webp", "WEBP")
    PNM = ("pnm", "PPM")
    TIFF = ("tiff", "TIFF")
    TGA = ("tga", "TGA")
    DDS = ("dds", "DDS")
    BMP = ("bmp", "BMP")
    ICO = ("ico", "ICO")
    HDR = ("hdr", None)
    OPENEXR = ("openexr", None)
    FARBFELD = ("farbfeld", None)
    AVIF = ("avif", "AVIF")
    QOI = ("qoi", "QOI")
    PCX = ("pcx", "PCX")

    def __init__(self, canonical: str, pillow_name: Optional[str]) -> None:
        self.canonical = canonical
        self.pillow_name = pillow_name


_ALIASES = {
    "jpg": ImageFormat.JPEG,
    "tif": ImageFormat.TIFF,
    "exr": ImageFormat.OPENEXR,
    "ff": ImageFormat.FARBFELD,
}

_BY_NAME = {fmt.canonical: fmt for fmt in ImageFormat}
_BY_NAME.update(_ALIASES)

# Pillow reports multi-picture JPEGs as MPO and the whole PBM/PGM/PPM family as PPM.
_BY_PILLOW_NAME = {fmt.pillow_name: fmt for fmt in ImageFormat if fmt.pillow_name}
_BY_PILLOW_NAME["MPO"] = ImageFormat.JPEG


def string_to_format(name: str) -> ImageFormat:
    """Разбирает имя формата (без учёта регистра, с обрезкой пробелов).

    Raises:
        UnknownFormatError: если имя не входит в закрытое множество.
    """
    fmt = _BY_NAME.get(name.strip().lower())
    if fmt is None:
        raise UnknownFormatError(name)
    return fmt


def format_to_string(fmt: ImageFormat) -> str:
    if not isinstance(fmt, ImageFormat):
        raise TypeError(f"not an ImageFormat: {fmt!r}")
    return fmt.canonical


def format_from_pillow(pillow_name: Optional[str]) -> Optional[ImageFormat]:
    if not pillow_name:
        return None
    return _BY_PILLOW_NAME.get(pillow_name.upper())


def supported_format_names() -> list[str]:
    return [fmt.canonical for fmt in ImageFormat]
