"""Исключения конвертера изображений.

Принципы:
- Каждая ошибка наследует и общий `ImageConverterError`, и подходящее встроенное
  исключение (`FileNotFoundError`, `ValueError`, `OSError`), чтобы вызывающий код
  мог ловить их по привычным типам.
- Перевод ошибок в коды возврата делает только контроллер.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class ImageConverterError(Exception):
    """Базовая ошибка приложения."""


class PathNotFoundError(ImageConverterError, FileNotFoundError):
    def __init__(self, path: PathLike) -> None:
        super().__init__(f"Failed to find the file: {path}")
        self.path = path


class UnknownFormatError(ImageConverterError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown format: {name}")
        self.name = name


class InvalidLogLevelError(ImageConverterError, ValueError):
    def __init__(self, level: str, source: Optional[str] = None) -> None:
        msg = f"Failed to determine log level: {level}"
        if source:
            msg += f" (from {source})"
        super().__init__(msg)
        self.level = level
        self.source = source


class OpenError(ImageConverterError, OSError):
    def __init__(self, path: PathLike) -> None:
        super().__init__(f"Failed to open file: {path}")
        self.path = path


class DecodeError(ImageConverterError, OSError):
    def __init__(self, path: PathLike) -> None:
        super().__init__(f"Failed to decode file: {path}")
        self.path = path


class EncodeError(ImageConverterError, OSError):
    def __init__(self, path: PathLike, format_name: str) -> None:
        super().__init__(f"Failed to save file with format {format_name}: {path}")
        self.path = path
        self.format_name = format_name


class FormatMismatchError(ImageConverterError):
    """Формат файла не совпал с ожидаемым (отрицательный ответ команды `is`)."""

    def __init__(self, path: PathLike, expected: str, actual: str) -> None:
        super().__init__(f"{path} is {actual}, expected {expected}")
        self.path = path
        self.expected = expected
        self.actual = actual


class UnsupportedForDirectoryError(ImageConverterError):
    def __init__(self, command: str, path: PathLike) -> None:
        super().__init__(f"'{command}' does not support directories: {path}")
        self.command = command
        self.path = path


class UnsupportedPathError(ImageConverterError):
    """Путь существует, но это не обычный файл и не каталог."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(f"Path is neither a file nor a directory: {path}")
        self.path = path
