"""Контроллер командной строки: маршрутизация команд к сервисам.

SOLID:
- SRP: класс проверяет путь и выбирает сервис (без логики кодеков).
- DIP: сервисы и поток вывода передаются снаружи, что упрощает тестирование.
Clean Code:
- Обработчики компактны; вся работа с файлами вынесена в сервисы.
"""
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO, Tuple

from imgconv.errors import FormatMismatchError, UnsupportedForDirectoryError, UnsupportedPathError
from imgconv.models.image_format import ImageFormat, format_to_string, string_to_format
from imgconv.models.image_model import PathKind
from imgconv.services.convert_service import ConvertService
from imgconv.services.inspect_service import InspectService
from imgconv.services.path_service import PathService


@dataclass
class CliController:
    """Связывает разобранные аргументы с прикладной логикой.

    Ответственности:
    - Проверка существования и классификация пути (до любых открытий файлов).
    - Выбор команды: `convert`, `is` или `info` (по умолчанию).
    - Перевод отрицательного ответа `is` в `FormatMismatchError`.
    """
    path_service: PathService
    convert_service: ConvertService
    inspect_service: InspectService
    logger: logging.Logger
    stdout: TextIO

    def dispatch(self, args: argparse.Namespace) -> None:
        command = self._resolve_command(args)
        self.logger.debug("Command: %s", command)

        # format names are validated before touching the filesystem
        if command == "convert":
            target = string_to_format(args.target_format)
            self.logger.debug("Target format: %s", format_to_string(target))
            path, kind = self._check_path(args.path)
            self._handle_convert(path, kind, target)
            return
        if command == "is":
            string_to_format(args.expected_format)

        _path, kind = self._check_path(args.path)
        if command == "is":
            self._handle_is(args.path, kind, args.expected_format)
        else:
            self._handle_info(args.path, kind)

    # ---- Handlers ----
    def _handle_convert(self, path: Path, kind: PathKind, target: ImageFormat) -> None:
        if kind is PathKind.DIRECTORY:
            self.convert_service.convert_directory(path, target)
        else:
            self.convert_service.convert_file(path, target)

    def _handle_is(self, raw_path: str, kind: PathKind, expected: str) -> None:
        if kind is PathKind.DIRECTORY:
            raise UnsupportedForDirectoryError("is", raw_path)
        if not self.inspect_service.is_format(raw_path, expected):
            actual = self.inspect_service.format_name(raw_path)
            raise FormatMismatchError(raw_path, format_to_string(string_to_format(expected)), actual)
        self.logger.info("%s matches %s", raw_path, expected.strip().lower())

    def _handle_info(self, raw_path: str, kind: PathKind) -> None:
        if kind is PathKind.DIRECTORY:
            raise UnsupportedForDirectoryError("info", raw_path)
        self.inspect_service.write_info(raw_path, self.stdout)

    # ---- Helpers ----
    def _check_path(self, raw_path: str) -> Tuple[Path, PathKind]:
        path = self.path_service.ensure_exists(raw_path)
        kind = self.path_service.classify(path)
        if kind is PathKind.NONE:
            raise UnsupportedPathError(raw_path)
        return path, kind

    @staticmethod
    def _resolve_command(args: argparse.Namespace) -> str:
        """Без подкоманды: `convert`, если задан `--target-format`, иначе `info`."""
        if args.command:
            return args.command
        if args.target_format:
            return "convert"
        return "info"
