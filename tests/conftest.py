from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from imgconv.logging_config import build_logger
from imgconv.services.convert_service import ConvertService
from imgconv.services.image_service import ImageService
from imgconv.services.inspect_service import InspectService
from imgconv.services.path_service import PathService

SIZE = 32


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(log_stream: io.StringIO) -> logging.Logger:
    return build_logger(logging.DEBUG, log_stream, name="imgconv-test")


@pytest.fixture
def image_service(logger: logging.Logger) -> ImageService:
    return ImageService(logger)


@pytest.fixture
def convert_service(
    image_service: ImageService, path_service: PathService, logger: logging.Logger
) -> ConvertService:
    return ConvertService(image_service, path_service, logger)


@pytest.fixture
def inspect_service(image_service: ImageService, logger: logging.Logger) -> InspectService:
    return InspectService(image_service, logger)


@pytest.fixture
def path_service(logger: logging.Logger) -> PathService:
    return PathService(logger)


@pytest.fixture
def make_image() -> Callable[..., Path]:
    """Пишет пустое RGB-изображение SIZE x SIZE в указанном формате Pillow."""

    def _make(path: Path, pillow_format: str = "JPEG", mode: str = "RGB") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, (SIZE, SIZE)).save(path, format=pillow_format)
        return path

    return _make
