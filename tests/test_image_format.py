from __future__ import annotations

import pytest

from imgconv.errors import UnknownFormatError
from imgconv.models.image_format import (
    ImageFormat,
    format_from_pillow,
    format_to_string,
    string_to_format,
    supported_format_names,
)


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_canonical_names_parse_back(fmt: ImageFormat) -> None:
    assert string_to_format(format_to_string(fmt)) is fmt


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("jpg", ImageFormat.JPEG),
        ("jpeg", ImageFormat.JPEG),
        ("JPG", ImageFormat.JPEG),
        ("  Png \n", ImageFormat.PNG),
        ("WebP", ImageFormat.WEBP),
        ("tif", ImageFormat.TIFF),
        ("exr", ImageFormat.OPENEXR),
        ("OpenEXR", ImageFormat.OPENEXR),
        ("ff", ImageFormat.FARBFELD),
    ],
)
def test_aliases_case_and_whitespace(raw: str, expected: ImageFormat) -> None:
    assert string_to_format(raw) is expected


def test_jpg_renders_as_jpeg() -> None:
    assert format_to_string(string_to_format("jpg")) == "jpeg"


@pytest.mark.parametrize("raw", ["svg", "", "png8", "jpe g"])
def test_unknown_format_is_rejected(raw: str) -> None:
    with pytest.raises(UnknownFormatError):
        string_to_format(raw)


def test_unknown_format_is_value_error() -> None:
    with pytest.raises(ValueError, match="Unknown format: svg"):
        string_to_format("svg")


def test_format_to_string_rejects_non_members() -> None:
    with pytest.raises(TypeError):
        format_to_string("png")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("pillow_name", "expected"),
    [
        ("PNG", ImageFormat.PNG),
        ("JPEG", ImageFormat.JPEG),
        ("MPO", ImageFormat.JPEG),
        ("PPM", ImageFormat.PNM),
        ("PSD", None),
        (None, None),
    ],
)
def test_format_from_pillow(pillow_name: str | None, expected: ImageFormat | None) -> None:
    assert format_from_pillow(pillow_name) is expected


def test_supported_format_names_cover_the_closed_set() -> None:
    names = supported_format_names()
    assert len(names) == 16
    assert names[0] == "png"
    assert "farbfeld" in names
    assert all(name == name.lower() for name in names)
