"""Loading of plain (ASCII, ``P3``) PPM images into RGB byte buffers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike

from .textfile import FileReadError, iter_words, read_file

FORMAT_ASCII = "P3"
FORMAT_RAW = "P6"

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]*)")


class TextureError(Exception):
    """Raised when a texture image cannot be loaded."""


@dataclass(frozen=True)
class PpmImage:
    """An RGB image; rows are stored bottom row first."""

    width: int
    height: int
    data: bytes


def _atoi(word: str) -> int:
    digits = _INT_PREFIX.match(word).group(1)
    try:
        return int(digits)
    except ValueError:
        return 0


def _header_int(words, name: str) -> int:
    word = next(words, None)
    if word is None:
        raise TextureError(f"header truncated before {name}")
    value = _atoi(word)
    if value == 0:
        raise TextureError(f"header {name} is not a number or is zero: {word!r}")
    return value


def parse_ppm(text: str) -> PpmImage:
    """Parse the text of a ``P3`` PPM image.

    Samples are scaled to 0-255 and rows are flipped so that the last row of
    the file comes first.  Missing samples are left as zero.
    """
    words = iter_words(text)
    magic = next(words, None)
    if magic is None:
        raise TextureError("empty image file")
    if magic not in (FORMAT_ASCII, FORMAT_RAW):
        raise TextureError(f"unknown image format {magic!r}")
    width = _header_int(words, "width")
    height = _header_int(words, "height")
    max_value = _header_int(words, "maximum value")
    if magic == FORMAT_RAW or max_value < 1:
        raise TextureError("unsupported image format")
    if width < 1 or height < 1:
        raise TextureError(f"invalid image size {width}x{height}")

    row_len = width * 3
    pixels = bytearray(row_len * height)
    x = 0
    y = height - 1
    for word in words:
        if y < 0:
            raise TextureError("image holds more samples than its size allows")
        value = (_atoi(word) / max_value) * 255
        pixels[y * row_len + x] = int(value) & 0xFF
        x += 1
        if x >= row_len:
            x = 0
            y -= 1
    return PpmImage(width, height, bytes(pixels))


def load_ppm(path: str | PathLike[str]) -> PpmImage:
    """Read and parse the PPM image at ``path``."""
    try:
        text = read_file(path)
    except FileReadError as exc:
        raise TextureError(f"cannot load texture {path}") from exc
    try:
        return parse_ppm(text)
    except TextureError as exc:
        raise TextureError(f"cannot load texture {path}: {exc}") from exc