"""A pixel grid that can be written out as PPM or PNG."""

from __future__ import annotations

import os
import struct
import zlib
from pathlib import Path

from raytrace.colors import Color
from raytrace.utils import remove_suffix

_BLACK = Color(0.0, 0.0, 0.0)
_PPM_MAX_VALUE = 255
_PPM_LINE_LIMIT = 70
_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


def _wrap_row(values: list[str]) -> str:
    """Join values with spaces, breaking lines so none exceeds the PPM limit."""
    text = ""
    line_length = 0
    for value in values:
        if line_length + len(value) > _PPM_LINE_LIMIT:
            text = remove_suffix(text, " ") + "\n"
            line_length = 0
        text += value + " "
        line_length += len(value) + 1
    return remove_suffix(text, " ")


class Canvas:
    """A ``width`` x ``height`` grid of colours, initially black."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels: list[list[Color]] = [[_BLACK] * width for _ in range(height)]

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, x: int, y: int, color: Color) -> Color | None:
        """Set a pixel and return its colour, or return None if it is out of bounds."""
        if not self._contains(x, y):
            return None
        self.pixels[y][x] = color
        return color

    def pixel_at(self, x: int, y: int) -> Color:
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")
        return self.pixels[y][x]

    def to_ppm(self) -> str:
        """Encode the canvas as plain-text PPM (P3)."""
        lines = ["P3", f"{self.width} {self.height}", str(_PPM_MAX_VALUE)]
        for row in self.pixels:
            values = [
                value
                for pixel in row
                for value in pixel.to_ppm(_PPM_MAX_VALUE).split(" ")
                if value
            ]
            lines.append(_wrap_row(values))
        return "\n".join(lines) + "\n"

    def to_png(self) -> bytes:
        """Encode the canvas as an 8-bit RGB PNG image."""
        raw = b"".join(
            b"\x00" + b"".join(pixel.to_rgb() for pixel in row) for row in self.pixels
        )
        header = struct.pack(">IIBBBBB", self.width, self.height, 8, 2, 0, 0, 0)
        return (
            _PNG_SIGNATURE
            + _png_chunk(b"IHDR", header)
            + _png_chunk(b"IDAT", zlib.compress(raw))
            + _png_chunk(b"IEND", b"")
        )

    def write_png(self, path: str | os.PathLike) -> None:
        print(f"Writing PNG to {path}")
        Path(path).write_bytes(self.to_png())

    def write_ppm(self, path: str | os.PathLike) -> None:
        print(f"Writing PPM to {path}")
        Path(path).write_text(self.to_ppm(), encoding="ascii")