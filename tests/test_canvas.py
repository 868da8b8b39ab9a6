import struct
import zlib

import pytest

from raytrace.canvas import Canvas
from raytrace.colors import Color

BLACK = Color(0.0, 0.0, 0.0)


def _png_chunks(data):
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    position = 8
    while position < len(data):
        (length,) = struct.unpack(">I", data[position : position + 4])
        kind = data[position + 4 : position + 8]
        body = data[position + 8 : position + 8 + length]
        (crc,) = struct.unpack(">I", data[position + 8 + length : position + 12 + length])
        assert crc == zlib.crc32(kind + body) & 0xFFFFFFFF
        yield kind, body
        position += 12 + length


def test_canvas_create():
    canvas = Canvas(10, 20)
    assert canvas.width == 10
    assert canvas.height == 20
    assert len(canvas.pixels) == 20
    assert all(pixel == BLACK for row in canvas.pixels for pixel in row)


def test_canvas_write():
    canvas = Canvas(10, 20)
    red = Color(1.0, 0.0, 0.0)
    assert canvas.write_pixel(2, 3, red) == red
    assert canvas.pixel_at(2, 3) == red


def test_write_out_of_bounds_returns_none():
    canvas = Canvas(5, 3)
    red = Color(1.0, 0.0, 0.0)
    assert canvas.write_pixel(5, 0, red) is None
    assert canvas.write_pixel(0, 3, red) is None
    assert canvas.write_pixel(-1, 0, red) is None
    assert all(pixel == BLACK for row in canvas.pixels for pixel in row)


def test_pixel_at_out_of_bounds_raises():
    canvas = Canvas(5, 3)
    with pytest.raises(IndexError):
        canvas.pixel_at(5, 0)
    with pytest.raises(IndexError):
        canvas.pixel_at(0, -1)


def test_ppm_header():
    canvas = Canvas(5, 3)
    lines = canvas.to_ppm().splitlines()
    assert lines[:3] == ["P3", "5 3", "255"]


def test_ppm_pixel_data():
    canvas = Canvas(5, 3)
    canvas.write_pixel(0, 0, Color(1.5, 0.0, 0.0))
    canvas.write_pixel(2, 1, Color(0.0, 0.5, 0.0))
    canvas.write_pixel(4, 2, Color(-0.5, 0.0, 1.0))

    lines = canvas.to_ppm().splitlines()
    assert lines[3:6] == [
        "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
        "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
        "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
    ]


def test_ppm_line_split():
    canvas = Canvas(10, 2)
    color = Color(1.0, 0.8, 0.6)
    for y in range(2):
        for x in range(10):
            assert canvas.write_pixel(x, y, color) == color

    expected = [
        "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
        "153 255 204 153 255 204 153 255 204 153 255 204 153",
        "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
        "153 255 204 153 255 204 153 255 204 153 255 204 153",
    ]
    lines = canvas.to_ppm().splitlines()
    assert lines[3:] == expected
    assert all(len(line) <= 70 for line in lines)


def test_ppm_ends_with_newline():
    assert Canvas(5, 3).to_ppm().endswith("\n")


def test_png_encoding():
    canvas = Canvas(3, 2)
    canvas.write_pixel(0, 0, Color(1.0, 0.0, 0.0))
    chunks = list(_png_chunks(canvas.to_png()))

    kinds = [kind for kind, _ in chunks]
    assert kinds == [b"IHDR", b"IDAT", b"IEND"]
    assert struct.unpack(">IIBBBBB", chunks[0][1]) == (3, 2, 8, 2, 0, 0, 0)
    raw = zlib.decompress(chunks[1][1])
    assert raw == b"\x00\xff\x00\x00" + b"\x00" * 6 + b"\x00" + b"\x00" * 9
    assert chunks[2][1] == b""


def test_write_ppm_file(tmp_path, capsys):
    canvas = Canvas(2, 2)
    canvas.write_pixel(1, 1, Color(0.0, 0.0, 1.0))
    path = tmp_path / "out.ppm"
    canvas.write_ppm(path)
    assert path.read_text(encoding="ascii") == canvas.to_ppm()
    assert f"Writing PPM to {path}" in capsys.readouterr().out


def test_write_png_file(tmp_path, capsys):
    canvas = Canvas(4, 1)
    path = tmp_path / "out.png"
    canvas.write_png(path)
    assert path.read_bytes() == canvas.to_png()
    assert f"Writing PNG to {path}" in capsys.readouterr().out