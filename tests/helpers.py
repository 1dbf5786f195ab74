"""Builders for test images."""

import struct
import zlib

import numpy as np

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def solid_rgba(width, height, color):
    array = np.empty((height, width, 4), dtype=np.uint8)
    array[...] = color
    return array


def _chunk(kind, data):
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data) & 0xFFFFFFFF)


def deep_png_bytes(rows, color_type):
    """Encode rows of 16-bit samples as a PNG (color type 2 is RGB, 6 is RGBA)."""
    height = len(rows)
    width = len(rows[0])
    raw = b"".join(
        b"\x00" + b"".join(struct.pack(">" + "H" * len(pixel), *pixel) for pixel in row) for row in rows
    )
    header = struct.pack(">IIBBBBB", width, height, 16, color_type, 0, 0, 0)
    return PNG_SIGNATURE + _chunk(b"IHDR", header) + _chunk(b"IDAT", zlib.compress(raw)) + _chunk(b"IEND", b"")
