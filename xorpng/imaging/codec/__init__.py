from __future__ import annotations

from typing import BinaryIO

from ..types import PixelBuffer
from .base import ImageCodec, PillowCodec
from .png import PngCodec

DEFAULT_CODEC = PngCodec()


def load_image(path: str, codec: ImageCodec = DEFAULT_CODEC) -> PixelBuffer:
    return codec.decode(path)


def encode_image(buffer: PixelBuffer, stream: BinaryIO, codec: ImageCodec = DEFAULT_CODEC) -> None:
    codec.encode(buffer, stream)


def save_image(buffer: PixelBuffer, path: str, codec: ImageCodec = DEFAULT_CODEC) -> None:
    codec.save(buffer, path)


__all__ = [
    "DEFAULT_CODEC",
    "ImageCodec",
    "PillowCodec",
    "PngCodec",
    "encode_image",
    "load_image",
    "save_image",
]
