from __future__ import annotations

import logging
from typing import BinaryIO

from PIL import Image

from ...errors import CodecError, FileAccessError
from ..types import PixelBuffer

logger = logging.getLogger(__name__)


class ImageCodec:
    format_name = ""
    extension = ""

    def decode(self, path: str) -> PixelBuffer:
        raise NotImplementedError

    def encode(self, buffer: PixelBuffer, stream: BinaryIO) -> None:
        raise NotImplementedError

    def save(self, buffer: PixelBuffer, path: str) -> None:
        try:
            handle = open(path, "wb")
        except OSError as exc:
            raise FileAccessError(f"Error creating file {path}: {exc}") from exc
        with handle:
            self.encode(buffer, handle)
        logger.debug("Wrote %dx%d image to %s", buffer.width, buffer.height, path)


class PillowCodec(ImageCodec):
    def decode(self, path: str) -> PixelBuffer:
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise FileAccessError(f"Error opening image {path}: {exc}") from exc
        with handle:
            try:
                with Image.open(handle, formats=[self.format_name]) as img:
                    img.load()
                    logger.debug("Decoded %s: mode=%s size=%dx%d", path, img.mode, img.width, img.height)
                    return self._to_buffer(img)
            except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
                raise CodecError(f"Error decoding image {path}: {exc}") from exc

    def encode(self, buffer: PixelBuffer, stream: BinaryIO) -> None:
        img = Image.frombytes("RGBA", buffer.size, buffer.pixels)
        try:
            img.save(stream, format=self.format_name)
        except (OSError, ValueError) as exc:
            raise CodecError(f"Error encoding image: {exc}") from exc

    def _to_buffer(self, img: Image.Image) -> PixelBuffer:
        raise NotImplementedError
