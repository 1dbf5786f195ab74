from __future__ import annotations

import numpy as np
from PIL import Image

from ..types import OPAQUE, PixelBuffer
from .base import PillowCodec

WIDE_GRAY_MODES = ("I;16", "I;16B", "I;16L", "I;16N", "I")


class PngCodec(PillowCodec):
    format_name = "PNG"
    extension = ".png"

    def _to_buffer(self, img: Image.Image) -> PixelBuffer:
        rgba = self._normalize_image(img)
        return PixelBuffer.from_array(self._flatten_alpha(np.asarray(rgba)))

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        if img.mode in WIDE_GRAY_MODES:
            # 16-bit samples keep their high byte.
            wide = np.asarray(img).astype(np.int64) >> 8
            img = Image.fromarray(np.clip(wide, 0, 255).astype(np.uint8))
        if img.mode != "RGBA":
            return img.convert("RGBA")
        return img

    @staticmethod
    def _flatten_alpha(rgba: np.ndarray) -> np.ndarray:
        """Premultiply color by alpha at 16-bit precision, keep the top byte, force opaque."""
        wide = rgba.astype(np.uint32)
        alpha = wide[..., 3:4]
        color = (wide[..., :3] * 257 * alpha) // 255 >> 8
        out = np.empty(rgba.shape, dtype=np.uint8)
        out[..., :3] = color
        out[..., 3] = OPAQUE
        return out
