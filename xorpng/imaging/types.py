from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

CHANNELS = 4
OPAQUE = 255


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major RGBA pixel buffer, one byte per channel."""

    pixels: bytes
    width: int
    height: int

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate that the pixel data covers exactly width x height pixels."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Invalid dimensions {self.width}x{self.height}")
        expected = self.width * self.height * CHANNELS
        if len(self.pixels) != expected:
            raise ValueError(
                f"Pixel data has {len(self.pixels)} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def to_array(self) -> np.ndarray:
        """Return a read-only (height, width, 4) uint8 view of the pixels."""
        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(self.height, self.width, CHANNELS)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelBuffer":
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise ValueError(f"Expected an (H, W, {CHANNELS}) array, got shape {array.shape}")
        height, width = array.shape[:2]
        data = np.ascontiguousarray(array, dtype=np.uint8).tobytes()
        return cls(data, width, height)
