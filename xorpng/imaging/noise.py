from __future__ import annotations

import logging
import secrets

import numpy as np

from ..errors import RandomSourceError
from .types import OPAQUE, PixelBuffer

logger = logging.getLogger(__name__)


def generate_noise(size: int) -> PixelBuffer:
    """Build a size x size image whose RGB bytes come from the OS CSPRNG."""
    if not isinstance(size, int) or size <= 0:
        raise ValueError(f"Size must be a positive integer, got {size!r}")
    try:
        raw = secrets.token_bytes(size * size * 3)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(f"Error generating random data: {exc}") from exc
    rgb = np.frombuffer(raw, dtype=np.uint8).reshape(size, size, 3)
    alpha = np.full((size, size, 1), OPAQUE, dtype=np.uint8)
    logger.debug("Generated %dx%d noise image", size, size)
    return PixelBuffer.from_array(np.concatenate((rgb, alpha), axis=2))
