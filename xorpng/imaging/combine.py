from __future__ import annotations

import logging

import numpy as np

from ..errors import DimensionMismatchError
from .types import OPAQUE, PixelBuffer

logger = logging.getLogger(__name__)


def xor_buffers(first: PixelBuffer, second: PixelBuffer) -> PixelBuffer:
    """XOR the RGB channels of two equally sized buffers; alpha is always opaque."""
    if first.size != second.size:
        raise DimensionMismatchError(first.size, second.size)
    result = np.bitwise_xor(first.to_array(), second.to_array())
    result[..., 3] = OPAQUE
    logger.debug("Combined two %dx%d images", first.width, first.height)
    return PixelBuffer.from_array(result)
