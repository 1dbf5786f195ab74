from .codec import PngCodec, encode_image, load_image, save_image
from .combine import xor_buffers
from .noise import generate_noise
from .types import OPAQUE, PixelBuffer

__all__ = [
    "OPAQUE",
    "PixelBuffer",
    "PngCodec",
    "encode_image",
    "generate_noise",
    "load_image",
    "save_image",
    "xor_buffers",
]
