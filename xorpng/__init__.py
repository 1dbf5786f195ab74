from .errors import (
    CodecError,
    DimensionMismatchError,
    FileAccessError,
    RandomSourceError,
    TerminalOutputError,
    UsageError,
    XorPngError,
)
from .imaging import PixelBuffer, encode_image, generate_noise, load_image, save_image, xor_buffers

__version__ = "1.0.0"

__all__ = [
    "CodecError",
    "DimensionMismatchError",
    "FileAccessError",
    "PixelBuffer",
    "RandomSourceError",
    "TerminalOutputError",
    "UsageError",
    "XorPngError",
    "encode_image",
    "generate_noise",
    "load_image",
    "save_image",
    "xor_buffers",
]
