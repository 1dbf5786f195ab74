from __future__ import annotations

from typing import Tuple


class XorPngError(RuntimeError):
    """Base class for every error that ends a run."""


class UsageError(XorPngError):
    pass


class FileAccessError(XorPngError):
    pass


class CodecError(XorPngError):
    pass


class TerminalOutputError(XorPngError):
    pass


class RandomSourceError(XorPngError):
    pass


class DimensionMismatchError(XorPngError):
    def __init__(self, first: Tuple[int, int], second: Tuple[int, int]) -> None:
        self.first = first
        self.second = second
        super().__init__(
            "Images have different dimensions: "
            f"image 1 is {first[0]}x{first[1]}, image 2 is {second[0]}x{second[1]}"
        )
