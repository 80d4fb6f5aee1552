from __future__ import annotations


class RasterBmpError(Exception):
    """Base class for every error raised by rasterbmp."""


class InvalidDimensionsError(RasterBmpError, ValueError):
    pass


class AllocationError(RasterBmpError, MemoryError):
    pass


class OutOfBoundsError(RasterBmpError, IndexError):
    pass


class BufferReleasedError(RasterBmpError, RuntimeError):
    pass


class BitmapEncodeError(RasterBmpError, ValueError):
    pass


class BitmapWriteError(RasterBmpError, OSError):
    pass


__all__ = [
    "AllocationError",
    "BitmapEncodeError",
    "BitmapWriteError",
    "BufferReleasedError",
    "InvalidDimensionsError",
    "OutOfBoundsError",
    "RasterBmpError",
]
