from __future__ import annotations

from typing import Optional

from ..errors import (
    AllocationError,
    BufferReleasedError,
    InvalidDimensionsError,
    OutOfBoundsError,
)
from .color import Color

BYTES_PER_PIXEL = 3
MAX_DIMENSION = 0x7FFFFFFF


class PixelBuffer:
    """
    Fixed-size grid of RGB pixels stored row-major, 3 bytes per pixel.

    Pixel (x, y) lives at linear index ``y * width + x``. Storage starts
    zeroed (black). The buffer owns its storage until ``release()``; it is
    also a context manager that releases on exit.
    """

    def __init__(self, width: int, height: int) -> None:
        _validate_dimensions(width, height)
        self._width = width
        self._height = height
        try:
            self._pixels: Optional[bytearray] = bytearray(width * height * BYTES_PER_PIXEL)
        except (MemoryError, OverflowError) as exc:
            raise AllocationError(f"Cannot allocate a {width}x{height} pixel buffer") from exc

    @classmethod
    def from_rgb(cls, width: int, height: int, data: bytes) -> "PixelBuffer":
        """Build a buffer from packed row-major RGB bytes."""
        buffer = cls(width, height)
        if len(data) != len(buffer._pixels):
            raise ValueError(
                f"Expected {len(buffer._pixels)} bytes for {width}x{height} RGB, got {len(data)}"
            )
        buffer._pixels[:] = data
        return buffer

    def __enter__(self) -> "PixelBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self._pixels is None else "live"
        return f"PixelBuffer({self._width}x{self._height}, {state})"

    # --- Properties ---

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def released(self) -> bool:
        return self._pixels is None

    # --- Pixel access ---

    def get(self, x: int, y: int) -> Color:
        pixels = self._storage()
        offset = self._offset(x, y)
        return Color(pixels[offset], pixels[offset + 1], pixels[offset + 2])

    def set(self, x: int, y: int, color: Color) -> None:
        pixels = self._storage()
        offset = self._offset(x, y)
        pixels[offset : offset + BYTES_PER_PIXEL] = color.to_rgb()

    def set_fast(self, x: int, y: int, color: Color) -> None:
        """
        Set a pixel without bounds checking.

        Caller guarantees 0 <= x < width and 0 <= y < height. Past the end of
        storage this raises IndexError; negative offsets wrap onto another pixel.
        """
        pixels = self._pixels
        offset = (y * self._width + x) * BYTES_PER_PIXEL
        pixels[offset] = color.red
        pixels[offset + 1] = color.green
        pixels[offset + 2] = color.blue

    def clear(self, color: Color) -> None:
        pixels = self._storage()
        pixels[:] = color.to_rgb() * (self._width * self._height)

    def row(self, y: int) -> bytes:
        """Return the RGB bytes of row y."""
        pixels = self._storage()
        if not 0 <= y < self._height:
            raise OutOfBoundsError(f"Row {y} outside 0..{self._height - 1}")
        stride = self._width * BYTES_PER_PIXEL
        return bytes(pixels[y * stride : (y + 1) * stride])

    def rgb_bytes(self) -> bytes:
        """Return a copy of the whole RGB storage."""
        return bytes(self._storage())

    # --- Whole-buffer transforms ---

    def flip_vertically(self) -> None:
        pixels = self._storage()
        stride = self._width * BYTES_PER_PIXEL
        rows = [pixels[y * stride : (y + 1) * stride] for y in range(self._height)]
        pixels[:] = b"".join(reversed(rows))

    def flip_horizontally(self) -> None:
        pixels = self._storage()
        stride = self._width * BYTES_PER_PIXEL
        out = bytearray()
        for y in range(self._height):
            row = pixels[y * stride : (y + 1) * stride]
            for x in range(self._width - 1, -1, -1):
                out += row[x * BYTES_PER_PIXEL : (x + 1) * BYTES_PER_PIXEL]
        pixels[:] = out

    # --- Lifecycle ---

    def release(self) -> None:
        """Drop the pixel storage. Calling it again is a no-op."""
        self._pixels = None

    # --- Internals ---

    def _storage(self) -> bytearray:
        if self._pixels is None:
            raise BufferReleasedError("Pixel buffer has been released")
        return self._pixels

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise OutOfBoundsError(
                f"Pixel ({x}, {y}) outside {self._width}x{self._height} buffer"
            )
        return (y * self._width + x) * BYTES_PER_PIXEL


def _validate_dimensions(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensionsError(f"{name} must be an integer, got {value!r}")
        if not 0 < value <= MAX_DIMENSION:
            raise InvalidDimensionsError(f"{name} must be in 1..{MAX_DIMENSION}, got {value}")


def create(width: int, height: int) -> PixelBuffer:
    """Allocate a width x height buffer with every pixel black."""
    return PixelBuffer(width, height)


def destroy(buffer: Optional[PixelBuffer]) -> None:
    """Release a buffer's storage; None and already-released buffers are ignored."""
    if buffer is None:
        return
    buffer.release()
