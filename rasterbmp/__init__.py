"""
rasterbmp - in-memory RGB pixel buffers with a 24-bit BMP writer.

    from rasterbmp import Color, create, destroy, save_bmp

    image = create(100, 100)
    image.clear(Color(255, 0, 0))
    save_bmp(image, "img.bmp")
    destroy(image)
"""
from .bitmap import EncoderSettings, encode_bmp, save_bmp, write_bmp
from .errors import (
    AllocationError,
    BitmapEncodeError,
    BitmapWriteError,
    BufferReleasedError,
    InvalidDimensionsError,
    OutOfBoundsError,
    RasterBmpError,
)
from .image import BLACK, BLUE, GREEN, RED, WHITE, Color, PixelBuffer, create, destroy

__all__ = [
    "AllocationError",
    "BLACK",
    "BLUE",
    "BitmapEncodeError",
    "BitmapWriteError",
    "BufferReleasedError",
    "Color",
    "EncoderSettings",
    "GREEN",
    "InvalidDimensionsError",
    "OutOfBoundsError",
    "PixelBuffer",
    "RED",
    "RasterBmpError",
    "WHITE",
    "create",
    "destroy",
    "encode_bmp",
    "save_bmp",
    "write_bmp",
]

__version__ = "0.1.0"
