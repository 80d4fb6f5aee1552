from __future__ import annotations

import struct

MAGIC = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE
COLOR_PLANES = 1
BITS_PER_PIXEL = 24
BI_RGB = 0
MAX_FILE_SIZE = 0xFFFFFFFF

# magic, file size, reserved1, reserved2, pixel data offset
_FILE_HEADER = struct.Struct("<2sIHHI")
# size, width, height, planes, bpp, compression, image size,
# x ppm, y ppm, colors used, colors important
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")


def build_file_header(file_size: int) -> bytes:
    """Build the 14-byte file header."""
    return _FILE_HEADER.pack(MAGIC, file_size, 0, 0, PIXEL_DATA_OFFSET)


def build_info_header(width: int, height: int, image_size: int) -> bytes:
    """Build the 40-byte bitmap info header for 24-bit uncompressed data."""
    return _INFO_HEADER.pack(
        INFO_HEADER_SIZE,
        width,
        height,
        COLOR_PLANES,
        BITS_PER_PIXEL,
        BI_RGB,
        image_size,
        0,
        0,
        0,
        0,
    )
