from .encoding import BitmapLayout, encode_bmp, encode_row, iter_bmp_chunks, plan_layout, row_size
from .header import (
    BITS_PER_PIXEL,
    FILE_HEADER_SIZE,
    INFO_HEADER_SIZE,
    PIXEL_DATA_OFFSET,
    build_file_header,
    build_info_header,
)
from .settings import EncoderSettings
from .writer import save_bmp, write_bmp

__all__ = [
    "BITS_PER_PIXEL",
    "BitmapLayout",
    "EncoderSettings",
    "FILE_HEADER_SIZE",
    "INFO_HEADER_SIZE",
    "PIXEL_DATA_OFFSET",
    "build_file_header",
    "build_info_header",
    "encode_bmp",
    "encode_row",
    "iter_bmp_chunks",
    "plan_layout",
    "row_size",
    "save_bmp",
    "write_bmp",
]
