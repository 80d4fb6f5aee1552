from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from ..errors import BitmapEncodeError, BufferReleasedError
from ..image import BYTES_PER_PIXEL, PixelBuffer
from .header import MAX_FILE_SIZE, PIXEL_DATA_OFFSET, build_file_header, build_info_header
from .settings import EncoderSettings


@dataclass(frozen=True)
class BitmapLayout:
    """Sizes derived from a buffer's geometry for one encode."""

    width: int
    height: int
    row_size: int
    top_down: bool

    @property
    def image_size(self) -> int:
        return self.row_size * self.height

    @property
    def file_size(self) -> int:
        return PIXEL_DATA_OFFSET + self.image_size

    @property
    def padding(self) -> int:
        return self.row_size - self.width * BYTES_PER_PIXEL

    @property
    def header_height(self) -> int:
        return -self.height if self.top_down else self.height


def row_size(width: int, pad_rows: bool) -> int:
    """Return the encoded length of one pixel row in bytes."""
    size = width * BYTES_PER_PIXEL
    if pad_rows:
        size = (size + 3) & ~3
    return size


def plan_layout(buffer: PixelBuffer, settings: Optional[EncoderSettings] = None) -> BitmapLayout:
    if buffer.released:
        raise BufferReleasedError("Cannot encode a released pixel buffer")
    settings = settings or EncoderSettings()
    layout = BitmapLayout(
        width=buffer.width,
        height=buffer.height,
        row_size=row_size(buffer.width, settings.pad_rows),
        top_down=settings.top_down,
    )
    if layout.file_size > MAX_FILE_SIZE:
        raise BitmapEncodeError(
            f"{layout.width}x{layout.height} image needs {layout.file_size} bytes, "
            f"over the {MAX_FILE_SIZE} byte limit of the format"
        )
    return layout


def encode_row(rgb: bytes, padding: int = 0) -> bytes:
    """Reorder a row of RGB triples into blue-green-red order and pad it."""
    out = bytearray(len(rgb) + padding)
    end = len(rgb)
    out[0:end:3] = rgb[2::3]
    out[1:end:3] = rgb[1::3]
    out[2:end:3] = rgb[0::3]
    return bytes(out)


def iter_bmp_chunks(buffer: PixelBuffer, layout: BitmapLayout) -> Iterator[bytes]:
    """Yield the file header, the info header, then every pixel row in storage order."""
    yield build_file_header(layout.file_size)
    yield build_info_header(layout.width, layout.header_height, layout.image_size)
    for y in range(layout.height):
        yield encode_row(buffer.row(y), layout.padding)


def encode_bmp(buffer: PixelBuffer, settings: Optional[EncoderSettings] = None) -> bytes:
    """Encode the whole buffer as bitmap file contents."""
    layout = plan_layout(buffer, settings)
    return b"".join(iter_bmp_chunks(buffer, layout))
