import struct

import pytest

from rasterbmp.bitmap import (
    EncoderSettings,
    build_file_header,
    build_info_header,
    encode_bmp,
    encode_row,
    plan_layout,
    row_size,
)
from rasterbmp.errors import BitmapEncodeError, BufferReleasedError
from rasterbmp.image import BLUE, RED, Color, PixelBuffer, create


def parse_headers(data):
    magic, file_size, res1, res2, offset = struct.unpack_from("<2sIHHI", data, 0)
    fields = struct.unpack_from("<IiiHHIIiiII", data, 14)
    return {
        "magic": magic,
        "file_size": file_size,
        "reserved": (res1, res2),
        "offset": offset,
        "info_size": fields[0],
        "width": fields[1],
        "height": fields[2],
        "planes": fields[3],
        "bpp": fields[4],
        "compression": fields[5],
        "image_size": fields[6],
        "resolution": (fields[7], fields[8]),
        "colors": (fields[9], fields[10]),
    }


def test_header_sizes():
    assert len(build_file_header(54)) == 14
    assert len(build_info_header(1, 1, 3)) == 40


def test_row_size():
    assert row_size(1, pad_rows=False) == 3
    assert row_size(1, pad_rows=True) == 4
    assert row_size(4, pad_rows=True) == 12
    assert row_size(5, pad_rows=True) == 16
    assert row_size(5, pad_rows=False) == 15


def test_encode_row_reorders_and_pads():
    assert encode_row(b"\x01\x02\x03\x04\x05\x06") == b"\x03\x02\x01\x06\x05\x04"
    assert encode_row(b"\x01\x02\x03", 1) == b"\x03\x02\x01\x00"


@pytest.mark.parametrize("width,height", [(1, 1), (4, 4), (7, 3), (2, 9)])
def test_cleared_buffer_legacy_layout(width, height):
    color = Color(11, 22, 33)
    buffer = create(width, height)
    buffer.clear(color)
    data = encode_bmp(buffer, EncoderSettings.legacy())
    header = parse_headers(data)
    assert header["magic"] == b"BM"
    assert header["file_size"] == 54 + 3 * width * height == len(data)
    assert header["reserved"] == (0, 0)
    assert header["offset"] == 54
    assert header["info_size"] == 40
    assert (header["width"], header["height"]) == (width, height)
    assert header["planes"] == 1
    assert header["bpp"] == 24
    assert header["compression"] == 0
    assert header["image_size"] == 3 * width * height
    assert header["resolution"] == (0, 0)
    assert header["colors"] == (0, 0)
    assert data[54:] == bytes((33, 22, 11)) * (width * height)


def test_padded_layout_sizes():
    buffer = create(3, 2)
    buffer.clear(RED)
    data = encode_bmp(buffer)
    header = parse_headers(data)
    assert header["file_size"] == len(data) == 54 + 12 * 2
    assert header["image_size"] == 24
    row = b"\x00\x00\xff" * 3 + b"\x00\x00\x00"
    assert data[54:] == row * 2


def test_rows_written_in_storage_order():
    buffer = create(2, 2)
    buffer.set(0, 0, RED)
    buffer.set(1, 1, BLUE)
    data = encode_bmp(buffer, EncoderSettings.legacy())
    assert data[54:57] == b"\x00\x00\xff"
    assert data[63:66] == b"\xff\x00\x00"


def test_top_down_negates_height_only():
    buffer = create(4, 2)
    buffer.set(0, 0, RED)
    bottom_up = encode_bmp(buffer)
    top_down = encode_bmp(buffer, EncoderSettings(top_down=True))
    assert parse_headers(top_down)["height"] == -2
    assert top_down[54:] == bottom_up[54:]


def test_concrete_red_square():
    buffer = create(100, 100)
    buffer.clear(Color(255, 0, 0))
    data = encode_bmp(buffer)
    assert len(data) == 30054
    assert data[:2] == b"\x42\x4d"
    assert data[54:57] == b"\x00\x00\xff"
    assert data == encode_bmp(buffer, EncoderSettings.legacy())


def test_encode_does_not_mutate_buffer():
    buffer = create(3, 3)
    buffer.set(1, 1, RED)
    before = buffer.rgb_bytes()
    encode_bmp(buffer)
    assert buffer.rgb_bytes() == before


def test_released_buffer_cannot_be_encoded():
    buffer = create(2, 2)
    buffer.release()
    with pytest.raises(BufferReleasedError):
        encode_bmp(buffer)


def test_oversized_image_rejected(monkeypatch):
    buffer = PixelBuffer(1, 1)
    monkeypatch.setattr(PixelBuffer, "width", property(lambda self: 0x7FFFFFFF))
    monkeypatch.setattr(PixelBuffer, "height", property(lambda self: 0x7FFFFFFF))
    with pytest.raises(BitmapEncodeError):
        plan_layout(buffer)
