from __future__ import annotations

import os
from typing import Optional, Union

from ..errors import BitmapWriteError
from ..image import PixelBuffer
from .encoding import iter_bmp_chunks, plan_layout
from .settings import EncoderSettings

PathLike = Union[str, "os.PathLike[str]"]


def write_bmp(buffer: PixelBuffer, path: PathLike, settings: Optional[EncoderSettings] = None) -> None:
    """
    Write the buffer to path as a 24-bit bitmap, creating or overwriting it.

    Raises BitmapWriteError if the file cannot be opened or a write fails.
    Paths the OS rejects outright (such as ones with a NUL byte) count as unopenable.
    A partially written file is left in place on failure.
    """
    layout = plan_layout(buffer, settings)
    try:
        with open(path, "wb") as handle:
            for chunk in iter_bmp_chunks(buffer, layout):
                handle.write(chunk)
    except (OSError, ValueError) as exc:
        raise BitmapWriteError(f"Cannot write bitmap to {os.fspath(path)}: {exc}") from exc


def save_bmp(buffer: PixelBuffer, path: PathLike, settings: Optional[EncoderSettings] = None) -> bool:
    """
    Write the buffer to path; return False instead of raising on I/O failure.

    BufferReleasedError and BitmapEncodeError are not I/O failures and still
    propagate, before the destination is touched.
    """
    try:
        write_bmp(buffer, path, settings)
    except BitmapWriteError:
        return False
    return True
