from __future__ import annotations

from PIL import Image

from ..image import PixelBuffer


def buffer_to_image(buffer: PixelBuffer) -> Image.Image:
    """Copy the buffer into an RGB Pillow image with the same orientation."""
    return Image.frombytes("RGB", (buffer.width, buffer.height), buffer.rgb_bytes())


def image_to_buffer(img: Image.Image) -> PixelBuffer:
    """Build a pixel buffer from any Pillow image."""
    if img.mode != "RGB":
        img = img.convert("RGB")
    return PixelBuffer.from_rgb(img.width, img.height, img.tobytes())
