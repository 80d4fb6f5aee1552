from .buffer import BYTES_PER_PIXEL, PixelBuffer, create, destroy
from .color import BLACK, BLUE, GREEN, RED, WHITE, Color

__all__ = [
    "BLACK",
    "BLUE",
    "BYTES_PER_PIXEL",
    "Color",
    "GREEN",
    "PixelBuffer",
    "RED",
    "WHITE",
    "create",
    "destroy",
]
