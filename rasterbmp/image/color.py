from __future__ import annotations

from dataclasses import dataclass

_HEX_DIGITS = set("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class Color:
    """24-bit RGB color value."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")

    @classmethod
    def hex(cls, value: str) -> "Color":
        """Parse '#RGB' or '#RRGGBB' notation."""
        digits = value[1:] if value.startswith("#") else ""
        if len(digits) not in (3, 6) or not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"Invalid hex color: {value!r}")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def gray(cls, value: int) -> "Color":
        return cls(value, value, value)

    @classmethod
    def from_bgr(cls, data: bytes) -> "Color":
        """Build a color from 3 bytes in blue, green, red order."""
        if len(data) != 3:
            raise ValueError("Expected exactly 3 bytes")
        blue, green, red = data
        return cls(red, green, blue)

    def light(self, intensity: float) -> "Color":
        """Return the color with every channel scaled by intensity."""
        if intensity <= 0:
            return BLACK
        return Color(
            min(255, int(self.red * intensity)),
            min(255, int(self.green * intensity)),
            min(255, int(self.blue * intensity)),
        )

    def to_rgb(self) -> bytes:
        return bytes((self.red, self.green, self.blue))

    def to_bgr(self) -> bytes:
        return bytes((self.blue, self.green, self.red))


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
