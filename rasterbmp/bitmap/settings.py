from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EncoderSettings:
    pad_rows: bool = True
    top_down: bool = False

    @classmethod
    def legacy(cls) -> "EncoderSettings":
        """Unpadded rows, byte-compatible with the original tool's output."""
        return cls(pad_rows=False, top_down=False)
