from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, Sequence, Tuple

from .bitmap import EncoderSettings, write_bmp
from .errors import RasterBmpError
from .image import Color, create, destroy

OUTPUT_ENV_VAR = "RASTERBMP_OUTPUT"
DEFAULT_OUTPUT = "img.bmp"
DEFAULT_SIZE = 100
DEFAULT_COLOR = "#F00"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rasterbmp",
        description=(
            "Fill an image with a flat color, set individual pixels and save it as a 24-bit BMP. "
            f"Output path comes from --output, ${OUTPUT_ENV_VAR} or defaults to {DEFAULT_OUTPUT}."
        ),
    )
    parser.add_argument("--width", type=int, default=DEFAULT_SIZE, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_SIZE, help="Image height in pixels")
    parser.add_argument("--color", default=DEFAULT_COLOR, help="Fill color as #RGB or #RRGGBB")
    parser.add_argument(
        "--pixel",
        nargs=3,
        action="append",
        default=[],
        metavar=("X", "Y", "COLOR"),
        help="Set pixel (X, Y) to COLOR after filling; may be repeated",
    )
    parser.add_argument("--flip", action="store_true", help="Flip the image vertically before saving")
    parser.add_argument(
        "--legacy-layout",
        action="store_true",
        help="Write rows without 4-byte padding (byte-compatible with the original tool)",
    )
    parser.add_argument("--top-down", action="store_true", help="Store a negative height so row 0 is the top row")
    parser.add_argument("--output", metavar="PATH", help="Destination .bmp file")
    parser.add_argument("--quiet", action="store_true", help="Do not print progress")
    return parser.parse_args(argv)


def resolve_output(args: argparse.Namespace) -> str:
    if args.output:
        return args.output
    return os.environ.get(OUTPUT_ENV_VAR, DEFAULT_OUTPUT)


def resolve_settings(args: argparse.Namespace) -> EncoderSettings:
    return EncoderSettings(pad_rows=not args.legacy_layout, top_down=args.top_down)


def parse_pixels(raw: List[List[str]]) -> List[Tuple[int, int, Color]]:
    pixels = []
    for x, y, color in raw:
        try:
            pixels.append((int(x), int(y), Color.hex(color)))
        except ValueError as exc:
            raise ValueError(f"Invalid --pixel {x} {y} {color}: {exc}") from exc
    return pixels


def render(args: argparse.Namespace) -> str:
    fill = Color.hex(args.color)
    pixels = parse_pixels(args.pixel)
    path = resolve_output(args)
    buffer = create(args.width, args.height)
    try:
        _progress(args, f"> Rendering {buffer.width}x{buffer.height}")
        buffer.clear(fill)
        for x, y, color in pixels:
            buffer.set(x, y, color)
        if args.flip:
            buffer.flip_vertically()
        _progress(args, f"> Saving {path}")
        write_bmp(buffer, path, resolve_settings(args))
    finally:
        destroy(buffer)
    return path


def _progress(args: argparse.Namespace, message: str) -> None:
    if not args.quiet:
        print(message)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        path = render(args)
    except (RasterBmpError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    _progress(args, f"Image created: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
