"""Colour-gradient triangle rendered into a 240 x 160 mode-3 frame."""

from __future__ import annotations

import argparse
import sys
from array import array
from collections.abc import Sequence

WIDTH = 240
HEIGHT = 160
HALF_WIDTH = 120
HALF_HEIGHT = 80
ROWS = 62

_U32 = 0xFFFFFFFF


def rgb15(red: int, green: int, blue: int) -> int:
    """Pack 5-bit channels into a 15-bit colour."""
    return (red | (green << 5) | (blue << 10)) & 0xFFFF


def c_mix(r: int, l: int, t: int, length: int) -> int:
    """Blend from *r* (at t = 0) to *l* (at t = length) with unsigned arithmetic."""
    return ((l * t + r * ((length - t) & _U32)) & _U32) // length


def render_triangle() -> array:
    """Draw the gradient triangle and return the frame, row by row."""
    frame = array("H", bytes(WIDTH * HEIGHT * 2))
    start_y = HALF_HEIGHT - 32
    for curr_y in range(ROWS):
        left = HALF_WIDTH - curr_y
        width = 2 * curr_y
        left_color = (c_mix(31, 0, curr_y, ROWS), c_mix(0, 31, curr_y, ROWS), c_mix(0, 0, curr_y, ROWS))
        right_color = (c_mix(31, 0, curr_y, ROWS), c_mix(0, 0, curr_y, ROWS), c_mix(0, 31, curr_y, ROWS))
        row = (start_y + curr_y) * WIDTH
        for curr_x in range(width):
            channels = (c_mix(lc, rc, curr_x, width) for lc, rc in zip(left_color, right_color))
            frame[row + left + curr_x] = rgb15(*channels)
    return frame


def _to_ppm(frame: array) -> bytes:
    out = bytearray(f"P6\n{WIDTH} {HEIGHT}\n255\n".encode("ascii"))
    for color in frame:
        for shift in (0, 5, 10):
            channel = (color >> shift) & 0x1F
            out.append((channel << 3) | (channel >> 2))
    return bytes(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Render the triangle and write it as a binary PPM image."""
    parser = argparse.ArgumentParser(description="Render the gradient triangle as a PPM image.")
    parser.add_argument("output", nargs="?", default="-", help="output file, or - for stdout")
    args = parser.parse_args(argv)
    data = _to_ppm(render_triangle())
    if args.output == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        with open(args.output, "wb") as handle:
            handle.write(data)
    return 0


if __name__ == "__main__":
    sys.exit(main())