"""Double-buffered software rasteriser for the rotated mode-5 frame buffer."""

from __future__ import annotations

from array import array
from collections.abc import Callable, MutableSequence

from .camera import Camera
from .fixmath import clockwise, vector_2d_rotate
from .gba import SCREEN_HEIGHT, SCREEN_WIDTH, DisplayControl
from .mathtypes import Vec2, Vec3
from .polygon import Poly

# Pixels are stored column by column: index = x * COLUMN_STRIDE + y.
COLUMN_STRIDE = 160
# One mode-5 page spans 0xA000 bytes of 16-bit pixels.
PAGE_SIZE = 0xA000 // 2
# Clearing fills 9600 32-bit words, i.e. the visible 120 x 160 area.
CLEAR_HALFWORDS = 9600 * 2

_INT32_SPAN = 1 << 32
_INT32_MIN = 1 << 31


def quad8(x: int) -> int:
    """Repeat an 8-bit value across the four bytes of a 32-bit word."""
    return (x & 0xFF) * 0x01010101


def quad16(x: int) -> int:
    """Repeat a 16-bit value across both halves of a 32-bit word."""
    x &= 0xFFFF
    return x | (x << 16)


def fill16(dest: MutableSequence[int], word_count: int, value: int) -> None:
    """Set the first *word_count* entries of *dest* to the 16-bit *value*."""
    if word_count < 0 or word_count > len(dest):
        raise IndexError(f"cannot fill {word_count} entries of a {len(dest)}-entry buffer")
    value &= 0xFFFF
    for index in range(word_count):
        dest[index] = value


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _s32(value: int) -> int:
    """Wrap to a signed 32-bit integer."""
    return (value + _INT32_MIN) % _INT32_SPAN - _INT32_MIN


def project_vertex(vert: Vec3, cam: Camera, tpos: Vec3, rotation: int) -> Vec2:
    """Project a model-space vertex to the screen; y comes back in 16.16 fixed point."""
    rotated = vector_2d_rotate(Vec2(vert.x, vert.y), cam.invdir + rotation)
    x = rotated.x + tpos.x
    y = rotated.y - vert.z + tpos.y - tpos.z
    x = x * cam.zoom + 59
    y = y * cam.zoom + 79
    return Vec2(_s32(x), _s32(y << 16))


_Line = Callable[[int, int, int, int], None]


class Renderer:
    """Two frame-buffer pages, one shown and one drawn into."""

    def __init__(self, display_control: int = 0) -> None:
        self.display_control = display_control
        self.pages = (array("H", bytes(PAGE_SIZE * 2)), array("H", bytes(PAGE_SIZE * 2)))
        self._current = 1

    @property
    def buffer(self) -> array:
        """The page currently drawn into."""
        return self.pages[self._current]

    @property
    def displayed(self) -> array:
        """The page the display control register selects for showing."""
        return self.pages[1 if self.display_control & DisplayControl.BACKBUFFER else 0]

    def swap_buffers(self) -> None:
        """Show the page just drawn and draw into the other one."""
        self.display_control ^= DisplayControl.BACKBUFFER
        self._current ^= 1

    def clear_buffer(self) -> None:
        """Blank the visible area of the page being drawn into."""
        fill16(self.buffer, CLEAR_HALFWORDS, 0)

    def _index(self, x: int, y: int) -> int:
        index = x * COLUMN_STRIDE + y
        if not 0 <= index < PAGE_SIZE:
            raise IndexError(f"pixel ({x}, {y}) lies outside the frame buffer")
        return index

    def pixel(self, x: int, y: int) -> int:
        """Read one pixel of the page being drawn into."""
        return self.buffer[self._index(x, y)]

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Write one pixel of the page being drawn into."""
        self.buffer[self._index(x, y)] = color & 0xFFFF

    def _span(self, start: int, count: int, color: int) -> None:
        if count <= 0:
            return
        if start < 0 or start + count > PAGE_SIZE:
            raise IndexError("span lies outside the frame buffer")
        self.buffer[start:start + count] = array("H", [color & 0xFFFF]) * count

    def _vline(self, ystart: int, yend: int, x: int, color: int) -> None:
        self._span(x * COLUMN_STRIDE + ystart, yend - ystart + 1, color)

    def _vline_clipped(self, ystart: int, yend: int, x: int, color: int) -> None:
        begin = max(ystart, 0)
        self._span(x * COLUMN_STRIDE + begin, min(yend, SCREEN_HEIGHT - 1) - begin + 1, color)

    def _right_flat(self, v0: Vec2, v1: Vec2, v2: Vec2, color: int, clipped: bool) -> None:
        if v1.y > v2.y:
            v1, v2 = v2, v1
        difx = v1.x - v0.x
        inv1 = _tdiv(v1.y - v0.y, difx)
        inv2 = _tdiv(v2.y - v0.y, difx)
        cury1 = cury2 = v0.y
        line: _Line
        if clipped:
            if v0.x < 0:
                cury1 += inv1 * -v0.x
                cury2 += inv2 * -v0.x
            start, end, line = max(v0.x, 0), min(v1.x, SCREEN_WIDTH - 1), self._vline_clipped
        else:
            start, end, line = v0.x, v1.x, self._vline
        for x in range(start, end + 1):
            line(cury1 >> 16, cury2 >> 16, x, color)
            cury1 += inv1
            cury2 += inv2

    def _left_flat(self, v0: Vec2, v1: Vec2, v2: Vec2, color: int, clipped: bool) -> None:
        if v0.y > v1.y:
            v0, v1 = v1, v0
        difx = v2.x - v0.x
        inv1 = _tdiv(v2.y - v0.y, difx)
        inv2 = _tdiv(v2.y - v1.y, difx)
        cury1 = cury2 = v2.y
        line: _Line
        if clipped:
            if v2.x >= SCREEN_WIDTH:
                diff = v2.x - SCREEN_WIDTH + 1
                cury1 -= inv1 * diff
                cury2 -= inv2 * diff
            start, stop, line = min(v2.x, SCREEN_WIDTH - 1), max(v0.x + 1, 0), self._vline_clipped
        else:
            start, stop, line = v2.x, v0.x + 1, self._vline
        for x in range(start, stop - 1, -1):
            line(cury1 >> 16, cury2 >> 16, x, color)
            cury1 -= inv1
            cury2 -= inv2

    def _triangle(self, tri: Poly, clipped: bool) -> None:
        v0, v1, v2 = tri.v0, tri.v1, tri.v2
        if not clockwise(v2, v1, v0):
            return
        # Order the vertices by x; equal x values are swapped too.
        if v0.x >= v1.x:
            v0, v1 = v1, v0
        if v1.x >= v2.x:
            v1, v2 = v2, v1
        if v0.x >= v1.x:
            v0, v1 = v1, v0

        if v1.x == v2.x:
            self._right_flat(v0, v1, v2, tri.col, clipped)
        elif v0.x == v1.x:
            self._left_flat(v0, v1, v2, tri.col, clipped)
        else:
            lerpmult = _tdiv((v1.x - v0.x) << 16, v2.x - v0.x)
            v3 = Vec2(v1.x, v0.y + lerpmult * ((v2.y - v0.y) >> 16))
            self._right_flat(v0, v1, v3, tri.col, clipped)
            self._left_flat(v1, v3, v2, tri.col, clipped)

    def draw_triangle(self, tri: Poly) -> None:
        """Fill a screen-space triangle (y in 16.16) with no clipping."""
        self._triangle(tri, clipped=False)

    def draw_triangle_clipped(self, tri: Poly) -> None:
        """Fill a screen-space triangle (y in 16.16), clipped to the screen."""
        self._triangle(tri, clipped=True)

    def draw_line_low(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Bresenham line for slopes between -1 and 1, drawn left to right."""
        dx = x1 - x0
        dy = y1 - y0
        step = 1
        if dy < 0:
            step = -1
            dy = -dy
        decision = 2 * dy - dx
        y = y0
        for x in range(x0, x1 + 1):
            self.draw_pixel(x, y, color)
            if decision > 0:
                y += step
                decision -= 2 * dx
            decision += 2 * dy

    def draw_line_high(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Bresenham line for steep slopes, drawn top to bottom."""
        dx = x1 - x0
        dy = y1 - y0
        step = 1
        if dx < 0:
            step = -1
            dx = -dx
        decision = 2 * dx - dy
        x = x0
        for y in range(y0, y1 + 1):
            self.draw_pixel(x, y, color)
            if decision > 0:
                x += step
                decision -= 2 * dy
            decision += 2 * dx

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line between two points in any direction."""
        if abs(y1 - y0) < abs(x1 - x0):
            if x0 > x1:
                self.draw_line_low(x1, y1, x0, y0, color)
            else:
                self.draw_line_low(x0, y0, x1, y1, color)
        elif y0 > y1:
            self.draw_line_high(x1, y1, x0, y0, color)
        else:
            self.draw_line_high(x0, y0, x1, y1, color)