"""Fixed-point trigonometry and screen-space tests."""

from .gba import SCREEN_HEIGHT, SCREEN_WIDTH
from .lookups import LUT_COS, LUT_COSHALF, LUT_SIN
from .mathtypes import Vec2


def cos_lut(value: int, angle: int) -> int:
    """Scale *value* by the cosine of an 8-bit *angle*."""
    return (value * LUT_COS[angle & 0xFF]) >> 8


def sin_lut(value: int, angle: int) -> int:
    """Scale *value* by the sine of an 8-bit *angle*."""
    return (value * LUT_SIN[angle & 0xFF]) >> 8


def _rotate(v: Vec2, cs: int, sn: int) -> Vec2:
    return Vec2((v.x * cs - v.y * sn) >> 8, (v.x * sn + v.y * cs) >> 8)


def vector_2d_rotate(v: Vec2, direction: int) -> Vec2:
    """Rotate *v* by the 8-bit angle *direction*."""
    return _rotate(v, LUT_COS[direction & 0xFF], LUT_SIN[direction & 0xFF])


def vector_2d_rotate_half(v: Vec2, direction: int) -> Vec2:
    """Rotate *v* with the x axis squashed to half size."""
    return _rotate(v, LUT_COSHALF[direction & 0xFF], LUT_SIN[direction & 0xFF])


def clockwise(v0: Vec2, v1: Vec2, v2: Vec2) -> bool:
    """Tell whether the three vertices wind clockwise (for backface culling)."""
    return ((v1.y - v0.y) * (v2.x - v1.x) - (v1.x - v0.x) * (v2.y - v1.y)) > 0


def _within_screen(xs: list[int], ys: list[int]) -> bool:
    return (
        max(xs) < SCREEN_WIDTH
        and min(xs) >= 0
        and max(ys) < SCREEN_HEIGHT
        and min(ys) >= 0
    )


def inside_view_horizontal(v0: Vec2, v1: Vec2, v2: Vec2) -> bool:
    """Bounds test for vertices whose x is in 16.16 fixed point."""
    xs = [max(v0.x, v1.x, v2.x) >> 16, min(v0.x, v1.x, v2.x) >> 16]
    return _within_screen(xs, [v0.y, v1.y, v2.y])


def inside_view_vertical(v0: Vec2, v1: Vec2, v2: Vec2) -> bool:
    """Bounds test for vertices whose y is in 16.16 fixed point."""
    ys = [max(v0.y, v1.y, v2.y) >> 16, min(v0.y, v1.y, v2.y) >> 16]
    return _within_screen([v0.x, v1.x, v2.x], ys)


def inside_view(v0: Vec2, v1: Vec2, v2: Vec2) -> bool:
    """Bounds test for plain integer vertices."""
    return _within_screen([v0.x, v1.x, v2.x], [v0.y, v1.y, v2.y])