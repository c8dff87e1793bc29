"""Console constants: key bits, display control flags and colour packing."""

from enum import IntFlag

# The mode-5 frame buffer is drawn rotated, so width and height are swapped.
SCREEN_WIDTH = 120
SCREEN_HEIGHT = 160


class Key(IntFlag):
    """Bits of the key input register (a cleared bit means pressed)."""

    A = 0x001
    B = 0x002
    SELECT = 0x004
    START = 0x008
    RIGHT = 0x010
    LEFT = 0x020
    UP = 0x040
    DOWN = 0x080
    R = 0x100
    L = 0x200


class DisplayControl(IntFlag):
    """Flags of the display control register."""

    MODE_0 = 0x0
    MODE_1 = 0x1
    MODE_2 = 0x2
    MODE_3 = 0x3
    MODE_4 = 0x4
    MODE_5 = 0x5
    BACKBUFFER = 0x10
    H_BLANK_OAM = 0x20
    OBJ_MAP_2D = 0x00
    OBJ_MAP_1D = 0x40
    BG0_ENABLE = 0x100
    BG1_ENABLE = 0x200
    BG2_ENABLE = 0x400
    BG3_ENABLE = 0x800
    OBJ_ENABLE = 0x1000


def rgb(r: int, g: int, b: int) -> int:
    """Pack 5-bit red, green and blue into a 16-bit colour."""
    return (r | (g << 5) | (b << 10)) & 0xFFFF


def key_down(keys: int, key: int) -> bool:
    """Tell whether *key* is pressed in the active-low register value *keys*."""
    return bool(~keys & key)