"""Integer vector types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A two-component integer vector."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Vec3:
    """A three-component integer vector."""

    x: int = 0
    y: int = 0
    z: int = 0