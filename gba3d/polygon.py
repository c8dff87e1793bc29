"""Triangle records in screen space and world space."""

from __future__ import annotations

from dataclasses import dataclass, field

from .mathtypes import Vec2, Vec3


@dataclass(frozen=True)
class Poly:
    """A screen-space triangle with a 16-bit colour."""

    v0: Vec2 = field(default_factory=Vec2)
    v1: Vec2 = field(default_factory=Vec2)
    v2: Vec2 = field(default_factory=Vec2)
    col: int = 0


@dataclass(frozen=True)
class Poly3D:
    """A world-space triangle with a 16-bit colour."""

    v0: Vec3 = field(default_factory=Vec3)
    v1: Vec3 = field(default_factory=Vec3)
    v2: Vec3 = field(default_factory=Vec3)
    col: int = 0

    @classmethod
    def from_coords(
        cls,
        x0: int, y0: int, z0: int,
        x1: int, y1: int, z1: int,
        x2: int, y2: int, z2: int,
        col: int,
    ) -> Poly3D:
        """Build a triangle from nine coordinates and a colour."""
        return cls(Vec3(x0, y0, z0), Vec3(x1, y1, z1), Vec3(x2, y2, z2), col)