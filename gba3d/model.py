"""A positioned, rotated set of world-space triangles."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import islice

from .camera import Camera
from .fixmath import inside_view_vertical, vector_2d_rotate
from .mathtypes import Vec2, Vec3
from .polygon import Poly, Poly3D
from .rendering import Renderer, project_vertex


@dataclass
class Model:
    """The first *polycount* triangles of *tris*, placed at *pos* and turned by *direction*."""

    polycount: int
    tris: Sequence[Poly3D]
    pos: Vec3 = field(default_factory=Vec3)
    direction: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.polycount <= len(self.tris):
            raise ValueError(
                f"polycount {self.polycount} does not fit {len(self.tris)} triangles"
            )

    def draw(self, cam: Camera, renderer: Renderer) -> None:
        """Project every triangle through *cam* and rasterise it."""
        offset = vector_2d_rotate(
            Vec2(self.pos.x - cam.pos.x, self.pos.y - cam.pos.y), cam.invdir
        )
        tpos = Vec3(offset.x, offset.y, self.pos.z)

        for world in islice(self.tris, self.polycount):
            v0, v1, v2 = (
                project_vertex(vert, cam, tpos, self.direction)
                for vert in (world.v0, world.v1, world.v2)
            )
            screen = Poly(v0, v1, v2, world.col)
            if inside_view_vertical(v0, v1, v2):
                renderer.draw_triangle(screen)
            else:
                renderer.draw_triangle_clipped(screen)