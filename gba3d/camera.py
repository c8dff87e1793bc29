"""A top-down camera with position, heading and zoom."""

from dataclasses import dataclass, field

from .fixmath import cos_lut, sin_lut
from .mathtypes import Vec2


@dataclass
class Camera:
    """Viewer position, 8-bit heading and integer zoom factor."""

    pos: Vec2 = field(default_factory=Vec2)
    direction: int = 0
    zoom: int = 0
    invdir: int = field(init=False)

    def __post_init__(self) -> None:
        self.invdir = -self.direction

    def move(self, distance: int, direction: int) -> None:
        """Step *distance* units along the 8-bit angle *direction*."""
        self.pos = Vec2(
            self.pos.x + cos_lut(distance, direction),
            self.pos.y + sin_lut(distance, direction),
        )

    def rotate(self, direction: int) -> None:
        """Turn the camera by *direction* angle steps."""
        self.direction += direction
        self.invdir -= direction