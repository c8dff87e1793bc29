"""Per-frame input handling and drawing for the spinning-model demo."""

from .camera import Camera
from .gba import Key, key_down
from .model import Model
from .rendering import Renderer

MOVE_SPEED = 5


def apply_input(camera: Camera, keys: int) -> None:
    """Turn and move *camera* from the active-low key register value *keys*."""
    if key_down(keys, Key.L):
        camera.rotate(-1)
    if key_down(keys, Key.R):
        camera.rotate(1)
    if key_down(keys, Key.UP):
        camera.move(MOVE_SPEED, camera.direction - 64)
    if key_down(keys, Key.DOWN):
        camera.move(MOVE_SPEED, camera.direction + 64)
    if key_down(keys, Key.LEFT):
        camera.move(MOVE_SPEED, camera.direction + 128)
    if key_down(keys, Key.RIGHT):
        camera.move(MOVE_SPEED, camera.direction)


def render_frame(renderer: Renderer, model: Model, camera: Camera) -> None:
    """Clear the drawing page and draw *model* as seen from *camera*."""
    renderer.clear_buffer()
    model.draw(camera, renderer)