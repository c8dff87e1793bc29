import pytest

from gba3d.camera import Camera
from gba3d.fixmath import cos_lut, sin_lut
from gba3d.mathtypes import Vec2


def test_default_camera_is_zeroed():
    cam = Camera()
    assert (cam.pos, cam.direction, cam.invdir, cam.zoom) == (Vec2(), 0, 0, 0)


def test_inverse_direction_is_negated():
    cam = Camera(Vec2(0, 0), 31, 4)
    assert cam.invdir == -31
    assert cam.zoom == 4


@pytest.mark.parametrize("steps", [[1], [-1, -1, 5], [64, 200, -3]])
def test_rotation_keeps_direction_and_inverse_opposite(steps):
    cam = Camera(Vec2(), 31, 4)
    for step in steps:
        cam.rotate(step)
    assert cam.direction == 31 + sum(steps)
    assert cam.invdir == -cam.direction


@pytest.mark.parametrize("heading", [0, 64, 128, 192, 31 - 64])
def test_move_steps_along_heading(heading):
    cam = Camera(Vec2(10, -20), 0, 1)
    cam.move(5, heading)
    assert cam.pos == Vec2(10 + cos_lut(5, heading), -20 + sin_lut(5, heading))


def test_move_zero_distance_leaves_position():
    cam = Camera(Vec2(3, 4), 12, 2)
    cam.move(0, 90)
    assert cam.pos == Vec2(3, 4)


def test_move_does_not_change_heading():
    cam = Camera(Vec2(), 31, 4)
    cam.move(256, 10)
    assert (cam.direction, cam.invdir) == (31, -31)