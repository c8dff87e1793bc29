from gba3d.camera import Camera
from gba3d.gba import Key
from gba3d.mathtypes import Vec2, Vec3
from gba3d.model import Model
from gba3d.polygon import Poly3D
from gba3d.rendering import Renderer
from gba3d.scene import apply_input, render_frame

RELEASED = 0xFFFF


def pressed(*keys):
    value = RELEASED
    for key in keys:
        value &= ~key
    return value


def test_no_keys_leaves_camera_alone():
    cam = Camera(Vec2(3, 4), 31, 4)
    apply_input(cam, RELEASED)
    assert cam == Camera(Vec2(3, 4), 31, 4)


def test_shoulder_buttons_rotate():
    cam = Camera(Vec2(0, 0), 31, 4)
    apply_input(cam, pressed(Key.L))
    assert cam.direction == 30
    assert cam.invdir == -30
    apply_input(cam, pressed(Key.R))
    apply_input(cam, pressed(Key.R))
    assert cam.direction == 32
    assert cam.invdir == -32


def test_both_shoulders_cancel():
    cam = Camera(Vec2(0, 0), 31, 4)
    apply_input(cam, pressed(Key.L, Key.R))
    assert cam.direction == 31
    assert cam.invdir == -31


def test_right_moves_along_heading():
    cam = Camera(Vec2(0, 0), 0, 1)
    apply_input(cam, pressed(Key.RIGHT))
    assert cam.pos.x > 0
    assert cam.pos.y == 0


def test_left_moves_against_heading():
    cam = Camera(Vec2(0, 0), 0, 1)
    apply_input(cam, pressed(Key.LEFT))
    assert cam.pos.x < 0
    assert cam.pos.y == 0


def test_up_and_down_move_sideways_to_heading():
    up = Camera(Vec2(0, 0), 0, 1)
    apply_input(up, pressed(Key.UP))
    down = Camera(Vec2(0, 0), 0, 1)
    apply_input(down, pressed(Key.DOWN))
    assert up.pos.x == 0 and up.pos.y < 0
    assert down.pos.x == 0 and down.pos.y > 0


def test_render_frame_clears_then_draws():
    color = 0x03E0
    renderer = Renderer()
    renderer.draw_pixel(100, 150, 7)
    model = Model(1, [Poly3D(Vec3(0, 0, 0), Vec3(40, 0, 0), Vec3(0, 60, 0), color)])
    render_frame(renderer, model, Camera(Vec2(0, 0), 0, 1))
    assert renderer.pixel(100, 150) == 0
    assert color in set(renderer.buffer)