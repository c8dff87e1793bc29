import dataclasses

import pytest

from gba3d.mathtypes import Vec2, Vec3


def test_vec2_defaults_to_origin():
    assert Vec2() == Vec2(0, 0)


def test_vec3_defaults_to_origin():
    assert Vec3() == Vec3(0, 0, 0)


def test_vec2_keeps_components():
    v = Vec2(3, -4)
    assert (v.x, v.y) == (3, -4)


def test_vec3_keeps_components():
    v = Vec3(1, 2, 3)
    assert (v.x, v.y, v.z) == (1, 2, 3)


def test_vectors_are_immutable():
    v = Vec2(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5
    assert (v.x, v.y) == (1, 2)


def test_replace_gives_a_copy():
    v = Vec3(1, 2, 3)
    w = dataclasses.replace(v, z=9)
    assert v == Vec3(1, 2, 3)
    assert w == Vec3(1, 2, 9)


def test_equal_vectors_hash_equal():
    assert hash(Vec2(7, 8)) == hash(Vec2(7, 8))
    assert len({Vec2(7, 8), Vec2(7, 8), Vec2(8, 7)}) == 2