import pytest

from gba3d.fixmath import cos_lut, sin_lut, vector_2d_rotate_half
from gba3d.lookups import LUT_COS, LUT_COSHALF, LUT_SIN
from gba3d.mathtypes import Vec2

ANGLES = range(256)


def _coshalf(angle):
    return vector_2d_rotate_half(Vec2(256, 0), angle).x


def test_cos_table_is_read_by_cos_lut():
    assert len(LUT_COS) == 256
    assert [cos_lut(256, angle) for angle in ANGLES] == list(LUT_COS)


def test_sin_table_is_read_by_sin_lut():
    assert len(LUT_SIN) == 256
    assert [sin_lut(256, angle) for angle in ANGLES] == list(LUT_SIN)


def test_coshalf_table_is_read_by_half_rotation():
    assert len(LUT_COSHALF) == 256
    assert [_coshalf(angle) for angle in ANGLES] == list(LUT_COSHALF)


@pytest.mark.parametrize("lookup", [cos_lut, sin_lut])
def test_lookups_wrap_after_a_full_turn(lookup):
    assert [lookup(256, angle + 256) for angle in ANGLES] == [
        lookup(256, angle) for angle in ANGLES
    ]


@pytest.mark.parametrize("lookup", [cos_lut, sin_lut])
def test_values_fit_signed_byte(lookup):
    assert all(-128 <= lookup(256, angle) <= 127 for angle in ANGLES)


def test_cos_starts_at_maximum():
    assert cos_lut(256, 0) == 127
    assert cos_lut(256, 0) == max(cos_lut(256, angle) for angle in ANGLES)


def test_sin_starts_at_zero():
    assert sin_lut(256, 0) == 0


def test_quarter_turn_is_zero_for_cosines():
    assert cos_lut(256, 64) == 0
    assert _coshalf(64) == 0


def test_coshalf_is_roughly_half_of_cos():
    assert all(abs(_coshalf(angle) * 2 - cos_lut(256, angle)) <= 3 for angle in ANGLES)


def test_cos_is_symmetric_around_zero_angle():
    assert cos_lut(256, 1) == cos_lut(256, 255) == 127