import pytest

from gtproton.color import Color


def test_pure_red_packing():
    assert Color(255, 0, 0).to_uint() == 0x0000FFFF


def test_default_is_opaque_white():
    assert Color().to_uint() == 0xFFFFFFFF


@pytest.mark.parametrize(
    "color",
    [Color(1, 2, 3, 4), Color(0, 0, 0, 0), Color(10, 200, 30), Color(255, 128, 0, 64)],
)
def test_round_trip_through_uint(color):
    assert Color.from_uint(color.to_uint()) == color


@pytest.mark.parametrize("packed", [0, 0x12345678, 0xFFFFFFFF, 0xDEADBEEF])
def test_round_trip_from_uint(packed):
    assert Color.from_uint(packed).to_uint() == packed


def test_alpha_defaults_to_255():
    assert Color(1, 2, 3).alpha == 255


def test_alpha_occupies_lowest_byte():
    assert Color(0, 0, 0, 77).to_uint() == 77


def test_channel_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_packed_out_of_range():
    with pytest.raises(ValueError):
        Color.from_uint(-1)