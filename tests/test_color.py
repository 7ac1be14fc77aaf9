import pytest

from lancer.color import Color


def test_default_is_black():
    assert Color() == Color(0.0, 0.0, 0.0)
    assert Color().name() == "#000000"


def test_black_hsv_has_zero_hue():
    assert Color().to_hsv() == (0.0, 0.0, 0.0)


def test_pure_red_from_hsv():
    red = Color.from_hsv(0.0, 1.0, 1.0)
    assert red == Color(1.0, 0.0, 0.0)
    assert red.name() == "#ff0000"


def test_hue_360_wraps_to_zero():
    assert Color.from_hsv(360.0, 1.0, 1.0) == Color.from_hsv(0.0, 1.0, 1.0)


@pytest.mark.parametrize(
    "hsv",
    [(30.0, 0.5, 0.8), (120.0, 1.0, 1.0), (200.0, 0.25, 0.6), (310.0, 0.9, 0.3)],
)
def test_hsv_round_trip(hsv):
    assert Color.from_hsv(*hsv).to_hsv() == pytest.approx(hsv)


def test_grey_has_zero_hue_and_saturation():
    h, s, v = Color(0.5, 0.5, 0.5).to_hsv()
    assert (h, s) == (0.0, 0.0)
    assert v == pytest.approx(0.5)


def test_name_round_trips_through_bytes():
    color = Color(0x12 / 255, 0xAB / 255, 0xEF / 255)
    assert color.name() == "#12abef"


@pytest.mark.parametrize("hsv", [(-1.0, 0.5, 0.5), (361.0, 0.5, 0.5), (10.0, 1.5, 0.5), (10.0, 0.5, -0.1)])
def test_from_hsv_rejects_out_of_range(hsv):
    with pytest.raises(ValueError):
        Color.from_hsv(*hsv)


def test_rgb_out_of_range_rejected():
    with pytest.raises(ValueError):
        Color(1.2, 0.0, 0.0)