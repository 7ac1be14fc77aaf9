import pytest

from lancer.geometry import calculate_pressure, distance, to_opengl_coords


def test_distance_pythagorean():
    assert distance((0.0, 0.0), (3.0, 4.0)) == pytest.approx(5.0)


def test_distance_is_symmetric():
    a, b = (1.5, -2.0), (7.25, 3.5)
    assert distance(a, b) == pytest.approx(distance(b, a))


def test_distance_to_self_is_zero():
    assert distance((12.0, 9.0), (12.0, 9.0)) == 0.0


@pytest.mark.parametrize("delta", [0, -5])
def test_pressure_non_positive_delta(delta):
    assert calculate_pressure((10.0, 0.0), (0.0, 0.0), delta, 0.75) == 0.5


def test_pressure_no_movement_is_full():
    assert calculate_pressure((5.0, 5.0), (5.0, 5.0), 16, 0.75) == pytest.approx(1.0)


def test_pressure_clamped_low_for_fast_movement():
    assert calculate_pressure((10000.0, 0.0), (0.0, 0.0), 1, 0.75) == pytest.approx(0.1)


def test_pressure_zero_sensitivity_is_full():
    assert calculate_pressure((500.0, 0.0), (0.0, 0.0), 10, 0.0) == pytest.approx(1.0)


def test_pressure_decreases_with_speed():
    slow = calculate_pressure((10.0, 0.0), (0.0, 0.0), 100, 0.75)
    fast = calculate_pressure((50.0, 0.0), (0.0, 0.0), 100, 0.75)
    assert 0.1 <= fast < slow <= 1.0


def test_opengl_coords_identity():
    assert to_opengl_coords((3, 7)) == (3.0, 7.0)
    assert to_opengl_coords((-1.25, 2.5)) == (-1.25, 2.5)