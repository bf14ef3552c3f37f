import pytest

from fractview.sets import (
    MAX_ITERATIONS,
    FractalType,
    julia_set,
    mandelbrot_set,
)


@pytest.mark.parametrize(
    "value, expected",
    [(1, FractalType.MANDELBROT), (2, FractalType.JULIA)],
)
def test_fractal_type_from_number(value, expected):
    assert FractalType(value) is expected


def test_fractal_type_rejects_unknown_number():
    with pytest.raises(ValueError):
        FractalType(3)


def test_origin_is_in_mandelbrot_set():
    assert mandelbrot_set(0.0, 0.0) == MAX_ITERATIONS


def test_minus_one_is_in_mandelbrot_set():
    assert mandelbrot_set(-1.0, 0.0) == MAX_ITERATIONS


def test_far_point_escapes_after_first_step():
    assert mandelbrot_set(2.0, 2.0) == 1


def test_julia_point_outside_radius_escapes_immediately():
    assert julia_set(3.0, 0.0, 0.0, 0.0) == 0


def test_julia_point_inside_unit_disc_with_zero_constant_stays():
    assert julia_set(0.5, 0.5, 0.0, 0.0) == MAX_ITERATIONS


@pytest.mark.parametrize(
    "cx, cy",
    [(0.0, 0.0), (-0.75, 0.1), (0.3, 0.5), (-1.9, 0.0), (1.0, 1.0), (0.285, 0.01)],
)
def test_mandelbrot_equals_julia_started_at_origin(cx, cy):
    assert mandelbrot_set(cx, cy) == julia_set(0.0, 0.0, cx, cy)


@pytest.mark.parametrize("x", [-2.0, -1.3, -0.4, 0.0, 0.26, 0.9, 2.0])
@pytest.mark.parametrize("y", [-2.0, -0.7, 0.0, 0.65, 2.0])
def test_counts_stay_within_bounds(x, y):
    assert 0 <= mandelbrot_set(x, y) <= MAX_ITERATIONS
    assert 0 <= julia_set(x, y, -0.8, 0.156) <= MAX_ITERATIONS


def test_mandelbrot_is_symmetric_about_real_axis():
    for y in (0.1, 0.35, 0.64, 1.0):
        assert mandelbrot_set(-0.5, y) == mandelbrot_set(-0.5, -y)