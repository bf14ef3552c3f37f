import pytest

from fractview.app import UsageError, main, parse_args, zoom_factor
from fractview.sets import FractalType


def test_parse_mandelbrot():
    fractal = parse_args(["mandelbrot"])
    assert fractal.kind == FractalType.MANDELBROT
    assert (fractal.min_x, fractal.max_x) == (-2.0, 2.0)


def test_parse_mandelbrot_prefix_match():
    assert parse_args(["mandelbrot2"]).kind == FractalType.MANDELBROT


def test_parse_julia_parameters():
    fractal = parse_args(["julia", "0.285", "-0.01"])
    assert fractal.kind == FractalType.JULIA
    assert fractal.julia_x == pytest.approx(0.285)
    assert fractal.julia_y == pytest.approx(-0.01)


def test_parse_julia_garbage_parameters_give_zero():
    fractal = parse_args(["julia", "abc", "def"])
    assert (fractal.julia_x, fractal.julia_y) == (0.0, 0.0)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["mandel"],
        ["mandelbrot", "extra"],
        ["julia"],
        ["julia", "0.1"],
        ["jul", "0.1", "0.2"],
        ["julia", "0.1", "0.2", "0.3"],
        ["burning"],
    ],
)
def test_parse_rejects_bad_arguments(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_zoom_factor_directions():
    assert zoom_factor(1.0) == 0.9
    assert zoom_factor(-1.0) == 1.1
    assert zoom_factor(0.0) is None


def test_main_prints_usage_on_bad_arguments(capsys):
    status = main(["nothing"])
    out = capsys.readouterr().out
    assert status == 1
    assert "1 : Mandelbrot" in out
    assert "2 : Julia <value_1> <value_2>" in out