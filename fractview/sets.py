"""Escape-time iteration for the Mandelbrot and Julia sets."""

from __future__ import annotations

from enum import IntEnum

WIDTH = 800
HEIGHT = 800
MAX_ITERATIONS = 100
ESCAPE_RADIUS_SQUARED = 4.0


class FractalType(IntEnum):
    """The kinds of fractal that can be drawn."""

    MANDELBROT = 1
    JULIA = 2


def _escape_count(z_real: float, z_imag: float, c_real: float, c_imag: float) -> int:
    """Iterate z -> z**2 + c and count the steps taken before |z| exceeds 2."""
    count = 0
    while count < MAX_ITERATIONS:
        z_real2 = z_real * z_real
        z_imag2 = z_imag * z_imag
        if z_real2 + z_imag2 > ESCAPE_RADIUS_SQUARED:
            break
        z_imag = 2 * z_real * z_imag + c_imag
        z_real = z_real2 - z_imag2 + c_real
        count += 1
    return count


def mandelbrot_set(x: float, y: float) -> int:
    """Return the escape count of the point c = x + iy in the Mandelbrot set."""
    return _escape_count(0.0, 0.0, x, y)


def julia_set(x: float, y: float, julia_x: float, julia_y: float) -> int:
    """Return the escape count of z = x + iy for the Julia set of c = julia_x + i julia_y."""
    return _escape_count(x, y, julia_x, julia_y)