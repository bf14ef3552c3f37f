"""The fractal view: its bounds, zooming and rendering."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fractview.sets import (
    ESCAPE_RADIUS_SQUARED,
    HEIGHT,
    MAX_ITERATIONS,
    WIDTH,
    FractalType,
)
from fractview.utils import calculate_color, map_range

_PALETTE = np.array(
    [calculate_color(i) for i in range(MAX_ITERATIONS + 1)], dtype=np.uint32
)

_DEFAULT_MIN = -2.0
_DEFAULT_MAX = 2.0


@dataclass
class Fractal:
    """A view onto the complex plane showing one fractal."""

    kind: FractalType = FractalType.MANDELBROT
    julia_x: float = 0.0
    julia_y: float = 0.0
    width: int = WIDTH
    height: int = HEIGHT
    min_x: float = _DEFAULT_MIN
    max_x: float = _DEFAULT_MAX
    min_y: float = _DEFAULT_MIN
    max_y: float = _DEFAULT_MAX
    zoom: float = 1.0

    def reset(self) -> None:
        """Return the view to its initial bounds."""
        self.min_x = _DEFAULT_MIN
        self.max_x = _DEFAULT_MAX
        self.min_y = _DEFAULT_MIN
        self.max_y = _DEFAULT_MAX
        self.zoom = 1.0

    def zoom_at(self, factor: float, mouse_x: float, mouse_y: float) -> None:
        """Scale the view by ``factor`` keeping the point under the mouse fixed."""
        mouse_real = map_range(mouse_x, self.min_x, self.max_x, self.width)
        mouse_imag = map_range(mouse_y, self.min_y, self.max_y, self.height)
        span_x = (self.max_x - self.min_x) * factor
        span_y = (self.max_y - self.min_y) * factor
        self.min_x = mouse_real - (mouse_real - self.min_x) * factor
        self.max_x = self.min_x + span_x
        self.min_y = mouse_imag - (mouse_imag - self.min_y) * factor
        self.max_y = self.min_y + span_y

    def _grid(self) -> tuple[np.ndarray, np.ndarray]:
        step_x = (self.max_x - self.min_x) / self.width
        step_y = (self.max_y - self.min_y) / self.height
        reals = np.arange(self.width, dtype=np.float64) * step_x + self.min_x
        imags = np.arange(self.height, dtype=np.float64) * step_y + self.min_y
        return np.meshgrid(reals, imags)

    def iterations(self) -> np.ndarray:
        """Return the escape count of every pixel, shaped (height, width)."""
        reals, imags = self._grid()
        if self.kind == FractalType.MANDELBROT:
            z_real = np.zeros_like(reals)
            z_imag = np.zeros_like(imags)
            c_real, c_imag = reals, imags
        else:
            z_real, z_imag = reals.copy(), imags.copy()
            c_real = np.full_like(reals, self.julia_x)
            c_imag = np.full_like(imags, self.julia_y)

        counts = np.zeros(reals.shape, dtype=np.int64)
        active = np.ones(reals.shape, dtype=bool)
        with np.errstate(over="ignore", invalid="ignore"):
            for _ in range(MAX_ITERATIONS):
                z_real2 = z_real * z_real
                z_imag2 = z_imag * z_imag
                active &= (z_real2 + z_imag2) <= ESCAPE_RADIUS_SQUARED
                if not active.any():
                    break
                next_imag = 2 * z_real * z_imag + c_imag
                next_real = z_real2 - z_imag2 + c_real
                z_real = np.where(active, next_real, z_real)
                z_imag = np.where(active, next_imag, z_imag)
                counts += active
        return counts

    def render(self) -> np.ndarray:
        """Return packed 0xRRGGBBAA colours for every pixel, shaped (height, width)."""
        return _PALETTE[self.iterations()]