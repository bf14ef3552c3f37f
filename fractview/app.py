"""Command line entry point and interactive window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import numpy as np

from fractview.fractal import Fractal
from fractview.sets import FractalType
from fractview.utils import atodbl

USAGE = (
    "fractview [type] [parameters]\n"
    "1 : Mandelbrot\n"
    "2 : Julia <value_1> <value_2>\n"
)

ZOOM_IN = 0.9
ZOOM_OUT = 1.1


class UsageError(Exception):
    """Raised when the command line does not name a known fractal."""


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build a fractal from command line arguments, program name excluded."""
    args = list(argv)
    if len(args) == 1 and args[0].startswith("mandelbrot"):
        return Fractal(kind=FractalType.MANDELBROT)
    if len(args) == 3 and args[0].startswith("julia"):
        return Fractal(
            kind=FractalType.JULIA,
            julia_x=atodbl(args[1]),
            julia_y=atodbl(args[2]),
        )
    raise UsageError(USAGE)


def zoom_factor(ydelta: float) -> float | None:
    """Return the zoom factor for a scroll amount, or None when there is none."""
    if ydelta > 0:
        return ZOOM_IN
    if ydelta < 0:
        return ZOOM_OUT
    return None


def _to_surface_array(colors: np.ndarray) -> np.ndarray:
    """Turn packed RGBA colours of shape (h, w) into RGB of shape (w, h, 3)."""
    rgb = np.stack(
        [(colors >> 24) & 0xFF, (colors >> 16) & 0xFF, (colors >> 8) & 0xFF],
        axis=-1,
    ).astype(np.uint8)
    return rgb.swapaxes(0, 1)


def run(fractal: Fractal) -> None:
    """Show the fractal in a window until it is closed or Escape is pressed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((fractal.width, fractal.height))
        pygame.display.set_caption("fractview")

        def draw() -> None:
            surface = pygame.surfarray.make_surface(_to_surface_array(fractal.render()))
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        draw()
        running = True
        while running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.MOUSEWHEEL:
                factor = zoom_factor(event.y)
                if factor is not None:
                    mouse_x, mouse_y = pygame.mouse.get_pos()
                    fractal.zoom_at(factor, mouse_x, mouse_y)
                    draw()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and open the viewer; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        fractal = parse_args(argv)
    except UsageError:
        sys.stdout.write(USAGE)
        return 1
    run(fractal)
    return 0