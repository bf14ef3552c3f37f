"""Interactive Mandelbrot and Julia set viewer with mouse-centred zoom."""

__version__ = "0.1.0"