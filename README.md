# fractview

A small interactive viewer for the Mandelbrot set and Julia sets. It opens an
800×800 window onto the square [-2, 2] × [-2, 2] of the complex plane, colours
each pixel by how many iterations (up to 100) the point takes to escape the
disc of radius 2, and lets you zoom in and out around the mouse pointer.

## Installation

```
pip install .
```

## Usage

Show the Mandelbrot set:

```
fractview mandelbrot
```

Show a Julia set for the constant `c = <real> + <imag>·i`:

```
fractview julia -0.8 0.156
```

The first argument is matched by its beginning: anything that starts with
`mandelbrot` (given alone) or `julia` (followed by exactly two values) is
accepted.

The two Julia values are read leniently: leading whitespace and one sign are
accepted, followed by digits and an optional fractional part; anything after
that is ignored, and text holding no number reads as 0.

Any other arguments print a short usage message to standard output and exit
with status 1.

### Controls

| Input           | Action                                        |
|-----------------|-----------------------------------------------|
| Scroll up       | Zoom in around the mouse pointer (× 0.9)      |
| Scroll down     | Zoom out around the mouse pointer (× 1.1)     |
| Escape          | Close the window                              |
| Window close    | Close the window                              |

There are no other controls: no panning, colour changes or view reset from the
keyboard.

### Colours

| Iterations      | Colour       |
|-----------------|--------------|
| 0–32            | sea green    |
| 33–65           | sky blue     |
| 66–99           | khaki        |
| 100 (bounded)   | black        |

## Using it as a library

```python
from fractview.sets import FractalType, mandelbrot_set, julia_set
from fractview.fractal import Fractal
from fractview.utils import atodbl, calculate_color, map_range
from fractview.app import parse_args, UsageError

mandelbrot_set(0.0, 0.0)          # 100: the origin never escapes
julia_set(2.0, 2.0, 0.0, 0.0)     # 0: already outside the radius-2 disc

fractal = Fractal()               # Mandelbrot over [-2, 2] × [-2, 2], 800×800
fractal.zoom_at(0.9, 400, 400)    # zoom in around the pixel (400, 400)
counts = fractal.iterations()     # escape counts, shape (height, width)
pixels = fractal.render()         # packed 0xRRGGBBAA colours, shape (height, width)
fractal.reset()                   # back to the initial view

julia = Fractal(kind=FractalType.JULIA, julia_x=-0.8, julia_y=0.156)

atodbl("  -1.5abc")               # -1.5
calculate_color(100)              # 0x000000FF
map_range(400, -2.0, 2.0, 800)    # 0.0

parse_args(["julia", "-0.8", "0.156"])   # a Julia Fractal
parse_args(["spiral"])                   # raises UsageError
```

`fractview.app.run(fractal)` opens the window for a given `Fractal`, and
`fractview.app.main(argv)` parses arguments and runs the viewer, returning the
exit status.

## What it does not do

The viewer only draws to the screen: it does not save images to files, and the
iteration limit, window size and palette are fixed.

## Running the tests

```
pip install .[test]
pytest
```