# fractol

An interactive fractal explorer that draws the Mandelbrot set, Julia sets
and the Phoenix fractal in an 800×800 window, using escape-time iteration
with up to 1000 iterations per pixel.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

### Mandelbrot and Julia

```
fractol Mandelbrot
fractol Julia <a> <b>
```

`<a>` and `<b>` are the real and imaginary parts of the Julia constant.
Each may contain only digits, signs, spaces, tabs and at most one decimal
point, which must not be the last character, and its value must lie between
-2 and 2. Write a digit before the decimal point: a number such as `.5`
parses to a value outside the accepted range and is rejected. For example:

```
fractol Julia -0.8 0.156
```

Running `fractol` with no arguments prints a usage line and exits with
status 0. Wrong arguments print a message to standard error and exit with
status 1.

Controls:

- mouse wheel: scrolling up zooms in, scrolling down zooms out
- Escape, or closing the window: quit

### Phoenix

```
fractol-phoenix Phoenix <a> <b> <c> <d>
```

`<a> <b>` are the real and imaginary parts of the constant `c`, and
`<c> <d>` those of the feedback constant `p`; the iteration is
`z' = z² + c + p·z_prev`, with `z_prev` starting equal to the starting point.
All four numbers follow the same rules as above and must lie between -2 and
2, for example:

```
fractol-phoenix Phoenix 0.5667 0 -0.5 0
```

Wrong arguments print a message to standard error and exit with status 1.

Controls:

- mouse wheel: scrolling up widens the visible region, scrolling down narrows it
- arrow keys: move the view
- `1` / `2`: raise or lower the colour intensity (from 1 to 20)
- Escape, or closing the window: quit

Zooming always scales the region about its fixed bounds, not about the mouse
pointer.

## Using it as a library

Rendering does not need a window:

```python
from fractol.view import julia_view

view = julia_view(-0.8, 0.156)
counts = view.iterations(200, 200)   # escape counts, shape (200, 200)
pixels = view.render(200, 200)       # RGBA bytes, uint8 of shape (200, 200, 4)
view.zoom(1)                         # same effect as one scroll up
```

- `fractol.view` holds `View`, `FractalKind` and the constructors
  `mandelbrot_view`, `julia_view` and `phoenix_view`. A `View` also has
  `pan`, `brighten` and `dim`.
- `fractol.fractals` holds the escape-time functions for single points
  (`mandelbrot_iter`, `julia_iter`, `phoenix_iter`) and for whole grids
  (`mandelbrot_grid`, `julia_grid`, `phoenix_grid`).
- `fractol.mapping` holds `LinearMap`, which maps pixel positions to plane
  coordinates, and `Viewport`, the visible region.
- `fractol.colors` holds the palettes `basic_color` and `phoenix_color`,
  which return packed 32-bit RGBA values, and `to_rgba` to split them.
- `fractol.parsing` holds the number checks used on the command line:
  `is_valid_number`, `parse_number` and `parse_bounded`.
- `fractol.window` holds `run`, which opens a pygame window for a view, and
  `handle_event`, which applies one pygame event to a view.

## What it does not do

There is no way to save a rendered image to a file from the commands, and
the window size and iteration limit cannot be changed from the command line.