"""State of an interactive fractal view: what is shown and how it is coloured."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np

from fractol.colors import basic_color, phoenix_color
from fractol.fractals import MAX_ITER, julia_grid, mandelbrot_grid, phoenix_grid
from fractol.mapping import Viewport

WIDTH = 800
HEIGHT = 800
MIN_INTENSITY = 1
MAX_INTENSITY = 20


class FractalKind(enum.Enum):
    """The fractals the viewer can draw, with their window titles."""

    MANDELBROT = "Mandelbrot"
    JULIA = "Julia"
    PHOENIX = "Phoenix Fractal"

    @property
    def title(self) -> str:
        return self.value

    @property
    def zoom_factor(self) -> float:
        """Factor applied to the bounds when scrolling up."""
        return 1.1 if self is FractalKind.PHOENIX else 0.9

    @property
    def navigable(self) -> bool:
        """Whether the view answers to panning and brightness keys."""
        return self is FractalKind.PHOENIX


@dataclass
class View:
    """A fractal together with its visible region and colour intensity."""

    kind: FractalKind
    c: complex = 0j
    p: complex = 0j
    viewport: Viewport = field(default_factory=Viewport)
    intensity: int = MIN_INTENSITY
    max_iter: int = MAX_ITER

    def zoom(self, direction: float) -> None:
        """Scale the view for a scroll of *direction*; zero leaves it alone."""
        factor = self.kind.zoom_factor
        if direction > 0:
            self.viewport = self.viewport.scale(factor)
        elif direction < 0:
            self.viewport = self.viewport.scale(1.0 / factor)

    def pan(self, dx: int, dy: int) -> None:
        """Shift the view by whole steps; positive moves right and down."""
        viewport = self.viewport
        if dx:
            viewport = viewport.pan_x(dx)
        if dy:
            viewport = viewport.pan_y(dy)
        self.viewport = viewport

    def brighten(self) -> None:
        """Raise the colour intensity by one, up to its maximum."""
        if self.intensity < MAX_INTENSITY:
            self.intensity += 1

    def dim(self) -> None:
        """Lower the colour intensity by one, down to its minimum."""
        if self.intensity > MIN_INTENSITY:
            self.intensity -= 1

    def iterations(self, width: int = WIDTH, height: int = HEIGHT) -> np.ndarray:
        """Escape counts for every pixel, as an array of shape (height, width)."""
        x_map, y_map = self.viewport.axes(width, height)
        xs, ys = x_map.grid(width), y_map.grid(height)
        if self.kind is FractalKind.MANDELBROT:
            return mandelbrot_grid(xs, ys, self.max_iter)
        if self.kind is FractalKind.JULIA:
            return julia_grid(xs, ys, self.c, self.max_iter)
        return phoenix_grid(xs, ys, self.c, self.p, self.max_iter)

    def _color(self, iterations: int) -> int:
        if self.kind is FractalKind.PHOENIX:
            return phoenix_color(iterations, self.max_iter, self.intensity)
        return basic_color(iterations, self.max_iter)

    def render(self, width: int = WIDTH, height: int = HEIGHT) -> np.ndarray:
        """RGBA pixels of the view, as uint8 of shape (height, width, 4)."""
        counts = self.iterations(width, height)
        palette = np.array(
            [self._color(n) for n in range(self.max_iter + 1)], dtype=np.uint32
        )
        packed = palette[counts]
        channels = [(packed >> shift) & 0xFF for shift in (24, 16, 8, 0)]
        return np.stack(channels, axis=-1).astype(np.uint8)


def mandelbrot_view() -> View:
    """The Mandelbrot set at its default zoom."""
    return View(FractalKind.MANDELBROT)


def julia_view(cr: float, ci: float) -> View:
    """The Julia set of the constant cr + i*ci."""
    return View(FractalKind.JULIA, c=complex(cr, ci))


def phoenix_view(cr: float, ci: float, pr: float, pi: float) -> View:
    """The Phoenix fractal with constant cr + i*ci and feedback pr + i*pi."""
    return View(FractalKind.PHOENIX, c=complex(cr, ci), p=complex(pr, pi))