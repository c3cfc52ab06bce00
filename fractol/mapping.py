"""Mapping between pixel coordinates and points of the complex plane."""

from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np

PAN_STEP = 0.04
BASE_EXTENT = 2.0


@dataclass(frozen=True)
class LinearMap:
    """Linear map of the interval [old_min, old_max] onto [new_min, new_max]."""

    old_min: float
    old_max: float
    new_min: float
    new_max: float

    def __post_init__(self) -> None:
        if self.old_min == self.old_max:
            raise ValueError("source interval must not be empty")

    def __call__(self, value: float) -> float:
        return (value - self.old_min) * (self.new_max - self.new_min) / (
            self.old_max - self.old_min
        ) + self.new_min

    def grid(self, count: int) -> np.ndarray:
        """Return the images of 0, 1, ..., count - 1 as a float array."""
        values = np.arange(count, dtype=np.float64)
        return (values - self.old_min) * (self.new_max - self.new_min) / (
            self.old_max - self.old_min
        ) + self.new_min


@dataclass(frozen=True)
class Viewport:
    """Visible region, as factors applied to the default bounds of -2 and 2.

    The real axis spans [-2 * xmin, 2 * xmax] and the imaginary axis
    spans [-2 * ymin, 2 * ymax].
    """

    xmin: float = 1.0
    xmax: float = 1.0
    ymin: float = 1.0
    ymax: float = 1.0

    def axes(self, width: int, height: int) -> tuple[LinearMap, LinearMap]:
        """Return the maps from pixel columns and rows to plane coordinates."""
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        x_map = LinearMap(0.0, float(width), -BASE_EXTENT * self.xmin, BASE_EXTENT * self.xmax)
        y_map = LinearMap(0.0, float(height), -BASE_EXTENT * self.ymin, BASE_EXTENT * self.ymax)
        return x_map, y_map

    def scale(self, factor: float) -> Viewport:
        """Return the viewport with every bound multiplied by *factor*."""
        return Viewport(
            self.xmin * factor,
            self.xmax * factor,
            self.ymin * factor,
            self.ymax * factor,
        )

    def pan_x(self, direction: int) -> Viewport:
        """Shift horizontally; a positive direction moves the view right."""
        step = PAN_STEP * direction
        return replace(self, xmin=self.xmin - step, xmax=self.xmax + step)

    def pan_y(self, direction: int) -> Viewport:
        """Shift vertically; a positive direction moves the view down."""
        step = PAN_STEP * direction
        return replace(self, ymin=self.ymin - step, ymax=self.ymax + step)