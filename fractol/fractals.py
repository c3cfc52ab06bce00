"""Escape-time iteration for the Mandelbrot, Julia and Phoenix fractals."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

MAX_ITER = 1000
ESCAPE_RADIUS_SQUARED = 4.0

_State = tuple[np.ndarray, ...]


def mandelbrot_iter(cr: float, ci: float, max_iter: int = MAX_ITER) -> int:
    """Count the iterations of z -> z**2 + c, from z = 0, before |z| reaches 2."""
    zr = zi = 0.0
    iterations = 0
    while iterations < max_iter and zr * zr + zi * zi < ESCAPE_RADIUS_SQUARED:
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        iterations += 1
    return iterations


def julia_iter(
    zr: float, zi: float, cr: float, ci: float, max_iter: int = MAX_ITER
) -> int:
    """Count the iterations of z -> z**2 + c, from the given z, before escape."""
    iterations = 0
    while iterations < max_iter and zr * zr + zi * zi < ESCAPE_RADIUS_SQUARED:
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        iterations += 1
    return iterations


def phoenix_iter(
    zr: float, zi: float, c: complex, p: complex, max_iter: int = MAX_ITER
) -> int:
    """Count the iterations of z' = z**2 + c + p * z_prev before escape.

    The previous value starts out equal to the starting point.
    """
    c, p = complex(c), complex(p)
    cr, ci, pr, pi = c.real, c.imag, p.real, p.imag
    zr_prev, zi_prev = zr, zi
    iterations = 0
    while iterations < max_iter and zr * zr + zi * zi < ESCAPE_RADIUS_SQUARED:
        zr, zi, zr_prev, zi_prev = (
            zr * zr - zi * zi + cr + pr * zr_prev - pi * zi_prev,
            2.0 * zr * zi + ci + pr * zi_prev + pi * zr_prev,
            zr,
            zi,
        )
        iterations += 1
    return iterations


def _escape_counts(
    state: _State,
    step: Callable[..., _State],
    max_iter: int,
) -> np.ndarray:
    """Run *step* on every point still inside the escape radius.

    The first two arrays of *state* are the real and imaginary parts of z.
    """
    shape = state[0].shape
    flat = tuple(np.ravel(a).copy() for a in state)
    counts = np.zeros(flat[0].size, dtype=np.int64)
    index = np.arange(flat[0].size)
    for _ in range(max_iter):
        zr, zi = flat[0], flat[1]
        alive = zr * zr + zi * zi < ESCAPE_RADIUS_SQUARED
        if not alive.all():
            index = index[alive]
            flat = tuple(a[alive] for a in flat)
            if index.size == 0:
                break
        flat = step(*flat)
        counts[index] += 1
    return counts.reshape(shape)


def _plane(xs: Sequence[float], ys: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    real, imag = np.meshgrid(
        np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64)
    )
    return real, imag


def mandelbrot_grid(
    xs: Sequence[float], ys: Sequence[float], max_iter: int = MAX_ITER
) -> np.ndarray:
    """Iteration counts for c = x + iy; rows follow *ys*, columns follow *xs*."""
    cr, ci = _plane(xs, ys)

    def step(zr, zi, cr, ci):
        return zr * zr - zi * zi + cr, 2.0 * zr * zi + ci, cr, ci

    zeros = np.zeros_like(cr)
    return _escape_counts((zeros, zeros.copy(), cr, ci), step, max_iter)


def julia_grid(
    xs: Sequence[float], ys: Sequence[float], c: complex, max_iter: int = MAX_ITER
) -> np.ndarray:
    """Iteration counts for starting points z = x + iy under the constant *c*."""
    c = complex(c)
    cr, ci = c.real, c.imag
    zr, zi = _plane(xs, ys)

    def step(zr, zi):
        return zr * zr - zi * zi + cr, 2.0 * zr * zi + ci

    return _escape_counts((zr, zi), step, max_iter)


def phoenix_grid(
    xs: Sequence[float],
    ys: Sequence[float],
    c: complex,
    p: complex,
    max_iter: int = MAX_ITER,
) -> np.ndarray:
    """Phoenix iteration counts for starting points z = x + iy."""
    c, p = complex(c), complex(p)
    cr, ci, pr, pi = c.real, c.imag, p.real, p.imag
    zr, zi = _plane(xs, ys)

    def step(zr, zi, zr_prev, zi_prev):
        return (
            zr * zr - zi * zi + cr + pr * zr_prev - pi * zi_prev,
            2.0 * zr * zi + ci + pr * zi_prev + pi * zr_prev,
            zr,
            zi,
        )

    return _escape_counts((zr, zi, zr.copy(), zi.copy()), step, max_iter)