"""Colour palettes that turn escape iteration counts into RGBA pixels."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
BASIC_ALPHA = 0xAA
PHOENIX_ALPHA = 0xFF


def _pack(r: int, g: int, b: int, alpha: int) -> int:
    # Channels may exceed a byte; they overlap, and the result keeps 32 bits.
    return ((r << 24) | (g << 16) | (b << 8) | alpha) & _MASK


def _fade(iterations: int, max_iter: int) -> float:
    if max_iter <= 0:
        raise ValueError("max_iter must be positive")
    return 1.0 - iterations / max_iter


def basic_color(iterations: int, max_iter: int) -> int:
    """Colour used by the Mandelbrot and Julia views, as a packed RGBA value."""
    fade = _fade(iterations, max_iter)
    return _pack(
        int(8 * fade * 255),
        int(80 * fade * 255),
        int(800 * fade * 255),
        BASIC_ALPHA,
    )


def phoenix_color(iterations: int, max_iter: int, intensity: int) -> int:
    """Colour used by the Phoenix view; *intensity* scales every channel."""
    fade = _fade(iterations, max_iter)
    return _pack(
        int(8 * intensity * fade * 255),
        int(10 * intensity * fade * 255),
        int(20 * intensity * fade * 255),
        PHOENIX_ALPHA,
    )


def to_rgba(color: int) -> tuple[int, int, int, int]:
    """Split a packed colour into its red, green, blue and alpha bytes."""
    return (
        (color >> 24) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
    )