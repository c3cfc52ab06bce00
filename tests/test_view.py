import numpy as np
import pytest

from fractol.colors import basic_color, phoenix_color, to_rgba
from fractol.fractals import (
    MAX_ITER,
    julia_grid,
    mandelbrot_grid,
    phoenix_grid,
)
from fractol.mapping import Viewport
from fractol.view import (
    MAX_INTENSITY,
    MIN_INTENSITY,
    FractalKind,
    View,
    julia_view,
    mandelbrot_view,
    phoenix_view,
)


def test_titles_follow_source_windows():
    assert mandelbrot_view().kind.title == "Mandelbrot"
    assert julia_view(0.0, 0.0).kind.title == "Julia"
    assert phoenix_view(0.0, 0.0, 0.0, 0.0).kind.title == "Phoenix Fractal"


def test_factories_set_parameters():
    view = phoenix_view(0.5, -0.25, 1.5, -1.0)
    assert view.kind is FractalKind.PHOENIX
    assert view.c == complex(0.5, -0.25)
    assert view.p == complex(1.5, -1.0)
    assert view.viewport == Viewport()
    assert view.intensity == MIN_INTENSITY
    assert view.max_iter == MAX_ITER
    assert julia_view(0.5, -0.25).c == complex(0.5, -0.25)
    assert mandelbrot_view().kind is FractalKind.MANDELBROT


def test_mandelbrot_zoom_in_and_out():
    view = mandelbrot_view()
    view.zoom(1)
    assert view.viewport == Viewport().scale(0.9)
    view.zoom(-1)
    assert view.viewport.xmin == pytest.approx(1.0)
    assert view.viewport.ymax == pytest.approx(1.0)


def test_phoenix_scroll_up_scales_by_phoenix_factor():
    view = phoenix_view(0.0, 0.0, 0.0, 0.0)
    view.zoom(2.5)
    assert view.viewport == Viewport().scale(1.1)


def test_zero_scroll_leaves_view():
    view = julia_view(0.1, 0.2)
    view.zoom(0)
    assert view.viewport == Viewport()


def test_pan_uses_viewport_steps():
    view = phoenix_view(0.0, 0.0, 0.0, 0.0)
    view.pan(1, -1)
    assert view.viewport == Viewport().pan_x(1).pan_y(-1)


def test_pan_and_back_restores_bounds():
    view = phoenix_view(0.0, 0.0, 0.0, 0.0)
    view.pan(-1, 1)
    view.pan(1, -1)
    assert view.viewport.xmin == pytest.approx(1.0)
    assert view.viewport.ymax == pytest.approx(1.0)


def test_brighten_caps_at_maximum():
    view = phoenix_view(0.0, 0.0, 0.0, 0.0)
    for _ in range(MAX_INTENSITY + 10):
        view.brighten()
    assert view.intensity == MAX_INTENSITY


def test_dim_floors_at_minimum():
    view = phoenix_view(0.0, 0.0, 0.0, 0.0)
    view.brighten()
    view.brighten()
    for _ in range(5):
        view.dim()
    assert view.intensity == MIN_INTENSITY


def test_only_phoenix_is_navigable():
    assert phoenix_view(0.0, 0.0, 0.0, 0.0).kind.navigable is True
    assert mandelbrot_view().kind.navigable is False
    assert julia_view(0.0, 0.0).kind.navigable is False


@pytest.mark.parametrize(
    "view",
    [mandelbrot_view(), julia_view(-0.8, 0.156), phoenix_view(0.5667, 0.0, -0.5, 0.0)],
)
def test_iterations_use_viewport_axes(view):
    view.max_iter = 60
    counts = view.iterations(16, 12)
    x_map, y_map = view.viewport.axes(16, 12)
    xs, ys = x_map.grid(16), y_map.grid(12)
    if view.kind is FractalKind.MANDELBROT:
        expected = mandelbrot_grid(xs, ys, 60)
    elif view.kind is FractalKind.JULIA:
        expected = julia_grid(xs, ys, view.c, 60)
    else:
        expected = phoenix_grid(xs, ys, view.c, view.p, 60)
    assert counts.shape == (12, 16)
    assert np.array_equal(counts, expected)


def test_render_mandelbrot_pixels_match_palette():
    view = mandelbrot_view()
    view.max_iter = 40
    counts = view.iterations(10, 8)
    pixels = view.render(10, 8)
    assert pixels.shape == (8, 10, 4)
    assert pixels.dtype == np.uint8
    for j in range(8):
        for i in range(10):
            expected = to_rgba(basic_color(int(counts[j, i]), 40))
            assert tuple(int(v) for v in pixels[j, i]) == expected


def test_render_phoenix_uses_intensity():
    view = phoenix_view(0.5667, 0.0, -0.5, 0.0)
    view.max_iter = 30
    view.brighten()
    counts = view.iterations(6, 6)
    pixels = view.render(6, 6)
    for j in range(6):
        for i in range(6):
            expected = to_rgba(phoenix_color(int(counts[j, i]), 30, 2))
            assert tuple(int(v) for v in pixels[j, i]) == expected


def test_render_rejects_empty_size():
    with pytest.raises(ValueError):
        mandelbrot_view().render(0, 10)


def test_view_is_constructible_directly():
    view = View(FractalKind.JULIA, c=0.25 + 0j, max_iter=10)
    counts = view.iterations(4, 4)
    assert counts.max() <= 10