import pytest

from fractol.cli import main, parse_args
from fractol.view import FractalKind


def test_no_arguments_gives_none():
    assert parse_args([]) is None


def test_mandelbrot():
    view = parse_args(["Mandelbrot"])
    assert view.kind is FractalKind.MANDELBROT


def test_julia_constant():
    view = parse_args(["Julia", "0.285", "-0.01"])
    assert view.kind is FractalKind.JULIA
    assert view.c == complex(0.285, -0.01)


def test_julia_bounds_inclusive():
    view = parse_args(["Julia", "2", "-2"])
    assert view.c == complex(2, -2)


def test_julia_out_of_range():
    with pytest.raises(ValueError, match="incorrect"):
        parse_args(["Julia", "3", "0"])


def test_julia_lone_sign_is_out_of_range():
    with pytest.raises(ValueError, match="incorrect"):
        parse_args(["Julia", "-", "0"])


@pytest.mark.parametrize("bad", ["1.", "1.2.3", "abc", "0,5"])
def test_julia_malformed(bad):
    with pytest.raises(ValueError, match="Julia <a> <b>"):
        parse_args(["Julia", bad, "0"])


@pytest.mark.parametrize(
    "args",
    [["mandelbrot"], ["Mandelbrot", "1"], ["Julia", "0"], ["Phoenix", "0", "0"]],
)
def test_unknown_command(args):
    with pytest.raises(ValueError, match="Mandelbrot or Julia"):
        parse_args(args)


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "<Mandelbrot> or <Julia> <a> <b>" in capsys.readouterr().out


def test_main_reports_error(capsys):
    assert main(["Julia", "5", "0"]) == 1
    assert "incorrect" in capsys.readouterr().err


def test_main_reports_unknown(capsys):
    assert main(["Sierpinski"]) == 1
    assert "Mandelbrot or Julia" in capsys.readouterr().err