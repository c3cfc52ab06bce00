"""Command that shows the Mandelbrot set or a Julia set."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from fractol.parsing import is_valid_number, parse_number
from fractol.view import View, julia_view, mandelbrot_view

USAGE = "<Mandelbrot> or <Julia> <a> <b>"
LOW = -2.0
HIGH = 2.0


def parse_args(argv: Sequence[str]) -> Optional[View]:
    """Build the view the arguments ask for, or None when there are none.

    Raises ValueError with a message for the user when the arguments are wrong.
    """
    args = list(argv)
    if not args:
        return None
    if args == ["Mandelbrot"]:
        return mandelbrot_view()
    if len(args) == 3 and args[0] == "Julia":
        texts = args[1:]
        if not all(is_valid_number(text) for text in texts):
            raise ValueError("Julia <a> <b>")
        a, b = (parse_number(text) for text in texts)
        if not (LOW <= a <= HIGH and LOW <= b <= HIGH):
            raise ValueError("<a> or <b> incorrect")
        return julia_view(a, b)
    raise ValueError("Mandelbrot or Julia <a> <b>")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        view = parse_args(argv)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    if view is None:
        print(USAGE)
        return 0
    from fractol.window import run

    run(view)
    return 0


if __name__ == "__main__":
    sys.exit(main())