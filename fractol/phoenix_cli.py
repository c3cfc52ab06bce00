"""Command that shows the Phoenix fractal."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from fractol.parsing import is_valid_number, parse_number
from fractol.view import View, phoenix_view

USAGE = "Phoenix <a> <b> <c> <d>"
INVALID = "invalid <a> <b> <c> <d>"
LOW = -2.0
HIGH = 2.0


def parse_args(argv: Sequence[str]) -> View:
    """Build the Phoenix view from its name and four parameters.

    Raises ValueError with a message for the user when the arguments are wrong.
    """
    args = list(argv)
    if len(args) != 5 or args[0] != "Phoenix":
        raise ValueError(USAGE)
    texts = args[1:]
    if not all(is_valid_number(text) for text in texts):
        raise ValueError(INVALID)
    values = [parse_number(text) for text in texts]
    if not all(LOW <= value <= HIGH for value in values):
        raise ValueError(INVALID)
    return phoenix_view(*values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the Phoenix viewer; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        view = parse_args(argv)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    from fractol.window import run

    run(view)
    return 0


if __name__ == "__main__":
    sys.exit(main())