from __future__ import generator_stop

from argparse import ArgumentTypeError
from functools import wraps
from pathlib import Path
from typing import Callable


def arg_to_path(func: Callable[[Path], Path]) -> Callable:
    @wraps(func)
    def inner(path):
        return func(Path(path))

    return inner


def rank(s: str) -> int:

    """Checks that `s` is a valid rank, ie. a non-negative integer."""

    try:
        number = int(s)
    except ValueError:
        msg = f"invalid rank value: '{s}'"
        raise ArgumentTypeError(msg) from None

    if number < 0:
        msg = f"{s} is negative"
        raise ArgumentTypeError(msg)

    return number


@arg_to_path
def is_file(path: Path) -> Path:

    """Checks if a path is an actual file"""

    if not path.is_file():
        msg = f"{path} is not a file"
        raise ArgumentTypeError(msg)

    return path
