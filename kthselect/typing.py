from __future__ import generator_stop

from typing import Any, Callable, MutableSequence, TypeVar

from typing_extensions import Protocol  # typing.Protocol is availalble in Python 3.8+

T = TypeVar("T")

LessThan = Callable[[Any, Any], bool]


class PivotStrategy(Protocol):
    """Nominates the index of a pivot inside the half-open range `[start, end)` of `seq`."""

    def __call__(self, seq: MutableSequence, start: int, end: int, lt: LessThan) -> int:
        ...
