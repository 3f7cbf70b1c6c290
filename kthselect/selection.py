from __future__ import generator_stop

import logging
from collections import deque
from collections.abc import MutableSequence
from operator import index
from operator import lt as natural_lt
from typing import Iterable, Optional, Union
from typing import MutableSequence as MutableSequenceT

from .exceptions import EmptySequence, RankOutOfRange
from .partition import split
from .strategies import get_strategy, median_of_medians, quick_median
from .typing import LessThan, PivotStrategy, T

logger = logging.getLogger(__name__)

StrategyT = Union[str, PivotStrategy, None]


def check_rank(length: int, k: int) -> int:

    """Validates rank `k` for a sequence of `length` elements and returns it as int."""

    k = index(k)

    if length == 0:
        raise EmptySequence("Cannot select from an empty sequence", rank=k, length=length)

    if not 0 <= k < length:
        raise RankOutOfRange(f"Rank {k} is out of range for a sequence of length {length}", rank=k, length=length)

    return k


def select_in(seq: MutableSequenceT[T], start: int, end: int, k: int, strategy: PivotStrategy, lt: LessThan) -> T:

    """Moves the `k`-th smallest element of `seq[start:end]` to index `k` and returns it.
    `k` is an index into `seq`, not relative to `start`.
    Afterwards `seq[start:end]` is partitioned around `seq[k]`.
    """

    while True:
        m = split(seq, start, end, strategy(seq, start, end, lt), lt)
        if m < k:
            start = m + 1
        elif m > k:
            end = m
        else:
            return seq[k]


def as_mutable(it: Iterable[T]) -> MutableSequenceT[T]:

    """Returns `it` itself if it can be partitioned in place, otherwise a list copy of it.
    Deques are copied as well because they don't have constant time random access.
    """

    if isinstance(it, MutableSequence) and not isinstance(it, deque):
        return it

    logger.debug("Copying %s into a temporary list", type(it).__name__)
    return list(it)


def resolve_strategy(strategy: StrategyT = None) -> PivotStrategy:
    if strategy is None:
        from .config import default_strategy

        return get_strategy(default_strategy())
    elif isinstance(strategy, str):
        return get_strategy(strategy)
    else:
        return strategy


def _select(it: Iterable[T], k: int, strategy: PivotStrategy, lt: Optional[LessThan]) -> T:
    seq = as_mutable(it)
    k = check_rank(len(seq), k)
    return select_in(seq, 0, len(seq), k, strategy, lt or natural_lt)


def select(seq: Iterable[T], k: int, lt: Optional[LessThan] = None) -> T:

    """Selects the `k`-th smallest element (0-based) of `seq` and returns it.
    Worst case linear time using the median of medians pivot strategy.

    If `seq` is a mutable sequence, it is partitioned in place: `seq[k]` holds the result,
    no element before it is greater and no element after it is less. Any other iterable is
    copied first and left unchanged.
    `lt` is a strict weak ordering `lt(a, b) -> bool`, the natural ordering is used if it's None.
    """

    return _select(seq, k, median_of_medians, lt)


def quick_select(seq: Iterable[T], k: int, lt: Optional[LessThan] = None) -> T:

    """Same as `select()`, but uses the cheap quick median pivot strategy.
    Usually about twice as fast, but quadratic in the worst case.
    """

    return _select(seq, k, quick_median, lt)


def kth_smallest(seq: Iterable[T], k: int, lt: Optional[LessThan] = None, strategy: StrategyT = None) -> T:

    """Same as `select()`, but with a selectable pivot strategy.
    `strategy` can be a pivot strategy, a registered strategy name or None to use the configured default.
    """

    return _select(seq, k, resolve_strategy(strategy), lt)


def kth_largest(seq: Iterable[T], k: int, lt: Optional[LessThan] = None, strategy: StrategyT = None) -> T:

    """Selects the `k`-th largest element (0-based) of `seq`. See `kth_smallest()`."""

    mseq = as_mutable(seq)
    n = len(mseq)
    k = check_rank(n, k)
    return select_in(mseq, 0, n, n - 1 - k, resolve_strategy(strategy), lt or natural_lt)


def median(seq: Iterable[T], lt: Optional[LessThan] = None, strategy: StrategyT = None) -> T:

    """Returns the lower median of `seq`, ie. the element of rank `(n - 1) // 2`."""

    mseq = as_mutable(seq)
    n = len(mseq)
    if n == 0:
        raise EmptySequence("median of an empty sequence is undefined", length=0)

    return select_in(mseq, 0, n, (n - 1) // 2, resolve_strategy(strategy), lt or natural_lt)
