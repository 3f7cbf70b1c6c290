from __future__ import generator_stop

import logging
from typing import Dict, MutableSequence

from .exceptions import UnknownStrategy
from .mo5 import median_of_five
from .typing import LessThan, PivotStrategy

logger = logging.getLogger(__name__)

GROUP_SIZE = 5


def quick_median(seq: MutableSequence, l: int, r: int, lt: LessThan) -> int:

    """Cheap pivot: the median of five evenly spaced samples of `seq[l:r]`.
    Doesn't guarantee balanced partitions.
    """

    length = r - l
    if length < GROUP_SIZE:
        return l + length // 2

    s = length // GROUP_SIZE
    return median_of_five(seq, l, l + s, l + 2 * s, l + 3 * s, l + 4 * s, lt)


def collect_medians(seq: MutableSequence, l: int, r: int, lt: LessThan) -> int:

    """Finds the median of every full group of 5 elements in `seq[l:r]` and moves it to the front.
    Returns the index of the first non-median, so the medians are in `seq[l:e]`.
    A trailing group of less than 5 elements is ignored.
    """

    e = l
    for i in range(l, r - GROUP_SIZE + 1, GROUP_SIZE):
        m = median_of_five(seq, i, i + 1, i + 2, i + 3, i + 4, lt)
        seq[m], seq[e] = seq[e], seq[m]
        e += 1
    return e


def median_of_medians(seq: MutableSequence, l: int, r: int, lt: LessThan) -> int:

    """Returns the index of an approximate median of `seq[l:r]`, with the guarantee that
    about 3/10 of the range lie on either side of it.
    """

    from .selection import select_in

    e = collect_medians(seq, l, r, lt)
    if e <= l + 1:
        return l

    k = (l + e) // 2
    select_in(seq, l, e, k, median_of_medians, lt)
    return k


STRATEGIES: Dict[str, PivotStrategy] = {
    "median_of_medians": median_of_medians,
    "quick": quick_median,
}


def get_strategy(name: str) -> PivotStrategy:
    try:
        strategy = STRATEGIES[name]
    except KeyError:
        raise UnknownStrategy(f"Unknown pivot strategy: {name}. Must be one of {', '.join(STRATEGIES)}") from None

    logger.debug("Using pivot strategy %s", name)
    return strategy
