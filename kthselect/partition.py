from __future__ import generator_stop

from typing import MutableSequence

from .typing import LessThan


def swap(seq: MutableSequence, i: int, j: int) -> None:
    seq[i], seq[j] = seq[j], seq[i]


def split(seq: MutableSequence, start: int, end: int, p: int, lt: LessThan) -> int:

    """Partitions `seq[start:end]` in place around the pivot `seq[p]` and returns its new index `m`.
    Afterwards no element before `m` is greater than the pivot and no element after `m` is less.

    Elements equal to the pivot are sent to the left if they are found at an index below `p`
    and to the right otherwise. So every element belongs to exactly one side, which makes
    both scans terminate and splits runs of duplicates close to `p`.
    """

    pivot = seq[p]
    swap(seq, start, p)

    i = start + 1
    j = end - 1

    while True:
        while i <= j and (lt(seq[i], pivot) or (not lt(pivot, seq[i]) and i < p)):
            i += 1
        while i <= j and (lt(pivot, seq[j]) or (not lt(seq[j], pivot) and j >= p)):
            j -= 1
        if i >= j:
            break
        # seq[i] belongs right and seq[j] belongs left, both still do after the swap since i < j
        swap(seq, i, j)
        i += 1
        j -= 1

    swap(seq, start, j)
    return j
