from __future__ import generator_stop

from operator import lt as natural_lt
from typing import Optional, Sequence

from .typing import LessThan


def median_of_five(
    seq: Sequence, i1: int, i2: int, i3: int, i4: int, i5: int, lt: Optional[LessThan] = None
) -> int:

    """Returns the index of the median of the 5 elements of `seq` at the indices `i1` to `i5`.
    `seq` is not modified. At most 6 comparisons are used.

    The decision tree first drops an element which is known to be larger than two others (3 comparisons).
    Then it drops the maximum of the remaining four (2 comparisons). Of the 3 candidates left,
    two are already ordered, so the lesser of those can be ignored and one more comparison
    decides the median.
    The comments use <, but the actual relation is often <=.
    """

    lt = lt or natural_lt

    a1 = seq[i1]
    a2 = seq[i2]
    a3 = seq[i3]
    a4 = seq[i4]
    a5 = seq[i5]

    if lt(a1, a2):  # 1 < 2
        if lt(a3, a4):  # 1 < 2, 3 < 4
            if lt(a2, a4):  # drop 4
                if lt(a3, a5):  # 1 < 2, 3 < 5
                    if lt(a2, a5):  # drop 5
                        return i3 if lt(a2, a3) else i2
                    else:  # drop 2
                        return i5 if lt(a1, a5) else i1
                else:  # 1 < 2, 5 < 3
                    if lt(a2, a3):  # drop 3
                        return i5 if lt(a2, a5) else i2
                    else:  # drop 2
                        return i3 if lt(a1, a3) else i1
            else:  # drop 2
                if lt(a1, a5):  # 1 < 5, 3 < 4
                    if lt(a5, a4):  # drop 4
                        return i3 if lt(a5, a3) else i5
                    else:  # drop 5
                        return i4 if lt(a1, a4) else i1
                else:  # 5 < 1, 3 < 4
                    if lt(a1, a4):  # drop 4
                        return i3 if lt(a1, a3) else i1
                    else:  # drop 1
                        return i4 if lt(a5, a4) else i5
        else:  # 1 < 2, 4 < 3
            if lt(a2, a3):  # drop 3
                if lt(a4, a5):  # 1 < 2, 4 < 5
                    if lt(a2, a5):  # drop 5
                        return i4 if lt(a2, a4) else i2
                    else:  # drop 2
                        return i5 if lt(a1, a5) else i1
                else:  # 1 < 2, 5 < 4
                    if lt(a2, a4):  # drop 4
                        return i5 if lt(a2, a5) else i2
                    else:  # drop 2
                        return i4 if lt(a1, a4) else i1
            else:  # drop 2
                if lt(a1, a5):  # 1 < 5, 4 < 3
                    if lt(a5, a3):  # drop 3
                        return i4 if lt(a5, a4) else i5
                    else:  # drop 5
                        return i3 if lt(a1, a3) else i1
                else:  # 5 < 1, 4 < 3
                    if lt(a1, a3):  # drop 3
                        return i4 if lt(a1, a4) else i1
                    else:  # drop 1
                        return i3 if lt(a5, a3) else i5
    else:  # 2 < 1
        if lt(a3, a4):  # 2 < 1, 3 < 4
            if lt(a1, a4):  # drop 4
                if lt(a3, a5):  # 2 < 1, 3 < 5
                    if lt(a1, a5):  # drop 5
                        return i3 if lt(a1, a3) else i1
                    else:  # drop 1
                        return i5 if lt(a2, a5) else i2
                else:  # 2 < 1, 5 < 3
                    if lt(a1, a3):  # drop 3
                        return i5 if lt(a1, a5) else i1
                    else:  # drop 1
                        return i3 if lt(a2, a3) else i2
            else:  # drop 1
                if lt(a2, a5):  # 2 < 5, 3 < 4
                    if lt(a5, a4):  # drop 4
                        return i3 if lt(a5, a3) else i5
                    else:  # drop 5
                        return i4 if lt(a2, a4) else i2
                else:  # 5 < 2, 3 < 4
                    if lt(a2, a4):  # drop 4
                        return i3 if lt(a2, a3) else i2
                    else:  # drop 2
                        return i4 if lt(a5, a4) else i5
        else:  # 2 < 1, 4 < 3
            if lt(a1, a3):  # drop 3
                if lt(a4, a5):  # 2 < 1, 4 < 5
                    if lt(a1, a5):  # drop 5
                        return i4 if lt(a1, a4) else i1
                    else:  # drop 1
                        return i5 if lt(a2, a5) else i2
                else:  # 2 < 1, 5 < 4
                    if lt(a1, a4):  # drop 4
                        return i5 if lt(a1, a5) else i1
                    else:  # drop 1
                        return i4 if lt(a2, a4) else i2
            else:  # drop 1
                if lt(a2, a5):  # 2 < 5, 4 < 3
                    if lt(a5, a3):  # drop 3
                        return i4 if lt(a5, a4) else i5
                    else:  # drop 5
                        return i3 if lt(a2, a3) else i2
                else:  # 5 < 2, 4 < 3
                    if lt(a2, a3):  # drop 3
                        return i4 if lt(a2, a4) else i2
                    else:  # drop 2
                        return i3 if lt(a5, a3) else i5
