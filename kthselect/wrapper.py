from __future__ import generator_stop

from typing import Generic, Iterable, Optional

from .selection import StrategyT, median, quick_select, select
from .typing import LessThan, T


class Selectable(Generic[T]):

    """Wraps a sequence or iterable to allow `Selectable(seq).select(k)`.
    Mutable sequences are still partitioned in place, other iterables are copied on every call.
    """

    def __init__(self, seq: Iterable[T], lt: Optional[LessThan] = None) -> None:
        self.seq = seq
        self.lt = lt

    def __repr__(self) -> str:
        return f"<Selectable {self.seq!r}>"

    def select(self, k: int) -> T:
        return select(self.seq, k, self.lt)

    def quick_select(self, k: int) -> T:
        return quick_select(self.seq, k, self.lt)

    def median(self, strategy: StrategyT = None) -> T:
        return median(self.seq, self.lt, strategy)
