from __future__ import generator_stop


class RankOutOfRange(IndexError):
    """Raised when the requested rank `k` doesn't address an element of the sequence.
    Similar to the IndexError raised by `seq[k]`, but negative ranks are never wrapped around.
    """

    def __init__(self, *args, rank=None, length=None):
        super().__init__(*args)
        self.rank = rank
        self.length = length


class EmptySequence(RankOutOfRange):
    """Raised when selecting from a sequence without elements. There is no valid rank."""


class UnknownStrategy(ValueError):
    """Raised when a pivot strategy is requested by a name which is not registered."""
