from functools import wraps
from itertools import product
from operator import lt as natural_lt
from typing import Any, Callable, Iterable, Optional, Sequence
from unittest import TestCase

from .typing import LessThan


class MyTestCase(TestCase):
    def assertAllEqual(self, args: Iterable, msg: Optional[str] = None) -> None:
        it = iter(args)
        first = next(it)
        for second in it:
            self.assertEqual(first, second, msg)

    def assertUnorderedSeqEqual(self, first: Iterable, second: Iterable, msg: Optional[str] = None) -> None:
        first = sorted(first)
        second = sorted(second)
        self.assertEqual(first, second, msg)

    def assertPartitioned(
        self, seq: Sequence, k: int, lt: Optional[LessThan] = None, start: int = 0, end: Optional[int] = None
    ) -> None:

        """Asserts that no element of `seq[start:end]` before `k` is greater than `seq[k]`
        and no element after `k` is less.
        """

        lt = lt or natural_lt
        if end is None:
            end = len(seq)

        pivot = seq[k]
        for i in range(start, k):
            self.assertFalse(lt(pivot, seq[i]), f"{seq[i]!r} at index {i} is greater than {pivot!r} at {k}")
        for i in range(k + 1, end):
            self.assertFalse(lt(seq[i], pivot), f"{seq[i]!r} at index {i} is less than {pivot!r} at {k}")


def random_arguments(n: int, *funcs: Callable[[], Any]) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for i in range(n):
                with self.subTest(str(i)):
                    if func(self, *(f() for f in funcs)) is not None:
                        raise AssertionError

        return inner

    return decorator


# also called: parameterize
def parametrize(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in args_list:
                with self.subTest(str(args)[:1000]):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator


def parametrize_product(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in product(*args_list):
                with self.subTest(str(args)):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator


def counting(lt: LessThan = natural_lt) -> Callable[[Any, Any], bool]:

    """Wraps `lt` so the number of comparisons is available as `.calls`."""

    def inner(a, b):
        inner.calls += 1  # type: ignore[attr-defined]
        return lt(a, b)

    inner.calls = 0  # type: ignore[attr-defined]
    return inner
