from itertools import product
from operator import lt
from random import Random

from hypothesis import given, strategies

from kthselect.partition import split, swap
from kthselect.test import MyTestCase, parametrize


class PartitionTest(MyTestCase):
    def _check_split(self, seq, start, end, p):
        before = list(seq)
        pivot = seq[p]

        m = split(seq, start, end, p, lt)

        self.assertIn(m, range(start, end))
        self.assertEqual(seq[m], pivot)
        self.assertPartitioned(seq, m, start=start, end=end)
        self.assertUnorderedSeqEqual(before[start:end], seq[start:end])
        self.assertEqual(before[:start], seq[:start])
        self.assertEqual(before[end:], seq[end:])
        return m

    def test_swap(self):
        seq = [1, 2, 3]
        swap(seq, 0, 2)
        self.assertEqual(seq, [3, 2, 1])
        swap(seq, 1, 1)
        self.assertEqual(seq, [3, 2, 1])

    @parametrize(
        ([5, 3, 8, 1, 9, 2, 7], 0, 3),
        ([5, 3, 8, 1, 9, 2, 7], 6, 4),
        ([9, 1, 8, 2, 5], 4, 2),
        ([9, 1, 5, 2], 3, 1),
        ([1], 0, 0),
        ([2, 1], 1, 0),
        ([2, 1], 0, 1),
        ([1, 2, 3, 4, 5], 4, 4),
        ([5, 4, 3, 2, 1], 4, 0),
    )
    def test_split(self, seq, p, truth):
        m = self._check_split(seq, 0, len(seq), p)
        self.assertEqual(m, truth)

    def test_every_pivot(self):
        rnd = Random(0)
        for n in range(1, 30):
            seq = list(range(n))
            rnd.shuffle(seq)
            for p in range(n):
                with self.subTest(n=n, p=p):
                    self._check_split(list(seq), 0, n, p)

    def test_subrange(self):
        seq = [7, 7, 4, 9, 1, 6, 3, 0, 0]
        m = self._check_split(seq, 2, 7, 4)
        self.assertEqual(m, 2)
        self.assertEqual(seq[:2], [7, 7])
        self.assertEqual(seq[7:], [0, 0])

    def test_many_duplicates(self):
        for values in product(range(3), repeat=6):
            for p in range(6):
                with self.subTest(values=values, p=p):
                    self._check_split(list(values), 0, 6, p)

    def test_all_equal(self):
        for n in range(1, 40):
            for p in range(n):
                with self.subTest(n=n, p=p):
                    m = self._check_split([1] * n, 0, n, p)
                    self.assertEqual(m, max(p - 1, 0))

    def test_all_equal_subrange(self):
        seq = [0] * 3 + [1] * 10 + [2] * 3
        m = self._check_split(seq, 3, 13, 8)
        self.assertEqual(m, 7)

    def test_custom_order(self):
        seq = [(2, "a"), (1, "b"), (2, "c"), (3, "d"), (2, "e"), (0, "f")]
        m = split(seq, 0, len(seq), 2, lambda a, b: a[0] < b[0])
        self.assertEqual(seq[m][0], 2)
        self.assertTrue(all(x[0] <= 2 for x in seq[:m]))
        self.assertTrue(all(x[0] >= 2 for x in seq[m + 1 :]))

    @given(strategies.lists(strategies.integers(-5, 5), min_size=1), strategies.integers(min_value=0))
    def test_random(self, seq, p):
        p = p % len(seq)
        self._check_split(seq, 0, len(seq), p)


if __name__ == "__main__":
    import unittest

    unittest.main()
