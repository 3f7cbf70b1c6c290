from argparse import ArgumentTypeError
from pathlib import Path

from kthselect.args import is_file, rank
from kthselect.test import MyTestCase, parametrize


class ArgsTest(MyTestCase):
    @parametrize(
        ("0", 0),
        ("17", 17),
        (" 3", 3),
    )
    def test_rank(self, s, truth):
        self.assertEqual(rank(s), truth)

    @parametrize(
        ("-1",),
        ("1.5",),
        ("a",),
    )
    def test_rank_invalid(self, s):
        with self.assertRaises(ArgumentTypeError):
            rank(s)

    def test_is_file(self):
        self.assertEqual(is_file(__file__), Path(__file__))
        with self.assertRaises(ArgumentTypeError):
            is_file(str(Path(__file__).parent))


if __name__ == "__main__":
    import unittest

    unittest.main()
