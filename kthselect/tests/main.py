import os.path
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from tempfile import TemporaryDirectory
from unittest.mock import patch

from kthselect.__main__ import main
from kthselect.test import MyTestCase, parametrize


class MainTest(MyTestCase):
    def _run(self, *argv):
        out = StringIO()
        with redirect_stdout(out), patch("kthselect.config.default_strategy", return_value="median_of_medians"):
            self.assertEqual(main(list(argv)), 0)
        return out.getvalue().strip()

    @parametrize(
        (("3", "5", "3", "8", "1", "9", "2", "7"), "5"),
        (("0", "5", "3", "8", "1", "9", "2", "7", "--largest"), "9"),
        (("1", "5", "3", "8", "--strategy", "quick"), "5"),
        (("1", "0.5", "2.5", "-1", "--float"), "0.5"),
        (("0", "4"), "4"),
    )
    def test_values(self, argv, truth):
        self.assertEqual(self._run(*argv), truth)

    def test_file(self):
        with TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "values.txt")
            with open(path, "w", encoding="utf-8") as fw:
                fw.write("5\n3\n\n8\n1\n")
            self.assertEqual(self._run("0", "--file", path), "1")
            self.assertEqual(self._run("4", "0", "--file", path), "8")

    @parametrize(
        ("5", "1", "2"),
        ("0",),
        ("-1", "1"),
        ("0", "a"),
        ("0", "1", "--strategy", "sort"),
    )
    def test_errors(self, *argv):
        with redirect_stderr(StringIO()):
            with self.assertRaises(SystemExit) as cm:
                main(list(argv))
        self.assertEqual(cm.exception.code, 2)


if __name__ == "__main__":
    import unittest

    unittest.main()
