"""Test the command line"""

import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from unittest.mock import patch

from thompson.__main__ import main


def run(*argv):
    stdout, stderr = StringIO(), StringIO()
    with redirect_stdout(stdout), redirect_stderr(stderr):
        status = main(list(argv))
    return status, stdout.getvalue().splitlines(), stderr.getvalue()


class TestMain(unittest.TestCase):
    def test_match(self):
        status, lines, _ = run("ab", "ab", "a")
        self.assertEqual(status, 0)
        self.assertEqual(lines, ["ab\tmatch\t{3}", "a\tnomatch\t{1, 2}"])

    def test_no_match(self):
        status, lines, _ = run("ab", "b")
        self.assertEqual(status, 1)
        self.assertEqual(lines, ["b\tnomatch\t{}"])

    def test_quiet(self):
        status, lines, _ = run("-q", "a*", "aaa")
        self.assertEqual(status, 0)
        self.assertEqual(lines, [])

    def test_steps(self):
        status, lines, _ = run("-s", "ab", "ab")
        self.assertEqual(status, 0)
        self.assertEqual(lines, ["\t{0}", "a\t{1, 2}", "ab\t{3}", "ab\tmatch\t{3}"])

    def test_invalid_pattern(self):
        status, lines, error = run("*", "a")
        self.assertEqual(status, 2)
        self.assertEqual(lines, [])
        self.assertIn("requires 1 operand", error)

    def test_alphabet(self):
        status, _, error = run("-a", "ab", "abc", "abc")
        self.assertEqual(status, 2)
        self.assertIn("Unexpected symbol 'c'", error)

    def test_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False) as fd:
            fd.write("abb\nab\n")
        self.addCleanup(os.remove, fd.name)
        status, lines, _ = run("-f", fd.name, "(a|b)*abb")
        self.assertEqual(status, 0)
        self.assertEqual([line.split("\t")[:2] for line in lines],
                         [["abb", "match"], ["ab", "nomatch"]])

    def test_stdin(self):
        with patch("sys.stdin", StringIO("a\nb\n")):
            status, lines, _ = run("a")
        self.assertEqual(status, 0)
        self.assertEqual([line.split("\t")[1] for line in lines], ["match", "nomatch"])

    @patch("thompson.__main__.logging.basicConfig")
    def test_verbose(self, basic_config):
        status, lines, _ = run("-v", "ab", "ab")
        self.assertEqual(status, 0)
        self.assertEqual(lines[0], "ab.")
        self.assertIn("(2) b (3) -->", lines)
        basic_config.assert_called_once()
