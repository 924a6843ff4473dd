import io
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from exactratio.__main__ import build_parser, main, run


def run_cli(*argv):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        code = main(list(argv))
    return code, buffer.getvalue().splitlines()


class CliTests(unittest.TestCase):
    def test_prints_exact_ratio(self):
        code, lines = run_cli("0.5", "-2")
        self.assertEqual(code, 0)
        self.assertEqual(lines, ["0.5 = 1/2", "-2 = -2/1"])

    def test_reduce_flag(self):
        _, lines = run_cli("--reduce", "1.5")
        self.assertEqual(lines, ["1.5 = 3/2"])

    def test_float_flag(self):
        _, lines = run_cli("--float", "0.1")
        self.assertEqual(lines, ["0.1 = 3602879701896397/36028797018963968 ~ 0.1"])

    def test_strict_rejects_infinity(self):
        with self.assertRaises(ValueError):
            run_cli("--strict", "inf")

    def test_strict_zero(self):
        _, lines = run_cli("--strict", "0")
        self.assertEqual(lines, ["0 = 0/1"])

    def test_invalid_literal(self):
        with self.assertRaises(ValueError):
            run_cli("one half")

    def test_negative_literal_after_separator(self):
        with self.assertLogs("exactratio.rational", level="WARNING"):
            _, lines = run_cli("--", "-inf")
        self.assertEqual(lines, [f"-inf = {-(2**1024)}/1"])

    def test_run_reports_errors_and_exits(self):
        stderr = io.StringIO()
        with mock.patch.object(sys, "argv", ["exactratio", "one half"]):
            with redirect_stderr(stderr), redirect_stdout(io.StringIO()):
                with self.assertRaises(SystemExit) as ctx:
                    run()
        self.assertEqual(ctx.exception.code, 1)
        self.assertEqual(stderr.getvalue(), "Error: Not a float literal: 'one half'\n")

    def test_verbosity_flags_are_exclusive(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["-v", "-q", "1.0"])


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
