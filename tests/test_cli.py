"""
End-to-end tests for the command-line entry point.

Run with: python -m pytest tests/test_cli.py -v
"""

import io
import json
import logging
import os
import unittest
from contextlib import redirect_stderr, redirect_stdout

from placenta3d.cli import EXIT_INPUT_ERROR, main
from placenta3d.pipeline import analyze
from tests.test_pointio import TempDirTestCase


class TestMain(TempDirTestCase):
    """Tests for placenta3d.cli.main()."""

    def setUp(self):
        super().setUp()
        self.uterus = self.write("uterus.txt", "0.000, 0.000, 0.000\n10.000, 0.000, 0.000\n")
        self.placenta = self.write("placenta.txt", "1, 0, 0\n9, 0, 0\n9, 0, 0\n")

    def tearDown(self):
        logger = logging.getLogger("placenta3d")
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        super().tearDown()

    def run_main(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_prints_six_lines(self):
        code, out, err = self.run_main(self.placenta, self.uterus)
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [
            "Left: 33.333",
            "Right: 66.667",
            "Inferior: 0.000",
            "Superior: 100.000",
            "Anterior: 0.000",
            "Posterior: 100.000",
        ])
        self.assertEqual(err, "")

    def test_analyze_matches_cli(self):
        result = analyze(self.placenta, self.uterus)
        self.assertEqual(result.center.x, 5.0)
        self.assertEqual(result.counts.left, 1)
        self.assertEqual(result.counts.right, 2)

    def test_missing_file(self):
        missing = os.path.join(self.tmp, "nope.txt")
        code, out, err = self.run_main(missing, self.uterus)
        self.assertEqual(code, EXIT_INPUT_ERROR)
        self.assertEqual(out, "")
        self.assertIn(missing, err)
        self.assertNotIn("Traceback", err)

    def test_malformed_placenta(self):
        bad = self.write("bad.txt", "1, 0, 0\n9, 0\n")
        code, out, err = self.run_main(bad, self.uterus)
        self.assertEqual(code, EXIT_INPUT_ERROR)
        self.assertIn(":2:", err)

    def test_invalid_bytes_in_placenta(self):
        bad = os.path.join(self.tmp, "bin.txt")
        with open(bad, "wb") as f:
            f.write(b"1, 0, 0\n\xff\xfe, 0, 0\n")
        code, out, err = self.run_main(bad, self.uterus)
        self.assertEqual(code, EXIT_INPUT_ERROR)
        self.assertEqual(out, "")
        self.assertIn(":2:", err)
        self.assertNotIn("Traceback", err)

    def test_number_with_underscore(self):
        bad = self.write("under.txt", "1_000, 0, 0\n")
        code, _, err = self.run_main(bad, self.uterus)
        self.assertEqual(code, EXIT_INPUT_ERROR)
        self.assertIn("1_000", err)

    def test_empty_uterus(self):
        empty = self.write("empty.txt", "")
        code, out, err = self.run_main(self.placenta, empty)
        self.assertEqual(code, EXIT_INPUT_ERROR)
        self.assertIn("empty point cloud", err)

    def test_json_output(self):
        code, out, _ = self.run_main(self.placenta, self.uterus, "--json")
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["report"]["Left"], 33.333)
        self.assertEqual(data["report"]["Right"], 66.667)
        self.assertEqual(data["centroid"], [5.0, 0.0, 0.0])
        self.assertEqual(data["placenta_points"], 3)
        self.assertEqual(data["uterus_points"], 2)

    def test_columns_option(self):
        # x у третій колонці
        uterus = self.write("u2.txt", "0, 0, 0\n0, 0, 10\n")
        placenta = self.write("p2.txt", "0, 0, 1\n0, 0, 9\n0, 0, 9\n")
        code, out, _ = self.run_main(placenta, uterus, "--columns", "zyx")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines()[0], "Left: 33.333")

    def test_invalid_columns(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_main(self.placenta, self.uterus, "--columns", "xxy")
        self.assertEqual(ctx.exception.code, 2)

    def test_default_paths(self):
        cwd = os.getcwd()
        os.chdir(self.tmp)
        try:
            code, out, _ = self.run_main()
        finally:
            os.chdir(cwd)
        self.assertEqual(code, 0)
        self.assertEqual(len(out.splitlines()), 6)

    def test_log_file(self):
        log_path = os.path.join(self.tmp, "run.log")
        code, _, _ = self.run_main(self.placenta, self.uterus,
                                   "--log-level", "INFO", "--log-file", log_path)
        self.assertEqual(code, 0)
        with open(log_path, encoding="utf-8") as f:
            self.assertIn("points read", f.read())


if __name__ == '__main__':
    unittest.main()
