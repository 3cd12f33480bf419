import pathlib
import sys
import tempfile
import unittest

import numpy as np

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from csvresample.config.runtime import ResamplerConfig  # noqa: E402
from csvresample.dataio.log_loader import load_csv, parse_line, parse_lines  # noqa: E402
from csvresample.errors import (  # noqa: E402
    FileOpenError,
    ParseError,
    SchemaError,
    TokenParseError,
)


class LogLoaderTest(unittest.TestCase):
    def test_load_csv(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "input.csv"
            path.write_text("0,1,2\n0.5,3,4\n1,5,6\n", encoding="utf-8")

            data = load_csv(path)

            np.testing.assert_array_equal(
                data.values, np.array([[0, 1, 2], [0.5, 3, 4], [1, 5, 6]])
            )
            self.assertEqual(data.column_count, 3)
            self.assertEqual(data.channel_count, 2)

    def test_load_csv_accepts_trailing_delimiter(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "trailing.csv"
            path.write_text("0,1,\n1,2,\n", encoding="utf-8")

            data = load_csv(path)

            np.testing.assert_array_equal(data.values, np.array([[0, 1], [1, 2]]))

    def test_load_csv_handles_crlf(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "crlf.csv"
            path.write_bytes(b"0,1\r\n1,2\r\n")

            data = load_csv(path)

            np.testing.assert_array_equal(data.values, np.array([[0, 1], [1, 2]]))

    def test_empty_file_gives_empty_dataset(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "empty.csv"
            path.write_text("", encoding="utf-8")

            data = load_csv(path)

            self.assertTrue(data.is_empty)
            self.assertEqual(len(data), 0)

    def test_missing_file_raises_file_open_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "missing.csv"
            with self.assertRaises(FileOpenError) as ctx:
                load_csv(path)
            self.assertIn("missing.csv", str(ctx.exception))
            self.assertIn("for input", str(ctx.exception))


def test_parse_line_reports_token_and_line() -> None:
    try:
        parse_line("1,abc,3", 7)
    except TokenParseError as exc:
        assert exc.token == "abc"
        assert exc.line_number == 7
        assert "'abc'" in str(exc)
        assert "line 7" in str(exc)
    else:
        raise AssertionError("expected TokenParseError")


def test_parse_error_alias() -> None:
    assert ParseError is TokenParseError


def test_parse_line_rejects_empty_inner_token() -> None:
    try:
        parse_line("1,,3", 1)
    except TokenParseError as exc:
        assert exc.token == ""
    else:
        raise AssertionError("expected TokenParseError")


def test_parse_line_allows_whitespace_and_exponents() -> None:
    assert parse_line(" 1.5 , 2e-3,-4\n", 1) == [1.5, 0.002, -4.0]


def test_schema_error_cites_line_three() -> None:
    lines = ["0,1,2", "1,2,3", "2,3", "3,4,5"]
    try:
        parse_lines(lines)
    except SchemaError as exc:
        assert exc.line_number == 3
        assert exc.found == 2
        assert exc.expected == 3
        assert str(exc) == "On line 3, found 2 columns, expected 3"
    else:
        raise AssertionError("expected SchemaError")


def test_blank_lines_skipped_but_counted() -> None:
    lines = ["0,1", "", "1,2", "   ", "2"]
    try:
        parse_lines(lines)
    except SchemaError as exc:
        assert exc.line_number == 5
    else:
        raise AssertionError("expected SchemaError")

    data = parse_lines(["0,1", "", "1,2", ""])
    np.testing.assert_array_equal(data.values, np.array([[0, 1], [1, 2]]))


def test_blank_lines_rejected_when_not_skipped() -> None:
    cfg = ResamplerConfig(skip_blank_lines=False)
    try:
        parse_lines(["0,1", "", "1,2"], config=cfg)
    except TokenParseError as exc:
        assert exc.line_number == 2
    else:
        raise AssertionError("expected TokenParseError")


def test_custom_delimiter() -> None:
    cfg = ResamplerConfig(delimiter=";")
    data = parse_lines(["0;1;", "1;3;"], config=cfg)
    np.testing.assert_array_equal(data.values, np.array([[0, 1], [1, 3]]))


if __name__ == "__main__":
    unittest.main()
