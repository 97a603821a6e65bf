"""
Unit tests for the line file (csv_cursor.lines).

Tests line reading, end-of-file handling, writing, read/write mode
switching, and context-manager cleanup using pytest's tmp_path fixture.
"""

from __future__ import annotations

import pytest

from csv_cursor.exceptions import InputExhaustedError
from csv_cursor.lines import LineFile


class TestReading:
    """Tests for has_line() / read_line() / iteration."""

    def test_reads_lines_in_order(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("a,b\n1,2\n", encoding="utf-8")
        with LineFile(path) as source:
            assert source.read_line() == "a,b"
            assert source.read_line() == "1,2"
            assert not source.has_line()

    def test_has_line_does_not_consume(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("only\n", encoding="utf-8")
        with LineFile(path) as source:
            assert source.has_line()
            assert source.has_line()
            assert source.read_line() == "only"

    def test_last_line_without_newline(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("a\nb", encoding="utf-8")
        with LineFile(path) as source:
            assert list(source) == ["a", "b"]

    def test_crlf_stripped(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_bytes(b"a,b\r\n1,2\r\n")
        with LineFile(path) as source:
            assert list(source) == ["a,b", "1,2"]

    def test_bom_stripped(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("id,name\n", encoding="utf-8-sig")
        with LineFile(path) as source:
            assert source.read_line() == "id,name"

    def test_blank_lines_are_returned(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("a\n\nb\n", encoding="utf-8")
        with LineFile(path) as source:
            assert list(source) == ["a", "", "b"]

    def test_read_past_end_raises(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("", encoding="utf-8")
        with LineFile(path) as source:
            assert not source.has_line()
            with pytest.raises(InputExhaustedError, match="No more lines"):
                source.read_line()

    def test_input_exhausted_is_eof_error(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("", encoding="utf-8")
        with LineFile(path) as source:
            with pytest.raises(EOFError):
                source.read_line()

    def test_missing_file(self, tmp_path):
        source = LineFile(tmp_path / "nope.csv")
        with pytest.raises(FileNotFoundError, match="nope.csv cannot be found"):
            source.has_line()


class TestWriting:
    """Tests for write() / write_line()."""

    def test_write_line(self, tmp_path):
        path = tmp_path / "out.csv"
        with LineFile(path) as sink:
            sink.write_line("a,b")
            sink.write("1,")
            sink.write_line("2")
        assert path.read_text(encoding="utf-8") == "a,b\n1,2\n"

    def test_write_creates_file(self, tmp_path):
        path = tmp_path / "new.csv"
        with LineFile(path) as sink:
            sink.write("x")
        assert path.exists()

    def test_write_is_flushed_immediately(self, tmp_path):
        path = tmp_path / "out.csv"
        sink = LineFile(path)
        sink.write_line("row")
        assert path.read_text(encoding="utf-8") == "row\n"
        sink.close()


class TestModeSwitching:
    """Tests for switching between read and write modes."""

    def test_write_then_read(self, tmp_path):
        path = tmp_path / "rw.csv"
        with LineFile(path) as f:
            f.write_line("first")
            f.write_line("second")
            assert list(f) == ["first", "second"]

    def test_entering_write_truncates(self, tmp_path):
        path = tmp_path / "rw.csv"
        path.write_text("old1\nold2\n", encoding="utf-8")
        with LineFile(path) as f:
            assert f.read_line() == "old1"
            f.write_line("new")
            assert list(f) == ["new"]

    def test_read_restarts_after_close(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("a\nb\n", encoding="utf-8")
        f = LineFile(path)
        assert f.read_line() == "a"
        f.close()
        assert f.read_line() == "a"
        f.close()

    def test_close_is_idempotent(self, tmp_path):
        f = LineFile(tmp_path / "x.csv")
        f.close()
        f.close()
