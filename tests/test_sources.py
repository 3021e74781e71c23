"""Tests for logtidy.sources — file/stdin readers, dispatcher, and validation."""

import io

import pytest

from logtidy.sources import read_text, validate_submission
from logtidy.sources.file import read_file


# ---------------------------------------------------------------------------
# read_file
# ---------------------------------------------------------------------------
class TestReadFile:
    """Verify whole-file reads."""

    def test_reads_whole_file(self, tmp_path):
        f = tmp_path / "test.log"
        f.write_text("one\n\ntwo\n", encoding="utf-8")
        assert read_file(str(f)) == "one\n\ntwo\n"

    def test_nonexistent_file_raises(self, tmp_path):
        with pytest.raises(RuntimeError, match="File not found"):
            read_file(str(tmp_path / "missing.log"))

    def test_undecodable_bytes_dropped(self, tmp_path):
        f = tmp_path / "bin.log"
        f.write_bytes(b"ok\xff line")
        assert read_file(str(f)) == "ok line"


# ---------------------------------------------------------------------------
# read_text dispatcher
# ---------------------------------------------------------------------------
class TestReadText:
    """Verify routing between file and stdin sources."""

    def test_file_dispatches_correctly(self, tmp_path, make_args):
        f = tmp_path / "app.log"
        f.write_text("hello\n", encoding="utf-8")
        text, src_desc = read_text(make_args(file=str(f)))
        assert text == "hello\n"
        assert src_desc == f"file:{f}"

    def test_no_file_reads_stdin(self, make_args, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("piped\n"))
        text, src_desc = read_text(make_args())
        assert (text, src_desc) == ("piped\n", "stdin")

    def test_dash_reads_stdin(self, make_args, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("dash"))
        _, src_desc = read_text(make_args(file="-"))
        assert src_desc == "stdin"


# ---------------------------------------------------------------------------
# validate_submission
# ---------------------------------------------------------------------------
class TestValidateSubmission:
    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="Log content is required"):
            validate_submission("", max_chars=100)

    def test_whitespace_rejected(self):
        with pytest.raises(ValueError, match="Log content is required"):
            validate_submission(" \n\t", max_chars=100)

    def test_too_large_rejected(self):
        with pytest.raises(ValueError, match="too large"):
            validate_submission("x" * 11, max_chars=10)

    def test_zero_limit_disables_check(self):
        validate_submission("x" * 10_000, max_chars=0)

    def test_within_limit_accepted(self):
        validate_submission("error", max_chars=5)
