"""
test_cursor.py
--------------
Unit tests for the export line cursor and section marker helpers.
"""
import io

import pytest

from mtimport.core.exceptions import ExportReadError
from mtimport.utils.cursor import (
    ENTRY_MARKER,
    SECTION_MARKER,
    LineCursor,
    is_blank,
    is_section_name,
)


class TestMarkers:
    """Test sentinel recognition."""

    def test_marker_lengths_differ(self):
        """Entry marker is the longer dash run."""
        assert SECTION_MARKER == "-----"
        assert ENTRY_MARKER == "--------"

    def test_blank_line(self):
        assert is_blank("")
        assert not is_blank(" ")

    def test_section_names(self):
        """Any non-blank, non-sentinel line names a section."""
        assert is_section_name("BODY:")
        assert is_section_name("whatever")
        assert not is_section_name("")
        assert not is_section_name(SECTION_MARKER)
        assert not is_section_name(ENTRY_MARKER)


class TestLineCursor:
    """Test LineCursor reading semantics."""

    def test_reads_lines_without_newlines(self):
        cursor = LineCursor(io.BytesIO(b"one\ntwo\n"))
        assert cursor.next_line() == "one"
        assert cursor.next_line() == "two"
        assert cursor.next_line() is None

    def test_strips_carriage_returns(self):
        cursor = LineCursor(io.BytesIO(b"one\r\ntwo\r\n"))
        assert list(cursor) == ["one", "two"]

    def test_last_line_without_newline(self):
        cursor = LineCursor(io.BytesIO(b"one\ntwo"))
        assert list(cursor) == ["one", "two"]

    def test_blank_lines_preserved(self):
        cursor = LineCursor(io.BytesIO(b"a\n\nb\n"))
        assert list(cursor) == ["a", "", "b"]

    def test_eof_is_sticky(self):
        """Once exhausted the cursor keeps reporting end of stream."""
        cursor = LineCursor(io.BytesIO(b"only\n"))
        assert cursor.next_line() == "only"
        assert not cursor.eof
        assert cursor.next_line() is None
        assert cursor.eof
        assert cursor.next_line() is None
        assert cursor.eof

    def test_line_numbers(self):
        cursor = LineCursor(io.BytesIO(b"a\nb\nc\n"))
        cursor.next_line()
        cursor.next_line()
        assert cursor.line_number == 2

    def test_text_streams_accepted(self):
        cursor = LineCursor(io.StringIO("café\nthé\n"))
        assert list(cursor) == ["café", "thé"]

    def test_decodes_utf8(self):
        cursor = LineCursor(io.BytesIO("naïve\n".encode("utf-8")))
        assert cursor.next_line() == "naïve"

    def test_invalid_utf8_kept_as_surrogates(self):
        """Undecodable bytes survive and re-encode to the same bytes."""
        cursor = LineCursor(io.BytesIO(b"ok\ncaf\xe9\n"))
        assert cursor.next_line() == "ok"
        line = cursor.next_line()
        assert line.encode("utf-8", errors="surrogateescape") == b"caf\xe9"
        assert cursor.undecodable_lines == [2]

    def test_valid_lines_not_recorded(self):
        cursor = LineCursor(io.BytesIO("naïve\n".encode("utf-8")))
        list(cursor)
        assert cursor.undecodable_lines == []

    def test_fix_encoding_reads_invalid_lines_as_cp1252(self):
        cursor = LineCursor(io.BytesIO(b"caf\xe9 \x93ok\x94\n"), fix_encoding=True)
        assert cursor.next_line() == "café “ok”"
        assert cursor.undecodable_lines == [1]

    def test_stream_failure_is_read_error(self):
        class BrokenStream:
            def readline(self):
                raise OSError("device gone")

        cursor = LineCursor(BrokenStream())
        with pytest.raises(ExportReadError, match="device gone"):
            cursor.next_line()

    def test_fix_encoding_repairs_mojibake(self):
        """ftfy repairs UTF-8 text that was decoded as Latin-1."""
        broken = "café".encode("utf-8").decode("latin-1")
        cursor = LineCursor(io.StringIO(broken + "\n"), fix_encoding=True)
        assert cursor.next_line() == "café"

    def test_fix_encoding_keeps_curly_quotes(self):
        cursor = LineCursor(io.StringIO("“quoted”\n"), fix_encoding=True)
        assert cursor.next_line() == "“quoted”"
