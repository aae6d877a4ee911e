"""
cursor.py
-------------------
Line-level access to a Movable Type export stream.

The export has no grammar beyond a few sentinel lines:

    -----       end of a section, or of the entry header block
    --------    end of a whole entry
    (blank)     ignored in the header block and in paragraph bodies

Every other non-blank line met where a section is expected is a section
name (``BODY:``, ``COMMENT:``...), matched case-sensitively with its colon.

Intended to be used by the MtEntry and MtComment parsers.
"""
from __future__ import annotations

# --- Standard library imports ---
import logging
from typing import IO, Iterator, List, Optional, Union

# --- Third-party library imports ---
from ftfy import fix_text  # type: ignore

# --- Local imports ---
from mtimport.core.exceptions import ExportReadError


logger = logging.getLogger(__name__)


# ----- Section markers -----
SECTION_MARKER = "-----"
ENTRY_MARKER = "--------"


def is_blank(line: str) -> bool:
    """True for an empty line (whitespace is content in the export)."""
    return line == ""


def is_section_name(line: str) -> bool:
    """True for a line that names a section rather than delimiting one."""
    return not is_blank(line) and line not in (SECTION_MARKER, ENTRY_MARKER)


# ----- Cursor -----
class LineCursor:
    """
    Sequential reader over the lines of an export stream.

    Accepts binary streams (decoded as UTF-8) or text streams. Bytes that
    are not valid UTF-8 are kept as surrogate escapes, so writing the text
    back with ``errors="surrogateescape"`` reproduces them unchanged. Trailing
    ``\\n`` and ``\\r\\n`` are stripped from every line. Once the stream is
    exhausted ``eof`` is set and stays set.

    Attributes:
        line_number: Number of lines consumed so far (1-based position of
            the last line returned)
        eof: True once the stream has been exhausted
        undecodable_lines: Numbers of the lines holding invalid UTF-8
    """

    def __init__(self, stream: IO, fix_encoding: bool = False) -> None:
        self._stream = stream
        self._fix_encoding = fix_encoding
        self.line_number = 0
        self.eof = False
        self.undecodable_lines: List[int] = []

    def next_line(self) -> Optional[str]:
        """
        Return the next line, or None at end of stream.

        Raises:
            ExportReadError: If the stream fails
        """
        if self.eof:
            return None

        try:
            raw: Union[bytes, str] = self._stream.readline()
        except OSError as e:
            raise ExportReadError(
                f"Cannot read line {self.line_number + 1}: {e}"
            ) from e

        if not raw:
            self.eof = True
            logger.debug(f"End of stream after {self.line_number} lines")
            return None

        self.line_number += 1

        if isinstance(raw, bytes):
            line = self._decode(raw)
        else:
            line = raw

        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]

        if self._fix_encoding:
            line = fix_text(line, uncurl_quotes=False)

        return line

    def _decode(self, raw: bytes) -> str:
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            self.undecodable_lines.append(self.line_number)
            logger.debug(f"Line {self.line_number} is not valid UTF-8")

        # ftfy repairs from cp1252 text; surrogates would defeat it
        if self._fix_encoding:
            return raw.decode("cp1252", errors="replace")
        return raw.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        """Yield lines until the end of the stream."""
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line
