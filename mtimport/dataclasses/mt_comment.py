#!/usr/bin/env python3
"""
mt_comment.py
-------------------

Defines the MtComment dataclass for reader comments attached to an entry.

A COMMENT section in the export reads:

    COMMENT:
    AUTHOR: Jane
    EMAIL: jane@example.com
    IP: 127.0.0.1
    URL: http://jane.example.com
    DATE: 01/03/2006 10:00:00 AM
    First paragraph of the comment.
    Second paragraph.
    -----

The five header lines come in that fixed order. Body lines are always
treated as plain text and wrapped one paragraph per line.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
from dataclasses import dataclass
from datetime import datetime
from html import escape
from typing import List

# ---- Local imports ----
from mtimport.configs.header_fields import COMMENT_DATE_FORMAT
from mtimport.core.exceptions import (
    CommentFieldError,
    DateParseError,
    UnterminatedSectionError,
)
from mtimport.utils.cursor import SECTION_MARKER, LineCursor, is_blank
from mtimport.utils.dates import parse_export_date


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MtComment:
    """
    One reader comment.

    Attributes:
        author (str): Display name.
        email (str): Author e-mail; parsed but never rendered.
        url (str): Author homepage, empty if none.
        date (datetime): When the comment was posted (UTC).
        content (str): Body already wrapped in ``<p>`` tags.
    """

    author: str
    email: str
    url: str
    date: datetime
    content: str

    # ---- Parsing ----
    @classmethod
    def from_cursor(cls, cursor: LineCursor) -> MtComment:
        """
        Parse one comment, starting right after the ``COMMENT:`` line.

        Consumes the section up to and including its section marker.

        Raises:
            CommentFieldError: If a header line is missing or out of order
            DateParseError: If the DATE line is not an export timestamp
            UnterminatedSectionError: If the stream ends inside the body
        """
        author = cls._read_field(cursor, "AUTHOR")
        email = cls._read_field(cursor, "EMAIL")
        cls._read_field(cursor, "IP")
        url = cls._read_field(cursor, "URL")
        raw_date = cls._read_field(cursor, "DATE")
        try:
            date = parse_export_date(raw_date)
        except ValueError as e:
            raise DateParseError(
                f"parsing comment date: {e}", line_number=cursor.line_number
            ) from e

        paragraphs: List[str] = []
        for line in cursor:
            if line == SECTION_MARKER:
                logger.debug(f"Comment by {author} ({len(paragraphs)} paragraphs)")
                return cls(
                    author=author,
                    email=email,
                    url=url,
                    date=date,
                    content="".join(paragraphs),
                )
            if not is_blank(line):
                paragraphs.append(f"<p>{line}</p>\n")

        raise UnterminatedSectionError(
            "unterminated comment body", line_number=cursor.line_number
        )

    @staticmethod
    def _read_field(cursor: LineCursor, label: str) -> str:
        """Read one ``LABEL: value`` comment header line and return the value."""
        line = cursor.next_line()
        if line is None:
            raise CommentFieldError(
                f"expecting {label}", line_number=cursor.line_number
            )
        key, sep, value = line.partition(":")
        if not sep:
            raise CommentFieldError(
                f"wrong format {label}: `{line}`", line_number=cursor.line_number
            )
        if key != label:
            raise CommentFieldError(
                f"expected {label}, got {key}", line_number=cursor.line_number
            )
        return value.strip()

    # ---- Serialization ----
    def to_html(self) -> str:
        """Render the comment as a ``<div class="comment">`` block."""
        if self.url:
            author = f'<a rel="nofollow" href="{escape(self.url)}">{self.author}</a>'
        else:
            author = self.author
        return (
            '<div class="comment">\n'
            '<div class="comment-header">\n'
            f'<span class="comment-author">{author}</span> '
            f'<span class="comment-date">{self.date.strftime(COMMENT_DATE_FORMAT)}</span>\n'
            "</div>\n"
            '<div class="comment-body">\n'
            f"{self.content}"
            "</div>\n"
            "</div>\n"
        )
