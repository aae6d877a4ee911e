#!/usr/bin/env python3
"""
mt_entry.py
-------------------

Defines the MtEntry dataclass representing one post parsed from a Movable
Type export stream, and its rendering to an HTML file with front matter.

An entry block reads:

    TITLE: Hi
    BASENAME: my_post
    DATE: 01/02/2006 3:04:05 PM
    CONVERT BREAKS: 1
    -----
    BODY:
    First line
    Second line
    -----
    COMMENT:
    ...
    -----
    --------

Parsing is split in two stages owned by the entry:
- parse_header: ``KEY: value`` lines up to the first section marker
- parse_sections: named sections up to the entry marker

This class is used by the mt2html pipeline; it only parses and renders,
writing files is left to the caller.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

# ---- Local imports ----
from mtimport.configs.header_fields import (
    DATE_FIELD,
    MARKUP_FIELD,
    MARKUP_VALUES,
    PERMALINK_FIELD,
    FieldKind,
    MarkupPolicy,
    lookup_field,
)
from mtimport.core.exceptions import (
    DateParseError,
    HeaderFormatError,
    MissingPermalinkError,
    UnknownHeaderKeyError,
    UnknownSectionError,
    UnsupportedMarkupError,
    UnterminatedSectionError,
)
from mtimport.core.paths import OUTPUT_EXTENSION
from mtimport.dataclasses.mt_comment import MtComment
from mtimport.utils.cursor import (
    ENTRY_MARKER,
    SECTION_MARKER,
    LineCursor,
    is_blank,
    is_section_name,
)
from mtimport.utils.dates import format_header_date, parse_export_date
from mtimport.utils.frontmatter import (
    DEFAULT_QUOTE_POLICY,
    QuotePolicy,
    render_front_matter,
)


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Sections -----
BODY_SECTIONS = frozenset({"BODY:", "EXTENDED BODY:"})
SKIPPED_SECTIONS = frozenset({"EXCERPT:", "KEYWORDS:", "PING:"})
COMMENT_SECTION = "COMMENT:"


def normalize_body_line(line: str, convert_breaks: bool) -> str:
    """
    Return the text a body line contributes to the entry content.

    With break conversion, plain lines become ``<p>`` paragraphs, lines
    already opening a paragraph pass through and blank lines vanish.
    Without it every line passes through verbatim.

    Examples:
        >>> normalize_body_line("hello", True)
        '<p>hello</p>\\n'
        >>> normalize_body_line("", True)
        ''
        >>> normalize_body_line("hello", False)
        'hello\\n'
    """
    if convert_breaks and not line.startswith(("<p>", "<p ")):
        if is_blank(line):
            return ""
        return f"<p>{line}</p>\n"
    return line + "\n"


# ----- Dataclass -----
@dataclass
class MtEntry:
    """
    One post from an export stream.

    Attributes:
        date (datetime): Entry timestamp (UTC); drives the filename.
        header (Dict[str, str]): Output field -> already quoted value.
        content (List[str]): Body chunks in input order.
        comments (List[MtComment]): Comments in input order.
        convert_breaks (bool): Wrap plain body lines in paragraphs.
        quote_policy (QuotePolicy): How simple header values are quoted.
    """

    # ---- Attributes ----
    date: datetime = field(default_factory=lambda: datetime(1, 1, 1, tzinfo=timezone.utc))
    header: Dict[str, str] = field(default_factory=dict)
    content: List[str] = field(default_factory=list)
    comments: List[MtComment] = field(default_factory=list)
    convert_breaks: bool = False
    quote_policy: QuotePolicy = DEFAULT_QUOTE_POLICY

    # ---- Public constructors ----
    @classmethod
    def from_cursor(
        cls,
        cursor: LineCursor,
        quote_policy: QuotePolicy = DEFAULT_QUOTE_POLICY,
    ) -> Optional[MtEntry]:
        """
        Parse the next entry from ``cursor``.

        Returns:
            The parsed entry, or None if the stream held no further entry

        Raises:
            EntryParseError: On any malformed input
        """
        entry = cls(quote_policy=quote_policy)
        if not entry.parse_header(cursor):
            return None
        entry.parse_sections(cursor)
        return entry

    @property
    def body(self) -> str:
        """Accumulated body text."""
        return "".join(self.content)

    # ---- Header ----
    def parse_header(self, cursor: LineCursor) -> bool:
        """
        Consume header lines up to the section marker.

        Returns:
            False if the stream ended before any header line, True otherwise

        Raises:
            UnterminatedSectionError: If the stream ends after header lines
            HeaderFormatError, UnknownHeaderKeyError, UnsupportedMarkupError,
            DateParseError: On malformed header lines
        """
        consumed = False
        while True:
            line = cursor.next_line()
            if line is None:
                if consumed:
                    raise UnterminatedSectionError(
                        "unterminated entry header", line_number=cursor.line_number
                    )
                return False
            if line == SECTION_MARKER:
                return True
            if is_blank(line):
                continue
            consumed = True
            self._parse_header_item(line, cursor.line_number)

    def _parse_header_item(self, line: str, line_number: int) -> None:
        key, sep, raw_value = line.partition(":")
        if not sep:
            raise HeaderFormatError(f"unexpected `{line}`", line_number=line_number)
        value = raw_value.strip()

        spec = lookup_field(key)
        if spec is None:
            raise UnknownHeaderKeyError(
                f"unknown header key `{key}`", line_number=line_number
            )

        if spec.kind is FieldKind.SIMPLE:
            self.header[spec.target] = self.quote_policy.quote(value)
        elif spec.kind is FieldKind.DATE:
            self._set_date(value, line_number)
        elif spec.kind is FieldKind.MARKUP:
            self._set_markup(value, line_number)
        # FieldKind.DROPPED carries no output representation

    def _set_date(self, value: str, line_number: int) -> None:
        try:
            self.date = parse_export_date(value)
        except ValueError as e:
            raise DateParseError(
                f"parsing entry date: {e}", line_number=line_number
            ) from e
        self.header[DATE_FIELD] = format_header_date(self.date)

    def _set_markup(self, value: str, line_number: int) -> None:
        policy = MARKUP_VALUES.get(value)
        if policy is None:
            raise UnsupportedMarkupError(
                f"unsupported markup {value}", line_number=line_number
            )
        if policy is MarkupPolicy.BREAKS_ON:
            self.convert_breaks = True
        elif policy is MarkupPolicy.BREAKS_OFF:
            self.convert_breaks = False
        else:
            self.header[MARKUP_FIELD] = policy.value

    # ---- Sections ----
    def parse_sections(self, cursor: LineCursor) -> None:
        """
        Dispatch named sections until the entry marker.

        Raises:
            UnterminatedSectionError: If the stream ends before the entry marker
            UnknownSectionError: On a section name with no handler
        """
        while True:
            name = self._next_section_name(cursor)
            if name is None:
                return
            if name in BODY_SECTIONS:
                self.parse_body(cursor)
            elif name in SKIPPED_SECTIONS:
                self._skip_section(cursor, name)
            elif name == COMMENT_SECTION:
                self.comments.append(MtComment.from_cursor(cursor))
            else:
                raise UnknownSectionError(
                    f"unknown section {name}", line_number=cursor.line_number
                )

    @staticmethod
    def _next_section_name(cursor: LineCursor) -> Optional[str]:
        """Next section name, or None at the entry marker."""
        for line in cursor:
            if line == ENTRY_MARKER:
                return None
            if is_section_name(line):
                return line
            if not is_blank(line):
                raise UnknownSectionError(
                    f"unexpected `{line}` where a section name was expected",
                    line_number=cursor.line_number,
                )
        raise UnterminatedSectionError(
            "unexpected end of file", line_number=cursor.line_number
        )

    def parse_body(self, cursor: LineCursor) -> None:
        """Accumulate a BODY or EXTENDED BODY section into ``content``."""
        for line in cursor:
            if line == SECTION_MARKER:
                return
            chunk = normalize_body_line(line, self.convert_breaks)
            if chunk:
                self.content.append(chunk)
        raise UnterminatedSectionError(
            "unterminated body", line_number=cursor.line_number
        )

    @staticmethod
    def _skip_section(cursor: LineCursor, name: str) -> None:
        for line in cursor:
            if line == SECTION_MARKER:
                logger.debug(f"Skipped section {name}")
                return
        raise UnterminatedSectionError(
            f"unexpected end of section {name}", line_number=cursor.line_number
        )

    # ---- Serialization ----
    @property
    def is_textile(self) -> bool:
        return self.header.get(MARKUP_FIELD) == MarkupPolicy.TEXTILE.value

    def permalink(self) -> str:
        """
        Unquoted permalink slug.

        Raises:
            MissingPermalinkError: If the entry had no BASENAME
        """
        quoted = self.header.get(PERMALINK_FIELD)
        if quoted is None:
            raise MissingPermalinkError("no permalink in entry")
        slug = self.quote_policy.unquote(quoted)
        if len(slug) >= 2 and slug.startswith('"') and slug.endswith('"'):
            slug = slug[1:-1]
        return slug

    def filename(self) -> str:
        """
        Output filename: ``YYYY-MM-DD-<permalink>.html``.

        Underscores in the permalink become hyphens.

        Raises:
            MissingPermalinkError: If the entry had no BASENAME
        """
        slug = self.permalink().replace("_", "-")
        return f"{self.date.date().isoformat()}-{slug}{OUTPUT_EXTENSION}"

    def to_html(self, converter: Optional[Callable[[str], str]] = None) -> str:
        """
        Render the entry file: front matter, body, then comments.

        The permalink is dropped from the header (it lives in the filename).
        Textile bodies are run through ``converter`` and lose their
        ``markup`` field, since the rendered body is HTML.

        Args:
            converter: Textile to HTML function; required for textile entries

        Raises:
            TextileConversionError: If the converter fails
            ValueError: If a textile entry is rendered without a converter
        """
        header = dict(self.header)
        header.pop(PERMALINK_FIELD, None)

        body = self.body
        if self.is_textile:
            if converter is None:
                raise ValueError("textile entry rendered without a converter")
            body = converter(body)
            del header[MARKUP_FIELD]
            logger.debug("Converted textile body")

        parts: List[str] = [render_front_matter(header), body]
        if self.comments:
            parts.append('\n\n<div class="comments">\n')
            parts.extend(comment.to_html() for comment in self.comments)
            parts.append("</div>\n")
        return "".join(parts)
