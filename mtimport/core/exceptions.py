#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the mtimport project.

Every failure while importing an export stream is fatal: the driver logs
the error and re-raises it, and the CLI turns it into a one-line diagnostic
with a nonzero exit status.

Exception Hierarchy:
    Exception (built-in)
    └── MtImportError - Base for all import errors
        ├── ExportReadError - Transport failure while reading the stream
        ├── EntryParseError - Malformed export input
        │   ├── HeaderFormatError - Header line without KEY: value shape
        │   ├── UnknownHeaderKeyError - Header key outside the field table
        │   ├── UnsupportedMarkupError - Unknown CONVERT BREAKS value
        │   ├── DateParseError - Timestamp not in the export pattern
        │   ├── CommentFieldError - Comment header out of order or missing
        │   ├── UnterminatedSectionError - Stream ended inside a block
        │   └── UnknownSectionError - Section name not recognized
        ├── MissingPermalinkError - Entry has no BASENAME
        ├── TextileConversionError - External converter failed
        └── ExportWriteError - Output file could not be written

Usage:
    from mtimport.core.exceptions import EntryParseError, MtImportError

    try:
        import_stream(stream, output_dir)
    except EntryParseError as e:
        print(f"Malformed export at line {e.line_number}: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional


class MtImportError(Exception):
    """
    Base exception for export import errors.

    Catch this to handle any failure raised while converting an export
    stream; catch a subclass for more granular handling.
    """

    pass


class ExportReadError(MtImportError):
    """
    Exception for transport-level read failures.

    Raised by the line cursor when the underlying stream fails, as opposed
    to a clean end of stream:
    - I/O errors from the input descriptor
    - Bytes that are not valid UTF-8

    Examples:
        >>> raise ExportReadError("Cannot decode line 42 as UTF-8")
    """

    pass


class EntryParseError(MtImportError):
    """
    Exception for malformed export input.

    Carries the position of the offending line so the diagnostic can point
    at it directly.

    Attributes:
        message: Error description
        line_number: 1-based line number in the stream, if known
        entry_index: 1-based index of the entry being parsed, if known

    Examples:
        >>> raise EntryParseError("unexpected `foo`", line_number=12)
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        entry_index: Optional[int] = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.entry_index = entry_index
        super().__init__(message)

    def __str__(self) -> str:
        location = []
        if self.entry_index is not None:
            location.append(f"entry {self.entry_index}")
        if self.line_number is not None:
            location.append(f"line {self.line_number}")
        if location:
            return f"{self.message} ({', '.join(location)})"
        return self.message


class HeaderFormatError(EntryParseError):
    """
    Exception for entry header lines without a colon.

    Examples:
        >>> raise HeaderFormatError("unexpected `no colon here`", line_number=3)
    """

    pass


class UnknownHeaderKeyError(EntryParseError):
    """
    Exception for header keys missing from the field table.

    Examples:
        >>> raise UnknownHeaderKeyError("unknown header key `MOOD`")
    """

    pass


class UnsupportedMarkupError(EntryParseError):
    """Exception for CONVERT BREAKS values with no known markup policy."""

    pass


class DateParseError(EntryParseError):
    """
    Exception for timestamps outside the ``MM/DD/YYYY H:MM:SS AM`` pattern.

    Raised for both entry DATE headers and comment DATE lines.
    """

    pass


class CommentFieldError(EntryParseError):
    """
    Exception for comment headers that break the fixed field order.

    Comment headers must read AUTHOR, EMAIL, IP, URL, DATE in that order;
    a missing line, a line without a colon or a different label all raise
    this error.

    Examples:
        >>> raise CommentFieldError("expected EMAIL, got URL")
    """

    pass


class UnterminatedSectionError(EntryParseError):
    """
    Exception for blocks cut short by the end of the stream.

    Raised when the stream ends inside an entry header, a body, a comment
    or a skipped section, or before the entry separator.
    """

    pass


class UnknownSectionError(EntryParseError):
    """Exception for section names the dispatcher does not handle."""

    pass


class MissingPermalinkError(MtImportError):
    """
    Exception for entries without a permalink.

    The output filename is derived from the permalink, so an entry without
    a BASENAME header cannot be written.
    """

    pass


class TextileConversionError(MtImportError):
    """
    Exception for failures of the external textile converter.

    Raised when the converter cannot be launched or exits with a nonzero
    status.

    Examples:
        >>> raise TextileConversionError("redcloth exited with status 1")
        >>> raise TextileConversionError("Cannot launch redcloth: not found")
    """

    pass


class ExportWriteError(MtImportError):
    """
    Exception for output file write failures.

    Examples:
        >>> raise ExportWriteError("Cannot write 2006-01-02-hi.html: disk full")
    """

    pass
