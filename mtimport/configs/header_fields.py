#!/usr/bin/env python3
"""
header_fields.py
----------------

Entry header field table for Movable Type exports.

Each legacy ``KEY`` maps to a HeaderField tagged with how the parser
handles it:

- SIMPLE: value stored quoted under ``target``
- DROPPED: recognized, no output representation
- DATE: parsed timestamp, drives the filename and the ``date`` field
- MARKUP: CONVERT BREAKS, selects break conversion or a markup dialect

The table is built once at import and exposed read-only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class FieldKind(Enum):
    SIMPLE = "simple"
    DROPPED = "dropped"
    DATE = "date"
    MARKUP = "markup"


@dataclass(frozen=True)
class HeaderField:
    kind: FieldKind
    target: str = ""


HEADER_FIELDS: Mapping[str, HeaderField] = MappingProxyType(
    {
        "AUTHOR": HeaderField(FieldKind.SIMPLE, "author"),
        "TITLE": HeaderField(FieldKind.SIMPLE, "title"),
        "BASENAME": HeaderField(FieldKind.SIMPLE, "permalink"),
        "STATUS": HeaderField(FieldKind.SIMPLE, "status"),
        "ALLOW COMMENTS": HeaderField(FieldKind.DROPPED),
        "ALLOW PINGS": HeaderField(FieldKind.DROPPED),
        "PRIMARY CATEGORY": HeaderField(FieldKind.SIMPLE, "primary_category"),
        "CATEGORY": HeaderField(FieldKind.SIMPLE, "category"),
        "TAGS": HeaderField(FieldKind.SIMPLE, "tags"),
        "DATE": HeaderField(FieldKind.DATE, "date"),
        "CONVERT BREAKS": HeaderField(FieldKind.MARKUP, "markup"),
    }
)

PERMALINK_FIELD = "permalink"
DATE_FIELD = "date"
MARKUP_FIELD = "markup"

# ----- Timestamps -----
# 01/02/2006 3:04:05 PM
EXPORT_DATE_FORMAT = "%m/%d/%Y %I:%M:%S %p"
HEADER_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
COMMENT_DATE_FORMAT = "%Y-%m-%d %H:%M"


# ----- CONVERT BREAKS values -----
class MarkupPolicy(Enum):
    MARKDOWN = "markdown"
    TEXTILE = "textile"
    BREAKS_ON = "breaks_on"
    BREAKS_OFF = "breaks_off"


MARKUP_VALUES: Mapping[str, MarkupPolicy] = MappingProxyType(
    {
        "markdown": MarkupPolicy.MARKDOWN,
        "markdown_with_smartypants": MarkupPolicy.MARKDOWN,
        "1": MarkupPolicy.BREAKS_ON,
        "__default__": MarkupPolicy.BREAKS_ON,
        "0": MarkupPolicy.BREAKS_OFF,
        "textile": MarkupPolicy.TEXTILE,
        "textile_2": MarkupPolicy.TEXTILE,
    }
)


def lookup_field(key: str) -> Optional[HeaderField]:
    """Return the HeaderField for a legacy key, or None if unknown."""
    return HEADER_FIELDS.get(key)
