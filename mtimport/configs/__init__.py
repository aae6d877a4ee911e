#!/usr/bin/env python3
"""
Import configuration modules.

This package contains the declarative tables used while parsing exports:
- header_fields: legacy header keys, markup values and timestamp formats
"""

from mtimport.configs.header_fields import (
    HEADER_FIELDS,
    MARKUP_VALUES,
    FieldKind,
    HeaderField,
    MarkupPolicy,
    lookup_field,
)

__all__ = [
    "HEADER_FIELDS",
    "MARKUP_VALUES",
    "FieldKind",
    "HeaderField",
    "MarkupPolicy",
    "lookup_field",
]
