"""
Utilities package for mtimport.

- cursor: Line cursor and section markers for export streams
- dates: Export timestamp parsing and header formatting
- frontmatter: Quoting policies and front matter rendering
- textile: External textile to HTML converter

Import commonly-used utilities directly from this package:
    from mtimport.utils import LineCursor, render_front_matter
"""

from .cursor import (
    ENTRY_MARKER,
    SECTION_MARKER,
    LineCursor,
    is_blank,
    is_section_name,
)
from .dates import format_header_date, parse_export_date
from .frontmatter import (
    QUOTE_POLICIES,
    QuotePolicy,
    get_quote_policy,
    render_front_matter,
)
from .textile import convert_textile, make_converter

__all__ = [
    # Cursor
    "ENTRY_MARKER",
    "SECTION_MARKER",
    "LineCursor",
    "is_blank",
    "is_section_name",
    # Dates
    "format_header_date",
    "parse_export_date",
    # Front matter
    "QUOTE_POLICIES",
    "QuotePolicy",
    "get_quote_policy",
    "render_front_matter",
    # Textile
    "convert_textile",
    "make_converter",
]
