"""
dates.py
-------------------
Timestamp handling for Movable Type exports.

Export timestamps carry no zone (``01/02/2006 3:04:05 PM``) and are read
as UTC. The entry header renders them with an explicit ``+HH:MM`` offset.
"""
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime, timezone

# --- Local imports ---
from mtimport.configs.header_fields import EXPORT_DATE_FORMAT, HEADER_DATE_FORMAT


def parse_export_date(value: str) -> datetime:
    """
    Parse an export timestamp into an aware UTC datetime.

    Raises:
        ValueError: If ``value`` does not match the export pattern
    """
    return datetime.strptime(value, EXPORT_DATE_FORMAT).replace(tzinfo=timezone.utc)


def format_header_date(moment: datetime) -> str:
    """
    Format a datetime as ``YYYY-MM-DD HH:MM:SS +HH:MM``.

    Naive datetimes are rendered as UTC.

    Examples:
        >>> format_header_date(datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc))
        '2006-01-02 15:04:05 +00:00'
    """
    offset = moment.utcoffset()
    minutes = int(offset.total_seconds() // 60) if offset is not None else 0
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{moment.strftime(HEADER_DATE_FORMAT)} {sign}{hours:02d}:{minutes:02d}"
