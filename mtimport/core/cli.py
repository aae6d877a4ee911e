#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and run statistics.

Functions:
    setup_logger: Initialize ImportLogger for CLI operations

Classes:
    ImportStats: Counters for one import run

Usage:
    from mtimport.core.cli import setup_logger, ImportStats

    logger = setup_logger(log_dir, "import")
    stats = ImportStats()
    stats.entries_written += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from mtimport.core.logging_manager import ImportLogger


def setup_logger(log_dir: Path, component_name: str) -> ImportLogger:
    """
    Setup logging for CLI operations.

    Creates ``log_dir/operations`` if needed and returns an ImportLogger
    writing there.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'import')

    Returns:
        Configured ImportLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return ImportLogger(operations_log_dir, component_name=component_name)


@dataclass
class ImportStats:
    """
    Statistics for one run over an export stream.

    Attributes:
        entries_written: Entry files written (or rendered, on a dry run)
        comments_imported: Comments rendered across all entries
        textile_converted: Entries whose body went through the converter
        errors: Fatal errors raised (0 or 1, the run stops on the first)
        start_time: Run start timestamp
    """
    entries_written: int = 0
    comments_imported: int = 0
    textile_converted: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        for name in ("entries_written", "comments_imported", "textile_converted", "errors"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def duration(self) -> float:
        """Elapsed seconds since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        """Get formatted summary string."""
        parts = [
            f"{self.entries_written} entries written",
            f"{self.comments_imported} comments",
        ]
        if self.textile_converted:
            parts.append(f"{self.textile_converted} textile converted")
        parts.append(f"{self.errors} errors")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for log records."""
        return {
            "entries_written": self.entries_written,
            "comments_imported": self.comments_imported,
            "textile_converted": self.textile_converted,
            "errors": self.errors,
            "duration": self.duration(),
        }
