#!/usr/bin/env python3
"""
mt2html.py
-------------------
Convert a Movable Type export stream into one HTML file per entry.

Each entry becomes ``<output_dir>/YYYY-MM-DD-<permalink>.html`` holding
sorted front matter, the (possibly converted) body and a comments block.

The run is all-or-nothing per error: the first malformed entry, converter
failure or write failure stops the import. Files written for earlier
entries are left in place.

Programmatic API:
    from mtimport.pipeline.mt2html import import_stream, import_file
    stats = import_stream(sys.stdin.buffer, output_dir, logger=logger)
    stats = import_file(Path("export.txt"), output_dir, logger=logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import IO, Callable, Optional

# --- Local imports ---
from mtimport.core.cli import ImportStats
from mtimport.core.exceptions import EntryParseError, ExportWriteError, MtImportError
from mtimport.core.logging_manager import ImportLogger, safe_logger
from mtimport.dataclasses.mt_entry import MtEntry
from mtimport.utils.cursor import LineCursor
from mtimport.utils.frontmatter import DEFAULT_QUOTE_POLICY, QuotePolicy
from mtimport.utils.textile import make_converter


Converter = Callable[[str], str]


# --- Output ---
def write_entry(output_dir: Path, filename: str, content: str) -> Path:
    """
    Write one rendered entry to ``output_dir/filename``.

    Existing files are overwritten. Bytes read from the export that were
    not valid UTF-8 are written back unchanged.

    Raises:
        ExportWriteError: If the file cannot be written
    """
    output_path = output_dir / filename
    try:
        output_path.write_text(
            content, encoding="utf-8", errors="surrogateescape"
        )
    except OSError as e:
        raise ExportWriteError(f"Cannot write {output_path}: {e}") from e
    return output_path


def process_entry(
    entry: MtEntry,
    output_dir: Path,
    converter: Converter,
    stats: ImportStats,
    dry_run: bool = False,
    logger: Optional[ImportLogger] = None,
) -> str:
    """
    Render one parsed entry and hand it to the file sink.

    Returns:
        The entry's output filename

    Raises:
        MissingPermalinkError: If the entry has no permalink
        TextileConversionError: If the textile converter fails
        ExportWriteError: If the file cannot be written
    """
    filename = entry.filename()
    content = entry.to_html(converter)
    if entry.is_textile:
        stats.textile_converted += 1
        safe_logger(logger).log_debug(f"Converted textile body for {filename}")

    if dry_run:
        safe_logger(logger).log_debug(f"Would write {filename}")
    else:
        write_entry(output_dir, filename, content)

    stats.entries_written += 1
    stats.comments_imported += len(entry.comments)
    safe_logger(logger).log_operation(
        "entry_written",
        {"file": filename, "comments": len(entry.comments), "dry_run": dry_run},
    )
    return filename


def import_stream(
    stream: IO,
    output_dir: Path,
    converter: Optional[Converter] = None,
    quote_policy: QuotePolicy = DEFAULT_QUOTE_POLICY,
    fix_encoding: bool = False,
    dry_run: bool = False,
    logger: Optional[ImportLogger] = None,
) -> ImportStats:
    """
    Import every entry of an export stream.

    Parses one entry at a time and writes it before reading the next, until
    the stream ends cleanly between entries.

    Args:
        stream: Binary (UTF-8) or text stream holding the export
        output_dir: Directory receiving the HTML files (must exist)
        converter: Textile to HTML function (defaults to the redcloth command)
        quote_policy: Quoting for simple header values
        fix_encoding: Repair mojibake in each line with ftfy
        dry_run: Parse and render without writing files
        logger: Optional logger for operation tracking

    Returns:
        ImportStats for the run

    Raises:
        MtImportError: On the first failure; nothing after it is processed
    """
    stats = ImportStats()
    if converter is None:
        converter = make_converter()
    cursor = LineCursor(stream, fix_encoding=fix_encoding)

    safe_logger(logger).log_operation(
        "import_start",
        {"output": str(output_dir), "quote_style": quote_policy.name, "dry_run": dry_run},
    )

    entry_index = 0
    while True:
        entry_index += 1
        try:
            entry = MtEntry.from_cursor(cursor, quote_policy=quote_policy)
            if entry is None:
                break
            process_entry(entry, output_dir, converter, stats, dry_run, logger)
        except EntryParseError as e:
            e.entry_index = entry_index
            stats.errors += 1
            safe_logger(logger).log_error(
                e, {"operation": "parse_entry", "entry": entry_index}
            )
            raise
        except MtImportError as e:
            stats.errors += 1
            safe_logger(logger).log_error(
                e, {"operation": "process_entry", "entry": entry_index}
            )
            raise

    if cursor.undecodable_lines:
        safe_logger(logger).log_warning(
            "Invalid UTF-8 passed through unchanged",
            {"lines": cursor.undecodable_lines},
        )
    safe_logger(logger).log_operation("import_complete", stats.to_dict())
    return stats


def import_file(
    input_path: Path,
    output_dir: Path,
    converter: Optional[Converter] = None,
    quote_policy: QuotePolicy = DEFAULT_QUOTE_POLICY,
    fix_encoding: bool = False,
    dry_run: bool = False,
    logger: Optional[ImportLogger] = None,
) -> ImportStats:
    """
    Import an export file from disk.

    Raises:
        FileNotFoundError: If ``input_path`` does not exist
        MtImportError: On the first import failure
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    safe_logger(logger).log_info(f"Reading {input_path}")
    with input_path.open("rb") as stream:
        return import_stream(
            stream,
            output_dir,
            converter=converter,
            quote_policy=quote_policy,
            fix_encoding=fix_encoding,
            dry_run=dry_run,
            logger=logger,
        )
