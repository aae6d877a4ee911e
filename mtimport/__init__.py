"""
mtimport
========

Movable Type export to static-site HTML converter.

Reads the flat text export Movable Type produces (posts with metadata,
body sections and nested comments) and writes one HTML file per post with
a sorted front matter header, ready for a static site generator.

Main Components:
    - pipeline: Import driver (mt2html) and the click command
    - dataclasses: MtEntry and MtComment parsing and rendering
    - configs: Header field table and markup values
    - core: Logging, exceptions, defaults, run statistics
    - utils: Line cursor, dates, front matter, textile converter

Example Usage:
    >>> from pathlib import Path
    >>> from mtimport import import_file
    >>> stats = import_file(Path("export.txt"), Path("_posts"))
    >>> print(stats.summary())
"""

__version__ = "1.0.0"

from mtimport.pipeline.mt2html import import_file, import_stream

__all__ = ["import_file", "import_stream"]
