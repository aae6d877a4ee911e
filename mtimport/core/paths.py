#!/usr/bin/env python3
"""
paths.py
-------------------
Default locations and external commands for mtimport.

Values are resolved once at import time. Each default can be overridden
through an environment variable, and the CLI options override both.

    MTIMPORT_LOG_DIR           directory for operation and error logs
    MTIMPORT_TEXTILE_COMMAND   command that converts textile to HTML
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import shlex
from pathlib import Path
from typing import Tuple


# ----- Logs -----
LOG_DIR: Path = Path(os.environ.get("MTIMPORT_LOG_DIR", "logs"))

# ----- External converters -----
DEFAULT_TEXTILE_COMMAND: Tuple[str, ...] = tuple(
    shlex.split(os.environ.get("MTIMPORT_TEXTILE_COMMAND", "redcloth"))
)

# ----- Output -----
OUTPUT_EXTENSION = ".html"
