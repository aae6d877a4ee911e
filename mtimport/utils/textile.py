"""
textile.py
-------------------
Textile to HTML conversion through an external command.

The converter (``redcloth`` by default) reads textile on stdin and writes
HTML on stdout. The call blocks until the process exits; a launch failure
or nonzero exit status is fatal.
"""
from __future__ import annotations

# --- Standard library imports ---
import logging
import subprocess
from typing import Callable, Sequence

# --- Local imports ---
from mtimport.core.exceptions import TextileConversionError
from mtimport.core.paths import DEFAULT_TEXTILE_COMMAND


logger = logging.getLogger(__name__)

Converter = Callable[[str], str]


def convert_textile(text: str, command: Sequence[str] = DEFAULT_TEXTILE_COMMAND) -> str:
    """
    Pipe ``text`` through the textile converter and return its output.

    Args:
        text: Textile source
        command: Converter argv

    Returns:
        HTML produced by the converter

    Raises:
        TextileConversionError: If the command cannot be launched or fails
    """
    if not command:
        raise TextileConversionError("No textile converter command configured")

    logger.debug(f"Running {' '.join(command)} on {len(text)} characters")
    try:
        result = subprocess.run(
            list(command),
            input=text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            check=True,
        )
    except FileNotFoundError as e:
        raise TextileConversionError(f"Cannot launch {command[0]}: {e}") from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise TextileConversionError(
            f"{command[0]} exited with status {e.returncode}"
            + (f": {stderr}" if stderr else "")
        ) from e
    except OSError as e:
        raise TextileConversionError(f"Cannot launch {command[0]}: {e}") from e

    return result.stdout


def make_converter(command: Sequence[str] = DEFAULT_TEXTILE_COMMAND) -> Converter:
    """Bind ``command`` into a one-argument converter for MtEntry.to_html."""
    argv = tuple(command)

    def _convert(text: str) -> str:
        return convert_textile(text, argv)

    return _convert
