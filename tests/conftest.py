"""
conftest.py
-----------
Shared pytest fixtures for mtimport tests.

Provides fixtures for:
- Sample export streams (single entry, multi-entry with comments, textile)
- Line cursors over in-memory streams
- Temporary output directories
"""
import io
from pathlib import Path
from tempfile import TemporaryDirectory
from textwrap import dedent

import pytest

from mtimport.utils.cursor import LineCursor


# ----- Sample exports -----

MINIMAL_EXPORT = dedent(
    """\
    TITLE: Hi
    BASENAME: my_post
    CONVERT BREAKS: 1
    DATE: 01/02/2006 3:04:05 PM
    -----
    BODY:
    line one
    line two
    -----
    --------
    """
)

FULL_ENTRY = dedent(
    """\
    AUTHOR: Alice
    TITLE: Hello "World"
    BASENAME: hello_world
    STATUS: Publish
    ALLOW COMMENTS: 1
    CONVERT BREAKS: 1
    ALLOW PINGS: 0
    PRIMARY CATEGORY: News
    CATEGORY: News
    DATE: 01/02/2006 3:04:05 PM
    TAGS: intro,meta
    -----
    BODY:
    First paragraph.

    <p class="lead">Already HTML</p>
    -----
    EXTENDED BODY:
    More text.
    -----
    EXCERPT:
    Short.
    -----
    KEYWORDS:

    -----
    COMMENT:
    AUTHOR: Bob
    EMAIL: bob@example.com
    IP: 10.0.0.1
    URL: http://bob.example.com
    DATE: 01/03/2006 10:30:00 AM
    Nice post.

    Really.
    -----
    COMMENT:
    AUTHOR: Carol
    EMAIL:
    IP: 10.0.0.2
    URL:
    DATE: 01/04/2006 11:45:00 PM
    Thanks!
    -----
    --------
    """
)

TEXTILE_ENTRY = dedent(
    """\
    TITLE: Second
    BASENAME: second_post_here
    CONVERT BREAKS: textile_2
    DATE: 12/31/2007 11:59:59 PM
    -----
    BODY:
    h1. Heading

    Some *bold* text.
    -----
    --------
    """
)


def make_cursor(text: str) -> LineCursor:
    """LineCursor over ``text`` encoded as a UTF-8 byte stream."""
    return LineCursor(io.BytesIO(text.encode("utf-8")))


@pytest.fixture
def minimal_export():
    """One break-converted entry with a two-line body."""
    return MINIMAL_EXPORT


@pytest.fixture
def full_entry():
    """Entry using every header field, skipped sections and two comments."""
    return FULL_ENTRY


@pytest.fixture
def textile_entry():
    """Entry whose body is textile."""
    return TEXTILE_ENTRY


@pytest.fixture
def multi_export():
    """Two entries back to back, followed by trailing blank lines."""
    return FULL_ENTRY + TEXTILE_ENTRY + "\n\n"


@pytest.fixture
def cursor_factory():
    """Build LineCursors over in-memory text."""
    return make_cursor


@pytest.fixture
def fake_converter():
    """Textile converter stand-in that records its input."""
    calls = []

    def _convert(text):
        calls.append(text)
        return "<h1>Heading</h1>\n<p>Some <strong>bold</strong> text.</p>\n"

    _convert.calls = calls
    return _convert


@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
