"""Text processing utilities for markdoclet.

Provides the two text transforms applied around the markup renderer:

- ``escape_unicode``: rewrites every character above Latin-1 as a ``\\uXXXX``
  escape before it reaches either output buffer.
- ``clean_doc_input``: strips javadoc leftovers from a buffered span before it
  is handed to the markup engine.

Example:
    >>> from markdoclet.utils.text import escape_unicode
    >>> escape_unicode("Ā")
    '\\\\u0100'
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable

_NON_LATIN1 = re.compile(r"[^\x00-\xff]")


def _escaped_literal(match: re.Match[str]) -> str:
    return html.escape(match.group(1), quote=False)


_CLEANUPS: tuple[tuple[re.Pattern[str], str | Callable[[re.Match[str]], str]], ...] = (
    (re.compile(r"\n "), "\n"),
    (re.compile(r"\{at\}"), "&#64;"),
    (re.compile(r"\{slash\}"), "/"),
    (re.compile(r"^( *)\*\\/$", re.MULTILINE), r"\1*/"),
    (re.compile(r"\{@literal (.*?)\}"), _escaped_literal),
)


def _escape_char(match: re.Match[str]) -> str:
    code = ord(match.group())
    if code > 0xFFFF:
        # One escape per UTF-16 code unit, so the result stays four-digit.
        code -= 0x10000
        return f"\\u{0xD800 + (code >> 10):04x}\\u{0xDC00 + (code & 0x3FF):04x}"
    return f"\\u{code:04x}"


def escape_unicode(text: str) -> str:
    """Escape characters above code point 255 as ``\\uXXXX``.

    Characters at or below 255 are returned untouched. Hex digits are
    lowercase and zero-padded to four. Characters outside the Basic
    Multilingual Plane become a surrogate pair of escapes.

    Output is pure Latin-1, so a second pass changes nothing. An escape
    produced here cannot be told apart from one already in the source text,
    so apply it exactly once per emitted string.

    Args:
        text: Text about to be emitted

    Returns:
        Escaped text (the same object when nothing needed escaping)

    Examples:
        >>> escape_unicode("caf\\u00e9")
        'café'
        >>> escape_unicode("\\u03bb x")
        '\\\\u03bb x'
    """
    if not text or _NON_LATIN1.search(text) is None:
        return text
    return _NON_LATIN1.sub(_escape_char, text)


def clean_doc_input(text: str) -> str:
    """Remove javadoc artifacts from a span of comment text.

    Applied in order:

    1. Trim surrounding whitespace.
    2. ``"\\n "`` becomes ``"\\n"`` (javadoc keeps one space after each newline).
    3. ``{at}`` becomes ``&#64;``.
    4. ``{slash}`` becomes ``/``.
    5. A line of optional spaces followed by ``*\\/`` becomes ``*/``.
    6. ``{@literal X}`` becomes ``X`` with ``&``, ``<`` and ``>`` escaped.

    Args:
        text: Raw buffered comment text

    Returns:
        Cleaned text ready for the markup engine

    Examples:
        >>> clean_doc_input("  test1\\n test2\\n")
        'test1\\ntest2'
        >>> clean_doc_input("{@literal @}")
        '@'
        >>> clean_doc_input("{@literal List<T>}")
        'List&lt;T&gt;'
    """
    text = text.strip()
    for pattern, replacement in _CLEANUPS:
        text = pattern.sub(replacement, text)
    return text
