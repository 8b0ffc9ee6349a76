"""Identifier classification and string escaping for the DOT language.

DOT accepts three kinds of unquoted identifiers (ID tokens):

    name     := [A-Za-z_\\200-\\377][A-Za-z_0-9\\200-\\377]*
    numeral  := -?(.[0-9]+ | [0-9]+(.[0-9]*)?)
    keyword  := node | edge | graph | digraph | subgraph | strict

Keywords are case-insensitive and can only be used as identifiers when
quoted. Everything else has to be written as a double-quoted string.
"""

from __future__ import annotations

import re
from enum import Enum

RESERVED_KEYWORDS = frozenset({"node", "edge", "graph", "digraph", "subgraph", "strict"})

_NAME = re.compile(r"[A-Za-z_\u0080-\U0010ffff][A-Za-z0-9_\u0080-\U0010ffff]*")
_NUMERAL = re.compile(r"-?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)")
_ESCAPE_SEQUENCE = re.compile(r'\\(["\\\n])')


class IdentifierKind(Enum):
    """How a raw string has to be written in DOT source."""

    BARE = "bare"
    NEEDS_QUOTING = "needs-quoting"


def classify(text: str) -> IdentifierKind:
    """Classify ``text`` as a bare identifier or one that needs quoting."""
    if text.lower() in RESERVED_KEYWORDS:
        return IdentifierKind.NEEDS_QUOTING
    if _NUMERAL.fullmatch(text):
        return IdentifierKind.BARE
    # Non-ASCII separators (U+00A0, U+3000, U+2028) and format characters
    # fall inside the name range but are not printable.
    if _NAME.fullmatch(text) and text.isprintable():
        return IdentifierKind.BARE
    return IdentifierKind.NEEDS_QUOTING


def escape(text: str) -> str:
    """Escape ``text`` for use between double quotes.

    Backslashes are doubled before quotes are escaped so that the
    backslash added in front of a quote is never doubled itself.
    Newlines are written as a line continuation (backslash, newline).
    """
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\\n")
    )


def unescape(text: str) -> str:
    """Reverse :func:`escape`."""
    return _ESCAPE_SEQUENCE.sub(lambda m: m.group(1), text)


def escape_esc_string(text: str) -> str:
    """Escape an escString, keeping backslash sequences such as ``\\l`` intact.

    Unescaped quotes get a backslash and a trailing lone backslash is
    doubled so it cannot swallow the closing quote.
    """
    parts: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\\":
            if i + 1 < len(text):
                parts.append(text[i:i + 2])
                i += 2
                continue
            parts.append("\\\\")
        elif char == '"':
            parts.append('\\"')
        elif char == "\n":
            parts.append("\\\n")
        else:
            parts.append(char)
        i += 1
    return "".join(parts)


def quote(text: str) -> str:
    """Wrap ``text`` in double quotes, escaping its content."""
    return f'"{escape(text)}"'


def format_id(text: str) -> str:
    """Render ``text`` as a DOT identifier, quoting only when required."""
    if classify(text) is IdentifierKind.BARE:
        return text
    return quote(text)
