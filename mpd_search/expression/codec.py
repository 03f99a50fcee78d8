"""Escaping of values embedded in single-quoted filter literals."""

from __future__ import annotations

import re

_SPECIAL_CHARS = re.compile(r"""(["'\\])""")
_ESCAPED_CHARS = re.compile(r"""\\(["'\\])""")


def escape(value: str) -> str:
    """Backslash-escape quotes and backslashes in *value*."""
    return _SPECIAL_CHARS.sub(r"\\\1", value)


def unescape(text: str) -> str:
    """Reverse :func:`escape`.

    A backslash is only removed when it precedes a quote or another
    backslash; any other backslash is kept as-is.
    """
    return _ESCAPED_CHARS.sub(r"\1", text)
