"""Conversion between search crumbs and MPD filter expressions."""

from mpd_search.expression.clause import (
    DATABASE_LIST_VIEW,
    KNOWN_OPERATORS,
    NUMERIC_OPERATORS,
    Clause,
    Features,
)
from mpd_search.expression.codec import escape, unescape
from mpd_search.expression.parser import parse, parse_segments
from mpd_search.expression.serializer import downgrade_operator, render_clause, serialize

__all__ = [
    "DATABASE_LIST_VIEW",
    "KNOWN_OPERATORS",
    "NUMERIC_OPERATORS",
    "Clause",
    "Features",
    "downgrade_operator",
    "escape",
    "parse",
    "parse_segments",
    "render_clause",
    "serialize",
    "unescape",
]
