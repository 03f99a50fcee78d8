"""Parse MPD filter expressions back into search crumbs."""

from __future__ import annotations

import logging
from importlib import resources

from lark import Lark, Token, Transformer, UnexpectedInput

from mpd_search.expression.clause import Clause
from mpd_search.expression.codec import unescape

logger = logging.getLogger(__name__)

_SEPARATOR = " AND "


def _load_grammar() -> str:
    """Load the Lark grammar from the package resources."""
    return resources.files("mpd_search.expression").joinpath("grammar.lark").read_text()


_parser = Lark(
    _load_grammar(),
    parser="earley",
    ambiguity="resolve",
)


class _ClauseTransformer(Transformer):
    """Transform a clause parse tree into a :class:`Clause`."""

    def condition(self, items: list[Token]) -> Clause:
        tag, operator, value = items
        # Strip the surrounding quotes before unescaping
        return Clause(tag=str(tag), operator=str(operator), value=unescape(str(value)[1:-1]))


_transformer = _ClauseTransformer()


def _parse_segment(segment: str) -> Clause | None:
    """Parse one ``AND``-separated segment, or return None if it does not match."""
    try:
        tree = _parser.parse(segment)
    except UnexpectedInput:
        logger.debug("Dropping unrecognized clause `%s`", segment)
        return None
    return _transformer.transform(tree)


def parse_segments(expression: str) -> list[Clause | None]:
    """Parse a filter expression segment by segment.

    Whitespace around the expression is stripped first, then one leading
    ``(`` and one trailing ``)`` are removed when present and the rest is
    split on ``" AND "``. Whitespace inside a clause is left alone.

    Returns:
        One entry per ``AND``-separated segment, None where the segment is
        not a quoted clause. Empty for an empty expression.
    """
    expression = expression.strip()
    if expression.startswith("("):
        expression = expression[1:]
    if expression.endswith(")"):
        expression = expression[:-1]
    if not expression:
        return []
    return [_parse_segment(segment) for segment in expression.split(_SEPARATOR)]


def parse(expression: str) -> list[Clause]:
    """Parse a filter expression into its clauses.

    Only flat ``AND`` conjunctions of quoted clauses are understood. Each
    clause may carry its own parentheses, as MPD writes them. Clauses with
    an unquoted value (numeric comparisons) or any other syntax are
    skipped, so the result can be shorter than the expression.

    Args:
        expression: A string as produced by :func:`serialize`.

    Returns:
        The clauses with unescaped values, in expression order.
    """
    return [clause for clause in parse_segments(expression) if clause is not None]
