"""Build MPD filter expressions from search crumbs."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mpd_search.expression.clause import (
    CONTAINS,
    DATABASE_LIST_VIEW,
    NUMERIC_OPERATORS,
    REGEX_MATCH,
    STARTS_WITH,
    Clause,
    Features,
)
from mpd_search.expression.codec import escape

logger = logging.getLogger(__name__)

_SEPARATOR = " AND "

_DEFAULT_FEATURES = Features()


def downgrade_operator(
    operator: str,
    value: str,
    features: Features,
    view: str | None = None,
) -> tuple[str, str]:
    """Rewrite ``starts_with`` for backends that do not support it.

    The database list view always keeps ``starts_with``. Elsewhere, a
    backend without ``starts_with`` gets an anchored regex if it supports
    PCRE, and a plain ``contains`` otherwise.

    Returns:
        The (operator, value) pair to render.
    """
    if operator != STARTS_WITH or view == DATABASE_LIST_VIEW or features.starts_with:
        return operator, value

    if features.pcre:
        logger.debug("starts_with unsupported, using regex for %r", value)
        return REGEX_MATCH, "^" + value

    logger.debug("starts_with and regex unsupported, using contains for %r", value)
    return CONTAINS, value


def render_clause(
    tag: str,
    operator: str,
    value: str,
    *,
    features: Features = _DEFAULT_FEATURES,
    view: str | None = None,
) -> str:
    """Render one clause as ``tag operator 'value'``.

    Numeric operators are rendered with the bare value.
    """
    operator, value = downgrade_operator(operator, value, features, view)
    if operator in NUMERIC_OPERATORS:
        return f"{tag} {operator} {value}"
    return f"{tag} {operator} '{escape(value)}'"


def serialize(
    clauses: Iterable[Clause],
    pending_tag: str = "",
    pending_operator: str = "",
    pending_value: str = "",
    *,
    features: Features = _DEFAULT_FEATURES,
    view: str | None = None,
) -> str:
    """Build the filter expression for the committed crumbs and pending input.

    Args:
        clauses: Committed crumbs, in order.
        pending_tag: Tag of the clause currently being typed.
        pending_operator: Operator of the clause currently being typed.
        pending_value: Text currently being typed. Ignored when empty.
        features: Backend capabilities, used for the starts_with rewrite.
        view: Current browsing context.

    Returns:
        ``(a AND b ...)``, or an empty string when there is nothing to filter.
    """
    parts = [
        render_clause(c.tag, c.operator, c.value, features=features, view=view)
        for c in clauses
    ]
    if pending_value != "":
        parts.append(
            render_clause(
                pending_tag, pending_operator, pending_value, features=features, view=view
            )
        )

    expression = "(" + _SEPARATOR.join(parts) + ")"
    if expression == "()":
        return ""
    return expression
