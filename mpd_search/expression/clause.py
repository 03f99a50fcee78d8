"""Data classes for search crumbs and backend capabilities."""

from __future__ import annotations

from dataclasses import dataclass

# Browsing context in which starts_with is always sent as-is
DATABASE_LIST_VIEW = "BrowseDatabaseList"

STARTS_WITH = "starts_with"
REGEX_MATCH = "=~"
CONTAINS = "contains"

# Operators understood by MPD filter expressions. Not enforced: unknown
# operators are passed through to the backend.
KNOWN_OPERATORS: frozenset[str] = frozenset(
    {
        "==",
        "!=",
        CONTAINS,
        "!contains",
        STARTS_WITH,
        REGEX_MATCH,
        "!~",
        ">=",
    }
)

# Operators whose value is written without quotes
NUMERIC_OPERATORS: frozenset[str] = frozenset({">="})


@dataclass(frozen=True)
class Clause:
    """A single ``tag operator 'value'`` filter, shown in the UI as a crumb.

    ``value`` is always the raw, unescaped string the user typed.
    """

    tag: str
    operator: str
    value: str

    @property
    def label(self) -> str:
        """Crumb text, e.g. ``Artist == 'Foo Fighters'``."""
        return f"{self.tag} {self.operator} '{self.value}'"


@dataclass(frozen=True)
class Features:
    """Capability flags reported by the backend.

    Attributes:
        starts_with: Backend understands the ``starts_with`` operator.
        pcre: Backend understands ``=~`` regular expression matching.
    """

    starts_with: bool = True
    pcre: bool = True
