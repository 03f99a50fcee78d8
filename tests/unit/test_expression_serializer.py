"""Unit tests for building filter expressions."""

from __future__ import annotations

import pytest

from mpd_search.expression.clause import DATABASE_LIST_VIEW, Clause, Features
from mpd_search.expression.serializer import downgrade_operator, render_clause, serialize

NO_STARTS_WITH = Features(starts_with=False, pcre=True)
NO_STARTS_WITH_NO_PCRE = Features(starts_with=False, pcre=False)


# ---------------------------------------------------------------------------
# serialize
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_nothing_gives_empty_string(self) -> None:
        assert serialize([], "", "", "") == ""

    def test_defaults_give_empty_string(self) -> None:
        assert serialize([]) == ""

    def test_pending_only(self) -> None:
        assert serialize([], "Artist", "==", "Muse") == "(Artist == 'Muse')"

    def test_crumb_and_pending(self) -> None:
        clauses = [Clause("Artist", "==", "Muse")]
        assert (
            serialize(clauses, "Genre", "contains", "Rock")
            == "(Artist == 'Muse' AND Genre contains 'Rock')"
        )

    def test_crumbs_only(self) -> None:
        clauses = [Clause("Artist", "==", "Foo Fighters"), Clause("Genre", "contains", "Rock")]
        assert serialize(clauses) == "(Artist == 'Foo Fighters' AND Genre contains 'Rock')"

    def test_empty_pending_value_ignored(self) -> None:
        clauses = [Clause("Artist", "==", "Muse")]
        assert serialize(clauses, "Genre", "contains", "") == "(Artist == 'Muse')"

    def test_order_preserved(self) -> None:
        clauses = [Clause("B", "==", "2"), Clause("A", "==", "1")]
        assert serialize(clauses) == "(B == '2' AND A == '1')"

    def test_duplicates_kept(self) -> None:
        clause = Clause("Artist", "==", "Muse")
        assert serialize([clause, clause]) == "(Artist == 'Muse' AND Artist == 'Muse')"

    def test_crumb_with_empty_value_kept(self) -> None:
        assert serialize([Clause("Comment", "==", "")]) == "(Comment == '')"

    def test_values_escaped(self) -> None:
        assert serialize([], "Title", "==", "Don't") == "(Title == 'Don\\'t')"

    def test_numeric_operator_unquoted(self) -> None:
        assert serialize([], "Date", ">=", "2000") == "(Date >= 2000)"

    def test_accepts_any_iterable(self) -> None:
        clauses = (c for c in [Clause("Artist", "==", "Muse")])
        assert serialize(clauses) == "(Artist == 'Muse')"

    def test_idempotent(self) -> None:
        clauses = [Clause("Artist", "==", "Muse")]
        first = serialize(clauses, "Title", "starts_with", "Up", features=NO_STARTS_WITH)
        second = serialize(clauses, "Title", "starts_with", "Up", features=NO_STARTS_WITH)
        assert first == second

    def test_downgrade_applies_to_crumbs(self) -> None:
        clauses = [Clause("Title", "starts_with", "Da")]
        assert serialize(clauses, features=NO_STARTS_WITH) == "(Title =~ '^Da')"
        # The stored crumb is untouched
        assert clauses[0].operator == "starts_with"
        assert clauses[0].value == "Da"


# ---------------------------------------------------------------------------
# starts_with downgrade
# ---------------------------------------------------------------------------


class TestDowngrade:
    def test_regex_when_pcre_supported(self) -> None:
        result = serialize([], "Title", "starts_with", "Da", features=NO_STARTS_WITH)
        assert result == "(Title =~ '^Da')"

    def test_contains_without_pcre(self) -> None:
        result = serialize([], "Title", "starts_with", "Da", features=NO_STARTS_WITH_NO_PCRE)
        assert result == "(Title contains 'Da')"

    @pytest.mark.parametrize(
        "features",
        [NO_STARTS_WITH, NO_STARTS_WITH_NO_PCRE, Features()],
    )
    def test_database_list_view_keeps_starts_with(self, features: Features) -> None:
        result = serialize(
            [], "Title", "starts_with", "Da", features=features, view=DATABASE_LIST_VIEW
        )
        assert result == "(Title starts_with 'Da')"

    def test_supported_starts_with_unchanged(self) -> None:
        assert serialize([], "Title", "starts_with", "Da") == "(Title starts_with 'Da')"

    def test_other_view_downgrades(self) -> None:
        result = serialize([], "Title", "starts_with", "Da", features=NO_STARTS_WITH, view="Search")
        assert result == "(Title =~ '^Da')"

    def test_other_operators_untouched(self) -> None:
        assert downgrade_operator("==", "Da", NO_STARTS_WITH) == ("==", "Da")

    def test_regex_value_escaped_after_anchor(self) -> None:
        assert (
            render_clause("Title", "starts_with", "It's", features=NO_STARTS_WITH)
            == "Title =~ '^It\\'s'"
        )


class TestRenderClause:
    def test_quoted(self) -> None:
        assert render_clause("Artist", "contains", "foo") == "Artist contains 'foo'"

    def test_numeric_not_escaped(self) -> None:
        assert render_clause("Date", ">=", "1999") == "Date >= 1999"

    def test_unknown_operator_passed_through(self) -> None:
        assert render_clause("whatever", "~~", "x") == "whatever ~~ 'x'"
