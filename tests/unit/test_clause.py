"""Unit tests for the clause data classes."""

from __future__ import annotations

import dataclasses

import pytest

from mpd_search.expression.clause import KNOWN_OPERATORS, NUMERIC_OPERATORS, Clause, Features


def test_clause_is_immutable() -> None:
    clause = Clause("Artist", "==", "Muse")
    with pytest.raises(dataclasses.FrozenInstanceError):
        clause.value = "Blur"  # type: ignore[misc]


def test_label_shows_unescaped_value() -> None:
    assert Clause("Title", "==", "It's").label == "Title == 'It's'"


def test_clauses_compare_by_value() -> None:
    assert Clause("Artist", "==", "Muse") == Clause("Artist", "==", "Muse")
    assert Clause("Artist", "==", "Muse") != Clause("Artist", "contains", "Muse")


def test_default_features_support_everything() -> None:
    assert Features() == Features(starts_with=True, pcre=True)


def test_numeric_operators_are_known() -> None:
    assert NUMERIC_OPERATORS <= KNOWN_OPERATORS
