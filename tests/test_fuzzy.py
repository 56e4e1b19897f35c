"""Tests for edit-distance similarity."""

import pytest

from bo_field_mapper.fuzzy import FuzzyMatcher, similarity


@pytest.mark.parametrize("value", ["", "a", "name", "p_name", "身份证号"])
def test_self_similarity_is_one(value):
    """Every string is fully similar to itself, including the empty string."""
    assert similarity(value, value) == 1.0


@pytest.mark.parametrize(
    "a,b",
    [("name", "p_name"), ("", "abc"), ("kitten", "sitting"), ("id", "uuid")],
)
def test_similarity_is_symmetric(a, b):
    """Argument order does not change the score."""
    assert similarity(a, b) == similarity(b, a)


def test_levenshtein_distance_known_values():
    """Classic distances with unit insert/delete/substitute costs."""
    assert FuzzyMatcher.levenshtein_distance("kitten", "sitting") == 3
    assert FuzzyMatcher.levenshtein_distance("name", "p_name") == 2
    assert FuzzyMatcher.levenshtein_distance("", "abc") == 3
    assert FuzzyMatcher.levenshtein_distance("abc", "abc") == 0


def test_similarity_normalizes_by_longer_length():
    """(L - d) / L with L the longer length."""
    assert similarity("name", "p_name") == pytest.approx(4 / 6)
    assert similarity("abcde", "abcxy") == pytest.approx(0.6)


def test_one_empty_string_scores_zero():
    """Only two empty strings get the special-case 1.0."""
    assert similarity("", "abc") == 0.0


def test_similarity_is_case_sensitive():
    """Callers lower-case inputs themselves."""
    assert similarity("Name", "name") == pytest.approx(0.75)
