"""Tests for mapping set operations, manual override and coverage stats."""

from bo_field_mapper.mapping_set import MappingSet, mapping_stats, set_mapping
from bo_field_mapper.models import Field, MappingEntry, RuleKind


def test_set_mapping_clears_score_and_rule():
    """Manual override resets a scored Smart Map entry to a plain Direct Map."""
    scored = MappingSet.from_entries(
        [MappingEntry("name", "p_name", RuleKind.SMART_MAP, 0.967)]
    )

    result = set_mapping(scored, "name", "full_name")

    assert result.get("name") == MappingEntry("name", "full_name", RuleKind.DIRECT_MAP, None)
    assert len(result) == 1
    # Previous snapshot is unchanged
    assert scored.get("name").score == 0.967


def test_set_mapping_replaces_in_place():
    """At most one entry per business field; replacement keeps the position."""
    mapping_set = MappingSet.from_entries(
        [MappingEntry("a", "col_a"), MappingEntry("b", "col_b"), MappingEntry("c", "col_c")]
    )

    result = set_mapping(mapping_set, "b", "col_x")

    assert result.mapped_fields() == ["a", "b", "c"]
    assert result.get("b").tbl_field == "col_x"


def test_set_mapping_appends_new_field():
    result = set_mapping(MappingSet(), "a", "col_a")
    result = set_mapping(result, "b", "col_a")

    # Column reuse across fields is allowed
    assert [entry.tbl_field for entry in result] == ["col_a", "col_a"]


def test_from_entries_keeps_last_duplicate():
    mapping_set = MappingSet.from_entries(
        [MappingEntry("a", "col_1"), MappingEntry("a", "col_2")]
    )
    assert len(mapping_set) == 1
    assert mapping_set.get("a").tbl_field == "col_2"


def test_remove_unlinks_field():
    mapping_set = set_mapping(set_mapping(MappingSet(), "a", "x"), "b", "y")

    result = mapping_set.remove("a")

    assert "a" not in result
    assert "b" in result
    assert "a" in mapping_set
    assert mapping_set.remove("missing") == mapping_set


def test_get_missing_field_returns_none():
    assert MappingSet().get("anything") is None


def test_to_list_includes_score_only_when_present():
    mapping_set = MappingSet.from_entries(
        [
            MappingEntry("a", "x"),
            MappingEntry("b", "y", RuleKind.SMART_MAP, 0.96666),
        ]
    )
    assert mapping_set.to_list() == [
        {"bo_field": "a", "tbl_field": "x", "rule": "Direct Map"},
        {"bo_field": "b", "tbl_field": "y", "rule": "Smart Map", "score": 0.9667},
    ]


def test_mapping_stats_counts_fields_of_business_object():
    fields = [Field("a"), Field("b"), Field("c")]
    mapping_set = MappingSet.from_entries(
        [MappingEntry("a", "x"), MappingEntry("b", "y"), MappingEntry("other", "z")]
    )

    stats = mapping_stats(mapping_set, fields)

    assert stats.total_fields == 3
    assert stats.mapped_fields == 2
    assert stats.percentage == 67


def test_mapping_stats_rounds_half_up():
    fields = [Field(f"f{i}") for i in range(8)]
    stats = mapping_stats(set_mapping(MappingSet(), "f0", "x"), fields)
    # 12.5% rounds to 13
    assert stats.percentage == 13


def test_mapping_stats_without_fields():
    stats = mapping_stats(MappingSet(), [])
    assert (stats.total_fields, stats.mapped_fields, stats.percentage) == (0, 0, 0)
