#!/usr/bin/env python3
"""
Semantic variation lexicon for bo-field-mapper.

Maps canonical concept keys to the surface forms they commonly take in
physical column names, and turns shared concepts into a score boost for
the auto-mapper.
"""

from typing import Dict, Iterable, List, Mapping, Optional

DEFAULT_BOOST_INCREMENT = 0.3


class SemanticVariationLexicon:
    """Synonym groups used to boost fuzzy scores for known variants."""

    VARIATIONS: Dict[str, List[str]] = {
        "id": ["_id", "id", "uuid", "guid"],
        "name": ["name", "title", "label", "fullname"],
        "code": ["code", "key", "no", "num"],
        "desc": ["description", "desc", "remark", "content"],
        "user": ["user", "account", "creator", "modifier"],
        "time": ["time", "date", "at", "on"],
    }

    def __init__(
        self,
        extra_variations: Optional[Mapping[str, Iterable[str]]] = None,
        increment: float = DEFAULT_BOOST_INCREMENT,
    ):
        """
        Args:
            extra_variations: Additional variants per key; merged into the
                default groups (new keys become new groups)
            increment: Score added for every key shared by both names
        """
        self.increment = increment
        self.variations: Dict[str, List[str]] = {
            key: list(values) for key, values in self.VARIATIONS.items()
        }
        for key, values in (extra_variations or {}).items():
            group = self.variations.setdefault(key.lower(), [])
            for value in values:
                value = value.lower()
                if value not in group:
                    group.append(value)

    def matching_keys(self, bo_field_lower: str, column_lower: str) -> List[str]:
        """Keys contained in the field name whose variants occur in the column name."""
        return [
            key
            for key, variants in self.variations.items()
            if key in bo_field_lower
            and any(variant in column_lower for variant in variants)
        ]

    def boost(self, bo_field_lower: str, column_lower: str) -> float:
        """
        Additive boost: one increment per matching key. The sum is not
        capped, so names sharing several concepts can push a total past 1.0.
        """
        boost = 0.0
        for _ in self.matching_keys(bo_field_lower, column_lower):
            boost += self.increment
        return boost


DEFAULT_LEXICON = SemanticVariationLexicon()
