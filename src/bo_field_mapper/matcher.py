#!/usr/bin/env python3
"""
Automatic field-to-column matching for bo-field-mapper.

Proposes a column for every business field that is not yet mapped:
- Exact pass: case-insensitive equality on field name or code
- Fuzzy pass: Levenshtein similarity plus semantic variation boost
- Threshold policy: only totals above the threshold are proposed

Selection is greedy per field. A column chosen for one field stays
available to the others, and earlier decisions are never revisited.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .fuzzy import FuzzyMatcher
from .logging_config import get_logger
from .mapping_set import MappingSet
from .models import Column, Field, MappingEntry, RuleKind
from .synonym import DEFAULT_BOOST_INCREMENT, SemanticVariationLexicon

logger = get_logger(__name__)


@dataclass
class MatcherConfig:
    """Configuration for automatic matching behavior."""

    threshold: float = 0.6  # Fuzzy totals must be strictly above this
    boost_increment: float = DEFAULT_BOOST_INCREMENT
    exact_match_on_code: bool = True
    extra_synonyms: Optional[dict] = None


class AutoMapper:
    """Proposes mappings for unmapped business fields against a column set."""

    def __init__(
        self,
        config: Optional[MatcherConfig] = None,
        lexicon: Optional[SemanticVariationLexicon] = None,
    ):
        self.config = config or MatcherConfig()
        self.fuzzy_matcher = FuzzyMatcher()
        self.lexicon = lexicon or SemanticVariationLexicon(
            extra_variations=self.config.extra_synonyms,
            increment=self.config.boost_increment,
        )

    def find_exact_match(
        self, field: Field, columns: Sequence[Column]
    ) -> Optional[Column]:
        """First column whose lower-cased name equals the field's name or code."""
        name_lower = field.name.lower()
        code_lower = field.effective_code.lower()

        for column in columns:
            column_lower = column.name.lower()
            if column_lower == name_lower:
                return column
            if self.config.exact_match_on_code and column_lower == code_lower:
                return column
        return None

    def score(self, field_lower: str, column_lower: str) -> float:
        """Similarity plus lexicon boost; may exceed 1.0."""
        base = self.fuzzy_matcher.similarity(field_lower, column_lower)
        return base + self.lexicon.boost(field_lower, column_lower)

    def find_best_match(
        self, field: Field, columns: Sequence[Column]
    ) -> Tuple[Optional[Column], float]:
        """Highest-scoring column for the field; ties keep the first seen."""
        field_lower = field.name.lower()
        best_column = None
        best_total = 0.0

        for column in columns:
            total = self.score(field_lower, column.name.lower())
            if best_column is None or total > best_total:
                best_column = column
                best_total = total

        return best_column, best_total

    def match_field(
        self, field: Field, columns: Sequence[Column]
    ) -> Optional[MappingEntry]:
        """Propose an entry for one field, or None when nothing qualifies."""
        exact = self.find_exact_match(field, columns)
        if exact is not None:
            logger.debug(f"Exact match: {field.name} -> {exact.name}")
            return MappingEntry(
                bo_field=field.name, tbl_field=exact.name, rule=RuleKind.DIRECT_MAP
            )

        best_column, total = self.find_best_match(field, columns)
        if best_column is None or total <= self.config.threshold:
            logger.debug(
                f"No match for {field.name} (best total {total:.3f} "
                f"<= {self.config.threshold})"
            )
            return None

        rule = RuleKind.SMART_MAP if total < 1.0 else RuleKind.DIRECT_MAP
        logger.debug(
            f"Fuzzy match: {field.name} -> {best_column.name} "
            f"(score {total:.3f}, {rule.label})"
        )
        return MappingEntry(
            bo_field=field.name, tbl_field=best_column.name, rule=rule, score=total
        )

    def propose_mappings(
        self,
        fields: Sequence[Field],
        columns: Sequence[Column],
        existing: Optional[MappingSet] = None,
    ) -> MappingSet:
        """
        Propose entries for every field not already in the existing set.

        Existing entries are left untouched; new proposals are appended in
        field order. Fields without a qualifying column stay unmapped.
        """
        existing = existing or MappingSet()
        proposals = []
        unmapped = 0

        for field in fields:
            if field.name in existing:
                continue
            entry = self.match_field(field, columns)
            if entry is None:
                unmapped += 1
            else:
                proposals.append(entry)

        logger.info(
            f"Auto-mapping proposed {len(proposals)} entries, "
            f"{unmapped} fields left unmapped"
        )
        return existing.merge(proposals)

    def seed(self, fields: Sequence[Field], columns: Sequence[Column]) -> MappingSet:
        """Initial mapping set from exact name/code equality only."""
        entries = []
        for field in fields:
            column = self.find_exact_match(field, columns)
            if column is not None:
                entries.append(MappingEntry(bo_field=field.name, tbl_field=column.name))
        return MappingSet.from_entries(entries)


def propose_mappings(
    fields: Sequence[Field],
    columns: Sequence[Column],
    existing: Optional[MappingSet] = None,
    config: Optional[MatcherConfig] = None,
) -> MappingSet:
    """Run the auto-mapper with the given (or default) configuration."""
    return AutoMapper(config).propose_mappings(fields, columns, existing)


def seed_mapping_set(
    fields: Sequence[Field],
    columns: Sequence[Column],
    config: Optional[MatcherConfig] = None,
) -> MappingSet:
    """Mapping set created when a business object is first opened for mapping."""
    return AutoMapper(config).seed(fields, columns)
