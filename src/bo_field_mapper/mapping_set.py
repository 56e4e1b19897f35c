#!/usr/bin/env python3
"""
Mapping set handling for bo-field-mapper.

A MappingSet is an ordered, immutable collection of MappingEntry values
keyed by business field. Every change produces a new MappingSet, so
callers can keep older snapshots around for undo or concurrent use.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .models import Field, MappingEntry, RuleKind


@dataclass(frozen=True)
class MappingSet:
    """Ordered collection of mapping entries, at most one per business field."""

    entries: Tuple[MappingEntry, ...] = ()

    @classmethod
    def from_entries(cls, entries: Iterable[MappingEntry]) -> "MappingSet":
        """Build a set from entries; later duplicates replace earlier ones."""
        return cls().merge(entries)

    def __iter__(self) -> Iterator[MappingEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, bo_field: object) -> bool:
        return any(entry.bo_field == bo_field for entry in self.entries)

    def get(self, bo_field: str) -> Optional[MappingEntry]:
        for entry in self.entries:
            if entry.bo_field == bo_field:
                return entry
        return None

    def mapped_fields(self) -> List[str]:
        return [entry.bo_field for entry in self.entries]

    def upsert(self, entry: MappingEntry) -> "MappingSet":
        """Return a new set with the entry for entry.bo_field inserted or replaced in place."""
        entries = list(self.entries)
        for index, existing in enumerate(entries):
            if existing.bo_field == entry.bo_field:
                entries[index] = entry
                return MappingSet(tuple(entries))
        entries.append(entry)
        return MappingSet(tuple(entries))

    def merge(self, entries: Iterable[MappingEntry]) -> "MappingSet":
        result = self
        for entry in entries:
            result = result.upsert(entry)
        return result

    def remove(self, bo_field: str) -> "MappingSet":
        """Return a new set without the entry for bo_field."""
        return MappingSet(
            tuple(entry for entry in self.entries if entry.bo_field != bo_field)
        )

    def to_list(self) -> List[dict]:
        return [entry.to_dict() for entry in self.entries]


def set_mapping(mapping_set: MappingSet, bo_field: str, tbl_field: str) -> MappingSet:
    """
    Manual (drag-and-drop) mapping: link bo_field to tbl_field as a plain
    Direct Map, discarding whatever rule or score the field had before.
    """
    return mapping_set.upsert(
        MappingEntry(bo_field=bo_field, tbl_field=tbl_field, rule=RuleKind.DIRECT_MAP)
    )


@dataclass(frozen=True)
class MappingStats:
    """Mapping coverage of one business object."""

    total_fields: int
    mapped_fields: int
    percentage: int


def mapping_stats(mapping_set: MappingSet, fields: Sequence[Field]) -> MappingStats:
    """Count how many of the given fields carry an entry."""
    total = len(fields)
    mapped = sum(1 for field in fields if field.name in mapping_set)
    if total == 0:
        return MappingStats(total_fields=0, mapped_fields=0, percentage=0)
    # Round half up, not half to even
    percentage = int(math.floor(mapped / total * 100 + 0.5))
    return MappingStats(total_fields=total, mapped_fields=mapped, percentage=percentage)
