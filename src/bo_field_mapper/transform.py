#!/usr/bin/env python3
"""
Value transformations for bo-field-mapper.

Applies the rule attached to a mapping entry to a sample value so the
caller can show a live preview of the mapped output. Rules are held in a
registry keyed by RuleKind; Lookup is an identity placeholder until a
real lookup transformation is registered.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence, Union

from .models import Column, MappingEntry, RuleKind
from .samples import sample_value

Transformation = Callable[[str], str]

PHONE_PATTERN = re.compile(r"(\d{3})\d+(\d{4})", re.ASCII)


def _identity(value: str) -> str:
    return value


def _uppercase(value: str) -> str:
    return value.upper()


def _date_format(value: str) -> str:
    """Keep the date part of a 'date time' string."""
    return value.split(" ", 1)[0]


def _masking(value: str) -> str:
    """Mask an email local part or the middle digits of a phone number."""
    if "@" in value:
        local, _, domain = value.partition("@")
        return f"{local[:2]}***@{domain}"

    match = PHONE_PATTERN.fullmatch(value)
    if match:
        return f"{match.group(1)}****{match.group(2)}"
    return value


DEFAULT_TRANSFORMATIONS: Dict[RuleKind, Transformation] = {
    RuleKind.DIRECT_MAP: _identity,
    RuleKind.SMART_MAP: _identity,
    RuleKind.MASKING: _masking,
    RuleKind.UPPERCASE: _uppercase,
    RuleKind.DATE_FORMAT: _date_format,
    RuleKind.LOOKUP: _identity,
}


class TransformationEngine:
    """Registry of transformations, one per rule kind."""

    def __init__(self, transformations: Optional[Mapping[RuleKind, Transformation]] = None):
        self.transformations: Dict[RuleKind, Transformation] = dict(
            DEFAULT_TRANSFORMATIONS
        )
        if transformations:
            self.transformations.update(transformations)

    def register(self, rule: Union[RuleKind, str], func: Transformation) -> "TransformationEngine":
        """Return a new engine with the transformation for rule replaced."""
        return TransformationEngine({**self.transformations, RuleKind.parse(rule): func})

    def get(self, rule: Union[RuleKind, str]) -> Transformation:
        return self.transformations[RuleKind.parse(rule)]

    def apply(self, rule: Union[RuleKind, str], value: str) -> str:
        """Transform value according to rule."""
        return self.get(rule)(value)


DEFAULT_ENGINE = TransformationEngine()


def apply_rule(rule: Union[RuleKind, str], value: str) -> str:
    return DEFAULT_ENGINE.apply(rule, value)


@dataclass(frozen=True)
class TransformationPreview:
    """Sample value and its transformed output for one mapping entry."""

    sample_value: str
    output_value: str


def preview_mapping(
    entry: MappingEntry,
    columns: Sequence[Column],
    sample: Optional[str] = None,
    engine: Optional[TransformationEngine] = None,
) -> TransformationPreview:
    """
    Preview an entry's rule. Without an explicit sample, one is resolved
    from the mapped column's type (a generic placeholder when the column
    is not in the given set).
    """
    engine = engine or DEFAULT_ENGINE
    if sample is None:
        column_type = next(
            (column.type for column in columns if column.name == entry.tbl_field), ""
        )
        sample = sample_value(column_type)
    return TransformationPreview(
        sample_value=sample, output_value=engine.apply(entry.rule, sample)
    )
