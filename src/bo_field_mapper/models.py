#!/usr/bin/env python3
"""
Core data model for bo-field-mapper.

Contains the typed records the engine works on:
- Field: business-object attribute
- Column: physical-table attribute
- MappingEntry: one business field linked to one column
- RuleKind: closed catalog of value-transformation rules
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RuleKind(Enum):
    """Transformation rules selectable for a mapping entry."""

    DIRECT_MAP = "Direct Map"
    SMART_MAP = "Smart Map"
    MASKING = "Masking"
    UPPERCASE = "Uppercase"
    DATE_FORMAT = "Date Format"
    LOOKUP = "Lookup"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text) -> "RuleKind":
        """
        Resolve a rule from its label ("Date Format"), member name
        ("DATE_FORMAT") or compact name ("DateFormat"), case-insensitively.
        """
        if isinstance(text, cls):
            return text
        if not isinstance(text, str):
            raise ValueError(f"Unknown transformation rule: {text!r}")

        key = text.replace(" ", "").replace("_", "").lower()
        for rule in cls:
            if key == rule.name.replace("_", "").lower():
                return rule
        raise ValueError(f"Unknown transformation rule: {text!r}")


@dataclass(frozen=True)
class Field:
    """Business-object attribute."""

    name: str
    code: Optional[str] = None
    type: str = "String"
    required: bool = False

    @property
    def effective_code(self) -> str:
        """Machine identifier, falling back to the display name."""
        return self.name if self.code is None else self.code


@dataclass(frozen=True)
class Column:
    """Physical-table attribute."""

    name: str
    type: str = ""
    comment: Optional[str] = None


@dataclass(frozen=True)
class MappingEntry:
    """Association of one business field with one physical column."""

    bo_field: str
    tbl_field: str
    rule: RuleKind = RuleKind.DIRECT_MAP
    score: Optional[float] = None  # only set on automatic proposals

    def to_dict(self) -> dict:
        data = {
            "bo_field": self.bo_field,
            "tbl_field": self.tbl_field,
            "rule": self.rule.label,
        }
        if self.score is not None:
            data["score"] = round(self.score, 4)
        return data
