#!/usr/bin/env python3
"""
BO Field Mapper - Semantic Field Mapping and Transformation Preview

Proposes mappings from business-object fields to physical-table columns
using edit-distance similarity and a semantic variation lexicon, and
previews the output of value-transformation rules.

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "BO Field Mapper Team"
__description__ = "Semantic field-to-column mapping for data governance"

from .explanation import explain
from .fuzzy import similarity
from .mapping_set import MappingSet, MappingStats, mapping_stats, set_mapping
from .matcher import AutoMapper, MatcherConfig, propose_mappings, seed_mapping_set
from .models import Column, Field, MappingEntry, RuleKind
from .samples import sample_value
from .synonym import SemanticVariationLexicon
from .transform import (
    TransformationEngine,
    TransformationPreview,
    apply_rule,
    preview_mapping,
)

__all__ = [
    "AutoMapper",
    "Column",
    "Field",
    "MappingEntry",
    "MappingSet",
    "MappingStats",
    "MatcherConfig",
    "RuleKind",
    "SemanticVariationLexicon",
    "TransformationEngine",
    "TransformationPreview",
    "apply_rule",
    "explain",
    "mapping_stats",
    "preview_mapping",
    "propose_mappings",
    "sample_value",
    "seed_mapping_set",
    "set_mapping",
    "similarity",
]
