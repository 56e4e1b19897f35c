#!/usr/bin/env python3
"""
Schema validation for YAML and JSON input documents.

This module provides Pydantic models for validating:
- config.yaml: Matcher configuration
- workspace files: business fields, physical columns and existing mappings
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .models import RuleKind


class ValidationError(Exception):
    """Custom validation error for clearer error messages."""

    pass


class ConfigSchema(BaseModel):
    """Schema for config.yaml."""

    match_threshold: float = Field(default=0.6, ge=0.0)
    boost_increment: float = Field(default=0.3, ge=0.0)
    exact_match_on_code: bool = True
    synonyms: dict[str, list[str]] | None = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log_level is a standard logging level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level


class FieldSchema(BaseModel):
    """Schema for a business-object field."""

    name: str
    code: str | None = None
    type: str = "String"
    required: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that the field name is not empty."""
        if not v:
            raise ValueError("field name cannot be empty")
        return v


class ColumnSchema(BaseModel):
    """Schema for a physical-table column."""

    name: str
    type: str = ""
    comment: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that the column name is not empty."""
        if not v:
            raise ValueError("column name cannot be empty")
        return v


class MappingEntrySchema(BaseModel):
    """Schema for one entry of an existing mapping set."""

    bo_field: str
    tbl_field: str
    rule: str = RuleKind.DIRECT_MAP.label
    score: float | None = None

    @field_validator("rule")
    @classmethod
    def validate_rule(cls, v: str) -> str:
        """Validate the rule names a known transformation."""
        return RuleKind.parse(v).label


class WorkspaceSchema(BaseModel):
    """Schema for a mapping workspace document."""

    fields: list[FieldSchema] = []
    columns: list[ColumnSchema] = []
    mappings: list[MappingEntrySchema] | None = None

    @field_validator("columns")
    @classmethod
    def validate_unique_columns(cls, v: list[ColumnSchema]) -> list[ColumnSchema]:
        """Validate that column names are unique within the table."""
        names = [column.name for column in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate column names: {', '.join(duplicates)}")
        return v


def validate_config(data: dict[str, Any]) -> ConfigSchema:
    """
    Validate config.yaml data.

    Args:
        data: Dictionary containing config data

    Returns:
        Validated ConfigSchema instance

    Raises:
        ValidationError: If validation fails
    """
    try:
        return ConfigSchema(**data)
    except Exception as e:
        raise ValidationError(f"Config validation failed: {e}") from e


def validate_workspace(data: dict[str, Any]) -> WorkspaceSchema:
    """
    Validate a workspace document.

    Args:
        data: Dictionary with fields, columns and optional mappings

    Returns:
        Validated WorkspaceSchema instance

    Raises:
        ValidationError: If validation fails
    """
    try:
        return WorkspaceSchema(**data)
    except Exception as e:
        raise ValidationError(f"Workspace validation failed: {e}") from e


def validate_fields(data: Any) -> list[FieldSchema]:
    """
    Validate a list of field records from a catalog file.

    An empty or missing section is an empty catalog.

    Raises:
        ValidationError: If an item is not a field mapping or fails validation
    """
    try:
        return WorkspaceSchema(fields=data or []).fields
    except Exception as e:
        raise ValidationError(f"Field catalog validation failed: {e}") from e


def validate_columns(data: Any) -> list[ColumnSchema]:
    """
    Validate a list of column records from a catalog file.

    Raises:
        ValidationError: If an item is not a column mapping or fails validation
    """
    try:
        return WorkspaceSchema(columns=data or []).columns
    except Exception as e:
        raise ValidationError(f"Column catalog validation failed: {e}") from e
