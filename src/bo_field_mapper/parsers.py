#!/usr/bin/env python3
"""
Parsers for field and column catalogs in bo-field-mapper.

Contains loaders for:
- YAML workspace documents (fields, columns, existing mappings)
- Field and column lists from YAML, CSV or XLSX files
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple

import pandas as pd
import yaml

from .logging_config import get_logger
from .mapping_set import MappingSet
from .models import Column, Field, MappingEntry, RuleKind
from .schema import (
    ColumnSchema,
    FieldSchema,
    validate_columns,
    validate_fields,
    validate_workspace,
)

logger = get_logger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}

# Accepted header names per attribute, matched case-insensitively
FIELD_HEADERS = {
    "name": ["name", "Field Name", "field_name", "Field"],
    "code": ["code", "Field Code", "field_code"],
    "type": ["type", "Field Type", "field_type", "Data Type"],
    "required": ["required", "Mandatory", "is_required"],
}

COLUMN_HEADERS = {
    "name": ["name", "Column Name", "column_name", "Column"],
    "type": ["type", "Column Type", "column_type", "Data Type"],
    "comment": ["comment", "Comment", "Description", "remarks"],
}


def _read_yaml(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _read_table(path: Path) -> pd.DataFrame:
    """Read a CSV or XLSX file as strings, blanks as empty strings."""
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    elif suffix == ".xlsx":
        df = pd.read_excel(path, dtype=str)
    else:
        raise ValueError(f"Unsupported file format: {path}")
    return df.fillna("")


def _resolve_headers(
    df: pd.DataFrame, header_aliases: Dict[str, List[str]], required: List[str]
) -> Dict[str, str]:
    """Map attribute names to the actual DataFrame column names."""
    actual_columns = {}
    for attribute, possible_names in header_aliases.items():
        for col in df.columns:
            if any(str(col).strip().lower() == name.lower() for name in possible_names):
                actual_columns[attribute] = col
                break

    for attribute in required:
        if attribute not in actual_columns:
            raise ValueError(
                f"Required column not found for '{attribute}'. "
                f"Available columns: {list(df.columns)}"
            )
    return actual_columns


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"true", "yes", "y", "1", "x", "mandatory"}


def _records_from_table(
    path: Path, header_aliases: Dict[str, List[str]]
) -> List[Dict[str, Any]]:
    df = _read_table(path)
    actual_columns = _resolve_headers(df, header_aliases, required=["name"])

    records = []
    for _, row in df.iterrows():
        record = {
            attribute: str(row[col]).strip() for attribute, col in actual_columns.items()
        }
        if not record["name"]:
            continue
        records.append(record)
    return records


def _field_from_schema(schema: FieldSchema) -> Field:
    return Field(
        name=schema.name, code=schema.code, type=schema.type, required=schema.required
    )


def _column_from_schema(schema: ColumnSchema) -> Column:
    return Column(name=schema.name, type=schema.type, comment=schema.comment)


def load_fields(path: Path) -> List[Field]:
    """
    Load business fields from a YAML, CSV or XLSX file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If a YAML catalog holds malformed field records
        ValueError: If a table file has an unsupported format or no name header
    """
    path = Path(path)
    if path.suffix.lower() in YAML_SUFFIXES:
        data = _read_yaml(path)
        raw = data.get("fields") if isinstance(data, dict) else data
        return [_field_from_schema(item) for item in validate_fields(raw)]

    fields = []
    for record in _records_from_table(path, FIELD_HEADERS):
        fields.append(
            Field(
                name=record["name"],
                code=record.get("code") or None,
                type=record.get("type") or "String",
                required=_parse_bool(record.get("required", False)),
            )
        )
    logger.debug(f"Loaded {len(fields)} fields from {path}")
    return fields


def load_columns(path: Path) -> List[Column]:
    """Load physical columns from a YAML, CSV or XLSX file."""
    path = Path(path)
    if path.suffix.lower() in YAML_SUFFIXES:
        data = _read_yaml(path)
        raw = data.get("columns") if isinstance(data, dict) else data
        return [_column_from_schema(item) for item in validate_columns(raw)]

    columns = []
    for record in _records_from_table(path, COLUMN_HEADERS):
        columns.append(
            Column(
                name=record["name"],
                type=record.get("type", ""),
                comment=record.get("comment") or None,
            )
        )
    logger.debug(f"Loaded {len(columns)} columns from {path}")
    return columns


def load_workspace(path: Path) -> Tuple[List[Field], List[Column], MappingSet]:
    """
    Load a workspace document.

    Expected structure:
        fields:   [{name, code, type, required}, ...]
        columns:  [{name, type, comment}, ...]
        mappings: [{bo_field, tbl_field, rule, score}, ...]   (optional)

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If the document does not match the workspace schema
    """
    path = Path(path)
    workspace = validate_workspace(_read_yaml(path))

    fields = [_field_from_schema(item) for item in workspace.fields]
    columns = [_column_from_schema(item) for item in workspace.columns]
    mapping_set = MappingSet.from_entries(
        MappingEntry(
            bo_field=item.bo_field,
            tbl_field=item.tbl_field,
            rule=RuleKind.parse(item.rule),
            score=item.score,
        )
        for item in workspace.mappings or []
    )

    logger.debug(
        f"Loaded workspace {path}: {len(fields)} fields, {len(columns)} columns, "
        f"{len(mapping_set)} existing mappings"
    )
    return fields, columns, mapping_set
