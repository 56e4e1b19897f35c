#!/usr/bin/env python3
"""
Representative sample values for transformation previews.

Used only to seed a preview when no real sample value is available.
"""

# Checked in order; the first marker contained in the type wins
SAMPLE_VALUES = (
    ("int", "1001"),
    ("date", "2023-10-01 12:00:00"),
    ("phone", "13812345678"),
    ("email", "zhang@test.com"),
)

GENERIC_SAMPLE = "sample_data"


def sample_value(column_type: str) -> str:
    """Sample value for a physical column type string such as 'varchar(32)'."""
    column_type = (column_type or "").lower()
    for marker, value in SAMPLE_VALUES:
        if marker in column_type:
            return value
    return GENERIC_SAMPLE
