#!/usr/bin/env python3
"""
Entry point for running bo_field_mapper as a module.

This allows running the package with: python -m bo_field_mapper
"""

from .main import main

if __name__ == "__main__":
    main()
