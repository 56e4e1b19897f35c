#!/usr/bin/env python3
"""
CLI parsing and argument handling for bo-field-mapper.

Contains all CLI parsing and argument handling including:
- argparse setup and configuration
- subcommands definition (map, preview, explain)
- help and version handling
"""

import argparse

from . import __version__
from .config_loader import load_config
from .models import RuleKind


def non_negative_float(value: str) -> float:
    """argparse type for thresholds and boosts, bounded like config.yaml values."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return number


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json", action="store_true", help="Force JSONL output to stdout"
    )
    parser.add_argument(
        "--format",
        choices=["human", "jsonl"],
        help="Output format (overrides TTY detection)",
    )
    parser.add_argument("--quiet", action="store_true", help="No stdout output")


def build_parser(config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bo-field-mapper",
        description="BO Field Mapper - Semantic field-to-column mapping and transformation preview",
    )
    parser.add_argument(
        "--version", action="version", version=f"bo-field-mapper {__version__}"
    )
    parser.add_argument(
        "--config", type=str, help="Path to config.yaml (default: ./config/config.yaml)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help=f"Logging level (default from config: {config.log_level})",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Map subcommand
    map_parser = subparsers.add_parser(
        "map", help="Propose mappings from business fields to table columns"
    )
    map_parser.add_argument(
        "--workspace",
        type=str,
        help="YAML workspace with fields, columns and existing mappings",
    )
    map_parser.add_argument(
        "--fields", type=str, help="Business fields file (YAML, CSV or XLSX)"
    )
    map_parser.add_argument(
        "--columns", type=str, help="Table columns file (YAML, CSV or XLSX)"
    )
    map_parser.add_argument(
        "--threshold",
        type=non_negative_float,
        help=f"Fuzzy match threshold (default: {config.match_threshold})",
    )
    map_parser.add_argument(
        "--boost-increment",
        type=non_negative_float,
        help=f"Score boost per shared concept (default: {config.boost_increment})",
    )
    map_parser.add_argument(
        "--no-code-match",
        action="store_true",
        help="Only compare field names (not codes) in the exact pass",
    )
    map_parser.add_argument(
        "--no-preview", action="store_true", help="Suppress mapping table in human mode"
    )
    _add_output_flags(map_parser)

    # Preview subcommand
    preview_parser = subparsers.add_parser(
        "preview", help="Apply a transformation rule to a sample value"
    )
    preview_parser.add_argument(
        "--rule",
        required=True,
        help="Rule to apply ({})".format(", ".join(rule.label for rule in RuleKind)),
    )
    source = preview_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--value", type=str, help="Sample value to transform")
    source.add_argument(
        "--type", type=str, help="Column type to derive a sample value from"
    )
    _add_output_flags(preview_parser)

    # Explain subcommand
    explain_parser = subparsers.add_parser(
        "explain", help="Explain a mapping confidence score"
    )
    explain_parser.add_argument("--score", type=float, required=True, help="Score")
    _add_output_flags(explain_parser)

    return parser


def setup_cli(argv=None):
    """Parse arguments and load configuration. Returns (args, config, parser)."""
    # Pre-parse --config so the defaults shown in help come from the right file
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--config", type=str)
    pre_args, _ = pre_parser.parse_known_args(argv)

    config = load_config(pre_args.config)
    parser = build_parser(config)
    args = parser.parse_args(argv)
    config.merge_with_cli_args(args)
    return args, config, parser
