#!/usr/bin/env python3
"""
Command runners for bo-field-mapper.

Wires the loaders, auto-mapper, transformation engine and reporter
together for the map, preview and explain commands.
"""

import sys
from pathlib import Path

from .cli import setup_cli
from .explanation import explain
from .logging_config import get_logger, setup_logging
from .mapping_set import MappingSet, mapping_stats
from .matcher import AutoMapper
from .models import RuleKind
from .parsers import load_columns, load_fields, load_workspace
from .reporting import MappingReporter, build_mapping_rows, unmapped_fields
from .samples import sample_value
from .schema import ValidationError
from .transform import apply_rule

logger = get_logger(__name__)


def run_map_command(args, config) -> int:
    """Propose mappings for a workspace and report them."""
    reporter = MappingReporter(args, "map")

    if not args.workspace and not (args.fields and args.columns):
        reporter.log_error("Provide --workspace or both --fields and --columns")
        return 1

    try:
        if args.workspace:
            fields, columns, existing = load_workspace(Path(args.workspace))
        else:
            fields, columns, existing = [], [], MappingSet()
        # Explicit catalog files override the workspace sections
        if args.fields:
            fields = load_fields(Path(args.fields))
        if args.columns:
            columns = load_columns(Path(args.columns))
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.debug(f"{args.command} failed: {e}")
        reporter.log_error(str(e))
        return 1

    mapper = AutoMapper(config.build_matcher_config())
    mapping_set = mapper.propose_mappings(fields, columns, existing)
    stats = mapping_stats(mapping_set, fields)

    event = {
        "command": "map",
        "total_fields": stats.total_fields,
        "mapped_fields": stats.mapped_fields,
        "percentage": stats.percentage,
        "proposed": len(mapping_set) - len(existing),
        "unmapped": unmapped_fields(mapping_set, fields),
    }
    reporter.emit(event, build_mapping_rows(mapping_set, columns))
    return 0


def run_preview_command(args, config) -> int:
    """Apply one rule to an explicit or type-derived sample value."""
    reporter = MappingReporter(args, "preview")

    try:
        rule = RuleKind.parse(args.rule)
    except ValueError as e:
        logger.debug(f"{args.command} failed: {e}")
        reporter.log_error(str(e))
        return 1

    sample = args.value if args.value is not None else sample_value(args.type)
    reporter.emit(
        {
            "command": "preview",
            "rule": rule.label,
            "sample_value": sample,
            "output_value": apply_rule(rule, sample),
        }
    )
    return 0


def run_explain_command(args, config) -> int:
    reporter = MappingReporter(args, "explain")
    reporter.emit(
        {"command": "explain", "score": args.score, "explanation": explain(args.score)}
    )
    return 0


COMMANDS = {
    "map": run_map_command,
    "preview": run_preview_command,
    "explain": run_explain_command,
}


def main(argv=None) -> None:
    """Main entry point for the application."""
    args, config, parser = setup_cli(argv)

    # Keep stdout clean for JSONL consumers
    setup_logging(config.log_level, stream=sys.stderr)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    sys.exit(COMMANDS[args.command](args, config))


if __name__ == "__main__":
    main()
