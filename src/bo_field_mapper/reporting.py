#!/usr/bin/env python3
"""
Console reporting for bo-field-mapper commands.

Provides Rich-based output with TTY detection and JSONL output for the
map, preview and explain commands.
"""

import json
import sys
import time
from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from .explanation import explain
from .mapping_set import MappingSet
from .models import Column, Field
from .transform import TransformationEngine, preview_mapping


class MappingReporter:
    """Reporter with Rich output, TTY detection and JSONL support."""

    def __init__(self, args, command: str, console: Optional[Console] = None):
        """Initialize the reporter.

        Args:
            args: CLI arguments containing output flags
            command: The command name (map, preview or explain)
            console: Rich console to print to (defaults to stdout)
        """
        self.command = command
        self.start_time = time.time()

        self.quiet = getattr(args, "quiet", False)
        self.json_flag = getattr(args, "json", False)
        self.format_flag = getattr(args, "format", None)
        self.no_preview = getattr(args, "no_preview", False)

        self.console = console or Console()

        # Precedence: quiet > json > format > TTY detection
        if self.quiet:
            self.stdout_format = "none"
        elif self.json_flag:
            self.stdout_format = "jsonl"
        elif self.format_flag:
            self.stdout_format = self.format_flag
        else:
            self.stdout_format = "human" if sys.stdout.isatty() else "jsonl"

    def get_duration_ms(self) -> int:
        """Get elapsed time in milliseconds since reporter creation."""
        return int((time.time() - self.start_time) * 1000)

    def emit(self, event: Dict[str, Any], rows: Optional[List[Dict[str, Any]]] = None) -> None:
        """Output an event (and optional detail rows) in the configured format."""
        if "duration_ms" not in event:
            event["duration_ms"] = self.get_duration_ms()

        if self.stdout_format == "none":
            return
        if self.stdout_format == "jsonl":
            if rows is not None:
                event = {**event, "rows": rows}
            print(json.dumps(event, ensure_ascii=False, separators=(",", ":")))
            return
        self._output_human_format(event, rows)

    def _output_human_format(
        self, event: Dict[str, Any], rows: Optional[List[Dict[str, Any]]]
    ) -> None:
        if self.command == "map":
            unmapped = event.get("unmapped", [])
            color = "yellow" if unmapped else "green"
            mark = "⚠" if unmapped else "✓"
            self.console.print(
                f"[{color}]{mark}[/{color}] map  fields={event.get('total_fields', 0)}"
                f"  mapped={event.get('mapped_fields', 0)}"
                f"  proposed={event.get('proposed', 0)}"
                f"  coverage={event.get('percentage', 0)}%"
            )
            if unmapped:
                self.console.print(f"  unmapped: {', '.join(unmapped)}")
            self.console.print(f"  time: {event['duration_ms']}ms")
            if rows and not self.no_preview:
                self._output_mapping_table(rows)
        elif self.command == "preview":
            self.console.print(f"[green]✓[/green] preview  rule={event.get('rule')}")
            self.console.print(f"  sample: {event.get('sample_value')}")
            self.console.print(f"  output: {event.get('output_value')}")
        elif self.command == "explain":
            self.console.print(f"{event.get('score')}: {event.get('explanation')}")

    def _output_mapping_table(self, rows: List[Dict[str, Any]]) -> None:
        table = Table(title="Mappings")
        table.add_column("bo_field")
        table.add_column("tbl_field")
        table.add_column("rule")
        table.add_column("score")
        table.add_column("sample")
        table.add_column("output")
        table.add_column("explanation")

        for row in rows:
            score = row.get("score")
            table.add_row(
                row["bo_field"],
                row["tbl_field"],
                row["rule"],
                "" if score is None else f"{score:.3f}",
                row["sample_value"],
                row["output_value"],
                row.get("explanation", ""),
            )

        self.console.print(table)

    def log_error(self, message: str) -> None:
        """Report a command failure."""
        if self.stdout_format == "none":
            return
        if self.stdout_format == "jsonl":
            error_event = {
                "command": self.command,
                "error": message,
                "duration_ms": self.get_duration_ms(),
            }
            print(json.dumps(error_event, ensure_ascii=False, separators=(",", ":")))
        else:
            self.console.print(f"[red]✗[/red] Error: {message}")


def build_mapping_rows(
    mapping_set: MappingSet,
    columns: Sequence[Column],
    engine: Optional[TransformationEngine] = None,
) -> List[Dict[str, Any]]:
    """Per-entry preview rows: mapping, sample, output and score explanation."""
    rows = []
    for entry in mapping_set:
        preview = preview_mapping(entry, columns, engine=engine)
        row = entry.to_dict()
        row.setdefault("score", None)
        row["sample_value"] = preview.sample_value
        row["output_value"] = preview.output_value
        row["explanation"] = "" if entry.score is None else explain(entry.score)
        rows.append(row)
    return rows


def unmapped_fields(mapping_set: MappingSet, fields: Sequence[Field]) -> List[str]:
    return [field.name for field in fields if field.name not in mapping_set]
