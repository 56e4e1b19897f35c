#!/usr/bin/env python3
"""
Basic tests for bo-field-mapper CLI functionality.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import yaml

SRC_DIR = Path(__file__).parent.parent / "src"


def run_cli(*args, cwd=None):
    env = {**os.environ, "PYTHONPATH": str(SRC_DIR)}
    return subprocess.run(
        [sys.executable, "-m", "bo_field_mapper", *args],
        capture_output=True,
        text=True,
        cwd=cwd or Path(__file__).parent.parent,
        env=env,
    )


def json_events(stdout):
    return [json.loads(line) for line in stdout.splitlines() if line.strip()]


def test_cli_help():
    """Test that the CLI help command works."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "BO Field Mapper" in result.stdout
    assert "map" in result.stdout
    assert "preview" in result.stdout
    assert "explain" in result.stdout


def test_missing_command():
    """Test that missing command shows help and exits with code 1."""
    result = run_cli()
    assert result.returncode == 1
    assert "BO Field Mapper" in result.stdout


def test_map_command_jsonl(tmp_path):
    workspace = tmp_path / "workspace.yaml"
    workspace.write_text(
        yaml.safe_dump(
            {
                "fields": [
                    {"name": "name", "code": "name"},
                    {"name": "ID"},
                    {"name": "amount"},
                ],
                "columns": [
                    {"name": "p_name", "type": "varchar(50)"},
                    {"name": "id", "type": "bigint"},
                    {"name": "status", "type": "tinyint"},
                ],
            }
        ),
        encoding="utf-8",
    )

    result = run_cli("map", "--workspace", str(workspace), "--json", cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    events = json_events(result.stdout)
    assert len(events) == 1
    event = events[0]
    assert event["total_fields"] == 3
    assert event["mapped_fields"] == 2
    assert event["percentage"] == 67
    assert event["unmapped"] == ["amount"]

    rows = {row["bo_field"]: row for row in event["rows"]}
    assert rows["name"]["tbl_field"] == "p_name"
    assert rows["name"]["rule"] == "Smart Map"
    assert rows["name"]["explanation"] == "near-exact name match, very high confidence"
    assert rows["ID"]["rule"] == "Direct Map"
    assert rows["ID"]["score"] is None
    assert rows["ID"]["sample_value"] == "1001"


def test_map_command_missing_workspace(tmp_path):
    result = run_cli(
        "map", "--workspace", str(tmp_path / "missing.yaml"), "--json", cwd=tmp_path
    )
    assert result.returncode == 1
    assert "File not found" in json_events(result.stdout)[0]["error"]


def test_map_command_requires_inputs(tmp_path):
    result = run_cli("map", "--json", cwd=tmp_path)
    assert result.returncode == 1


def test_map_command_human_format(tmp_path):
    fields = tmp_path / "fields.csv"
    fields.write_text("name\nname\n", encoding="utf-8")
    columns = tmp_path / "columns.csv"
    columns.write_text("name,type\np_name,varchar(50)\n", encoding="utf-8")

    result = run_cli(
        "map", "--fields", str(fields), "--columns", str(columns),
        "--format", "human", cwd=tmp_path,
    )

    assert result.returncode == 0, result.stderr
    assert "mapped=1" in result.stdout
    assert "p_name" in result.stdout


def test_preview_command_with_value(tmp_path):
    result = run_cli(
        "preview", "--rule", "Masking", "--value", "zhang@test.com", "--json", cwd=tmp_path
    )
    assert result.returncode == 0
    event = json_events(result.stdout)[0]
    assert event["output_value"] == "zh***@test.com"


def test_preview_command_with_type(tmp_path):
    result = run_cli(
        "preview", "--rule", "DateFormat", "--type", "datetime", "--json", cwd=tmp_path
    )
    event = json_events(result.stdout)[0]
    assert event["sample_value"] == "2023-10-01 12:00:00"
    assert event["output_value"] == "2023-10-01"


def test_preview_command_unknown_rule(tmp_path):
    result = run_cli("preview", "--rule", "Hash", "--value", "x", "--json", cwd=tmp_path)
    assert result.returncode == 1
    assert "Unknown transformation rule" in json_events(result.stdout)[0]["error"]


def test_explain_command(tmp_path):
    result = run_cli("explain", "--score", "0.85", "--json", cwd=tmp_path)
    assert result.returncode == 0
    event = json_events(result.stdout)[0]
    assert event["explanation"] == "high semantic similarity, consistent sampled type"


def test_threshold_override(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("match_threshold: 0.99\n", encoding="utf-8")
    workspace = tmp_path / "workspace.yaml"
    workspace.write_text(
        yaml.safe_dump({"fields": [{"name": "name"}], "columns": [{"name": "p_name"}]}),
        encoding="utf-8",
    )

    strict = json_events(
        run_cli("map", "--workspace", str(workspace), "--json", cwd=tmp_path).stdout
    )[0]
    relaxed = json_events(
        run_cli(
            "map", "--workspace", str(workspace), "--threshold", "0.6", "--json", cwd=tmp_path
        ).stdout
    )[0]

    assert strict["mapped_fields"] == 0
    assert relaxed["mapped_fields"] == 1


def test_map_command_malformed_yaml_catalog(tmp_path):
    fields = tmp_path / "fields.yaml"
    fields.write_text("fields:\n  - name\n  - id\n", encoding="utf-8")
    columns = tmp_path / "columns.yaml"
    columns.write_text("columns:\n  - name: p_name\n", encoding="utf-8")

    result = run_cli(
        "map", "--fields", str(fields), "--columns", str(columns), "--json", cwd=tmp_path
    )

    assert result.returncode == 1
    assert "Traceback" not in result.stderr
    event = json_events(result.stdout)[0]
    assert "Field catalog validation failed" in event["error"]


def test_map_command_rejects_negative_boost(tmp_path):
    result = run_cli("map", "--workspace", "w.yaml", "--boost-increment", "-0.3", cwd=tmp_path)
    assert result.returncode == 2
    assert "must be >= 0" in result.stderr


def test_map_rows_carry_rounded_scores(tmp_path):
    workspace = tmp_path / "workspace.yaml"
    workspace.write_text(
        yaml.safe_dump({"fields": [{"name": "name"}], "columns": [{"name": "p_name"}]}),
        encoding="utf-8",
    )

    result = run_cli("map", "--workspace", str(workspace), "--json", cwd=tmp_path)

    row = json_events(result.stdout)[0]["rows"][0]
    assert row["score"] == 0.9667
