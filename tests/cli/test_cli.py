"""Tests for the gridlayout command line."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]


def run_cli(*args: str, env: dict | None = None) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "gridlayout", *args],
        capture_output=True,
        text=True,
        cwd=ROOT,
        timeout=30,
        env=env,
    )


@pytest.fixture
def schema_file(tmp_path, github_style_schema) -> Path:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(github_style_schema.to_dict()), encoding="utf-8")
    return path


@pytest.fixture
def responsive_file(tmp_path, responsive_schema) -> Path:
    path = tmp_path / "responsive.json"
    path.write_text(json.dumps(responsive_schema.to_dict()), encoding="utf-8")
    return path


@pytest.mark.integration
def test_no_command_prints_help():
    """Running without a command shows usage and fails."""
    result = run_cli()
    assert result.returncode == 1
    assert "usage" in result.stdout.lower()


@pytest.mark.integration
def test_normalize_to_stdout(responsive_file):
    """normalize prints the inherited schema."""
    result = run_cli("normalize", str(responsive_file))
    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert [bp["name"] for bp in data["breakpoints"]] == ["mobile", "tablet", "desktop"]
    assert data["layouts"]["desktop"]["components"] == ["c1", "c2"]


@pytest.mark.integration
def test_normalize_to_file(responsive_file, tmp_path):
    """normalize -o writes the schema to a file."""
    out = tmp_path / "out.json"
    result = run_cli("normalize", str(responsive_file), "-o", str(out))
    assert result.returncode == 0
    assert "tablet" in json.loads(out.read_text(encoding="utf-8"))["layouts"]


@pytest.mark.integration
def test_validate_valid(schema_file):
    """validate exits 0 for a valid schema."""
    result = run_cli("validate", str(schema_file))
    assert result.returncode == 0
    assert result.stdout.strip().splitlines()[-1] == "valid"


@pytest.mark.integration
def test_validate_invalid(responsive_file):
    """validate exits 1 and lists errors for missing layouts."""
    result = run_cli("validate", str(responsive_file))
    assert result.returncode == 1
    assert "MISSING_LAYOUT" in result.stdout
    assert result.stdout.strip().endswith("invalid")


@pytest.mark.integration
def test_grid_report(schema_file):
    """grid reports minimum size and an unsafe resize."""
    result = run_cli("grid", str(schema_file), "desktop", "--rows", "6")
    assert result.returncode == 0
    report = json.loads(result.stdout)
    assert report["minimum"] == {"rows": 8, "cols": 12}
    assert report["compaction"] == {"rows": 0, "cols": 0}
    assert report["resize"]["safe"] is False
    assert {item["id"] for item in report["resize"]["affected"]} == {"sidebar", "main"}


@pytest.mark.integration
def test_grid_unknown_breakpoint(schema_file):
    """grid fails for an unknown breakpoint."""
    result = run_cli("grid", str(schema_file), "watch")
    assert result.returncode == 1


@pytest.mark.integration
def test_place_footer(schema_file):
    """place returns a rectangle for the new component."""
    result = run_cli("place", str(schema_file), "desktop", "footer")
    assert result.returncode == 0
    assert json.loads(result.stdout) == {"x": 0, "y": 7, "width": 12, "height": 1}


@pytest.mark.integration
def test_missing_file(tmp_path):
    """Unreadable input is logged and fails."""
    result = run_cli("validate", str(tmp_path / "nope.json"))
    assert result.returncode == 1
    assert "Cannot read" in result.stderr


@pytest.mark.integration
def test_malformed_json(tmp_path):
    """Invalid JSON is logged and fails."""
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")
    result = run_cli("normalize", str(path))
    assert result.returncode == 1
    assert "not valid JSON" in result.stderr


@pytest.mark.integration
def test_snap_uses_environment():
    """snap reads its configuration from the environment."""
    env = dict(os.environ)
    env["GRIDLAYOUT_SNAP_THRESHOLD"] = "10"
    env["GRIDLAYOUT_SNAP_ENABLED"] = "true"
    env["GRIDLAYOUT_CELL_WIDTH"] = "50"
    env["GRIDLAYOUT_CELL_HEIGHT"] = "50"
    result = run_cli("snap", "245", "123", env=env)
    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert (data["x"], data["y"], data["snapped"]) == (5, 2, True)
    assert data["guides"] == [{"axis": "vertical", "position": 250.0}]

    env["GRIDLAYOUT_SNAP_ENABLED"] = "false"
    data = json.loads(run_cli("snap", "245", "123", env=env).stdout)
    assert (data["x"], data["snapped"], data["guides"]) == (4, False, [])
