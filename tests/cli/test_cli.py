"""End-to-end tests for the `python .` entry point."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def run_cli(*args):
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        timeout=60,
    )


@pytest.mark.integration
def test_no_command_shows_help():
    """Running without a command prints usage and fails."""
    result = run_cli()
    assert result.returncode == 1
    assert "Usage: python . {command}" in result.stdout


@pytest.mark.integration
def test_unknown_command():
    """Unknown commands are reported on stderr."""
    result = run_cli("deploy")
    assert result.returncode == 1
    assert "Unknown command: deploy" in result.stderr


@pytest.mark.integration
def test_templates_list():
    """templates list prints every catalog entry."""
    result = run_cli("templates", "list")
    assert result.returncode == 0
    assert "restaurant" in result.stdout
    assert "news" in result.stdout


@pytest.mark.integration
def test_templates_build_prints_screens():
    """templates build prints personalized screens as JSON."""
    result = run_cli("templates", "build", "church", "Grace Chapel")
    assert result.returncode == 0
    screens = json.loads(result.stdout)
    assert sum(1 for s in screens if s["isHome"]) == 1


@pytest.mark.integration
def test_screens_validate_file(tmp_path):
    """screens validate reports an unsupported component type."""
    path = tmp_path / "screens.json"
    path.write_text(
        json.dumps([{"id": "s", "name": "S", "components": [{"id": "v", "type": "video"}]}]),
        encoding="utf-8",
    )
    result = run_cli("screens", "validate", str(path))
    assert result.returncode == 1
    assert "/0/components/0/type" in result.stderr
