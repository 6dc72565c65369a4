"""Unit tests for CLI command handlers."""

import json
import logging

import pytest

from applyn.cli import (
    handle_blueprint_command,
    handle_screens_command,
    handle_templates_command,
)


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


class TestTemplatesCommand:
    """Tests for `python . templates`."""

    @pytest.mark.unit
    def test_no_args_prints_help(self, capsys):
        assert handle_templates_command([]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    @pytest.mark.unit
    def test_list(self, capsys):
        assert handle_templates_command(["list"]) == 0
        out = capsys.readouterr().out
        assert "ecommerce" in out
        assert len(out.strip().splitlines()) == 13

    @pytest.mark.unit
    def test_show(self, capsys):
        assert handle_templates_command(["show", "salon"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["id"] == "salon"
        assert data["screens"][0]["isHome"] is True

    @pytest.mark.unit
    def test_show_unknown(self, caplog):
        with caplog.at_level(logging.INFO, logger="cli"):
            assert handle_templates_command(["show", "bakery"]) == 1
        assert "Unknown template: bakery" in caplog.text

    @pytest.mark.unit
    def test_build_to_file(self, tmp_path):
        output = tmp_path / "screens.json"
        assert handle_templates_command(["build", "ecommerce", "Acme", "-o", str(output)]) == 0
        screens = json.loads(output.read_text(encoding="utf-8"))
        assert screens[0]["components"][0]["props"]["title"] == "Acme"

    @pytest.mark.unit
    def test_build_unknown(self):
        assert handle_templates_command(["build", "bakery", "Acme"]) == 1

    @pytest.mark.unit
    def test_lint(self, caplog):
        with caplog.at_level(logging.INFO, logger="cli"):
            assert handle_templates_command(["lint"]) == 0
        assert "Template validation passed (13 templates)" in caplog.text


class TestScreensCommand:
    """Tests for `python . screens`."""

    @pytest.mark.unit
    def test_validate_ok(self, write_json, sample_screens, caplog):
        path = write_json("screens.json", sample_screens)
        with caplog.at_level(logging.INFO, logger="cli"):
            assert handle_screens_command(["validate", str(path)]) == 0
        assert "2 screens, 6 components, home=home" in caplog.text

    @pytest.mark.unit
    def test_validate_reports_pointer(self, write_json, legacy_screens, caplog):
        path = write_json("legacy.json", legacy_screens)
        with caplog.at_level(logging.INFO, logger="cli"):
            assert handle_screens_command(["validate", str(path)]) == 1
        assert "/0/components/0/props/height" in caplog.text

    @pytest.mark.unit
    def test_validate_missing_file(self, tmp_path):
        assert handle_screens_command(["validate", str(tmp_path / "missing.json")]) == 1

    @pytest.mark.unit
    def test_validate_bad_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert handle_screens_command(["validate", str(path)]) == 1

    @pytest.mark.unit
    def test_migrate_preview(self, write_json, legacy_screens, capsys):
        path = write_json("legacy.json", legacy_screens)
        assert handle_screens_command(["migrate", str(path)]) == 0
        migrated = json.loads(capsys.readouterr().out)
        assert migrated[0]["components"][0]["props"]["height"] == "var(--space-24)"
        # preview leaves the file alone
        assert json.loads(path.read_text(encoding="utf-8")) == legacy_screens

    @pytest.mark.unit
    def test_migrate_write(self, write_json, legacy_screens):
        path = write_json("legacy.json", legacy_screens)
        assert handle_screens_command(["migrate", str(path), "--write"]) == 0
        migrated = json.loads(path.read_text(encoding="utf-8"))
        assert migrated[0]["components"][1]["props"]["padding"] == "var(--space-16)"


class TestBlueprintCommand:
    """Tests for `python . blueprint`."""

    @pytest.mark.unit
    def test_convert(self, write_json, sample_blueprint, tmp_path):
        path = write_json("blueprint.json", sample_blueprint)
        output = tmp_path / "out.json"
        assert handle_blueprint_command(["convert", str(path), "-o", str(output)]) == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [s["id"] for s in data["screens"]] == ["home", "cart", "orders", "account"]
        assert data["patch"]["name"] == "Green Grocer"

    @pytest.mark.unit
    def test_convert_invalid(self, write_json, sample_blueprint):
        del sample_blueprint["screens"]
        path = write_json("blueprint.json", sample_blueprint)
        assert handle_blueprint_command(["convert", str(path)]) == 1
