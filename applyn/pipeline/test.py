"""Unit tests for the instantiation and reload pipelines."""

import json

import pytest

from applyn.config import EditorLimits
from applyn.editor import EditorScreensError
from applyn.pipeline import instantiate_from_template, load_editor_screens


class TestInstantiateFromTemplate:
    """Tests for instantiate_from_template."""

    @pytest.mark.unit
    def test_builds_validated_payload(self):
        screens = instantiate_from_template("ecommerce", "Acme")
        assert screens[0]["isHome"] is True
        assert screens[0]["components"][0]["props"]["title"] == "Acme"
        assert all(s["id"].startswith("screen_") for s in screens)

    @pytest.mark.unit
    def test_unknown_template(self):
        assert instantiate_from_template("nope", "Acme") is None

    @pytest.mark.unit
    def test_limits_are_enforced(self):
        with pytest.raises(EditorScreensError, match="Invalid editor screens at editorScreens"):
            instantiate_from_template("ecommerce", "Acme", EditorLimits(max_nodes=5))


class TestLoadEditorScreens:
    """Tests for load_editor_screens."""

    @pytest.mark.unit
    def test_migrates_then_validates(self, legacy_screens):
        result = load_editor_screens(legacy_screens)
        assert result.did_migrate
        spacer, box = result.screens[0]["components"]
        assert spacer["props"]["height"] == "var(--space-24)"
        assert box["props"] == {"padding": "var(--space-16)", "gap": "var(--space-0)"}
        assert box["children"][0]["props"]["padding"] == "var(--space-48)"

    @pytest.mark.unit
    def test_input_not_mutated(self, legacy_screens):
        load_editor_screens(legacy_screens)
        assert legacy_screens[0]["components"][0]["props"]["height"] == 20

    @pytest.mark.unit
    def test_clean_payload(self, sample_screens):
        result = load_editor_screens(sample_screens)
        assert not result.did_migrate
        assert result.screens == sample_screens

    @pytest.mark.unit
    def test_nothing_stored(self):
        result = load_editor_screens(None)
        assert result.screens is None
        assert not result.did_migrate

    @pytest.mark.unit
    def test_unmigratable_value_rejected(self):
        raw = [{"id": "s", "name": "S", "components": [{"id": "g", "type": "grid", "props": {"gap": "12px"}}]}]
        with pytest.raises(EditorScreensError, match="0.components.0.props.gap"):
            load_editor_screens(raw)

    @pytest.mark.unit
    def test_unsupported_types_named(self):
        raw = [{"id": "s", "name": "S", "components": [{"id": "v", "type": "video"}]}]
        with pytest.raises(EditorScreensError, match="Unsupported component type\\(s\\): video"):
            load_editor_screens(raw)

    @pytest.mark.unit
    def test_huge_integer_reported_not_raised(self):
        """Out-of-range numbers surface as a spacing error, not a crash."""
        huge = json.loads("1" + "0" * 400)
        raw = [{"id": "s", "name": "S", "components": [{"id": "c", "type": "container", "props": {"padding": huge}}]}]
        with pytest.raises(EditorScreensError, match="0.components.0.props.padding"):
            load_editor_screens(raw)
