"""Unit tests for editor models and validation."""

import pytest

from applyn.config import EditorLimits
from applyn.editor import (
    EditorComponent,
    EditorScreen,
    EditorScreensError,
    ValidationIssue,
    check_payload_size,
    count_nodes,
    resolve_home_screen,
    validate_editor_component,
    validate_editor_screens,
    validate_editor_screens_or_raise,
)


def _flat_screens(total: int, per_screen: int = 1000) -> list[dict]:
    """Build screens holding `total` leaf text components."""
    screens = []
    remaining = total
    index = 0
    while remaining > 0:
        count = min(per_screen, remaining)
        screens.append(
            {
                "id": f"s{index}",
                "name": f"Screen {index}",
                "components": [
                    {"id": f"c{index}_{i}", "type": "text", "props": {"text": "x"}}
                    for i in range(count)
                ],
            }
        )
        remaining -= count
        index += 1
    return screens


def _nested(depth: int) -> dict:
    """Build a single-child chain `depth` levels deep."""
    node = {"id": f"n{depth}", "type": "container", "props": {}}
    for level in range(depth - 1, 0, -1):
        node = {"id": f"n{level}", "type": "container", "props": {}, "children": [node]}
    return node


class TestValidateEditorComponent:
    """Tests for single component validation."""

    @pytest.mark.unit
    def test_valid_tree(self, sample_component):
        result = validate_editor_component(sample_component)
        assert result.ok
        assert isinstance(result.value, EditorComponent)
        assert result.value.children[0].type.value == "grid"

    @pytest.mark.unit
    def test_props_default_to_empty(self):
        result = validate_editor_component({"id": "d1", "type": "divider"})
        assert result.ok
        assert result.value.props == {}
        assert result.value.to_dict() == {"id": "d1", "type": "divider", "props": {}}

    @pytest.mark.unit
    def test_unknown_type_rejected(self):
        """Allowlist is fail-closed regardless of otherwise-valid content."""
        result = validate_editor_component(
            {
                "id": "x",
                "type": "not-a-real-type",
                "props": {"padding": "var(--space-8)"},
                "children": [{"id": "y", "type": "text", "props": {}}],
            }
        )
        assert not result.ok
        assert [i.path for i in result.issues] == [("type",)]

    @pytest.mark.unit
    def test_unknown_type_in_children_rejected(self):
        result = validate_editor_component(
            {"id": "x", "type": "section", "children": [{"id": "y", "type": "iframe"}]}
        )
        assert not result.ok
        assert result.issues[0].path == ("children", 0, "type")

    @pytest.mark.unit
    def test_spacer_height_raw_px_rejected(self):
        result = validate_editor_component(
            {"id": "sp", "type": "spacer", "props": {"height": "32px"}}
        )
        assert not result.ok
        assert len(result.issues) == 1
        assert result.issues[0].path == ("props", "height")
        assert result.issues[0].code == "invalid_spacing_token"

    @pytest.mark.unit
    def test_spacer_height_token_accepted(self):
        result = validate_editor_component(
            {"id": "sp", "type": "spacer", "props": {"height": "var(--space-32)"}}
        )
        assert result.ok

    @pytest.mark.unit
    def test_height_not_checked_outside_spacers(self):
        result = validate_editor_component(
            {"id": "h", "type": "hero", "props": {"height": 280}}
        )
        assert result.ok

    @pytest.mark.unit
    def test_each_spacing_violation_reported(self):
        result = validate_editor_component(
            {
                "id": "c",
                "type": "container",
                "props": {"padding": 16, "gap": "12px"},
                "children": [
                    {"id": "sp", "type": "spacer", "props": {"height": 8, "gap": None}},
                ],
            }
        )
        assert [i.path for i in result.issues] == [
            ("props", "padding"),
            ("props", "gap"),
            ("children", 0, "props", "height"),
        ]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "data",
        [
            {"id": "", "type": "text"},
            {"id": "x" * 201, "type": "text"},
            {"id": 5, "type": "text"},
            {"type": "text"},
            {"id": "a", "type": "text", "props": "nope"},
            "not-a-component",
        ],
    )
    def test_shape_errors(self, data):
        assert not validate_editor_component(data).ok

    @pytest.mark.unit
    def test_extremely_deep_chain_reported(self):
        """Chains past pydantic-core's recursion guard fail as issues."""
        node = {"id": "leaf", "type": "text"}
        for i in range(3000):
            node = {"id": f"n{i}", "type": "container", "children": [node]}
        result = validate_editor_component(node)
        assert not result.ok
        assert "recursion_loop" in [i.code for i in result.issues]

    @pytest.mark.unit
    def test_unknown_keys_dropped(self):
        result = validate_editor_component({"id": "a", "type": "text", "style": {}})
        assert "style" not in result.value.to_dict()


class TestValidateEditorScreens:
    """Tests for collection validation."""

    @pytest.mark.unit
    def test_valid_screens(self, sample_screens):
        result = validate_editor_screens(sample_screens)
        assert result.ok
        assert all(isinstance(s, EditorScreen) for s in result.value)
        assert result.value[0].is_home is True

    @pytest.mark.unit
    def test_screen_defaults(self):
        result = validate_editor_screens([{"id": "s", "name": "Menu"}])
        assert result.ok
        screen = result.value[0]
        assert screen.icon == "file-text"
        assert screen.components == []
        assert screen.to_dict() == {
            "id": "s",
            "name": "Menu",
            "icon": "file-text",
            "components": [],
        }

    @pytest.mark.unit
    def test_none_means_no_screens(self):
        result = validate_editor_screens(None)
        assert result.ok
        assert result.value is None

    @pytest.mark.unit
    def test_non_list_rejected(self):
        result = validate_editor_screens({"screens": []})
        assert not result.ok
        assert result.issues[0].path == ()

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "screen",
        [
            {"id": "s", "name": ""},
            {"id": "s", "name": "x" * 81},
            {"id": "s", "name": "Home", "icon": "x" * 21},
            {"id": "s", "name": "Home", "isHome": "true"},
        ],
    )
    def test_screen_field_errors(self, screen):
        assert not validate_editor_screens([screen]).ok

    @pytest.mark.unit
    def test_issue_paths_are_absolute(self):
        screens = [
            {"id": "a", "name": "A", "components": []},
            {
                "id": "b",
                "name": "B",
                "components": [
                    {"id": "ok", "type": "text"},
                    {"id": "g", "type": "grid", "props": {"gap": 12}},
                ],
            },
        ]
        result = validate_editor_screens(screens)
        assert [i.path for i in result.issues] == [(1, "components", 1, "props", "gap")]
        assert result.issues[0].pointer == "/1/components/1/props/gap"

    @pytest.mark.unit
    def test_exactly_max_nodes_accepted(self):
        assert validate_editor_screens(_flat_screens(5000)).ok

    @pytest.mark.unit
    def test_over_max_nodes_rejected(self):
        result = validate_editor_screens(_flat_screens(5001))
        assert len(result.issues) == 1
        assert result.issues[0].path == ()
        assert result.issues[0].code == "payload_too_large"

    @pytest.mark.unit
    def test_too_many_screens(self):
        screens = [{"id": f"s{i}", "name": "S"} for i in range(51)]
        result = validate_editor_screens(screens)
        assert [i.code for i in result.issues] == ["too_many_screens"]

    @pytest.mark.unit
    def test_depth_limit(self):
        ok = [{"id": "s", "name": "S", "components": [_nested(30)]}]
        deep = [{"id": "s", "name": "S", "components": [_nested(31)]}]
        assert validate_editor_screens(ok).ok
        result = validate_editor_screens(deep)
        assert [i.code for i in result.issues] == ["payload_too_deep"]

    @pytest.mark.unit
    def test_custom_limits(self):
        limits = EditorLimits(max_screens=50, max_nodes=2, max_depth=30)
        assert check_payload_size(_flat_screens(2), limits) is None
        assert check_payload_size(_flat_screens(3), limits).code == "payload_too_large"


class TestValidateOrRaise:
    """Tests for the raising entry point."""

    @pytest.mark.unit
    def test_returns_payload(self, sample_screens):
        payload = validate_editor_screens_or_raise(sample_screens)
        assert payload == sample_screens

    @pytest.mark.unit
    def test_names_unsupported_types(self):
        screens = [
            {
                "id": "s",
                "name": "S",
                "components": [{"id": "a", "type": "video"}, {"id": "b", "type": "gallery"}],
            }
        ]
        with pytest.raises(EditorScreensError, match="Unsupported component type\\(s\\): gallery, video"):
            validate_editor_screens_or_raise(screens)

    @pytest.mark.unit
    def test_reports_first_issue_path(self):
        screens = [{"id": "s", "name": "S", "components": [{"id": "a", "type": "text", "props": {"padding": 3}}]}]
        with pytest.raises(EditorScreensError) as exc_info:
            validate_editor_screens_or_raise(screens)
        assert "0.components.0.props.padding" in str(exc_info.value)
        assert exc_info.value.issues

    @pytest.mark.unit
    def test_collection_issue_uses_generic_location(self):
        with pytest.raises(EditorScreensError, match="at editorScreens"):
            validate_editor_screens_or_raise("nope")


class TestHelpers:
    """Tests for tree helpers."""

    @pytest.mark.unit
    def test_count_nodes(self, sample_screens):
        screens = validate_editor_screens(sample_screens).value
        assert count_nodes(screens) == 6

    @pytest.mark.unit
    def test_issue_pointer_escaping(self):
        issue = ValidationIssue(path=("props", "a/b"), message="m", code="c")
        assert issue.pointer == "/props/a~1b"
        assert issue.to_dict()["path"] == ["props", "a/b"]

    @pytest.mark.unit
    def test_home_screen_first_flag_wins(self):
        screens = [
            {"id": "a", "isHome": False},
            {"id": "b", "isHome": True},
            {"id": "c", "isHome": True},
        ]
        assert resolve_home_screen(screens)["id"] == "b"

    @pytest.mark.unit
    def test_home_screen_falls_back_to_first(self):
        assert resolve_home_screen([{"id": "a"}, {"id": "b"}])["id"] == "a"
        assert resolve_home_screen([]) is None
