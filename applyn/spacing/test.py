"""Unit tests for spacing tokens and legacy migration."""

import copy
import json

import pytest

from applyn.spacing import (
    SpacingToken,
    is_spacing_token,
    migrate_legacy_spacing_in_editor_screens,
    migrate_legacy_spacing_value,
    spacing_px_to_token,
)


class TestSpacingToken:
    """Tests for the token enum."""

    @pytest.mark.unit
    def test_token_values(self):
        assert [t.value for t in SpacingToken] == [
            "var(--space-0)",
            "var(--space-4)",
            "var(--space-8)",
            "var(--space-16)",
            "var(--space-24)",
            "var(--space-32)",
            "var(--space-48)",
        ]

    @pytest.mark.unit
    def test_px_and_rank(self):
        assert SpacingToken.SPACE_16.px == 16
        assert SpacingToken.SPACE_0.rank == 0
        assert SpacingToken.SPACE_48.rank == 6

    @pytest.mark.unit
    def test_is_spacing_token(self):
        assert is_spacing_token("var(--space-8)")
        assert is_spacing_token(SpacingToken.SPACE_8)
        assert not is_spacing_token("var(--space-12)")
        assert not is_spacing_token(" var(--space-8)")
        assert not is_spacing_token(8)


class TestMigrateLegacySpacingValue:
    """Tests for single-value migration."""

    @pytest.mark.unit
    @pytest.mark.parametrize("token", list(SpacingToken))
    def test_idempotent_for_tokens(self, token):
        """Valid tokens come back unchanged."""
        assert migrate_legacy_spacing_value(token.value) == token
        assert migrate_legacy_spacing_value(token.value).value == token.value

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("px", "expected"),
        [
            (-5, SpacingToken.SPACE_0),
            (0, SpacingToken.SPACE_0),
            (1, SpacingToken.SPACE_4),
            (4, SpacingToken.SPACE_4),
            (4.5, SpacingToken.SPACE_8),
            (8, SpacingToken.SPACE_8),
            (12, SpacingToken.SPACE_16),
            (16, SpacingToken.SPACE_16),
            (20, SpacingToken.SPACE_24),
            (24, SpacingToken.SPACE_24),
            (32, SpacingToken.SPACE_32),
            (33, SpacingToken.SPACE_48),
            (500, SpacingToken.SPACE_48),
        ],
    )
    def test_pixel_breakpoints(self, px, expected):
        assert migrate_legacy_spacing_value(px) == expected

    @pytest.mark.unit
    def test_monotonic(self):
        """Larger pixel values never map to a smaller token."""
        values = [x / 2 for x in range(-10, 120)]
        ranks = [spacing_px_to_token(v).rank for v in values]
        assert ranks == sorted(ranks)

    @pytest.mark.unit
    def test_strings(self):
        assert migrate_legacy_spacing_value(" var(--space-24) ") == SpacingToken.SPACE_24
        assert migrate_legacy_spacing_value("12") == SpacingToken.SPACE_16
        assert migrate_legacy_spacing_value(" 2.5 ") == SpacingToken.SPACE_4

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        [None, float("nan"), float("inf"), "", "wide", "12px", "nan", {}, [], True],
    )
    def test_uninterpretable_values(self, value):
        """No silent coercion to a default token."""
        assert migrate_legacy_spacing_value(value) is None

    @pytest.mark.unit
    def test_int_beyond_float_range(self):
        """A JSON integer too large for a float is treated as infinite."""
        assert migrate_legacy_spacing_value(json.loads("1" + "0" * 400)) is None


class TestMigrateTree:
    """Tests for tree-wide migration."""

    @pytest.mark.unit
    def test_rewrites_nested_spacing(self):
        screens = [
            {
                "id": "home",
                "name": "Home",
                "components": [
                    {
                        "id": "s1",
                        "type": "section",
                        "props": {"title": "Featured", "padding": 16},
                        "children": [
                            {"id": "g1", "type": "grid", "props": {"gap": 12}},
                            {"id": "sp", "type": "spacer", "props": {"height": "20"}},
                        ],
                    }
                ],
            }
        ]
        original = copy.deepcopy(screens)

        result = migrate_legacy_spacing_in_editor_screens(screens)

        assert result.did_migrate is True
        section = result.screens[0]["components"][0]
        assert section["props"]["padding"] == "var(--space-16)"
        assert section["children"][0]["props"]["gap"] == "var(--space-16)"
        assert section["children"][1]["props"]["height"] == "var(--space-24)"
        # Input untouched
        assert screens == original

    @pytest.mark.unit
    def test_height_only_migrated_on_spacers(self):
        screens = [
            {"components": [{"id": "h", "type": "hero", "props": {"height": 280}}]}
        ]
        result = migrate_legacy_spacing_in_editor_screens(screens)
        assert result.did_migrate is False
        assert result.screens[0]["components"][0]["props"]["height"] == 280

    @pytest.mark.unit
    def test_no_legacy_values(self, sample_screens):
        """Write-back gate stays closed when nothing changes."""
        result = migrate_legacy_spacing_in_editor_screens(sample_screens)
        assert result.did_migrate is False
        assert result.screens == sample_screens

    @pytest.mark.unit
    def test_uninterpretable_values_left_alone(self):
        screens = [{"components": [{"id": "c", "type": "container", "props": {"padding": "wide"}}]}]
        result = migrate_legacy_spacing_in_editor_screens(screens)
        assert result.did_migrate is False
        assert result.screens[0]["components"][0]["props"]["padding"] == "wide"

    @pytest.mark.unit
    def test_huge_integer_left_alone(self):
        huge = json.loads("1" + "0" * 400)
        screens = [{"components": [{"id": "c", "type": "container", "props": {"padding": huge}}]}]
        result = migrate_legacy_spacing_in_editor_screens(screens)
        assert result.did_migrate is False
        assert result.screens[0]["components"][0]["props"]["padding"] == huge

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "screens", {"components": []}, 42])
    def test_non_list_input_is_noop(self, value):
        result = migrate_legacy_spacing_in_editor_screens(value)
        assert result.screens is value
        assert result.did_migrate is False

    @pytest.mark.unit
    def test_malformed_nodes_pass_through(self):
        screens = [None, {"components": [None, "x", {"id": "a", "type": "text"}]}]
        result = migrate_legacy_spacing_in_editor_screens(screens)
        assert result.did_migrate is False
        assert result.screens == screens

    @pytest.mark.unit
    def test_depth_limit_bounds_walk(self):
        """Components below the depth limit are carried over unmigrated."""
        leaf = {"id": "deep", "type": "container", "props": {"padding": 8}}
        root = {"id": "root", "type": "container", "props": {"padding": 8}, "children": [leaf]}
        result = migrate_legacy_spacing_in_editor_screens(
            [{"components": [root]}], max_depth=1
        )
        migrated_root = result.screens[0]["components"][0]
        assert migrated_root["props"]["padding"] == "var(--space-8)"
        assert migrated_root["children"][0]["props"]["padding"] == 8
