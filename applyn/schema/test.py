"""Unit tests for the Schema module."""

import pytest

from applyn.schema import (
    ALLOWED_COMPONENT_TYPES,
    COMPONENT_REGISTRY,
    ComponentCategory,
    EditorComponentType,
    collect_unsupported_types,
    export_component_catalog,
    get_component_meta,
    get_components_by_category,
    is_allowed_component_type,
    is_icon_id,
    spacing_props_for,
)


class TestComponentRegistry:
    """Tests for COMPONENT_REGISTRY completeness."""

    @pytest.mark.unit
    def test_all_component_types_registered(self):
        """Every EditorComponentType has metadata in registry."""
        for ct in EditorComponentType:
            assert ct in COMPONENT_REGISTRY, f"Missing metadata for {ct}"

    @pytest.mark.unit
    def test_allowlist_contents(self):
        """The allowlist holds exactly the renderer-supported tags."""
        assert ALLOWED_COMPONENT_TYPES == {
            "spacer",
            "divider",
            "text",
            "heading",
            "image",
            "button",
            "card",
            "container",
            "grid",
            "section",
            "list",
            "input",
            "carousel",
            "testimonial",
            "stats",
            "team",
            "socialLinks",
            "contactForm",
            "map",
            "hero",
            "productGrid",
        }

    @pytest.mark.unit
    def test_all_entries_have_descriptions(self):
        """Every component has a non-empty description."""
        for ct, meta in COMPONENT_REGISTRY.items():
            assert len(meta.description) > 10, f"{ct} description too short"

    @pytest.mark.unit
    def test_meta_to_dict(self):
        """ComponentMeta converts to dictionary correctly."""
        d = get_component_meta(EditorComponentType.SPACER).to_dict()
        assert d["type"] == "spacer"
        assert d["category"] == "layout"
        assert d["spacing_props"] == ["padding", "gap", "height"]


class TestAllowlist:
    """Tests for allowlist checks."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["hero", "productGrid", "socialLinks"])
    def test_allowed(self, value):
        assert is_allowed_component_type(value)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value", ["not-a-real-type", "Hero", "productgrid", "", None, 1, "gallery"]
    )
    def test_rejected(self, value):
        assert not is_allowed_component_type(value)


class TestSpacingProps:
    """Tests for per-type spacing props."""

    @pytest.mark.unit
    def test_spacer_height_is_spacing(self):
        """Spacer height holds a spacing token."""
        assert "height" in spacing_props_for("spacer")

    @pytest.mark.unit
    def test_hero_height_is_not_spacing(self):
        """Hero height is a pixel size, not a spacing token."""
        assert spacing_props_for("hero") == ("padding", "gap")

    @pytest.mark.unit
    def test_unknown_type_gets_common_props(self):
        assert spacing_props_for("not-a-real-type") == ("padding", "gap")


class TestCollectUnsupportedTypes:
    """Tests for unsupported type discovery in raw payloads."""

    @pytest.mark.unit
    def test_finds_nested_unknown_types(self):
        screens = [
            {
                "components": [
                    {"id": "a", "type": "gallery"},
                    {
                        "id": "b",
                        "type": "section",
                        "children": [{"id": "c", "type": "video"}],
                    },
                ]
            },
            {"components": [{"id": "d", "type": "gallery"}]},
        ]
        assert collect_unsupported_types(screens) == ["gallery", "video"]

    @pytest.mark.unit
    def test_clean_payload(self):
        screens = [{"components": [{"id": "a", "type": "text"}]}]
        assert collect_unsupported_types(screens) == []

    @pytest.mark.unit
    def test_malformed_input(self):
        assert collect_unsupported_types("nope") == []
        assert collect_unsupported_types([None, {"components": [1, None]}]) == []


class TestCatalogExport:
    """Tests for registry export and helpers."""

    @pytest.mark.unit
    def test_categories_cover_all_types(self):
        catalog = export_component_catalog()
        listed = {t for types in catalog["categories"].values() for t in types}
        assert listed == ALLOWED_COMPONENT_TYPES

    @pytest.mark.unit
    def test_commerce_category(self):
        assert get_components_by_category(ComponentCategory.COMMERCE) == [
            EditorComponentType.PRODUCT_GRID
        ]

    @pytest.mark.unit
    def test_icon_ids(self):
        assert is_icon_id("Home")
        assert not is_icon_id("🏠")
        assert not is_icon_id(None)
