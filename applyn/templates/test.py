"""Unit tests for the template catalog, cloning and personalization."""

from types import MappingProxyType

import pytest

from applyn.editor import validate_editor_screens
from applyn.templates import (
    ALL_TEMPLATES,
    TEMPLATE_SUBTITLES,
    IndustryTemplate,
    TemplateComponent,
    TemplateScreen,
    build_editor_screens_from_template,
    clone_template,
    freeze,
    get_template_by_id,
    get_template_ids,
    has_emoji,
    lint_catalog,
    lint_template,
    personalize_component,
    thaw,
)

EXPECTED_IDS = [
    "ecommerce",
    "salon",
    "restaurant",
    "church",
    "fitness",
    "education",
    "radio",
    "healthcare",
    "realestate",
    "photography",
    "music",
    "business",
    "news",
]


def _all_ids(template: IndustryTemplate) -> set[str]:
    ids = {s.id for s in template.screens}
    stack = [c for s in template.screens for c in s.components]
    while stack:
        node = stack.pop()
        ids.add(node.id)
        stack.extend(node.children or ())
    return ids


def _shape(component: dict) -> tuple:
    """Structure of a component tree with ids stripped."""
    return (
        component["type"],
        repr(sorted(component["props"].items())),
        tuple(_shape(c) for c in component.get("children", [])),
    )


def _find(components: list[dict], predicate) -> list[dict]:
    found = []
    stack = list(components)
    while stack:
        node = stack.pop()
        if predicate(node):
            found.append(node)
        stack.extend(node.get("children", []))
    return found


class TestCatalog:
    """Tests for catalog contents and lookup."""

    @pytest.mark.unit
    def test_thirteen_verticals(self):
        assert get_template_ids() == EXPECTED_IDS
        assert set(TEMPLATE_SUBTITLES) == set(EXPECTED_IDS)

    @pytest.mark.unit
    def test_lookup(self):
        template = get_template_by_id("ecommerce")
        assert template.name == "E-Commerce Store"
        assert get_template_by_id("nope") is None

    @pytest.mark.unit
    def test_catalog_is_read_only(self):
        assert isinstance(ALL_TEMPLATES, MappingProxyType)
        with pytest.raises(TypeError):
            ALL_TEMPLATES["custom"] = ALL_TEMPLATES["news"]  # type: ignore[index]

    @pytest.mark.unit
    def test_props_are_frozen(self):
        hero = ALL_TEMPLATES["ecommerce"].screens[0].components[0]
        with pytest.raises(TypeError):
            hero.props["title"] = "Changed"  # type: ignore[index]

    @pytest.mark.unit
    def test_every_template_has_one_home_screen(self):
        for template in ALL_TEMPLATES.values():
            homes = [s for s in template.screens if s.is_home]
            assert len(homes) == 1, template.id

    @pytest.mark.unit
    def test_freeze_thaw(self):
        data = {"items": [{"a": 1}], "n": 2}
        frozen = freeze(data)
        assert isinstance(frozen["items"], tuple)
        assert thaw(frozen) == data


class TestCloneTemplate:
    """Tests for clone_template."""

    @pytest.mark.unit
    def test_ids_are_fresh(self):
        template = get_template_by_id("ecommerce")
        clone = clone_template(template)
        assert _all_ids(clone).isdisjoint(_all_ids(template))
        assert all(s.id.startswith("screen_") for s in clone.screens)
        assert all(c.id.startswith("comp_") for s in clone.screens for c in s.components)

    @pytest.mark.unit
    def test_two_clones_share_no_ids(self):
        template = get_template_by_id("salon")
        assert _all_ids(clone_template(template)).isdisjoint(
            _all_ids(clone_template(template))
        )

    @pytest.mark.unit
    def test_structure_preserved(self):
        template = get_template_by_id("restaurant")
        clone = clone_template(template)
        assert [s.name for s in clone.screens] == [s.name for s in template.screens]
        for original, copied in zip(template.screens, clone.screens):
            assert [_shape(c.to_dict()) for c in copied.components] == [
                _shape(c.to_dict()) for c in original.components
            ]
        assert clone.features == template.features
        assert clone.primary_color == template.primary_color

    @pytest.mark.unit
    def test_props_are_copies(self):
        template = get_template_by_id("ecommerce")
        clone = clone_template(template)
        assert clone.screens[0].components[0].props is not template.screens[0].components[0].props


class TestBuildEditorScreens:
    """Tests for build_editor_screens_from_template."""

    @pytest.mark.unit
    def test_unknown_template(self):
        assert build_editor_screens_from_template("does-not-exist", "Acme") is None

    @pytest.mark.unit
    def test_ecommerce_personalization(self):
        screens = build_editor_screens_from_template("ecommerce", "Acme")
        assert screens[0]["isHome"] is True
        hero = screens[0]["components"][0]
        assert hero["type"] == "hero"
        assert hero["props"]["title"] == "Acme"
        assert hero["props"]["subtitle"] == "Shop the best products online"
        assert hero["props"]["buttonText"] == "Shop Now"
        section = screens[0]["components"][1]
        assert section["props"]["title"] == "Featured Categories"

    @pytest.mark.unit
    def test_non_placeholder_title_kept(self):
        screens = build_editor_screens_from_template("salon", "Acme")
        hero = screens[0]["components"][0]
        assert hero["props"]["title"] == "Glow Beauty Salon"
        assert hero["props"]["subtitle"] == "Book your perfect appointment"

    @pytest.mark.unit
    def test_about_and_contact_headings(self):
        business = build_editor_screens_from_template("business", "Acme")
        radio = build_editor_screens_from_template("radio", "Acme")
        contact = [c for s in business for c in _find(s["components"], lambda n: n["type"] == "heading")]
        about = [c for s in radio for c in _find(s["components"], lambda n: n["type"] == "heading")]
        assert "Contact Acme" in [c["props"]["text"] for c in contact]
        assert "About Acme" in [c["props"]["text"] for c in about]

    @pytest.mark.unit
    def test_screen_projection(self):
        screens = build_editor_screens_from_template("news", "Daily")
        assert set(screens[0]) == {"id", "name", "icon", "isHome", "components"}
        assert [s["isHome"] for s in screens].count(True) == 1

    @pytest.mark.unit
    def test_catalog_untouched(self):
        build_editor_screens_from_template("ecommerce", "Acme")
        hero = get_template_by_id("ecommerce").screens[0].components[0]
        assert hero.props["title"] == "Fresh Products"

    @pytest.mark.unit
    @pytest.mark.parametrize("template_id", EXPECTED_IDS)
    def test_every_template_validates(self, template_id):
        screens = build_editor_screens_from_template(template_id, "My App")
        result = validate_editor_screens(screens)
        assert result.ok, [str(i) for i in result.issues]


class TestPersonalizeComponent:
    """Tests for personalize_component."""

    @pytest.mark.unit
    def test_welcome_title(self):
        component = {"id": "h", "type": "hero", "props": {"title": "Welcome to our shop"}}
        result = personalize_component(component, "ecommerce", "Acme")
        assert result["props"] == {"title": "Acme"}
        assert component["props"]["title"] == "Welcome to our shop"

    @pytest.mark.unit
    def test_empty_subtitle_not_replaced(self):
        component = {"id": "h", "type": "hero", "props": {"title": "Hi", "subtitle": ""}}
        result = personalize_component(component, "salon", "Acme")
        assert result["props"]["subtitle"] == ""

    @pytest.mark.unit
    def test_unknown_vertical_keeps_subtitle(self):
        component = {"id": "h", "type": "hero", "props": {"subtitle": "Original"}}
        result = personalize_component(component, "custom", "Acme")
        assert result["props"]["subtitle"] == "Original"

    @pytest.mark.unit
    def test_nested_text(self):
        component = {
            "id": "c",
            "type": "container",
            "props": {},
            "children": [{"id": "t", "type": "text", "props": {"text": "About Us"}}],
        }
        result = personalize_component(component, "music", "Acme")
        assert result["children"][0]["props"]["text"] == "About Acme"

    @pytest.mark.unit
    def test_only_exact_match(self):
        component = {"id": "t", "type": "heading", "props": {"text": "About Us Today"}}
        result = personalize_component(component, "music", "Acme")
        assert result["props"]["text"] == "About Us Today"


class TestLint:
    """Tests for template linting."""

    @pytest.mark.unit
    def test_catalog_is_clean(self):
        report = lint_catalog()
        assert report.ok, [str(e) for e in report.errors]
        assert report.templates_checked == 13

    @pytest.mark.unit
    def test_reports_bad_content(self):
        bad = IndustryTemplate(
            id="bad",
            name="Bad \U0001F6D2",
            description="",
            primary_color="#000000",
            secondary_color="#FFFFFF",
            icon="\U0001F6D2",
            screens=(
                TemplateScreen(
                    id="home",
                    name="Home",
                    icon="not-an-icon",
                    components=(
                        TemplateComponent(
                            id="c1",
                            type="container",
                            props=freeze({"padding": 16, "gap": "12px", "style": {}}),
                            children=(
                                TemplateComponent(
                                    id="s1", type="spacer", props=freeze({"height": "big"})
                                ),
                                TemplateComponent(
                                    id="l1",
                                    type="list",
                                    props=freeze({"items": [{"icon": "⚙️", "label": "Settings"}]}),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        )
        report = lint_template(bad)
        paths = [e.path for e in report.errors]
        assert paths == [
            "bad.icon",
            "bad.screens[0].icon",
            "bad.screens[0].components[0].props.style",
            "bad.screens[0].components[0].props.padding",
            "bad.screens[0].components[0].props.gap",
            "bad.screens[0].components[0].children[0].props.height",
            "bad.screens[0].components[0].children[1].props.items[0].icon",
        ]
        assert [w.path for w in report.warnings] == ["bad.name"]

    @pytest.mark.unit
    def test_has_emoji(self):
        assert has_emoji("\U0001F3E0")
        assert not has_emoji("home")
        assert not has_emoji(None)
