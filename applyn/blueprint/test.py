"""Unit tests for AppBlueprint validation and conversion."""

import pytest

from applyn.blueprint import (
    build_editor_screens_from_blueprint,
    format_money,
    keyword_image_url,
    normalize_hex_color,
    validate_app_blueprint,
)
from applyn.editor import validate_editor_screens


@pytest.fixture
def built(sample_blueprint, monkeypatch):
    monkeypatch.delenv("APPLYN_IMAGE_PROXY_URL", raising=False)
    monkeypatch.delenv("APPLYN_DEFAULT_CURRENCY", raising=False)
    blueprint = validate_app_blueprint(sample_blueprint).value
    return build_editor_screens_from_blueprint(blueprint)


def _components(built, screen_index):
    return built.screens[screen_index]["components"]


class TestValidateAppBlueprint:
    """Tests for validate_app_blueprint."""

    @pytest.mark.unit
    def test_valid(self, sample_blueprint):
        result = validate_app_blueprint(sample_blueprint)
        assert result.ok
        assert result.value.app_name == "Green Grocer"
        assert len(result.value.screens) == 4

    @pytest.mark.unit
    def test_unknown_component_kind(self, sample_blueprint):
        sample_blueprint["screens"][0]["components"].append(
            {"component_id": "x", "type": "video_player"}
        )
        result = validate_app_blueprint(sample_blueprint)
        assert not result.ok
        assert result.issues[0].path == ("screens", 0, "components", 3, "type")

    @pytest.mark.unit
    def test_missing_required(self, sample_blueprint):
        del sample_blueprint["theme"]
        result = validate_app_blueprint(sample_blueprint)
        assert [i.path for i in result.issues] == [("theme",)]

    @pytest.mark.unit
    def test_navigation_type_is_fixed(self, sample_blueprint):
        sample_blueprint["navigation"]["type"] = "drawer"
        assert not validate_app_blueprint(sample_blueprint).ok

    @pytest.mark.unit
    def test_screen_count_capped(self, sample_blueprint):
        screen = sample_blueprint["screens"][0]
        sample_blueprint["screens"] = [dict(screen, screen_id=f"s{i}") for i in range(21)]
        assert not validate_app_blueprint(sample_blueprint).ok


class TestHelpers:
    """Tests for conversion helpers."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("#16A34A", "#16A34A"),
            ("16a34a", "#16a34a"),
            ("  #abc ", "#abc"),
            ("#12", "#2563EB"),
            ("blue", "#2563EB"),
            (None, "#2563EB"),
            ("", "#2563EB"),
        ],
    )
    def test_normalize_hex_color(self, value, expected):
        assert normalize_hex_color(value, "#2563EB") == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "amount,currency,expected",
        [
            (12.5, "USD", "$12.50"),
            (3, "eur", "€3.00"),
            (1.239, "GBP", "£1.24"),
            (99, "INR", "INR 99.00"),
            (float("nan"), "USD", "$0.00"),
            (5, "", "$5.00"),
            (10**400, "USD", "$0.00"),
        ],
    )
    def test_format_money(self, amount, currency, expected):
        assert format_money(amount, currency) == expected

    @pytest.mark.unit
    def test_keyword_image_url(self):
        url = keyword_image_url("red shoes", width=800, orientation="portrait", base_url="/img")
        assert url == "/img?query=red%20shoes&w=800&orientation=portrait"
        assert keyword_image_url("  ", base_url="/img") == "/img?query=image"


class TestBuildEditorScreens:
    """Tests for build_editor_screens_from_blueprint."""

    @pytest.mark.unit
    def test_output_validates(self, built):
        result = validate_editor_screens(built.screens)
        assert result.ok, [i.to_dict() for i in result.issues]

    @pytest.mark.unit
    def test_first_screen_is_home(self, built):
        assert [s["isHome"] for s in built.screens] == [True, False, False, False]
        assert [s["id"] for s in built.screens] == ["home", "cart", "orders", "account"]

    @pytest.mark.unit
    def test_hero(self, built):
        hero = _components(built, 0)[0]
        assert hero["id"] == "hero"
        assert hero["props"]["title"] == "Fresh every day"
        assert hero["props"]["backgroundImage"] == "/api/unsplash/proxy?query=farmers%20market&w=1200"
        assert hero["props"]["backgroundColor"] == "#16a34a"

    @pytest.mark.unit
    def test_spacers_use_tokens(self, built):
        spacers = [
            c for s in built.screens for c in s["components"] if c["type"] == "spacer"
        ]
        assert spacers
        assert {s["props"]["height"] for s in spacers} <= {"var(--space-8)", "var(--space-16)"}

    @pytest.mark.unit
    def test_product_grid(self, built):
        grid = next(c for c in _components(built, 0) if c["type"] == "productGrid")
        products = grid["props"]["products"]
        assert products[0]["price"] == "$4.50"
        assert products[0]["category"] == "Vegetables"
        assert products[1]["price"] == "€3.00"
        assert "rating" not in products[1]

    @pytest.mark.unit
    def test_cart_summary(self, built):
        types = [c["type"] for c in _components(built, 1)]
        assert types == ["heading", "list", "spacer", "text", "spacer", "button"]
        assert _components(built, 1)[3]["props"]["text"] == "Total: $12.99"

    @pytest.mark.unit
    def test_orders(self, built):
        orders = _components(built, 2)[1]["props"]["items"]
        assert orders == [{"name": "Order A100", "status": "Delivered", "total": "$45.99"}]

    @pytest.mark.unit
    def test_account_menu(self, built):
        components = _components(built, 3)
        items = components[1]["props"]["items"]
        assert items[1] == {"icon": "settings", "label": "Help"}
        assert components[-1]["props"]["text"] == "Email: help@grocer.test • Phone: +1 555 0100"

    @pytest.mark.unit
    def test_patch(self, built):
        patch = built.patch
        assert patch["name"] == "Green Grocer"
        assert patch["primaryColor"] == "#16a34a"
        assert patch["iconColor"] == "#16a34a"
        assert patch["url"] == "native://app"
        assert patch["editorScreens"] is built.screens
        items = patch["navigation"]["items"]
        assert patch["navigation"]["style"] == "bottom-tabs"
        assert [i["screenId"] for i in items] == ["home", "cart"]
        assert all(i["id"].startswith("nav_") and i["kind"] == "screen" for i in items)

    @pytest.mark.unit
    def test_resolved_images(self, built):
        images = built.images.to_dict()
        assert set(images["categories"]) == {"veg", "fruit"}
        assert images["categories"]["fruit"].endswith("query=Fruits&w=1200")
        assert "hero" in images
