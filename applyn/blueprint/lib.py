"""AppBlueprint schema and conversion to editor screens.

An AppBlueprint is a declarative description of a storefront-style app:
fixed component kinds, a theme, bottom-tab navigation and typed business
data (categories, products, cart, orders). Editor screens are the
canonical representation; `build_editor_screens_from_blueprint` is the one
path from a blueprint into that form.

Images are referenced by keyword through the configured image proxy, so
conversion never performs network I/O.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Optional
from urllib.parse import quote
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from applyn.config import get_default_currency, get_image_proxy_url
from applyn.core import get_logger
from applyn.editor import ValidationResult, issues_from_validation_error
from applyn.spacing import spacing_px_to_token
from applyn.templates import new_component_id

logger = get_logger(__name__)

DEFAULT_PRIMARY_COLOR = "#2563EB"
DEFAULT_APP_ICON = "shopping-bag"
DEFAULT_MENU_ICON = "settings"
DEFAULT_SCREEN_ICON = "file-text"

# Keep converted output inside the editor's structural limits
MAX_BLUEPRINT_SCREENS = 20
MAX_SCREEN_COMPONENTS = 40

_HEX_WITH_HASH = re.compile(r"^#[0-9a-f]{3,8}$", re.IGNORECASE)
_HEX_BARE = re.compile(r"^[0-9a-f]{3,8}$", re.IGNORECASE)

CURRENCY_SYMBOLS: dict[str, str] = {"USD": "$", "EUR": "€", "GBP": "£"}


# =============================================================================
# Schema
# =============================================================================


class BlueprintComponentKind(str, Enum):
    """Component kinds an AppBlueprint screen may contain."""

    HERO_SECTION = "hero_section"
    FEATURED_CATEGORIES = "featured_categories"
    PRODUCT_GRID = "product_grid"
    CART_SUMMARY = "cart_summary"
    ORDERS_LIST = "orders_list"
    ACCOUNT_MENU = "account_menu"


class _Model(BaseModel):
    model_config = ConfigDict(extra="ignore")


class BlueprintTheme(_Model):
    primary_color: str
    secondary_color: Optional[str] = None
    background_color: Optional[str] = None
    surface_color: Optional[str] = None
    text_color: Optional[str] = None
    muted_text_color: Optional[str] = None
    border_color: Optional[str] = None


class BlueprintLogo(_Model):
    icon: str
    style: Optional[str] = None


class BlueprintHero(_Model):
    headline: str
    subheadline: Optional[str] = None
    cta_text: Optional[str] = None
    image_keyword: Optional[str] = None


class BlueprintCategory(_Model):
    id: str
    name: str
    image_keyword: Optional[str] = None


class BlueprintProduct(_Model):
    id: str
    name: str
    price: float
    currency: Optional[str] = None
    image_keyword: Optional[str] = None
    category_id: Optional[str] = None
    rating: Optional[float] = None


class BlueprintCartItem(_Model):
    product_id: Optional[str] = None
    name: str
    quantity: int
    price: float
    image_keyword: Optional[str] = None


class BlueprintCart(_Model):
    items: list[BlueprintCartItem] = Field(default_factory=list)
    subtotal: float
    shipping_fee: Optional[float] = None
    tax: Optional[float] = None
    total: float


class BlueprintOrder(_Model):
    id: str
    status: str
    date: str
    total: float


class BlueprintAccountMenuItem(_Model):
    id: str
    label: str
    icon: Optional[str] = None
    action: Optional[str] = None


class BlueprintScreenComponent(_Model):
    component_id: str = Field(..., min_length=1, max_length=200)
    type: BlueprintComponentKind
    data_binding: Optional[str] = None
    props: dict[str, Any] = Field(default_factory=dict)


class BlueprintScreen(_Model):
    screen_id: str = Field(..., min_length=1, max_length=200)
    title: str = Field(..., min_length=1, max_length=80)
    icon: str = Field(default=DEFAULT_SCREEN_ICON, max_length=20)
    components: list[BlueprintScreenComponent] = Field(
        default_factory=list, max_length=MAX_SCREEN_COMPONENTS
    )


class BlueprintTab(_Model):
    tab_id: str
    label: str
    icon: str
    screen_id: str


class BlueprintNavigation(_Model):
    type: Literal["bottom_tabs"] = "bottom_tabs"
    tabs: list[BlueprintTab] = Field(default_factory=list)


class BlueprintData(_Model):
    categories: list[BlueprintCategory] = Field(default_factory=list)
    products: list[BlueprintProduct] = Field(default_factory=list)
    cart: Optional[BlueprintCart] = None
    orders: list[BlueprintOrder] = Field(default_factory=list)


class BlueprintAccountContent(_Model):
    menu_items: list[BlueprintAccountMenuItem] = Field(default_factory=list)


class BlueprintContent(_Model):
    hero: Optional[BlueprintHero] = None
    account: Optional[BlueprintAccountContent] = None


class BlueprintSupport(_Model):
    email: Optional[str] = None
    phone: Optional[str] = None


class BlueprintSettings(_Model):
    currency: Optional[str] = None
    language: Optional[str] = None
    support: Optional[BlueprintSupport] = None


class AppBlueprint(_Model):
    """Declarative storefront app description."""

    schema_version: str
    app_name: str = Field(..., min_length=1, max_length=80)
    logo: BlueprintLogo
    theme: BlueprintTheme
    screens: list[BlueprintScreen] = Field(..., max_length=MAX_BLUEPRINT_SCREENS)
    navigation: BlueprintNavigation
    data: BlueprintData = Field(default_factory=BlueprintData)
    content: BlueprintContent = Field(default_factory=BlueprintContent)
    settings: BlueprintSettings = Field(default_factory=BlueprintSettings)


_BLUEPRINT_ADAPTER = TypeAdapter(AppBlueprint)


def validate_app_blueprint(data: Any) -> ValidationResult:
    """Validate a raw AppBlueprint payload.

    Returns:
        ValidationResult holding an AppBlueprint, or path-addressed issues
        in the same format as editor screens validation.
    """
    try:
        return ValidationResult(value=_BLUEPRINT_ADAPTER.validate_python(data))
    except PydanticValidationError as e:
        return ValidationResult(issues=issues_from_validation_error(e))


# =============================================================================
# Conversion helpers
# =============================================================================


def normalize_hex_color(value: Any, fallback: str) -> str:
    """Normalize a hex color, adding a missing ``#``.

    Returns the fallback for anything that is not 3 to 8 hex digits.
    """
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        return fallback
    if _HEX_WITH_HASH.match(text):
        return text
    if _HEX_BARE.match(text):
        return f"#{text}"
    return fallback


def format_money(amount: float, currency: str) -> str:
    """Format an amount with its currency symbol, e.g. ``$12.99``.

    Currencies without a symbol are prefixed with their code
    (``INR 12.99``). Non-finite amounts format as zero.
    """
    value = 0.0
    if isinstance(amount, (int, float)) and not isinstance(amount, bool):
        try:
            value = float(amount)
        except OverflowError:
            value = 0.0
        if not math.isfinite(value):
            value = 0.0
    code = (currency or "USD").upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    return f"{symbol}{value:.2f}"


def keyword_image_url(
    keyword: str,
    width: int | None = None,
    orientation: str | None = None,
    base_url: str | None = None,
) -> str:
    """Build an image proxy URL for a search keyword."""
    base = base_url or get_image_proxy_url()
    params = [f"query={quote(keyword.strip() or 'image', safe='')}"]
    if width:
        params.append(f"w={width}")
    if orientation:
        params.append(f"orientation={quote(orientation, safe='')}")
    return f"{base}?{'&'.join(params)}"


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {k: v for k, v in data.items() if v is not None}


def _spacer(px: int) -> dict[str, Any]:
    return {
        "id": new_component_id(),
        "type": "spacer",
        "props": {"height": spacing_px_to_token(px).value},
    }


def _heading(text: str, level: int, color: str | None = None) -> dict[str, Any]:
    return {
        "id": new_component_id(),
        "type": "heading",
        "props": _compact({"text": text, "level": level, "color": color}),
    }


def _text(text: str, font_size: int, color: str) -> dict[str, Any]:
    return {
        "id": new_component_id(),
        "type": "text",
        "props": {"text": text, "fontSize": font_size, "color": color},
    }


# =============================================================================
# Conversion
# =============================================================================


@dataclass
class ResolvedImages:
    """Image URLs chosen for blueprint data, keyed by data id."""

    categories: dict[str, str] = field(default_factory=dict)
    products: dict[str, str] = field(default_factory=dict)
    hero: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {"categories": self.categories, "products": self.products, "hero": self.hero}
        )


@dataclass
class BlueprintBuild:
    """Result of converting an AppBlueprint.

    Attributes:
        screens: Editor screens payload; the first screen is home.
        patch: App record fields to apply (name, colors, navigation, ...).
        images: Image URLs resolved for categories, products and hero.
    """

    screens: list[dict[str, Any]]
    patch: dict[str, Any]
    images: ResolvedImages

    def to_dict(self) -> dict[str, Any]:
        return {
            "screens": self.screens,
            "patch": self.patch,
            "resolvedImages": self.images.to_dict(),
        }


class _Converter:
    """Turns one validated blueprint into editor screens."""

    def __init__(self, blueprint: AppBlueprint):
        self.blueprint = blueprint
        self.currency = blueprint.settings.currency or get_default_currency()
        self.primary_color = normalize_hex_color(
            blueprint.theme.primary_color, DEFAULT_PRIMARY_COLOR
        )
        self.icon_color = normalize_hex_color(
            blueprint.theme.secondary_color, self.primary_color
        )
        self.base_url = get_image_proxy_url()
        self.images = self._resolve_images()

    def _image(self, keyword: str | None) -> str:
        return keyword_image_url(keyword or "", width=1200, base_url=self.base_url)

    def _resolve_images(self) -> ResolvedImages:
        data = self.blueprint.data
        hero = self.blueprint.content.hero
        return ResolvedImages(
            categories={c.id: self._image(c.image_keyword or c.name) for c in data.categories},
            products={p.id: self._image(p.image_keyword or p.name) for p in data.products},
            hero=self._image(hero.image_keyword) if hero and hero.image_keyword else None,
        )

    def _category_name(self, category_id: str | None) -> str:
        if not category_id:
            return ""
        for category in self.blueprint.data.categories:
            if category.id == category_id:
                return category.name
        return ""

    def _cart_image(self, item: BlueprintCartItem) -> str | None:
        keyword = (item.image_keyword or item.name or "").strip()
        if keyword:
            return self._image(keyword)
        if item.product_id:
            return self.images.products.get(item.product_id)
        return None

    def hero_section(self, component: BlueprintScreenComponent) -> list[dict[str, Any]]:
        hero = self.blueprint.content.hero
        props = _compact(
            {
                "title": hero.headline if hero and hero.headline else self.blueprint.app_name,
                "subtitle": hero.subheadline if hero else None,
                "buttonText": hero.cta_text if hero else None,
                "backgroundImage": self.images.hero,
                "overlayColor": "rgba(0,0,0,0.35)",
                "height": 190,
                "backgroundColor": self.primary_color,
            }
        )
        return [{"id": component.component_id, "type": "hero", "props": props}, _spacer(14)]

    def featured_categories(self, component: BlueprintScreenComponent) -> list[dict[str, Any]]:
        items = [
            _compact(
                {"title": c.name, "image": self.images.categories.get(c.id), "subtitle": "Browse"}
            )
            for c in self.blueprint.data.categories
        ]
        return [
            _heading("Categories", 3),
            {"id": component.component_id, "type": "carousel", "props": {"items": items}},
            _spacer(14),
        ]

    def product_grid(self, component: BlueprintScreenComponent) -> list[dict[str, Any]]:
        products = [
            _compact(
                {
                    "id": p.id,
                    "name": p.name,
                    "price": format_money(p.price, p.currency or self.currency),
                    "image": self.images.products.get(p.id),
                    "category": self._category_name(p.category_id),
                    "rating": p.rating,
                }
            )
            for p in self.blueprint.data.products
        ]
        return [
            _heading("Featured", 3),
            {
                "id": component.component_id,
                "type": "productGrid",
                "props": {"products": products, "columns": 2},
            },
            _spacer(8),
        ]

    def cart_summary(self, component: BlueprintScreenComponent) -> list[dict[str, Any]]:
        cart = self.blueprint.data.cart
        items = cart.items if cart else []
        total = cart.total if cart else 0
        return [
            _heading("Your Cart", 2),
            {
                "id": component.component_id,
                "type": "list",
                "props": {
                    "variant": "cart",
                    "items": [
                        _compact(
                            {
                                "name": item.name,
                                "quantity": item.quantity,
                                "price": format_money(item.price, self.currency),
                                "image": self._cart_image(item),
                            }
                        )
                        for item in items
                    ],
                },
            },
            _spacer(10),
            _text(f"Total: {format_money(total, self.currency)}", 14, "#111827"),
            _spacer(10),
            {
                "id": new_component_id(),
                "type": "button",
                "props": {
                    "text": "Checkout",
                    "variant": "primary",
                    "backgroundColor": self.primary_color,
                    "textColor": "#ffffff",
                    "size": "md",
                },
            },
        ]

    def orders_list(self, component: BlueprintScreenComponent) -> list[dict[str, Any]]:
        return [
            _heading("Orders", 2),
            {
                "id": component.component_id,
                "type": "list",
                "props": {
                    "variant": "orders",
                    "items": [
                        {
                            "name": f"Order {order.id}",
                            "status": order.status,
                            "total": format_money(order.total, self.currency),
                        }
                        for order in self.blueprint.data.orders
                    ],
                },
            },
        ]

    def account_menu(self, component: BlueprintScreenComponent) -> list[dict[str, Any]]:
        account = self.blueprint.content.account
        menu = account.menu_items if account else []
        components = [
            _heading("Account", 2),
            {
                "id": component.component_id,
                "type": "list",
                "props": {
                    "variant": "menu",
                    "items": [
                        {"icon": item.icon or DEFAULT_MENU_ICON, "label": item.label}
                        for item in menu
                    ],
                },
            },
        ]
        support = self.blueprint.settings.support
        parts = []
        if support and support.email:
            parts.append(f"Email: {support.email}")
        if support and support.phone:
            parts.append(f"Phone: {support.phone}")
        if parts:
            components.append(_spacer(12))
            components.append(_text(" • ".join(parts), 12, "#6b7280"))
        return components

    def screens(self) -> list[dict[str, Any]]:
        screens = []
        for index, screen in enumerate(self.blueprint.screens):
            components: list[dict[str, Any]] = []
            for component in screen.components:
                # Kinds are closed by the schema, so every kind has a handler
                components.extend(getattr(self, component.type.value)(component))
            screens.append(
                {
                    "id": screen.screen_id,
                    "name": screen.title,
                    "icon": screen.icon or DEFAULT_SCREEN_ICON,
                    "isHome": index == 0,
                    "components": components,
                }
            )
        return screens

    def navigation_items(self) -> list[dict[str, Any]]:
        return [
            {
                "id": f"nav_{uuid4().hex}",
                "label": tab.label,
                "icon": tab.icon,
                "kind": "screen",
                "screenId": tab.screen_id,
            }
            for tab in self.blueprint.navigation.tabs
        ]


def build_editor_screens_from_blueprint(blueprint: AppBlueprint) -> BlueprintBuild:
    """Convert a validated AppBlueprint into editor screens and an app patch.

    Args:
        blueprint: A blueprint returned by `validate_app_blueprint`.

    Returns:
        BlueprintBuild with screens, the app record patch and image URLs.
    """
    converter = _Converter(blueprint)
    screens = converter.screens()
    patch = {
        "name": blueprint.app_name,
        "icon": blueprint.logo.icon or DEFAULT_APP_ICON,
        "primaryColor": converter.primary_color,
        "iconColor": converter.icon_color,
        "isNativeOnly": True,
        "url": "native://app",
        "editorScreens": screens,
        "navigation": {"style": "bottom-tabs", "items": converter.navigation_items()},
        "features": {"bottomNav": True},
    }
    logger.debug(
        f"Converted blueprint {blueprint.app_name!r}: {len(screens)} screens, "
        f"{len(patch['navigation']['items'])} tabs"
    )
    return BlueprintBuild(screens=screens, patch=patch, images=converter.images)


__all__ = [
    # Schema
    "BlueprintComponentKind",
    "BlueprintTheme",
    "BlueprintLogo",
    "BlueprintHero",
    "BlueprintCategory",
    "BlueprintProduct",
    "BlueprintCartItem",
    "BlueprintCart",
    "BlueprintOrder",
    "BlueprintAccountMenuItem",
    "BlueprintScreenComponent",
    "BlueprintScreen",
    "BlueprintTab",
    "BlueprintNavigation",
    "BlueprintData",
    "BlueprintContent",
    "BlueprintSettings",
    "AppBlueprint",
    "validate_app_blueprint",
    # Conversion
    "DEFAULT_PRIMARY_COLOR",
    "CURRENCY_SYMBOLS",
    "normalize_hex_color",
    "format_money",
    "keyword_image_url",
    "ResolvedImages",
    "BlueprintBuild",
    "build_editor_screens_from_blueprint",
]
