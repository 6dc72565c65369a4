"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Sample editor payloads shared across module tests
"""

from __future__ import annotations

from typing import Any

import pytest
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Editor Payload Fixtures
# =============================================================================


@pytest.fixture
def sample_component() -> dict[str, Any]:
    """Create a small valid component tree.

    Returns:
        A container holding a grid of two cards.
    """
    return {
        "id": "root",
        "type": "container",
        "props": {"padding": "var(--space-16)"},
        "children": [
            {
                "id": "grid",
                "type": "grid",
                "props": {"columns": 2, "gap": "var(--space-8)"},
                "children": [
                    {"id": "card-1", "type": "card", "props": {"title": "One"}},
                    {"id": "card-2", "type": "card", "props": {"title": "Two"}},
                ],
            }
        ],
    }


@pytest.fixture
def sample_screens() -> list[dict[str, Any]]:
    """Create a valid, already-normalized screens payload.

    Every spacing prop holds a token, so migration is a no-op and the
    normalized form equals the input.

    Returns:
        Two screens with six components in total.
    """
    return [
        {
            "id": "home",
            "name": "Home",
            "icon": "home",
            "isHome": True,
            "components": [
                {
                    "id": "hero",
                    "type": "hero",
                    "props": {"title": "Welcome", "subtitle": "Hello there"},
                },
                {"id": "gap-1", "type": "spacer", "props": {"height": "var(--space-24)"}},
                {
                    "id": "intro",
                    "type": "section",
                    "props": {"title": "Highlights", "padding": "var(--space-16)"},
                    "children": [
                        {"id": "intro-text", "type": "text", "props": {"text": "About Us"}},
                    ],
                },
            ],
        },
        {
            "id": "contact",
            "name": "Contact",
            "icon": "phone",
            "components": [
                {"id": "contact-heading", "type": "heading", "props": {"text": "Contact Us", "level": 2}},
                {"id": "contact-form", "type": "contactForm", "props": {"gap": "var(--space-8)"}},
            ],
        },
    ]


@pytest.fixture
def legacy_screens() -> list[dict[str, Any]]:
    """Create a screens payload that still stores raw pixel spacing.

    Returns:
        One screen whose spacing props hold numbers and numeric strings.
    """
    return [
        {
            "id": "legacy",
            "name": "Legacy",
            "icon": "home",
            "components": [
                {"id": "sp", "type": "spacer", "props": {"height": 20}},
                {
                    "id": "box",
                    "type": "container",
                    "props": {"padding": "12", "gap": 0},
                    "children": [
                        {"id": "label", "type": "text", "props": {"text": "Hi", "padding": 48}},
                    ],
                },
            ],
        }
    ]


# =============================================================================
# Blueprint Fixtures
# =============================================================================


@pytest.fixture
def sample_blueprint() -> dict[str, Any]:
    """Create a complete storefront AppBlueprint payload.

    Returns:
        Four screens covering every blueprint component kind.
    """
    return {
        "schema_version": "1.0",
        "app_name": "Green Grocer",
        "logo": {"icon": "shopping-bag"},
        "theme": {"primary_color": "16a34a", "secondary_color": "not-a-color"},
        "screens": [
            {
                "screen_id": "home",
                "title": "Home",
                "icon": "home",
                "components": [
                    {"component_id": "hero", "type": "hero_section"},
                    {"component_id": "cats", "type": "featured_categories"},
                    {"component_id": "grid", "type": "product_grid"},
                ],
            },
            {
                "screen_id": "cart",
                "title": "Cart",
                "icon": "shopping-cart",
                "components": [{"component_id": "cart", "type": "cart_summary"}],
            },
            {
                "screen_id": "orders",
                "title": "Orders",
                "icon": "package",
                "components": [{"component_id": "orders", "type": "orders_list"}],
            },
            {
                "screen_id": "account",
                "title": "Account",
                "icon": "user",
                "components": [{"component_id": "menu", "type": "account_menu"}],
            },
        ],
        "navigation": {
            "type": "bottom_tabs",
            "tabs": [
                {"tab_id": "t1", "label": "Home", "icon": "home", "screen_id": "home"},
                {"tab_id": "t2", "label": "Cart", "icon": "shopping-cart", "screen_id": "cart"},
            ],
        },
        "data": {
            "categories": [
                {"id": "veg", "name": "Vegetables", "image_keyword": "fresh vegetables"},
                {"id": "fruit", "name": "Fruits"},
            ],
            "products": [
                {"id": "p1", "name": "Tomatoes", "price": 4.5, "category_id": "veg", "rating": 4.6},
                {"id": "p2", "name": "Apples", "price": 3, "currency": "EUR", "category_id": "fruit"},
            ],
            "cart": {
                "items": [{"product_id": "p1", "name": "Tomatoes", "quantity": 2, "price": 4.5}],
                "subtotal": 9,
                "total": 12.99,
            },
            "orders": [{"id": "A100", "status": "Delivered", "date": "2026-01-25", "total": 45.99}],
        },
        "content": {
            "hero": {
                "headline": "Fresh every day",
                "subheadline": "Local produce",
                "cta_text": "Shop now",
                "image_keyword": "farmers market",
            },
            "account": {
                "menu_items": [
                    {"id": "orders", "label": "My Orders", "icon": "package"},
                    {"id": "help", "label": "Help"},
                ]
            },
        },
        "settings": {
            "currency": "usd",
            "support": {"email": "help@grocer.test", "phone": "+1 555 0100"},
        },
    }
