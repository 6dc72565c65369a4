"""Authoritative component registry for the visual screen builder.

This module is the single source of truth for which component types the
native preview renderer supports. It provides:
- The closed `EditorComponentType` allowlist
- Rich component metadata (category, description, spacing props)
- Lookup helpers used by validation, migration and template linting

The allowlist is fail-closed: any type tag not listed here is rejected at
validation time and never persisted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ComponentCategory(str, Enum):
    """High-level component groupings."""

    LAYOUT = "layout"
    CONTENT = "content"
    CONTROL = "control"
    COMMERCE = "commerce"


class EditorComponentType(str, Enum):
    """Component types supported by the native preview renderer."""

    # Layout
    SPACER = "spacer"
    DIVIDER = "divider"
    CONTAINER = "container"
    GRID = "grid"
    SECTION = "section"
    CARD = "card"

    # Content
    TEXT = "text"
    HEADING = "heading"
    IMAGE = "image"
    LIST = "list"
    CAROUSEL = "carousel"
    TESTIMONIAL = "testimonial"
    STATS = "stats"
    TEAM = "team"
    SOCIAL_LINKS = "socialLinks"
    MAP = "map"
    HERO = "hero"

    # Controls
    BUTTON = "button"
    INPUT = "input"
    CONTACT_FORM = "contactForm"

    # Commerce
    PRODUCT_GRID = "productGrid"


# Props that must hold a spacing token on every component type
COMMON_SPACING_PROPS: tuple[str, ...] = ("padding", "gap")


@dataclass(frozen=True)
class ComponentMeta:
    """Metadata definition for an editor component type.

    Attributes:
        type: The component type.
        category: Grouping for palettes and filtering.
        description: Human-readable description.
        accepts_children: Whether the renderer lays out child components.
        spacing_props: Props that must hold a spacing token for this type.
    """

    type: EditorComponentType
    category: ComponentCategory
    description: str
    accepts_children: bool = False
    spacing_props: tuple[str, ...] = field(default=COMMON_SPACING_PROPS)

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to dictionary for export."""
        return {
            "type": self.type.value,
            "category": self.category.value,
            "description": self.description,
            "accepts_children": self.accepts_children,
            "spacing_props": list(self.spacing_props),
        }


COMPONENT_REGISTRY: dict[EditorComponentType, ComponentMeta] = {
    # === LAYOUT ===
    EditorComponentType.SPACER: ComponentMeta(
        type=EditorComponentType.SPACER,
        category=ComponentCategory.LAYOUT,
        description="Vertical whitespace sized by a spacing token",
        spacing_props=COMMON_SPACING_PROPS + ("height",),
    ),
    EditorComponentType.DIVIDER: ComponentMeta(
        type=EditorComponentType.DIVIDER,
        category=ComponentCategory.LAYOUT,
        description="Horizontal rule separating content blocks",
    ),
    EditorComponentType.CONTAINER: ComponentMeta(
        type=EditorComponentType.CONTAINER,
        category=ComponentCategory.LAYOUT,
        description="Generic wrapper grouping child components",
        accepts_children=True,
    ),
    EditorComponentType.GRID: ComponentMeta(
        type=EditorComponentType.GRID,
        category=ComponentCategory.LAYOUT,
        description="Column grid laying out children in rows",
        accepts_children=True,
    ),
    EditorComponentType.SECTION: ComponentMeta(
        type=EditorComponentType.SECTION,
        category=ComponentCategory.LAYOUT,
        description="Titled content section with optional show-more action",
        accepts_children=True,
    ),
    EditorComponentType.CARD: ComponentMeta(
        type=EditorComponentType.CARD,
        category=ComponentCategory.LAYOUT,
        description="Elevated tile with title, icon or image",
        accepts_children=True,
    ),
    # === CONTENT ===
    EditorComponentType.TEXT: ComponentMeta(
        type=EditorComponentType.TEXT,
        category=ComponentCategory.CONTENT,
        description="Paragraph or inline body text",
    ),
    EditorComponentType.HEADING: ComponentMeta(
        type=EditorComponentType.HEADING,
        category=ComponentCategory.CONTENT,
        description="Section heading with a level from 1 to 4",
    ),
    EditorComponentType.IMAGE: ComponentMeta(
        type=EditorComponentType.IMAGE,
        category=ComponentCategory.CONTENT,
        description="Single image with optional caption",
    ),
    EditorComponentType.LIST: ComponentMeta(
        type=EditorComponentType.LIST,
        category=ComponentCategory.CONTENT,
        description="Item list rendered as menu, media, cart or order rows",
    ),
    EditorComponentType.CAROUSEL: ComponentMeta(
        type=EditorComponentType.CAROUSEL,
        category=ComponentCategory.CONTENT,
        description="Horizontally swipeable slides",
    ),
    EditorComponentType.TESTIMONIAL: ComponentMeta(
        type=EditorComponentType.TESTIMONIAL,
        category=ComponentCategory.CONTENT,
        description="Customer quotes with name and rating",
    ),
    EditorComponentType.STATS: ComponentMeta(
        type=EditorComponentType.STATS,
        category=ComponentCategory.CONTENT,
        description="Row of headline numbers with labels",
    ),
    EditorComponentType.TEAM: ComponentMeta(
        type=EditorComponentType.TEAM,
        category=ComponentCategory.CONTENT,
        description="Staff or member cards with photo and role",
    ),
    EditorComponentType.SOCIAL_LINKS: ComponentMeta(
        type=EditorComponentType.SOCIAL_LINKS,
        category=ComponentCategory.CONTENT,
        description="Icon links to social profiles",
    ),
    EditorComponentType.MAP: ComponentMeta(
        type=EditorComponentType.MAP,
        category=ComponentCategory.CONTENT,
        description="Static location map with address",
    ),
    EditorComponentType.HERO: ComponentMeta(
        type=EditorComponentType.HERO,
        category=ComponentCategory.CONTENT,
        description="Full-width banner with title, subtitle and call to action",
    ),
    # === CONTROLS ===
    EditorComponentType.BUTTON: ComponentMeta(
        type=EditorComponentType.BUTTON,
        category=ComponentCategory.CONTROL,
        description="Tappable action with navigate/link/call actions",
    ),
    EditorComponentType.INPUT: ComponentMeta(
        type=EditorComponentType.INPUT,
        category=ComponentCategory.CONTROL,
        description="Single-line text or search field",
    ),
    EditorComponentType.CONTACT_FORM: ComponentMeta(
        type=EditorComponentType.CONTACT_FORM,
        category=ComponentCategory.CONTROL,
        description="Multi-field form submitting to the app owner",
    ),
    # === COMMERCE ===
    EditorComponentType.PRODUCT_GRID: ComponentMeta(
        type=EditorComponentType.PRODUCT_GRID,
        category=ComponentCategory.COMMERCE,
        description="Grid of product tiles with price, rating and badge",
    ),
}

ALLOWED_COMPONENT_TYPES: frozenset[str] = frozenset(ct.value for ct in EditorComponentType)

# Icon identifiers shipped with the native renderer
ICON_IDS: frozenset[str] = frozenset(
    {
        "home",
        "search",
        "shopping-bag",
        "shopping-cart",
        "package",
        "user",
        "users",
        "heart",
        "star",
        "calendar",
        "clock",
        "map-pin",
        "phone",
        "mail",
        "message-circle",
        "bell",
        "settings",
        "help-circle",
        "file-text",
        "info",
        "image",
        "camera",
        "music",
        "radio",
        "mic",
        "play",
        "headphones",
        "book",
        "book-open",
        "graduation-cap",
        "award",
        "activity",
        "dumbbell",
        "trending-up",
        "stethoscope",
        "clipboard",
        "building",
        "key",
        "briefcase",
        "newspaper",
        "bookmark",
        "folder",
        "grid",
        "list",
        "gift",
        "scissors",
        "sparkles",
        "utensils",
        "coffee",
        "church",
        "globe",
        "credit-card",
        "log-out",
        "lock",
        "tag",
        "truck",
    }
)


def get_component_meta(component_type: EditorComponentType) -> ComponentMeta:
    """Get metadata for a component type.

    Raises:
        KeyError: If component type not found in registry.
    """
    return COMPONENT_REGISTRY[component_type]


def get_components_by_category(
    category: ComponentCategory,
) -> list[EditorComponentType]:
    """Get all component types in a category."""
    return [
        meta.type for meta in COMPONENT_REGISTRY.values() if meta.category == category
    ]


def is_allowed_component_type(value: Any) -> bool:
    """Check whether a raw value is an allowlisted component type tag.

    Only exact, case-sensitive string matches are accepted.
    """
    return isinstance(value, str) and value in ALLOWED_COMPONENT_TYPES


def spacing_props_for(component_type: Any) -> tuple[str, ...]:
    """Get the props that must hold spacing tokens for a type.

    Unknown types get the common spacing props so raw payloads can still
    be inspected before the allowlist check rejects them.
    """
    if is_allowed_component_type(component_type):
        return COMPONENT_REGISTRY[EditorComponentType(component_type)].spacing_props
    return COMMON_SPACING_PROPS


def is_icon_id(value: Any) -> bool:
    """Check whether a value names a renderer icon (case-insensitive)."""
    return isinstance(value, str) and value.strip().lower() in ICON_IDS


def collect_unsupported_types(screens: Any) -> list[str]:
    """Collect component type tags outside the allowlist.

    Walks a raw, unvalidated screens payload. Non-list input and malformed
    nodes are skipped.

    Args:
        screens: Raw screens payload.

    Returns:
        Sorted list of distinct unsupported type tags.
    """
    unsupported: set[str] = set()
    if not isinstance(screens, list):
        return []

    stack: list[Any] = []
    for screen in screens:
        if isinstance(screen, dict) and isinstance(screen.get("components"), list):
            stack.extend(screen["components"])

    while stack:
        node = stack.pop()
        if not isinstance(node, dict):
            continue
        tag = node.get("type")
        tag = "" if tag is None else str(tag)
        if tag and tag not in ALLOWED_COMPONENT_TYPES:
            unsupported.add(tag)
        children = node.get("children")
        if isinstance(children, list):
            stack.extend(children)

    return sorted(unsupported)


def export_component_catalog() -> dict[str, Any]:
    """Export the registry for editor palettes and documentation."""
    return {
        "component_types": {
            ct.value: COMPONENT_REGISTRY[ct].to_dict() for ct in EditorComponentType
        },
        "categories": {
            cat.value: [ct.value for ct in get_components_by_category(cat)]
            for cat in ComponentCategory
        },
        "icons": sorted(ICON_IDS),
    }


__all__ = [
    "ComponentCategory",
    "EditorComponentType",
    "ComponentMeta",
    "COMPONENT_REGISTRY",
    "COMMON_SPACING_PROPS",
    "ALLOWED_COMPONENT_TYPES",
    "ICON_IDS",
    "get_component_meta",
    "get_components_by_category",
    "is_allowed_component_type",
    "spacing_props_for",
    "is_icon_id",
    "collect_unsupported_types",
    "export_component_catalog",
]
