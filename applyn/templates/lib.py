"""Template lookup, cloning and personalization.

Building an app from a template is a three-step pipeline:

1. Look the template up in the read-only catalog
2. Clone it so every screen and component gets a fresh id
3. Personalize hero and heading copy with the app's name

The result is the plain JSON payload the visual editor persists.
"""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from applyn.core import get_logger
from applyn.templates.catalog import ALL_TEMPLATES, TEMPLATE_SUBTITLES
from applyn.templates.models import (
    IndustryTemplate,
    TemplateComponent,
    TemplateScreen,
    freeze,
    thaw,
)

logger = get_logger(__name__)

# Hero titles containing any of these are replaced by the app name
HERO_TITLE_MARKERS: tuple[str, ...] = ("Fresh Products", "Welcome")


def get_template_by_id(template_id: str) -> IndustryTemplate | None:
    """Get a catalog template, or None for unknown ids."""
    return ALL_TEMPLATES.get(template_id)


def get_template_ids() -> list[str]:
    """List catalog template ids in catalog order."""
    return list(ALL_TEMPLATES.keys())


def new_component_id() -> str:
    return f"comp_{uuid4().hex}"


def new_screen_id() -> str:
    return f"screen_{uuid4().hex}"


def _clone_component(component: TemplateComponent) -> TemplateComponent:
    children = None
    if component.children is not None:
        children = tuple(_clone_component(child) for child in component.children)
    return TemplateComponent(
        id=new_component_id(),
        type=component.type,
        props=freeze(thaw(component.props)),
        children=children,
    )


def clone_template(template: IndustryTemplate) -> IndustryTemplate:
    """Copy a template, assigning fresh ids to every screen and component.

    The tree shape, types and props are preserved; props are deep copies,
    so the clone shares no mutable state with the catalog entry.

    Args:
        template: Template to copy.

    Returns:
        A new IndustryTemplate with ``screen_<hex>`` and ``comp_<hex>`` ids.
    """
    screens = tuple(
        TemplateScreen(
            id=new_screen_id(),
            name=screen.name,
            icon=screen.icon,
            components=tuple(_clone_component(c) for c in screen.components),
            is_home=screen.is_home,
        )
        for screen in template.screens
    )
    return IndustryTemplate(
        id=template.id,
        name=template.name,
        description=template.description,
        primary_color=template.primary_color,
        secondary_color=template.secondary_color,
        icon=template.icon,
        screens=screens,
        features=template.features,
    )


def personalize_component(
    component: dict[str, Any], template_id: str, app_name: str
) -> dict[str, Any]:
    """Return a copy of a component tree with app-specific copy.

    - Hero titles mentioning a placeholder marker become the app name
    - Hero subtitles become the vertical's tagline when one exists
    - "About Us" / "Contact Us" headings and texts mention the app name
    """
    result = dict(component)
    props = component.get("props")
    comp_type = component.get("type")

    if isinstance(props, dict):
        props = dict(props)
        if comp_type == "hero":
            title = props.get("title")
            if isinstance(title, str) and any(m in title for m in HERO_TITLE_MARKERS):
                props["title"] = app_name
            if props.get("subtitle"):
                props["subtitle"] = TEMPLATE_SUBTITLES.get(template_id, props["subtitle"])
        elif comp_type in ("heading", "text"):
            if props.get("text") == "About Us":
                props["text"] = f"About {app_name}"
            elif props.get("text") == "Contact Us":
                props["text"] = f"Contact {app_name}"
        result["props"] = props

    children = component.get("children")
    if isinstance(children, list):
        result["children"] = [
            personalize_component(child, template_id, app_name) for child in children
        ]
    return result


def build_editor_screens_from_template(
    template_id: str, app_name: str
) -> list[dict[str, Any]] | None:
    """Build a personalized editor screens payload from a catalog template.

    Args:
        template_id: Catalog id, e.g. "ecommerce".
        app_name: Name substituted into hero and heading copy.

    Returns:
        One ``{id, name, icon, isHome, components}`` dict per screen, or
        None when the template id is unknown.

    Example:
        >>> screens = build_editor_screens_from_template("ecommerce", "Acme")
        >>> screens[0]["components"][0]["props"]["title"]
        'Acme'
    """
    template = get_template_by_id(template_id)
    if template is None:
        logger.debug(f"Unknown template id: {template_id!r}")
        return None

    cloned = clone_template(template)
    screens = [
        {
            "id": screen.id,
            "name": screen.name,
            "icon": screen.icon,
            "isHome": bool(screen.is_home),
            "components": [
                personalize_component(c.to_dict(), template_id, app_name)
                for c in screen.components
            ],
        }
        for screen in cloned.screens
    ]
    logger.debug(
        f"Built {len(screens)} screens from template {template_id!r} for {app_name!r}"
    )
    return screens


__all__ = [
    "HERO_TITLE_MARKERS",
    "get_template_by_id",
    "get_template_ids",
    "new_component_id",
    "new_screen_id",
    "clone_template",
    "personalize_component",
    "build_editor_screens_from_template",
]
