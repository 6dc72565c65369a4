"""Schema module - authoritative component allowlist for the screen builder.

Example usage:
    >>> from applyn.schema import EditorComponentType, is_allowed_component_type
    >>> is_allowed_component_type("hero")
    True
    >>> is_allowed_component_type("iframe")
    False
"""

from .lib import (
    ALLOWED_COMPONENT_TYPES,
    COMMON_SPACING_PROPS,
    COMPONENT_REGISTRY,
    ICON_IDS,
    ComponentCategory,
    ComponentMeta,
    EditorComponentType,
    collect_unsupported_types,
    export_component_catalog,
    get_component_meta,
    get_components_by_category,
    is_allowed_component_type,
    is_icon_id,
    spacing_props_for,
)

__all__ = [
    # Enums
    "ComponentCategory",
    "EditorComponentType",
    # Metadata
    "ComponentMeta",
    "COMPONENT_REGISTRY",
    "COMMON_SPACING_PROPS",
    "ALLOWED_COMPONENT_TYPES",
    "ICON_IDS",
    # Lookup functions
    "get_component_meta",
    "get_components_by_category",
    "is_allowed_component_type",
    "spacing_props_for",
    "is_icon_id",
    "collect_unsupported_types",
    "export_component_catalog",
]
