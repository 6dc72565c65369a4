"""Data models for the industry template catalog.

Templates are immutable: mappings are stored as ``MappingProxyType`` and
sequences as tuples, so catalog entries can be shared freely. Use
``thaw`` (or the ``to_dict`` methods) to obtain plain, mutable JSON data.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


def freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of `freeze`: build fresh dicts and lists."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class TemplateComponent:
    """A component node inside a template screen."""

    id: str
    type: str
    props: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    children: tuple[TemplateComponent, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "type": self.type, "props": thaw(self.props)}
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True)
class TemplateScreen:
    """A screen of a template.

    Attributes:
        id: Screen identifier, stable within the template.
        name: Tab label.
        icon: Renderer icon id.
        components: Top-level component trees in display order.
        is_home: True for the screen the app opens on.
    """

    id: str
    name: str
    icon: str
    components: tuple[TemplateComponent, ...] = ()
    is_home: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name, "icon": self.icon}
        if self.is_home is not None:
            data["isHome"] = self.is_home
        data["components"] = [c.to_dict() for c in self.components]
        return data


@dataclass(frozen=True)
class IndustryTemplate:
    """A complete, ready-to-use app design for one industry vertical.

    Attributes:
        id: Vertical identifier (e.g. "ecommerce").
        name: Display name.
        description: One-line summary shown in the template picker.
        primary_color: Brand color as hex.
        secondary_color: Accent color as hex.
        icon: Renderer icon id for the template card.
        screens: Screens in tab order.
        features: Native feature flags the template enables.
    """

    id: str
    name: str
    description: str
    primary_color: str
    secondary_color: str
    icon: str
    screens: tuple[TemplateScreen, ...]
    features: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "icon": self.icon,
            "screens": [s.to_dict() for s in self.screens],
            "features": list(self.features),
        }

    def summary(self) -> dict[str, Any]:
        """Short description for listings."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "screens": [s.name for s in self.screens],
            "features": list(self.features),
        }


__all__ = [
    "TemplateComponent",
    "TemplateScreen",
    "IndustryTemplate",
    "freeze",
    "thaw",
]
