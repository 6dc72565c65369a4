"""Spacing token model and legacy spacing migration.

Spacing-bearing props (`padding`, `gap`, and `height` on spacers) hold
symbolic design-system tokens such as ``var(--space-16)``. Older payloads
stored raw pixel numbers; this module maps those onto the token scale.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from applyn.config import get_editor_limits
from applyn.core import get_logger
from applyn.schema import spacing_props_for

logger = get_logger(__name__)


class SpacingToken(str, Enum):
    """Closed set of spacing tokens, ordered from smallest to largest."""

    SPACE_0 = "var(--space-0)"
    SPACE_4 = "var(--space-4)"
    SPACE_8 = "var(--space-8)"
    SPACE_16 = "var(--space-16)"
    SPACE_24 = "var(--space-24)"
    SPACE_32 = "var(--space-32)"
    SPACE_48 = "var(--space-48)"

    @property
    def px(self) -> int:
        """Pixel size the token resolves to."""
        return _TOKEN_PX[self]

    @property
    def rank(self) -> int:
        """Position on the scale; larger tokens have larger ranks."""
        return _TOKEN_ORDER.index(self)


_TOKEN_PX: dict[SpacingToken, int] = {
    SpacingToken.SPACE_0: 0,
    SpacingToken.SPACE_4: 4,
    SpacingToken.SPACE_8: 8,
    SpacingToken.SPACE_16: 16,
    SpacingToken.SPACE_24: 24,
    SpacingToken.SPACE_32: 32,
    SpacingToken.SPACE_48: 48,
}

_TOKEN_ORDER: tuple[SpacingToken, ...] = tuple(SpacingToken)

SPACING_TOKEN_VALUES: frozenset[str] = frozenset(t.value for t in SpacingToken)


def is_spacing_token(value: Any) -> bool:
    """Check whether a value is exactly one of the spacing token strings."""
    return isinstance(value, str) and value in SPACING_TOKEN_VALUES


def spacing_px_to_token(px: float) -> SpacingToken:
    """Map a pixel value to the smallest token whose ceiling covers it.

    Everything above 32px maps to the largest token.
    """
    for token in _TOKEN_ORDER[:-1]:
        if px <= token.px:
            return token
    return SpacingToken.SPACE_48


def _parse_number(text: str) -> float | None:
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def migrate_legacy_spacing_value(value: Any) -> SpacingToken | None:
    """Convert a possibly-legacy spacing value to a token.

    Args:
        value: A token, a pixel number, a numeric string, or anything else.

    Returns:
        The matching SpacingToken, or None when the value cannot be
        interpreted as spacing. Valid tokens are returned unchanged.

    Example:
        >>> migrate_legacy_spacing_value(12)
        <SpacingToken.SPACE_16: 'var(--space-16)'>
        >>> migrate_legacy_spacing_value("wide") is None
        True
    """
    if is_spacing_token(value):
        return SpacingToken(value)

    # bool is an int subclass but never a pixel value
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # ints beyond float range count as infinite
            return None
        if not math.isfinite(number):
            return None
        return spacing_px_to_token(number)

    if isinstance(value, str):
        trimmed = value.strip()
        if is_spacing_token(trimmed):
            return SpacingToken(trimmed)
        number = _parse_number(trimmed)
        if number is not None:
            return spacing_px_to_token(number)

    return None


@dataclass
class MigrationResult:
    """Outcome of a tree-wide spacing migration.

    Attributes:
        screens: The migrated payload (a fresh copy when input was a list).
        did_migrate: True when at least one value was rewritten; callers
            persist the migrated tree only in that case.
    """

    screens: Any
    did_migrate: bool


def _migrate_props(component: dict[str, Any]) -> bool:
    """Rewrite spacing props of an already-copied component in place."""
    props = component.get("props")
    if not isinstance(props, dict):
        return False

    changed = False
    for prop in spacing_props_for(component.get("type")):
        if prop not in props:
            continue
        migrated = migrate_legacy_spacing_value(props[prop])
        if migrated is not None and migrated.value != props[prop]:
            props[prop] = migrated.value
            changed = True
    return changed


def _copy_node(node: Any) -> Any:
    """Shallow-copy a component together with its props mapping."""
    if not isinstance(node, dict):
        return node
    copied = dict(node)
    if isinstance(node.get("props"), dict):
        copied["props"] = dict(node["props"])
    return copied


def migrate_legacy_spacing_in_editor_screens(
    screens: Any,
    max_depth: int | None = None,
) -> MigrationResult:
    """Normalize legacy numeric spacing across an editor screens payload.

    The input is never mutated. Components nested deeper than the depth
    limit are carried over untouched; such payloads fail validation anyway.

    Args:
        screens: Raw editor screens payload.
        max_depth: Optional depth limit override.

    Returns:
        MigrationResult with the rewritten screens and a did_migrate flag.
        Non-list input comes back unchanged with did_migrate False.
    """
    if not isinstance(screens, list):
        return MigrationResult(screens=screens, did_migrate=False)

    depth_limit = get_editor_limits(max_depth=max_depth).max_depth
    did_migrate = False
    rewritten = 0

    migrated_screens: list[Any] = []
    stack: list[tuple[dict[str, Any], int]] = []

    for screen in screens:
        if not isinstance(screen, dict):
            migrated_screens.append(screen)
            continue
        next_screen = dict(screen)
        components = screen.get("components")
        if isinstance(components, list):
            next_screen["components"] = [_copy_node(c) for c in components]
            stack.extend(
                (c, 1) for c in next_screen["components"] if isinstance(c, dict)
            )
        migrated_screens.append(next_screen)

    while stack:
        component, depth = stack.pop()
        if _migrate_props(component):
            did_migrate = True
            rewritten += 1

        children = component.get("children")
        if isinstance(children, list) and depth < depth_limit:
            component["children"] = [_copy_node(c) for c in children]
            stack.extend(
                (c, depth + 1) for c in component["children"] if isinstance(c, dict)
            )

    if did_migrate:
        logger.debug(f"Migrated legacy spacing on {rewritten} component(s)")

    return MigrationResult(screens=migrated_screens, did_migrate=did_migrate)


__all__ = [
    "SpacingToken",
    "SPACING_TOKEN_VALUES",
    "MigrationResult",
    "is_spacing_token",
    "spacing_px_to_token",
    "migrate_legacy_spacing_value",
    "migrate_legacy_spacing_in_editor_screens",
]
