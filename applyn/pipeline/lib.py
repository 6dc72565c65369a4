"""App instantiation and reload pipelines.

Two flows produce persisted editor screens:

- Instantiation: template -> clone -> personalize -> validate
- Reload: stored payload -> migrate legacy spacing -> validate

Migration runs before validation on reload so payloads written before
spacing tokens existed stay loadable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from applyn.config import EditorLimits
from applyn.core import get_logger
from applyn.editor import validate_editor_screens_or_raise
from applyn.spacing import migrate_legacy_spacing_in_editor_screens
from applyn.templates import build_editor_screens_from_template

logger = get_logger(__name__)


def instantiate_from_template(
    template_id: str, app_name: str, limits: EditorLimits | None = None
) -> list[dict[str, Any]] | None:
    """Create validated editor screens for a new app.

    Args:
        template_id: Catalog template id.
        app_name: Name used for personalization.
        limits: Structural caps for validation.

    Returns:
        The normalized screens payload, or None for unknown template ids.

    Raises:
        EditorScreensError: If the built screens fail validation.
    """
    screens = build_editor_screens_from_template(template_id, app_name)
    if screens is None:
        return None
    payload = validate_editor_screens_or_raise(screens, limits)
    logger.info(f"Instantiated {template_id!r} for {app_name!r} ({len(payload)} screens)")
    return payload


@dataclass
class LoadResult:
    """Outcome of loading stored editor screens.

    Attributes:
        screens: Normalized, validated payload (None when nothing stored).
        did_migrate: True when legacy values were rewritten; the caller
            should persist `screens` back.
    """

    screens: list[dict[str, Any]] | None
    did_migrate: bool


def load_editor_screens(raw: Any, limits: EditorLimits | None = None) -> LoadResult:
    """Migrate and validate a stored editor screens payload.

    Raises:
        EditorScreensError: If the payload is invalid even after migration.
    """
    max_depth = limits.max_depth if limits else None
    migrated = migrate_legacy_spacing_in_editor_screens(raw, max_depth=max_depth)
    screens = validate_editor_screens_or_raise(migrated.screens, limits)
    if migrated.did_migrate:
        logger.info("Migrated legacy spacing values in editor screens")
    return LoadResult(screens=screens, did_migrate=migrated.did_migrate)


__all__ = [
    "LoadResult",
    "instantiate_from_template",
    "load_editor_screens",
]
