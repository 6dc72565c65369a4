"""Spacing tokens and legacy spacing migration."""

from .lib import (
    SPACING_TOKEN_VALUES,
    MigrationResult,
    SpacingToken,
    is_spacing_token,
    migrate_legacy_spacing_in_editor_screens,
    migrate_legacy_spacing_value,
    spacing_px_to_token,
)

__all__ = [
    "SpacingToken",
    "SPACING_TOKEN_VALUES",
    "MigrationResult",
    "is_spacing_token",
    "spacing_px_to_token",
    "migrate_legacy_spacing_value",
    "migrate_legacy_spacing_in_editor_screens",
]
