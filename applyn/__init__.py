"""applyn: visual screen-builder core for website-to-app conversion."""

from applyn.blueprint import build_editor_screens_from_blueprint, validate_app_blueprint
from applyn.editor import (
    EditorComponent,
    EditorScreen,
    EditorScreensError,
    ValidationIssue,
    ValidationResult,
    validate_editor_component,
    validate_editor_screens,
    validate_editor_screens_or_raise,
)
from applyn.pipeline import instantiate_from_template, load_editor_screens
from applyn.schema import EditorComponentType
from applyn.spacing import (
    SpacingToken,
    migrate_legacy_spacing_in_editor_screens,
    migrate_legacy_spacing_value,
)
from applyn.templates import (
    build_editor_screens_from_template,
    clone_template,
    get_template_by_id,
)

__all__ = [
    # Spacing
    "SpacingToken",
    "migrate_legacy_spacing_value",
    "migrate_legacy_spacing_in_editor_screens",
    # Schema
    "EditorComponentType",
    # Editor
    "EditorComponent",
    "EditorScreen",
    "EditorScreensError",
    "ValidationIssue",
    "ValidationResult",
    "validate_editor_component",
    "validate_editor_screens",
    "validate_editor_screens_or_raise",
    # Templates
    "get_template_by_id",
    "clone_template",
    "build_editor_screens_from_template",
    # Blueprint
    "validate_app_blueprint",
    "build_editor_screens_from_blueprint",
    # Pipeline
    "instantiate_from_template",
    "load_editor_screens",
]
