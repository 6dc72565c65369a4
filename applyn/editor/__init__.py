"""Editor screen tree models and validation."""

from applyn.editor.lib import (
    DEFAULT_SCREEN_ICON,
    EditorComponent,
    EditorScreen,
    EditorScreens,
    EditorScreensError,
    ValidationIssue,
    ValidationResult,
    check_payload_size,
    count_nodes,
    issues_from_validation_error,
    iter_components,
    resolve_home_screen,
    screens_to_payload,
    validate_editor_component,
    validate_editor_screens,
    validate_editor_screens_or_raise,
)

__all__ = [
    # Models
    "EditorComponent",
    "EditorScreen",
    "EditorScreens",
    "DEFAULT_SCREEN_ICON",
    # Validation
    "ValidationIssue",
    "ValidationResult",
    "EditorScreensError",
    "check_payload_size",
    "issues_from_validation_error",
    "validate_editor_component",
    "validate_editor_screens",
    "validate_editor_screens_or_raise",
    # Helpers
    "screens_to_payload",
    "iter_components",
    "count_nodes",
    "resolve_home_screen",
]
