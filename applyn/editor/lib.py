"""Editor component tree and screen collection models with validation.

This module defines the persisted ``editorScreens`` contract shared by the
application database and the native preview renderer:

- ``EditorComponent``: recursive node (id, type, props, children)
- ``EditorScreen``: named, ordered list of component trees
- Validation returning path-addressed issues instead of raising

Validation of a screens collection runs in two stages. A structural guard
walks the raw payload first (screen count, node count, nesting depth) and
stops early once a cap is exceeded. Only payloads that pass the guard are
shape-validated with pydantic and then refined for spacing tokens.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from applyn.config import EditorLimits, get_editor_limits
from applyn.core import get_logger
from applyn.schema import (
    EditorComponentType,
    collect_unsupported_types,
    spacing_props_for,
)
from applyn.spacing import is_spacing_token

logger = get_logger(__name__)

DEFAULT_SCREEN_ICON = "file-text"

IssuePath = tuple[str | int, ...]


# =============================================================================
# Models
# =============================================================================


class EditorComponent(BaseModel):
    """Recursive node of the visual editor tree.

    Attributes:
        id: Identifier, unique per app instance (1-200 chars).
        type: Allowlisted component type.
        props: Free-form renderer properties. Spacing props are checked
            separately by the spacing refinement.
        children: Nested components, validated with this same model.
    """

    id: StrictStr = Field(..., min_length=1, max_length=200)
    type: EditorComponentType
    props: dict[str, Any] = Field(default_factory=dict)
    children: Optional[list["EditorComponent"]] = None

    model_config = ConfigDict(extra="ignore")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape."""
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "props": dict(self.props),
        }
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    def walk(self) -> Iterator[EditorComponent]:
        """Iterate over this node and all descendants in pre-order."""
        stack: list[EditorComponent] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))


class EditorScreen(BaseModel):
    """A named screen holding an ordered list of component trees."""

    id: StrictStr = Field(..., min_length=1, max_length=200)
    name: StrictStr = Field(..., min_length=1, max_length=80)
    icon: StrictStr = Field(default=DEFAULT_SCREEN_ICON, max_length=20)
    is_home: Optional[StrictBool] = Field(default=None, alias="isHome")
    components: list[EditorComponent] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape."""
        data: dict[str, Any] = {"id": self.id, "name": self.name, "icon": self.icon}
        if self.is_home is not None:
            data["isHome"] = self.is_home
        data["components"] = [c.to_dict() for c in self.components]
        return data


EditorScreens = list[EditorScreen]

_COMPONENT_ADAPTER = TypeAdapter(EditorComponent)
_SCREENS_ADAPTER = TypeAdapter(EditorScreens)


# =============================================================================
# Validation results
# =============================================================================


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation problem tied to a location in the payload.

    Attributes:
        path: Keys and indices leading to the offending value. Empty for
            collection-level problems.
        message: Human-readable description.
        code: Machine-readable classification.
    """

    path: IssuePath
    message: str
    code: str

    @property
    def pointer(self) -> str:
        """JSON pointer form of the path, e.g. ``/0/components/1/props/gap``."""
        if not self.path:
            return ""
        return "/" + "/".join(
            str(p).replace("~", "~0").replace("/", "~1") for p in self.path
        )

    @property
    def dotted(self) -> str:
        """Dotted form of the path, e.g. ``0.components.1.props.gap``."""
        return ".".join(str(p) for p in self.path)

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path), "message": self.message, "code": self.code}


@dataclass
class ValidationResult:
    """Outcome of validating a payload.

    Attributes:
        value: The normalized model(s) when valid, otherwise None.
        issues: Every problem found; empty when valid.
    """

    value: Any = None
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


class EditorScreensError(ValueError):
    """Raised by the ``..._or_raise`` entry points for invalid payloads."""

    def __init__(self, message: str, issues: list[ValidationIssue] | None = None):
        super().__init__(message)
        self.issues = issues or []


# =============================================================================
# Structural guard
# =============================================================================


def check_payload_size(
    screens: list[Any], limits: EditorLimits | None = None
) -> ValidationIssue | None:
    """Check a raw screens list against the structural caps.

    The walk is iterative and stops as soon as any cap is exceeded, so the
    work per call is bounded regardless of payload shape.

    Args:
        screens: Raw screens list.
        limits: Caps to apply; resolved from configuration when omitted.

    Returns:
        A single collection-level issue, or None when within limits.
    """
    limits = limits or get_editor_limits()

    if len(screens) > limits.max_screens:
        return ValidationIssue(
            path=(),
            message=(
                f"Editor screens payload has {len(screens)} screens "
                f"(max {limits.max_screens})"
            ),
            code="too_many_screens",
        )

    nodes = 0
    stack: list[tuple[Any, int]] = []
    for screen in screens:
        if isinstance(screen, dict) and isinstance(screen.get("components"), list):
            stack.extend((c, 1) for c in screen["components"])

    while stack:
        node, depth = stack.pop()
        if not isinstance(node, dict):
            continue
        nodes += 1
        if nodes > limits.max_nodes:
            return ValidationIssue(
                path=(),
                message=f"Editor screens payload too large (more than {limits.max_nodes} components)",
                code="payload_too_large",
            )
        if depth > limits.max_depth:
            return ValidationIssue(
                path=(),
                message=f"Editor screens payload nested too deeply (max depth {limits.max_depth})",
                code="payload_too_deep",
            )
        children = node.get("children")
        if isinstance(children, list):
            stack.extend((c, depth + 1) for c in children)

    return None


# =============================================================================
# Refinement
# =============================================================================


def issues_from_validation_error(
    error: PydanticValidationError, prefix: IssuePath = ()
) -> list[ValidationIssue]:
    """Convert a pydantic error into path-addressed issues."""
    return [
        ValidationIssue(path=prefix + tuple(e["loc"]), message=e["msg"], code=e["type"])
        for e in error.errors(include_url=False)
    ]


def _spacing_issues(component: Any, base: IssuePath) -> list[ValidationIssue]:
    """Collect spacing-token violations in a raw component tree.

    Each invalid value yields its own issue at ``<node path>/props/<prop>``.
    """
    issues: list[ValidationIssue] = []
    stack: list[tuple[Any, IssuePath]] = [(component, base)]

    while stack:
        node, path = stack.pop()
        if not isinstance(node, dict):
            continue

        props = node.get("props")
        if isinstance(props, dict):
            node_type = node.get("type")
            for prop in spacing_props_for(node_type):
                value = props.get(prop)
                if value is None or is_spacing_token(value):
                    continue
                subject = f"spacer props.{prop}" if node_type == "spacer" and prop == "height" else f"props.{prop}"
                issues.append(
                    ValidationIssue(
                        path=path + ("props", prop),
                        message=f"Invalid spacing token for {subject} (must be a var(--space-*) token)",
                        code="invalid_spacing_token",
                    )
                )

        children = node.get("children")
        if isinstance(children, list):
            for index in reversed(range(len(children))):
                stack.append((children[index], path + ("children", index)))

    return issues


# =============================================================================
# Public validation API
# =============================================================================


def validate_editor_component(data: Any) -> ValidationResult:
    """Validate a single component tree.

    Args:
        data: Raw component mapping (props optional, defaulting to {}).

    Returns:
        ValidationResult holding an EditorComponent, or every issue found.
        Paths are relative to the component, e.g. ``("props", "padding")``.

    No nesting cap is applied here, unlike ``validate_editor_screens``.
    pydantic-core still refuses chains thousands of levels deep; those come
    back as a single ``recursion_loop`` issue.
    """
    issues: list[ValidationIssue] = []
    component: EditorComponent | None = None

    try:
        component = _COMPONENT_ADAPTER.validate_python(data)
    except PydanticValidationError as e:
        issues.extend(issues_from_validation_error(e))

    issues.extend(_spacing_issues(data, ()))

    if issues:
        return ValidationResult(value=None, issues=issues)
    return ValidationResult(value=component)


def validate_editor_screens(
    data: Any, limits: EditorLimits | None = None
) -> ValidationResult:
    """Validate an editor screens collection.

    None is accepted as "no screens". Oversized payloads fail with a single
    collection-level issue before any per-node validation runs.

    Args:
        data: Raw screens payload.
        limits: Structural caps; resolved from configuration when omitted.

    Returns:
        ValidationResult holding a list of EditorScreen, or the issues.
    """
    if data is None:
        return ValidationResult(value=None)

    if not isinstance(data, list):
        return ValidationResult(
            issues=[
                ValidationIssue(
                    path=(),
                    message=f"Expected a list of screens, got {type(data).__name__}",
                    code="list_type",
                )
            ]
        )

    guard_issue = check_payload_size(data, limits)
    if guard_issue is not None:
        logger.debug(f"Rejected editor screens payload: {guard_issue.message}")
        return ValidationResult(issues=[guard_issue])

    issues: list[ValidationIssue] = []
    screens: list[EditorScreen] | None = None

    try:
        screens = _SCREENS_ADAPTER.validate_python(data)
    except PydanticValidationError as e:
        issues.extend(issues_from_validation_error(e))

    for s_index, screen in enumerate(data):
        if not isinstance(screen, dict) or not isinstance(screen.get("components"), list):
            continue
        for c_index, component in enumerate(screen["components"]):
            issues.extend(_spacing_issues(component, (s_index, "components", c_index)))

    if issues:
        return ValidationResult(value=None, issues=issues)
    return ValidationResult(value=screens)


def validate_editor_screens_or_raise(
    data: Any, limits: EditorLimits | None = None
) -> list[dict[str, Any]] | None:
    """Validate screens and return the normalized persisted payload.

    Raises:
        EditorScreensError: With an actionable message. Unsupported component
            types are named explicitly; otherwise the first issue's path
            and message are reported.
    """
    result = validate_editor_screens(data, limits)
    if result.ok:
        return screens_to_payload(result.value)

    unsupported = collect_unsupported_types(data)
    if unsupported:
        raise EditorScreensError(
            f"Unsupported component type(s): {', '.join(unsupported)}",
            result.issues,
        )

    first = result.issues[0]
    location = first.dotted or "editorScreens"
    raise EditorScreensError(
        f"Invalid editor screens at {location}: {first.message}", result.issues
    )


# =============================================================================
# Helpers
# =============================================================================


def screens_to_payload(screens: list[EditorScreen] | None) -> list[dict[str, Any]] | None:
    """Serialize validated screens to the persisted JSON shape."""
    if screens is None:
        return None
    return [screen.to_dict() for screen in screens]


def iter_components(screens: list[EditorScreen]) -> Iterator[EditorComponent]:
    """Iterate over every component of every screen in document order."""
    for screen in screens:
        for component in screen.components:
            yield from component.walk()


def count_nodes(screens: list[EditorScreen]) -> int:
    """Count every component across all screens."""
    return sum(1 for _ in iter_components(screens))


def _is_home(screen: EditorScreen | dict[str, Any]) -> bool:
    if isinstance(screen, EditorScreen):
        return screen.is_home is True
    return isinstance(screen, dict) and screen.get("isHome") is True


def resolve_home_screen(
    screens: list[EditorScreen] | list[dict[str, Any]],
) -> EditorScreen | dict[str, Any] | None:
    """Pick the screen the app opens on.

    Zero or several ``isHome`` flags are tolerated: the first flagged screen
    wins, and without any flag the first screen is used.
    """
    if not screens:
        return None
    for screen in screens:
        if _is_home(screen):
            return screen
    return screens[0]


__all__ = [
    "DEFAULT_SCREEN_ICON",
    "EditorComponent",
    "EditorScreen",
    "EditorScreens",
    "ValidationIssue",
    "ValidationResult",
    "EditorScreensError",
    "check_payload_size",
    "issues_from_validation_error",
    "validate_editor_component",
    "validate_editor_screens",
    "validate_editor_screens_or_raise",
    "screens_to_payload",
    "iter_components",
    "count_nodes",
    "resolve_home_screen",
]
