"""Template linting.

Checks catalog templates for content the native renderer cannot display
consistently:

- Spacing props must hold ``var(--space-*)`` tokens
- Raw ``style`` / ``className`` props are not allowed
- Icons must be renderer icon ids, never emoji

Emoji in navigation labels (template and screen names) only warn.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from typing import Any

from applyn.core import get_logger
from applyn.schema import is_icon_id, spacing_props_for
from applyn.spacing import is_spacing_token
from applyn.templates.catalog import ALL_TEMPLATES
from applyn.templates.models import IndustryTemplate

logger = get_logger(__name__)

# Code point ranges of pictographic emoji blocks
_EMOJI_RANGES: tuple[tuple[int, int], ...] = (
    (0x1F000, 0x1FAFF),
    (0x2600, 0x27BF),
    (0x2B00, 0x2BFF),
)


@dataclass(frozen=True)
class LintMessage:
    """A lint finding at a dotted template path."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class LintReport:
    """Lint findings for one or more templates."""

    errors: list[LintMessage] = field(default_factory=list)
    warnings: list[LintMessage] = field(default_factory=list)
    templates_checked: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors

    def extend(self, other: LintReport) -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        self.templates_checked += other.templates_checked


def has_emoji(value: Any) -> bool:
    """Check whether a string contains a pictographic character."""
    if not isinstance(value, str):
        return False
    for char in value:
        code = ord(char)
        if any(lo <= code <= hi for lo, hi in _EMOJI_RANGES):
            return True
        if unicodedata.category(char) == "So":
            return True
    return False


def _check_icon(report: LintReport, path: str, value: Any) -> None:
    if value is None or value == "":
        return
    if has_emoji(value):
        report.errors.append(LintMessage(path, f"Icon contains emoji: {value!r}"))
    elif not is_icon_id(value):
        report.errors.append(
            LintMessage(path, f"Icon must be a known icon id. Got: {value!r}")
        )


def _warn_nav_label(report: LintReport, path: str, value: Any) -> None:
    if has_emoji(value):
        report.warnings.append(
            LintMessage(path, f"Emoji found in navigation label (warning only). Got: {value!r}")
        )


def _check_spacing(report: LintReport, path: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        report.errors.append(
            LintMessage(path, f"Spacing must be a token string, not a number: {value}")
        )
    elif isinstance(value, str) and "px" in value:
        report.errors.append(
            LintMessage(path, f"Spacing must not use raw 'px' strings: {value!r}")
        )
    elif not is_spacing_token(value):
        report.errors.append(
            LintMessage(path, f"Spacing must be a var(--space-*) token. Got: {value!r}")
        )


def _check_component(report: LintReport, path: str, component: dict[str, Any]) -> None:
    stack: list[tuple[str, Any]] = [(path, component)]
    while stack:
        node_path, node = stack.pop()
        if not isinstance(node, dict):
            continue

        props = node.get("props") if isinstance(node.get("props"), dict) else {}
        for key in ("style", "className"):
            if key in props:
                report.errors.append(
                    LintMessage(f"{node_path}.props.{key}", f"Templates must not include raw {key}")
                )

        for prop in spacing_props_for(node.get("type")):
            if prop in props:
                _check_spacing(report, f"{node_path}.props.{prop}", props[prop])

        if "icon" in props:
            _check_icon(report, f"{node_path}.props.icon", props["icon"])

        items = props.get("items")
        if isinstance(items, list):
            for index, item in enumerate(items):
                if isinstance(item, dict) and "icon" in item:
                    _check_icon(report, f"{node_path}.props.items[{index}].icon", item["icon"])

        children = node.get("children")
        if isinstance(children, list):
            for index in reversed(range(len(children))):
                stack.append((f"{node_path}.children[{index}]", children[index]))


def lint_template(template: IndustryTemplate) -> LintReport:
    """Lint a single template.

    Returns:
        LintReport whose paths look like ``ecommerce.screens[0].components[1].props.gap``.
    """
    report = LintReport(templates_checked=1)
    data = template.to_dict()
    prefix = template.id

    _warn_nav_label(report, f"{prefix}.name", data["name"])
    _check_icon(report, f"{prefix}.icon", data["icon"])

    for s_index, screen in enumerate(data["screens"]):
        screen_path = f"{prefix}.screens[{s_index}]"
        _warn_nav_label(report, f"{screen_path}.name", screen.get("name"))
        _check_icon(report, f"{screen_path}.icon", screen.get("icon"))
        for c_index, component in enumerate(screen.get("components", [])):
            _check_component(report, f"{screen_path}.components[{c_index}]", component)

    return report


def lint_catalog() -> LintReport:
    """Lint every template in the catalog."""
    report = LintReport()
    for template in ALL_TEMPLATES.values():
        report.extend(lint_template(template))
    logger.debug(
        f"Linted {report.templates_checked} templates: "
        f"{len(report.errors)} errors, {len(report.warnings)} warnings"
    )
    return report


__all__ = [
    "LintMessage",
    "LintReport",
    "has_emoji",
    "lint_template",
    "lint_catalog",
]
