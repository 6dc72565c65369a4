"""Command handlers for the applyn CLI.

Provides the `python . templates`, `python . screens` and
`python . blueprint` command groups. Each handler parses its own argv and
returns a process exit code.
"""

import argparse
import json
from pathlib import Path
from typing import Any

from applyn.blueprint import build_editor_screens_from_blueprint, validate_app_blueprint
from applyn.core import get_logger
from applyn.editor import (
    EditorScreensError,
    count_nodes,
    resolve_home_screen,
    validate_editor_screens,
)
from applyn.pipeline import instantiate_from_template, load_editor_screens
from applyn.spacing import migrate_legacy_spacing_in_editor_screens
from applyn.templates import ALL_TEMPLATES, get_template_by_id, lint_catalog

logger = get_logger("cli")


def _read_json(path: Path) -> Any:
    """Read a JSON document, raising ValueError with the file name."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON ({e})") from e


def _write_json(data: Any, output: Path | None) -> None:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Saved to {output}")
    else:
        print(text)


def _run(parser: argparse.ArgumentParser, argv: list[str]) -> int:
    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (OSError, ValueError) as e:
        logger.error(str(e))
        return 1


# =============================================================================
# Templates Command
# =============================================================================


def cmd_templates_list(_args: argparse.Namespace) -> int:
    """List catalog templates."""
    for template in ALL_TEMPLATES.values():
        print(f"{template.id:<12} {template.name:<24} {len(template.screens)} screens")
    return 0


def cmd_templates_show(args: argparse.Namespace) -> int:
    """Print one template as JSON."""
    template = get_template_by_id(args.template_id)
    if template is None:
        logger.error(f"Unknown template: {args.template_id}")
        logger.info(f"Available templates: {', '.join(ALL_TEMPLATES)}")
        return 1
    _write_json(template.to_dict(), None)
    return 0


def cmd_templates_build(args: argparse.Namespace) -> int:
    """Instantiate a template into editor screens for an app."""
    try:
        screens = instantiate_from_template(args.template_id, args.app_name)
    except EditorScreensError as e:
        logger.error(f"Template produced invalid screens: {e}")
        return 1

    if screens is None:
        logger.error(f"Unknown template: {args.template_id}")
        return 1

    _write_json(screens, args.output)
    return 0


def cmd_templates_lint(_args: argparse.Namespace) -> int:
    """Lint every catalog template."""
    report = lint_catalog()
    for warning in report.warnings:
        logger.warning(str(warning))
    for error in report.errors:
        logger.error(str(error))

    if not report.ok:
        logger.error(f"Template validation failed with {len(report.errors)} error(s)")
        return 1

    logger.info(f"Template validation passed ({report.templates_checked} templates)")
    return 0


def handle_templates_command(argv: list[str]) -> int:
    """Handle template catalog commands."""
    parser = argparse.ArgumentParser(
        prog="python . templates",
        description="Browse, build and lint industry templates",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    list_parser = subparsers.add_parser("list", help="List available templates")
    list_parser.set_defaults(func=cmd_templates_list)

    show_parser = subparsers.add_parser("show", help="Print a template as JSON")
    show_parser.add_argument("template_id", type=str, help="Template id")
    show_parser.set_defaults(func=cmd_templates_show)

    build_parser = subparsers.add_parser(
        "build", help="Build personalized editor screens from a template"
    )
    build_parser.add_argument("template_id", type=str, help="Template id")
    build_parser.add_argument("app_name", type=str, help="App name for personalization")
    build_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    build_parser.set_defaults(func=cmd_templates_build)

    lint_parser = subparsers.add_parser("lint", help="Lint all catalog templates")
    lint_parser.set_defaults(func=cmd_templates_lint)

    return _run(parser, argv)


# =============================================================================
# Screens Command
# =============================================================================


def cmd_screens_validate(args: argparse.Namespace) -> int:
    """Validate an editor screens JSON file."""
    data = _read_json(args.file)
    result = validate_editor_screens(data)

    if not result.ok:
        for issue in result.issues:
            logger.error(f"{issue.pointer or '/'}: {issue.message}")
        logger.error(f"{args.file}: {len(result.issues)} issue(s)")
        return 1

    screens = result.value or []
    home = resolve_home_screen(screens)
    logger.info(
        f"{args.file}: valid ({len(screens)} screens, {count_nodes(screens)} components"
        + (f", home={home.id}" if home is not None else "")
        + ")"
    )
    return 0


def cmd_screens_migrate(args: argparse.Namespace) -> int:
    """Migrate legacy spacing values in an editor screens file."""
    data = _read_json(args.file)

    if args.write:
        try:
            result = load_editor_screens(data)
        except EditorScreensError as e:
            logger.error(f"{args.file}: {e}")
            return 1
        if result.did_migrate:
            _write_json(result.screens, args.file)
        else:
            logger.info(f"{args.file}: no legacy spacing values found")
        return 0

    migrated = migrate_legacy_spacing_in_editor_screens(data)
    if not migrated.did_migrate:
        logger.info(f"{args.file}: no legacy spacing values found")
    _write_json(migrated.screens, None)
    return 0


def handle_screens_command(argv: list[str]) -> int:
    """Handle editor screens commands."""
    parser = argparse.ArgumentParser(
        prog="python . screens",
        description="Validate and migrate editor screens payloads",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    validate_parser = subparsers.add_parser("validate", help="Validate a screens JSON file")
    validate_parser.add_argument("file", type=Path, help="Editor screens JSON file")
    validate_parser.set_defaults(func=cmd_screens_validate)

    migrate_parser = subparsers.add_parser(
        "migrate", help="Rewrite legacy pixel spacing as spacing tokens"
    )
    migrate_parser.add_argument("file", type=Path, help="Editor screens JSON file")
    migrate_parser.add_argument(
        "--write",
        action="store_true",
        help="Validate and rewrite the file in place instead of printing",
    )
    migrate_parser.set_defaults(func=cmd_screens_migrate)

    return _run(parser, argv)


# =============================================================================
# Blueprint Command
# =============================================================================


def cmd_blueprint_convert(args: argparse.Namespace) -> int:
    """Convert an AppBlueprint file into editor screens."""
    data = _read_json(args.file)
    result = validate_app_blueprint(data)

    if not result.ok:
        for issue in result.issues:
            logger.error(f"{issue.pointer or '/'}: {issue.message}")
        return 1

    build = build_editor_screens_from_blueprint(result.value)
    _write_json(build.to_dict(), args.output)
    logger.info(f"Converted {len(build.screens)} screens from {args.file}")
    return 0


def handle_blueprint_command(argv: list[str]) -> int:
    """Handle AppBlueprint commands."""
    parser = argparse.ArgumentParser(
        prog="python . blueprint",
        description="Convert AppBlueprint documents to editor screens",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    convert_parser = subparsers.add_parser("convert", help="Convert a blueprint JSON file")
    convert_parser.add_argument("file", type=Path, help="AppBlueprint JSON file")
    convert_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    convert_parser.set_defaults(func=cmd_blueprint_convert)

    return _run(parser, argv)


__all__ = [
    "handle_templates_command",
    "handle_screens_command",
    "handle_blueprint_command",
]
