"""CLI entry point for applyn.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the command handlers in `applyn.cli`.
"""

import sys

from dotenv import load_dotenv

from applyn.cli import (
    handle_blueprint_command,
    handle_screens_command,
    handle_templates_command,
)
from applyn.config import get_log_level
from applyn.core import get_logger, setup_logging

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Templates ===")
    print("  templates  Browse, build and lint industry templates")
    print("\n=== Editor Screens ===")
    print("  screens    Validate and migrate editor screens payloads")
    print("  blueprint  Convert AppBlueprint documents to editor screens")
    print("\nTemplates:")
    print("  python . templates list                      # List templates")
    print("  python . templates show ecommerce            # Print a template")
    print("  python . templates build ecommerce 'Acme'    # Build app screens")
    print("  python . templates lint                      # Lint the catalog")
    print("\nEditor Screens:")
    print("  python . screens validate screens.json       # Validate a payload")
    print("  python . screens migrate screens.json        # Preview spacing migration")
    print("  python . screens migrate screens.json --write")
    print("  python . blueprint convert blueprint.json -o screens.json")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "templates": lambda: handle_templates_command(rest_args),
        "screens": lambda: handle_screens_command(rest_args),
        "blueprint": lambda: handle_blueprint_command(rest_args),
    }

    if command in commands:
        setup_logging(get_log_level())
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
