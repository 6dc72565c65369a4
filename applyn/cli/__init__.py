"""Command handlers for the applyn CLI."""

from .lib import (
    handle_blueprint_command,
    handle_screens_command,
    handle_templates_command,
)

__all__ = [
    "handle_templates_command",
    "handle_screens_command",
    "handle_blueprint_command",
]
