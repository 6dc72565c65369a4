"""Centralized configuration management for applyn.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from applyn.config import EnvVar, get_environment
    >>>
    >>> max_nodes = get_environment(EnvVar.APPLYN_MAX_NODES)  # Returns int: 5000
    >>> max_nodes = get_environment(EnvVar.APPLYN_MAX_NODES, override=100)

Environment Variable Categories:
    limits: Structural guards for editor screen payloads
    content: Image and currency defaults used when building screens
    logging: Log verbosity
"""

from .lib import (
    EditorLimits,
    EnvConfig,
    EnvVar,
    get_default_currency,
    get_editor_limits,
    get_environment,
    get_environment_info,
    get_image_proxy_url,
    get_log_level,
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    "EditorLimits",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_editor_limits",
    "get_image_proxy_url",
    "get_default_currency",
    "get_log_level",
    # Introspection
    "list_environment_variables",
]
