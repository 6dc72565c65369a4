"""Environment-backed settings for applyn.

Every tunable lives on the `EnvVar` enum and is read through
`get_environment()`, which resolves an explicit override first, then the
process environment, then the declared default.

Example:
    >>> from applyn.config import EnvVar, get_environment
    >>>
    >>> depth = get_environment(EnvVar.APPLYN_MAX_DEPTH)  # int, 30 unless set
    >>> depth = get_environment(EnvVar.APPLYN_MAX_DEPTH, override=10)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Declaration of one applyn setting.

    Attributes:
        name: Variable name in the process environment.
        default: Value used when the variable is unset or unparseable.
        var_type: Either ``str`` or ``int``.
        description: One-line summary shown by tooling.
        category: One of ``limits``, ``content`` or ``logging``.
        min_value: Lower bound for ``int`` settings; smaller values fall back
            to the default.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"
    min_value: int | None = None


class EnvVar(Enum):
    """Settings recognized by applyn, grouped by category."""

    # -------------------------------------------------------------------------
    # Editor Payload Limits
    # -------------------------------------------------------------------------
    APPLYN_MAX_SCREENS = EnvConfig(
        name="APPLYN_MAX_SCREENS",
        default=50,
        var_type=int,
        description="Maximum number of screens in an editor screens payload",
        category="limits",
        min_value=1,
    )
    APPLYN_MAX_NODES = EnvConfig(
        name="APPLYN_MAX_NODES",
        default=5000,
        var_type=int,
        description="Maximum total component nodes across all screens",
        category="limits",
        min_value=1,
    )
    APPLYN_MAX_DEPTH = EnvConfig(
        name="APPLYN_MAX_DEPTH",
        default=30,
        var_type=int,
        description="Maximum component nesting depth (top-level components are 1)",
        category="limits",
        min_value=1,
    )

    # -------------------------------------------------------------------------
    # Content Defaults
    # -------------------------------------------------------------------------
    APPLYN_IMAGE_PROXY_URL = EnvConfig(
        name="APPLYN_IMAGE_PROXY_URL",
        default="/api/unsplash/proxy",
        var_type=str,
        description="Image proxy endpoint used for keyword-based images",
        category="content",
    )
    APPLYN_DEFAULT_CURRENCY = EnvConfig(
        name="APPLYN_DEFAULT_CURRENCY",
        default="USD",
        var_type=str,
        description="Currency used for blueprint prices without an explicit one",
        category="content",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    APPLYN_LOG_LEVEL = EnvConfig(
        name="APPLYN_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for CLI entry points (DEBUG, INFO, WARNING, ...)",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _convert_value(raw: str | None, config: EnvConfig) -> Any:
    """Turn a raw environment string into the setting's type.

    Blank strings count as unset. Integers that fail to parse or fall below
    ``min_value`` resolve to the default.
    """
    if raw is None or not raw.strip():
        return config.default

    if config.var_type is not int:
        return raw

    try:
        number = int(raw.strip())
    except ValueError:
        return config.default
    if config.min_value is not None and number < config.min_value:
        return config.default
    return number


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Read a setting.

    Args:
        env_var: The setting to read.
        override: Returned unchanged when not None.

    Returns:
        The override, else the converted environment value, else the default.

    Example:
        >>> get_environment(EnvVar.APPLYN_MAX_NODES)
        5000
    """
    if override is not None:
        return override

    config: EnvConfig = env_var.value
    return _convert_value(os.environ.get(config.name), config)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


@dataclass(frozen=True)
class EditorLimits:
    """Structural caps applied to editor screen payloads.

    Attributes:
        max_screens: Maximum number of screens in a collection.
        max_nodes: Maximum total component nodes across all screens.
        max_depth: Maximum nesting depth; top-level components sit at depth 1.
    """

    max_screens: int = 50
    max_nodes: int = 5000
    max_depth: int = 30


def get_editor_limits(
    max_screens: int | None = None,
    max_nodes: int | None = None,
    max_depth: int | None = None,
) -> EditorLimits:
    """Resolve the editor payload limits.

    Resolution per field: argument > environment > default.
    """
    return EditorLimits(
        max_screens=get_environment(EnvVar.APPLYN_MAX_SCREENS, override=max_screens),
        max_nodes=get_environment(EnvVar.APPLYN_MAX_NODES, override=max_nodes),
        max_depth=get_environment(EnvVar.APPLYN_MAX_DEPTH, override=max_depth),
    )


def get_image_proxy_url(override: str | None = None) -> str:
    """Get the image proxy endpoint, without a trailing slash."""
    url = get_environment(EnvVar.APPLYN_IMAGE_PROXY_URL, override=override or None)
    return url.rstrip("/")


def get_default_currency(override: str | None = None) -> str:
    """Get the default currency code, upper-cased."""
    currency = get_environment(EnvVar.APPLYN_DEFAULT_CURRENCY, override=override or None)
    return currency.strip().upper() or "USD"


def get_log_level(override: str | None = None) -> str:
    """Get the configured log level name."""
    return get_environment(EnvVar.APPLYN_LOG_LEVEL, override=override or None).upper()


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (limits, content, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


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
