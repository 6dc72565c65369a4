"""AppBlueprint schema and conversion to editor screens."""

from applyn.blueprint.lib import (
    CURRENCY_SYMBOLS,
    DEFAULT_PRIMARY_COLOR,
    AppBlueprint,
    BlueprintBuild,
    BlueprintComponentKind,
    BlueprintScreen,
    BlueprintScreenComponent,
    ResolvedImages,
    build_editor_screens_from_blueprint,
    format_money,
    keyword_image_url,
    normalize_hex_color,
    validate_app_blueprint,
)

__all__ = [
    # Schema
    "AppBlueprint",
    "BlueprintComponentKind",
    "BlueprintScreen",
    "BlueprintScreenComponent",
    "validate_app_blueprint",
    # Conversion
    "CURRENCY_SYMBOLS",
    "DEFAULT_PRIMARY_COLOR",
    "ResolvedImages",
    "BlueprintBuild",
    "build_editor_screens_from_blueprint",
    "format_money",
    "keyword_image_url",
    "normalize_hex_color",
]
