"""Industry template catalog, cloning, personalization and linting."""

from applyn.templates.catalog import ALL_TEMPLATES, TEMPLATE_SUBTITLES
from applyn.templates.lib import (
    HERO_TITLE_MARKERS,
    build_editor_screens_from_template,
    clone_template,
    get_template_by_id,
    get_template_ids,
    new_component_id,
    new_screen_id,
    personalize_component,
)
from applyn.templates.lint import (
    LintMessage,
    LintReport,
    has_emoji,
    lint_catalog,
    lint_template,
)
from applyn.templates.models import (
    IndustryTemplate,
    TemplateComponent,
    TemplateScreen,
    freeze,
    thaw,
)

__all__ = [
    # Models
    "IndustryTemplate",
    "TemplateComponent",
    "TemplateScreen",
    "freeze",
    "thaw",
    # Catalog
    "ALL_TEMPLATES",
    "TEMPLATE_SUBTITLES",
    "get_template_by_id",
    "get_template_ids",
    # Instantiation
    "HERO_TITLE_MARKERS",
    "new_component_id",
    "new_screen_id",
    "clone_template",
    "personalize_component",
    "build_editor_screens_from_template",
    # Linting
    "LintMessage",
    "LintReport",
    "has_emoji",
    "lint_template",
    "lint_catalog",
]
