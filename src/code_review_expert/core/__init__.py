"""Core selection model.

This module contains the pieces shared by install and execute time:
- catalogs: Fixed language/framework/UI library options
- selection: SelectionSet dataclass and stored-config coercion
- injector: Prompt fragment formatting
"""

from code_review_expert.core.catalogs import (
    CATALOG_VERSION,
    UI_FRAMEWORKS,
    CatalogOption,
    CatalogSeparator,
    framework_choices,
    has_ui_framework,
    language_choices,
    ui_library_choices,
)
from code_review_expert.core.injector import build_prompt_fragment, format_prompt_fragment
from code_review_expert.core.selection import SelectionSet

__all__ = [
    # Catalogs
    "CATALOG_VERSION",
    "UI_FRAMEWORKS",
    "CatalogOption",
    "CatalogSeparator",
    "framework_choices",
    "has_ui_framework",
    "language_choices",
    "ui_library_choices",
    # Selection
    "SelectionSet",
    # Injector
    "build_prompt_fragment",
    "format_prompt_fragment",
]
