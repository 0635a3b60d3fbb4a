"""Fixed option catalogs presented by the configuration wizard.

Each catalog pairs a stable machine value (what gets stored and injected)
with a display label (what the user sees). Framework options are split into
labeled display groups; the grouping carries no meaning beyond display.

Bump CATALOG_VERSION whenever a stored value is added, removed or renamed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

CATALOG_VERSION = "1.0.0"


@dataclass(frozen=True)
class CatalogOption:
    """Selectable catalog entry.

    Attributes:
        value: Stable tag stored in the config (e.g. "typescript")
        label: Human-readable label shown in the prompt
    """

    value: str
    label: str


@dataclass(frozen=True)
class CatalogSeparator:
    """Non-selectable group header inside a choice list."""

    title: str


CatalogEntry = Union[CatalogOption, CatalogSeparator]


LANGUAGE_OPTIONS: tuple[CatalogOption, ...] = (
    CatalogOption("typescript", "TypeScript/JavaScript"),
    CatalogOption("python", "Python"),
    CatalogOption("go", "Go"),
    CatalogOption("java", "Java"),
    CatalogOption("csharp", "C#"),
    CatalogOption("rust", "Rust"),
    CatalogOption("cpp", "C/C++"),
    CatalogOption("php", "PHP"),
    CatalogOption("ruby", "Ruby"),
    CatalogOption("other", "其他"),
)

# Display groups: (separator title, options)
FRAMEWORK_GROUPS: tuple[tuple[str, tuple[CatalogOption, ...]], ...] = (
    (
        "--- 前端框架 ---",
        (
            CatalogOption("react", "React"),
            CatalogOption("vue", "Vue"),
            CatalogOption("angular", "Angular"),
            CatalogOption("svelte", "Svelte"),
            CatalogOption("nextjs", "Next.js"),
            CatalogOption("nuxt", "Nuxt"),
        ),
    ),
    (
        "--- 后端框架 ---",
        (
            CatalogOption("express", "Node.js/Express"),
            CatalogOption("koa", "Koa"),
            CatalogOption("django", "Django"),
            CatalogOption("fastapi", "FastAPI"),
            CatalogOption("gin", "Gin"),
            CatalogOption("fiber", "Fiber"),
            CatalogOption("spring", "Spring"),
            CatalogOption("aspnet", "ASP.NET"),
        ),
    ),
    (
        "--- 移动框架 ---",
        (
            CatalogOption("react-native", "React Native"),
            CatalogOption("flutter", "Flutter"),
            CatalogOption("swift", "Swift"),
            CatalogOption("kotlin", "Kotlin"),
        ),
    ),
)

UI_LIBRARY_OPTIONS: tuple[CatalogOption, ...] = (
    CatalogOption("antd", "Ant Design (antd)"),
    CatalogOption("vben", "Vben Admin"),
    CatalogOption("element-ui", "Element UI"),
    CatalogOption("mui", "Material-UI (MUI)"),
    CatalogOption("bootstrap", "Bootstrap"),
    CatalogOption("tailwind", "Tailwind CSS"),
    CatalogOption("chakra", "Chakra UI"),
    CatalogOption("other", "其他"),
)

# Frameworks with associated UI component libraries (the frontend group)
UI_FRAMEWORKS: frozenset[str] = frozenset(option.value for option in FRAMEWORK_GROUPS[0][1])


def language_choices() -> list[CatalogEntry]:
    """Return the language catalog as an ordered choice list."""
    return list(LANGUAGE_OPTIONS)


def framework_choices() -> list[CatalogEntry]:
    """Return the framework catalog with a separator before each group.

    Examples:
        >>> choices = framework_choices()
        >>> choices[0]
        CatalogSeparator(title='--- 前端框架 ---')
        >>> choices[1].value
        'react'
    """
    choices: list[CatalogEntry] = []
    for title, options in FRAMEWORK_GROUPS:
        choices.append(CatalogSeparator(title))
        choices.extend(options)
    return choices


def ui_library_choices() -> list[CatalogEntry]:
    """Return the UI library catalog as an ordered choice list."""
    return list(UI_LIBRARY_OPTIONS)


def catalog_values(choices: list[CatalogEntry]) -> frozenset[str]:
    """Return the selectable values of a choice list (separators skipped)."""
    return frozenset(entry.value for entry in choices if isinstance(entry, CatalogOption))


def has_ui_framework(frameworks: list[str] | tuple[str, ...]) -> bool:
    """Check whether any selected framework has associated UI libraries.

    Examples:
        >>> has_ui_framework(["gin", "vue"])
        True
        >>> has_ui_framework(["django", "flutter"])
        False
        >>> has_ui_framework([])
        False
    """
    return not UI_FRAMEWORKS.isdisjoint(frameworks)
