"""SelectionSet: the user's language/framework/UI-library choices.

A SelectionSet is built once per wizard run and never mutated. It is
persisted as a flat mapping using the keys below and read back with
``SelectionSet.from_mapping``, which coerces missing or malformed fields
to empty sequences instead of failing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# Persisted field names (shared with the host's stored config)
LANGUAGES_KEY = "programming_languages"
FRAMEWORKS_KEY = "frameworks"
UI_LIBRARIES_KEY = "ui_libraries"

SELECTION_KEYS = (LANGUAGES_KEY, FRAMEWORKS_KEY, UI_LIBRARIES_KEY)


def coerce_tags(value: Any, field_name: str = "value") -> tuple[str, ...]:
    """Coerce a stored field into a tuple of tags.

    Args:
        value: Raw value read from storage
        field_name: Field name used in log messages

    Returns:
        Tuple of non-empty tag strings, in stored order

    Rules:
        - None / missing -> empty
        - list or tuple -> its non-empty items as strings
        - bare non-empty string -> one-element tuple
        - anything else -> empty (logged)

    Examples:
        >>> coerce_tags(["react", "gin"])
        ('react', 'gin')
        >>> coerce_tags(None)
        ()
        >>> coerce_tags("python")
        ('python',)
        >>> coerce_tags({"bad": "shape"})
        ()
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value if item is not None and str(item))

    logger.warning(f"Ignoring malformed {field_name}: expected a list, got {type(value).__name__}")
    return ()


@dataclass(frozen=True)
class SelectionSet:
    """User selections from the wizard flow.

    Attributes:
        programming_languages: Selected language tags (non-empty after collection)
        frameworks: Selected framework tags (may be empty)
        ui_libraries: Selected UI library tags (empty unless a UI framework was chosen)
    """

    programming_languages: tuple[str, ...] = ()
    frameworks: tuple[str, ...] = ()
    ui_libraries: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Any) -> SelectionSet:
        """Build a SelectionSet from a stored mapping, tolerating bad shapes.

        Non-mapping input (None, lists, scalars) yields an empty SelectionSet.
        The input is never modified.
        """
        if not isinstance(data, Mapping):
            if data is not None:
                logger.warning(f"Ignoring stored config of type {type(data).__name__}")
            return cls()

        return cls(
            programming_languages=coerce_tags(data.get(LANGUAGES_KEY), LANGUAGES_KEY),
            frameworks=coerce_tags(data.get(FRAMEWORKS_KEY), FRAMEWORKS_KEY),
            ui_libraries=coerce_tags(data.get(UI_LIBRARIES_KEY), UI_LIBRARIES_KEY),
        )

    def to_dict(self) -> dict[str, list[str]]:
        """Return the persisted shape (plain lists, fixed key order)."""
        return {
            LANGUAGES_KEY: list(self.programming_languages),
            FRAMEWORKS_KEY: list(self.frameworks),
            UI_LIBRARIES_KEY: list(self.ui_libraries),
        }

    @property
    def is_configured(self) -> bool:
        """True when at least one programming language is selected."""
        return bool(self.programming_languages)
