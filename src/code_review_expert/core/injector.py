"""Prompt fragment generation from stored selections.

Converts a persisted SelectionSet into the plain-text block that is
prepended to the review request's system prompt. Downstream consumers may
parse this block, so field order and labels are fixed.
"""

from __future__ import annotations

from typing import Any, Optional

from code_review_expert.core.selection import SelectionSet

PLACEHOLDER = "N/A"
JOIN_SEPARATOR = ", "

FRAGMENT_TEMPLATE = (
    "项目配置信息：\n"
    "- 编程语言: {languages}\n"
    "- 框架: {frameworks}\n"
    "- UI 组件库: {libraries}\n"
    "\n"
    "请根据以上项目配置提供针对性的代码审查建议。"
)


def join_tags(tags: tuple[str, ...], placeholder: Optional[str] = PLACEHOLDER) -> str:
    """Join tags for display, falling back to a placeholder when empty.

    Examples:
        >>> join_tags(("typescript", "go"))
        'typescript, go'
        >>> join_tags(())
        'N/A'
        >>> join_tags((), placeholder=None)
        ''
    """
    joined = JOIN_SEPARATOR.join(tags)
    if not joined and placeholder is not None:
        return placeholder
    return joined


def format_prompt_fragment(selection: SelectionSet) -> str:
    """Format the prompt fragment for a selection.

    Args:
        selection: Selections to embed

    Returns:
        Fragment text; empty optional fields render as "N/A"

    Examples:
        >>> print(format_prompt_fragment(SelectionSet(programming_languages=("python",))))
        项目配置信息：
        - 编程语言: python
        - 框架: N/A
        - UI 组件库: N/A
        <BLANKLINE>
        请根据以上项目配置提供针对性的代码审查建议。
    """
    return FRAGMENT_TEMPLATE.format(
        languages=join_tags(selection.programming_languages, placeholder=None),
        frameworks=join_tags(selection.frameworks),
        libraries=join_tags(selection.ui_libraries),
    )


def build_prompt_fragment(stored_config: Any) -> Optional[str]:
    """Build the prompt fragment from a stored config record.

    Pure formatting: no validation and no mutation of ``stored_config``.

    Args:
        stored_config: Persisted mapping (may be None, empty or malformed)

    Returns:
        Fragment text, or None when no programming language is stored
    """
    selection = SelectionSet.from_mapping(stored_config)
    if not selection.is_configured:
        return None
    return format_prompt_fragment(selection)
