"""Interactive configuration wizard for Code Review Expert.

Collects the user's languages, frameworks and UI libraries through a
prompt engine, and formats the console text shown around the install.

The prompt engine is any object with a ``checkbox`` method (see
PromptEngine). QuestionaryPromptEngine is the terminal implementation;
tests pass scripted doubles.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol, Union

import questionary
from questionary import Style

from code_review_expert.core.catalogs import (
    CatalogEntry,
    CatalogSeparator,
    framework_choices,
    has_ui_framework,
    language_choices,
    ui_library_choices,
)
from code_review_expert.core.injector import build_prompt_fragment, join_tags
from code_review_expert.core.selection import SelectionSet
from code_review_expert.exceptions import WizardAbortedError

logger = logging.getLogger(__name__)

Validator = Callable[[list[str]], Union[bool, str]]
Reporter = Callable[[str], None]

LANGUAGES_MESSAGE = "📝 选择编程语言（支持多选）"
FRAMEWORKS_MESSAGE = "🎨 选择框架（可选，支持多选）"
UI_LIBRARIES_MESSAGE = "🎯 选择 UI 组件库（可选，支持多选）"

LANGUAGES_REQUIRED_ERROR = "至少选择一种编程语言"

# Custom style for questionary prompts
WIZARD_STYLE = Style(
    [
        ("qmark", "fg:#5f87ff bold"),
        ("question", "bold"),
        ("answer", "fg:#00d787 bold"),
        ("pointer", "fg:#5f87ff bold"),
        ("highlighted", "fg:#5f87ff bold"),
        ("selected", "fg:#00d787"),
        ("separator", "fg:#6c6c6c"),
        ("instruction", "fg:#6c6c6c"),
    ]
)


class PromptEngine(Protocol):
    """Capability for presenting multi-select prompts."""

    def checkbox(
        self,
        message: str,
        choices: list[CatalogEntry],
        validate: Optional[Validator] = None,
    ) -> Optional[list[str]]:
        """Ask the user to pick any number of choices.

        Returns the selected values in catalog order, or None if the
        user aborted the prompt.
        """
        ...


class QuestionaryPromptEngine:
    """PromptEngine backed by questionary checkbox prompts."""

    def __init__(self, style: Optional[Style] = None):
        self.style = style if style is not None else WIZARD_STYLE

    def checkbox(
        self,
        message: str,
        choices: list[CatalogEntry],
        validate: Optional[Validator] = None,
    ) -> Optional[list[str]]:
        q_choices: list[Any] = []
        for entry in choices:
            if isinstance(entry, CatalogSeparator):
                q_choices.append(questionary.Separator(entry.title))
            else:
                q_choices.append(questionary.Choice(title=entry.label, value=entry.value))

        kwargs: dict[str, Any] = {"choices": q_choices, "style": self.style}
        if validate is not None:
            kwargs["validate"] = validate

        # ask() returns None on Ctrl-C
        return questionary.checkbox(message, **kwargs).ask()


def validate_languages(selected: list[str]) -> Union[bool, str]:
    """Require at least one programming language.

    Examples:
        >>> validate_languages(["python"])
        True
        >>> validate_languages([])
        '至少选择一种编程语言'
    """
    return len(selected) > 0 or LANGUAGES_REQUIRED_ERROR


def format_install_banner() -> str:
    """Format the greeting shown before the first prompt."""
    return "\n🔧 Code Review Expert - 项目配置\n\n请选择你的项目配置信息，以便我们提供更精确的代码审查建议。\n"


def format_config_review(selection: SelectionSet) -> str:
    """Format the confirmation summary shown after collection.

    Frameworks and UI libraries are only listed when non-empty.

    Examples:
        >>> review = format_config_review(SelectionSet(programming_languages=("go",)))
        >>> "编程语言: go" in review
        True
        >>> "框架" in review
        False
    """
    lines = ["", "✅ 配置已保存："]
    lines.append(f"   编程语言: {join_tags(selection.programming_languages, placeholder=None)}")
    if selection.frameworks:
        lines.append(f"   框架: {join_tags(selection.frameworks)}")
    if selection.ui_libraries:
        lines.append(f"   UI 组件库: {join_tags(selection.ui_libraries)}")
    lines.append("")
    return "\n".join(lines)


def format_post_install_message() -> str:
    """Format the message shown once installation has finished."""
    lines = [
        "✨ Code Review Expert 安装完成！",
        "",
        "使用方法：",
        "  /code-review-expert - 审查当前 git 变更",
        "",
        "配置已保存。审查时将根据你的项目配置提供专项建议。",
        "",
    ]
    return "\n".join(lines)


class ConfigurationWizard:
    """Three-phase wizard: collect, summarize, inject.

    Args:
        reporter: Callable receiving console text (defaults to print)

    Example:
        >>> wizard = ConfigurationWizard()
        >>> selection = wizard.collect(QuestionaryPromptEngine())  # doctest: +SKIP
        >>> wizard.summarize(selection)  # doctest: +SKIP
    """

    def __init__(self, reporter: Optional[Reporter] = None):
        self.reporter: Reporter = reporter if reporter is not None else print

    def collect(self, prompt_engine: PromptEngine) -> SelectionSet:
        """Run the prompts and build a SelectionSet.

        Steps:
            A. Languages (required, re-prompted until non-empty)
            B. Frameworks (optional)
            C. UI libraries (optional, only asked if a UI framework was chosen)

        Raises:
            WizardAbortedError: If the user aborts any prompt
        """
        languages = self._ask(
            prompt_engine,
            "languages",
            LANGUAGES_MESSAGE,
            language_choices(),
            validate=validate_languages,
        )

        frameworks = self._ask(prompt_engine, "frameworks", FRAMEWORKS_MESSAGE, framework_choices())

        ui_libraries: list[str] = []
        if has_ui_framework(frameworks):
            ui_libraries = self._ask(prompt_engine, "ui_libraries", UI_LIBRARIES_MESSAGE, ui_library_choices())
        else:
            logger.debug("No UI framework selected, skipping UI library prompt")

        selection = SelectionSet(
            programming_languages=tuple(languages),
            frameworks=tuple(frameworks),
            ui_libraries=tuple(ui_libraries),
        )
        logger.info(
            f"Collected {len(selection.programming_languages)} language(s), "
            f"{len(selection.frameworks)} framework(s), {len(selection.ui_libraries)} UI library(ies)"
        )
        return selection

    def summarize(self, selection: SelectionSet) -> str:
        """Report and return the confirmation summary."""
        review = format_config_review(selection)
        self.reporter(review)
        return review

    def inject(self, stored_config: Any) -> Optional[str]:
        """Return the prompt fragment for a stored config, or None if unconfigured."""
        return build_prompt_fragment(stored_config)

    def _ask(
        self,
        prompt_engine: PromptEngine,
        step: str,
        message: str,
        choices: list[CatalogEntry],
        validate: Optional[Validator] = None,
    ) -> list[str]:
        """Present one prompt, re-asking while the validator rejects the answer."""
        while True:
            answer = prompt_engine.checkbox(message, choices, validate=validate)
            if answer is None:
                logger.info(f"Wizard aborted at step: {step}")
                raise WizardAbortedError(step)

            selected = [str(value) for value in answer]
            if validate is None:
                return selected

            verdict = validate(selected)
            if verdict is True:
                return selected

            error = verdict if isinstance(verdict, str) else f"Invalid selection for {step}"
            logger.debug(f"Rejected {step} selection: {error}")
            self.reporter(f"✗ {error}")
