"""Plugin lifecycle hooks.

The host calls these one at a time, passing a shared HookContext:
- on_before_install: run the wizard and store selections in context.config
- on_after_install: print usage instructions
- on_before_execute: inject the stored selections into context.system_prompt

Each hook returns the same context object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from code_review_expert.core.injector import build_prompt_fragment
from code_review_expert.setup.wizard import (
    ConfigurationWizard,
    PromptEngine,
    Reporter,
    format_install_banner,
    format_post_install_message,
)

logger = logging.getLogger(__name__)


@dataclass
class HookContext:
    """State shared between the host and the lifecycle hooks.

    Attributes:
        prompt_engine: Multi-select prompt capability (needed for install)
        config: Stored selections in persisted shape (None until collected)
        system_prompt: Prompt fragment set by on_before_execute
        reporter: Console output sink
    """

    prompt_engine: Optional[PromptEngine] = None
    config: Optional[dict[str, Any]] = None
    system_prompt: Optional[str] = None
    reporter: Reporter = field(default=print)


def on_before_install(context: HookContext) -> HookContext:
    """Collect selections and store them in ``context.config``.

    Raises:
        ValueError: If the context has no prompt engine
        WizardAbortedError: If the user aborts a prompt (config left untouched)
    """
    if context.prompt_engine is None:
        raise ValueError("on_before_install requires a prompt engine")

    wizard = ConfigurationWizard(reporter=context.reporter)
    context.reporter(format_install_banner())

    selection = wizard.collect(context.prompt_engine)
    context.config = selection.to_dict()

    wizard.summarize(selection)
    return context


def on_after_install(context: HookContext) -> HookContext:
    """Print the post-install usage message."""
    context.reporter(format_post_install_message())
    return context


def on_before_execute(context: HookContext) -> HookContext:
    """Inject stored selections into ``context.system_prompt``.

    Without stored languages the context is returned unchanged.
    """
    fragment = build_prompt_fragment(context.config or {})
    if fragment is None:
        logger.debug("No programming languages configured, skipping prompt injection")
        return context

    context.system_prompt = fragment
    return context
