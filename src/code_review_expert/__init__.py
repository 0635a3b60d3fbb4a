"""
code_review_expert - Claude Code plugin for stack-aware code review.

Package structure:
- code_review_expert.core: Catalogs, selection model, prompt fragment injection
- code_review_expert.setup: Interactive wizard and config store
- code_review_expert.lifecycle: Host lifecycle hooks

Public API:
- ConfigurationWizard: Collect and summarize selections
- SelectionSet: User selections dataclass
- build_prompt_fragment(): Stored config -> prompt fragment
- HookContext, on_before_install, on_after_install, on_before_execute
"""

from code_review_expert.core.injector import build_prompt_fragment, format_prompt_fragment
from code_review_expert.core.selection import SelectionSet
from code_review_expert.lifecycle import HookContext, on_after_install, on_before_execute, on_before_install
from code_review_expert.setup.wizard import ConfigurationWizard

__version__ = "0.1.0"

__all__ = [
    "ConfigurationWizard",
    "SelectionSet",
    "build_prompt_fragment",
    "format_prompt_fragment",
    "HookContext",
    "on_before_install",
    "on_after_install",
    "on_before_execute",
]
