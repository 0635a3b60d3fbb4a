"""Configuration and setup utilities.

This module contains the setup wizard and config store:
- wizard: Interactive prompts and console summaries
- config_writer: YAML config file generation and loading
"""

from code_review_expert.setup.config_writer import WriteResult, find_config, load_config, write_config
from code_review_expert.setup.wizard import ConfigurationWizard, QuestionaryPromptEngine, format_config_review

__all__ = [
    # Config writer
    "WriteResult",
    "find_config",
    "load_config",
    "write_config",
    # Wizard
    "ConfigurationWizard",
    "QuestionaryPromptEngine",
    "format_config_review",
]
