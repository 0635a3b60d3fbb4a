"""Pytest configuration and shared fixtures."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pytest

from code_review_expert.core.catalogs import CatalogOption


@pytest.fixture
def plugin_root():
    """Path to plugin root directory."""
    return Path(__file__).parent.parent


@dataclass
class PromptCall:
    """One recorded checkbox prompt."""

    message: str
    values: list[str]
    validate: Any


@dataclass
class ScriptedPromptEngine:
    """Prompt engine double that replays scripted answers in order."""

    answers: list[Optional[list[str]]]
    calls: list[PromptCall] = field(default_factory=list)

    def checkbox(self, message, choices, validate=None):
        self.calls.append(
            PromptCall(
                message=message,
                values=[c.value for c in choices if isinstance(c, CatalogOption)],
                validate=validate,
            )
        )
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        return self.answers.pop(0)


@pytest.fixture
def scripted_engine():
    """Factory fixture for ScriptedPromptEngine."""

    def _create(*answers):
        return ScriptedPromptEngine(answers=list(answers))

    return _create


@pytest.fixture
def reporter():
    """Reporter that collects output instead of printing."""

    class _Collector(list):
        def __call__(self, text):
            self.append(text)

        @property
        def text(self):
            return "\n".join(self)

    return _Collector()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with cwd and user config dir pointing into tmp_path."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CODE_REVIEW_EXPERT_CONFIG", raising=False)
    user_path = tmp_path / "user" / "config.yaml"
    monkeypatch.setattr("code_review_expert.setup.config_writer.get_user_config_path", lambda: user_path)
    return tmp_path
