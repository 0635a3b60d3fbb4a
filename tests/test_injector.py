"""Tests for prompt fragment generation."""

import copy

import pytest

from code_review_expert.core.injector import build_prompt_fragment, format_prompt_fragment, join_tags
from code_review_expert.core.selection import SelectionSet


class TestFormatPromptFragment:
    """Test suite for format_prompt_fragment."""

    def test_exact_layout(self):
        """Field order, labels and closing line are fixed."""
        fragment = format_prompt_fragment(
            SelectionSet(
                programming_languages=("typescript", "go"),
                frameworks=("react", "gin"),
                ui_libraries=("antd",),
            )
        )
        assert fragment == (
            "项目配置信息：\n"
            "- 编程语言: typescript, go\n"
            "- 框架: react, gin\n"
            "- UI 组件库: antd\n"
            "\n"
            "请根据以上项目配置提供针对性的代码审查建议。"
        )

    def test_placeholders(self):
        """Empty optional fields render as N/A."""
        fragment = format_prompt_fragment(SelectionSet(programming_languages=("python",)))
        assert "- 编程语言: python" in fragment
        assert "- 框架: N/A" in fragment
        assert "- UI 组件库: N/A" in fragment


class TestBuildPromptFragment:
    """Test suite for build_prompt_fragment."""

    def test_single_language(self):
        """Python only: frameworks and libraries fall back to N/A."""
        fragment = build_prompt_fragment({"programming_languages": ["python"], "frameworks": [], "ui_libraries": []})
        assert "编程语言: python" in fragment
        assert "框架: N/A" in fragment
        assert "UI 组件库: N/A" in fragment

    def test_full_selection(self):
        """All fields are comma-joined in stored order."""
        fragment = build_prompt_fragment(
            {
                "programming_languages": ["typescript", "go"],
                "frameworks": ["react", "gin"],
                "ui_libraries": ["antd"],
            }
        )
        assert "编程语言: typescript, go" in fragment
        assert "框架: react, gin" in fragment
        assert "UI 组件库: antd" in fragment

    @pytest.mark.parametrize(
        "stored",
        [None, {}, {"programming_languages": []}, {"frameworks": ["react"], "ui_libraries": ["antd"]}],
    )
    def test_unconfigured_returns_none(self, stored):
        """No languages means no fragment and no error."""
        assert build_prompt_fragment(stored) is None

    def test_missing_optional_fields(self):
        """Absent optional fields do not break formatting."""
        fragment = build_prompt_fragment({"programming_languages": ["rust"]})
        assert "框架: N/A" in fragment
        assert "UI 组件库: N/A" in fragment

    def test_malformed_optional_fields(self):
        """Malformed optional fields are coerced to N/A."""
        fragment = build_prompt_fragment({"programming_languages": ["go"], "frameworks": {"bad": 1}, "ui_libraries": 7})
        assert "框架: N/A" in fragment
        assert "UI 组件库: N/A" in fragment

    def test_idempotent_and_non_mutating(self):
        """Same input gives the same text twice and is left unchanged."""
        stored = {"programming_languages": ["java"], "frameworks": ["spring"], "ui_libraries": []}
        snapshot = copy.deepcopy(stored)

        first = build_prompt_fragment(stored)
        second = build_prompt_fragment(stored)

        assert first == second
        assert stored == snapshot


class TestJoinTags:
    """Test suite for join_tags."""

    def test_join(self):
        assert join_tags(("a", "b", "c")) == "a, b, c"

    def test_empty_with_placeholder(self):
        assert join_tags(()) == "N/A"

    def test_empty_without_placeholder(self):
        assert join_tags((), placeholder=None) == ""
