#!/usr/bin/env python3
"""Pre-execute hook for Code Review Expert.

Loads the stored project configuration and hands it to Claude as
additionalContext, so reviews focus on the user's declared stack.

Hook Interface:
- Input: JSON via stdin (contents unused beyond hook_event_name)
- Output: JSON with hookSpecificOutput.additionalContext, or {} when unconfigured

Fail-Open Behavior:
- Invalid stdin → treated as empty input
- Missing or malformed config → {} (no context injected)
"""

import json
import logging
import os
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from code_review_expert.lifecycle import HookContext, on_before_execute  # noqa: E402
from code_review_expert.setup.config_writer import load_config  # noqa: E402

# Configure logging to stderr
logging.basicConfig(
    level=logging.DEBUG if os.getenv("CODE_REVIEW_EXPERT_DEBUG") else logging.INFO,
    format="[code-review-expert] %(levelname)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

DEFAULT_EVENT_NAME = "UserPromptSubmit"


def handle_pre_execute(input_data: dict) -> dict:
    """Build the hook response for one invocation.

    Args:
        input_data: Hook input JSON

    Returns:
        {
            "hookSpecificOutput": {
                "hookEventName": "<event>",
                "additionalContext": "<prompt fragment>"
            }
        }
        or {} when no programming languages are configured
    """
    event_name = input_data.get("hook_event_name") or DEFAULT_EVENT_NAME

    context = on_before_execute(HookContext(config=load_config()))
    if context.system_prompt is None:
        return {}

    return {
        "hookSpecificOutput": {
            "hookEventName": event_name,
            "additionalContext": context.system_prompt,
        }
    }


def main():
    """Entry point for Claude Code hook execution."""
    try:
        input_data = json.load(sys.stdin)
        if not isinstance(input_data, dict):
            input_data = {}
    except (ValueError, EOFError, OSError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        logger.warning(f"Ignoring unreadable hook input: {e}")
        input_data = {}

    try:
        result = handle_pre_execute(input_data)
    except Exception as e:
        # Never block the review because of context injection
        logger.error(f"Failed to inject project configuration: {e}", exc_info=True)
        result = {}

    print(json.dumps(result, ensure_ascii=False))
    sys.exit(0)


if __name__ == "__main__":
    main()
