#!/usr/bin/env python3
"""Interactive installer for Code Review Expert.

Runs the install lifecycle in the terminal:
1. on_before_install: ask for languages, frameworks and UI libraries
2. Persist the selections as YAML
3. on_after_install: print usage instructions

Exit codes:
    0: Config written
    1: Config could not be written
    130: User aborted a prompt
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from code_review_expert.core.selection import SelectionSet  # noqa: E402
from code_review_expert.exceptions import WizardAbortedError  # noqa: E402
from code_review_expert.lifecycle import HookContext, on_after_install, on_before_install  # noqa: E402
from code_review_expert.setup.config_writer import (  # noqa: E402
    DEFAULT_CONFIG_PATH,
    get_user_config_path,
    write_config,
)
from code_review_expert.setup.wizard import QuestionaryPromptEngine  # noqa: E402

DEFAULT_LOG_LEVEL = logging.WARNING

logging.basicConfig(
    level=logging.DEBUG if os.getenv("CODE_REVIEW_EXPERT_DEBUG") else DEFAULT_LOG_LEVEL,
    format="[code-review-expert] %(levelname)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

EXIT_ABORTED = 130


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse installer command-line arguments."""
    parser = argparse.ArgumentParser(description="Configure Code Review Expert for this project")
    parser.add_argument(
        "--scope",
        choices=["project", "user"],
        default="project",
        help="Where to store the config (default: project)",
    )
    parser.add_argument("--config", type=Path, help="Explicit config file path (overrides --scope)")
    parser.add_argument("--no-backup", action="store_true", help="Do not back up an existing config")
    return parser.parse_args(argv)


def resolve_config_path(args: argparse.Namespace) -> Path:
    """Pick the destination file from --config / --scope."""
    if args.config is not None:
        return args.config
    if args.scope == "user":
        return get_user_config_path()
    return Path.cwd() / DEFAULT_CONFIG_PATH


def run_install(context: HookContext, config_path: Path, create_backup_flag: bool = True) -> int:
    """Run the install lifecycle against ``context`` and persist the result.

    Returns:
        Process exit code
    """
    try:
        context = on_before_install(context)
    except WizardAbortedError as e:
        logger.warning(str(e))
        context.reporter("Setup cancelled. Run the installer again to configure Code Review Expert.")
        return EXIT_ABORTED

    selection = SelectionSet.from_mapping(context.config)
    result = write_config(selection, config_path=config_path, create_backup_flag=create_backup_flag)
    if not result.success:
        context.reporter(f"✗ Failed to save config to {result.config_path}: {result.error}")
        for error in result.validation_errors:
            context.reporter(f"  - {error}")
        return 1

    if result.backup_path:
        context.reporter(f"Previous config backed up to {result.backup_path}")

    on_after_install(context)
    return 0


def main(argv: Optional[list[str]] = None):
    """Entry point for the interactive installer."""
    args = parse_args(argv)
    context = HookContext(prompt_engine=QuestionaryPromptEngine())
    sys.exit(run_install(context, resolve_config_path(args), create_backup_flag=not args.no_backup))


if __name__ == "__main__":
    main()
