"""Configuration store for Code Review Expert selections.

Generates and writes validated YAML configuration files with atomic operations,
timestamped backups, and metadata tracking. Also locates and loads the stored
config for the pre-execute hook.
"""

import logging
import os
import sys
from contextlib import suppress
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml
from platformdirs import user_config_dir

from code_review_expert.core.catalogs import (
    CATALOG_VERSION,
    catalog_values,
    framework_choices,
    language_choices,
    ui_library_choices,
)
from code_review_expert.core.selection import (
    FRAMEWORKS_KEY,
    LANGUAGES_KEY,
    UI_LIBRARIES_KEY,
    SelectionSet,
)
from code_review_expert.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

WIZARD_VERSION = "0.1.0"

# Default config path (relative to project root)
DEFAULT_CONFIG_PATH = Path(".claude/hooks/code-review-expert.yaml")

# Environment override for the config location
CONFIG_ENV_VAR = "CODE_REVIEW_EXPERT_CONFIG"

APP_NAME = "code-review-expert"
APP_AUTHOR = "code-review-expert"

# Unix modes for the config directory and file; Windows keeps its ACLs
CONFIG_DIR_MODE = 0o755
CONFIG_FILE_MODE = 0o644


def _apply_mode(path: Path, mode: int) -> None:
    """Best-effort chmod; the selections are not secret, so failures are ignored."""
    if sys.platform == "win32":
        return
    with suppress(OSError, NotImplementedError):
        path.chmod(mode)


def get_user_config_path() -> Path:
    """Return the per-user config file path.

    Unix/Linux: ~/.config/code-review-expert/config.yaml
    macOS: ~/Library/Application Support/code-review-expert/config.yaml
    Windows: %LOCALAPPDATA%/code-review-expert/code-review-expert/config.yaml
    """
    return Path(user_config_dir(APP_NAME, APP_AUTHOR)) / "config.yaml"


def get_config_search_paths() -> list[Path]:
    """Return candidate config paths in lookup order.

    Order:
        1. CODE_REVIEW_EXPERT_CONFIG environment variable
        2. Project config (.claude/hooks/code-review-expert.yaml under cwd)
        3. User config (platformdirs user config dir)
    """
    paths: list[Path] = []
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        paths.append(Path(env_path).expanduser())
    paths.append(Path.cwd() / DEFAULT_CONFIG_PATH)
    paths.append(get_user_config_path())
    return paths


def find_config() -> Optional[Path]:
    """Return the first existing config file, or None if unconfigured."""
    for candidate in get_config_search_paths():
        if candidate.is_file():
            return candidate
    return None


@dataclass(frozen=True)
class WriteResult:
    """Outcome of persisting a SelectionSet.

    ``error`` is None exactly when ``success`` is True. A rejected selection
    carries "Config validation failed" plus the individual problems in
    ``validation_errors``; an I/O failure carries the OS error text.
    """

    success: bool
    config_path: Path
    backup_path: Optional[Path]
    error: Optional[str]
    validation_errors: list[str] = field(default_factory=list)


def write_config(
    selection: SelectionSet,
    config_path: Optional[Path] = None,
    create_backup_flag: bool = True,
) -> WriteResult:
    """Persist wizard selections as YAML.

    Nothing touches the disk unless the generated document passes
    validate_config_yaml. A previous config is copied aside first when
    ``create_backup_flag`` is set.

    Args:
        selection: Selections returned by ConfigurationWizard.collect
        config_path: Destination (default: DEFAULT_CONFIG_PATH, relative to cwd)
        create_backup_flag: Copy an existing file to <name>.backup.<timestamp>

    Example:
        >>> result = write_config(SelectionSet(programming_languages=("python",)))  # doctest: +SKIP
        >>> result.config_path  # doctest: +SKIP
        PosixPath('.claude/hooks/code-review-expert.yaml')
    """
    target = config_path if config_path is not None else DEFAULT_CONFIG_PATH
    document = generate_config_yaml(selection)

    problems = validate_config_yaml(document)
    if problems:
        logger.warning(f"Refusing to write {target}: {'; '.join(problems)}")
        return WriteResult(False, target, None, "Config validation failed", problems)

    backup_path: Optional[Path] = None
    try:
        if create_backup_flag:
            backup_path = create_backup(target)

        target.parent.mkdir(parents=True, exist_ok=True)
        _apply_mode(target.parent, CONFIG_DIR_MODE)
        write_yaml_atomic(target, document)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to write config to {target}: {e}")
        return WriteResult(False, target, backup_path, str(e))

    languages = ", ".join(selection.programming_languages)
    logger.info(f"Saved selections ({languages}) to {target}")
    return WriteResult(True, target, backup_path, None)


def create_backup(config_path: Path) -> Optional[Path]:
    """Copy an existing config to ``<name>.backup.YYYYMMDD_HHMMSS``.

    Returns None when there is no file yet, or when the copy fails (logged);
    a failed backup does not stop the new config from being written.
    """
    if not config_path.exists():
        return None

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = config_path.with_name(f"{config_path.name}.backup.{stamp}")

    try:
        backup_path.write_bytes(config_path.read_bytes())
    except OSError as e:
        logger.warning(f"Could not back up {config_path}: {e}")
        return None

    logger.info(f"Previous config copied to {backup_path}")
    return backup_path


def write_yaml_atomic(path: Path, data: dict[str, Any]) -> None:
    """Dump ``data`` to a sibling .tmp file, then rename it over ``path``.

    Readers (the pre-execute hook) see either the old file or the new one.
    The .tmp file is removed if anything fails, and the error is re-raised.
    """
    temp_path = path.with_name(path.name + ".tmp")

    try:
        with temp_path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        _apply_mode(temp_path, CONFIG_FILE_MODE)
        temp_path.replace(path)
    except (OSError, yaml.YAMLError):
        temp_path.unlink(missing_ok=True)
        raise


def generate_config_yaml(selection: SelectionSet) -> dict[str, Any]:
    """Generate config dict from wizard selections.

    The _metadata section comes first; the three selection keys follow in
    the persisted shape read back by SelectionSet.from_mapping.
    """
    config: dict[str, Any] = {}

    config["_metadata"] = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "wizard_version": WIZARD_VERSION,
        "catalog_version": CATALOG_VERSION,
        "last_modified_by": "setup-wizard",
    }

    config.update(selection.to_dict())

    return config


def validate_config_yaml(config_dict: dict[str, Any]) -> list[str]:
    """Validate config structure before writing.

    Args:
        config_dict: Config dictionary to validate

    Returns:
        List of validation errors (empty if valid)

    Checks:
        - _metadata section with required fields
        - programming_languages is a non-empty list
        - frameworks and ui_libraries are lists
        - Every tag belongs to its catalog
    """
    errors: list[str] = []

    if "_metadata" not in config_dict:
        errors.append("Missing required _metadata section")
    else:
        metadata = config_dict["_metadata"]
        for fld in ("generated_at", "wizard_version", "catalog_version", "last_modified_by"):
            if fld not in metadata:
                errors.append(f"Missing _metadata.{fld}")

    catalogs = (
        (LANGUAGES_KEY, catalog_values(language_choices())),
        (FRAMEWORKS_KEY, catalog_values(framework_choices())),
        (UI_LIBRARIES_KEY, catalog_values(ui_library_choices())),
    )
    for key, allowed in catalogs:
        values = config_dict.get(key, [])
        if not isinstance(values, list):
            errors.append(f"{key} must be a list")
            continue
        unknown = [value for value in values if value not in allowed]
        if unknown:
            errors.append(f"Unknown {key} value(s): {', '.join(map(str, unknown))}")

    languages = config_dict.get(LANGUAGES_KEY)
    if isinstance(languages, list) and not languages:
        errors.append(f"{LANGUAGES_KEY} must contain at least one language")
    elif languages is None:
        errors.append(f"{LANGUAGES_KEY} must be present")

    return errors


def load_config(config_path: Optional[Path] = None, strict: bool = False) -> dict[str, Any]:
    """Load the stored config mapping.

    Args:
        config_path: Explicit path (default: first match of find_config())
        strict: Raise ConfigurationError on malformed files instead of returning {}

    Returns:
        Stored mapping, or {} when no usable config exists

    Raises:
        ConfigurationError: Only in strict mode, for unreadable or malformed files
    """
    if config_path is None:
        config_path = find_config()
        if config_path is None:
            logger.debug("No stored config found")
            return {}

    if not config_path.exists():
        if strict:
            raise ConfigurationError("Config file not found", file_path=str(config_path))
        return {}

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        if strict:
            raise ConfigurationError(f"Failed to read config: {e}", file_path=str(config_path)) from e
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return {}

    if data is None:
        return {}

    if not isinstance(data, dict):
        if strict:
            raise ConfigurationError(
                f"Expected a mapping, got {type(data).__name__}",
                file_path=str(config_path),
            )
        logger.warning(f"Ignoring config at {config_path}: expected a mapping")
        return {}

    if strict:
        for key in (LANGUAGES_KEY, FRAMEWORKS_KEY, UI_LIBRARIES_KEY):
            value = data.get(key)
            if value is not None and not isinstance(value, list):
                raise ConfigurationError(f"{key} must be a list", file_path=str(config_path))

    logger.debug(f"Loaded config from {config_path}")
    return data
