"""Custom exceptions for the Code Review Expert plugin.

This module defines exception types raised outside the normal wizard flow:
- ConfigurationError: Raised when a stored config file is malformed (strict mode)
- WizardAbortedError: Raised when the user aborts an interactive prompt
"""

from typing import Optional


class ConfigurationError(Exception):
    """Raised when stored configuration is invalid.

    Used for:
    - Invalid YAML syntax in the stored config file
    - A top-level document that is not a mapping
    - Selection fields with the wrong shape

    Only raised by strict loading; the default loader coerces instead.

    Args:
        message: Error description
        file_path: Path to problematic config file (optional)

    Example:
        >>> raise ConfigurationError("Expected a mapping", file_path="code-review-expert.yaml")
        Traceback (most recent call last):
            ...
        code_review_expert.exceptions.ConfigurationError: Expected a mapping in file: code-review-expert.yaml
    """

    def __init__(self, message: str, file_path: Optional[str] = None):
        """Initialize ConfigurationError with context.

        Args:
            message: Human-readable error description
            file_path: Path to configuration file with error (if applicable)
        """
        self.message = message
        self.file_path = file_path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with file context if available."""
        if self.file_path:
            return f"{self.message} in file: {self.file_path}"
        return self.message

    def __str__(self) -> str:
        """Return formatted error message."""
        return self._format_message()


class WizardAbortedError(Exception):
    """Raised when the user aborts a wizard prompt (Ctrl-C / EOF).

    No SelectionSet is produced; the host is expected to rerun the
    whole wizard later.

    Args:
        step: Name of the wizard step that was aborted
    """

    def __init__(self, step: str):
        self.step = step
        super().__init__(f"Wizard aborted during step: {step}")
