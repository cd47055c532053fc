"""Exceptions raised by the class scaffolder."""

from __future__ import annotations

from pathlib import Path


class NewClassError(Exception):
    """Base class for every newclass error."""


class ArgumentValidationError(NewClassError):
    """Raised when a required CLI flag is missing.

    This is the only fatal condition: it is raised before any directory or
    file is touched.
    """

    def __init__(self, flag: str, message: str) -> None:
        self.flag = flag
        self.message = message
        super().__init__(f"--{flag}: {message}")


class TemplateRenderError(NewClassError):
    """Raised when a template source can not be read."""

    def __init__(self, template_path: Path, reason: str) -> None:
        self.template_path = template_path
        self.reason = reason
        super().__init__(f"Could not render template {template_path}: {reason}")
