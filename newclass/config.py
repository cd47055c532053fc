"""newclass configuration.

Typed configuration for the class scaffolder.  Settings use a Pydantic v2
model so they are validated at construction time and can be built from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

_PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_TEMPLATES_DIR = _PACKAGE_DIR / "scaffolder" / "templates"
DEFAULT_FALLBACK_DIR = _PACKAGE_DIR / "tmp"


class Config(BaseModel):
    """Global newclass configuration.

    Instances are created once by the CLI entry point (or by tests) and then
    passed to ``ClassGenerator``.
    """

    templates_dir: Path = Field(
        default=DEFAULT_TEMPLATES_DIR,
        description="Directory holding the TestTrait/Test/Interface/Class templates",
    )
    fallback_dir: Path = Field(
        default=DEFAULT_FALLBACK_DIR,
        description="Tool-local directory used when --path is not usable",
    )
    file_extension: str = Field(
        default="php",
        min_length=1,
        description="Extension of both the templates and the generated files",
    )
    show_banner: bool = Field(default=True)

    @field_validator("file_extension")
    @classmethod
    def _strip_leading_dot(cls, value: str) -> str:
        value = value.strip().lstrip(".")
        if not value:
            raise ValueError("file_extension must not be empty")
        return value

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            NEWCLASS_TEMPLATES_DIR, NEWCLASS_FALLBACK_DIR,
            NEWCLASS_FILE_EXTENSION, NEWCLASS_NO_BANNER.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NEWCLASS_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["NEWCLASS_TEMPLATES_DIR"])
        if os.environ.get("NEWCLASS_FALLBACK_DIR"):
            kwargs["fallback_dir"] = Path(os.environ["NEWCLASS_FALLBACK_DIR"])
        if os.environ.get("NEWCLASS_FILE_EXTENSION"):
            kwargs["file_extension"] = os.environ["NEWCLASS_FILE_EXTENSION"]
        no_banner = os.environ.get("NEWCLASS_NO_BANNER", "").strip().lower()
        if no_banner in ("1", "true", "yes"):
            kwargs["show_banner"] = False
        return cls(**kwargs)
