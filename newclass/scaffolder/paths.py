"""Convention-based output paths for a new class.

Every artifact lives under ``<root>/<category>/<role>/<sub namespace>`` where
the sub-namespace's backslash-separated segments become nested directories.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from newclass.scaffolder.arguments import ArgumentSet
from newclass.scaffolder.templates import TemplateKind
from newclass.utils import Notifier


class Category(str, Enum):
    TESTS = "tests"
    SRC = "src"


class Role(str, Enum):
    INTERFACES = "interfaces"
    CLASSES = "classes"


# Creation order of the four directories.
REQUIRED_LOCATIONS: tuple[tuple[Category, Role], ...] = (
    (Category.TESTS, Role.INTERFACES),
    (Category.TESTS, Role.CLASSES),
    (Category.SRC, Role.INTERFACES),
    (Category.SRC, Role.CLASSES),
)

# kind -> (category, role, filename suffix appended to the class name)
FILE_RULES: dict[TemplateKind, tuple[Category, Role, str]] = {
    TemplateKind.TEST_TRAIT: (Category.TESTS, Role.INTERFACES, "TestTrait"),
    TemplateKind.TEST: (Category.TESTS, Role.CLASSES, "Test"),
    TemplateKind.INTERFACE: (Category.SRC, Role.INTERFACES, ""),
    TemplateKind.CLASS: (Category.SRC, Role.CLASSES, ""),
}


class PathResolver:
    """Derives target directories and file paths from an ``ArgumentSet``."""

    def __init__(self, args: ArgumentSet, notifier: Notifier | None = None) -> None:
        self.args = args
        self.notifier = notifier
        self.root = Path(args.path)

    @property
    def sub_directory(self) -> str:
        """The sub-namespace with its delimiters replaced by ``os.sep``."""
        return os.sep.join(self.args.sub_namespace_parts)

    def directory_for(self, category: Category, role: Role) -> Path:
        return self.root / category.value / role.value / self.sub_directory

    def required_directories(self) -> list[Path]:
        return [self.directory_for(category, role) for category, role in REQUIRED_LOCATIONS]

    def file_target_for(self, kind: TemplateKind, extension: str = "php") -> Path | None:
        """Return where the artifact of *kind* is written.

        Returns ``None`` (and reports an error) if *kind* has no rule.
        """
        rule = FILE_RULES.get(kind)
        if rule is None:
            if self.notifier is not None:
                self.notifier.error("You must specify a --name and --subnamespace.")
            return None
        category, role, suffix = rule
        return self.directory_for(category, role) / f"{self.args.name}{suffix}.{extension}"
