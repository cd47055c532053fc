"""Argument validation for the class scaffolder.

Turns the raw ``{flag: value}`` mapping produced by the CLI into a frozen
``ArgumentSet``.  Every presence check runs before anything touches the
filesystem, so a missing flag never leaves a half-generated tree behind.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from newclass.errors import ArgumentValidationError
from newclass.utils import Notifier

# Flags in the order they are checked.
REQUIRED_FLAGS: tuple[str, ...] = (
    "name",
    "path",
    "rootnamespace",
    "subnamespace",
    "basetestname",
)

NAMESPACE_DELIMITER = "\\"

_FORBIDDEN_ROOTS = frozenset({os.sep, "/", "/home"})

_COMBINED_NAMESPACE_EXAMPLE = (
    "then the complete namespace would be "
    "`Root\\Namespace\\classes\\Sub\\Namespace`."
)

FLAG_EXPLANATIONS: dict[str, str] = {
    "name": "You must specify a --name for the new Class.",
    "path": (
        "You must specify a --path that is the full path to the project "
        "the new class will be created for."
    ),
    "rootnamespace": (
        "You must specify a --rootnamespace. This will be the part of the "
        "namespace that should precede the --subnamespace.\n\n"
        "For example: If the --subnamespace is `Sub\\Namespace` and the "
        "--rootnamespace is `Root\\Namespace` " + _COMBINED_NAMESPACE_EXAMPLE
    ),
    "subnamespace": (
        "You must specify a --subnamespace. This will be the part of the "
        "namespace that should follow the project's root namespace.\n\n"
        "For example: If the project's root namespace is `Root\\Namespace` "
        "and the subnamespace is `Sub\\Namespace` " + _COMBINED_NAMESPACE_EXAMPLE
    ),
    "basetestname": (
        "You must specify a --basetestname that matches the name of the "
        "project's base test class. This class should exist at "
        "`tests/<BASETESTNAME>Test.php`.\n\n"
        "Note: this tool is intended for creating classes in Darling "
        "libraries. If your project is not a Darling library this flag will "
        "probably not make sense to you, and you are probably using this "
        "tool for the wrong purpose."
    ),
}

_EXAMPLE_ARGS: tuple[tuple[str, str], ...] = (
    ("name", "--name Foo"),
    ("path", "--path ./path/to/project"),
    ("rootnamespace", "--rootnamespace Foo\\\\Bar"),
    ("subnamespace", "--subnamespace Baz\\\\Bazzer"),
    ("basetestname", "--basetestname ProjectNameTest"),
)


# ---------------------------------------------------------------------------
# ArgumentSet
# ---------------------------------------------------------------------------


class ArgumentSet(BaseModel):
    """Validated, immutable inputs for one scaffolding run."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Name of the new class")
    path: str = Field(..., min_length=1, description="Project root (possibly the fallback)")
    root_namespace: str = Field(..., min_length=1)
    sub_namespace: str = Field(..., min_length=1, description="Backslash-delimited")
    base_test_name: str = Field(..., min_length=1)

    @property
    def lc_name(self) -> str:
        """``name`` with its first letter lower-cased (``Widget`` -> ``widget``)."""
        return self.name[:1].lower() + self.name[1:]

    @property
    def sub_namespace_parts(self) -> list[str]:
        """Non-empty segments of the sub-namespace."""
        return [part for part in self.sub_namespace.split(NAMESPACE_DELIMITER) if part]


# ---------------------------------------------------------------------------
# Root path admissibility
# ---------------------------------------------------------------------------


def root_path_is_valid(path: str) -> bool:
    """Return ``True`` if *path* may be used as the project root.

    Empty paths, the filesystem root, ``/home`` and anything that is not an
    existing directory are rejected.
    """
    if not path:
        return False
    if path in _FORBIDDEN_ROOTS or os.path.normpath(path) in _FORBIDDEN_ROOTS:
        return False
    return os.path.isdir(path)


def resolve_root_path(path: str, fallback_dir: str | Path, notifier: Notifier) -> str:
    """Return *path* if it is a usable root, otherwise *fallback_dir*.

    Falling back is not an error; it is reported as a warning and the run
    carries on.
    """
    if root_path_is_valid(path):
        return path
    fallback = str(fallback_dir)
    notifier.warn(
        f"The specified --path `{path}` does not exist. The `{fallback}` "
        "directory will be used as the --path instead."
    )
    return fallback


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _flag_value(raw: Mapping[str, Any], flag: str) -> str | None:
    value = raw.get(flag)
    if not isinstance(value, str):
        return None
    # An empty --path is still "given"; it is handled by the fallback.
    if flag != "path" and not value.strip():
        return None
    return value


def check_required_flags(raw: Mapping[str, Any]) -> dict[str, str]:
    """Return the five flag values, raising on the first missing one."""
    values: dict[str, str] = {}
    for flag in REQUIRED_FLAGS:
        value = _flag_value(raw, flag)
        if value is None:
            raise ArgumentValidationError(flag, FLAG_EXPLANATIONS[flag])
        values[flag] = value
    return values


def validate_arguments(
    raw: Mapping[str, Any],
    *,
    fallback_dir: str | Path,
    notifier: Notifier,
) -> ArgumentSet:
    """Validate raw CLI flags and build an ``ArgumentSet``.

    Args:
        raw: Mapping of flag name (without ``--``) to value.  Absent flags,
            ``None`` and non-string values count as missing.
        fallback_dir: Directory used when ``--path`` is not usable.
        notifier: Receives the fallback warning, if any.

    Raises:
        ArgumentValidationError: For the first missing flag, in the order of
            ``REQUIRED_FLAGS``.
    """
    values = check_required_flags(raw)
    root = resolve_root_path(values["path"], fallback_dir, notifier)
    return ArgumentSet(
        name=values["name"].strip(),
        path=root,
        root_namespace=values["rootnamespace"].strip(),
        sub_namespace=values["subnamespace"].strip(),
        base_test_name=values["basetestname"].strip(),
    )


def usage_example(highlight: str | None = None, program: str = "newclass") -> str:
    """Return an example invocation as Rich markup.

    The argument named by *highlight* is emphasised so the user can see which
    flag was missing.
    """
    lines = [f"{program} \\"]
    for index, (flag, text) in enumerate(_EXAMPLE_ARGS):
        shown = f"[bold black on dark_orange]{text}[/]" if flag == highlight else text
        continuation = " \\" if index < len(_EXAMPLE_ARGS) - 1 else ""
        lines.append(f"    {shown}{continuation}")
    return "\n".join(lines)
