"""Template lookup and placeholder substitution.

The templates under ``newclass/scaffolder/templates/`` are plain source files
with five fixed placeholder tokens.  Rendering is literal find/replace: there
are no conditionals, loops or filters, and a substituted value is never
expanded again.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from newclass.config import DEFAULT_TEMPLATES_DIR
from newclass.errors import TemplateRenderError
from newclass.scaffolder.arguments import ArgumentSet


# ---------------------------------------------------------------------------
# Template kinds & catalog
# ---------------------------------------------------------------------------


class TemplateKind(str, Enum):
    """The four artifacts generated for every new class, in generation order."""

    TEST_TRAIT = "TestTrait"
    TEST = "Test"
    INTERFACE = "Interface"
    CLASS = "Class"


@dataclass(frozen=True)
class TemplateDescriptor:
    """A template kind paired with the file it is rendered from."""

    kind: TemplateKind
    source_path: Path


class TemplateCatalog:
    """Maps each ``TemplateKind`` to ``<template_dir>/<Kind>.<extension>``."""

    def __init__(
        self,
        template_dir: str | Path | None = None,
        extension: str = "php",
    ) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATES_DIR
        self.template_dir = Path(template_dir).resolve()
        self.extension = extension

    def descriptor(self, kind: TemplateKind) -> TemplateDescriptor:
        return TemplateDescriptor(
            kind=kind,
            source_path=self.template_dir / f"{kind.value}.{self.extension}",
        )

    def descriptors(self) -> list[TemplateDescriptor]:
        """Return one descriptor per kind, in generation order."""
        return [self.descriptor(kind) for kind in TemplateKind]

    def missing(self) -> list[TemplateDescriptor]:
        """Return the descriptors whose source file does not exist."""
        return [d for d in self.descriptors() if not d.source_path.is_file()]


# ---------------------------------------------------------------------------
# Placeholders
# ---------------------------------------------------------------------------

BASE_TEST_NAME = "__BASE_TEST_NAME__"
ROOT_NAMESPACE = "__ROOT_NAMESPACE__"
TARGET_CLASS_NAME = "__TARGET_CLASS_NAME__"
SUB_NAMESPACE = "__SUB_NAMESPACE__"
LC_TARGET_CLASS_NAME = "__LC_TARGET_CLASS_NAME__"

PLACEHOLDERS: tuple[str, ...] = (
    BASE_TEST_NAME,
    ROOT_NAMESPACE,
    TARGET_CLASS_NAME,
    SUB_NAMESPACE,
    LC_TARGET_CLASS_NAME,
)

# Longest first so that no token can shadow another sharing its prefix.
_PLACEHOLDER_PATTERN = re.compile(
    "|".join(re.escape(token) for token in sorted(PLACEHOLDERS, key=len, reverse=True))
)


def placeholder_values(args: ArgumentSet) -> dict[str, str]:
    """Return the ``{token: replacement}`` mapping for *args*."""
    return {
        BASE_TEST_NAME: args.base_test_name,
        ROOT_NAMESPACE: args.root_namespace,
        TARGET_CLASS_NAME: args.name,
        SUB_NAMESPACE: args.sub_namespace,
        LC_TARGET_CLASS_NAME: args.lc_name,
    }


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Substitutes placeholder tokens in template content."""

    def render(self, content: str, args: ArgumentSet) -> str:
        """Replace every placeholder occurrence in *content* in a single pass.

        Tokens that do not appear in *content* are simply not used.
        """
        values = placeholder_values(args)
        return _PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(0)], content)

    def render_template(self, descriptor: TemplateDescriptor, args: ArgumentSet) -> str:
        """Read *descriptor*'s source file and render it.

        Raises:
            TemplateRenderError: If the template can not be read.
        """
        try:
            content = descriptor.source_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateRenderError(descriptor.source_path, str(exc)) from exc
        return self.render(content, args)
