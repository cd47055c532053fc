"""Main scaffolding orchestrator.

Takes the raw CLI flags (or an already validated ``ArgumentSet``) and
generates the four files of a new class:

- ``tests/interfaces/<sub>/<Name>TestTrait.<ext>``
- ``tests/classes/<sub>/<Name>Test.<ext>``
- ``src/interfaces/<sub>/<Name>.<ext>``
- ``src/classes/<sub>/<Name>.<ext>``

Only argument validation can stop a run.  Directory, render and write
failures are reported and the remaining templates are still processed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from newclass.config import Config
from newclass.errors import TemplateRenderError
from newclass.utils import Notifier

from .arguments import ArgumentSet, validate_arguments
from .materializer import FileMaterializer, WriteOutcome
from .paths import PathResolver
from .templates import TemplateCatalog, TemplateKind, TemplateRenderer


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class FileStatus(str, Enum):
    """Final state of one template kind after a run."""

    WRITTEN = "written"
    SKIPPED = "skipped"
    RENDER_FAILED = "render_failed"
    WRITE_FAILED = "write_failed"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class GeneratedFileSpec:
    """Where a template kind is read from and written to."""

    kind: TemplateKind
    source_template_path: Path
    target_path: Path
    target_directory: Path


@dataclass
class FileResult:
    kind: TemplateKind
    target_path: Path | None
    status: FileStatus


@dataclass
class GenerationResult:
    """Summary of a generation run."""

    root: Path
    directories: list[Path] = field(default_factory=list)
    failed_directories: list[Path] = field(default_factory=list)
    files: list[FileResult] = field(default_factory=list)

    def paths_with_status(self, status: FileStatus) -> list[Path]:
        return [
            r.target_path
            for r in self.files
            if r.status == status and r.target_path is not None
        ]

    @property
    def written(self) -> list[Path]:
        return self.paths_with_status(FileStatus.WRITTEN)

    @property
    def skipped(self) -> list[Path]:
        return self.paths_with_status(FileStatus.SKIPPED)

    @property
    def failed(self) -> list[FileResult]:
        return [
            r
            for r in self.files
            if r.status not in (FileStatus.WRITTEN, FileStatus.SKIPPED)
        ]


_WRITE_STATUS: dict[WriteOutcome, FileStatus] = {
    WriteOutcome.WRITTEN: FileStatus.WRITTEN,
    WriteOutcome.SKIPPED: FileStatus.SKIPPED,
    WriteOutcome.FAILED: FileStatus.WRITE_FAILED,
}


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class ClassGenerator:
    """Sequences validation, directory creation, rendering and writing.

    Attributes:
        config: Tool configuration (template location, fallback dir, extension).
        notifier: Receives every user-facing message, in order.
    """

    def __init__(self, config: Config, notifier: Notifier) -> None:
        self.config = config
        self.notifier = notifier
        self.catalog = TemplateCatalog(config.templates_dir, config.file_extension)
        self.renderer = TemplateRenderer()
        self.materializer = FileMaterializer(notifier)

    # -- Public API --------------------------------------------------------

    def run(self, raw: Mapping[str, Any]) -> GenerationResult:
        """Validate *raw* flags, then generate the new class's files.

        Raises:
            ArgumentValidationError: If a required flag is missing.  Nothing
                has been written to disk when this is raised.
        """
        args = validate_arguments(
            raw,
            fallback_dir=self.config.fallback_dir,
            notifier=self.notifier,
        )
        return self.generate(args)

    def generate(self, args: ArgumentSet) -> GenerationResult:
        """Generate the four files for an already validated ``ArgumentSet``."""
        resolver = PathResolver(args, self.notifier)
        result = GenerationResult(root=resolver.root)

        # 0. Templates that can not be rendered are reported once, up front
        missing = {d.kind for d in self.catalog.missing()}
        if missing:
            names = ", ".join(
                d.source_path.name for d in self.catalog.descriptors() if d.kind in missing
            )
            self.notifier.warn(
                f"Missing template(s) in {self.catalog.template_dir}: {names}. "
                "The matching files will not be generated."
            )

        # 1. Directories: each one is attempted even if a previous one failed
        for directory in resolver.required_directories():
            if self.materializer.ensure_directory(directory):
                result.directories.append(directory)
            else:
                result.failed_directories.append(directory)

        # 2. Render and write each template in the fixed order
        for descriptor in self.catalog.descriptors():
            target = resolver.file_target_for(descriptor.kind, self.config.file_extension)
            if target is None:
                result.files.append(FileResult(descriptor.kind, None, FileStatus.UNRESOLVED))
                continue
            if descriptor.kind in missing:
                result.files.append(FileResult(descriptor.kind, target, FileStatus.RENDER_FAILED))
                continue

            try:
                content = self.renderer.render_template(descriptor, args)
            except TemplateRenderError as exc:
                self.notifier.warn(str(exc))
                result.files.append(FileResult(descriptor.kind, target, FileStatus.RENDER_FAILED))
                continue

            outcome = self.materializer.write_file(target, content)
            result.files.append(FileResult(descriptor.kind, target, _WRITE_STATUS[outcome]))

        self.notifier.info(
            f"{len(result.written)} file(s) written, {len(result.skipped)} skipped, "
            f"{len(result.failed)} failed."
        )
        return result

    def file_specs(self, args: ArgumentSet) -> list[GeneratedFileSpec]:
        """Return the source/target pairing for every template kind."""
        resolver = PathResolver(args, self.notifier)
        specs: list[GeneratedFileSpec] = []
        for descriptor in self.catalog.descriptors():
            target = resolver.file_target_for(descriptor.kind, self.config.file_extension)
            if target is None:
                continue
            specs.append(
                GeneratedFileSpec(
                    kind=descriptor.kind,
                    source_template_path=descriptor.source_path,
                    target_path=target,
                    target_directory=target.parent,
                )
            )
        return specs
