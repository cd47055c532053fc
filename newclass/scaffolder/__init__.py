"""newclass scaffolder -- generates the files of a new class.

Given a class name, a project root, a root namespace, a sub-namespace and the
project's base test name, renders the ``TestTrait``, ``Test``, ``Interface``
and ``Class`` templates into the project's ``src/`` and ``tests/`` trees.

Quick usage::

    from newclass.config import Config
    from newclass.scaffolder import ClassGenerator
    from newclass.utils import ConsoleNotifier

    generator = ClassGenerator(Config(), ConsoleNotifier())
    result = generator.run({
        "name": "Widget",
        "path": "/path/to/project",
        "rootnamespace": "Vendor\\Project",
        "subnamespace": "Ui\\Controls",
        "basetestname": "ProjectTest",
    })
"""

from newclass.scaffolder.arguments import ArgumentSet, validate_arguments
from newclass.scaffolder.generator import (
    ClassGenerator,
    FileStatus,
    GeneratedFileSpec,
    GenerationResult,
)
from newclass.scaffolder.materializer import FileMaterializer, WriteOutcome
from newclass.scaffolder.paths import PathResolver
from newclass.scaffolder.templates import TemplateCatalog, TemplateKind, TemplateRenderer

__all__ = [
    "ArgumentSet",
    "ClassGenerator",
    "FileMaterializer",
    "FileStatus",
    "GeneratedFileSpec",
    "GenerationResult",
    "PathResolver",
    "TemplateCatalog",
    "TemplateKind",
    "TemplateRenderer",
    "WriteOutcome",
    "validate_arguments",
]
