"""newclass command line interface.

Generates the Class, Interface, TestTrait and Test files for a new class in a
project that follows the ``src/{interfaces,classes}`` and
``tests/{interfaces,classes}`` layout.

Usage::

    python -m newclass.cli \\
        --path ./ \\
        --rootnamespace Vendor\\\\ProjectName \\
        --name NewClassName \\
        --basetestname ProjectNameTest \\
        --subnamespace sub\\\\namespace
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from newclass.config import Config
from newclass.errors import ArgumentValidationError
from newclass.scaffolder.arguments import REQUIRED_FLAGS, usage_example
from newclass.scaffolder.generator import ClassGenerator
from newclass.utils import (
    ConsoleNotifier,
    console,
    print_banner,
    print_success,
    print_warning,
)

_FLAG_HELP: dict[str, str] = {
    "path": "Full path to the project the new class is created for",
    "rootnamespace": "Root namespace of the project, e.g. Vendor\\\\Project",
    "name": "Name of the new class",
    "subnamespace": "Namespace below the root namespace, e.g. Sub\\\\Namespace",
    "basetestname": "Name of the project's base test class",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="newclass",
        description="Generate the boilerplate for a new class, its interface and tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="Example:\n" + usage_example(),
    )
    # Flags are validated by the scaffolder, not argparse, so that a missing
    # flag produces its own explanation and exit status 1.
    for flag in ("path", "rootnamespace", "name", "subnamespace", "basetestname"):
        parser.add_argument(
            f"--{flag}",
            dest=flag,
            nargs="?",
            default=None,
            const=None,
            metavar=flag.upper(),
            help=_FLAG_HELP[flag],
        )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the banner",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``python -m newclass.cli``.

    Returns:
        ``0`` when the run completed (even if some files were skipped), ``1``
        when a required flag was missing or the configuration is invalid.
    """
    args = build_parser().parse_args(argv)
    notifier = ConsoleNotifier()
    try:
        config = Config.from_env()
    except ValidationError as exc:
        notifier.error(f"Invalid newclass configuration: {exc}")
        return 1
    if args.no_banner:
        config = config.model_copy(update={"show_banner": False})

    if config.show_banner:
        print_banner()

    generator = ClassGenerator(config, notifier)
    raw = {flag: getattr(args, flag) for flag in REQUIRED_FLAGS}

    try:
        result = generator.run(raw)
    except ArgumentValidationError as exc:
        notifier.error(exc.message)
        console.print()
        console.print("For example:")
        console.print()
        console.print(usage_example(highlight=exc.flag))
        return 1

    if result.failed:
        print_warning(f"{len(result.failed)} file(s) could not be generated under {result.root}")
    else:
        print_success(f"New class files generated under {result.root}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
