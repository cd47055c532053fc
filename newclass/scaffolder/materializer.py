"""Non-destructive directory creation and file writing.

Failures here are never fatal: each one is reported through the notifier and
the caller moves on to the next directory or file.  Existing files are never
overwritten.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from newclass.utils import Notifier

DIRECTORY_MODE = 0o755


class WriteOutcome(str, Enum):
    """Result of a single ``FileMaterializer.write_file`` call."""

    WRITTEN = "written"
    SKIPPED = "skipped"
    FAILED = "failed"


class FileMaterializer:
    """Creates directories and writes rendered files."""

    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier

    def ensure_directory(self, path: str | Path) -> bool:
        """Create *path* and any missing parents.

        Returns:
            ``True`` if the directory exists afterwards, ``False`` if it could
            not be created.
        """
        directory = Path(path)
        if directory.is_dir():
            return True
        self.notifier.info(f"Creating directory at: {directory}")
        try:
            directory.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            self.notifier.warn(f"Could not create directory at {directory}: {exc}")
            return False
        return True

    def write_file(self, path: str | Path, content: str) -> WriteOutcome:
        """Write *content* to *path* unless a file is already there."""
        target = Path(path)
        if target.exists():
            self.notifier.warn(
                f"Could not write file because a file already exists at {target}"
            )
            return WriteOutcome.SKIPPED

        self.notifier.info(f"Writing to {target}")
        try:
            # "x" refuses to clobber a file created since the check above.
            with target.open("x", encoding="utf-8") as handle:
                written = handle.write(content)
        except FileExistsError:
            self.notifier.warn(
                f"Could not write file because a file already exists at {target}"
            )
            return WriteOutcome.SKIPPED
        except OSError as exc:
            self.notifier.warn(f"Failed to write {target}: {exc}")
            return WriteOutcome.FAILED

        if written != len(content):
            self.notifier.warn(
                f"Failed to write {target}: only {written} of {len(content)} "
                "characters were written"
            )
            return WriteOutcome.FAILED
        return WriteOutcome.WRITTEN
