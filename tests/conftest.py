"""Shared pytest fixtures for the newclass test suite.

Provides reusable fixtures for:
- A recording notifier that keeps messages in emission order
- A ``Config`` whose fallback directory lives under ``tmp_path``
- An existing project root and a factory for raw CLI flag mappings
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from newclass.config import Config
from newclass.scaffolder.arguments import ArgumentSet


# ---------------------------------------------------------------------------
# Notifier
# ---------------------------------------------------------------------------


class RecordingNotifier:
    """Notifier that stores ``(level, message)`` pairs instead of printing."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warn(self, message: str) -> None:
        self.messages.append(("warn", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def of_level(self, level: str) -> list[str]:
        return [message for lvl, message in self.messages if lvl == level]


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty, existing project directory (auto-cleanup)."""
    root = tmp_path / "project"
    root.mkdir()
    yield root


@pytest.fixture
def fallback_dir(tmp_path: Path) -> Path:
    """Fallback location; deliberately not created up front."""
    return tmp_path / "fallback"


@pytest.fixture
def config(fallback_dir: Path) -> Config:
    return Config(fallback_dir=fallback_dir, show_banner=False)


# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------


@pytest.fixture
def make_raw_args(project_root: Path) -> Callable[..., dict[str, Any]]:
    """Factory for raw ``{flag: value}`` mappings.

    Keyword arguments override the defaults; pass ``omit=("name",)`` to drop
    flags entirely.
    """

    def _make(omit: tuple[str, ...] = (), **overrides: Any) -> dict[str, Any]:
        raw: dict[str, Any] = {
            "name": "Foo",
            "path": str(project_root),
            "rootnamespace": "App",
            "subnamespace": "Sub",
            "basetestname": "AppTest",
        }
        raw.update(overrides)
        for flag in omit:
            raw.pop(flag, None)
        return raw

    return _make


@pytest.fixture
def widget_args(project_root: Path) -> ArgumentSet:
    """A validated ArgumentSet with a two-level sub-namespace."""
    return ArgumentSet(
        name="Widget",
        path=str(project_root),
        root_namespace="App",
        sub_namespace="Sub\\Ns",
        base_test_name="AppTest",
    )
