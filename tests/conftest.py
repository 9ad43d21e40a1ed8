"""Shared pytest fixtures for the mruby-cli test suite.

Provides reusable fixtures for:
- Output directories for generated projects
- Recording reporters
- A freshly scaffolded ``widget`` project
- A wide shared console so Rich never wraps error messages
"""

from __future__ import annotations

from pathlib import Path

import pytest

from mruby_cli import utils
from mruby_cli.scaffolder import RecordingReporter, Scaffolder


# ---------------------------------------------------------------------------
# Expected manifest for the ``widget`` project
# ---------------------------------------------------------------------------

WIDGET_DIRECTORIES: list[str] = [
    "widget",
    "widget/tools",
    "widget/tools/widget",
    "widget/mrblib",
    "widget/bintest",
    "widget/test",
]

WIDGET_FILES: list[str] = [
    "widget/mrbgem.rake",
    "widget/build_config.rb",
    "widget/Rakefile",
    "widget/Dockerfile",
    "widget/docker-compose.yml",
    "widget/tools/widget/widget.c",
    "widget/mrblib/widget.rb",
    "widget/bintest/widget.rb",
    "widget/test/test_widget.rb",
]


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty parent directory for generated projects (auto-cleanup)."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def scaffolded_widget(output_dir: Path, recorder: RecordingReporter) -> Path:
    """Run the scaffolder once for ``widget`` and return the project root."""
    return Scaffolder("widget", recorder, output_dir).run()


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file under *root* (POSIX relative path) to its bytes."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Widen the shared console so long tmp paths are printed on one line."""
    monkeypatch.setattr(utils.console, "width", 1000)


@pytest.fixture
def widget_directories() -> list[str]:
    """Every directory a ``widget`` run reports, in order."""
    return list(WIDGET_DIRECTORIES)


@pytest.fixture
def widget_files() -> list[str]:
    """Every file a ``widget`` run writes, in manifest order."""
    return list(WIDGET_FILES)


@pytest.fixture
def take_snapshot():
    """Return the :func:`snapshot` helper."""
    return snapshot
