"""Pytest fixtures for docs_lint tests."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

import pytest


class RepoFactory(Protocol):
    """Protocol for the make_repo fixture."""

    def __call__(self, tracked: Sequence[str], untracked: Sequence[str] = ()) -> Path:
        """Create a git repository with the given files and return its root."""
        ...


def _git(cwd: Path, *args: str) -> None:
    """Run a git command, failing the test on error."""
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True)


def _touch(root: Path, rel: str) -> None:
    """Create a small Markdown file, creating parent dirs as needed."""
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("# doc\n", encoding="utf-8")


@pytest.fixture(autouse=True)
def isolate_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep git from discovering repositories above the test directory."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))


@pytest.fixture
def make_repo(tmp_path: Path) -> RepoFactory:
    """Factory fixture that builds a throwaway git repository.

    Tracked files are staged with git add; staged files count as tracked.
    Skips the test when git is not installed.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    def _make(tracked: Sequence[str], untracked: Sequence[str] = ()) -> Path:
        root = tmp_path / "repo"
        root.mkdir()
        _git(root, "init", "-q")
        for rel in tracked:
            _touch(root, rel)
        for rel in untracked:
            _touch(root, rel)
        if tracked:
            _git(root, "--literal-pathspecs", "add", "--", *tracked)
        return root

    return _make
