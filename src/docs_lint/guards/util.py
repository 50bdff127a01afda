"""Utility functions for listing the files the documentation rules check."""

from __future__ import annotations

import subprocess
from pathlib import Path

from docs_lint.guards.doc_rules import is_markdown


class TrackedFilesError(RuntimeError):
    """Raised when git cannot list the tracked files of a repository."""


def list_tracked_files(root: Path) -> list[str]:
    """List every file tracked by the git repository containing root.

    root may be any directory inside the work tree. Paths are relative to the
    repository root and use forward slashes. Output is NUL-separated so names
    with quotes, backslashes or non-ASCII characters come back verbatim.
    """
    try:
        proc = subprocess.run(
            ["git", "ls-files", "-z", "--full-name", "--", ":/"],
            cwd=root,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )
    except subprocess.CalledProcessError as exc:
        stderr = exc.stderr.strip() if isinstance(exc.stderr, str) else ""
        detail = stderr if stderr else str(exc)
        raise TrackedFilesError(f"git ls-files failed in {root}: {detail}") from exc
    except OSError as exc:
        raise TrackedFilesError(f"failed to run git in {root}: {exc}") from exc
    return [path for path in proc.stdout.split("\0") if path.strip() != ""]


def tracked_markdown_files(root: Path) -> list[str]:
    """List tracked Markdown files under root."""
    return [path for path in list_tracked_files(root) if is_markdown(path)]


__all__ = ["TrackedFilesError", "list_tracked_files", "tracked_markdown_files"]
