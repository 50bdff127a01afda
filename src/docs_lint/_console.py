"""Rich console wrapper for styled terminal output.

This module provides typed console functions for the documentation check.
All print statements in the codebase should use these functions instead.
Findings and errors go to stderr; confirmations and summaries go to stdout.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from docs_lint.guards import RuleReport


class _RichConsole(Protocol):
    """Protocol for rich.console.Console interface."""

    def print(
        self,
        *objects: str,
        style: str | None = None,
        markup: bool | None = None,
        highlight: bool | None = None,
        soft_wrap: bool | None = None,
    ) -> None:
        """Print styled output to console."""
        ...


def _get_console(stderr: bool = False) -> _RichConsole:
    """Get rich Console instance with strict typing."""
    rich_console_mod = __import__("rich.console", fromlist=["Console"])
    console_cls = rich_console_mod.Console
    console: _RichConsole = console_cls(stderr=stderr)
    return console


# Module-level console instances
_console: _RichConsole = _get_console()
_err_console: _RichConsole = _get_console(stderr=True)


# =============================================================================
# Style Constants
# =============================================================================

STYLE_LABEL = "dim white"
STYLE_VALUE = "green"
STYLE_WARNING = "yellow"
STYLE_ERROR = "bold red"
STYLE_SUCCESS = "bold green"


# =============================================================================
# Output Functions
# =============================================================================


def log_success(text: str) -> None:
    """Print a confirmation line."""
    _console.print(text, style=STYLE_SUCCESS)


def log_error(text: str) -> None:
    """Print an error line to stderr."""
    _err_console.print(text, style=STYLE_ERROR, markup=False, highlight=False, soft_wrap=True)


def log_violation(text: str) -> None:
    """Print one indented violation line to stderr.

    Markup is off so bracketed tags and paths print verbatim.
    """
    _err_console.print(f"  - {text}", markup=False, highlight=False, soft_wrap=True)


def log_hint(text: str) -> None:
    """Print a hint line to stderr."""
    _err_console.print(
        f"\n{text}", style=STYLE_WARNING, markup=False, highlight=False, soft_wrap=True
    )


def log_summary(reports: Sequence[RuleReport]) -> None:
    """Print violation counts per rule."""
    for rep in reports:
        style = STYLE_ERROR if rep.violations else STYLE_VALUE
        _console.print(
            f"  [{STYLE_LABEL}]{rep.name}:[/{STYLE_LABEL}] "
            f"[{style}]{rep.violations} violations[/{style}]",
            highlight=False,
        )


__all__ = [
    "log_error",
    "log_hint",
    "log_success",
    "log_summary",
    "log_violation",
]
