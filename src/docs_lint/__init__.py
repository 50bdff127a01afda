"""Lint tracked Markdown files for documentation location and naming rules."""

from docs_lint.guards import DEFAULT_CONFIG, DocsRulesConfig, RuleReport, Violation
from docs_lint.guards.doc_rules import check, summarize
from docs_lint.guards.util import TrackedFilesError, tracked_markdown_files

__all__ = [
    "DEFAULT_CONFIG",
    "DocsRulesConfig",
    "RuleReport",
    "TrackedFilesError",
    "Violation",
    "check",
    "summarize",
    "tracked_markdown_files",
]
