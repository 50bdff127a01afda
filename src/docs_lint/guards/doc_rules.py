"""Guard rules for documentation location and naming.

Only tracked Markdown files are checked. Paths under templates/, node_modules/
or any dot-prefixed top-level entry are skipped before any rule runs.

Violations:
- LocationViolation: a Markdown file outside docs/ that is neither README.md
  nor one of the standard root files (CONTRIBUTING.md, CODE_OF_CONDUCT.md,
  LICENSE.md)
- NamingViolation: a Markdown file inside docs/ whose name is not kebab-case
  (README.md is exempt at any depth)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from docs_lint._types import LOCATION_VIOLATION, NAMING_VIOLATION
from docs_lint.guards import DEFAULT_CONFIG, DocsRulesConfig, Rule, RuleReport, Violation

_MD_SUFFIX = ".md"


class _PathInfo(NamedTuple):
    """Path facts shared by the location and naming rules."""

    parts: list[str]
    file_name: str
    is_readme: bool
    is_in_docs: bool


def _describe(path: str, config: DocsRulesConfig) -> _PathInfo:
    parts = path.split("/")
    file_name = parts[-1]
    return _PathInfo(
        parts=parts,
        file_name=file_name,
        is_readme=file_name == config.readme_name,
        is_in_docs=parts[0] == config.docs_dir,
    )


def is_markdown(path: str) -> bool:
    """Check if path names a Markdown file."""
    return path.endswith(_MD_SUFFIX)


def is_skipped(path: str, config: DocsRulesConfig = DEFAULT_CONFIG) -> bool:
    """Check if path is exempt from every rule.

    Covers the configured prefixes and anything whose first segment starts
    with a dot (hidden and tool configuration directories).
    """
    return path.startswith(".") or any(path.startswith(p) for p in config.skip_prefixes)


class LocationRule:
    """Outside docs/, only README.md and the standard root files are allowed."""

    name = "location"
    kind = LOCATION_VIOLATION

    def check_file(self, path: str, config: DocsRulesConfig) -> Violation | None:
        info = _describe(path, config)
        if info.is_in_docs:
            return None
        if len(info.parts) == 1 and info.file_name in config.allowed_root_files:
            return None
        if info.is_readme:
            return None
        return Violation(
            file=path,
            kind=self.kind,
            message=(
                f"[Location Violation] {path}: Only {config.readme_name} is allowed "
                f"outside of {config.docs_dir}/."
            ),
        )


class NamingRule:
    """Inside docs/, file names must be kebab-case."""

    name = "naming"
    kind = NAMING_VIOLATION

    def check_file(self, path: str, config: DocsRulesConfig) -> Violation | None:
        info = _describe(path, config)
        if not info.is_in_docs or info.is_readme:
            return None
        stem = info.file_name[: -len(_MD_SUFFIX)]
        if config.naming_pattern.fullmatch(stem) is not None:
            return None
        return Violation(
            file=path,
            kind=self.kind,
            message=(
                f"[Naming Violation] {path}: Files in {config.docs_dir}/ must be kebab-case "
                f"(e.g., my-doc.md). Found: {info.file_name}"
            ),
        )


RULES: tuple[Rule, ...] = (LocationRule(), NamingRule())


def check(paths: Sequence[str], config: DocsRulesConfig = DEFAULT_CONFIG) -> list[Violation]:
    """Check tracked paths against the documentation rules.

    Violations are returned in input order. Non-Markdown and skipped paths
    produce nothing.
    """
    out: list[Violation] = []
    for path in paths:
        if not is_markdown(path) or is_skipped(path, config):
            continue
        for rule in RULES:
            violation = rule.check_file(path, config)
            if violation is not None:
                out.append(violation)
    return out


def summarize(violations: Sequence[Violation]) -> list[RuleReport]:
    """Count violations per rule, in rule order."""
    reports: list[RuleReport] = []
    for rule in RULES:
        count = sum(1 for v in violations if v.kind == rule.kind)
        reports.append(RuleReport(name=rule.name, violations=count))
    return reports


__all__ = [
    "RULES",
    "LocationRule",
    "NamingRule",
    "check",
    "is_markdown",
    "is_skipped",
    "summarize",
]
