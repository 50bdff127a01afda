"""Guard rules for enforcing documentation layout and naming.

This module provides the shared types used by the documentation rules.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Protocol

from docs_lint._types import ViolationKind


class Violation(NamedTuple):
    """A single documentation rule violation."""

    file: str
    kind: ViolationKind
    message: str


class RuleReport(NamedTuple):
    """Summary of violations for a rule."""

    name: str
    violations: int


class DocsRulesConfig(NamedTuple):
    """Fixed configuration for the documentation rules."""

    docs_dir: str
    allowed_root_files: frozenset[str]
    readme_name: str
    skip_prefixes: tuple[str, ...]
    naming_pattern: re.Pattern[str]
    rules_doc: str


DEFAULT_CONFIG = DocsRulesConfig(
    docs_dir="docs",
    allowed_root_files=frozenset({"CONTRIBUTING.md", "CODE_OF_CONDUCT.md", "LICENSE.md"}),
    readme_name="README.md",
    skip_prefixes=("templates/", "node_modules/"),
    naming_pattern=re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$"),
    rules_doc="documentation-rules.md",
)


class Rule(Protocol):
    """Protocol for documentation rules."""

    @property
    def name(self) -> str: ...

    @property
    def kind(self) -> ViolationKind: ...

    def check_file(self, path: str, config: DocsRulesConfig) -> Violation | None: ...


__all__ = ["DEFAULT_CONFIG", "DocsRulesConfig", "Rule", "RuleReport", "Violation"]
