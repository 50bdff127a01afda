"""Check script to enforce documentation location and naming rules.

Checks every Markdown file tracked by git in the current directory:
- Outside docs/, only README.md (any depth) and the root files
  CONTRIBUTING.md, CODE_OF_CONDUCT.md and LICENSE.md are allowed
- Inside docs/, file names must be kebab-case (README.md is exempt)
- templates/, node_modules/ and dot-prefixed paths are ignored

Exit codes:
- 0: no violations
- 1: violations found, or git could not list the tracked files

Run with: python -m scripts.check_docs
"""

from __future__ import annotations

from pathlib import Path

from docs_lint._console import log_error, log_hint, log_success, log_summary, log_violation
from docs_lint.guards import DEFAULT_CONFIG, DocsRulesConfig
from docs_lint.guards.doc_rules import check, summarize
from docs_lint.guards.util import TrackedFilesError, tracked_markdown_files


def run_docs_check(root: Path, config: DocsRulesConfig = DEFAULT_CONFIG) -> int:
    """Run the documentation checks on the repository at root and return exit code."""
    try:
        md_files = tracked_markdown_files(root)
    except TrackedFilesError as exc:
        log_error(f"Error listing git files: {exc}")
        return 1

    violations = check(md_files, config)

    log_summary(summarize(violations))

    if violations:
        log_error("Documentation rules violations detected:")
        for v in violations:
            log_violation(v.message)
        log_hint(f"Please refer to {config.docs_dir}/{config.rules_doc} for the rules.")
        return 1

    log_success("Documentation rules check passed.")
    return 0


def main() -> int:
    """Entry point for the documentation check script."""
    return run_docs_check(Path.cwd())


if __name__ == "__main__":
    raise SystemExit(main())
