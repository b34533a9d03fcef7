# -----------------------------------------------------------------------------
# groupcommit - Dual Licensed Software
# Copyright (c) 2025 Adem Can
#
# This file is part of groupcommit.
#
# groupcommit is available under a dual-license:
#   1. AGPLv3 (Affero General Public License v3)
#      - See LICENSE.txt and LICENSE-AGPL.txt
#      - Online: https://www.gnu.org/licenses/agpl-3.0.html
#
#   2. Commercial License
#      - For proprietary or revenue-generating use,
#        including SaaS, embedding in closed-source software,
#        or avoiding AGPL obligations.
#      - See LICENSE.txt and COMMERCIAL-LICENSE.txt
#      - Contact: ademfcan@gmail.com
#
# By using this file, you agree to the terms of one of the two licenses above.
# -----------------------------------------------------------------------------


from typing import Literal

CommitType = Literal["feat", "fix", "refactor", "chore", "docs", "style", "test", "perf"]

TEST_PATTERNS = (".test.", ".spec.", "__tests__", "/tests/", "/test/")
DOC_PATTERNS = ("readme", ".md", "documentation", "/docs/")
CHORE_PATTERNS = (
    "package.json",
    "package-lock.json",
    "yarn.lock",
    "bun.lock",
    ".gitignore",
    "tsconfig",
    "webpack",
    "vite.config",
    ".eslint",
    ".prettier",
)
STYLE_KEYWORDS = ("formatting", "whitespace", "indent", "prettier", "eslint")
CODE_KEYWORDS = ("function", "class", "const", "import")
PERF_KEYWORDS = (
    "performance",
    "optimize",
    "cache",
    "memoize",
    "debounce",
    "throttle",
    "lazy",
    "async",
    "usememo",
    "usecallback",
)
FIX_KEYWORDS = (
    "fix",
    "bug",
    "issue",
    "error",
    "crash",
    "problem",
    "resolve",
    "correct",
    "patch",
    "hotfix",
)
FEAT_KEYWORDS = ("add", "create", "implement", "feature", "new")
NEW_DEFINITION_MARKERS = ("+function", "+export", "+const", "+class")


class CommitTypeAnalyzer:
    """
    Guesses a Conventional Commit type from a diff and its file list.

    Rules are checked in order (test, docs, chore, style, perf, fix, feat);
    the first hit wins and "refactor" is the fallback.
    """

    def analyze(self, diff: str, files: list[str]) -> CommitType:
        lower_diff = diff.lower()
        paths = [f.lower() for f in files]

        if self._is_test(paths, lower_diff):
            return "test"
        if self._is_docs(paths):
            return "docs"
        if self._is_chore(paths):
            return "chore"
        if self._is_style(lower_diff):
            return "style"
        if _contains_any(lower_diff, PERF_KEYWORDS):
            return "perf"
        if _contains_any(lower_diff, FIX_KEYWORDS):
            return "fix"
        if self._is_feat(diff, lower_diff):
            return "feat"

        return "refactor"

    def _is_test(self, paths: list[str], diff: str) -> bool:
        return any(_contains_any(p, TEST_PATTERNS) for p in paths) or _contains_any(
            diff, ("test(", "describe(", "it(")
        )

    def _is_docs(self, paths: list[str]) -> bool:
        return any(_contains_any(p, DOC_PATTERNS) for p in paths)

    def _is_chore(self, paths: list[str]) -> bool:
        return any(_contains_any(p, CHORE_PATTERNS) for p in paths)

    def _is_style(self, diff: str) -> bool:
        return _contains_any(diff, STYLE_KEYWORDS) and not _contains_any(diff, CODE_KEYWORDS)

    def _is_feat(self, diff: str, lower_diff: str) -> bool:
        if "new file mode" in diff:
            return True
        return _contains_any(lower_diff, NEW_DEFINITION_MARKERS) and _contains_any(
            lower_diff, FEAT_KEYWORDS
        )


def _contains_any(text: str, needles: tuple[str, ...]) -> bool:
    return any(n in text for n in needles)
