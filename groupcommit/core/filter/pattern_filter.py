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


from collections.abc import Iterable
from fnmatch import fnmatchcase

from loguru import logger

from ..data.models import FileChange


def expand_globstar(pattern: str) -> list[str]:
    """
    fnmatch variants of a glob in which every "**/" may also match no
    directory at all, so "**/*.lock" covers a top level "yarn.lock".
    """
    head, sep, tail = pattern.partition("**/")
    if not sep:
        return [pattern]
    return [head + prefix + rest for rest in expand_globstar(tail) for prefix in ("**/", "")]


class PatternFilter:
    """Drops changed files whose path matches one of the ignore globs."""

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns = list(patterns)
        self._globs = [glob for pattern in self.patterns for glob in expand_globstar(pattern)]

    @staticmethod
    def parse_patterns(patterns_string: str | None) -> list[str]:
        """Split a comma separated pattern list, dropping blanks."""
        if not patterns_string or not patterns_string.strip():
            return []

        return [p.strip() for p in patterns_string.split(",") if p.strip()]

    def should_ignore(self, file_path: str) -> bool:
        return any(fnmatchcase(file_path, glob) for glob in self._globs)

    def filter_files(self, files: list[FileChange]) -> list[FileChange]:
        if not self.patterns:
            return files

        kept = [f for f in files if not self.should_ignore(f.path)]
        if len(kept) != len(files):
            logger.debug(
                "Ignore patterns removed {count} file(s): patterns={patterns}",
                count=len(files) - len(kept),
                patterns=self.patterns,
            )
        return kept
