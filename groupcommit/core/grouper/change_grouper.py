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


"""
ChangeGrouper

Turns a flat list of changed files into scope-labelled groups, each intended
to become one commit.

Two stages:
- group_by_path: one bucket per literal scope, in first-seen order
- optimize_groups: buckets merged by normalized scope, sorted with "root" last

Every input FileChange ends up in exactly one output group.
"""

from collections.abc import Iterable

from loguru import logger

from ..data.models import FileChange, FileGroup, ProjectBoundary
from .scope_extractor import ROOT_SCOPE, ScopeExtractor


class ChangeGrouper:
    def __init__(
        self,
        boundaries: Iterable[ProjectBoundary] = (),
        extractor: ScopeExtractor | None = None,
    ):
        self.extractor = extractor if extractor is not None else ScopeExtractor(boundaries)

    def group(self, files: list[FileChange]) -> list[FileGroup]:
        raw_groups = self.group_by_path(files)
        optimized = self.optimize_groups(raw_groups)

        logger.debug(
            "Grouped changes: files={files} raw_groups={raw} groups={groups}",
            files=len(files),
            raw=len(raw_groups),
            groups=len(optimized),
        )
        return optimized

    def group_by_path(self, files: list[FileChange]) -> list[FileGroup]:
        buckets: dict[str, list[FileChange]] = {}

        for file in files:
            scope = self.extractor.extract_scope(file.path)
            buckets.setdefault(scope, []).append(file)

        return [FileGroup(scope, group_files) for scope, group_files in buckets.items()]

    def optimize_groups(self, groups: list[FileGroup]) -> list[FileGroup]:
        buckets: dict[str, list[FileChange]] = {}

        for group in groups:
            scope = self.extractor.normalize_scope(group.scope)
            buckets.setdefault(scope, []).extend(group.files)

        optimized = [FileGroup(scope, group_files) for scope, group_files in buckets.items()]
        optimized.sort(key=_sort_key)
        return optimized


def _sort_key(group: FileGroup) -> tuple[bool, str]:
    return (group.scope == ROOT_SCOPE, group.scope)


def group_changes(
    changes: list[FileChange], boundaries: Iterable[ProjectBoundary]
) -> list[FileGroup]:
    """Group changes against previously detected boundaries."""
    return ChangeGrouper(boundaries).group(changes)
