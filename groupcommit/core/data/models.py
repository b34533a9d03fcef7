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


from dataclasses import dataclass, field
from enum import Enum


class ChangeStatus(str, Enum):
    STAGED = "staged"
    MODIFIED = "modified"
    NEW = "new"
    DELETED = "deleted"


@dataclass(frozen=True)
class FileChange:
    """A single changed path as reported by git, relative to the repository root."""

    path: str
    status: ChangeStatus


@dataclass(frozen=True)
class ProjectBoundary:
    """
    A sub-project root discovered inside the repository.

    path is relative to the scan root and "/" separated; it is never the root itself.
    """

    path: str
    manifest_file: str


@dataclass
class FileGroup:
    """
    A collection of FileChanges that are committed together under one scope.
    """

    scope: str
    files: list[FileChange] = field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.files]
