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
CommitMessageGenerator

This interface is responsible for writing the commit message of one file group.

Responsibilities:
- Take the group's diff, its file paths and its scope label
- Return the full commit message text (subject line, optional body)

Notes:
- The scope produced by the grouper should appear in the subject line
- Implementations must always return a usable message, falling back to
  heuristics rather than failing the commit run
"""

from abc import ABC, abstractmethod
from typing import Literal

CommitStyle = Literal["conventional", "emoji"]


class CommitMessageGenerator(ABC):
    @abstractmethod
    def generate(self, diff: str, files: list[str], scope: str) -> str:
        """Return the commit message for a group"""
