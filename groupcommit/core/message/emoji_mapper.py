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


import re

from .commit_type_analyzer import CommitType

EMOJI_MAP: dict[str, str] = {
    "feat": "✨",
    "fix": "🐛",
    "refactor": "♻️",
    "chore": "🔧",
    "docs": "📝",
    "style": "💄",
    "test": "✅",
    "perf": "⚡",
}


class EmojiMapper:
    def get_emoji(self, commit_type: CommitType) -> str:
        return EMOJI_MAP[commit_type]

    def replace_type_with_emoji(self, commit_message: str) -> str:
        """Swap a leading commit type (any case) for its emoji; other messages are returned unchanged."""
        for commit_type, emoji in EMOJI_MAP.items():
            pattern = re.compile(f"^{commit_type}", re.IGNORECASE)
            if pattern.match(commit_message):
                return pattern.sub(emoji, commit_message, count=1)
        return commit_message
