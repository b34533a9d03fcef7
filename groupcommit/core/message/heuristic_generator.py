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


from .commit_type_analyzer import CommitTypeAnalyzer
from .emoji_mapper import EmojiMapper
from .interface import CommitMessageGenerator, CommitStyle


class HeuristicMessageGenerator(CommitMessageGenerator):
    """Offline generator: "<type>(<scope>): update files" with the type guessed from the diff."""

    def __init__(self, commit_style: CommitStyle = "conventional"):
        self.commit_style = commit_style
        self.type_analyzer = CommitTypeAnalyzer()
        self.emoji_mapper = EmojiMapper()

    def generate(self, diff: str, files: list[str], scope: str) -> str:
        commit_type = self.type_analyzer.analyze(diff, files)
        return self.apply_style(f"{commit_type}({scope}): update files")

    def apply_style(self, message: str) -> str:
        if self.commit_style == "emoji":
            return self.emoji_mapper.replace_type_with_emoji(message)
        return message
