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


from .commit_type_analyzer import CommitType, CommitTypeAnalyzer
from .emoji_mapper import EmojiMapper
from .heuristic_generator import HeuristicMessageGenerator
from .interface import CommitMessageGenerator, CommitStyle
from .langchain_generator import LangChainMessageGenerator

__all__ = [
    "CommitMessageGenerator",
    "CommitStyle",
    "CommitType",
    "CommitTypeAnalyzer",
    "EmojiMapper",
    "HeuristicMessageGenerator",
    "LangChainMessageGenerator",
]
