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

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from loguru import logger

from .heuristic_generator import HeuristicMessageGenerator
from .interface import CommitMessageGenerator, CommitStyle
from .prompts import SYSTEM_PROMPT, PromptStyle, build_prompt

_CODE_FENCE = re.compile(r"^```[^\n]*\n(.*?)\n?```$", re.DOTALL)


def clean_model_output(text: str) -> str:
    """Strip surrounding whitespace and a wrapping Markdown code fence."""
    text = text.strip()
    match = _CODE_FENCE.match(text)
    if match:
        text = match.group(1).strip()
    return text


class LangChainMessageGenerator(CommitMessageGenerator):
    """
    Asks a LangChain chat model for the commit message.

    Any model failure or empty answer falls back to the heuristic message, so
    a commit run never stops because the model is unavailable.
    """

    def __init__(
        self,
        chat_model: BaseChatModel,
        prompt_style: PromptStyle = "default",
        custom_prompt: str | None = None,
        commit_style: CommitStyle = "conventional",
    ):
        self.chat_model = chat_model
        self.prompt_style = prompt_style
        self.custom_prompt = custom_prompt
        self.fallback = HeuristicMessageGenerator(commit_style)

    def generate(self, diff: str, files: list[str], scope: str) -> str:
        prompt = build_prompt(diff, scope, self.prompt_style, self.custom_prompt)
        messages = [SystemMessage(content=SYSTEM_PROMPT), HumanMessage(content=prompt)]

        try:
            response = self.chat_model.invoke(messages)
        except Exception as e:
            logger.warning(
                f"Commit message generation failed, using heuristic message: {e}"
            )
            return self.fallback.generate(diff, files, scope)

        content = response.content if isinstance(response.content, str) else ""
        message = clean_model_output(content)

        if not message:
            logger.debug(f"Model returned an empty message for scope {scope}")
            return self.fallback.generate(diff, files, scope)

        return self.fallback.apply_style(message)
