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


from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field

from groupcommit.core.commands.git_commands import GitCommands
from groupcommit.core.git_interface.subprocess_git_interface import (
    SubprocessGitInterface,
)
from groupcommit.core.llm import try_create_model
from groupcommit.core.message import (
    CommitMessageGenerator,
    HeuristicMessageGenerator,
    LangChainMessageGenerator,
)


@dataclass
class GlobalConfig:
    """Settings shared by every command, merged from CLI options, files and env."""

    model: str | None = None
    api_key: str | None = None
    temperature: Annotated[float, Field(ge=0.0, le=1.0)] = 0.7
    prompt_style: Literal["default", "detailed", "minimal", "custom"] = "default"
    custom_prompt: str | None = None
    commit_style: Literal["conventional", "emoji"] = "conventional"
    push: bool = True
    verbose: bool = False
    silent: bool = False
    auto_accept: bool = False


def build_message_generator(config: GlobalConfig) -> CommitMessageGenerator:
    chat_model = try_create_model(config.model, config.api_key, config.temperature)
    if chat_model is None:
        return HeuristicMessageGenerator(config.commit_style)

    return LangChainMessageGenerator(
        chat_model,
        prompt_style=config.prompt_style,
        custom_prompt=config.custom_prompt,
        commit_style=config.commit_style,
    )


@dataclass(frozen=True)
class GlobalContext:
    repo_path: Path
    git_commands: GitCommands
    message_generator: CommitMessageGenerator
    push: bool
    auto_accept: bool

    @classmethod
    def from_global_config(cls, config: GlobalConfig, repo_path: Path) -> "GlobalContext":
        return cls(
            repo_path=repo_path,
            git_commands=GitCommands(SubprocessGitInterface(repo_path)),
            message_generator=build_message_generator(config),
            push=config.push,
            auto_accept=config.auto_accept,
        )


@dataclass(frozen=True)
class CommitContext:
    """Options of a single commit or plan run."""

    all_changes: bool = False
    ignore_patterns: tuple[str, ...] = ()
    push: bool = True
    dry_run: bool = False
