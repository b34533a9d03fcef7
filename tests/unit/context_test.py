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


from pathlib import Path
from unittest.mock import Mock, patch

from groupcommit.context import CommitContext, GlobalConfig, GlobalContext
from groupcommit.core.message import (
    HeuristicMessageGenerator,
    LangChainMessageGenerator,
)

# -----------------------------------------------------------------------------
# GlobalConfig Tests
# -----------------------------------------------------------------------------


def test_global_config_defaults():
    """Test that GlobalConfig has expected default values."""
    config = GlobalConfig()
    assert config.model is None
    assert config.api_key is None
    assert config.temperature == 0.7
    assert config.prompt_style == "default"
    assert config.commit_style == "conventional"
    assert config.push is True
    assert config.verbose is False
    assert config.silent is False
    assert config.auto_accept is False


# -----------------------------------------------------------------------------
# GlobalContext Tests
# -----------------------------------------------------------------------------


@patch("groupcommit.context.SubprocessGitInterface")
@patch("groupcommit.context.GitCommands")
def test_global_context_without_model(mock_git_commands, mock_git_interface):
    """Without a model the heuristic generator is used."""
    mock_interface_instance = Mock()
    mock_git_interface.return_value = mock_interface_instance

    config = GlobalConfig(commit_style="emoji", push=False, auto_accept=True)
    repo_path = Path("/tmp/repo")
    context = GlobalContext.from_global_config(config, repo_path)

    assert context.repo_path == repo_path
    assert context.git_commands == mock_git_commands.return_value
    assert isinstance(context.message_generator, HeuristicMessageGenerator)
    assert context.message_generator.commit_style == "emoji"
    assert context.push is False
    assert context.auto_accept is True

    mock_git_interface.assert_called_once_with(repo_path)
    mock_git_commands.assert_called_once_with(mock_interface_instance)


@patch("groupcommit.context.try_create_model")
@patch("groupcommit.context.SubprocessGitInterface")
def test_global_context_with_model(mock_git_interface, mock_try_create_model):
    """A configured model is wrapped in the LangChain generator."""
    chat_model = Mock()
    mock_try_create_model.return_value = chat_model

    config = GlobalConfig(model="openai:gpt-4o-mini", api_key="sk-test", temperature=0.2)
    context = GlobalContext.from_global_config(config, Path("."))

    mock_try_create_model.assert_called_once_with("openai:gpt-4o-mini", "sk-test", 0.2)
    assert isinstance(context.message_generator, LangChainMessageGenerator)
    assert context.message_generator.chat_model is chat_model


# -----------------------------------------------------------------------------
# CommitContext Tests
# -----------------------------------------------------------------------------


def test_commit_context_defaults():
    ctx = CommitContext()

    assert ctx.all_changes is False
    assert ctx.ignore_patterns == ()
    assert ctx.push is True
    assert ctx.dry_run is False
