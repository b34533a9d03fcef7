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


import tomllib

import pytest
from typer.testing import CliRunner

from groupcommit.cli import app
from groupcommit.commands import config as config_command
from groupcommit.core.logging import logging as groupcommit_logging

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Keep logs and config files inside the test directory."""
    monkeypatch.setattr(groupcommit_logging, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(
        config_command, "global_config_path", lambda: tmp_path / "global" / "cfg.toml"
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_help_lists_commands():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ("commit", "plan", "config"):
        assert command in result.output


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "groupcommit version" in result.output


def test_config_set_local(isolated):
    result = runner.invoke(app, ["config", "temperature", "0.3"])

    assert result.exit_code == 0
    with open(isolated / config_command.CONFIG_FILENAME, "rb") as f:
        assert tomllib.load(f) == {"temperature": 0.3}


def test_config_set_bool_and_string(isolated):
    runner.invoke(app, ["config", "push", "false"])
    runner.invoke(app, ["config", "custom_prompt", 'Say "hi" to {scope}'])

    with open(isolated / config_command.CONFIG_FILENAME, "rb") as f:
        data = tomllib.load(f)

    assert data == {"push": False, "custom_prompt": 'Say "hi" to {scope}'}


def test_config_set_global(isolated):
    result = runner.invoke(app, ["config", "commit_style", "emoji", "--scope", "global"])

    assert result.exit_code == 0
    with open(isolated / "global" / "cfg.toml", "rb") as f:
        assert tomllib.load(f) == {"commit_style": "emoji"}


def test_config_get_shows_source(isolated):
    (isolated / config_command.CONFIG_FILENAME).write_text('model = "openai:gpt-4o"\n')

    result = runner.invoke(app, ["config", "model"])

    assert result.exit_code == 0
    assert "openai:gpt-4o" in result.output
    assert "Local Config" in result.output


def test_config_get_default():
    result = runner.invoke(app, ["config", "commit_style"])

    assert result.exit_code == 0
    assert "conventional" in result.output
    assert "Default" in result.output


def test_config_unknown_key():
    result = runner.invoke(app, ["config", "colour"])

    assert result.exit_code == 1
    assert "Unknown configuration key" in result.output


def test_config_bad_scope():
    result = runner.invoke(app, ["config", "model", "--scope", "team"])

    assert result.exit_code == 1


def test_config_masks_api_key(isolated):
    result = runner.invoke(app, ["config", "api_key", "sk-1234567890abcdef"])

    assert result.exit_code == 0
    assert "sk-1234567890abcdef" not in result.output
    assert "sk-1...cdef" in result.output


@pytest.mark.parametrize("command", ["commit", "plan"])
def test_commands_outside_a_repository_fail_cleanly(isolated, command):
    not_a_repo = isolated / "plain"
    not_a_repo.mkdir()

    result = runner.invoke(app, ["--repo", str(not_a_repo), command])

    assert result.exit_code == 1
