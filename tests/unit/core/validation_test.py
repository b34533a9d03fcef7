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
from unittest.mock import Mock

import pytest

from groupcommit.core.commands.git_commands import GitCommands
from groupcommit.core.exceptions import GitError, ValidationError
from groupcommit.core.validation import (
    validate_git_repository,
    validate_ignore_patterns,
    validate_repo_path,
)


def test_validate_repo_path(tmp_path):
    assert validate_repo_path(tmp_path) == tmp_path

    with pytest.raises(ValidationError):
        validate_repo_path(tmp_path / "missing")


def test_validate_git_repository(tmp_path):
    commands = Mock(spec=GitCommands)
    commands.git = Mock()
    commands.git.repo_path = Path(tmp_path)

    commands.is_git_repo.return_value = True
    validate_git_repository(commands)

    commands.is_git_repo.return_value = False
    with pytest.raises(GitError):
        validate_git_repository(commands)


def test_validate_ignore_patterns():
    assert validate_ignore_patterns(None) == ()
    assert validate_ignore_patterns("*.lock, dist/*") == ("*.lock", "dist/*")
