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

from .commands.git_commands import GitCommands
from .exceptions import not_git_repository, ValidationError
from .filter.pattern_filter import PatternFilter


def validate_repo_path(repo_path: Path) -> Path:
    if not repo_path.exists() or not repo_path.is_dir():
        raise ValidationError(
            f"Path not found: {repo_path}",
            "Please check that the path exists and is accessible",
        )
    return repo_path


def validate_git_repository(commands: GitCommands) -> None:
    validate_repo_path(commands.git.repo_path)
    if not commands.is_git_repo():
        raise not_git_repository(str(commands.git.repo_path))


def validate_ignore_patterns(ignore: str | None) -> tuple[str, ...]:
    return tuple(PatternFilter.parse_patterns(ignore))
