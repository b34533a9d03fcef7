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


import shutil
import subprocess
from pathlib import Path

import pytest


class GitRepo:
    """Throwaway repository driven through the git executable."""

    def __init__(self, path: Path):
        self.path = path

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", *args],
            cwd=self.path,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    def apply_changes(self, files: dict[str, str | None]) -> None:
        """Write each file, or delete it when its content is None."""
        for rel, content in files.items():
            target = self.path / rel
            if content is None:
                target.unlink()
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")

    def stage(self, *paths: str) -> None:
        self.git("add", "--", *paths)

    def stage_all(self) -> None:
        self.git("add", "-A")

    def commit(self, message: str) -> None:
        self.git("commit", "-q", "-m", message)

    def show(self, rev: str, path: str) -> str:
        return self.git("show", f"{rev}:{path}")

    def commit_files(self, rev: str) -> list[str]:
        """'<status>\\t<path>' lines of one commit, renames split in two."""
        out = self.git("show", "--no-renames", "--name-status", "--format=", rev)
        return sorted(line for line in out.splitlines() if line.strip())

    def new_commits(self, since: str) -> list[str]:
        return self.git("rev-list", "--reverse", f"{since}..HEAD").split()

    def head(self) -> str:
        return self.git("rev-parse", "HEAD").strip()


@pytest.fixture
def repo_factory(tmp_path):
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    def make(name: str) -> GitRepo:
        path = tmp_path / name
        path.mkdir()
        repo = GitRepo(path)
        repo.git("init", "-q")
        repo.git("config", "user.name", "Test User")
        repo.git("config", "user.email", "test@example.com")
        repo.git("config", "commit.gpgsign", "false")
        repo.git("config", "core.autocrlf", "false")
        return repo

    return make
