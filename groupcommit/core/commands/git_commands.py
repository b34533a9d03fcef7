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

from loguru import logger

from ..data.models import ChangeStatus, FileChange
from ..exceptions import GitError
from ..git_interface.interface import GitInterface

NEW_FILE_DIFF_HEADER = """diff --git a/{path} b/{path}
new file mode 100644
index 0000000..0000000
--- /dev/null
+++ b/{path}
"""


class GitCommands:
    def __init__(self, git: GitInterface):
        self.git = git
        self._repo_root: Path | None = None

    # -------------------------------
    # Repository state
    # -------------------------------

    def is_git_repo(self) -> bool:
        out = self.git.run_git_text_out(["rev-parse", "--is-inside-work-tree"])
        return out is not None and out.strip() == "true"

    def get_repo_root(self) -> Path:
        """Absolute path of the working tree root, all change paths are relative to it."""
        if self._repo_root is not None:
            return self._repo_root

        out = self.git.run_git_text_out(["rev-parse", "--show-toplevel"])
        if not out or not out.strip():
            raise GitError(
                "Could not determine repository root",
                f"git rev-parse --show-toplevel failed in {self.git.repo_path}",
            )
        self._repo_root = Path(out.strip())
        return self._repo_root

    def get_current_branch(self) -> str:
        out = self.git.run_git_text_out(["rev-parse", "--abbrev-ref", "HEAD"])
        branch = out.strip() if out else ""
        return branch or "main"

    def has_remote(self) -> bool:
        out = self.git.run_git_text_out(["remote"])
        return bool(out and out.strip())

    # -------------------------------
    # Change listing
    # -------------------------------

    def _status_entries(self) -> list[tuple[str, str]]:
        """
        Parse 'git status --porcelain=v1 -z' into (XY, path) pairs.

        Rename detection is off, so a staged move shows up as a deletion of the
        old path and an addition of the new one, each grouped on its own. The
        source token of a rename or copy entry is still skipped in case a
        config forces detection back on.
        """
        out = self.git.run_git_text_out(
            ["status", "--porcelain=v1", "-z", "--no-renames", "--untracked-files=all"]
        )
        if out is None:
            raise GitError("Failed to read repository status")

        tokens = out.split("\0")
        entries: list[tuple[str, str]] = []
        i = 0
        while i < len(tokens):
            token = tokens[i]
            i += 1
            if len(token) < 4:
                continue

            xy, path = token[:2], token[3:]
            if xy[0] in "RC":
                i += 1
            entries.append((xy, path))

        return entries

    def get_staged_changes(self) -> list[FileChange]:
        return [
            FileChange(path, ChangeStatus.STAGED)
            for xy, path in self._status_entries()
            if xy[0] not in " ?!"
        ]

    def get_unstaged_changes(self) -> list[FileChange]:
        modified: list[FileChange] = []
        new: list[FileChange] = []
        deleted: list[FileChange] = []

        for xy, path in self._status_entries():
            if xy == "??":
                new.append(FileChange(path, ChangeStatus.NEW))
            elif xy[1] in "MT":
                modified.append(FileChange(path, ChangeStatus.MODIFIED))
            elif xy[1] == "D":
                deleted.append(FileChange(path, ChangeStatus.DELETED))

        return modified + new + deleted

    def get_untracked_files(self) -> set[str]:
        return {path for xy, path in self._status_entries() if xy == "??"}

    # -------------------------------
    # Diffs
    # -------------------------------

    def get_diff(self, paths: list[str], staged: bool = False) -> str:
        """
        Concatenated diff of the given paths.

        Untracked files have no git diff in the working tree, so for unstaged
        diffs their contents are rendered as a new-file diff instead.
        """
        if not paths:
            return ""

        untracked = set() if staged else self.get_untracked_files()
        diffs: list[str] = []

        for path in paths:
            if path in untracked:
                diff = self._new_file_diff(path)
            else:
                args = ["diff", "--cached", "--", path] if staged else ["diff", "--", path]
                diff = self.git.run_git_text_out(args) or ""

            if diff:
                diffs.append(diff)

        return "\n".join(diffs)

    def _new_file_diff(self, path: str) -> str:
        full_path = self.get_repo_root() / path
        try:
            content = full_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Could not read new file {path}: {e}")
            return ""

        diff_lines = "\n".join(f"+{line}" for line in content.split("\n"))
        return NEW_FILE_DIFF_HEADER.format(path=path) + diff_lines

    # -------------------------------
    # Index and history
    # -------------------------------

    def stage_files(self, paths: list[str]) -> None:
        if not paths:
            return
        # -A so deletions are staged too
        if self.git.run_git_text(["add", "-A", "--", *paths]) is None:
            raise GitError(f"Failed to stage {len(paths)} file(s)")

    def get_staged_patch(self, paths: list[str] | None = None) -> bytes:
        """
        Index-vs-HEAD patch for the given paths (everything when None), in a
        form apply_to_index can replay after the index has been reset.
        """
        args = ["diff", "--cached", "--binary", "--no-renames", "--"]
        if paths is not None:
            if not paths:
                return b""
            args.extend(paths)

        out = self.git.run_git_binary_out(args)
        if out is None:
            raise GitError("Failed to read the staged changes")
        return out

    def apply_to_index(self, patch: bytes) -> None:
        """Stage exactly the given patch, leaving the working tree alone."""
        if not patch:
            return
        if self.git.run_git_binary(["apply", "--cached", "-"], input_bytes=patch) is None:
            raise GitError(
                "Failed to restore staged changes",
                "The working tree is untouched; re-stage the files and try again",
            )

    def unstage_files(self, paths: list[str]) -> None:
        if not paths:
            return
        if self.git.run_git_text(["reset", "-q", "--", *paths]) is None:
            raise GitError(f"Failed to unstage {len(paths)} file(s)")

    def commit(self, message: str) -> None:
        # message on stdin keeps multi-line bodies intact
        if self.git.run_git_text(["commit", "-F", "-"], input_text=message) is None:
            raise GitError("git commit failed", "Check the log file for git's output")

    def push(self) -> None:
        branch = self.get_current_branch()
        if self.git.run_git_text(["push", "origin", branch]) is None:
            raise GitError(f"Failed to push branch {branch}")
