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


from abc import ABC, abstractmethod
from pathlib import Path
from subprocess import CompletedProcess


class GitInterface(ABC):
    """
    Runs git inside one repository.

    A failing command yields None instead of raising; callers decide whether
    that is fatal (see GitCommands).
    """

    repo_path: Path

    @abstractmethod
    def run_git_text(
        self,
        args: list[str],
        input_text: str | None = None,
        cwd: str | Path | None = None,
    ) -> CompletedProcess[str] | None: ...

    def run_git_text_out(
        self,
        args: list[str],
        input_text: str | None = None,
        cwd: str | Path | None = None,
    ) -> str | None:
        """stdout of the command, or None if it failed."""
        result = self.run_git_text(args, input_text, cwd)
        return None if result is None else result.stdout

    @abstractmethod
    def run_git_binary(
        self,
        args: list[str],
        input_bytes: bytes | None = None,
        cwd: str | Path | None = None,
    ) -> CompletedProcess[bytes] | None: ...

    def run_git_binary_out(
        self,
        args: list[str],
        input_bytes: bytes | None = None,
        cwd: str | Path | None = None,
    ) -> bytes | None:
        """Raw stdout, for patches that must round-trip byte for byte."""
        result = self.run_git_binary(args, input_bytes, cwd)
        return None if result is None else result.stdout
