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


import subprocess
from pathlib import Path

from loguru import logger

from ..exceptions import git_not_found
from .interface import GitInterface

LOGGED_OUTPUT_LIMIT = 2000


def _clip(text: str) -> str:
    if len(text) <= LOGGED_OUTPUT_LIMIT:
        return text
    return f"{text[:LOGGED_OUTPUT_LIMIT]}... ({len(text)} chars)"


class SubprocessGitInterface(GitInterface):
    """GitInterface backed by the git executable on PATH."""

    def __init__(self, repo_path: str | Path = ".") -> None:
        self.repo_path = Path(repo_path)

    def _run(self, args: list[str], cwd: str | Path | None, **kwargs):
        workdir = Path(cwd) if cwd is not None else self.repo_path
        try:
            result = subprocess.run(
                ["git", *args], cwd=workdir, capture_output=True, **kwargs
            )
        except FileNotFoundError as e:
            raise git_not_found() from e

        if result.returncode != 0:
            stderr = result.stderr
            if isinstance(stderr, bytes):
                stderr = stderr.decode("utf-8", errors="replace")
            logger.warning(
                "git {args} exited with {code}: {stderr}",
                args=" ".join(args),
                code=result.returncode,
                stderr=_clip(stderr.strip()),
            )
            return None
        return result

    def run_git_text(
        self,
        args: list[str],
        input_text: str | None = None,
        cwd: str | Path | None = None,
    ) -> subprocess.CompletedProcess[str] | None:
        result = self._run(
            args,
            cwd,
            input=input_text,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        if result is not None:
            logger.trace(
                "git {args}: {out}", args=" ".join(args), out=_clip(result.stdout)
            )
        return result

    def run_git_binary(
        self,
        args: list[str],
        input_bytes: bytes | None = None,
        cwd: str | Path | None = None,
    ) -> subprocess.CompletedProcess[bytes] | None:
        result = self._run(args, cwd, input=input_bytes)
        if result is not None:
            logger.trace(
                "git {args}: {size} bytes", args=" ".join(args), size=len(result.stdout)
            )
        return result
