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


import typer
from loguru import logger

from groupcommit.context import CommitContext, GlobalContext
from groupcommit.core.exceptions import handle_groupcommit_exception
from groupcommit.core.logging.utils import time_block
from groupcommit.core.validation import (
    validate_git_repository,
    validate_ignore_patterns,
)
from groupcommit.pipelines.commit_pipeline import create_commit_pipeline


@handle_groupcommit_exception
def main(
    ctx: typer.Context,
    all_changes: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Group every unstaged change instead of only the staged ones.",
    ),
    ignore: str | None = typer.Option(
        None,
        "--ignore",
        "-i",
        help="Comma separated globs of files to leave out (with --all).",
    ),
    push: bool | None = typer.Option(
        None,
        "--push/--no-push",
        help="Push once all groups are committed (default: the 'push' setting).",
    ),
) -> None:
    """
    Commit changes as one commit per project scope.

    Examples:
        # One commit per scope for what is staged
        gcm commit

        # Everything except lock files and build output, without pushing
        gcm commit --all --ignore "*.lock,dist/*" --no-push
    """
    global_ctx: GlobalContext = ctx.obj
    validate_git_repository(global_ctx.git_commands)

    commit_ctx = CommitContext(
        all_changes=all_changes,
        ignore_patterns=validate_ignore_patterns(ignore),
        push=global_ctx.push if push is None else push,
    )

    with time_block("commit command"):
        committed = create_commit_pipeline(global_ctx, commit_ctx).run()

    if committed:
        logger.info(f"\n[green]Done, created {committed} commit(s).[/green]")
    else:
        logger.info("[yellow]No commits were created[/yellow]")
