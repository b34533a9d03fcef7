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
from rich.markup import escape

from groupcommit.context import CommitContext, GlobalContext
from groupcommit.core.boundary.project_detector import ProjectDetector
from groupcommit.core.commands.git_commands import GitCommands
from groupcommit.core.data.models import FileChange, FileGroup
from groupcommit.core.exceptions import GitError, no_staged_changes
from groupcommit.core.filter.pattern_filter import PatternFilter
from groupcommit.core.grouper.change_grouper import ChangeGrouper
from groupcommit.core.logging.utils import describe_group, log_groups, time_block
from groupcommit.core.message.interface import CommitMessageGenerator


class CommitPipeline:
    """
    Splits the current changes into scope groups and commits each one.

    Staged mode (default) works on what is in the index; --all mode works on
    every unstaged change that survives the ignore patterns. In both modes the
    index is cleared first so each commit contains exactly one group.

    Staged mode replays each group's saved index patch instead of re-adding
    the files, so edits left out of the index stay out of the commit, and
    groups that are not committed end up staged again.
    """

    def __init__(
        self,
        git_commands: GitCommands,
        message_generator: CommitMessageGenerator,
        commit_ctx: CommitContext,
        auto_accept: bool = False,
        detector: ProjectDetector | None = None,
    ):
        self.git_commands = git_commands
        self.message_generator = message_generator
        self.commit_ctx = commit_ctx
        self.auto_accept = auto_accept
        self.detector = detector if detector is not None else ProjectDetector()
        self.pattern_filter = PatternFilter(commit_ctx.ignore_patterns)

    @property
    def staged_mode(self) -> bool:
        return not self.commit_ctx.all_changes

    def run(self) -> int:
        """Returns the number of commits created (always 0 for a dry run)."""
        changes = self.collect_changes()
        if not changes:
            return 0

        groups = self.build_groups(changes)
        kind = "staged" if self.staged_mode else "unstaged"
        logger.info(f"[blue]Found {len(groups)} group(s) of {kind} changes:[/blue]")

        if self.commit_ctx.dry_run:
            self._preview_groups(groups)
            return 0

        committed = self._commit_groups(groups)

        if committed and self.commit_ctx.push:
            self.push_changes()

        return committed

    # -------------------------------
    # Collection and grouping
    # -------------------------------

    def collect_changes(self) -> list[FileChange]:
        staged = self.git_commands.get_staged_changes()

        if self.staged_mode:
            if not staged:
                raise no_staged_changes()
            logger.info("[yellow]Found staged changes. Grouping and processing them...[/yellow]")
            return staged

        saved_index = b""
        if staged:
            logger.info(
                "[yellow]Staged changes are processed together with unstaged changes due to --all[/yellow]"
            )
            if not self.commit_ctx.dry_run:
                saved_index = self.git_commands.get_staged_patch()
                self.git_commands.unstage_files([c.path for c in staged])

        unstaged = self.git_commands.get_unstaged_changes()
        filtered = self.pattern_filter.filter_files(unstaged)
        if filtered:
            return filtered

        if unstaged:
            logger.info("[yellow]All files were filtered out by ignore patterns.[/yellow]")
        else:
            logger.info("[yellow]No unstaged changes found.[/yellow]")
        # nothing will be committed, give the index back
        self.git_commands.apply_to_index(saved_index)
        return []

    def build_groups(self, changes: list[FileChange]) -> list[FileGroup]:
        with time_block("Project detection"):
            boundaries = self.detector.detect(self.git_commands.get_repo_root())

        groups = ChangeGrouper(boundaries).group(changes)
        log_groups("Grouping", groups)
        return groups

    # -------------------------------
    # Per group processing
    # -------------------------------

    def _announce(self, idx: int, total: int, group: FileGroup) -> None:
        logger.info(f"\n[cyan][{idx}/{total}] {escape(group.scope)}[/cyan]")
        logger.info("Files: {files}", files=escape(describe_group(group)))

    def _preview_groups(self, groups: list[FileGroup]) -> None:
        for idx, group in enumerate(groups, start=1):
            self._announce(idx, len(groups), group)

            diff = self.git_commands.get_diff(group.paths, staged=self.staged_mode)
            if not diff:
                logger.info("[yellow]  No diff found for this group.[/yellow]")
                continue

            message = self.message_generator.generate(diff, group.paths, group.scope)
            logger.info("  Commit message:")
            logger.info("  " + escape(message).replace("\n", "\n  "))

    def _detach_staged(self, groups: list[FileGroup]) -> list[bytes]:
        """Save each group's staged patch, then clear the index."""
        patches = [self.git_commands.get_staged_patch(group.paths) for group in groups]
        self.git_commands.unstage_files([path for group in groups for path in group.paths])
        return patches

    def _restage(self, groups: list[FileGroup], patches: list[bytes]) -> None:
        leftover = [(group, patch) for group, patch in zip(groups, patches) if patch]
        if not leftover:
            return
        self.git_commands.unstage_files([path for group, _ in leftover for path in group.paths])
        for _, patch in leftover:
            self.git_commands.apply_to_index(patch)

    def _commit_groups(self, groups: list[FileGroup]) -> int:
        patches = self._detach_staged(groups) if self.staged_mode else None
        committed = 0
        rejected: list[FileGroup] = []
        handled: set[int] = set()

        try:
            for idx, group in enumerate(groups, start=1):
                self._announce(idx, len(groups), group)
                paths = group.paths

                if patches is None:
                    self.git_commands.stage_files(paths)
                else:
                    self.git_commands.apply_to_index(patches[idx - 1])
                diff = self.git_commands.get_diff(paths, staged=True)

                if not diff:
                    logger.info("[yellow]  No diff found for this group. Skipping...[/yellow]")
                    self.git_commands.unstage_files(paths)
                    handled.add(idx)
                    continue

                logger.info("[cyan]  Generating commit message...[/cyan]")
                with time_block(f"Message generation for {group.scope}"):
                    message = self.message_generator.generate(diff, paths, group.scope)

                logger.info("  Commit message:")
                logger.info("  " + escape(message).replace("\n", "\n  "))

                if not self.auto_accept and not typer.confirm("Commit this group?", default=True):
                    self.git_commands.unstage_files(paths)
                    rejected.append(group)
                    continue

                self.git_commands.commit(message)
                handled.add(idx)
                committed += 1
                logger.info(f"[green]  ✓ Committed {len(paths)} file(s)[/green]")
        finally:
            if patches is not None:
                # rejected and unprocessed groups go back to the index as staged
                unhandled = [i for i in range(1, len(groups) + 1) if i not in handled]
                self._restage(
                    [groups[i - 1] for i in unhandled], [patches[i - 1] for i in unhandled]
                )

        if rejected:
            where = "staged" if self.staged_mode else "uncommitted"
            logger.info(
                f"Skipped {len(rejected)} group(s) due to user input, these changes stay {where}"
            )

        return committed

    def push_changes(self) -> None:
        if not self.git_commands.has_remote():
            logger.info("[yellow]No remote repository configured. Skipping push.[/yellow]")
            return

        logger.info("[blue]Pushing changes...[/blue]")
        try:
            self.git_commands.push()
        except GitError as e:
            logger.warning(
                f"[yellow]Failed to push changes. You may need to push manually.[/yellow] Reason: {e.message}"
            )
            return

        logger.info("[green]✓ Changes pushed successfully[/green]")


def create_commit_pipeline(
    global_ctx: GlobalContext, commit_ctx: CommitContext
) -> CommitPipeline:
    return CommitPipeline(
        global_ctx.git_commands,
        global_ctx.message_generator,
        commit_ctx,
        auto_accept=global_ctx.auto_accept,
    )
