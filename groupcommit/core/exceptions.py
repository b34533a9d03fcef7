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


"""
Errors raised outside the grouping core.

Scanning and grouping never fail; everything that talks to git, reads
configuration or calls a model reports problems with the exceptions below.
Each carries a one-line message for the user and optional details that
suggest a fix. At the CLI boundary handle_groupcommit_exception turns them
into a logged error and exit status 1.
"""

import functools

import typer
from loguru import logger
from rich.markup import escape


class groupcommitError(Exception):
    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class GitError(groupcommitError):
    """A git command failed or the repository is in an unusable state."""


class ValidationError(groupcommitError):
    """User input or repository state does not allow the requested command."""


class ConfigurationError(groupcommitError):
    """A setting is invalid, or a required one (such as an API key) is missing."""


class AIServiceError(groupcommitError):
    """A chat model could not be created."""


def git_not_found() -> GitError:
    return GitError(
        "Git is not installed or not in PATH",
        "Install git and make sure the git executable is on your PATH",
    )


def not_git_repository(path: str = ".") -> GitError:
    return GitError(
        f"Not a git repository: {path}",
        "Run groupcommit inside a git work tree or point --repo at one",
    )


def no_staged_changes() -> ValidationError:
    return ValidationError(
        "No staged changes found.",
        "Stage files with 'git add <files>' or use --all to group every change",
    )


def api_key_missing(service: str) -> ConfigurationError:
    return ConfigurationError(
        f"Missing API key for {service}",
        "Pass --api-key, set it with 'gcm config api_key <key>' or export the provider's key variable",
    )


def handle_groupcommit_exception(func):
    """Decorator for typer commands: report groupcommitError and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except groupcommitError as e:
            logger.error(f"[red]Error:[/red] {escape(e.message)}")
            if e.details:
                logger.info(f"[yellow]{escape(e.details)}[/yellow]")
            raise typer.Exit(1) from e

    return wrapper
