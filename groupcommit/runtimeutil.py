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


import signal
import sys
from importlib.metadata import PackageNotFoundError, version

import typer
from loguru import logger

from groupcommit.core.logging.logging import get_log_directory


def ensure_utf8_output():
    # emoji commit types must not crash legacy consoles
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8")


def setup_signal_handlers():
    """Exit with 130 on Ctrl+C or SIGTERM instead of printing a traceback."""

    def on_signal(signum, frame):
        logger.info("\n[yellow]Cancelled, groups committed so far are kept[/yellow]")
        raise typer.Exit(130)

    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, on_signal)


def version_callback(value: bool):
    if not value:
        return
    try:
        typer.echo(f"groupcommit version {version('groupcommit')}")
    except PackageNotFoundError:
        typer.echo("groupcommit version: development")
    raise typer.Exit()


def get_log_dir_callback(value: bool):
    if not value:
        return
    typer.echo(str(get_log_directory()))
    raise typer.Exit()
