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
Logging setup.

Two loguru sinks per command run:
- the console, printed through rich so messages can carry rich markup
- a DEBUG log file per run under the user log directory

GROUPCOMMIT_LOG_LEVEL overrides the console level (e.g. TRACE when debugging
the scanner).
"""

import os
from datetime import datetime
from pathlib import Path

from loguru import logger
from platformdirs import user_log_path
from rich.console import Console

LOG_DIR = user_log_path(appname="groupcommit")

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line} | {extra[command]} | {message}"
)


def _console_level(debug: bool, silent: bool) -> str:
    if silent:
        # errors still reach the user
        return "ERROR"
    if debug:
        return "DEBUG"
    return os.getenv("GROUPCOMMIT_LOG_LEVEL", "INFO").upper()


def _rich_sink(console: Console):
    def sink(message) -> None:
        console.print(message.record["message"].rstrip("\n"), highlight=False)

    return sink


def setup_logger(command_name: str, debug: bool = False, silent: bool = False) -> Path:
    """
    (Re)configure loguru for a command and return the path of its log file.

    Safe to call more than once: previous sinks are dropped first, which the
    CLI relies on after loading config files that change verbosity.
    """
    logger.remove()
    logger.configure(extra={"command": command_name})

    logger.add(
        _rich_sink(Console()),
        level=_console_level(debug, silent),
        format="{message}",
        catch=True,
    )

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    logfile = LOG_DIR / f"groupcommit_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
    logger.add(
        logfile,
        level="DEBUG",
        format=FILE_FORMAT,
        rotation="10 MB",
        retention="14 days",
        compression="gz",
        catch=True,
        backtrace=True,
        diagnose=False,
    )

    logger.debug(f"Logging {command_name} to {logfile}")
    return logfile


def get_log_directory() -> Path:
    return LOG_DIR
