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


from contextlib import contextmanager
from time import perf_counter

from loguru import logger

from ..data.models import FileGroup


@contextmanager
def time_block(label: str):
    """Log how long the wrapped block took, at debug level. Errors propagate."""
    start = perf_counter()
    try:
        yield
    finally:
        elapsed_ms = round((perf_counter() - start) * 1000)
        logger.debug("{label} took {ms} ms", label=label, ms=elapsed_ms)


def describe_group(group: FileGroup, max_length: int = 120) -> str:
    """Comma separated file list, cut to max_length characters."""
    text = ", ".join(group.paths)
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def log_groups(step: str, groups: list[FileGroup]) -> None:
    logger.debug(
        "{step}: groups={count} files={files} scopes={scopes}",
        step=step,
        count=len(groups),
        files=sum(len(g.files) for g in groups),
        scopes=[g.scope for g in groups],
    )
