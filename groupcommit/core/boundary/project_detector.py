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
ProjectDetector

Discovers independent sub-projects inside a repository tree.

A directory is a project boundary when one of its direct entries is a known
manifest file (package.json, pyproject.toml, go.mod, ...). Once a boundary is
found its internals are opaque: the walk does not descend any further into it.

Notes:
- The scan root itself is never reported, even if it holds a manifest
- Unreadable directories are treated as empty, the scan never raises
- Children are visited in sorted order so the result is deterministic
"""

import os
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from ..data.models import ProjectBoundary

# Checked in this order, the first one present names the boundary.
MANIFEST_FILES: tuple[str, ...] = (
    "package.json",
    "Cargo.toml",
    "go.mod",
    "pyproject.toml",
    "pom.xml",
    "build.gradle",
    "composer.json",
    "pubspec.yaml",
    "mix.exs",
    "deno.json",
)

SKIP_DIRS: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        "target",
        "vendor",
        "__pycache__",
        ".venv",
        ".next",
        ".nuxt",
        ".turbo",
        ".cache",
        "coverage",
        "out",
    }
)

MAX_DEPTH = 4


class ProjectDetector:
    def __init__(
        self,
        manifest_files: Iterable[str] = MANIFEST_FILES,
        skip_dirs: Iterable[str] = SKIP_DIRS,
        max_depth: int = MAX_DEPTH,
    ):
        self.manifest_files = tuple(manifest_files)
        self.skip_dirs = frozenset(skip_dirs)
        self.max_depth = max_depth

    def detect(self, root_dir: str | Path) -> list[ProjectBoundary]:
        """Walk root_dir once and return every project boundary below it."""
        root = Path(root_dir)
        boundaries: list[ProjectBoundary] = []
        self._scan(root, root, 0, boundaries)

        logger.debug(
            "Project detection: root={root} boundaries={boundaries}",
            root=root,
            boundaries=[b.path for b in boundaries],
        )
        return boundaries

    def _scan(
        self,
        directory: Path,
        root: Path,
        depth: int,
        boundaries: list[ProjectBoundary],
    ) -> None:
        if depth > self.max_depth:
            return

        try:
            entries = sorted(os.listdir(directory))
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            return

        if directory != root:
            manifest = self._find_manifest(entries)
            if manifest is not None:
                boundaries.append(
                    ProjectBoundary(
                        path=directory.relative_to(root).as_posix(),
                        manifest_file=manifest,
                    )
                )
                return

        for entry in entries:
            if entry in self.skip_dirs or entry.startswith("."):
                continue

            child = directory / entry
            try:
                is_dir = child.is_dir()
            except OSError:
                continue

            if is_dir:
                self._scan(child, root, depth + 1, boundaries)

    def _find_manifest(self, entries: list[str]) -> str | None:
        present = set(entries)
        for manifest in self.manifest_files:
            if manifest in present:
                return manifest
        return None


def detect(root_dir: str | Path) -> list[ProjectBoundary]:
    """Detect project boundaries using the default manifest list and skip list."""
    return ProjectDetector().detect(root_dir)
