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


from collections.abc import Iterable, Sequence

from ..data.models import ProjectBoundary

ROOT_SCOPE = "root"

# Conventional source-root directory names.
SOURCE_ROOTS: frozenset[str] = frozenset({"src", "lib", "app", "pages"})

# Only this marker collapses during normalization.
COLLAPSE_MARKER = "src"


def meaningful_subpath(
    parts: Sequence[str], source_roots: Iterable[str] = SOURCE_ROOTS
) -> list[str]:
    """
    Reduce a path (last element is the filename) to the segments that name its scope.

    If a source-root directory is present, keep it and the segment after it
    (which may be the filename itself for flat source trees). Otherwise keep
    up to two leading directories.
    """
    roots = frozenset(source_roots)
    start_idx = next((i for i, p in enumerate(parts) if p in roots), -1)

    if start_idx == -1:
        return list(parts[: min(2, len(parts) - 1)])

    relevant = list(parts[start_idx:])
    if len(relevant) == 1:
        return relevant

    return relevant[:2]


class ScopeExtractor:
    """Maps a repository-relative file path to a scope label."""

    def __init__(
        self,
        boundaries: Iterable[ProjectBoundary] = (),
        source_roots: Iterable[str] = SOURCE_ROOTS,
    ):
        # deepest boundary first, ties broken lexically
        self.boundaries: tuple[ProjectBoundary, ...] = tuple(
            sorted(boundaries, key=lambda b: (-len(b.path), b.path))
        )
        self.source_roots = frozenset(source_roots)

    def find_boundary(self, path: str) -> ProjectBoundary | None:
        """Return the most specific boundary containing path, if any."""
        for boundary in self.boundaries:
            if path == boundary.path or path.startswith(boundary.path + "/"):
                return boundary
        return None

    def extract_scope(self, file_path: str) -> str:
        parts = file_path.split("/")

        if len(parts) == 1:
            return ROOT_SCOPE

        boundary = self.find_boundary(file_path)
        if boundary is not None:
            rel_parts = _relative_parts(file_path, boundary)
            if len(rel_parts) <= 1:
                return boundary.path

            sub = meaningful_subpath(rel_parts, self.source_roots)
            return "/".join([boundary.path, *sub])

        if self.boundaries:
            # outside every known project
            return ROOT_SCOPE

        return "/".join(meaningful_subpath(parts, self.source_roots))

    def normalize_scope(self, scope: str) -> str:
        """
        Collapse deep scopes below a "src" directory to their first two segments.

        Applied relative to the owning boundary when there is one, otherwise to
        the scope itself.
        """
        boundary = self.find_boundary(scope)
        if boundary is not None:
            rel_parts = _relative_parts(scope, boundary)
            if len(rel_parts) > 2 and rel_parts[0] == COLLAPSE_MARKER:
                return "/".join([boundary.path, *rel_parts[:2]])
            return scope

        parts = scope.split("/")
        if len(parts) > 2 and parts[0] == COLLAPSE_MARKER:
            return "/".join(parts[:2])

        return scope


def _relative_parts(path: str, boundary: ProjectBoundary) -> list[str]:
    rest = path[len(boundary.path) + 1 :]
    return rest.split("/") if rest else []
