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


import pytest

from groupcommit.core.data.models import ProjectBoundary
from groupcommit.core.grouper.scope_extractor import (
    ROOT_SCOPE,
    ScopeExtractor,
    meaningful_subpath,
)

WEB = ProjectBoundary("apps/web", "package.json")
APPS = ProjectBoundary("apps", "package.json")
UI = ProjectBoundary("packages/ui", "package.json")

# -----------------------------------------------------------------------------
# meaningful_subpath
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "parts, expected",
    [
        (["src", "utils", "a.ts"], ["src", "utils"]),
        (["src", "a.ts"], ["src", "a.ts"]),
        (["packages", "core", "lib", "util.ts"], ["lib", "util.ts"]),
        (["docs", "guide", "intro", "x.md"], ["docs", "guide"]),
        (["docs", "x.md"], ["docs"]),
        (["web", "pages", "index.tsx"], ["pages", "index.tsx"]),
        (["app"], ["app"]),
    ],
)
def test_meaningful_subpath(parts, expected):
    assert meaningful_subpath(parts) == expected


# -----------------------------------------------------------------------------
# extract_scope
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("boundaries", [[], [WEB]])
def test_single_segment_is_root(boundaries):
    extractor = ScopeExtractor(boundaries)

    assert extractor.extract_scope("LICENSE") == ROOT_SCOPE


def test_no_boundaries_uses_meaningful_subpath():
    extractor = ScopeExtractor()

    assert extractor.extract_scope("src/utils/a.ts") == "src/utils"
    assert extractor.extract_scope("scripts/release/tag.sh") == "scripts/release"
    assert extractor.extract_scope("docs/index.md") == "docs"


def test_flat_source_dir_embeds_filename():
    extractor = ScopeExtractor()

    assert extractor.extract_scope("src/a.ts") == "src/a.ts"
    assert extractor.extract_scope("src/b.ts") == "src/b.ts"


def test_file_inside_boundary():
    extractor = ScopeExtractor([WEB])

    assert extractor.extract_scope("apps/web/src/components/Button.tsx") == (
        "apps/web/src/components"
    )
    assert extractor.extract_scope("apps/web/components/nav/Bar.tsx") == (
        "apps/web/components/nav"
    )


def test_file_directly_in_boundary_root_uses_boundary_path():
    extractor = ScopeExtractor([WEB])

    assert extractor.extract_scope("apps/web/package.json") == "apps/web"


def test_orphan_file_is_root_when_boundaries_exist():
    extractor = ScopeExtractor([WEB])

    assert extractor.extract_scope("README.md") == ROOT_SCOPE
    assert extractor.extract_scope("tools/scripts/deploy.sh") == ROOT_SCOPE


def test_boundary_must_match_whole_segments():
    extractor = ScopeExtractor([WEB])

    assert extractor.find_boundary("apps/webapp/index.ts") is None
    assert extractor.extract_scope("apps/webapp/index.ts") == ROOT_SCOPE


def test_most_specific_boundary_wins():
    extractor = ScopeExtractor([APPS, WEB])

    assert extractor.find_boundary("apps/web/src/index.ts") == WEB
    assert extractor.extract_scope("apps/web/src/index.ts") == "apps/web/src/index.ts"
    assert extractor.extract_scope("apps/cli/main.go") == "apps/cli"


def test_boundary_order_does_not_matter():
    a = ScopeExtractor([APPS, WEB, UI])
    b = ScopeExtractor([UI, WEB, APPS])

    assert a.boundaries == b.boundaries
    assert a.boundaries[0] == UI  # longest path first


# -----------------------------------------------------------------------------
# normalize_scope
# -----------------------------------------------------------------------------


def test_normalize_collapses_deep_src_under_boundary():
    extractor = ScopeExtractor([WEB])

    assert extractor.normalize_scope("apps/web/src/components/buttons") == (
        "apps/web/src/components"
    )


def test_normalize_leaves_short_or_non_src_scopes():
    extractor = ScopeExtractor([WEB])

    assert extractor.normalize_scope("apps/web/src/components") == "apps/web/src/components"
    assert extractor.normalize_scope("apps/web/lib/a/b") == "apps/web/lib/a/b"
    assert extractor.normalize_scope("apps/web") == "apps/web"
    assert extractor.normalize_scope(ROOT_SCOPE) == ROOT_SCOPE


def test_normalize_without_boundary():
    extractor = ScopeExtractor()

    assert extractor.normalize_scope("src/a/b") == "src/a"
    assert extractor.normalize_scope("src/utils") == "src/utils"
    assert extractor.normalize_scope("lib/a/b") == "lib/a/b"
