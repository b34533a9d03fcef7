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

from groupcommit.core.data.models import ChangeStatus, FileChange
from groupcommit.core.filter.pattern_filter import PatternFilter, expand_globstar


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, []),
        ("", []),
        ("   ", []),
        ("*.lock", ["*.lock"]),
        ("*.lock, dist/* ,,", ["*.lock", "dist/*"]),
    ],
)
def test_parse_patterns(raw, expected):
    assert PatternFilter.parse_patterns(raw) == expected


def test_should_ignore():
    pattern_filter = PatternFilter(["*.lock", "dist/*"])

    assert pattern_filter.should_ignore("yarn.lock")
    assert pattern_filter.should_ignore("dist/bundle.js")
    assert not pattern_filter.should_ignore("src/app.ts")


def test_matching_is_case_sensitive():
    assert not PatternFilter(["*.LOCK"]).should_ignore("yarn.lock")


def test_filter_files_keeps_order():
    files = [
        FileChange("b.py", ChangeStatus.MODIFIED),
        FileChange("poetry.lock", ChangeStatus.MODIFIED),
        FileChange("a.py", ChangeStatus.NEW),
    ]

    kept = PatternFilter(["*.lock"]).filter_files(files)

    assert [f.path for f in kept] == ["b.py", "a.py"]


def test_no_patterns_keeps_everything():
    files = [FileChange("x", ChangeStatus.DELETED)]

    assert PatternFilter().filter_files(files) == files


def test_expand_globstar():
    assert expand_globstar("*.lock") == ["*.lock"]
    assert expand_globstar("**/*.lock") == ["**/*.lock", "*.lock"]
    assert expand_globstar("a/**/b/**/c") == [
        "a/**/b/**/c",
        "a/b/**/c",
        "a/**/b/c",
        "a/b/c",
    ]


@pytest.mark.parametrize(
    "pattern, path",
    [
        ("**/*.lock", "yarn.lock"),
        ("**/*.lock", "apps/web/yarn.lock"),
        ("src/**/test.py", "src/test.py"),
        ("src/**/test.py", "src/a/b/test.py"),
    ],
)
def test_globstar_matches_zero_or_more_directories(pattern, path):
    assert PatternFilter([pattern]).should_ignore(path)


def test_globstar_keeps_its_anchor():
    assert not PatternFilter(["src/**/test.py"]).should_ignore("lib/test.py")
