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

from groupcommit.core.message import CommitTypeAnalyzer, EmojiMapper


@pytest.fixture
def analyzer():
    return CommitTypeAnalyzer()


@pytest.mark.parametrize(
    "diff, files, expected",
    [
        ("+x = 1", ["src/components/button.test.tsx"], "test"),
        ("+describe('math', () => {})", ["src/math.ts"], "test"),
        ("+x = 1", ["README.md"], "docs"),
        ("+x = 1", ["docs/guide.md"], "docs"),
        ('+"version": "1.0.1"', ["package.json"], "chore"),
        ("+x = 1", ["tsconfig.base.json"], "chore"),
        ("-  indent\n+    indent", ["src/app.py"], "style"),
        ("+results = cache.get(key)", ["src/app.py"], "perf"),
        ("+# resolve crash on empty input", ["src/app.py"], "fix"),
        ("new file mode 100644\n+hello", ["src/hello.py"], "feat"),
        ("+export function add(a, b) {}", ["src/math.ts"], "feat"),
        ("+x = 1", ["src/app.py"], "refactor"),
    ],
)
def test_analyze(analyzer, diff, files, expected):
    assert analyzer.analyze(diff, files) == expected


def test_rule_order_test_before_docs(analyzer):
    # a markdown file under tests/ counts as a test change
    assert analyzer.analyze("+x", ["pkg/tests/fixtures.md"]) == "test"


def test_style_needs_no_code_keywords(analyzer):
    assert analyzer.analyze("+const formatting = 1", ["src/app.ts"]) != "style"


# -----------------------------------------------------------------------------
# EmojiMapper
# -----------------------------------------------------------------------------


def test_get_emoji():
    mapper = EmojiMapper()

    assert mapper.get_emoji("feat") == "✨"
    assert mapper.get_emoji("fix") == "🐛"


@pytest.mark.parametrize(
    "message, expected",
    [
        ("feat(api): add endpoint", "✨(api): add endpoint"),
        ("FIX(core): handle none", "🐛(core): handle none"),
        ("refactor: tidy", "♻️: tidy"),
        ("update readme", "update readme"),
        ("prefix feat: not at start", "prefix feat: not at start"),
    ],
)
def test_replace_type_with_emoji(message, expected):
    assert EmojiMapper().replace_type_with_emoji(message) == expected
