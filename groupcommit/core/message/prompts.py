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


from typing import Literal

PromptStyle = Literal["default", "detailed", "minimal", "custom"]

SYSTEM_PROMPT = (
    "You are a helpful assistant that generates concise git commit messages. "
    "The response should be plain text without any markdown formatting."
)

PROMPT_TEMPLATES: dict[str, str] = {
    "default": """You are a helpful assistant that generates git commit messages.

Analyze the following git diff and generate a commit message following this format:
<type>(<scope>): <short description>

- Change 1
- Change 2
- Change 3

Rules:
1. Determine the commit type from: feat, fix, refactor, chore, docs, style, test, perf
2. Use "{scope}" as the scope
3. Keep the short description under 50 characters
4. List 2-5 key changes as bullet points
5. Be concise and clear

Git diff:
{diff}""",
    "detailed": """You are an expert developer analyzing code changes for commit message generation.

Your task is to deeply analyze the following git diff and create a comprehensive commit message.

Context Analysis:
- Identify what problem is being solved or feature being added
- Understand the broader context of changes
- Note any patterns, architectural decisions, or technical debt addressed

Format your commit message as:
<type>(<scope>): <short description>

- Detailed change 1 with context
- Detailed change 2 with context
- Detailed change 3 with context

Commit types: feat, fix, refactor, chore, docs, style, test, perf
Use "{scope}" as the scope.

Git diff:
{diff}""",
    "minimal": """Generate a short commit message for this diff.

Format: <type>({scope}): <description>

- Key change 1
- Key change 2

Types: feat, fix, refactor, chore, docs, style, test, perf

Diff:
{diff}""",
}

MAX_DIFF_LENGTH = 8000
TRUNCATION_NOTICE = "\n... (diff truncated for brevity) ..."


def truncate_diff(diff: str, max_length: int = MAX_DIFF_LENGTH) -> str:
    """Cut a diff on a line boundary so the prompt stays under max_length characters of diff."""
    if len(diff) <= max_length:
        return diff

    kept: list[str] = []
    current_length = 0
    for line in diff.split("\n"):
        if current_length + len(line) > max_length:
            kept.append(TRUNCATION_NOTICE)
            break
        kept.append(line)
        current_length += len(line) + 1

    return "\n".join(kept)


def build_prompt(
    diff: str,
    scope: str,
    prompt_style: PromptStyle = "default",
    custom_prompt: str | None = None,
) -> str:
    if prompt_style == "custom":
        template = custom_prompt or PROMPT_TEMPLATES["default"]
    else:
        template = PROMPT_TEMPLATES[prompt_style]

    # plain replacement, custom prompts may contain other braces
    return template.replace("{scope}", scope).replace("{diff}", truncate_diff(diff))
