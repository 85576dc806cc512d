"""Prompt Builder - Construct the Messages API request for a diff."""

from claude_commit import DEFAULT_MAX_TOKENS, DEFAULT_MODEL
from claude_commit.llm.base import ChatMessage, ChatRequest

SYSTEM_PROMPT = """Generate git commit messages from diffs.

Guidelines:
1. Start with imperative verb (Add, Fix, Update, etc.)
2. Format as a concise title line (under 50 characters)
3. Follow with a blank line
4. Then include a bulleted list with each bullet using '-' format
5. Each bullet should describe a specific change made
6. Focus on technical changes, not why they're beneficial
7. Don't include a '## Changes' section
8. Return only the formatted commit message with no commentary
9. The title line should never be prefixed with #"""

USER_INSTRUCTION = "Generate a commit message for the following git diff:"


class PromptBuilder:
    """Pairs the fixed system instruction with the diff as user content."""

    def __init__(self, model: str = DEFAULT_MODEL, max_tokens: int = DEFAULT_MAX_TOKENS):
        self.model = model
        self.max_tokens = max_tokens

    def build(self, diff: str) -> ChatRequest:
        return ChatRequest(
            model=self.model,
            max_tokens=self.max_tokens,
            system=SYSTEM_PROMPT,
            messages=[ChatMessage(role="user", content=self.build_user_message(diff))],
        )

    def build_user_message(self, diff: str) -> str:
        # The diff goes in verbatim; no escaping, no truncation
        return "\n".join([
            USER_INSTRUCTION,
            "",
            "```",
            diff,
            "```",
        ])
