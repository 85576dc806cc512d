"""Prompt Construction Package"""

from claude_commit.prompts.builder import PromptBuilder, SYSTEM_PROMPT, USER_INSTRUCTION

__all__ = [
    "PromptBuilder",
    "SYSTEM_PROMPT",
    "USER_INSTRUCTION",
]
