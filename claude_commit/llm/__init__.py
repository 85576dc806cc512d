"""LLM Client Package"""

from claude_commit.llm.base import ChatMessage, ChatRequest, ChatResponse, ContentBlock, LLMError
from claude_commit.llm.claude import ClaudeClient

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ContentBlock",
    "ClaudeClient",
    "LLMError",
]
