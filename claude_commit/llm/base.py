"""Chat request/response shapes shared by the prompt builder and the client."""

from dataclasses import dataclass, field, asdict


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


@dataclass
class ChatMessage:
    role: str
    content: str


@dataclass
class ChatRequest:
    """Body of a Messages API call. Exactly one user message per run."""
    model: str
    max_tokens: int
    system: str
    messages: list[ChatMessage] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ContentBlock:
    text: str
    type: str = "text"


@dataclass
class ChatResponse:
    """Structured response from the Messages API."""
    content: list[ContentBlock] = field(default_factory=list)
    model: str = ""
    tokens_used: int = 0

    @property
    def message(self) -> str:
        """Trimmed text of the first content block.

        Raises:
            LLMError: if the response carries no content
        """
        if not self.content:
            raise LLMError("No content received from Claude API")
        return self.content[0].text.strip()
