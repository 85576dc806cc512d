"""Claude (Anthropic) LLM Client"""

import logging
from typing import Optional

import anthropic
import httpx

from claude_commit.config import Config
from claude_commit.llm.base import ChatRequest, ChatResponse, ContentBlock, LLMError

logger = logging.getLogger(__name__)


class ClaudeClient:
    """Claude Messages API client.

    One blocking round trip per call: SDK retries are switched off and the
    SDK's default timeout applies.
    """

    def __init__(self, config: Config, http_client: Optional[httpx.Client] = None):
        self.config = config
        self.model = config.model
        self._client = anthropic.Anthropic(
            api_key=config.api_key,
            base_url=config.base_url,
            max_retries=0,
            http_client=http_client,
        )

    @property
    def name(self) -> str:
        return f"Claude ({self.model})"

    def generate(self, request: ChatRequest) -> ChatResponse:
        """Send the request and return the parsed response.

        Raises:
            LLMError: on a non-success status (body included verbatim),
                a transport failure, a request the SDK refuses to send,
                or a response with no content
        """
        logger.debug("Sending request to %s, max_tokens=%d", request.model, request.max_tokens)
        try:
            response = self._client.messages.create(**request.to_dict())
        except anthropic.APIStatusError as e:
            raise LLMError(f"API request failed ({e.status_code}): {e.response.text}")
        except anthropic.APIConnectionError as e:
            raise LLMError(f"Request to Claude API failed: {e}")
        except anthropic.APIError as e:
            raise LLMError(f"Claude API error: {e.message}")
        except ValueError as e:
            # Raised by the SDK before sending, e.g. max_tokens too large for a non-streaming call
            raise LLMError(f"Claude API request rejected: {e}")

        blocks = [
            ContentBlock(text=getattr(block, "text", "") or "", type=block.type)
            for block in response.content or []
        ]
        usage = getattr(response, "usage", None)
        tokens_used = (usage.input_tokens + usage.output_tokens) if usage else 0
        logger.debug("Received %d content block(s), %d tokens", len(blocks), tokens_used)

        result = ChatResponse(content=blocks, model=response.model or self.model, tokens_used=tokens_used)
        if not result.content:
            raise LLMError("No content received from Claude API")
        return result
