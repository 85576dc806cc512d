"""
Claude Commit

Propose a commit message for pending git changes using the Claude API,
and create the commit once the user approves it.
"""

__version__ = "1.0.0"

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 1000

# Environment variables read at startup (optionally populated from .env)
API_KEY_ENV = "ANTHROPIC_API_KEY"
BASE_URL_ENV = "ANTHROPIC_BASE_URL"
MODEL_ENV = "CLAUDE_COMMIT_MODEL"
MAX_TOKENS_ENV = "CLAUDE_COMMIT_MAX_TOKENS"
