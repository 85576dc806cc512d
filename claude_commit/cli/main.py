"""CLI Main Entry Point"""

import logging
import sys
from typing import Optional, Sequence

from claude_commit.config import Config, ConfigError, load_config
from claude_commit.git import GitAnalyzer, GitError, NotARepositoryError
from claude_commit.llm import ClaudeClient, LLMError
from claude_commit.prompts import PromptBuilder
from claude_commit.output import info, print_error, print_success, print_warning

from claude_commit.cli.args import parse_args
from claude_commit.cli.utils import confirm, display_diff, display_message

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_A_REPO = 1
EXIT_CONFIG_ERROR = 2
EXIT_GIT_ERROR = 3
EXIT_LLM_ERROR = 4
EXIT_COMMIT_FAILED = 5


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # The SDK's own debug output would echo request bodies, including the diff
    for name in ("anthropic", "httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


def _open_repository() -> GitAnalyzer:
    """Fail fast outside a repository."""
    return GitAnalyzer()


def _generate_message(config: Config, diff: str) -> str:
    """One round trip to Claude; returns the first content block, trimmed."""
    request = PromptBuilder(model=config.model, max_tokens=config.max_tokens).build(diff)
    client = ClaudeClient(config)
    print(info(f"Generating commit message with {client.name}..."))
    response = client.generate(request)
    return response.message


def _commit(analyzer: GitAnalyzer, message: str) -> int:
    """Ask, then run git commit with the message verbatim."""
    if not confirm():
        logger.debug("User declined, no commit created")
        return EXIT_OK

    if analyzer.commit(message):
        print_success("Commit created successfully!")
        return EXIT_OK

    print_error("Failed to create commit")
    return EXIT_COMMIT_FAILED


def _run(config: Config) -> int:
    try:
        analyzer = _open_repository()
    except NotARepositoryError as e:
        print_error(f"Error: {e}")
        return EXIT_NOT_A_REPO

    if not analyzer.has_changes():
        print_warning("No changes to commit")
        return EXIT_OK

    diff = analyzer.get_diff()
    if not diff:
        print_warning("No staged changes to commit")
        return EXIT_OK

    if config.verbose:
        display_diff(diff)

    try:
        message = _generate_message(config, diff)
    except LLMError as e:
        print_error(str(e))
        return EXIT_LLM_ERROR

    display_message(message)
    return _commit(analyzer, message)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    _configure_logging(args.verbose)

    # Credential problems are reported before touching the repository
    try:
        config = load_config(verbose=args.verbose)
    except ConfigError as e:
        print_error(str(e))
        return EXIT_CONFIG_ERROR

    try:
        return _run(config)
    except GitError as e:
        print_error(str(e))
        return EXIT_GIT_ERROR
