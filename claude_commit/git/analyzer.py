"""Git Analyzer - Read working tree status and diffs, create commits."""

import logging
import subprocess

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class NotARepositoryError(GitError):
    """Raised when the current directory is not inside a git repository."""
    pass


class GitEncodingError(GitError):
    """Raised when git output is not valid UTF-8."""
    pass


class GitAnalyzer:
    """Runs git in the current directory. Fails fast outside a repository."""

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout decoded as UTF-8."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b'').decode('utf-8', errors='replace').strip()
            raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}".rstrip())
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

        try:
            return result.stdout.decode('utf-8')
        except UnicodeDecodeError as e:
            raise GitEncodingError(f"Output of git {' '.join(args)} is not valid UTF-8: {e}")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise NotARepositoryError("Not in a git repository")

    def has_changes(self) -> bool:
        """True if the working tree differs from HEAD, untracked files included."""
        output = self._run_git('status', '--porcelain', '--untracked-files=all')
        entries = [line for line in output.splitlines() if line.strip()]
        logger.debug("git status reported %d entries", len(entries))
        return bool(entries)

    def get_diff(self) -> str:
        """Staged diff, or the unstaged diff when nothing is staged.

        Returns an empty string when both are empty.
        """
        diff = self._diff('--staged')
        if diff:
            logger.debug("Using staged diff")
            return diff

        logger.debug("No staged changes, falling back to unstaged diff")
        return self._diff()

    def _diff(self, *args: str) -> str:
        try:
            return self._run_git('diff', *args)
        except GitEncodingError:
            raise
        except GitError as e:
            raise GitError(f"Failed to execute git diff: {e}")

    def commit(self, message: str) -> bool:
        """Create a commit with message as-is. Returns True on success.

        The message is passed as a single argv entry, so quotes, newlines and
        shell metacharacters reach git untouched.
        """
        try:
            result = subprocess.run(['git', 'commit', '-m', message])
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        logger.debug("git commit exited with status %d", result.returncode)
        return result.returncode == 0
