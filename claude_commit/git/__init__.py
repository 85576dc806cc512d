"""Git Operations Package"""

from claude_commit.git.analyzer import GitAnalyzer, GitError, GitEncodingError, NotARepositoryError

__all__ = [
    "GitAnalyzer",
    "GitError",
    "GitEncodingError",
    "NotARepositoryError",
]
