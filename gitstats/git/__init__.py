"""Git operations module."""

from gitstats.git.errors import (
    CommandExecutionError,
    GitStatsError,
    ParseError,
    UnknownAuthorError,
)
from gitstats.git.parser import AuthorListParser, CommitListParser, parse_authors, parse_commits
from gitstats.git.range import resolve_commit_range
from gitstats.git.repository import Repository
from gitstats.git.runner import CommandRunner, GitCommandRunner

__all__ = [
    "Repository",
    "CommandRunner",
    "GitCommandRunner",
    "AuthorListParser",
    "CommitListParser",
    "parse_authors",
    "parse_commits",
    "resolve_commit_range",
    "GitStatsError",
    "CommandExecutionError",
    "ParseError",
    "UnknownAuthorError",
]
