"""Repository handle that runs git commands and parses their output."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from gitstats.config import AUTHORS_COMMAND, COMMITS_COMMAND, VERSION_COMMAND
from gitstats.git.errors import CommandExecutionError
from gitstats.git.parser import AuthorListParser, CommitListParser
from gitstats.git.range import resolve_commit_range
from gitstats.git.runner import CommandObserver, CommandRunner, GitCommandRunner, as_command_observer
from gitstats.models import Author, AuthorCollection, Commit

logger = logging.getLogger(__name__)


class Repository:
    """A git repository restricted to a commit range.

    Authors and commits are read once per instance and cached. Every
    command goes through the injected runner, and registered observers are
    told about each command after it succeeds.
    """

    def __init__(
        self,
        path: str = ".",
        first_commit_hash: Optional[str] = None,
        last_commit_hash: Optional[str] = None,
        command_runner: Optional[CommandRunner] = None,
    ):
        """Initialize the repository handle.

        Args:
            path: Working directory commands run in
            first_commit_hash: Range start, exclusive
            last_commit_hash: Range end, inclusive (default: HEAD)
            command_runner: Runner used to execute commands
                (default: GitCommandRunner)
        """
        self.path = Path(path)
        self.first_commit_hash = first_commit_hash
        self.last_commit_hash = last_commit_hash
        self.command_runner = command_runner if command_runner is not None else GitCommandRunner()
        self._observers: list[CommandObserver] = []
        self._author_parser = AuthorListParser()
        self._commit_parser = CommitListParser()
        self._authors: AuthorCollection | None = None
        self._commits: list[Commit] | None = None

    @property
    def commit_range(self) -> str:
        """Range expression passed to every git command."""
        return resolve_commit_range(self.first_commit_hash, self.last_commit_hash)

    @property
    def project_name(self) -> str:
        """Get the project name from the directory."""
        return self.path.resolve().name

    def add_command_observer(self, observer) -> None:
        """Register an observer called with ``(command, result)`` after each command.

        Args:
            observer: Callable with two positional arguments, or an object
                with a ``call(command, result)`` method

        Raises:
            TypeError: If ``observer`` has neither shape
        """
        self._observers.append(as_command_observer(observer))

    def run(self, command: str) -> str:
        """Run a command in the repository directory.

        Args:
            command: Full command string

        Returns:
            Raw command output

        Raises:
            CommandExecutionError: If the runner fails
        """
        logger.debug("Running %r in %s", command, self.path)
        try:
            result = self.command_runner.run(command, str(self.path))
        except CommandExecutionError:
            logger.warning("Command failed: %s", command)
            raise
        except Exception as e:
            logger.warning("Command failed: %s", command)
            raise CommandExecutionError(command, e) from e

        for observer in self._observers:
            observer(command, result)
        return result

    def authors(self) -> AuthorCollection:
        """Get the authors of commits in range, in shortlog order."""
        if self._authors is None:
            output = self.run(AUTHORS_COMMAND.format(range=self.commit_range))
            self._authors = self._author_parser.parse(output)
        return AuthorCollection(self._authors)

    def commits(self) -> list[Commit]:
        """Get the commits in range, oldest first.

        Reads the author list first when it is not cached yet, since every
        commit is resolved against it.
        """
        if self._commits is None:
            authors = self.authors()
            output = self.run(COMMITS_COMMAND.format(range=self.commit_range))
            self._commits = self._commit_parser.parse(output, authors)
        return list(self._commits)

    def project_version(self) -> str:
        """Get the abbreviated hash of the range's end."""
        return self.run(VERSION_COMMAND.format(range=self.commit_range)).strip()

    def last_commit(self) -> Optional[Commit]:
        """Get the newest commit in range."""
        commits = self.commits()
        return commits[-1] if commits else None

    def commits_period(self) -> Optional[tuple[datetime, datetime]]:
        """Get the dates of the oldest and newest commits in range."""
        commits = self.commits()
        if not commits:
            return None
        return commits[0].date, commits[-1].date

    def commits_by(self, author: Author) -> list[Commit]:
        """Get the commits in range written by ``author``."""
        return [c for c in self.commits() if c.author.email == author.email]
