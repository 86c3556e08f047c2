"""Command runners and observer adaptation."""

import logging
from typing import Callable, Protocol

from git.cmd import Git
from git.exc import GitCommandError

from gitstats.git.errors import CommandExecutionError

logger = logging.getLogger(__name__)

CommandObserver = Callable[[str, str], None]


class CommandRunner(Protocol):
    """Anything that can run a command string inside a working directory."""

    def run(self, command: str, working_directory: str) -> str:
        ...


class GitCommandRunner:
    """Runs command strings through GitPython.

    Commands go through the shell, since the rev-list command pipes its
    output into grep. grep exits with status 1 when it selects no lines,
    so a silent status 1 means empty output rather than failure.
    """

    # grep's status when nothing matched
    NO_MATCH_STATUS = 1

    def run(self, command: str, working_directory: str) -> str:
        """Execute ``command`` in ``working_directory`` and return its stdout.

        Raises:
            CommandExecutionError: If the command fails or cannot start
        """
        try:
            status, stdout, stderr = Git(working_directory).execute(
                [command],
                shell=True,
                with_extended_output=True,
                with_exceptions=False,
            )
        except OSError as e:
            raise CommandExecutionError(command, e) from e

        if status == 0:
            return stdout
        if status == self.NO_MATCH_STATUS and not stdout and not stderr:
            return ""

        error = GitCommandError([command], status, stderr, stdout)
        raise CommandExecutionError(command, error) from error


def as_command_observer(observer) -> CommandObserver:
    """Adapt an observer to a plain ``(command, result)`` callable.

    Accepts either a callable taking two positional arguments or an object
    with a ``call(command, result)`` method.

    Raises:
        TypeError: If ``observer`` has neither shape
    """
    if callable(observer):
        return observer

    call = getattr(observer, "call", None)
    if callable(call):
        return call

    raise TypeError(
        f"Command observer must be callable or define call(command, result): {observer!r}"
    )
