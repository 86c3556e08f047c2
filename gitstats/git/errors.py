"""Exceptions raised while running git and reading its output."""


class GitStatsError(Exception):
    """Base class for gitstats errors."""

    pass


class CommandExecutionError(GitStatsError):
    """Exception raised when the command runner fails."""

    def __init__(self, command: str, cause: BaseException):
        self.command = command
        self.cause = cause
        super().__init__(f"Git command failed: {command}: {cause}")


class ParseError(GitStatsError):
    """Exception raised for a line that does not have the expected shape."""

    def __init__(self, line: str, reason: str = "unexpected format"):
        self.line = line
        self.reason = reason
        super().__init__(f"Cannot parse line {line!r}: {reason}")


class UnknownAuthorError(GitStatsError):
    """Exception raised when a commit names an author missing from the author list."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Unknown author email: {email}")
