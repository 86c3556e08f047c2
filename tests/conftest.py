"""Shared pytest fixtures for gitstats tests."""

import pytest

from gitstats.git import CommandExecutionError, Repository
from gitstats.models import Author, AuthorCollection


SHORTLOG_OUTPUT = "   156\tJohn Doe <john.doe@gmail.com>\n    53\tJoe Doe <joe.doe@gmail.com>\n"

REVLIST_OUTPUT = (
    "e4412c3|1348603824|2012-09-25 22:10:24 +0200|john.doe@gmail.com\n"
    "ce34874|1347482927|2012-09-12 22:48:47 +0200|joe.doe@gmail.com\n"
    "5eab339|1345835073|2012-08-24 21:04:33 +0200|john.doe@gmail.com\n"
)


class FakeRunner:
    """Command runner returning canned output and recording every call."""

    def __init__(self, responses=None, default=""):
        self.responses = dict(responses or {})
        self.default = default
        self.calls = []

    def run(self, command, working_directory):
        self.calls.append((command, working_directory))
        result = self.responses.get(command, self.default)
        if isinstance(result, BaseException):
            raise result
        return result

    @property
    def commands(self):
        return [command for command, _ in self.calls]


@pytest.fixture
def expected_authors():
    """Authors listed in SHORTLOG_OUTPUT, in order."""
    return [
        Author(name="John Doe", email="john.doe@gmail.com"),
        Author(name="Joe Doe", email="joe.doe@gmail.com"),
    ]


@pytest.fixture
def author_collection(expected_authors):
    """AuthorCollection of the expected authors."""
    return AuthorCollection(expected_authors)


@pytest.fixture
def fake_runner():
    """Runner answering the default HEAD-range commands."""
    return FakeRunner(
        {
            "git shortlog -se HEAD": SHORTLOG_OUTPUT,
            "git rev-list --pretty=format:'%h|%at|%ai|%aE' HEAD | grep -v commit": REVLIST_OUTPUT,
            "git rev-parse --short HEAD": "xyz\n",
        }
    )


@pytest.fixture
def repo(fake_runner):
    """Repository over the default range backed by fake_runner."""
    return Repository("/tmp/project", command_runner=fake_runner)


@pytest.fixture
def failing_runner():
    """Runner whose every command fails."""
    return FakeRunner(default=CommandExecutionError("git status", RuntimeError("boom")))
