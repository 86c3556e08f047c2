"""Parsers for git shortlog and rev-list output."""

import re
from datetime import datetime

from gitstats.git.errors import ParseError, UnknownAuthorError
from gitstats.models import Author, AuthorCollection, Commit


class AuthorListParser:
    """Parser for ``git shortlog -se`` output.

    Each line holds a commit count followed by the author:

        156\tJohn Doe <john.doe@gmail.com>
    """

    # Pattern for a shortlog line: count, name, <email>
    LINE_PATTERN = re.compile(
        r"^\s*(?P<count>\d+)\s+"  # commit count
        r"(?P<name>[^<]*)"  # name up to the first '<'
        r"<(?P<email>.*)>\s*$"  # email up to the trailing '>'
    )

    def parse(self, text: str) -> AuthorCollection:
        """Parse shortlog output into an author collection.

        Args:
            text: Raw command output

        Returns:
            AuthorCollection in output order

        Raises:
            ParseError: If a non-empty line is not a shortlog entry
        """
        authors = AuthorCollection()
        if not text:
            return authors

        for line in text.splitlines():
            if not line.strip():
                continue
            match = self.LINE_PATTERN.match(line)
            if not match:
                raise ParseError(line, "expected '<count> Name <email>'")
            authors.add(Author(name=match.group("name").strip(), email=match.group("email")))

        return authors


class CommitListParser:
    """Parser for ``git rev-list --pretty=format:'%h|%at|%ai|%aE'`` output.

    Lines without a field separator, such as the ``commit <sha>`` headers
    rev-list prints before each entry, are skipped.
    """

    SEPARATOR = "|"
    FIELD_COUNT = 4
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"

    def parse(self, text: str, authors: AuthorCollection) -> list[Commit]:
        """Parse rev-list output into commits sorted by timestamp.

        Args:
            text: Raw command output
            authors: Authors parsed from the matching shortlog listing

        Returns:
            Commits, oldest first

        Raises:
            ParseError: If an entry has the wrong field count, timestamp or date
            UnknownAuthorError: If an entry's email is not in ``authors``
        """
        commits = []
        if not text:
            return commits

        for line in text.splitlines():
            if self.SEPARATOR not in line:
                continue
            commits.append(self.parse_line(line.strip(), authors))

        # sorted() is stable, equal stamps keep output order
        return sorted(commits, key=lambda c: c.stamp)

    def parse_line(self, line: str, authors: AuthorCollection) -> Commit:
        """Parse a single ``hash|stamp|date|email`` entry."""
        fields = line.split(self.SEPARATOR)
        if len(fields) != self.FIELD_COUNT:
            raise ParseError(line, f"expected {self.FIELD_COUNT} fields, got {len(fields)}")

        sha, stamp, date, email = fields

        try:
            stamp = int(stamp)
        except ValueError:
            raise ParseError(line, f"invalid timestamp {stamp!r}")

        try:
            date = datetime.strptime(date, self.DATE_FORMAT)
        except ValueError:
            raise ParseError(line, f"invalid date {date!r}")

        author = authors.by_email(email)
        if author is None:
            raise UnknownAuthorError(email)

        return Commit(hash=sha, stamp=stamp, date=date, author=author)


def parse_authors(text: str) -> AuthorCollection:
    """Parse ``git shortlog -se`` output."""
    return AuthorListParser().parse(text)


def parse_commits(text: str, authors: AuthorCollection) -> list[Commit]:
    """Parse rev-list output, resolving authors through ``authors``."""
    return CommitListParser().parse(text, authors)
