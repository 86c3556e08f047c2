"""Data models for git history records."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True)
class Author:
    """A commit author, identified by email."""

    name: str
    email: str


@dataclass(frozen=True)
class Commit:
    """Represents a parsed rev-list entry."""

    hash: str
    stamp: int
    date: datetime
    author: Author


class AuthorCollection:
    """Ordered set of authors keyed by email.

    Iteration follows first-seen order. Adding an author whose email is
    already present keeps the existing entry.
    """

    def __init__(self, authors: Iterable[Author] = ()):
        self._by_email: dict[str, Author] = {}
        for author in authors:
            self.add(author)

    def add(self, author: Author) -> Author:
        """Add an author unless its email is already known.

        Returns:
            The author stored under that email
        """
        return self._by_email.setdefault(author.email, author)

    def by_email(self, email: str) -> Optional[Author]:
        """Look up an author by exact email, or None if absent."""
        return self._by_email.get(email)

    def __iter__(self) -> Iterator[Author]:
        return iter(self._by_email.values())

    def __len__(self) -> int:
        return len(self._by_email)

    def __contains__(self, item) -> bool:
        if isinstance(item, Author):
            return self._by_email.get(item.email) == item
        return item in self._by_email

    def __eq__(self, other) -> bool:
        if isinstance(other, AuthorCollection):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"AuthorCollection({list(self)!r})"
