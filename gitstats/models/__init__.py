"""Data models for gitstats."""

from gitstats.models.dataclasses import Author, AuthorCollection, Commit

__all__ = ["Author", "AuthorCollection", "Commit"]
