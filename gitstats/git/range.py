"""Commit range resolution."""

from typing import Optional

from gitstats.config import DEFAULT_REVISION


def resolve_commit_range(first: Optional[str] = None, last: Optional[str] = None) -> str:
    """Build a git range expression from optional boundaries.

    ``first`` is exclusive and ``last`` inclusive, as in ``first..last``.
    Neither value is checked against the repository.

    Args:
        first: Commit the range starts after
        last: Commit the range ends at (default: HEAD)

    Returns:
        ``HEAD``, ``last``, ``first..HEAD`` or ``first..last``
    """
    if not first:
        return last if last else DEFAULT_REVISION
    return f"{first}..{last if last else DEFAULT_REVISION}"
