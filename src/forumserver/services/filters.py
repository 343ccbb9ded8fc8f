"""Filter and page-bound normalization for the listing operations.

Pure functions only: nothing here touches the database.
"""
from __future__ import annotations

from forumserver.core.errors import InvalidPageError
from forumserver.models.base import INT64_MAX

__all__ = ["ANY_RUN", "LIKE_ANY", "build_like_filter", "page_bounds"]

# caller-facing "any run of characters" marker and its SQL LIKE counterpart
ANY_RUN = ".*"
LIKE_ANY = "%"


def build_like_filter(filter: str) -> str | None:
    """Turn a user filter into a LIKE pattern.

    ``""`` yields ``None`` (no text predicate at all). Otherwise every ``.*``
    becomes ``%`` and the pattern is wrapped in ``%`` on each side that is not
    already anchored by one. ``"abc"`` therefore means "contains abc", and
    ``"%abc%"`` is kept as written. A trailing ``.*`` does not anchor the start:
    ``"abc.*"`` still gets a leading ``%``.

    >>> build_like_filter("abc")
    '%abc%'
    >>> build_like_filter("abc.*")
    '%abc%'
    """
    if not filter:
        return None
    pattern = filter.replace(ANY_RUN, LIKE_ANY)
    if not pattern.startswith(LIKE_ANY):
        pattern = LIKE_ANY + pattern
    if not pattern.endswith(LIKE_ANY):
        pattern = pattern + LIKE_ANY
    return pattern


def page_bounds(start: int, end: int) -> tuple[int, int]:
    """Convert a half-open ``[start, end)`` page into ``(offset, limit)``.

    The limit is capped at the largest bindable LIMIT, so an ``end`` such as
    ``2**64 - 1`` reads as "everything from ``start`` on".
    """
    if start < 0 or end < start:
        raise InvalidPageError(start, end)
    return start, min(end - start, INT64_MAX)
