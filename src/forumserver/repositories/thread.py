"""Repository helpers for the Thread model.

Every read skips soft-deleted rows. SQLAlchemy failures are re-raised as
``forumserver.core.errors.StoreError`` subclasses.
"""

from typing import Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, update

from forumserver.db.errors import translate_store_errors
from forumserver.core.errors import RecordNotFoundError
from forumserver.models.base import utcnow
from forumserver.models.thread import Thread

__all__ = [
    "create",
    "get_by_id",
    "count",
    "find",
    "delete_by_id",
]


def _scope(container_id: int, pattern: str | None) -> list:
    clauses = [Thread.container_id == container_id, Thread.deleted_at.is_(None)]
    if pattern is not None:
        clauses.append(Thread.title.like(pattern))
    return clauses


async def create(session: AsyncSession, *, container_id: int, user_id: int, title: str = "") -> Thread:
    """Insert a Thread and flush so id and created_at are assigned (not committed)."""
    thread = Thread(container_id=container_id, user_id=user_id, title=title)
    session.add(thread)
    with translate_store_errors():
        await session.flush()
    return thread


async def get_by_id(session: AsyncSession, thread_id: int) -> Thread:
    """Return a live Thread by id or raise ``RecordNotFoundError``."""
    stmt = select(Thread).where(Thread.id == thread_id, Thread.deleted_at.is_(None))
    with translate_store_errors():
        res = await session.execute(stmt)
        thread = res.scalar_one_or_none()
    if thread is None:
        raise RecordNotFoundError("thread", thread_id)
    return thread


async def count(session: AsyncSession, container_id: int, pattern: str | None = None) -> int:
    """Count live threads of a container, optionally restricted by a LIKE pattern on the title."""
    stmt = select(func.count()).select_from(Thread).where(*_scope(container_id, pattern))
    with translate_store_errors():
        res = await session.execute(stmt)
        return int(res.scalar_one())


async def find(
    session: AsyncSession,
    container_id: int,
    pattern: str | None = None,
    *,
    offset: int,
    limit: int,
) -> Sequence[Thread]:
    """Return one page of a container's threads, newest first.

    Rows sharing a timestamp are ordered by id so pages never overlap.
    """
    stmt = (
        select(Thread)
        .where(*_scope(container_id, pattern))
        .order_by(Thread.created_at.desc(), Thread.id.desc())
        .offset(offset)
        .limit(limit)
    )
    with translate_store_errors():
        res = await session.execute(stmt)
        return list(res.scalars().all())


async def delete_by_id(session: AsyncSession, thread_id: int) -> int:
    """Soft delete a thread; returns the number of rows marked (0 or 1).

    The thread's messages are not touched.
    """
    stmt = (
        update(Thread)
        .where(Thread.id == thread_id, Thread.deleted_at.is_(None))
        .values(deleted_at=utcnow())
    )
    with translate_store_errors():
        res = await session.execute(stmt)
    return res.rowcount or 0
