"""Repository helpers for the Message model.

Mirrors ``forumserver.repositories.thread`` with the thread as scope and the
message text as the filtered column. Pages are read oldest first.
"""

from typing import Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, update

from forumserver.db.errors import translate_store_errors
from forumserver.core.errors import RecordNotFoundError
from forumserver.models.base import utcnow
from forumserver.models.message import Message

__all__ = [
    "create",
    "get_by_id",
    "count",
    "find",
    "delete_by_id",
]


def _scope(thread_id: int, pattern: str | None) -> list:
    clauses = [Message.thread_id == thread_id, Message.deleted_at.is_(None)]
    if pattern is not None:
        clauses.append(Message.text.like(pattern))
    return clauses


async def create(session: AsyncSession, *, thread_id: int, user_id: int, text: str = "") -> Message:
    """Create a new Message.

    Parameters:
        session: active AsyncSession.
        thread_id: owning thread id (must exist or hit FK constraint on flush).
        user_id: author reference.
        text: message body.

    Returns the persisted Message (flushed, not committed).
    """
    message = Message(thread_id=thread_id, user_id=user_id, text=text)
    session.add(message)
    with translate_store_errors():
        await session.flush()
    return message


async def get_by_id(session: AsyncSession, message_id: int) -> Message:
    stmt = select(Message).where(Message.id == message_id, Message.deleted_at.is_(None))
    with translate_store_errors():
        res = await session.execute(stmt)
        message = res.scalar_one_or_none()
    if message is None:
        raise RecordNotFoundError("message", message_id)
    return message


async def count(session: AsyncSession, thread_id: int, pattern: str | None = None) -> int:
    stmt = select(func.count()).select_from(Message).where(*_scope(thread_id, pattern))
    with translate_store_errors():
        res = await session.execute(stmt)
        return int(res.scalar_one())


async def find(
    session: AsyncSession,
    thread_id: int,
    pattern: str | None = None,
    *,
    offset: int,
    limit: int,
) -> Sequence[Message]:
    stmt = (
        select(Message)
        .where(*_scope(thread_id, pattern))
        .order_by(Message.created_at.asc(), Message.id.asc())
        .offset(offset)
        .limit(limit)
    )
    with translate_store_errors():
        res = await session.execute(stmt)
        return list(res.scalars().all())


async def delete_by_id(session: AsyncSession, message_id: int) -> int:
    stmt = (
        update(Message)
        .where(Message.id == message_id, Message.deleted_at.is_(None))
        .values(deleted_at=utcnow())
    )
    with translate_store_errors():
        res = await session.execute(stmt)
    return res.rowcount or 0
