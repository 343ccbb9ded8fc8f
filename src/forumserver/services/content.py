"""Forum content service.

Translates create / list / delete requests into repository calls and converts
persisted threads and messages into :class:`Content` records.

Every storage failure is logged with its store error kind and then collapsed
into :class:`InternalServiceError`; callers never see the underlying cause.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forumserver.core.config import get_settings
from forumserver.core.errors import StoreError, collapse_store_error
from forumserver.db.session import ensure_schema
from forumserver.models.message import Message
from forumserver.models.thread import Thread
from forumserver.repositories import message as message_repo
from forumserver.repositories import thread as thread_repo
from forumserver.schemas.content import Content
from forumserver.services.filters import build_like_filter, page_bounds

__all__ = ["ContentService", "to_epoch_seconds", "thread_to_content", "message_to_content"]

logger = logging.getLogger(__name__)

DB_ACCESS_MSG = "Failed to access database"

T = TypeVar("T")


def to_epoch_seconds(value: datetime) -> int:
    # SQLite hands back naive datetimes; they were stored as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def thread_to_content(thread: Thread) -> Content:
    return Content(
        id=thread.id,
        created_at=to_epoch_seconds(thread.created_at),
        user_id=thread.user_id,
        text=thread.title,
    )


def message_to_content(message: Message) -> Content:
    return Content(
        id=message.id,
        created_at=to_epoch_seconds(message.created_at),
        user_id=message.user_id,
        text=message.text,
    )


class ContentService:
    """Six stateless content operations over threads and messages.

    Each call opens its own session from ``sessions``; nothing is shared
    between calls except the engine's connection pool.
    """

    def __init__(self, sessions: async_sessionmaker[AsyncSession]):
        self._sessions = sessions

    @classmethod
    async def start(
        cls,
        engine: AsyncEngine,
        sessions: async_sessionmaker[AsyncSession],
        *,
        auto_migrate: bool | None = None,
    ) -> "ContentService":
        """Build the service, creating the schema first unless disabled."""
        if auto_migrate is None:
            auto_migrate = get_settings().auto_migrate
        if auto_migrate:
            try:
                await ensure_schema(engine)
            except Exception:
                logger.exception("Schema setup failed")
                raise
        return cls(sessions)

    async def _run(self, operation: str, work: Callable[[AsyncSession], Awaitable[T]]) -> T:
        async with self._sessions() as session:
            try:
                return await work(session)
            except StoreError as exc:
                logger.error(
                    DB_ACCESS_MSG,
                    extra={"operation": operation, "store_error": exc.kind.value, "error": repr(exc)},
                )
                raise collapse_store_error(exc) from exc

    async def create_thread(self, container_id: int, user_id: int, title: str, text: str = "") -> int:
        """Create a thread, plus its first message when ``text`` is not empty.

        Both rows are written in one transaction: either both exist afterwards
        or neither does.
        """
        async def work(session: AsyncSession) -> int:
            async with session.begin():
                thread = await thread_repo.create(
                    session, container_id=container_id, user_id=user_id, title=title
                )
                if text:
                    await message_repo.create(session, thread_id=thread.id, user_id=user_id, text=text)
                return thread.id

        return await self._run("create_thread", work)

    async def create_message(self, thread_id: int, user_id: int, text: str) -> int:
        async def work(session: AsyncSession) -> int:
            async with session.begin():
                message = await message_repo.create(
                    session, thread_id=thread_id, user_id=user_id, text=text
                )
                return message.id

        return await self._run("create_message", work)

    async def get_thread(self, thread_id: int) -> Content:
        async def work(session: AsyncSession) -> Content:
            return thread_to_content(await thread_repo.get_by_id(session, thread_id))

        return await self._run("get_thread", work)

    async def get_message(self, message_id: int) -> Content:
        async def work(session: AsyncSession) -> Content:
            return message_to_content(await message_repo.get_by_id(session, message_id))

        return await self._run("get_message", work)

    async def get_threads(
        self, container_id: int, filter: str, start: int, end: int
    ) -> tuple[list[Content], int]:
        """Return the ``[start, end)`` page of a container's threads, newest first, and the filtered total."""
        offset, limit = page_bounds(start, end)
        pattern = build_like_filter(filter)

        async def work(session: AsyncSession) -> tuple[list[Content], int]:
            total = await thread_repo.count(session, container_id, pattern)
            if total == 0:
                return [], 0
            threads = await thread_repo.find(session, container_id, pattern, offset=offset, limit=limit)
            return [thread_to_content(t) for t in threads], total

        return await self._run("get_threads", work)

    async def get_messages(
        self, thread_id: int, filter: str, start: int, end: int
    ) -> tuple[list[Content], int]:
        """Return the ``[start, end)`` page of a thread's messages, oldest first, and the filtered total."""
        offset, limit = page_bounds(start, end)
        pattern = build_like_filter(filter)

        async def work(session: AsyncSession) -> tuple[list[Content], int]:
            total = await message_repo.count(session, thread_id, pattern)
            if total == 0:
                return [], 0
            messages = await message_repo.find(session, thread_id, pattern, offset=offset, limit=limit)
            return [message_to_content(m) for m in messages], total

        return await self._run("get_messages", work)

    async def delete_thread(self, thread_id: int) -> bool:
        """Soft delete a thread. Unknown ids succeed too; messages are kept."""
        async def work(session: AsyncSession) -> bool:
            async with session.begin():
                await thread_repo.delete_by_id(session, thread_id)
            return True

        return await self._run("delete_thread", work)

    async def delete_message(self, message_id: int) -> bool:
        async def work(session: AsyncSession) -> bool:
            async with session.begin():
                await message_repo.delete_by_id(session, message_id)
            return True

        return await self._run("delete_message", work)
