from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import DateTime, Text
from forumserver.db.session import Base
from forumserver.models.base import Id, utcnow

class Thread(Base):
    """forum thread, owned by an external container (forum, category...)"""
    __tablename__ = "thread"
    id: Mapped[int] = mapped_column(Id, primary_key=True, autoincrement=True)
    container_id: Mapped[int] = mapped_column(Id, nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(Id, nullable=False)
    title: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    # soft delete marker; messages are left untouched when a thread goes away
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, index=True)
