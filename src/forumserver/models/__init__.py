# Import every model so Base.metadata is complete for create_all / Alembic.
from .thread import Thread
from .message import Message

__all__ = ["Thread", "Message"]
