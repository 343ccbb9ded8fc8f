"""Centralized FastAPI dependency definitions for the API layer.

Routers should import dependencies from here instead of directly from
their underlying implementation modules. This provides:

* A stable import surface (refactors in lower layers don't ripple up)
* Easier test overrides via ``app.dependency_overrides[deps.get_content_service]``
* A single location to add cross-cutting concerns around dependencies later.
"""

from typing import Annotated

from fastapi import Path, Request

from forumserver.db.session import get_db
from forumserver.models.base import INT64_MAX
from forumserver.services.content import ContentService

__all__ = ["get_db", "get_content_service", "PathId"]

# thread / message / container ids taken from the URL
PathId = Annotated[int, Path(ge=0, le=INT64_MAX)]


def get_content_service(request: Request) -> ContentService:
    """Return the service instance built during application startup."""
    return request.app.state.content_service
