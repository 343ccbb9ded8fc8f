from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from forumserver.api import deps
from forumserver.core.errors import InternalServiceError, InvalidPageError
from forumserver.schemas.content import Contents, SearchRequest
from forumserver.services.content import ContentService

router = APIRouter(prefix="/containers", tags=["threads"])


@router.get("/{container_id}/threads", response_model=Contents,
            summary="List threads in a container",
            description="Newest first. `total` counts every thread matching the filter.")
async def list_threads_route(
    container_id: deps.PathId,
    search: Annotated[SearchRequest, Query()],
    service: ContentService = Depends(deps.get_content_service),
):
    try:
        threads, total = await service.get_threads(container_id, search.filter, search.start, search.end)
    except InvalidPageError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except InternalServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return Contents(list=threads, total=total)
