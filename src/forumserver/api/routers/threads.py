from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from forumserver.api import deps
from forumserver.core.errors import InternalServiceError, InvalidPageError
from forumserver.schemas.content import (
    Content,
    Contents,
    Response,
    SearchRequest,
    ThreadCreateRequest,
)
from forumserver.services.content import ContentService

router = APIRouter(prefix="/threads", tags=["threads"])


@router.post("/", response_model=Response, status_code=status.HTTP_201_CREATED,
             summary="Create a thread",
             description="Create a thread in a container. A non-empty `text` is stored as its first message.")
async def create_thread_route(
    payload: ThreadCreateRequest,
    service: ContentService = Depends(deps.get_content_service),
):
    try:
        thread_id = await service.create_thread(
            payload.container_id, payload.user_id, payload.title, payload.text
        )
    except InternalServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return Response(success=True, id=thread_id)


@router.get("/{thread_id}", response_model=Content, summary="Get a thread")
async def get_thread_route(thread_id: deps.PathId, service: ContentService = Depends(deps.get_content_service)):
    try:
        return await service.get_thread(thread_id)
    except InternalServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@router.get("/{thread_id}/messages", response_model=Contents,
            summary="List messages in a thread",
            description="Oldest first. `total` counts every message matching the filter.")
async def list_messages_in_thread_route(
    thread_id: deps.PathId,
    search: Annotated[SearchRequest, Query()],
    service: ContentService = Depends(deps.get_content_service),
):
    try:
        messages, total = await service.get_messages(thread_id, search.filter, search.start, search.end)
    except InvalidPageError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except InternalServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return Contents(list=messages, total=total)


@router.delete("/{thread_id}", response_model=Response, summary="Delete a thread",
               description="Unknown ids are reported as deleted. Messages of the thread are kept.")
async def delete_thread_route(thread_id: deps.PathId, service: ContentService = Depends(deps.get_content_service)):
    try:
        success = await service.delete_thread(thread_id)
    except InternalServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return Response(success=success)
