from fastapi import APIRouter, Depends, HTTPException, status

from forumserver.api import deps
from forumserver.core.errors import InternalServiceError
from forumserver.schemas.content import Content, MessageCreateRequest, Response
from forumserver.services.content import ContentService

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("/", response_model=Response, status_code=status.HTTP_201_CREATED,
             summary="Create a message")
async def create_message_route(
    payload: MessageCreateRequest,
    service: ContentService = Depends(deps.get_content_service),
):
    try:
        # an unknown thread id is rejected by the foreign key, not pre-checked
        message_id = await service.create_message(payload.thread_id, payload.user_id, payload.text)
    except InternalServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return Response(success=True, id=message_id)


@router.get("/{message_id}", response_model=Content, summary="Get a message")
async def get_message_route(message_id: deps.PathId, service: ContentService = Depends(deps.get_content_service)):
    try:
        return await service.get_message(message_id)
    except InternalServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@router.delete("/{message_id}", response_model=Response, summary="Delete a message")
async def delete_message_route(message_id: deps.PathId, service: ContentService = Depends(deps.get_content_service)):
    try:
        success = await service.delete_message(message_id)
    except InternalServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return Response(success=success)
