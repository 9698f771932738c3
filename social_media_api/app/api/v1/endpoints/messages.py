"""
Message endpoints for API v1.

Looking up or deleting an unknown message is not an error: both
answer 200 with a ``null`` body.  Only posting and updating can fail,
with 400.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from social_media_api.app.api.deps import RowId, empty_response, get_message_service
from social_media_api.app.schemas.message import Message, MessageTextUpdate
from social_media_api.app.services.message_service import MessageService


router = APIRouter()


@router.post("", response_model=Message)
async def post_message(
    message: Message,
    service: MessageService = Depends(get_message_service),
) -> Union[Message, JSONResponse]:
    """Create a message; 400 if the text or the author is invalid."""
    result = await service.post_message(message)
    if result.failed:
        return empty_response(status.HTTP_400_BAD_REQUEST)
    return result.value


@router.get("", response_model=List[Message])
async def list_messages(
    service: MessageService = Depends(get_message_service),
) -> List[Message]:
    return await service.get_all_messages()


@router.get("/{message_id}", response_model=Optional[Message])
async def get_message(
    message_id: RowId,
    service: MessageService = Depends(get_message_service),
) -> Optional[Message]:
    return await service.get_message(message_id)


@router.delete("/{message_id}", response_model=Optional[int])
async def delete_message(
    message_id: RowId,
    service: MessageService = Depends(get_message_service),
) -> Optional[int]:
    """Delete a message; the body is ``1`` if one was removed, else ``null``."""
    deleted = await service.delete_message(message_id)
    return 1 if deleted is not None else None


@router.patch("/{message_id}", response_model=int)
async def update_message(
    message_id: RowId,
    update: MessageTextUpdate,
    service: MessageService = Depends(get_message_service),
) -> Union[int, JSONResponse]:
    """Replace the text of a message; body ``1`` on success, 400 otherwise."""
    result = await service.update_message_text(message_id, update.message_text)
    if result.failed:
        return empty_response(status.HTTP_400_BAD_REQUEST)
    return result.value
