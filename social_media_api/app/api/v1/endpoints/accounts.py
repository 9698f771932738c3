"""
Account endpoints for API v1.

Registration and login return the stored account record itself; there
are no tokens or sessions.  Failures carry a ``null`` body and are
distinguished by status code only.
"""

from typing import List, Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from social_media_api.app.api.deps import (
    RowId,
    empty_response,
    get_account_service,
    get_message_service,
)
from social_media_api.app.core.errors import ErrorKind
from social_media_api.app.schemas.account import Account
from social_media_api.app.schemas.message import Message
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


router = APIRouter()

REGISTER_ERROR_STATUS = {
    ErrorKind.DUPLICATE_USERNAME: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_ACCOUNT_DETAILS: status.HTTP_400_BAD_REQUEST,
}


@router.post("/register", response_model=Account)
async def register(
    account: Account,
    service: AccountService = Depends(get_account_service),
) -> Union[Account, JSONResponse]:
    """Register a new account.

    409 if the username is taken, 400 if the username is blank or the
    password shorter than four characters.
    """
    result = await service.register(account)
    if result.failed:
        return empty_response(REGISTER_ERROR_STATUS[result.error])
    return result.value


@router.post("/login", response_model=Account)
async def login(
    account: Account,
    service: AccountService = Depends(get_account_service),
) -> Union[Account, JSONResponse]:
    """Return the account matching the given username and password, else 401."""
    result = await service.login(account)
    if result.failed:
        return empty_response(status.HTTP_401_UNAUTHORIZED)
    return result.value


@router.get("/accounts/{account_id}/messages", response_model=List[Message])
async def list_account_messages(
    account_id: RowId,
    service: MessageService = Depends(get_message_service),
) -> List[Message]:
    """List the messages posted by an account; empty for unknown accounts."""
    return await service.get_messages_by_account(account_id)
