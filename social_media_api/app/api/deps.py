"""
FastAPI dependencies and response helpers shared by the endpoints.

``create_app`` stores exactly one instance of each service on
``app.state``; the dependencies below return those instances so every
request works against the same repositories.
"""

from typing import Annotated

from fastapi import Path, Request
from fastapi.responses import JSONResponse

from social_media_api.app.core.db import INTEGER_MAX, INTEGER_MIN
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


# Path ids outside the INTEGER range are rejected as malformed requests.
RowId = Annotated[int, Path(ge=INTEGER_MIN, le=INTEGER_MAX)]


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service


def get_message_service(request: Request) -> MessageService:
    return request.app.state.message_service


def empty_response(status_code: int) -> JSONResponse:
    """Error response with a ``null`` body; no internal detail is exposed."""
    return JSONResponse(status_code=status_code, content=None)
