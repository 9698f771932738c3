"""
Main entrypoint for the Social Media API.

This module assembles the FastAPI application.  ``create_app`` sets up
logging, builds one pair of repositories against the configured SQLite
file, wires both services against that same pair and includes the
versioned router.  The app is instantiated at module import time as
``app`` so it can be served with uvicorn, e.g.::

    uvicorn social_media_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.deps import empty_response
from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging
from .core.middleware import log_requests
from .repositories import AccountRepository, MessageRepository
from .services.account_service import AccountService
from .services.message_service import MessageService


logger = logging.getLogger(__name__)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed bodies and path parameters with a bare 400."""
    logger.info("Rejected malformed request to %s: %d error(s)", request.url.path, len(exc.errors()))
    return empty_response(status.HTTP_400_BAD_REQUEST)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the process-wide ``settings``.

    Returns
    -------
    FastAPI
        A configured application.  The database schema is created or
        migrated when the application starts up.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings)

    db_path = get_database_path(app_settings.database_url)
    accounts = AccountRepository(db_path)
    messages = MessageRepository(db_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        init_db(db_path)
        logger.info("Database ready at %s", db_path)
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.database_path = db_path
    app.state.account_service = AccountService(accounts)
    app.state.message_service = MessageService(messages, accounts)

    app.middleware("http")(log_requests)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(v1_router, prefix=app_settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
