"""Liveness endpoint that also checks the database is reachable."""

import logging
import sqlite3

from fastapi import APIRouter, HTTPException, Request, status

from social_media_api.app.core.db import get_connection


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health(request: Request) -> dict:
    try:
        conn = get_connection(request.app.state.database_path)
        try:
            conn.execute("SELECT 1")
        finally:
            conn.close()
    except sqlite3.Error as exc:
        logger.error("Database unavailable: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="database unavailable"
        )
    return {"status": "ok"}
