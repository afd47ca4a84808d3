"""
Calendar events endpoint
"""
import logging
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from app.services.google import list_events

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_TOKEN_MESSAGE = "Access token is required"
LOAD_FAILED_MESSAGE = "Failed to load calendar events"


@router.get(
    "/events",
    response_model=List[Dict[str, Any]],
    responses={400: {"description": MISSING_TOKEN_MESSAGE}, 500: {"description": LOAD_FAILED_MESSAGE}},
)
def events_endpoint(access_token: Optional[str] = Query(None, alias="accessToken")):
    """
    List primary-calendar events from today through the end of the year.
    The caller's access token is used for this request only.
    """
    if not access_token:
        return PlainTextResponse(MISSING_TOKEN_MESSAGE, status_code=400)

    try:
        return list_events(access_token)
    except Exception:
        logger.exception("Error loading calendar events")
        return PlainTextResponse(LOAD_FAILED_MESSAGE, status_code=500)
