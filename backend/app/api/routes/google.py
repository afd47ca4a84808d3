"""
Google OAuth endpoints
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from app.api.deps import get_settings
from app.config import Settings
from app.schemas.google import GoogleAuthURL, GoogleCallbackResponse
from app.services.google import get_auth_url, exchange_code_for_tokens

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_CODE_MESSAGE = "Authorization code is missing"
SIGN_IN_FAILED_MESSAGE = "Failed to sign in with Google"


@router.get("", response_model=GoogleAuthURL)
def google_auth_url_endpoint(settings: Settings = Depends(get_settings)):
    """Get the Google OAuth consent URL (offline access, read-only calendar)"""
    return GoogleAuthURL(auth_url=get_auth_url(settings))


@router.get(
    "/callback",
    response_model=GoogleCallbackResponse,
    responses={400: {"description": MISSING_CODE_MESSAGE}, 500: {"description": SIGN_IN_FAILED_MESSAGE}},
)
def google_auth_callback(
    code: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
):
    """
    Handle Google OAuth callback.
    Exchanges the code for tokens and hands them back to the caller.
    """
    if not code:
        return PlainTextResponse(MISSING_CODE_MESSAGE, status_code=400)

    try:
        tokens = exchange_code_for_tokens(settings, code)
    except Exception:
        logger.exception("Error during sign-in")
        return PlainTextResponse(SIGN_IN_FAILED_MESSAGE, status_code=500)

    return GoogleCallbackResponse(success=True, tokens=tokens)
