"""
Google OAuth - Stateless authentication
A fresh flow is built for every call; tokens go straight back to the caller.
"""
import logging
import os
from datetime import timezone
from typing import Dict, Any, List, Optional, Union

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow

from app.config import Settings
from app.schemas.google import TokenSet

logger = logging.getLogger(__name__)

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"

# Users may untick scopes on the consent screen; accept whatever Google grants
os.environ.setdefault("OAUTHLIB_RELAX_TOKEN_SCOPE", "1")


def _get_client_config(settings: Settings) -> Dict[str, Any]:
    """Google OAuth client configuration in client_secrets format"""
    return {
        "web": {
            "client_id": settings.client_id,
            "client_secret": settings.client_secret,
            "auth_uri": AUTH_URI,
            "token_uri": TOKEN_URI,
            "redirect_uris": [settings.redirect_uri],
        }
    }


def build_flow(settings: Settings) -> Flow:
    """Build an OAuth flow for the configured web client"""
    return Flow.from_client_config(
        _get_client_config(settings),
        scopes=settings.scopes,
        redirect_uri=settings.redirect_uri,
        autogenerate_code_verifier=False,
    )


def get_auth_url(settings: Settings) -> str:
    """Generate the consent URL requesting offline access to the configured scopes"""
    flow = build_flow(settings)
    authorization_url, _ = flow.authorization_url(access_type="offline")
    return authorization_url


def _scope_list(scope: Union[str, List[str], None]) -> Optional[List[str]]:
    if scope is None:
        return None
    if isinstance(scope, str):
        return scope.split()
    return list(scope)


def credentials_to_token_set(
    credentials: Credentials,
    granted_scopes: Union[str, List[str], None] = None
) -> TokenSet:
    # google-auth keeps expiry as naive UTC
    expiry = credentials.expiry
    if expiry is not None and expiry.tzinfo is None:
        expiry = expiry.replace(tzinfo=timezone.utc)

    scopes = _scope_list(granted_scopes)
    if scopes is None:
        scopes = list(credentials.scopes or [])

    return TokenSet(
        access_token=credentials.token,
        refresh_token=credentials.refresh_token,
        expiry=expiry,
        scopes=scopes,
        id_token=getattr(credentials, "id_token", None),
    )


def exchange_code_for_tokens(settings: Settings, code: str) -> TokenSet:
    """
    Exchange an authorization code for tokens.

    Scopes in the result are the ones Google granted, which can be fewer
    than requested. Provider errors are not caught here; the caller decides
    how to surface them.
    """
    flow = build_flow(settings)
    logger.info("Exchanging authorization code for tokens")
    token = flow.fetch_token(code=code)
    return credentials_to_token_set(flow.credentials, granted_scopes=token.get("scope"))
