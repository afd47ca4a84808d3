"""
Google-related schemas
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class GoogleAuthURL(BaseModel):
    """OAuth authorization URL response"""
    model_config = ConfigDict(populate_by_name=True)

    auth_url: str = Field(alias="authUrl")


class TokenSet(BaseModel):
    """Tokens issued by Google for an authorization code (never stored server-side)"""
    access_token: str
    refresh_token: Optional[str] = None
    expiry: Optional[datetime] = None
    token_type: str = "Bearer"
    scopes: List[str] = []
    id_token: Optional[str] = None


class GoogleCallbackResponse(BaseModel):
    """Successful OAuth callback"""
    success: bool = True
    tokens: TokenSet
