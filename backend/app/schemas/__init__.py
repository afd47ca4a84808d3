"""Pydantic schemas for API models"""
from .google import GoogleAuthURL, GoogleCallbackResponse, TokenSet

__all__ = [
    "GoogleAuthURL",
    "GoogleCallbackResponse",
    "TokenSet",
]
