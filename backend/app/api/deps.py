"""
Shared route dependencies
"""
from fastapi import Request

from app.config import Settings


def get_settings(request: Request) -> Settings:
    """Settings built once at startup and attached to the app"""
    return request.app.state.settings
