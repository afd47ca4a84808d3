"""
Google Services - Stateless OAuth and Calendar operations
All methods accept credentials as parameter - no stored tokens
"""
from .auth import (
    build_flow,
    get_auth_url,
    exchange_code_for_tokens,
)
from .calendar import event_window, list_events

__all__ = [
    "build_flow",
    "get_auth_url",
    "exchange_code_for_tokens",
    "event_window",
    "list_events",
]
