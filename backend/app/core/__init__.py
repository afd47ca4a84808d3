"""Core utilities"""
from .datetime_utils import local_now, ensure_local, to_rfc3339_utc
from .logging import configure_logging

__all__ = [
    "local_now",
    "ensure_local",
    "to_rfc3339_utc",
    "configure_logging",
]
