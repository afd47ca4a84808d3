"""
Main API Router - Combines all route modules
"""
from fastapi import APIRouter

from .routes import events, google, health

# Create main router
api_router = APIRouter()

# Include all route modules
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(google.router, prefix="/auth/google", tags=["Google"])
api_router.include_router(events.router, tags=["Events"])
