"""
Calendar Relay API - Stateless Google OAuth + Calendar relay

Architecture:
- Stateless: no stored tokens, the caller keeps what the callback returns
- Per-request credentials: every provider call builds its own client
- Read-only: events are fetched for a single bounded window

Flow:
1. GET /auth/google → consent URL
2. GET /auth/google/callback?code= → token set
3. GET /events?accessToken= → events from today to end of year
"""
import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.config import Settings
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI app around a single settings instance"""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Calendar Relay API",
        version=VERSION,
        description="Google OAuth code exchange and read-only calendar event relay",
    )
    app.state.settings = settings

    # CORS middleware - allow all origins unless narrowed by CORS_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app


def run() -> None:
    """Console entry point: load .env, configure logging and serve"""
    import uvicorn

    load_dotenv()
    settings = Settings()
    configure_logging(settings.log_level)

    app = create_app(settings)
    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
